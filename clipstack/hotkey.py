"""Visibility flag shared between threads and Ctrl double-tap detection."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

DOUBLE_TAP_WINDOW = 0.3


class SharedVisibility:
    """A thread-safe visible/hidden flag that reports changes."""

    def __init__(
        self,
        visible: bool = False,
        on_change: Callable[[bool], object] | None = None,
    ) -> None:
        self._visible = bool(visible)
        self._lock = threading.Lock()
        self._on_change = on_change

    @property
    def visible(self) -> bool:
        with self._lock:
            return self._visible

    def __bool__(self) -> bool:
        return self.visible

    def toggle(self) -> bool:
        """Flip the flag and return its new value."""
        with self._lock:
            self._visible = not self._visible
            value = self._visible
        if self._on_change is not None:
            self._on_change(value)
        return value

    def set(self, value: bool) -> None:
        """Set the flag; the change callback runs only if the value changes."""
        value = bool(value)
        with self._lock:
            changed = self._visible != value
            self._visible = value
        if changed and self._on_change is not None:
            self._on_change(value)


class DoubleTapDetector:
    """Detects two Ctrl presses within a short window, ignoring key repeat."""

    def __init__(self, window: float = DOUBLE_TAP_WINDOW) -> None:
        if window < 0:
            raise ValueError(f"window must not be negative, got {window}")
        self.window = window
        self._last_press: float | None = None
        self._down = False
        self._lock = threading.Lock()

    def press(self, now: float | None = None) -> bool:
        """Register a key press; return True when it completes a double tap."""
        if now is None:
            now = time.monotonic()
        with self._lock:
            if self._down:
                return False
            self._down = True
            if self._last_press is not None and now - self._last_press < self.window:
                self._last_press = None
                return True
            self._last_press = now
            return False

    def release(self) -> None:
        """Register that the key was released."""
        with self._lock:
            self._down = False