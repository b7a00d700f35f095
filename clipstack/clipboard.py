"""Watching the system clipboard for new text."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable

from clipstack import storage
from clipstack.history import History

TextReader = Callable[[], str]
HistorySaver = Callable[[History], object]


class ClipboardMonitor:
    """Polls a clipboard reader and records new, non-empty text in a history.

    The first observation only sets the baseline: text that is already on the
    clipboard when monitoring begins is not recorded.
    """

    def __init__(
        self,
        history: History,
        read_text: TextReader,
        poll_interval: float = 0.5,
        *,
        lock: threading.Lock | None = None,
        save: HistorySaver | None = storage.save,
        on_change: Callable[[], object] | None = None,
        last_text: str | None = None,
    ) -> None:
        if poll_interval < 0:
            raise ValueError(f"poll_interval must not be negative, got {poll_interval}")
        self.history = history
        self.poll_interval = poll_interval
        self.lock = lock if lock is not None else threading.Lock()
        self._read_text = read_text
        self._save = save
        self._on_change = on_change
        self._last_text = last_text
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def _read(self) -> str | None:
        try:
            text = self._read_text()
        except Exception:
            return None
        return text if isinstance(text, str) else None

    def poll(self) -> bool:
        """Read the clipboard once; return whether the history changed."""
        current = self._read()
        if self._last_text is None:
            self._last_text = current or ""
            return False
        if not current or current == self._last_text:
            return False
        self._last_text = current

        with self.lock:
            changed = self.history.push(current)
            if changed and self._save is not None:
                try:
                    self._save(self.history)
                except (OSError, ValueError) as exc:
                    print(f"Failed to save history: {exc}", file=sys.stderr)
        if changed and self._on_change is not None:
            self._on_change()
        return changed

    def _run(self) -> None:
        if self._last_text is None:
            self.poll()
        while not self._stop_event.wait(self.poll_interval):
            self.poll()

    def start(self) -> None:
        """Poll in a background thread until ``stop`` is called."""
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("clipboard monitor is already running")
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run, name="clipboard-monitor", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop the background thread and wait for it to finish."""
        self._stop_event.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def __enter__(self) -> "ClipboardMonitor":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()