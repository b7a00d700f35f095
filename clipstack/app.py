"""The clipboard history picker window and its command-line entry point."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Callable
from pathlib import Path

from clipstack import storage
from clipstack.clipboard import ClipboardMonitor
from clipstack.config import Config
from clipstack.fuzzy import search
from clipstack.history import ClipboardEntry, History
from clipstack.hotkey import DoubleTapDetector, SharedVisibility

HEADER_HEIGHT = 56.0
ROW_HEIGHT = 24.0
MIN_HEIGHT = 80.0
MAX_HEIGHT = 500.0
DEFAULT_MONITOR = (1920.0, 1080.0)
PREVIEW_CHARS = 80
CURSOR_OFFSET_X = 200.0
CURSOR_OFFSET_Y = 50.0
REFRESH_MS = 100
WINDOW_TITLE = "Clipboard History"
SEARCH_HINT = "Search clipboard history..."
EMPTY_MESSAGE = "No clipboard history yet. Copy some text!"


def window_position(
    cursor: tuple[float, float],
    window_width: float,
    window_height: float,
    monitor: tuple[float, float] | None = None,
) -> tuple[float, float]:
    """Place the window near the cursor, flipping above or shifting left to stay on screen."""
    cx, cy = cursor
    mon_w, mon_h = monitor if monitor is not None else DEFAULT_MONITOR
    if cy - CURSOR_OFFSET_Y + window_height > mon_h:
        y = max(cy - window_height, 0.0)
    else:
        y = cy - CURSOR_OFFSET_Y
    if cx - CURSOR_OFFSET_X + window_width > mon_w:
        x = max(mon_w - window_width, 0.0)
    else:
        x = cx - CURSOR_OFFSET_X
    return float(x), float(y)


def desired_height(result_count: int) -> float:
    """Window height that fits the given number of result rows."""
    if result_count <= 0:
        return MIN_HEIGHT
    return min(HEADER_HEIGHT + result_count * ROW_HEIGHT, MAX_HEIGHT)


def preview(content: str) -> str:
    """A single-line preview of at most 80 characters."""
    return content[:PREVIEW_CHARS].replace("\n", " ").replace("\r", " ")


class PickerState:
    """Search query, selection and choosing for the picker window."""

    def __init__(
        self,
        history: History,
        visibility: SharedVisibility,
        set_clipboard: Callable[[str], object],
        *,
        lock: threading.Lock | None = None,
    ) -> None:
        self.history = history
        self.visibility = visibility
        self._set_clipboard = set_clipboard
        self._lock = lock if lock is not None else threading.Lock()
        self.query = ""
        self.selected_index = 0

    def open(self) -> None:
        """Reset the query and selection for a fresh showing."""
        self.query = ""
        self.selected_index = 0

    def close(self) -> None:
        """Hide the picker and reset its state."""
        self.visibility.set(False)
        self.open()

    def results(self) -> list[tuple[ClipboardEntry, int]]:
        """Entries matching the query; keeps the selection within range."""
        with self._lock:
            found = search(self.query, self.history.entries)
        if found and self.selected_index >= len(found):
            self.selected_index = len(found) - 1
        return found

    def move_up(self) -> int:
        if self.selected_index > 0:
            self.selected_index -= 1
        return self.selected_index

    def move_down(self) -> int:
        if self.selected_index + 1 < len(self.results()):
            self.selected_index += 1
        return self.selected_index

    def choose(self, index: int | None = None) -> str | None:
        """Copy the chosen result to the clipboard and close; None if nothing to choose."""
        found = self.results()
        if not found:
            return None
        if index is None:
            index = self.selected_index
        if not 0 <= index < len(found):
            raise IndexError(f"result index {index} out of range")
        content = found[index][0].content
        try:
            self._set_clipboard(content)
        except Exception:
            pass
        self.close()
        return content


class _PickerWindow:
    def __init__(self, config: Config, history: History, history_file: Path | None) -> None:
        import tkinter as tk

        self._tk = tk
        self._config = config
        self._lock = threading.Lock()
        self._visibility = SharedVisibility(True)
        self._detector = DoubleTapDetector()
        self._was_visible = False
        self._focused_once = False
        self._last_height = 0.0
        self._showing_list = False

        root = self._root = tk.Tk()
        root.title(WINDOW_TITLE)
        root.attributes("-topmost", True)
        root.geometry(f"{int(config.window_width)}x{int(config.window_height)}")

        self._state = PickerState(
            history, self._visibility, self._set_clipboard, lock=self._lock
        )
        self._query = tk.StringVar(master=root)
        self._hint = tk.Label(root, text=SEARCH_HINT, anchor="w", fg="gray")
        self._hint.pack(fill="x", padx=4)
        self._entry = tk.Entry(root, textvariable=self._query)
        self._entry.pack(fill="x", padx=4, pady=(0, 4))
        self._list = tk.Listbox(root, activestyle="none", exportselection=False)
        self._empty = tk.Label(root, text=EMPTY_MESSAGE)

        self._monitor = ClipboardMonitor(
            history,
            self._read_clipboard,
            config.poll_interval_ms / 1000,
            lock=self._lock,
            save=lambda h: storage.save(h, history_file),
            on_change=self._render,
        )

        self._query.trace_add("write", self._on_query)
        self._entry.bind("<Up>", self._on_up)
        self._entry.bind("<Down>", self._on_down)
        root.bind("<Return>", self._on_return)
        root.bind("<Escape>", self._on_escape)
        root.bind("<Map>", self._on_map)
        for key in ("Control_L", "Control_R"):
            root.bind(f"<KeyPress-{key}>", self._on_ctrl_press)
            root.bind(f"<KeyRelease-{key}>", self._on_ctrl_release)
        self._list.bind("<ButtonRelease-1>", self._on_click)

    def _read_clipboard(self) -> str:
        return self._root.clipboard_get()

    def _set_clipboard(self, text: str) -> None:
        self._root.clipboard_clear()
        self._root.clipboard_append(text)

    def _has_focus(self) -> bool:
        try:
            return self._root.focus_displayof() is not None
        except KeyError:
            return True

    def _show(self) -> None:
        root = self._root
        self._focused_once = False
        root.deiconify()
        root.lift()
        root.focus_force()
        x, y = window_position(
            root.winfo_pointerxy(),
            self._config.window_width,
            root.winfo_height(),
            (root.winfo_screenwidth(), root.winfo_screenheight()),
        )
        root.geometry(f"+{int(x)}+{int(y)}")
        self._state.open()
        self._query.set("")
        self._entry.focus_set()
        self._render()

    def _hide(self) -> None:
        self._was_visible = False
        self._root.iconify()
        self._query.set("")

    def _tick(self) -> None:
        visible = self._visibility.visible
        if visible and not self._was_visible:
            self._show()
        elif not visible and self._was_visible:
            self._root.iconify()
        self._was_visible = visible
        if visible:
            if self._has_focus():
                self._focused_once = True
            elif self._focused_once:
                self._state.close()
                self._hide()
        self._root.after(REFRESH_MS, self._tick)

    def _tick_clipboard(self) -> None:
        self._monitor.poll()
        self._root.after(max(1, self._config.poll_interval_ms), self._tick_clipboard)

    def _render(self) -> None:
        results = self._state.results()
        height = desired_height(len(results))
        if abs(height - self._last_height) > 0.5:
            self._last_height = height
            self._root.geometry(f"{int(self._config.window_width)}x{int(height)}")
        self._list.delete(0, "end")
        if not results:
            if self._showing_list:
                self._list.pack_forget()
                self._showing_list = False
            self._empty.pack(pady=20)
            return
        if not self._showing_list:
            self._empty.pack_forget()
            self._list.pack(fill="both", expand=True, padx=4, pady=(0, 4))
            self._showing_list = True
        for entry, _score in results:
            self._list.insert("end", preview(entry.content))
        selected = self._state.selected_index
        self._list.selection_clear(0, "end")
        self._list.selection_set(selected)
        self._list.see(selected)

    def _on_query(self, *_args: object) -> None:
        self._state.query = self._query.get()
        self._render()

    def _on_up(self, _event: object) -> str:
        self._state.move_up()
        self._render()
        return "break"

    def _on_down(self, _event: object) -> str:
        self._state.move_down()
        self._render()
        return "break"

    def _on_return(self, _event: object) -> None:
        if self._state.choose() is not None:
            self._hide()

    def _on_click(self, event) -> None:
        if self._list.size() == 0:
            return
        if self._state.choose(self._list.nearest(event.y)) is not None:
            self._hide()

    def _on_escape(self, _event: object) -> None:
        self._state.close()
        self._hide()

    def _on_map(self, event) -> None:
        if event.widget is self._root and not self._visibility.visible:
            self._visibility.set(True)

    def _on_ctrl_press(self, _event: object) -> None:
        if self._detector.press():
            self._visibility.toggle()

    def _on_ctrl_release(self, _event: object) -> None:
        self._detector.release()

    def run(self) -> None:
        self._monitor.poll()
        self._root.after(0, self._tick)
        self._root.after(max(1, self._config.poll_interval_ms), self._tick_clipboard)
        self._root.mainloop()


def main(argv: list[str] | None = None) -> int:
    """Start the clipboard history picker."""
    parser = argparse.ArgumentParser(
        prog="clipstack", description="Searchable clipboard history picker."
    )
    parser.add_argument(
        "--history-file",
        type=Path,
        default=None,
        help="history file to use instead of the one in the configuration directory",
    )
    args = parser.parse_args(argv)

    config = Config()
    history = storage.load(config.max_size, args.history_file)
    _PickerWindow(config, history, args.history_file).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())