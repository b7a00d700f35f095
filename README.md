# clipstack

clipstack keeps a history of the text you copy and lets you put an earlier
entry back on the clipboard. A small always-on-top window lists the history
and filters it by fuzzy search as you type.

## Installation

```
pip install .
```

The picker window uses Tkinter, which ships with most Python installations.

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
clipstack
```

Options:

- `--history-file PATH`: read and write the history at `PATH` instead of the
  default location.

The window opens at start-up. While it runs:

- The clipboard is read every 500 ms. Each new, non-empty piece of text is
  recorded. Text that is already on the clipboard when the program starts is
  not recorded.
- Typing in the search field filters the history by fuzzy match, best matches
  first; an empty query lists everything, newest first. Entries are shown as
  one-line previews of at most 80 characters.
- Up and Down move the selection. Enter, or a click on an entry, puts that
  entry on the clipboard and minimises the window. Escape minimises it without
  choosing. The window also minimises when it loses focus after having had it.
- Restoring the window shows it again, near the mouse pointer, with the query
  and selection cleared. Its height follows the number of results (between 80
  and 500 pixels).
- Two presses of Ctrl within 300 ms, while the window has keyboard focus,
  toggle it. Holding Ctrl down does not count as repeated presses.

## History rules

- The most recent entry comes first.
- Copying the same text as the most recent entry is ignored.
- Copying text that is already further down moves that entry to the top with
  a fresh timestamp; it keeps its id.
- New text gets the next id. Beyond the size limit (100 by default) the oldest
  entries are dropped.

The history is saved as indented JSON after every change, by default to
`clipboard-history/history.json` in your user configuration directory (as
given by `platformdirs`). A missing or unreadable file starts an empty
history. The size limit stored in the file is the one used after loading.

## Using it as a library

```python
from clipstack import storage
from clipstack.fuzzy import search
from clipstack.history import History

history = History(max_size=100)
history.push("hello world")
history.push("goodbye world")

for entry, score in search("helo", history.entries):
    print(entry.id, entry.content, score)

path = storage.save(history)          # returns the path written
restored = storage.load(100)          # or storage.load(100, some_path)
```

The modules:

- `clipstack.history`: `History` with `push(content)` (returns whether the
  history changed), `get_by_id(entry_id)` (the entry or `None`), `entries`,
  `to_dict()` and `History.from_dict(data)`; `ClipboardEntry` with `id`,
  `content` and `created_at`, and the same `to_dict`/`from_dict` pair.
  `from_dict` raises `ValueError` on malformed data.
- `clipstack.fuzzy`: `fuzzy_match(choice, pattern)` scores `pattern` as a
  subsequence of `choice`, or returns `None` if it does not occur. Matching
  ignores case unless the pattern has an upper-case letter; consecutive runs
  and matches at word starts score higher. `search(query, entries)` returns
  `(entry, score)` pairs, best first, ties in their original order.
- `clipstack.storage`: `history_path()`, `load(max_size, path=None)` and
  `save(history, path=None)`.
- `clipstack.config`: `Config` with `max_size`, `poll_interval_ms`,
  `window_width` and `window_height`, plus `to_dict()` and
  `Config.from_dict(data)`.
- `clipstack.clipboard`: `ClipboardMonitor(history, read_text, poll_interval=0.5)`
  calls `read_text` on each `poll()`, records new text, saves the history and
  calls an optional `on_change`. `start()` and `stop()` run it in a background
  thread; it can also be used as a context manager.
- `clipstack.hotkey`: `SharedVisibility`, a thread-safe visible flag with
  `toggle()` and `set(value)`, and `DoubleTapDetector` with `press(now=None)`
  and `release()`.
- `clipstack.app`: `PickerState` (query, selection, `results()`, `move_up()`,
  `move_down()`, `choose(index=None)`), the helpers `window_position`,
  `desired_height` and `preview`, and `main`, the `clipstack` command.

## What it does not do

- There is no global hotkey: the Ctrl double tap is only seen while the
  picker window has keyboard focus.
- There is no system tray icon or menu; the window is restored and closed
  through the window manager.
- The window is minimised rather than hidden completely.
- Settings are the built-in defaults; there is no configuration file or
  option to change them.
- Only text is recorded; images and other clipboard formats are ignored.