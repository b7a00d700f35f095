import json

from clipstack.history import History
from clipstack.storage import history_path, load, save


def test_save_and_load_roundtrip(tmp_path):
    path = tmp_path / "history.json"
    history = History(100)
    history.push("test entry 1")
    history.push("test entry 2")

    save(history, path)
    loaded = load(100, path)
    assert len(loaded.entries) == 2
    assert loaded.entries[0].content == "test entry 2"
    assert loaded.entries[1].content == "test entry 1"
    assert loaded.next_id == history.next_id


def test_load_missing_file_returns_empty(tmp_path):
    history = load(100, tmp_path / "absent.json")
    assert len(history.entries) == 0
    assert history.max_size == 100


def test_load_corrupted_json_returns_empty(tmp_path):
    path = tmp_path / "history.json"
    path.write_text("not valid json!!!", encoding="utf-8")
    history = load(42, path)
    assert len(history.entries) == 0
    assert history.max_size == 42


def test_load_wrong_shape_returns_empty(tmp_path):
    path = tmp_path / "history.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert len(load(10, path).entries) == 0


def test_loaded_file_keeps_its_own_max_size(tmp_path):
    path = tmp_path / "history.json"
    save(History(3), path)
    assert load(100, path).max_size == 3


def test_save_creates_parent_directories(tmp_path):
    path = tmp_path / "nested" / "deeper" / "history.json"
    history = History(10)
    history.push("ünïcode")
    written = save(history, path)
    assert written == path
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["entries"][0]["content"] == "ünïcode"
    assert "ünïcode" in path.read_text(encoding="utf-8")


def test_saved_file_is_pretty_printed(tmp_path):
    path = tmp_path / "history.json"
    save(History(10), path)
    assert "\n  " in path.read_text(encoding="utf-8")


def test_history_path_location():
    path = history_path()
    assert path.name == "history.json"
    assert path.parent.name == "clipboard-history"