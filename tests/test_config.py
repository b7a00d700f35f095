import pytest

from clipstack.config import Config


def test_defaults():
    config = Config()
    assert config.max_size == 100
    assert config.poll_interval_ms == 500
    assert config.window_width == 400.0
    assert config.window_height == 500.0


def test_to_dict_has_all_fields():
    data = Config().to_dict()
    assert set(data) == {"max_size", "poll_interval_ms", "window_width", "window_height"}
    assert data["max_size"] == 100


def test_round_trip():
    original = Config(max_size=7, poll_interval_ms=25, window_width=320.5, window_height=240.0)
    assert Config.from_dict(original.to_dict()) == original


def test_integer_width_becomes_float():
    config = Config.from_dict(
        {"max_size": 3, "poll_interval_ms": 10, "window_width": 640, "window_height": 480}
    )
    assert config.window_width == 640
    assert isinstance(config.window_width, float)


def test_missing_field_raises():
    data = Config().to_dict()
    del data["poll_interval_ms"]
    with pytest.raises(ValueError):
        Config.from_dict(data)


@pytest.mark.parametrize(
    "key, value",
    [
        ("max_size", -1),
        ("max_size", "100"),
        ("max_size", True),
        ("poll_interval_ms", 1.5),
        ("window_width", "wide"),
    ],
)
def test_bad_field_raises(key, value):
    data = Config().to_dict()
    data[key] = value
    with pytest.raises(ValueError):
        Config.from_dict(data)


def test_non_mapping_raises():
    with pytest.raises(ValueError):
        Config.from_dict([1, 2, 3])