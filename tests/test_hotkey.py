import pytest

from clipstack.hotkey import DOUBLE_TAP_WINDOW, DoubleTapDetector, SharedVisibility


def tap(detector, now):
    result = detector.press(now)
    detector.release()
    return result


def test_visibility_toggle_returns_new_value():
    flag = SharedVisibility()
    assert flag.visible is False
    assert flag.toggle() is True
    assert flag.visible is True
    assert flag.toggle() is False
    assert bool(flag) is False


def test_visibility_reports_changes():
    seen = []
    flag = SharedVisibility(True, on_change=seen.append)
    flag.toggle()
    flag.set(True)
    flag.set(True)
    flag.set(False)
    assert seen == [False, True, False]


def test_double_tap_detected():
    detector = DoubleTapDetector()
    assert tap(detector, 10.0) is False
    assert tap(detector, 10.1) is True


def test_slow_taps_not_detected():
    detector = DoubleTapDetector()
    assert tap(detector, 10.0) is False
    assert tap(detector, 10.0 + DOUBLE_TAP_WINDOW) is False


def test_key_repeat_ignored():
    detector = DoubleTapDetector()
    assert detector.press(10.0) is False
    assert detector.press(10.05) is False
    assert detector.press(10.1) is False
    detector.release()
    assert detector.press(10.2) is True


def test_triple_tap_toggles_once():
    detector = DoubleTapDetector()
    results = [tap(detector, t) for t in (10.0, 10.1, 10.2)]
    assert results == [False, True, False]


def test_default_clock_detects_quick_taps():
    detector = DoubleTapDetector()
    detector.press()
    detector.release()
    assert detector.press() is True


def test_negative_window_rejected():
    with pytest.raises(ValueError):
        DoubleTapDetector(-0.1)