import pytest

from dashlink.progress import ProgressIndicator


def test_default_size_hint_is_square():
    p = ProgressIndicator()
    assert p.size_hint() == (36, 36)


def test_scale_updates_minimum_size():
    p = ProgressIndicator()
    p.scale(2)
    assert p.pen_width == 6
    assert p.ellipse_point == 32
    assert p.minimum_size == p.size_hint()


def test_start_and_stop_toggle_visibility():
    p = ProgressIndicator()
    assert p.visible is False
    p.start_animation()
    assert p.visible is True
    p.stop_animation()
    assert p.visible is False


def test_animation_starts_at_first_keyframes():
    p = ProgressIndicator()
    p.advance(0)
    assert p.angle == -90
    assert p.dash_length == pytest.approx(0.1)
    assert p.dash_offset == pytest.approx(0)


def test_animation_reaches_full_length_halfway():
    p = ProgressIndicator()
    p.advance(750)
    assert p.dash_length == pytest.approx(18)


def test_animation_loops():
    a = ProgressIndicator()
    b = ProgressIndicator()
    a.advance(400)
    b.advance(1900)
    assert (a.angle, a.dash_length, a.dash_offset) == (b.angle, pytest.approx(b.dash_length), pytest.approx(b.dash_offset))


def test_dash_pattern_scales_length():
    p = ProgressIndicator()
    p.dash_length = 36
    p.dash_offset = -36
    pattern = p.dash_pattern()
    assert pattern.on == pytest.approx(48)
    assert pattern.offset == pytest.approx(-48)
    assert pattern.off == 40