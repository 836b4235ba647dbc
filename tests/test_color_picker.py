import pytest

from dashlink.color_picker import Color, ColorPicker


def test_name_is_lowercase_hex():
    assert Color(255, 0, 128).name() == "#ff0080"


def test_from_name_round_trip():
    color = Color(18, 52, 86)
    assert Color.from_name(color.name()) == color


def test_from_short_name():
    assert Color.from_name("#fff") == Color(255, 255, 255)


@pytest.mark.parametrize("bad", ["ff0080", "#ff00", "#gg0000", ""])
def test_from_name_rejects_garbage(bad):
    with pytest.raises(ValueError):
        Color.from_name(bad)


def test_component_out_of_range_rejected():
    with pytest.raises(ValueError):
        Color(256, 0, 0)


def test_new_picker_shows_black():
    picker = ColorPicker()
    assert picker.text == "#000000"
    assert picker.color == Color(0, 0, 0)


def test_sliders_preview_without_committing():
    picker = ColorPicker()
    picker.set_component("red", 200)
    assert picker.hint_color == Color(200, 0, 0)
    assert picker.labels["red"] == "200"
    assert picker.text == "#000000"
    assert picker.icon_color == Color(0, 0, 0)


def test_save_commits_and_notifies():
    picker = ColorPicker()
    seen = []
    picker.color_listeners.append(seen.append)
    picker.set_component("green", 255)
    saved = picker.save()
    assert saved == Color(0, 255, 0)
    assert seen == [saved]
    assert picker.text == saved.name()


def test_set_component_clamps_and_rejects_unknown():
    picker = ColorPicker()
    assert picker.set_component("blue", 300) == 255
    assert picker.set_component("blue", -5) == 0
    with pytest.raises(ValueError):
        picker.set_component("alpha", 10)


def test_update_sets_sliders_without_notifying():
    picker = ColorPicker()
    seen = []
    picker.color_listeners.append(seen.append)
    color = Color(1, 2, 3)
    picker.update(color)
    assert picker.color == color
    assert picker.text == color.name()
    assert picker.icon_color == color
    assert seen == []


def test_icon_size_follows_scale():
    assert ColorPicker(16, 2.0).icon_size == 2 * ColorPicker(16, 1.0).icon_size