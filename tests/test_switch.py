from dashlink.switch import Switch


def test_unchecked_thumb_rests_at_base_offset():
    s = Switch()
    s.resize(100)
    assert s.offset == s.base_offset
    assert s.offset == s.end_offset(False)


def test_checked_thumb_rests_at_far_end():
    s = Switch(100)
    s.set_checked(True)
    assert s.offset == 100 - s.base_offset
    assert s.offset == s.end_offset(True)


def test_resize_moves_checked_thumb():
    s = Switch(100)
    s.set_checked(True)
    s.resize(200)
    assert s.offset == 200 - s.base_offset


def test_toggle_notifies_listeners():
    s = Switch(80)
    seen = []
    s.state_listeners.append(seen.append)
    assert s.toggle() is True
    assert s.toggle() is False
    assert seen == [True, False]
    assert s.offset == s.base_offset


def test_set_checked_does_not_notify():
    s = Switch(80)
    seen = []
    s.state_listeners.append(seen.append)
    s.set_checked(True)
    assert seen == []
    assert s.checked is True


def test_double_scale_doubles_size_hint():
    plain = Switch()
    scaled = Switch()
    scaled.scale(2)
    assert scaled.size_hint() == tuple(2 * v for v in plain.size_hint())


def test_thumb_larger_than_track_gives_margin():
    s = Switch()
    s.scale(1.5)
    assert s.thumb_radius > s.track_radius
    assert s.margin == s.thumb_radius - s.track_radius
    assert s.base_offset == s.thumb_radius