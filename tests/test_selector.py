import pytest

from dashlink.selector import Selector


def test_placeholder_goes_first():
    sel = Selector(["a", "b"], placeholder="none")
    assert sel.options == ("none", "a", "b")
    assert sel.current() == "none"
    assert sel.is_placeholder


def test_without_placeholder_options_unchanged():
    sel = Selector(["a", "b", "c"], current="b")
    assert sel.options == ("a", "b", "c")
    assert sel.current() == "b"
    assert not sel.is_placeholder


def test_unknown_current_falls_back_to_first():
    sel = Selector(["a", "b"], current="zzz")
    assert sel.current() == "a"


def test_empty_options_disable_selector():
    sel = Selector([], placeholder="none")
    assert not sel.enabled
    assert sel.current() is None
    assert sel.options == ()
    assert sel.next() is None


@pytest.mark.parametrize("options", [["a"], ["a", "b"], ["a", "b", "c", "d"]])
def test_next_wraps_around(options):
    sel = Selector(options)
    start = sel.current()
    seen = [sel.next() for _ in options]
    assert seen[-1] == start
    assert sorted(seen) == sorted(options)


def test_previous_undoes_next():
    sel = Selector(["a", "b", "c"], current="c")
    sel.next()
    assert sel.previous() == "c"


def test_previous_from_first_goes_to_last():
    sel = Selector(["a", "b", "c"])
    assert sel.previous() == "c"


def test_step_reports_index_without_placeholder():
    sel = Selector(["a", "b"], placeholder="none")
    items, idxs = [], []
    sel.item_listeners.append(items.append)
    sel.idx_listeners.append(idxs.append)
    sel.next()
    assert items == ["a"]
    assert idxs == [sel.options.index("a") - 1]


def test_set_current_reports_index_with_placeholder():
    sel = Selector(["a", "b"], placeholder="none")
    idxs = []
    sel.idx_listeners.append(idxs.append)
    sel.set_current("b")
    assert sel.current() == "b"
    assert idxs == [sel.options.index("b")]


def test_set_options_resets_to_first():
    sel = Selector(["a", "b"], current="b", placeholder="none")
    items = []
    sel.item_listeners.append(items.append)
    sel.set_options(["x", "y"])
    assert sel.options == ("none", "x", "y")
    assert items == ["none"]
    assert sel.index == 0


def test_set_options_empty_disables():
    sel = Selector(["a"])
    sel.set_options([])
    assert not sel.enabled
    assert sel.current() is None