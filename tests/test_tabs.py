import pytest

from sylvan.tabs import Tabs


def test_starts_on_first_tab():
    tabs = Tabs(["one", "two", "three"])
    assert tabs.active == 0


def test_next_cycles_through_all_tabs():
    titles = ["one", "two", "three"]
    tabs = Tabs(titles)
    seen = []
    for _ in titles:
        seen.append(tabs.active)
        tabs.next()
    assert sorted(seen) == list(range(len(titles)))
    assert tabs.active == 0


def test_prev_undoes_next():
    tabs = Tabs(["a", "b", "c", "d"])
    tabs.next()
    tabs.next()
    before = tabs.active
    tabs.next()
    tabs.prev()
    assert tabs.active == before


def test_prev_from_first_with_two_tabs_goes_to_last():
    tabs = Tabs(["a", "b"])
    tabs.prev()
    assert tabs.active == len(tabs.tabs) - 1


@pytest.mark.parametrize("count", [1, 2, 3, 4, 5, 7])
def test_prev_stays_in_range(count):
    tabs = Tabs([str(i) for i in range(count)])
    for _ in range(count * 2):
        tabs.prev()
        assert 0 <= tabs.active < count


def test_empty_tabs_raise():
    tabs = Tabs([])
    with pytest.raises(ValueError):
        tabs.next()
    with pytest.raises(ValueError):
        tabs.prev()