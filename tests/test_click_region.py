from unittest.mock import Mock

from easel.commands.click_region import ClickRegion, dispatch_click


def test_click_inside_runs_action_once():
    action = Mock()
    x, y, w, h = 20, 30, 40, 25
    region = ClickRegion(x, y, w, h, action)

    assert region.click(x + 5, y + 5) is True
    action.assert_called_once_with()


def test_click_far_outside_does_nothing():
    action = Mock()
    x, y, w, h = 20, 30, 40, 25
    region = ClickRegion(x, y, w, h, action)

    assert region.click(x + w + 100, y + h + 100) is False
    action.assert_not_called()


def test_edges_are_inclusive():
    region = ClickRegion(0, 0, 10, 10, Mock())
    assert region.contains(0, 0)
    assert region.contains(10, 10)
    assert not region.contains(11, 10)
    assert not region.contains(-1, 5)


def test_dispatch_click_stops_at_first_hit():
    first, second = Mock(), Mock()
    regions = [ClickRegion(0, 0, 10, 10, first), ClickRegion(5, 5, 10, 10, second)]

    assert dispatch_click(regions, 7, 7) is True
    first.assert_called_once_with()
    second.assert_not_called()

    assert dispatch_click(regions, 50, 50) is False
