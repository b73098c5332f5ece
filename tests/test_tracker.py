"""
Test suite for PathTracker.

Tests cover:
- Recompute only on entering a new cell
- Target changes forcing a recompute
- Hooks receiving results
- Off-grid positions
- Refresh after blocking changes
- Building from descriptors
- Algorithm and cell size from config
"""

import pytest

from gridwalk import (
    BlockMap,
    Cell,
    CellDescriptor,
    Grid,
    PathTracker,
    Pos2D,
    SearchConfig,
)


def make_tracker(config=None):
    grid = Grid.rect(5, 5)
    blocked = BlockMap()
    return PathTracker(grid, blocked, config), blocked


class TestTrackerUpdates:
    """Test when the tracker recomputes."""

    def test_no_target_no_result(self):
        tracker, _ = make_tracker()
        assert tracker.update(Pos2D(0.0, 0.0)) is None
        assert tracker.last_result is None

    def test_first_update_computes(self):
        tracker, _ = make_tracker()
        tracker.set_target((4, 4))
        result = tracker.update(Pos2D(0.2, 0.1))

        assert result is not None
        assert result.reachable
        assert result.path[0] == Cell(0, 0)
        assert result.path[-1] == Cell(4, 4)
        assert tracker.current_cell == Cell(0, 0)
        assert tracker.last_result == result

    def test_same_cell_does_not_recompute(self):
        tracker, _ = make_tracker()
        tracker.set_target((4, 4))
        tracker.update(Pos2D(0.2, 0.1))

        assert tracker.update(Pos2D(0.4, 0.3)) is None

    def test_new_cell_recomputes(self):
        tracker, _ = make_tracker()
        tracker.set_target((4, 4))
        tracker.update(Pos2D(0.0, 0.0))
        result = tracker.update(Pos2D(1.1, 0.0))

        assert result is not None
        assert result.path[0] == Cell(1, 0)

    def test_set_target_forces_recompute(self):
        tracker, _ = make_tracker()
        tracker.set_target((4, 4))
        tracker.update(Pos2D(0.0, 0.0))
        tracker.set_target(Cell(0, 4))
        result = tracker.update(Pos2D(0.0, 0.0))

        assert result is not None
        assert result.path[-1] == Cell(0, 4)
        assert tracker.target == Cell(0, 4)

    def test_arrival_gives_empty_path(self):
        tracker, _ = make_tracker()
        tracker.set_target((2, 2))
        result = tracker.update(Pos2D(2.0, 2.0))
        assert result == (True, [])

    def test_clear_target(self):
        tracker, _ = make_tracker()
        tracker.set_target((4, 4))
        tracker.update(Pos2D(0.0, 0.0))
        tracker.clear_target()

        assert tracker.target is None
        assert tracker.last_result is None
        assert tracker.update(Pos2D(3.0, 3.0)) is None

    def test_off_grid_position(self):
        tracker, _ = make_tracker()
        tracker.set_target((4, 4))
        result = tracker.update(Pos2D(-5.0, -5.0))

        assert result == (False, [])
        assert tracker.current_cell is None
        assert tracker.update(Pos2D(-5.2, -4.9)) is None


class TestTrackerHooks:
    """Test path hooks."""

    def test_hooks_receive_every_result(self):
        tracker, _ = make_tracker()
        received = []
        tracker.on_path(received.append)
        tracker.set_target((4, 0))

        tracker.update(Pos2D(0.0, 0.0))
        tracker.update(Pos2D(0.1, 0.0))
        tracker.update(Pos2D(1.0, 0.0))

        assert len(received) == 2
        assert received[0].path[0] == Cell(0, 0)
        assert received[1].path[0] == Cell(1, 0)

    def test_multiple_hooks_in_order(self):
        tracker, _ = make_tracker()
        calls = []
        tracker.on_path(lambda r: calls.append("first"))
        tracker.on_path(lambda r: calls.append("second"))
        tracker.set_target((1, 1))
        tracker.update(Pos2D(0.0, 0.0))

        assert calls == ["first", "second"]


class TestTrackerRefresh:
    """Test recomputing after the blocked state changes."""

    def test_refresh_without_position(self):
        tracker, _ = make_tracker()
        tracker.set_target((4, 4))
        assert tracker.refresh() is None

    def test_refresh_sees_new_obstacles(self):
        tracker, blocked = make_tracker()
        tracker.set_target((2, 2))
        first = tracker.update(Pos2D(0.0, 0.0))
        assert Cell(1, 1) in first.path

        blocked.block((1, 1))
        second = tracker.refresh()
        assert second.reachable
        assert Cell(1, 1) not in second.path

    def test_refresh_blocked_target(self):
        tracker, blocked = make_tracker()
        tracker.set_target((2, 2))
        tracker.update(Pos2D(0.0, 0.0))
        blocked.block((2, 2))

        assert tracker.refresh() == (False, [])


class TestTrackerConfig:
    """Test config-driven behavior."""

    def test_cell_size(self):
        tracker, _ = make_tracker(SearchConfig(cell_size=10.0))
        tracker.set_target((4, 4))
        result = tracker.update(Pos2D(21.0, 9.0))

        assert result.path[0] == Cell(2, 1)

    def test_astar_algorithm(self):
        grid = Grid.rect(5, 3, allow_diagonal=False)
        blocked = BlockMap([(3, 0), (3, 1), (2, 1)])
        greedy = PathTracker(grid, blocked, SearchConfig(allow_diagonal=False))
        reference = PathTracker(
            grid, blocked, SearchConfig(allow_diagonal=False, algorithm="astar"),
        )
        for tracker in (greedy, reference):
            tracker.set_target((4, 0))

        assert not greedy.update(Pos2D(0.0, 0.0)).reachable
        assert reference.update(Pos2D(0.0, 0.0)).reachable

    def test_max_steps(self):
        grid = Grid.rect(10, 1)
        tracker = PathTracker(grid, BlockMap(), SearchConfig(max_steps=2))
        tracker.set_target((9, 0))

        assert tracker.update(Pos2D(0.0, 0.0)) == (False, [])
        assert tracker.update(Pos2D(7.0, 0.0)).reachable

    def test_from_descriptors(self):
        descriptors = [
            CellDescriptor(x, y, blocked=(x == 1 and y < 2))
            for y in range(3)
            for x in range(3)
        ]
        tracker = PathTracker.from_descriptors(
            descriptors, SearchConfig(allow_diagonal=False),
        )

        assert len(tracker.grid) == 9
        assert tracker.grid.allow_diagonal is False
        assert tracker.is_blocked(Cell(1, 0))

        tracker.set_target((2, 0))
        result = tracker.update(Pos2D(0.0, 0.0))
        assert result.reachable
        assert Cell(1, 2) in result.path

    def test_connectivity_must_match_grid(self):
        with pytest.raises(ValueError, match="allow_diagonal"):
            PathTracker(Grid.rect(3, 3), BlockMap(), SearchConfig(allow_diagonal=False))
        with pytest.raises(ValueError, match="allow_diagonal"):
            PathTracker(Grid.rect(3, 3, allow_diagonal=False), BlockMap())

    def test_four_connected_config_gives_orthogonal_trace(self):
        grid = Grid.rect(3, 3, allow_diagonal=False)
        tracker = PathTracker(grid, BlockMap(), SearchConfig(allow_diagonal=False))
        tracker.set_target((2, 2))
        result = tracker.update(Pos2D(0.0, 0.0))

        assert result.reachable
        for a, b in zip(result.path, result.path[1:]):
            assert not a.is_diagonal_from(b)
