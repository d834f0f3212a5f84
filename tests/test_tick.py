import logging

import numpy as np
import pytest

from universe import FixedBitSet, Universe, scripted_random_bool, transition


def alive_set(u):
    return {(r, c) for r in range(u.height) for c in range(u.width) if u.cell_state(r, c)}


def test_neighbor_count_wraps_around_edges():
    u = Universe.empty(5, 5)
    u.set_alive_cells([(0, 0)])
    assert u.live_neighbor_count(4, 4) == 1
    assert u.live_neighbor_count(0, 4) == 1
    assert u.live_neighbor_count(4, 0) == 1
    assert u.live_neighbor_count(1, 1) == 1
    assert u.live_neighbor_count(2, 2) == 0
    assert u.live_neighbor_count(0, 0) == 0


def test_neighbor_count_on_3x3_sees_every_other_cell():
    u = Universe.empty(3, 3)
    u.set_alive_cells([(0, 0)])
    assert u.live_neighbor_count(2, 2) == 1
    assert u.live_neighbor_count(1, 1) == 1


def test_neighbor_count_full_board():
    u = Universe.from_array(np.ones((4, 4), dtype=np.uint8))
    assert u.live_neighbor_count(0, 0) == 8
    assert u.live_neighbor_count(3, 2) == 8


def test_zero_dimension_fails_fast():
    u = Universe.empty(0, 4)
    with pytest.raises(ValueError):
        u.tick()
    with pytest.raises(ValueError):
        u.live_neighbor_count(0, 0)


def test_transition_table():
    for n in range(9):
        assert transition(True, n) is (n in (2, 3))
        assert transition(False, n) is (n == 3)


def test_tick_is_buffered():
    # Horizontal blinker; an in-place scan would also birth (1, 3) from
    # the freshly written (1, 2).
    board = np.zeros((5, 5), dtype=np.uint8)
    board[2, 1:4] = 1

    naive = board.copy()
    for r in range(5):
        for c in range(5):
            n = sum(
                naive[(r + dr) % 5, (c + dc) % 5]
                for dr in (-1, 0, 1)
                for dc in (-1, 0, 1)
                if not (dr == 0 and dc == 0)
            )
            naive[r, c] = transition(bool(naive[r, c]), int(n))

    expected = np.zeros((5, 5), dtype=np.uint8)
    expected[1:4, 2] = 1

    u = Universe.from_array(board)
    u.tick()
    assert np.array_equal(u.to_array(), expected)
    assert not np.array_equal(naive, expected)


def test_blinker_period_two_and_block_still_life():
    u = Universe.empty(6, 6)
    u.set_alive_cells([(2, 1), (2, 2), (2, 3)])
    start = alive_set(u)
    u.tick()
    assert alive_set(u) == {(1, 2), (2, 2), (3, 2)}
    u.tick()
    assert alive_set(u) == start

    block = Universe.empty(4, 4)
    block.set_alive_cells([(1, 1), (1, 2), (2, 1), (2, 2)])
    block.step(3)
    assert alive_set(block) == {(1, 1), (1, 2), (2, 1), (2, 2)}


def test_glider_on_3x3_dies_out():
    u = Universe.empty(3, 3)
    u.seed_glider_at(1, 1)
    assert u.to_array().tolist() == [
        [0, 1, 1],
        [1, 0, 1],
        [0, 0, 1],
    ]
    # Every other cell is a neighbour: alive cells see 4, dead cells see 5.
    u.tick()
    assert u.to_array().tolist() == [[0, 0, 0]] * 3
    u.tick()
    assert u.population() == 0


def test_glider_moves_up_right_every_four_generations():
    u = Universe.empty(8, 8)
    u.seed_glider_at(3, 4)
    u.step(4)
    assert alive_set(u) == {(1, 5), (1, 6), (2, 4), (2, 6), (3, 6)}
    # eight more shifts wraps it back home
    u.step(28)
    assert alive_set(u) == {(2, 4), (2, 5), (3, 3), (3, 5), (4, 5)}


def test_tick_preserves_dimensions():
    u = Universe.deterministic_pattern(9, 5)
    u.step(3)
    assert (u.width, u.height) == (9, 5)
    assert len(u.get_cells()) == 45


def test_tick_skips_population_count_unless_debug(monkeypatch, caplog):
    def fail(self):
        raise AssertionError("count_ones called")

    monkeypatch.setattr(FixedBitSet, "count_ones", fail)
    caplog.set_level(logging.WARNING, logger="universe.grid")
    u = Universe.new(4, 4, scripted_random_bool([True, False]))
    u.tick()


def test_tick_logs_changed_cells(caplog):
    u = Universe.empty(6, 6)
    u.set_alive_cells([(2, 1), (2, 2), (2, 3)])
    with caplog.at_level(logging.DEBUG, logger="universe.grid"):
        u.tick()
    assert "tick: 4 cells changed" in caplog.text
