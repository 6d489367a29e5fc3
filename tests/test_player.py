import pytest

from sorting.algorithms import ALGORITHMS, run_algorithm
from sorting.moves import SetValueAtIndex, SwapByIndex, SwapPivot
from sorting.player import (
    MovePlayer,
    ValidationPlayer,
    ValidationRecord,
    collect_validation_records,
)
from sorting.sort_model import build_display

SOURCE = [5, 3, 1, 4, 2]


def make_display(values):
    return build_display(values, 500, 300)


class Calls:
    def __init__(self):
        self.count = 0

    def __call__(self):
        self.count += 1


@pytest.mark.parametrize("label", list(ALGORITHMS))
def test_player_replays_recorded_moves(label):
    run = run_algorithm(label, SOURCE)
    display = make_display(SOURCE)
    done = Calls()
    player = MovePlayer(run.moves, display, on_finished=done)

    ticks = 0
    while player.tick():
        ticks += 1

    assert ticks == len(run.moves)
    assert display.values() == [1, 2, 3, 4, 5]
    assert done.count == 1


def test_player_applies_moves_in_recorded_order():
    display = make_display([10, 20, 30])
    player = MovePlayer([SetValueAtIndex(0, 99), SwapByIndex(0, 2)], display)
    player.tick()
    assert display.values() == [99, 20, 30]
    player.tick()
    assert display.values() == [30, 20, 99]


def test_swaps_move_bars_wholesale():
    display = make_display([10, 20, 30])
    first, last = display[0], display[2]
    player = MovePlayer([SwapPivot(0, 2)], display)
    player.run_to_end()
    assert display[0] is last
    assert display[2] is first


def test_set_value_rescales_in_place():
    display = make_display([0, 150, 300])
    bar = display[1]
    MovePlayer([SetValueAtIndex(1, 300)], display).run_to_end()
    assert display[1] is bar
    assert (bar.height, bar.color) == display.scales.measure(300)
    assert bar.height == display[2].height
    assert bar.color == display[2].color


def test_player_finishes_once():
    done = Calls()
    player = MovePlayer([], make_display([]), on_finished=done)
    assert player.tick() is False
    assert player.tick() is False
    assert player.finished
    assert done.count == 1


def test_validation_covers_sorted_display():
    display = make_display([1, 2, 3, 4, 5])
    records = collect_validation_records(display, SOURCE)
    assert [record.index for record in records] == [0, 1, 2, 3, 4]
    assert [record.original_color for record in records] == display.colors()


def test_validation_stops_at_first_mismatch():
    display = make_display([1, 2, 4, 3, 5])
    records = collect_validation_records(display, SOURCE)
    assert [record.index for record in records] == [0, 1]


def test_validation_of_empty_display():
    assert collect_validation_records(make_display([]), []) == []


def test_validation_player_highlights_then_restores():
    display = make_display([1, 2, 3])
    original = display.colors()
    records = collect_validation_records(display, [3, 1, 2])
    done = Calls()
    player = ValidationPlayer(records, display, on_finished=done, highlight="green")

    assert player.tick()
    assert display[0].color == "green"

    assert player.tick()
    assert display[0].color == original[0]
    assert display[1].color == "green"

    player.run_to_end()
    assert display.colors() == original
    assert player.validated == [0, 1, 2]
    assert done.count == 1


def test_validation_player_only_marks_given_records():
    display = make_display([1, 2, 3])
    player = ValidationPlayer([ValidationRecord(0, display[0].color)], display)
    player.run_to_end()
    assert player.validated == [0]
