import string

import pytest

from magpie.letter_distribution import (
    get_blanked_machine_letter,
    parse_letter_distribution,
)
from magpie.move import (
    INITIAL_TOP_MOVE_EQUITY,
    Move,
    MoveList,
    MoveType,
    compare_moves,
    within_epsilon_for_equity,
)


@pytest.fixture
def ld():
    lines = ["?,?,2,0,0"] + [
        f"{c},{c.lower()},2,1,{int(c in 'AEIOU')}" for c in string.ascii_uppercase
    ]
    return parse_letter_distribution(lines)


def _insert(ml, equity, row=0, col=0, tiles=(1,)):
    ml.set_spare_move(
        list(tiles), 0, len(tiles) - 1, int(equity), row, col, len(tiles), False,
        MoveType.PLAY,
    )
    ml.insert_spare_move(equity)


def test_within_epsilon():
    assert within_epsilon_for_equity(1.0, 1.0 + 1e-8)
    assert not within_epsilon_for_equity(1.0, 1.1)


def test_compare_moves_equity_then_position():
    a = Move(equity=10.0)
    b = Move(equity=5.0)
    assert compare_moves(a, b)
    assert not compare_moves(b, a)
    c = Move(equity=5.0, row_start=1)
    d = Move(equity=5.0, row_start=3)
    assert compare_moves(c, d)
    assert not compare_moves(d, c)
    assert not compare_moves(c, c.copy())


def test_compare_moves_tiles_tiebreak():
    a = Move(tiles_length=2)
    a.tiles[:2] = [1, 2]
    b = Move(tiles_length=2)
    b.tiles[:2] = [1, 3]
    assert compare_moves(a, b)
    assert not compare_moves(b, a)


def test_set_copies_strip_segment():
    move = Move()
    move.set([9, 4, 5, 6, 9], 1, 3, 12, 7, 2, 3, True, MoveType.PLAY)
    assert move.tiles[:3] == [4, 5, 6]
    assert move.tiles_length == 3
    assert move.vertical is True
    assert move.score == 12


def test_set_as_pass():
    move = Move(score=30)
    move.set_as_pass()
    assert move.move_type == MoveType.PASS
    assert move.score == 0


def test_copy_is_independent():
    move = Move(score=5)
    move.tiles[0] = 3
    clone = move.copy()
    clone.tiles[0] = 4
    assert move.tiles[0] == 3
    assert clone.score == move.score


def test_description_horizontal(ld):
    mls = ld.str_to_machine_letters("ZILLION")
    move = Move()
    move.set(mls, 0, len(mls) - 1, 0, 7, 3, 7, False, MoveType.PLAY)
    assert move.description(ld) == "8D ZILLION"


def test_description_vertical_with_played_through(ld):
    mls = [ld.to_machine_letter("S"), 0, get_blanked_machine_letter(3)]
    move = Move()
    move.set(mls, 0, 2, 0, 7, 7, 2, True, MoveType.PLAY)
    assert move.description(ld) == "H8 S.c"


def test_description_exchange_and_pass(ld):
    mls = ld.str_to_machine_letters("AB")
    move = Move()
    move.set(mls, 0, 1, 0, 0, 0, 2, False, MoveType.EXCHANGE)
    assert move.description(ld) == "(Exch AB)"
    move.set_as_pass()
    assert move.description(ld) == "(Pass)"


def test_new_list_top_equity_is_initial():
    ml = MoveList(5)
    assert ml.moves[0].equity == INITIAL_TOP_MOVE_EQUITY
    assert len(ml) == 0


def test_sort_orders_best_first():
    ml = MoveList(10)
    for equity in (5.0, 3.0, 9.0, 1.0):
        _insert(ml, equity)
    assert len(ml) == 4
    ordered = ml.sort_moves()
    assert [m.equity for m in ordered] == [9.0, 5.0, 3.0, 1.0]


def test_pop_returns_worst():
    ml = MoveList(10)
    for equity in (4.0, 2.0, 8.0):
        _insert(ml, equity)
    assert ml.pop_move().equity == 2.0
    assert ml.pop_move().equity == 4.0
    assert ml.pop_move().equity == 8.0
    assert len(ml) == 0
    with pytest.raises(IndexError):
        ml.pop_move()


def test_capacity_drops_worst():
    ml = MoveList(3)
    for equity in (5.0, 3.0, 9.0):
        _insert(ml, equity)
    assert len(ml) == 2
    assert [m.equity for m in ml.sort_moves()] == [9.0, 5.0]


def test_equal_equity_sorted_by_row():
    ml = MoveList(10)
    _insert(ml, 5.0, row=4)
    _insert(ml, 5.0, row=1)
    _insert(ml, 5.0, row=2)
    assert [m.row_start for m in ml.sort_moves()] == [1, 2, 4]


def test_insert_top_equity_keeps_best():
    ml = MoveList(5)
    ml.set_spare_move([1], 0, 0, 10, 0, 0, 1, False, MoveType.PLAY)
    ml.insert_spare_move_top_equity(10.0)
    ml.set_spare_move([2], 0, 0, 5, 0, 0, 1, False, MoveType.PLAY)
    ml.insert_spare_move_top_equity(5.0)
    assert ml.moves[0].equity == 10.0
    assert ml.moves[0].score == 10


def test_reset_restores_initial_state():
    ml = MoveList(5)
    _insert(ml, 7.0)
    ml.reset()
    assert len(ml) == 0
    assert ml.moves[0].equity == INITIAL_TOP_MOVE_EQUITY


def test_pass_insert():
    ml = MoveList(5)
    ml.set_spare_move_as_pass()
    ml.insert_spare_move(0.0)
    assert ml.moves[0].move_type == MoveType.PASS
    assert len(ml) == 1