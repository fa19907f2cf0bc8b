"""Moves and a bounded move list kept as a heap with its worst move on top."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Optional, Sequence

from magpie.letter_distribution import LetterDistribution

BOARD_DIM = 15
INITIAL_TOP_MOVE_EQUITY = -10000.0
EQUITY_EPSILON = 1e-6


class MoveType(IntEnum):
    PLAY = 0
    EXCHANGE = 1
    PASS = 2


@dataclass
class Move:
    """A play, an exchange or a pass."""

    tiles: list[int] = field(default_factory=lambda: [0] * BOARD_DIM)
    score: int = 0
    row_start: int = 0
    col_start: int = 0
    tiles_played: int = 0
    tiles_length: int = 0
    equity: float = 0.0
    vertical: bool = False
    move_type: MoveType = MoveType.PLAY

    def set(
        self,
        strip: Optional[Sequence[int]],
        leftstrip: int,
        rightstrip: int,
        score: int,
        row_start: int,
        col_start: int,
        tiles_played: int,
        vertical: bool,
        move_type: MoveType,
    ) -> None:
        """Fill the move from the part of ``strip`` between the two indices."""
        self.score = score
        self.row_start = row_start
        self.col_start = col_start
        self.tiles_played = tiles_played
        self.vertical = bool(vertical)
        self.move_type = MoveType(move_type)
        self.tiles_length = rightstrip - leftstrip + 1
        if self.move_type != MoveType.PASS and strip is not None:
            segment = list(strip[leftstrip : leftstrip + self.tiles_length])
            self.tiles[: len(segment)] = segment

    def set_as_pass(self) -> None:
        """Turn the move into a pass."""
        self.set(None, 0, 0, 0, 0, 0, 0, False, MoveType.PASS)

    def copy(self) -> Move:
        """Return an independent copy."""
        return replace(self, tiles=list(self.tiles))

    def description(self, letter_distribution: LetterDistribution) -> str:
        """Human-readable form such as ``8D ZILLION``, ``(Exch AB)`` or ``(Pass)``."""
        tiles = "".join(
            "." if tile == 0 else letter_distribution.to_human_letter(tile)
            for tile in self.tiles[: self.tiles_length]
        )
        if self.move_type == MoveType.PLAY:
            column = chr(self.col_start + ord("A"))
            row = str(self.row_start + 1)
            coords = column + row if self.vertical else row + column
            return f"{coords} {tiles}"
        if self.move_type == MoveType.EXCHANGE:
            return f"(Exch {tiles})"
        return "(Pass)"


def within_epsilon_for_equity(a: float, b: float) -> bool:
    """Whether two equities are equal up to a small tolerance."""
    return abs(a - b) < EQUITY_EPSILON


def compare_moves(move_1: Move, move_2: Move) -> bool:
    """Whether ``move_1`` ranks above ``move_2`` in a fixed, deterministic order."""
    if not within_epsilon_for_equity(move_1.equity, move_2.equity):
        return move_1.equity > move_2.equity
    if move_1.row_start != move_2.row_start:
        return move_1.row_start < move_2.row_start
    if move_1.col_start != move_2.col_start:
        return move_1.col_start < move_2.col_start
    if move_1.tiles_played != move_2.tiles_played:
        return move_1.tiles_played < move_2.tiles_played
    if move_1.tiles_length != move_2.tiles_length:
        return move_1.tiles_length < move_2.tiles_length
    for tile_1, tile_2 in zip(
        move_1.tiles[: move_1.tiles_length], move_2.tiles[: move_1.tiles_length]
    ):
        if tile_1 != tile_2:
            return tile_1 < tile_2
    return False


class MoveList:
    """Holds the best ``capacity - 1`` moves; the worst of them sits at index 0."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("move list capacity must be positive")
        self.capacity = capacity
        self.count = 0
        self.spare_move = Move()
        self.moves = [Move() for _ in range(capacity)]
        self.moves[0].equity = INITIAL_TOP_MOVE_EQUITY

    def __len__(self) -> int:
        return self.count

    def reset(self) -> None:
        """Empty the list."""
        self.count = 0
        self.moves[0].equity = INITIAL_TOP_MOVE_EQUITY

    def _up_heapify(self, index: int) -> None:
        moves = self.moves
        while index > 0:
            parent = (index - 1) // 2
            if not compare_moves(moves[parent], moves[index]):
                return
            moves[parent], moves[index] = moves[index], moves[parent]
            index = parent

    def _down_heapify(self, parent: int) -> None:
        moves = self.moves
        while True:
            left = parent * 2 + 1
            right = parent * 2 + 2
            smallest = parent
            if left < self.count and compare_moves(moves[parent], moves[left]):
                smallest = left
            if right < self.count and compare_moves(moves[smallest], moves[right]):
                smallest = right
            if smallest == parent:
                return
            moves[smallest], moves[parent] = moves[parent], moves[smallest]
            parent = smallest

    def set_spare_move(
        self,
        strip: Optional[Sequence[int]],
        leftstrip: int,
        rightstrip: int,
        score: int,
        row_start: int,
        col_start: int,
        tiles_played: int,
        vertical: bool,
        move_type: MoveType,
    ) -> None:
        """Fill the spare move, ready to be inserted."""
        self.spare_move.set(
            strip,
            leftstrip,
            rightstrip,
            score,
            row_start,
            col_start,
            tiles_played,
            vertical,
            move_type,
        )

    def set_spare_move_as_pass(self) -> None:
        """Make the spare move a pass."""
        self.spare_move.set_as_pass()

    def insert_spare_move(self, equity: float) -> None:
        """Insert the spare move; drop the worst move once the list is full."""
        self.spare_move.equity = equity
        self.moves[self.count], self.spare_move = self.spare_move, self.moves[self.count]
        self._up_heapify(self.count)
        self.count += 1
        if self.count == self.capacity:
            self.pop_move()

    def insert_spare_move_top_equity(self, equity: float) -> None:
        """Keep only the single best move at index 0."""
        self.spare_move.equity = equity
        if compare_moves(self.spare_move, self.moves[0]):
            self.moves[0], self.spare_move = self.spare_move, self.moves[0]

    def pop_move(self) -> Move:
        """Remove and return the worst move."""
        if self.count == 0:
            raise IndexError("pop from an empty move list")
        if self.count == 1:
            self.count = 0
            return self.moves[0]
        last = self.count - 1
        popped = self.moves[0]
        self.moves[0] = self.moves[last]
        self.moves[last] = self.spare_move
        self.spare_move = popped
        self.count -= 1
        self._down_heapify(0)
        return self.spare_move

    def sort_moves(self) -> list[Move]:
        """Order the moves best first and return them.

        Afterwards the list no longer holds a heap; only index 0 stays counted.
        """
        number_of_moves = self.count
        for _ in range(1, number_of_moves):
            move = self.pop_move()
            swap = self.moves[self.count]
            self.moves[self.count] = move
            self.spare_move = swap
        return self.moves[:number_of_moves]