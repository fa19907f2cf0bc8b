"""A player: name, rack, score and strategy."""

from __future__ import annotations

import copy
from typing import Any, Optional

from magpie.rack import Rack


class Player:
    """One of the players in a game."""

    def __init__(
        self,
        index: int,
        name: str,
        array_size: int,
        strategy_params: Optional[Any] = None,
    ) -> None:
        self.index = index
        self.name = name
        self.rack = Rack(array_size)
        self.score = 0
        self.strategy_params = strategy_params

    def reset(self) -> None:
        """Empty the rack and zero the score."""
        self.rack.reset()
        self.score = 0

    def copy(self) -> Player:
        """Return an independent copy, strategy included."""
        new_player = Player(
            self.index,
            self.name,
            self.rack.array_size,
            copy.deepcopy(self.strategy_params),
        )
        new_player.rack = self.rack.copy()
        new_player.score = self.score
        return new_player

    def __repr__(self) -> str:
        return f"Player(index={self.index}, name={self.name!r}, score={self.score})"