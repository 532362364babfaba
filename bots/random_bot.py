"""Random baseline bot."""

from __future__ import annotations

import random
from typing import Optional

from euchre.cards import SUITS, Card, Suit
from euchre.seating import Role
from euchre.state import GameState

from .base import BotStrategy, legal_cards


class RandomBot(BotStrategy):
    name = "Random"

    def __init__(self, seed: Optional[int] = None, *, bid_rate: float = 0.25, alone_rate: float = 0.1) -> None:
        self._rng = random.Random(seed)
        self.bid_rate = bid_rate
        self.alone_rate = alone_rate

    def order_up(self, state: GameState, player: Role) -> bool:
        return self._rng.random() < self.bid_rate

    def discard(self, state: GameState, player: Role) -> Card:
        return self._rng.choice(list(state.player(player).hand))

    def call_trump(self, state: GameState, player: Role) -> Optional[Suit]:
        if self._rng.random() >= self.bid_rate:
            return None
        turned_down = state.up_card.suit if state.up_card is not None else None
        return self._rng.choice([suit for suit in SUITS if suit is not turned_down])

    def go_alone(self, state: GameState, player: Role) -> bool:
        return self._rng.random() < self.alone_rate

    def play_card(self, state: GameState, player: Role) -> Card:
        legal = legal_cards(state, player)
        if not legal:
            raise RuntimeError("No legal plays available for bot.")
        return self._rng.choice(legal)
