"""Common bot strategy interfaces."""

from __future__ import annotations

from typing import List, Optional

from euchre.cards import Card, Suit, get_card_rank, is_trump
from euchre.mechanics import legal_moves
from euchre.seating import Role
from euchre.state import GameState


def legal_cards(state: GameState, player: Role) -> List[Card]:
    return legal_moves(state.player(player).hand, state.current_trick, state.trump_suit)


def weakest_card(cards: List[Card], trump: Optional[Suit]) -> Card:
    """Lowest card, preferring to give up a non-trump card."""
    return min(cards, key=lambda card: (is_trump(card, trump), get_card_rank(card, trump, card.suit)))


class BotStrategy:
    """Base class for bot policies.

    Every hook receives the current state and the seat the bot plays for.
    The defaults pass every bid, play with a partner and lead the first legal
    card.
    """

    name: str = "BaseBot"

    def order_up(self, state: GameState, player: Role) -> bool:
        """Return True to order the up-card up."""
        return False

    def discard(self, state: GameState, player: Role) -> Card:
        """Return the card the dealer gives up after being ordered up."""
        return weakest_card(list(state.player(player).hand), state.trump_suit)

    def call_trump(self, state: GameState, player: Role) -> Optional[Suit]:
        """Return a suit to name as trump in the second round, or None to pass."""
        return None

    def go_alone(self, state: GameState, player: Role) -> bool:
        return False

    def play_card(self, state: GameState, player: Role) -> Card:
        legal = legal_cards(state, player)
        if not legal:
            raise RuntimeError("No legal plays available for bot.")
        return legal[0]
