"""Errors raised by the Euchre engine.

Every error is a validation failure the caller can recover from: the action is
rejected and the state the caller holds is left untouched. Callers dispatch on
the exception type and its attributes, never on message text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .cards import Card, Suit
    from .seating import Role


class EuchreError(ValueError):
    """Base class for engine errors."""


class InvalidState(EuchreError):
    """Raised when the engine is used against a malformed or wrong-phase state."""


class InsufficientCards(EuchreError):
    """Raised when the deck cannot cover a full deal."""

    def __init__(self, needed: int, available: int) -> None:
        super().__init__(f"Not enough cards to complete the deal. Need {needed}, have {available}.")
        self.needed = needed
        self.available = available


class OutOfTurn(EuchreError):
    """Raised when a player acts while another player is to act."""

    def __init__(self, player: "Role", expected: Optional["Role"]) -> None:
        super().__init__(f"Not {player}'s turn; waiting on {expected}.")
        self.player = player
        self.expected = expected


class CardNotInHand(EuchreError):
    """Raised when a player names a card they do not hold."""

    def __init__(self, player: "Role", card: "Card") -> None:
        super().__init__(f"{player} does not hold {card}.")
        self.player = player
        self.card = card


class MustFollowSuit(EuchreError):
    """Raised when a player able to follow the led suit does not."""

    def __init__(self, suit: "Suit") -> None:
        super().__init__(f"Must follow suit ({suit}).")
        self.suit = suit


class IllegalTrumpCall(EuchreError):
    """Raised when the turned-down suit is named in the second bidding round."""

    def __init__(self, suit: "Suit") -> None:
        super().__init__(f"Cannot call {suit}: it is the suit of the turned-down card.")
        self.suit = suit


class InvalidGoAloneAttempt(EuchreError):
    """Raised when going alone is decided in the wrong phase or by the wrong player."""


class InvalidPayload(EuchreError):
    """Raised when a suit, rank, role or card payload cannot be parsed."""
