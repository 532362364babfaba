"""Card-related data structures and helpers for Euchre."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Mapping, Optional, Union

from .errors import InvalidPayload


class Suit(Enum):
    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        return self.name.lower()


class Rank(Enum):
    NINE = auto()
    TEN = auto()
    JACK = auto()
    QUEEN = auto()
    KING = auto()
    ACE = auto()

    def __str__(self) -> str:
        return RANK_SYMBOLS[self]


SUITS: tuple[Suit, ...] = (Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES)

# Rank order from lowest to highest.
RANKS: tuple[Rank, ...] = (
    Rank.NINE,
    Rank.TEN,
    Rank.JACK,
    Rank.QUEEN,
    Rank.KING,
    Rank.ACE,
)

RANK_SYMBOLS: dict[Rank, str] = {
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

SAME_COLOUR_SUIT: dict[Suit, Suit] = {
    Suit.HEARTS: Suit.DIAMONDS,
    Suit.DIAMONDS: Suit.HEARTS,
    Suit.CLUBS: Suit.SPADES,
    Suit.SPADES: Suit.CLUBS,
}

RIGHT_BOWER_RANK = 100
LEFT_BOWER_RANK = 90

# Trump cards other than the bowers sit above every led-suit card.
TRUMP_RANKS: dict[Rank, int] = {
    Rank.NINE: 30,
    Rank.TEN: 40,
    Rank.JACK: 50,
    Rank.QUEEN: 60,
    Rank.KING: 70,
    Rank.ACE: 80,
}

FACE_VALUES: dict[Rank, int] = {rank: index + 1 for index, rank in enumerate(RANKS)}


@dataclass(frozen=True)
class Card:
    """Immutable representation of a playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return card_label(self)


def is_right_bower(card: Card, trump: Optional[Suit]) -> bool:
    return trump is not None and card.rank is Rank.JACK and card.suit is trump


def is_left_bower(card: Card, trump: Optional[Suit]) -> bool:
    return trump is not None and card.rank is Rank.JACK and card.suit is SAME_COLOUR_SUIT[trump]


def effective_suit(card: Card, trump: Optional[Suit]) -> Suit:
    """Return the suit a card follows once trump is known."""
    if is_left_bower(card, trump):
        assert trump is not None
        return trump
    return card.suit


def is_trump(card: Card, trump: Optional[Suit]) -> bool:
    return trump is not None and effective_suit(card, trump) is trump


def get_card_rank(card: Optional[Card], trump: Optional[Suit], led_suit: Optional[Suit]) -> int:
    """Return the strength of ``card`` within a trick.

    Right bower 100, left bower 90, other trump 30..80, a non-trump card of the
    led suit ranks by face value (1..6) and anything else ranks 0. Missing or
    malformed cards rank -1 so they can never win.
    """
    if not isinstance(card, Card) or not isinstance(card.rank, Rank) or not isinstance(card.suit, Suit):
        return -1
    if is_right_bower(card, trump):
        return RIGHT_BOWER_RANK
    if is_left_bower(card, trump):
        return LEFT_BOWER_RANK
    if trump is not None and card.suit is trump:
        return TRUMP_RANKS[card.rank]
    if led_suit is not None and card.suit is led_suit:
        return FACE_VALUES[card.rank]
    return 0


def parse_suit(value: Union[Suit, str]) -> Suit:
    if isinstance(value, Suit):
        return value
    try:
        return Suit[str(value).strip().upper()]
    except KeyError as exc:
        raise InvalidPayload(f"Unknown suit: {value!r}") from exc


def parse_rank(value: Union[Rank, str]) -> Rank:
    if isinstance(value, Rank):
        return value
    text = str(value).strip().upper()
    for rank, symbol in RANK_SYMBOLS.items():
        if text == symbol or text == rank.name:
            return rank
    raise InvalidPayload(f"Unknown rank: {value!r}")


def serialize_card(card: Card) -> dict[str, str]:
    return {"suit": str(card.suit), "rank": RANK_SYMBOLS[card.rank]}


def deserialize_card(payload: Mapping[str, str]) -> Card:
    try:
        return Card(parse_rank(payload["rank"]), parse_suit(payload["suit"]))
    except KeyError as exc:
        raise InvalidPayload("Card payload requires 'suit' and 'rank'.") from exc


def card_label(card: Card) -> str:
    return f"{RANK_SYMBOLS[card.rank]} of {card.suit}"
