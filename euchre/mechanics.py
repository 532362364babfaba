"""Legal move generation for Euchre."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .cards import Card, Suit, effective_suit, get_card_rank
from .state import TrickPlay
from .trick import led_suit


def sort_hand(hand: Iterable[Card], trump: Optional[Suit]) -> List[Card]:
    """Order cards by effective suit, trump first, strongest first within a suit."""
    suit_order = {suit: index for index, suit in enumerate(Suit)}

    def key(card: Card) -> tuple[int, int, int]:
        suit = effective_suit(card, trump)
        return (0 if suit is trump else 1, suit_order[suit], -get_card_rank(card, trump, suit))

    return sorted(hand, key=key)


def must_follow(hand: Iterable[Card], plays: Sequence[TrickPlay], trump: Optional[Suit]) -> Optional[Suit]:
    """Return the suit the holder of ``hand`` is obliged to follow, if any."""
    led = led_suit(plays, trump)
    if led is None:
        return None
    if any(effective_suit(card, trump) is led for card in hand):
        return led
    return None


def legal_moves(hand: Iterable[Card], plays: Sequence[TrickPlay], trump: Optional[Suit]) -> List[Card]:
    """Return the subset of cards that are legal to play given the current trick."""
    cards = list(hand)
    required = must_follow(cards, plays, trump)
    if required is None:
        return sort_hand(cards, trump)
    return sort_hand([card for card in cards if effective_suit(card, trump) is required], trump)
