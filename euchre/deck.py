"""Deck creation and dealing utilities for Euchre."""

from __future__ import annotations

from random import Random
from typing import List, Optional, Sequence, Tuple

from .cards import RANKS, SUITS, Card

DECK_SIZE = 24
HAND_SIZE = 5


def build_deck() -> List[Card]:
    """Return the ordered 24-card deck."""
    return [Card(rank, suit) for suit in SUITS for rank in RANKS]


def shuffled_deck(rng: Optional[Random] = None) -> List[Card]:
    cards = build_deck()
    if rng is None:
        rng = Random()
    rng.shuffle(cards)
    return cards


def cards_needed(player_count: int) -> int:
    """Cards required to deal every hand plus the up-card."""
    return player_count * HAND_SIZE + 1


def deal_blocks(deck: Sequence[Card], player_count: int) -> Tuple[List[List[Card]], List[Card]]:
    """Give each seat a contiguous block of five cards.

    Seat ``i`` receives ``deck[5i:5i+5]``; the undealt remainder is returned
    in deck order.
    """
    cards = list(deck)
    hands = [cards[i * HAND_SIZE : (i + 1) * HAND_SIZE] for i in range(player_count)]
    return hands, cards[player_count * HAND_SIZE :]


def deal_round_robin(deck: Sequence[Card], player_count: int) -> Tuple[List[List[Card]], List[Card]]:
    """Deal one card at a time around the table, seat 0 first."""
    cards = list(deck)
    hands: List[List[Card]] = [[] for _ in range(player_count)]
    for index in range(player_count * HAND_SIZE):
        hands[index % player_count].append(cards[index])
    return hands, cards[player_count * HAND_SIZE :]
