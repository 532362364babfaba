"""Trick representation and resolution."""

from __future__ import annotations

from typing import Optional, Sequence

from .cards import Suit, effective_suit, get_card_rank
from .errors import InvalidState
from .state import TrickPlay


def led_suit(plays: Sequence[TrickPlay], trump: Optional[Suit]) -> Optional[Suit]:
    """Effective suit of the first card played; a led left bower leads trump."""
    if not plays:
        return None
    return effective_suit(plays[0].card, trump)


def winning_play(plays: Sequence[TrickPlay], trump: Optional[Suit]) -> TrickPlay:
    if not plays:
        raise InvalidState("Cannot determine winner on empty trick.")
    led = led_suit(plays, trump)
    best = plays[0]
    best_rank = get_card_rank(best.card, trump, led)
    for play in plays[1:]:
        rank = get_card_rank(play.card, trump, led)
        if rank > best_rank:
            best, best_rank = play, rank
    return best
