"""Baseline greedy bot."""

from __future__ import annotations

from typing import Iterable, Optional

from euchre.cards import SUITS, Card, Suit, effective_suit, get_card_rank, is_right_bower, is_trump
from euchre.seating import Role
from euchre.state import GameState
from euchre.trick import led_suit

from .base import BotStrategy, legal_cards

BID_THRESHOLD = 3
ALONE_THRESHOLD = 4


def _trump_count(cards: Iterable[Card], trump: Suit) -> int:
    return sum(1 for card in cards if is_trump(card, trump))


class GreedyBot(BotStrategy):
    """Bids on trump length and always plays its strongest legal card."""

    name = "Greedy"

    def __init__(self, bid_threshold: int = BID_THRESHOLD, alone_threshold: int = ALONE_THRESHOLD) -> None:
        self.bid_threshold = bid_threshold
        self.alone_threshold = alone_threshold

    def order_up(self, state: GameState, player: Role) -> bool:
        if state.up_card is None:
            return False
        cards = list(state.player(player).hand)
        if player is state.dealer:
            cards.append(state.up_card)
        return _trump_count(cards, state.up_card.suit) >= self.bid_threshold

    def call_trump(self, state: GameState, player: Role) -> Optional[Suit]:
        turned_down = state.up_card.suit if state.up_card is not None else None
        hand = state.player(player).hand
        candidates = [suit for suit in SUITS if suit is not turned_down]
        best = max(candidates, key=lambda suit: _trump_count(hand, suit))
        if _trump_count(hand, best) >= self.bid_threshold:
            return best
        return None

    def go_alone(self, state: GameState, player: Role) -> bool:
        trump = state.trump_suit
        if trump is None:
            return False
        hand = state.player(player).hand
        return _trump_count(hand, trump) >= self.alone_threshold and any(is_right_bower(card, trump) for card in hand)

    def play_card(self, state: GameState, player: Role) -> Card:
        legal = legal_cards(state, player)
        if not legal:
            raise RuntimeError("No legal plays available for bot.")
        trump = state.trump_suit
        led = led_suit(state.current_trick, trump)
        return max(legal, key=lambda card: get_card_rank(card, trump, led or effective_suit(card, trump)))
