"""Convenience service layer for UI and agents."""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass
from random import Random
from typing import Any, Callable, Mapping, Optional, Union

from .bidding import handle_call_trump_decision, handle_dealer_discard, handle_order_up_decision
from .cards import Card, Suit, card_label, deserialize_card, serialize_card
from .dealing import deal_cards, redeal, start_new_hand
from .errors import EuchreError
from .go_alone import handle_go_alone_decision
from .mechanics import legal_moves, sort_hand
from .play import handle_play_card
from .rules_schema import DEFAULT_RULES, RuleSet
from .scoring import reset_game, score_current_hand
from .seating import TEAMS, Role, parse_role
from .state import GameState, Phase, new_game, require_phase

logger = logging.getLogger(__name__)

CardPayload = Union[Card, Mapping[str, str]]
RolePayload = Union[Role, str]

RECENT_MESSAGES = 10


@dataclass
class TrickPlayView:
    player: str
    card: dict
    label: str


@dataclass
class TableView:
    phase: str
    perspective: str
    dealer: Optional[str]
    current_player: Optional[str]
    trump: Optional[str]
    up_card: Optional[dict]
    maker_team: Optional[str]
    going_alone: bool
    partner_sitting_out: Optional[str]
    hand: list[dict]
    hand_labels: list[str]
    legal_moves: list[dict]
    current_trick: list[TrickPlayView]
    tricks_won: dict[str, int]
    scores: dict[str, int]
    game_over: bool
    winning_team: Optional[str]
    messages: list[str]


def _to_card(payload: CardPayload) -> Card:
    if isinstance(payload, Card):
        return payload
    return deserialize_card(payload)


class TableService:
    """Facade around one table's ``GameState`` for UI consumers.

    Each action takes the table lock, runs the engine transition and stores
    the resulting state. Rejected actions leave the stored state unchanged.
    """

    def __init__(
        self,
        state: Optional[GameState] = None,
        *,
        rules: RuleSet = DEFAULT_RULES,
        rng: Optional[Random] = None,
    ) -> None:
        self._state = state if state is not None else new_game()
        self.rules = rules
        self.rng = rng
        self._lock = threading.Lock()

    @property
    def state(self) -> GameState:
        return self._state

    # Hand lifecycle ----------------------------------------------------

    def start_hand(self) -> TableView:
        """Rotate the dealer, shuffle and deal."""

        def transition(state: GameState) -> GameState:
            require_phase(state, Phase.LOBBY, Phase.BETWEEN_HANDS)
            return deal_cards(start_new_hand(state, rng=self.rng), rules=self.rules)

        return self._apply("start_hand", None, transition)

    def next_hand(self) -> TableView:
        """Deal the next hand; a thrown-in hand is redealt by the same dealer."""

        def transition(state: GameState) -> GameState:
            require_phase(state, Phase.BETWEEN_HANDS)
            if state.trump_suit is None:
                return deal_cards(redeal(state, rng=self.rng), rules=self.rules)
            return deal_cards(start_new_hand(state, rng=self.rng), rules=self.rules)

        return self._apply("next_hand", None, transition)

    def reset(self) -> TableView:
        return self._apply("reset", None, reset_game)

    # Actions -----------------------------------------------------------

    def order_up(self, player: RolePayload, order_up: bool) -> TableView:
        return self._apply(
            "order_up",
            player,
            lambda state: handle_order_up_decision(state, parse_role(player), order_up),
        )

    def discard(self, player: RolePayload, card: CardPayload) -> TableView:
        return self._apply(
            "discard",
            player,
            lambda state: handle_dealer_discard(state, parse_role(player), _to_card(card)),
        )

    def call_trump(self, player: RolePayload, suit: Optional[Union[Suit, str]]) -> TableView:
        return self._apply(
            "call_trump",
            player,
            lambda state: handle_call_trump_decision(state, parse_role(player), suit),
        )

    def go_alone(self, player: RolePayload, alone: bool) -> TableView:
        return self._apply(
            "go_alone",
            player,
            lambda state: handle_go_alone_decision(state, parse_role(player), alone),
        )

    def play_card(self, player: RolePayload, card: CardPayload) -> TableView:
        def transition(state: GameState) -> GameState:
            updated = handle_play_card(state, parse_role(player), _to_card(card))
            if updated.current_phase is Phase.SCORING:
                updated = score_current_hand(updated, rules=self.rules)
            return updated

        return self._apply("play_card", player, transition)

    # Views -------------------------------------------------------------

    def get_table_view(self, perspective: RolePayload = Role.SOUTH) -> TableView:
        role = parse_role(perspective)
        state = self._state
        player = state.players.get(role)
        hand = sort_hand(player.hand, state.trump_suit) if player is not None else []
        moves: list[Card] = []
        if state.current_phase is Phase.PLAYING and state.current_player is role:
            moves = legal_moves(hand, state.current_trick, state.trump_suit)

        return TableView(
            phase=str(state.current_phase).lower(),
            perspective=str(role),
            dealer=str(state.dealer) if state.dealer else None,
            current_player=str(state.current_player) if state.current_player else None,
            trump=str(state.trump_suit) if state.trump_suit else None,
            up_card=serialize_card(state.up_card) if state.up_card else None,
            maker_team=state.maker_team,
            going_alone=state.going_alone,
            partner_sitting_out=str(state.partner_sitting_out) if state.partner_sitting_out else None,
            hand=[serialize_card(card) for card in hand],
            hand_labels=[card_label(card) for card in hand],
            legal_moves=[serialize_card(card) for card in moves],
            current_trick=[
                TrickPlayView(player=str(play.player), card=serialize_card(play.card), label=card_label(play.card))
                for play in state.current_trick
            ],
            tricks_won={team: state.team_tricks(team) for team in TEAMS},
            scores=dict(state.scores),
            game_over=state.game_over,
            winning_team=state.winning_team,
            messages=[message.text for message in state.messages[-RECENT_MESSAGES:]],
        )

    # Helpers -----------------------------------------------------------

    def _apply(
        self,
        action: str,
        player: Optional[RolePayload],
        transition: Callable[[GameState], GameState],
    ) -> TableView:
        with self._lock:
            try:
                self._state = transition(self._state)
            except EuchreError as exc:
                logger.warning("Rejected %s by %s: %s", action, player, exc)
                raise
        return self.get_table_view(player if player is not None else Role.SOUTH)


class TableRegistry:
    """Maps table ids to their services."""

    def __init__(self, *, rules: RuleSet = DEFAULT_RULES) -> None:
        self.rules = rules
        self._tables: dict[str, TableService] = {}
        self._lock = threading.Lock()

    def create(self, **kwargs: Any) -> tuple[str, TableService]:
        kwargs.setdefault("rules", self.rules)
        service = TableService(**kwargs)
        table_id = uuid.uuid4().hex
        with self._lock:
            self._tables[table_id] = service
        logger.info("Created table %s", table_id)
        return table_id, service

    def get(self, table_id: str) -> TableService:
        with self._lock:
            try:
                return self._tables[table_id]
            except KeyError as exc:
                raise KeyError(f"Unknown table: {table_id}") from exc

    def remove(self, table_id: str) -> None:
        with self._lock:
            self._tables.pop(table_id, None)

    def table_ids(self) -> list[str]:
        with self._lock:
            return list(self._tables)
