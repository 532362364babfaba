"""Game state management for Euchre.

``GameState`` is an immutable value. Every engine entry point receives one and
returns a new one built with :func:`dataclasses.replace`; the caller owns the
instance for its game and threads it through successive actions.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from .cards import Card, Suit
from .errors import InvalidState, OutOfTurn
from .messages import GameMessage, Message
from .seating import (
    DEFAULT_PLAYER_ORDER,
    TEAMS,
    Role,
    active_roles,
    next_role,
    team_members,
)


class Phase(Enum):
    LOBBY = auto()
    DEALING = auto()
    ORDER_UP_ROUND1 = auto()
    ORDER_UP_ROUND2 = auto()
    AWAITING_DEALER_DISCARD = auto()
    AWAITING_GO_ALONE = auto()
    PLAYING = auto()
    SCORING = auto()
    BETWEEN_HANDS = auto()
    GAME_OVER = auto()

    def __str__(self) -> str:
        return self.name


TRICKS_PER_HAND = 5


def zero_scores() -> dict[str, int]:
    return {team: 0 for team in TEAMS}


@dataclass(frozen=True)
class Player:
    role: Role
    hand: Tuple[Card, ...] = ()
    tricks_won: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "hand", tuple(self.hand))

    def holds(self, card: Card) -> bool:
        return card in self.hand

    def without(self, card: Card) -> "Player":
        hand = list(self.hand)
        hand.remove(card)
        return replace(self, hand=tuple(hand))


@dataclass(frozen=True)
class TrickPlay:
    player: Role
    card: Card


@dataclass(frozen=True)
class CompletedTrick:
    cards: Tuple[TrickPlay, ...]
    winner: Role
    team: str


@dataclass(frozen=True)
class MatchStats:
    games_played: int = 0
    team_wins: Mapping[str, int] = field(default_factory=zero_scores)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "team_wins", MappingProxyType(dict(self.team_wins)))

    def record_win(self, team: str) -> "MatchStats":
        wins = dict(self.team_wins)
        wins[team] = wins.get(team, 0) + 1
        return MatchStats(games_played=self.games_played + 1, team_wins=wins)


@dataclass(frozen=True)
class GameState:
    player_order: Tuple[Role, ...] = DEFAULT_PLAYER_ORDER
    players: Mapping[Role, Player] = field(default_factory=dict)
    dealer: Optional[Role] = None
    current_player: Optional[Role] = None
    current_phase: Phase = Phase.LOBBY
    deck: Tuple[Card, ...] = ()
    kitty: Tuple[Card, ...] = ()
    up_card: Optional[Card] = None
    trump_suit: Optional[Suit] = None
    maker_team: Optional[str] = None
    player_who_called_trump: Optional[Role] = None
    going_alone: bool = False
    player_going_alone: Optional[Role] = None
    partner_sitting_out: Optional[Role] = None
    trick_leader: Optional[Role] = None
    current_trick: Tuple[TrickPlay, ...] = ()
    tricks: Tuple[CompletedTrick, ...] = ()
    scores: Mapping[str, int] = field(default_factory=zero_scores)
    match_stats: MatchStats = field(default_factory=MatchStats)
    messages: Tuple[Message, ...] = ()
    initial_dealer_for_session: Optional[Role] = None
    game_over: bool = False
    winning_team: Optional[str] = None

    # Mappings are read-only views; states compare by value but are not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        for name in ("player_order", "deck", "kitty", "current_trick", "tricks", "messages"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        object.__setattr__(self, "players", MappingProxyType(dict(self.players)))
        object.__setattr__(self, "scores", MappingProxyType(dict(self.scores)))

    def player(self, role: Role) -> Player:
        try:
            return self.players[role]
        except KeyError as exc:
            raise InvalidState(f"Player {role} not found in players.") from exc

    def active_roles(self) -> Tuple[Role, ...]:
        return active_roles(self.player_order, self.partner_sitting_out)

    def next_active(self, role: Role) -> Role:
        return next_role(role, self.player_order, skip=self.partner_sitting_out)

    def team_tricks(self, team: str) -> int:
        return sum(self.players[role].tricks_won for role in team_members(team) if role in self.players)

    def with_player(self, player: Player) -> "GameState":
        players = dict(self.players)
        players[player.role] = player
        return replace(self, players=players)

    def with_messages(self, *messages: Message) -> "GameState":
        return replace(self, messages=self.messages + messages)


def new_game(
    player_order: Sequence[Role] = DEFAULT_PLAYER_ORDER,
    *,
    dealer: Optional[Role] = Role.SOUTH,
) -> GameState:
    """Return a LOBBY state with an empty seat for every role."""
    return GameState(
        player_order=tuple(player_order),
        players=fresh_players(player_order),
        dealer=dealer,
        messages=(GameMessage("New game created. Waiting for players..."),),
    )


def validate_setup(state: GameState) -> None:
    if not state.player_order:
        raise InvalidState("player_order must be a non-empty sequence.")
    missing = [role for role in state.player_order if role not in state.players]
    if missing:
        raise InvalidState(f"Players missing from players: {', '.join(map(str, missing))}.")
    if state.dealer is not None and state.dealer not in state.player_order:
        raise InvalidState(f"Dealer {state.dealer} not found in player_order.")


def require_phase(state: GameState, *phases: Phase) -> None:
    if state.current_phase not in phases:
        expected = " or ".join(str(phase) for phase in phases)
        raise InvalidState(f"Action not allowed in phase {state.current_phase}. Expected {expected}.")


def require_turn(state: GameState, player: Role) -> None:
    if player is not state.current_player:
        raise OutOfTurn(player, state.current_player)


def accounted_cards(state: GameState) -> List[Card]:
    """Every card the hand knows about: deck, kitty, up-card, hands and tricks."""
    cards: List[Card] = list(state.deck) + list(state.kitty)
    if state.up_card is not None:
        cards.append(state.up_card)
    for player in state.players.values():
        cards.extend(player.hand)
    cards.extend(play.card for play in state.current_trick)
    for trick in state.tricks:
        cards.extend(play.card for play in trick.cards)
    return cards


def fresh_players(roles: Iterable[Role]) -> dict[Role, Player]:
    return {role: Player(role) for role in roles}
