"""Narration events appended to ``GameState.messages``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Mapping, Union

from .cards import Card
from .seating import Role


@dataclass(frozen=True)
class GameMessage:
    kind: ClassVar[str] = "game"

    text: str
    important: bool = False


@dataclass(frozen=True)
class PlayMessage:
    kind: ClassVar[str] = "play"

    player: Role
    card: Card
    text: str
    important: bool = False


@dataclass(frozen=True)
class TrickMessage:
    kind: ClassVar[str] = "trick"

    winner: Role
    team: str
    text: str
    important: bool = True


@dataclass(frozen=True)
class ScoreMessage:
    kind: ClassVar[str] = "score"

    team: str
    points: int
    outcome: str
    text: str
    important: bool = True


@dataclass(frozen=True)
class ScoreSummaryMessage:
    kind: ClassVar[str] = "score_summary"

    scores: Mapping[str, int] = field(default_factory=dict)
    text: str = ""
    important: bool = True


@dataclass(frozen=True)
class GameOverMessage:
    kind: ClassVar[str] = "game_over"

    team: str
    text: str
    important: bool = True


Message = Union[
    GameMessage,
    PlayMessage,
    TrickMessage,
    ScoreMessage,
    ScoreSummaryMessage,
    GameOverMessage,
]
