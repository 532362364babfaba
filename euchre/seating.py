"""Seats, partnerships and turn rotation."""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional, Sequence, Union

from .errors import InvalidPayload


class Role(Enum):
    NORTH = auto()
    EAST = auto()
    SOUTH = auto()
    WEST = auto()

    def __str__(self) -> str:
        return self.name.lower()


DEFAULT_PLAYER_ORDER: tuple[Role, ...] = (Role.NORTH, Role.EAST, Role.SOUTH, Role.WEST)

NORTH_SOUTH = "north+south"
EAST_WEST = "east+west"
TEAMS: tuple[str, str] = (NORTH_SOUTH, EAST_WEST)

PARTNERS: dict[Role, Role] = {
    Role.NORTH: Role.SOUTH,
    Role.SOUTH: Role.NORTH,
    Role.EAST: Role.WEST,
    Role.WEST: Role.EAST,
}


def parse_role(value: Union[Role, str]) -> Role:
    if isinstance(value, Role):
        return value
    try:
        return Role[str(value).strip().upper()]
    except KeyError as exc:
        raise InvalidPayload(f"Unknown role: {value!r}") from exc


def partner_of(role: Role) -> Role:
    return PARTNERS[role]


def team_of(role: Role) -> str:
    return NORTH_SOUTH if role in (Role.NORTH, Role.SOUTH) else EAST_WEST


def team_members(team: str) -> tuple[Role, Role]:
    if team == NORTH_SOUTH:
        return Role.NORTH, Role.SOUTH
    if team == EAST_WEST:
        return Role.EAST, Role.WEST
    raise ValueError(f"Unknown team: {team!r}")


def opposing_team(team: str) -> str:
    if team not in TEAMS:
        raise ValueError(f"Unknown team: {team!r}")
    return EAST_WEST if team == NORTH_SOUTH else NORTH_SOUTH


def next_role(role: Role, order: Sequence[Role], skip: Optional[Role] = None) -> Role:
    """Return the seat after ``role`` in ``order``, stepping over ``skip``."""
    index = order.index(role)
    for step in range(1, len(order) + 1):
        candidate = order[(index + step) % len(order)]
        if candidate is not skip:
            return candidate
    raise ValueError("No seat left to act.")


def active_roles(order: Sequence[Role], sitting_out: Optional[Role] = None) -> tuple[Role, ...]:
    return tuple(role for role in order if role is not sitting_out)
