"""Card play: validation, trick completion and turn rotation."""

from __future__ import annotations

import logging
from dataclasses import replace

from .cards import Card, effective_suit
from .errors import CardNotInHand, EuchreError, MustFollowSuit
from .messages import GameMessage, PlayMessage, TrickMessage
from .seating import Role, team_of
from .state import (
    TRICKS_PER_HAND,
    CompletedTrick,
    GameState,
    Phase,
    TrickPlay,
    require_phase,
    require_turn,
)
from .mechanics import must_follow
from .trick import winning_play

logger = logging.getLogger(__name__)


def validate_play(state: GameState, player: Role, card: Card) -> None:
    """Raise the matching ``EuchreError`` when ``player`` may not play ``card``."""
    require_turn(state, player)
    require_phase(state, Phase.PLAYING)
    hand = state.player(player).hand
    if card not in hand:
        raise CardNotInHand(player, card)
    required = must_follow(hand, state.current_trick, state.trump_suit)
    if required is not None and effective_suit(card, state.trump_suit) is not required:
        raise MustFollowSuit(required)


def is_valid_play(state: GameState, player: Role, card: Card) -> bool:
    try:
        validate_play(state, player, card)
    except EuchreError:
        return False
    return True


def handle_play_card(state: GameState, player: Role, card: Card) -> GameState:
    """Play ``card`` for ``player`` and resolve the trick once every active seat has played.

    After the fifth trick the phase becomes ``SCORING``; the caller is expected
    to score the hand next.
    """
    validate_play(state, player, card)

    trick = state.current_trick + (TrickPlay(player, card),)
    updated = replace(state, current_trick=trick).with_player(state.player(player).without(card))
    updated = updated.with_messages(PlayMessage(player, card, f"{player} plays {card}"))
    logger.debug("%s played %s", player, card)

    if len(trick) < len(state.active_roles()):
        return replace(updated, current_player=updated.next_active(player))
    return _complete_trick(updated)


def _complete_trick(state: GameState) -> GameState:
    plays = state.current_trick
    winner = winning_play(plays, state.trump_suit).player
    team = team_of(winner)
    tricks = state.tricks + (CompletedTrick(cards=plays, winner=winner, team=team),)
    winner_player = state.player(winner)
    logger.info("Trick %d won by %s (%s)", len(tricks), winner, team)

    updated = replace(
        state,
        tricks=tricks,
        current_trick=(),
        trick_leader=winner,
        current_player=winner,
    ).with_player(replace(winner_player, tricks_won=winner_player.tricks_won + 1))
    updated = updated.with_messages(TrickMessage(winner, team, f"{winner} wins the trick for {team}!"))

    if len(tricks) >= TRICKS_PER_HAND:
        return replace(updated, current_phase=Phase.SCORING)
    return updated.with_messages(GameMessage(f"{winner} leads the next trick."))
