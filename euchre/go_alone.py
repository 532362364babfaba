"""The maker's decision to play a lone hand."""

from __future__ import annotations

import logging
from dataclasses import replace

from .errors import InvalidGoAloneAttempt
from .messages import GameMessage
from .seating import Role, next_role, partner_of
from .state import GameState, Phase

logger = logging.getLogger(__name__)


def handle_go_alone_decision(state: GameState, player: Role, alone: bool) -> GameState:
    if state.current_phase is not Phase.AWAITING_GO_ALONE:
        raise InvalidGoAloneAttempt(f"Cannot decide to go alone in phase {state.current_phase}.")
    if player is not state.player_who_called_trump:
        raise InvalidGoAloneAttempt(f"Only {state.player_who_called_trump} may decide to go alone.")
    if state.dealer is None:
        raise InvalidGoAloneAttempt("No dealer to lead after.")

    sitting_out = partner_of(player) if alone else None
    leader = next_role(state.dealer, state.player_order, skip=sitting_out)
    if alone:
        logger.info("%s is going alone; %s sits out", player, sitting_out)
        announcement = GameMessage(f"{player} is going alone! {sitting_out} will sit out this hand.", important=True)
    else:
        announcement = GameMessage(f"{player} will play with their partner.")

    updated = replace(
        state,
        going_alone=alone,
        player_going_alone=player if alone else None,
        partner_sitting_out=sitting_out,
        current_phase=Phase.PLAYING,
        current_player=leader,
        trick_leader=leader,
        current_trick=(),
    )
    return updated.with_messages(
        announcement,
        GameMessage(f"Starting play. {leader} leads the first trick."),
    )
