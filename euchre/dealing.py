"""Dealer rotation, deck creation and dealing."""

from __future__ import annotations

import logging
from dataclasses import replace
from random import Random
from typing import Optional

from .deck import cards_needed, deal_blocks, deal_round_robin, shuffled_deck
from .errors import InsufficientCards
from .messages import GameMessage
from .rules_schema import DEFAULT_RULES, RuleSet
from .seating import Role, next_role
from .state import GameState, Phase, validate_setup

logger = logging.getLogger(__name__)


def start_new_hand(state: GameState, *, rng: Optional[Random] = None) -> GameState:
    """Rotate the dealer and prepare a fresh shuffled deck for the next hand.

    The first call of a session records the current dealer as
    ``initial_dealer_for_session``; later calls never overwrite it.
    """
    validate_setup(state)
    order = state.player_order
    initial = state.initial_dealer_for_session
    current_dealer = state.dealer if state.dealer is not None else order[0]
    if initial is None:
        initial = current_dealer
        logger.info("First hand of session; initial dealer is %s", initial)
    dealer = next_role(current_dealer, order)
    return _reset_hand(
        state,
        dealer=dealer,
        initial_dealer=initial,
        rng=rng,
        text=f"New hand. {dealer} deals.",
    )


def redeal(state: GameState, *, rng: Optional[Random] = None) -> GameState:
    """Throw in the hand and deal again with the same dealer."""
    validate_setup(state)
    dealer = state.dealer if state.dealer is not None else state.player_order[0]
    initial = state.initial_dealer_for_session if state.initial_dealer_for_session is not None else dealer
    return _reset_hand(
        state,
        dealer=dealer,
        initial_dealer=initial,
        rng=rng,
        text=f"Hand thrown in. {dealer} deals again.",
    )


def _reset_hand(
    state: GameState,
    *,
    dealer: Role,
    initial_dealer: Role,
    rng: Optional[Random],
    text: str,
) -> GameState:
    order = state.player_order
    first = next_role(dealer, order)
    players = {role: replace(player, hand=(), tricks_won=0) for role, player in state.players.items()}

    logger.debug("Hand reset: dealer=%s first=%s", dealer, first)
    updated = replace(
        state,
        dealer=dealer,
        initial_dealer_for_session=initial_dealer,
        current_player=first,
        current_phase=Phase.DEALING,
        deck=tuple(shuffled_deck(rng)),
        kitty=(),
        up_card=None,
        trump_suit=None,
        maker_team=None,
        player_who_called_trump=None,
        going_alone=False,
        player_going_alone=None,
        partner_sitting_out=None,
        trick_leader=None,
        current_trick=(),
        tricks=(),
        players=players,
    )
    return updated.with_messages(GameMessage(text))


def deal_cards(state: GameState, *, rules: RuleSet = DEFAULT_RULES) -> GameState:
    """Deal five cards to every seat, set aside the kitty and turn the up-card."""
    validate_setup(state)
    order = state.player_order
    needed = cards_needed(len(order))
    if len(state.deck) < needed:
        raise InsufficientCards(needed, len(state.deck))

    if rules.dealing.style == "round_robin":
        dealer = state.dealer if state.dealer is not None else order[-1]
        start = order.index(next_role(dealer, order))
        seats = order[start:] + order[:start]
        hands, rest = deal_round_robin(state.deck, len(seats))
    else:
        seats = order
        hands, rest = deal_blocks(state.deck, len(seats))

    players = dict(state.players)
    for role, hand in zip(seats, hands):
        players[role] = replace(players[role], hand=tuple(hand), tricks_won=0)

    up_card = rest[-1]
    first = next_role(state.dealer, order) if state.dealer is not None else order[0]
    logger.info("Dealt %d hands (%s); up-card %s", len(seats), rules.dealing.style, up_card)
    updated = replace(
        state,
        players=players,
        deck=(),
        kitty=tuple(rest[:-1]),
        up_card=up_card,
        current_player=first,
        current_phase=Phase.ORDER_UP_ROUND1,
    )
    return updated.with_messages(
        GameMessage(f"Cards dealt. Up-card is {up_card}."),
        GameMessage(f"{first}'s turn to order up or pass."),
    )
