"""Trump selection: ordering up, the dealer's discard and calling trump."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Union

from .cards import Card, Suit, parse_suit
from .errors import CardNotInHand, IllegalTrumpCall, InvalidState, OutOfTurn
from .messages import GameMessage
from .seating import Role, next_role, team_of
from .state import GameState, Phase, require_phase, require_turn

logger = logging.getLogger(__name__)


def handle_order_up_decision(state: GameState, player: Role, order_up: bool) -> GameState:
    """Resolve a first-round decision on the up-card.

    Ordering up makes the up-card's suit trump and hands the card to the
    dealer, who must then discard. When the dealer passes as well, bidding
    moves to the second round starting left of the dealer.
    """
    require_phase(state, Phase.ORDER_UP_ROUND1)
    require_turn(state, player)
    dealer = _require_dealer(state)

    if order_up:
        if state.up_card is None:
            raise InvalidState("No up-card to order up.")
        trump = state.up_card.suit
        dealer_player = state.player(dealer)
        logger.info("%s ordered up %s; trump is %s", player, state.up_card, trump)
        updated = replace(
            state,
            trump_suit=trump,
            maker_team=team_of(player),
            player_who_called_trump=player,
            up_card=None,
            current_phase=Phase.AWAITING_DEALER_DISCARD,
            current_player=dealer,
        ).with_player(replace(dealer_player, hand=dealer_player.hand + (state.up_card,)))
        return updated.with_messages(
            GameMessage(f"{player} ordered up."),
            GameMessage(f"Trump is {trump}! Called by {player}.", important=True),
            GameMessage(f"{dealer} (dealer) must discard a card."),
        )

    if player is dealer:
        first = next_role(dealer, state.player_order)
        logger.debug("Up-card turned down; second round starts with %s", first)
        updated = replace(state, current_phase=Phase.ORDER_UP_ROUND2, current_player=first)
        return updated.with_messages(
            GameMessage(f"{player} passed."),
            GameMessage("Up-card turned down. Starting round 2 of bidding."),
            GameMessage(f"{first}'s turn to call trump or pass."),
        )

    following = next_role(player, state.player_order)
    updated = replace(state, current_player=following)
    return updated.with_messages(
        GameMessage(f"{player} passed."),
        GameMessage(f"{following}'s turn to order up or pass."),
    )


def handle_dealer_discard(state: GameState, dealer: Role, card: Card) -> GameState:
    """Move one card from the dealer's hand into the kitty."""
    require_phase(state, Phase.AWAITING_DEALER_DISCARD)
    if dealer is not state.dealer:
        raise OutOfTurn(dealer, state.dealer)
    require_turn(state, dealer)
    dealer_player = state.player(dealer)
    if not dealer_player.holds(card):
        raise CardNotInHand(dealer, card)

    caller = state.player_who_called_trump
    logger.debug("%s discarded %s", dealer, card)
    updated = replace(
        state,
        kitty=state.kitty + (card,),
        current_phase=Phase.AWAITING_GO_ALONE,
        current_player=caller,
    ).with_player(dealer_player.without(card))
    return updated.with_messages(
        GameMessage(f"{dealer} discarded a card."),
        GameMessage(f"{caller}, do you want to go alone?"),
    )


def handle_call_trump_decision(
    state: GameState,
    player: Role,
    suit: Optional[Union[Suit, str]],
) -> GameState:
    """Resolve a second-round decision; ``suit=None`` is a pass.

    The turned-down suit may not be named. When the dealer passes too the
    hand is thrown in and the phase becomes ``BETWEEN_HANDS``.
    """
    require_phase(state, Phase.ORDER_UP_ROUND2)
    require_turn(state, player)
    dealer = _require_dealer(state)

    if suit is None:
        if player is dealer:
            logger.info("All players passed in round 2; hand will be redealt")
            updated = replace(state, current_phase=Phase.BETWEEN_HANDS)
            return updated.with_messages(
                GameMessage(f"{player} passed."),
                GameMessage("Everyone passed. Redealing...", important=True),
            )
        following = next_role(player, state.player_order)
        updated = replace(state, current_player=following)
        return updated.with_messages(
            GameMessage(f"{player} passed."),
            GameMessage(f"{following}'s turn to call trump or pass."),
        )

    trump = parse_suit(suit)
    turned_down = state.up_card
    if turned_down is not None and trump is turned_down.suit:
        raise IllegalTrumpCall(trump)

    logger.info("%s called %s as trump", player, trump)
    kitty = state.kitty + (turned_down,) if turned_down is not None else state.kitty
    updated = replace(
        state,
        trump_suit=trump,
        maker_team=team_of(player),
        player_who_called_trump=player,
        kitty=kitty,
        up_card=None,
        current_phase=Phase.AWAITING_GO_ALONE,
        current_player=player,
    )
    return updated.with_messages(
        GameMessage(f"{player} called {trump} as trump!", important=True),
        GameMessage(f"{player}, do you want to go alone?"),
    )


def _require_dealer(state: GameState) -> Role:
    if state.dealer is None or state.dealer not in state.player_order:
        raise InvalidState("Dealer not found in player_order.")
    return state.dealer
