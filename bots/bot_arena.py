"""Simple bot arena for Euchre."""

from __future__ import annotations

import argparse
import logging
from random import Random
from typing import Callable, Dict, Iterable, Mapping, Optional

from euchre.bidding import handle_call_trump_decision, handle_dealer_discard, handle_order_up_decision
from euchre.dealing import deal_cards, redeal, start_new_hand
from euchre.go_alone import handle_go_alone_decision
from euchre.play import handle_play_card
from euchre.rules_schema import DEFAULT_RULES, RuleSet
from euchre.scoring import reset_game, score_current_hand
from euchre.seating import EAST_WEST, NORTH_SOUTH, Role, team_of
from euchre.state import GameState, Phase, new_game

from .base import BotStrategy
from .baseline_greedy import GreedyBot
from .random_bot import RandomBot

logger = logging.getLogger(__name__)

BOT_REGISTRY: Dict[str, type[BotStrategy]] = {
    "greedy": GreedyBot,
    "random": RandomBot,
}

MAX_HANDS = 500

Observer = Callable[[GameState], None]


class ArenaError(RuntimeError):
    """Raised when a game does not finish within the hand limit."""


def _step(state: GameState, bots: Mapping[Role, BotStrategy], rng: Random, rules: RuleSet) -> GameState:
    phase = state.current_phase
    if phase is Phase.BETWEEN_HANDS:
        if state.trump_suit is None:
            return deal_cards(redeal(state, rng=rng), rules=rules)
        return deal_cards(start_new_hand(state, rng=rng), rules=rules)
    if phase is Phase.SCORING:
        return score_current_hand(state, rules=rules)

    player = state.current_player
    if player is None:
        raise ArenaError(f"No player to act in phase {phase}.")
    bot = bots[player]
    if phase is Phase.ORDER_UP_ROUND1:
        return handle_order_up_decision(state, player, bot.order_up(state, player))
    if phase is Phase.AWAITING_DEALER_DISCARD:
        return handle_dealer_discard(state, player, bot.discard(state, player))
    if phase is Phase.ORDER_UP_ROUND2:
        return handle_call_trump_decision(state, player, bot.call_trump(state, player))
    if phase is Phase.AWAITING_GO_ALONE:
        return handle_go_alone_decision(state, player, bot.go_alone(state, player))
    if phase is Phase.PLAYING:
        return handle_play_card(state, player, bot.play_card(state, player))
    raise ArenaError(f"Arena cannot advance from phase {phase}.")


def play_game(
    bots: Mapping[Role, BotStrategy],
    *,
    state: Optional[GameState] = None,
    seed: Optional[int] = None,
    rng: Optional[Random] = None,
    rules: RuleSet = DEFAULT_RULES,
    max_hands: int = MAX_HANDS,
    observer: Optional[Observer] = None,
) -> GameState:
    """Play one game to completion and return the final state.

    ``observer`` is called with every intermediate state.
    """
    rng = rng or Random(seed)
    state = state or new_game()
    state = deal_cards(start_new_hand(state, rng=rng), rules=rules)
    hands = 0
    while not state.game_over:
        if state.current_phase is Phase.BETWEEN_HANDS:
            hands += 1
            if hands > max_hands:
                raise ArenaError(f"Game did not finish within {max_hands} hands.")
        state = _step(state, bots, rng, rules)
        if observer is not None:
            observer(state)
    logger.info("Game finished after %d hands: %s", hands, dict(state.scores))
    return state


def run_match(
    bot_ns: BotStrategy,
    bot_ew: BotStrategy,
    *,
    n_games: int = 10,
    seed: Optional[int] = None,
    rules: RuleSet = DEFAULT_RULES,
) -> dict:
    """Seat ``bot_ns`` north and south, ``bot_ew`` east and west, and play ``n_games``."""
    rng = Random(seed)
    bots = {role: bot_ns if team_of(role) == NORTH_SOUTH else bot_ew for role in Role}
    state = new_game()
    history = []
    for _ in range(n_games):
        state = play_game(bots, state=state, rng=rng, rules=rules)
        history.append({"scores": dict(state.scores), "winner": state.winning_team})
        state = reset_game(state)
    return {
        "games_played": state.match_stats.games_played,
        "team_wins": dict(state.match_stats.team_wins),
        "history": history,
    }


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run a bot match.")
    parser.add_argument("--ns", default="greedy", choices=BOT_REGISTRY.keys(), help="Bot for north and south.")
    parser.add_argument("--ew", default="random", choices=BOT_REGISTRY.keys(), help="Bot for east and west.")
    parser.add_argument("--n", type=int, default=10, help="Number of games to play.")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    results = run_match(BOT_REGISTRY[args.ns](), BOT_REGISTRY[args.ew](), n_games=args.n, seed=args.seed)

    wins = results["team_wins"]
    print(f"Games played: {results['games_played']}")
    print(f"{NORTH_SOUTH} ({args.ns}): {wins.get(NORTH_SOUTH, 0)} wins")
    print(f"{EAST_WEST} ({args.ew}): {wins.get(EAST_WEST, 0)} wins")


if __name__ == "__main__":
    main()
