"""Hand scoring and game-over detection for Euchre."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from .errors import InvalidState
from .messages import GameMessage, GameOverMessage, ScoreMessage, ScoreSummaryMessage
from .rules_schema import DEFAULT_RULES, RuleSet
from .seating import TEAMS, opposing_team
from .state import TRICKS_PER_HAND, GameState, Phase, fresh_players, require_phase, zero_scores

logger = logging.getLogger(__name__)

MADE = "made"
MARCH = "march"
LONE_MARCH = "lone_march"
EUCHRED = "euchred"

TRICKS_TO_MAKE = 3


@dataclass(frozen=True)
class HandScoreResult:
    outcome: str
    points: int
    makers_scored: bool


def score_hand(maker_tricks: int, going_alone: bool, rules: RuleSet = DEFAULT_RULES) -> HandScoreResult:
    if not 0 <= maker_tricks <= TRICKS_PER_HAND:
        raise InvalidState(f"Makers cannot take {maker_tricks} tricks.")
    points = rules.scoring
    if maker_tricks < TRICKS_TO_MAKE:
        return HandScoreResult(EUCHRED, points.euchred, makers_scored=False)
    if maker_tricks < TRICKS_PER_HAND:
        return HandScoreResult(MADE, points.made, makers_scored=True)
    if going_alone:
        return HandScoreResult(LONE_MARCH, points.lone_march, makers_scored=True)
    return HandScoreResult(MARCH, points.march, makers_scored=True)


def score_current_hand(state: GameState, *, rules: RuleSet = DEFAULT_RULES) -> GameState:
    """Award points for the finished hand, then check whether the game is over."""
    require_phase(state, Phase.SCORING)
    makers = state.maker_team
    if makers is None:
        raise InvalidState("Cannot score a hand without a maker team.")

    maker_tricks = state.team_tricks(makers)
    result = score_hand(maker_tricks, state.going_alone, rules)
    team = makers if result.makers_scored else opposing_team(makers)
    scores = dict(state.scores)
    scores[team] = scores.get(team, 0) + result.points

    if result.outcome == EUCHRED:
        text = f"{makers} were euchred! {team} score {result.points} points."
    elif result.outcome == LONE_MARCH:
        text = f"{makers} took all five tricks alone! {result.points} points."
    elif result.outcome == MARCH:
        text = f"{makers} marched! {result.points} points."
    else:
        text = f"{makers} made it with {maker_tricks} tricks. {result.points} point."
    logger.info("Hand scored: %s (%d tricks) -> %s +%d", makers, maker_tricks, team, result.points)

    summary = ", ".join(f"{name}: {scores.get(name, 0)}" for name in TEAMS)
    updated = replace(state, scores=scores).with_messages(
        ScoreMessage(team=team, points=result.points, outcome=result.outcome, text=text),
        ScoreSummaryMessage(scores=dict(scores), text=f"Score: {summary}"),
    )
    return check_game_over(updated, rules=rules)


def check_game_over(state: GameState, *, rules: RuleSet = DEFAULT_RULES) -> GameState:
    if state.game_over:
        return state
    winners = [team for team in TEAMS if state.scores.get(team, 0) >= rules.winning_score]
    if not winners:
        return replace(state, current_phase=Phase.BETWEEN_HANDS)

    # Only the scoring team gains points in a hand, so at most one team crosses.
    winner = max(winners, key=lambda team: state.scores[team])
    logger.info("Game over: %s wins %s", winner, dict(state.scores))
    updated = replace(
        state,
        game_over=True,
        winning_team=winner,
        current_phase=Phase.GAME_OVER,
        match_stats=state.match_stats.record_win(winner),
    )
    return updated.with_messages(GameOverMessage(team=winner, text=f"{winner} win the game!"))


def reset_game(state: GameState) -> GameState:
    """Start a new game at the same table, keeping the session's match stats."""
    logger.debug("Resetting game; match stats %s", state.match_stats)
    updated = replace(
        state,
        players=fresh_players(state.player_order),
        current_player=None,
        current_phase=Phase.LOBBY,
        deck=(),
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
        scores=zero_scores(),
        game_over=False,
        winning_team=None,
    )
    return updated.with_messages(GameMessage("New game started.", important=True))
