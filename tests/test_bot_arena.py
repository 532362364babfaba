from collections import Counter

from bots.baseline_greedy import GreedyBot
from bots.bot_arena import main, play_game, run_match
from bots.random_bot import RandomBot
from euchre.deck import build_deck
from euchre.seating import TEAMS, Role
from euchre.state import Phase, accounted_cards


def test_play_game_conserves_cards_and_finishes():
    bots = {Role.NORTH: GreedyBot(), Role.SOUTH: GreedyBot(), Role.EAST: RandomBot(seed=1), Role.WEST: RandomBot(seed=2)}
    full_deck = Counter(build_deck())
    previous_scores = {team: 0 for team in TEAMS}
    states = []

    def observe(state):
        assert Counter(accounted_cards(state)) == full_deck
        for team in TEAMS:
            assert state.scores[team] >= previous_scores[team]
            previous_scores[team] = state.scores[team]
        if state.current_phase is Phase.PLAYING:
            assert state.current_player is not state.partner_sitting_out
        states.append(state)

    final = play_game(bots, seed=11, observer=observe)

    assert states
    assert final.game_over
    assert final.current_phase is Phase.GAME_OVER
    assert final.scores[final.winning_team] >= 10
    assert final.match_stats.games_played == 1


def test_play_game_is_reproducible():
    def bots():
        return {role: RandomBot(seed=index) for index, role in enumerate(Role)}

    first = play_game(bots(), seed=5)
    second = play_game(bots(), seed=5)
    assert first.scores == second.scores
    assert first.winning_team == second.winning_team


def test_run_match_executes():
    results = run_match(GreedyBot(), RandomBot(seed=3), n_games=2, seed=7)
    assert results["games_played"] == 2
    assert sum(results["team_wins"].values()) == 2
    assert len(results["history"]) == 2


def test_arena_cli(capsys):
    main(["--n", "1", "--seed", "3", "--ns", "random", "--ew", "greedy"])
    out = capsys.readouterr().out
    assert "Games played: 1" in out
