import pytest

from euchre.cards import Card, Rank, Suit
from euchre.errors import CardNotInHand, InvalidState, MustFollowSuit, OutOfTurn
from euchre.mechanics import legal_moves, sort_hand
from euchre.messages import PlayMessage, TrickMessage
from euchre.play import handle_play_card, is_valid_play, validate_play
from euchre.seating import NORTH_SOUTH, Role
from euchre.state import CompletedTrick, GameState, Phase, Player, TrickPlay


def c(rank, suit):
    return Card(rank, suit)


def playing_state(hands, *, trump=Suit.HEARTS, leader=Role.NORTH, sitting_out=None, tricks=()):
    players = {role: Player(role, tuple(hands.get(role, ()))) for role in Role}
    return GameState(
        players=players,
        dealer=Role.WEST,
        current_player=leader,
        current_phase=Phase.PLAYING,
        trump_suit=trump,
        maker_team=NORTH_SOUTH,
        player_who_called_trump=Role.NORTH,
        going_alone=sitting_out is not None,
        partner_sitting_out=sitting_out,
        trick_leader=leader,
        tricks=tricks,
    )


def test_must_follow_suit():
    state = playing_state(
        {
            Role.NORTH: [c(Rank.ACE, Suit.SPADES)],
            Role.EAST: [c(Rank.NINE, Suit.SPADES), c(Rank.KING, Suit.CLUBS)],
        }
    )
    state = handle_play_card(state, Role.NORTH, c(Rank.ACE, Suit.SPADES))
    assert state.current_player is Role.EAST

    with pytest.raises(MustFollowSuit) as excinfo:
        handle_play_card(state, Role.EAST, c(Rank.KING, Suit.CLUBS))
    assert excinfo.value.suit is Suit.SPADES
    assert not is_valid_play(state, Role.EAST, c(Rank.KING, Suit.CLUBS))
    assert is_valid_play(state, Role.EAST, c(Rank.NINE, Suit.SPADES))


def test_holding_led_suit_forbids_off_suit_card():
    state = playing_state(
        {
            Role.NORTH: [c(Rank.ACE, Suit.HEARTS)],
            Role.EAST: [c(Rank.KING, Suit.HEARTS), c(Rank.KING, Suit.CLUBS)],
        },
        trump=Suit.SPADES,
    )
    state = handle_play_card(state, Role.NORTH, c(Rank.ACE, Suit.HEARTS))

    with pytest.raises(MustFollowSuit) as excinfo:
        handle_play_card(state, Role.EAST, c(Rank.KING, Suit.CLUBS))
    assert excinfo.value.suit is Suit.HEARTS
    assert state.player(Role.EAST).hand == (c(Rank.KING, Suit.HEARTS), c(Rank.KING, Suit.CLUBS))


def test_led_left_bower_calls_for_trump():
    state = playing_state(
        {
            Role.NORTH: [c(Rank.JACK, Suit.DIAMONDS)],
            Role.EAST: [c(Rank.NINE, Suit.DIAMONDS), c(Rank.TEN, Suit.HEARTS)],
        }
    )
    state = handle_play_card(state, Role.NORTH, c(Rank.JACK, Suit.DIAMONDS))

    with pytest.raises(MustFollowSuit) as excinfo:
        validate_play(state, Role.EAST, c(Rank.NINE, Suit.DIAMONDS))
    assert excinfo.value.suit is Suit.HEARTS
    validate_play(state, Role.EAST, c(Rank.TEN, Suit.HEARTS))


def test_left_bower_must_follow_trump_lead():
    state = playing_state(
        {
            Role.NORTH: [c(Rank.ACE, Suit.HEARTS)],
            Role.EAST: [c(Rank.JACK, Suit.DIAMONDS), c(Rank.KING, Suit.DIAMONDS)],
        }
    )
    state = handle_play_card(state, Role.NORTH, c(Rank.ACE, Suit.HEARTS))

    assert not is_valid_play(state, Role.EAST, c(Rank.KING, Suit.DIAMONDS))
    assert is_valid_play(state, Role.EAST, c(Rank.JACK, Suit.DIAMONDS))


def test_void_player_may_play_anything():
    state = playing_state(
        {
            Role.NORTH: [c(Rank.ACE, Suit.SPADES)],
            Role.EAST: [c(Rank.NINE, Suit.CLUBS), c(Rank.KING, Suit.DIAMONDS)],
        }
    )
    state = handle_play_card(state, Role.NORTH, c(Rank.ACE, Suit.SPADES))
    assert is_valid_play(state, Role.EAST, c(Rank.NINE, Suit.CLUBS))
    assert is_valid_play(state, Role.EAST, c(Rank.KING, Suit.DIAMONDS))


def test_play_validation_errors():
    state = playing_state({Role.NORTH: [c(Rank.ACE, Suit.SPADES)], Role.EAST: [c(Rank.NINE, Suit.SPADES)]})

    with pytest.raises(OutOfTurn):
        handle_play_card(state, Role.EAST, c(Rank.NINE, Suit.SPADES))
    with pytest.raises(CardNotInHand):
        handle_play_card(state, Role.NORTH, c(Rank.KING, Suit.SPADES))

    scoring = GameState(
        players=state.players,
        current_player=Role.NORTH,
        current_phase=Phase.SCORING,
    )
    with pytest.raises(InvalidState):
        handle_play_card(scoring, Role.NORTH, c(Rank.ACE, Suit.SPADES))


def test_bowers_win_the_trick_and_winner_leads():
    state = playing_state(
        {
            Role.NORTH: [c(Rank.ACE, Suit.HEARTS), c(Rank.NINE, Suit.CLUBS)],
            Role.EAST: [c(Rank.JACK, Suit.DIAMONDS), c(Rank.TEN, Suit.CLUBS)],
            Role.SOUTH: [c(Rank.JACK, Suit.HEARTS), c(Rank.QUEEN, Suit.CLUBS)],
            Role.WEST: [c(Rank.NINE, Suit.SPADES), c(Rank.KING, Suit.CLUBS)],
        }
    )
    state = handle_play_card(state, Role.NORTH, c(Rank.ACE, Suit.HEARTS))
    state = handle_play_card(state, Role.EAST, c(Rank.JACK, Suit.DIAMONDS))
    state = handle_play_card(state, Role.SOUTH, c(Rank.JACK, Suit.HEARTS))
    assert len(state.current_trick) == 3
    state = handle_play_card(state, Role.WEST, c(Rank.NINE, Suit.SPADES))

    assert state.current_trick == ()
    trick = state.tricks[-1]
    assert trick.winner is Role.SOUTH
    assert trick.team == NORTH_SOUTH
    assert [play.player for play in trick.cards] == [Role.NORTH, Role.EAST, Role.SOUTH, Role.WEST]
    assert state.player(Role.SOUTH).tricks_won == 1
    assert state.current_player is Role.SOUTH
    assert state.trick_leader is Role.SOUTH
    assert state.current_phase is Phase.PLAYING
    assert any(isinstance(message, TrickMessage) and message.winner is Role.SOUTH for message in state.messages)
    assert sum(isinstance(message, PlayMessage) for message in state.messages) == 4


def test_left_bower_beats_trump_ace():
    state = playing_state(
        {
            Role.NORTH: [c(Rank.ACE, Suit.HEARTS), c(Rank.NINE, Suit.CLUBS)],
            Role.EAST: [c(Rank.JACK, Suit.DIAMONDS), c(Rank.TEN, Suit.CLUBS)],
            Role.SOUTH: [c(Rank.KING, Suit.HEARTS), c(Rank.QUEEN, Suit.CLUBS)],
            Role.WEST: [c(Rank.NINE, Suit.SPADES), c(Rank.KING, Suit.CLUBS)],
        }
    )
    for role, card in (
        (Role.NORTH, c(Rank.ACE, Suit.HEARTS)),
        (Role.EAST, c(Rank.JACK, Suit.DIAMONDS)),
        (Role.SOUTH, c(Rank.KING, Suit.HEARTS)),
        (Role.WEST, c(Rank.NINE, Suit.SPADES)),
    ):
        state = handle_play_card(state, role, card)
    assert state.tricks[-1].winner is Role.EAST


def test_lone_hand_trick_has_three_plays():
    state = playing_state(
        {
            Role.NORTH: [c(Rank.ACE, Suit.CLUBS), c(Rank.NINE, Suit.HEARTS)],
            Role.EAST: [c(Rank.NINE, Suit.CLUBS), c(Rank.TEN, Suit.HEARTS)],
            Role.SOUTH: [c(Rank.KING, Suit.CLUBS), c(Rank.QUEEN, Suit.HEARTS)],
            Role.WEST: [c(Rank.TEN, Suit.CLUBS), c(Rank.KING, Suit.HEARTS)],
        },
        sitting_out=Role.SOUTH,
    )
    state = handle_play_card(state, Role.NORTH, c(Rank.ACE, Suit.CLUBS))
    assert state.current_player is Role.EAST
    state = handle_play_card(state, Role.EAST, c(Rank.NINE, Suit.CLUBS))
    assert state.current_player is Role.WEST
    state = handle_play_card(state, Role.WEST, c(Rank.TEN, Suit.CLUBS))

    assert len(state.tricks) == 1
    assert len(state.tricks[0].cards) == 3
    assert state.tricks[0].winner is Role.NORTH
    assert len(state.player(Role.SOUTH).hand) == 2


def test_fifth_trick_moves_to_scoring():
    earlier = tuple(CompletedTrick(cards=(), winner=Role.NORTH, team=NORTH_SOUTH) for _ in range(4))
    state = playing_state(
        {
            Role.NORTH: [c(Rank.ACE, Suit.CLUBS)],
            Role.EAST: [c(Rank.NINE, Suit.CLUBS)],
            Role.SOUTH: [c(Rank.KING, Suit.CLUBS)],
            Role.WEST: [c(Rank.TEN, Suit.CLUBS)],
        },
        tricks=earlier,
    )
    for role in (Role.NORTH, Role.EAST, Role.SOUTH, Role.WEST):
        state = handle_play_card(state, role, state.player(role).hand[0])

    assert len(state.tricks) == 5
    assert state.current_phase is Phase.SCORING
    assert all(not player.hand for player in state.players.values())


def test_legal_moves():
    hand = [c(Rank.NINE, Suit.SPADES), c(Rank.KING, Suit.CLUBS), c(Rank.JACK, Suit.CLUBS)]
    led_spades = (TrickPlay(Role.NORTH, c(Rank.ACE, Suit.SPADES)),)

    assert legal_moves(hand, led_spades, Suit.HEARTS) == [c(Rank.NINE, Suit.SPADES)]
    assert set(legal_moves(hand, led_spades, Suit.SPADES)) == {c(Rank.NINE, Suit.SPADES), c(Rank.JACK, Suit.CLUBS)}
    assert set(legal_moves(hand, led_spades, Suit.DIAMONDS)) == {c(Rank.NINE, Suit.SPADES)}
    assert set(legal_moves(hand[1:], led_spades, Suit.HEARTS)) == set(hand[1:])
    assert set(legal_moves(hand, (), Suit.HEARTS)) == set(hand)


def test_sort_hand_puts_trump_first():
    hand = [c(Rank.NINE, Suit.CLUBS), c(Rank.ACE, Suit.HEARTS), c(Rank.JACK, Suit.DIAMONDS), c(Rank.JACK, Suit.HEARTS)]
    assert sort_hand(hand, Suit.HEARTS) == [
        c(Rank.JACK, Suit.HEARTS),
        c(Rank.JACK, Suit.DIAMONDS),
        c(Rank.ACE, Suit.HEARTS),
        c(Rank.NINE, Suit.CLUBS),
    ]
