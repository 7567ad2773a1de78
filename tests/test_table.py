import pytest

from holdem.evaluator import HandCategory
from holdem.events import EventChannel
from holdem.models import DEFAULT_NAMES, EventKind, Personality, TableConfig
from holdem.table import build_table

from .helpers import create_table, give_cards, rig_ranks


def test_build_table_seats_players_with_fixed_stack_and_names():
    table, _, _ = create_table(players=4, starting_stack=500)
    assert [player.name for player in table.players] == list(DEFAULT_NAMES[:4])
    assert all(player.stack == 500 for player in table.players)
    assert table.dealer is table.players[0]
    assert len(table.deck) == 52


@pytest.mark.parametrize("count", [1, 11])
def test_build_table_rejects_player_count_out_of_range(count):
    with pytest.raises(ValueError, match="between 2 and 10"):
        build_table(TableConfig(players=count), EventChannel())


def test_build_table_validates_personalities_and_names():
    with pytest.raises(ValueError, match="Personalities"):
        build_table(TableConfig(players=3, personalities=[Personality.CAUTIOUS]), EventChannel())
    with pytest.raises(ValueError, match="names"):
        build_table(TableConfig(players=3, names=("A", "B")), EventChannel())


def test_build_table_personalities_are_reproducible_per_seed():
    first = build_table(TableConfig(players=10, seed=9), EventChannel())
    second = build_table(TableConfig(players=10, seed=9), EventChannel())
    assert [p.personality for p in first.players] == [p.personality for p in second.players]
    assert all(1 <= p.personality <= 5 for p in first.players)


def test_only_the_configured_seat_is_human():
    table, _, _ = create_table(players=3, human_seat=0)
    assert [player.is_human for player in table.players] == [True, False, False]


def test_betting_queue_starts_after_dealer_and_wraps():
    table, _, _ = create_table(players=4)
    table.players[0].is_dealer = False
    table.players[2].is_dealer = True
    assert [player.seat for player in table.betting_queue()] == [3, 0, 1, 2]


def test_missing_dealer_is_an_error():
    table, _, _ = create_table()
    table.players[0].is_dealer = False
    with pytest.raises(RuntimeError, match="No dealer"):
        table.betting_queue()


def test_deal_players_gives_one_card_each_twice_round():
    table, _, _ = create_table(players=3)
    top = list(table.deck.cards[:6])
    table.deal_players()
    # Seat 0 deals, so seat 1 gets the first card and seat 0 the third.
    assert table.players[1].hand == [top[0], top[3]]
    assert table.players[2].hand == [top[1], top[4]]
    assert table.players[0].hand == [top[2], top[5]]


def test_flop_turn_and_river_burn_one_card_each():
    table, _, _ = create_table()
    table.deal_flop()
    assert len(table.community) == 3
    assert len(table.deck.discards) == 4
    table.deal_turn_or_river()
    table.deal_turn_or_river()
    assert len(table.community) == 5
    assert len(table.deck.discards) == 8


def test_ten_seat_hand_fits_in_one_deck():
    table, _, _ = create_table(players=10)
    table.reset()
    table.deal_players()
    table.deal_flop()
    table.deal_turn_or_river()
    table.deal_turn_or_river()
    assert len(table.deck) == 52 - 28


def test_reset_clears_hand_state():
    table, _, _ = create_table()
    table.deal_players()
    table.deal_flop()
    table.evaluate_hands()
    table.pot = 120
    table.players[1].fold_cards()
    table.players[2].current_bet = 40

    table.reset()

    assert table.community == []
    assert table.pot == 0
    assert table.ranks == {}
    assert len(table.deck) == 52
    for player in table.players:
        assert player.hand == []
        assert player.in_hand
        assert player.current_bet == 0


def test_evaluate_hands_ranks_only_live_players_by_seat():
    table, _, _ = create_table()
    give_cards(table.players[0], ["2h", "2d"])
    give_cards(table.players[1], ["Ah", "Kd"])
    table.players[2].fold_cards()
    ranks = table.evaluate_hands()
    assert ranks == {0: HandCategory.PAIR, 1: HandCategory.HIGH_CARD}


def test_award_pot_pays_lowest_category_code():
    table, _, recorder = create_table()
    rig_ranks(table, [HandCategory.PAIR, HandCategory.FLUSH, HandCategory.TWO_PAIR])
    table.pot = 300

    winner = table.award_pot_to_winner()

    assert winner is table.players[1]
    assert table.players[1].stack == 800
    assert table.pot == 0
    assert recorder.events[-1].kind == EventKind.WIN
    assert recorder.events[-1].text == "Player Phil won 300 dollars"


def test_award_pot_tie_goes_to_first_in_acting_order():
    table, _, _ = create_table()
    rig_ranks(table, [HandCategory.PAIR, HandCategory.HIGH_CARD, HandCategory.PAIR])
    table.pot = 90
    assert table.award_pot_to_winner() is table.players[2]


def test_award_pot_with_nobody_in_hand_keeps_pot():
    table, _, recorder = create_table()
    for player in table.players:
        player.fold_cards()
    table.pot = 60
    assert table.award_pot_to_winner() is None
    assert table.pot == 60
    assert recorder.texts()[-1] == "No winner, pot remains"


def test_set_next_dealer_moves_one_seat_and_wraps():
    table, _, _ = create_table(players=3)
    assert table.set_next_dealer() is table.players[1]
    table.set_next_dealer()
    assert table.set_next_dealer() is table.players[0]
    assert sum(player.is_dealer for player in table.players) == 1


def test_dealer_rotation_skips_busted_seat_before_removal():
    table, _, recorder = create_table(players=4)
    table.players[1].stack = 0

    table.set_next_dealer()
    removed = table.remove_busted()

    assert [player.name for player in removed] == ["Phil"]
    assert [player.name for player in table.players] == ["You", "Daniel", "Johnny"]
    assert table.dealer.name == "Daniel"
    assert sum(player.is_dealer for player in table.players) == 1
    assert "Player Phil is out of the game" in recorder.texts()


def test_remove_player_by_name():
    table, _, _ = create_table()
    assert table.remove_player("Daniel") is not None
    assert table.remove_player("Nobody") is None
    assert [player.name for player in table.players] == ["You", "Phil"]
