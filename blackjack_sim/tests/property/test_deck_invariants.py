"""
Property-based tests for the deck inventory and hand settlement.

Uses hypothesis to drive decks and hands through arbitrary compositions and
action sequences, checking the counting and payout invariants hold in every
case.
"""

import random

import pytest
from hypothesis import given, settings, strategies as st

from blackjack_sim.core.deck import Deck, Suit
from blackjack_sim.core.hand import Hand, HandStatus

# Hypothesis strategies
suits_strategy = st.lists(st.sampled_from(list(Suit)), min_size=1, max_size=4, unique=True)
denominations_strategy = st.lists(st.integers(min_value=1, max_value=13), min_size=1, max_size=13, unique=True)
packs_strategy = st.integers(min_value=1, max_value=4)
seed_strategy = st.integers(min_value=0, max_value=2 ** 32 - 1)

ONE_WEIGHTS = {value: 1 for value in range(1, 11)}


def _assert_inventory_consistent(deck: Deck) -> None:
    total = 0
    for record in deck._inventory:
        assert record.remaining_count == sum(record.suit_counts)
        assert all(0 <= count <= deck.number_of_packs for count in record.suit_counts)
        total += record.remaining_count
    assert total == deck.get_cards_remaining()


@pytest.mark.property_test
@given(suits_strategy, denominations_strategy, packs_strategy,
       st.integers(min_value=0, max_value=10), seed_strategy,
       st.integers(min_value=0, max_value=150))
def test_inventory_counts_stay_consistent(suits, denominations, packs, threshold, seed, draws):
    """Counts stay in sync and every drawn card belongs to the configured composition."""
    deck = Deck(suits, denominations, packs, threshold, rng=random.Random(seed))
    full_size = len(suits) * len(denominations) * packs

    for _ in range(draws):
        card = deck.draw_card()
        assert card.suit in suits
        assert card.denomination in denominations
        assert 0 <= deck.get_cards_remaining() < full_size
        _assert_inventory_consistent(deck)

    assert deck.get_weighted_sum(ONE_WEIGHTS) == deck.get_cards_remaining()


@pytest.mark.property_test
@given(suits_strategy, denominations_strategy, packs_strategy, seed_strategy)
def test_full_pass_draws_each_physical_card_once(suits, denominations, packs, seed):
    """Without a reshuffle, one pass through the deck yields exactly its composition."""
    deck = Deck(suits, denominations, packs, 0, rng=random.Random(seed))
    full_size = deck.get_cards_remaining()

    drawn = [deck.draw_card() for _ in range(full_size)]
    assert deck.is_empty
    for suit in suits:
        for denomination in denominations:
            matching = [card for card in drawn if card.suit is suit and card.denomination == denomination]
            assert len(matching) == packs


@pytest.mark.property_test
@given(seed_strategy, st.integers(min_value=0, max_value=40))
def test_probability_is_a_cumulative_distribution(seed, draws):
    deck = Deck(number_of_packs=2, rng=random.Random(seed))
    for _ in range(draws):
        deck.draw_card()

    probabilities = [deck.get_probability_of_getting_less_than_or_equal_to(v) for v in range(0, 11)]
    assert probabilities[0] == 0
    assert probabilities[-1] == pytest.approx(1)
    assert all(a <= b for a, b in zip(probabilities, probabilities[1:]))
    assert 1 <= deck.get_expectation() <= 10


@pytest.mark.property_test
@given(seed_strategy, st.integers(min_value=21, max_value=31), st.integers(min_value=0, max_value=6))
def test_best_value_never_busts_a_live_hand(seed, value_limit, extra_cards):
    """Promoting aces never takes the best value over the limit unless the hand is already bust."""
    deck = Deck(number_of_packs=4, rng=random.Random(seed))
    hand = Hand(deck, value_limit)
    for _ in range(extra_cards):
        hand.draw_card(deck)

    minimum = hand.get_hand_min_value()
    best = hand.get_best_hand_value()
    assert minimum == sum(card.value for card in hand.cards)
    assert (best - minimum) % 10 == 0
    assert 0 <= best - minimum <= 10 * hand.optional_tens
    if minimum > value_limit:
        assert best == minimum
        assert hand.status is HandStatus.BUST
    else:
        assert best <= value_limit
        assert hand.status is HandStatus.NOT_BETTED


@pytest.mark.property_test
@settings(max_examples=200)
@given(seed_strategy,
       st.integers(min_value=0, max_value=100),
       st.lists(st.sampled_from(["hit", "stick", "surrender", "double"]), max_size=5),
       st.integers(min_value=2, max_value=30),
       st.booleans())
def test_payout_is_a_known_multiple_of_the_stake(seed, bet, actions, dealer_value, dealer_blackjack):
    """Whatever the play, settlement pays 0, half, one, two or two and a half stakes."""
    deck = Deck(rng=random.Random(seed))
    hand = Hand(deck)
    if hand.status is HandStatus.NOT_BETTED:
        hand.place_bet(bet)

    for action in actions:
        if hand.status is not HandStatus.IN_PLAY:
            break
        if action == "hit":
            hand.hit(deck)
        elif action == "stick":
            hand.stick()
        elif action == "surrender":
            hand.surrender()
        else:
            hand.double(deck)
    if hand.status is HandStatus.IN_PLAY:
        hand.stick()

    stake = hand.bet
    winnings = hand.get_winnings(dealer_value, dealer_blackjack)
    assert winnings in {0, stake / 2, stake, stake * 2, stake * 5 / 2}
    assert hand.status is HandStatus.FINISHED
    assert hand.available_states(deck)[0].name == "Create New Hand"
