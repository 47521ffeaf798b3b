"""
Test configuration - shared pytest fixtures.

Provides:
- fresh and seeded decks
- a factory for hands with forced opening cards
- a table service on a reproducible shoe
"""

import random
from typing import Optional, Tuple

import pytest

from blackjack_sim.application import TableRulesConfig, TableService
from blackjack_sim.core.deck import Deck, Suit
from blackjack_sim.core.hand import Hand


@pytest.fixture
def deck():
    """Fresh standard 52-card deck."""
    return Deck()


@pytest.fixture
def seeded_deck():
    """Standard deck sampling from a fixed seed."""
    return Deck(rng=random.Random(1234))


@pytest.fixture
def make_hand(deck):
    """Factory for hands dealt from the ``deck`` fixture with forced cards."""
    def _make_hand(first: Tuple[Suit, int], second: Tuple[Suit, int],
                   value_limit: int = 21, bet: Optional[float] = None) -> Hand:
        hand = Hand(deck, value_limit, first, second)
        if bet is not None:
            hand.place_bet(bet)
        return hand
    return _make_hand


@pytest.fixture
def table():
    """Table on a seeded single-deck shoe."""
    rules = TableRulesConfig(number_of_packs=1, reset_when_remaining=0,
                             starting_balance=100, default_bet=10, random_seed=7)
    return TableService(rules)


def pytest_configure(config):
    """Register the markers used across the suite."""
    config.addinivalue_line("markers", "unit: unit tests")
    config.addinivalue_line("markers", "fast: fast tests")
    config.addinivalue_line("markers", "property_test: property based tests")
    config.addinivalue_line("markers", "integration: integration tests")
