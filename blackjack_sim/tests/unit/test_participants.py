"""
Unit tests for the Dealer policy and the Player wrapper.
"""

import pytest

from blackjack_sim.core.deck import Deck, Suit
from blackjack_sim.core.hand import Hand, HandStatus
from blackjack_sim.core.participants import Dealer, Player

H, D, C, S = Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES


def _dealer_with(deck, first, second, value_stop=17):
    # the constructor deals from its own deck so the forced cards stay available
    dealer = Dealer(Deck(), 21, value_stop)
    dealer.hand = Hand(deck, 21, first, second)
    dealer.hand.place_bet(0)
    return dealer


@pytest.mark.unit
@pytest.mark.fast
class TestDealer:

    def test_starts_in_play_with_zero_bet(self, deck):
        dealer = Dealer(deck)
        assert dealer.hand.bet == 0
        assert dealer.hand.status in (HandStatus.IN_PLAY, HandStatus.BLACKJACK)
        assert dealer.value_stop == 17

    def test_reset_hand(self, deck):
        dealer = Dealer(deck)
        old = dealer.hand
        new = dealer.reset_hand(deck)
        assert new is dealer.hand
        assert new is not old
        assert new.status in (HandStatus.IN_PLAY, HandStatus.BLACKJACK)

    def test_sticks_on_hard_stop_value(self):
        deck = Deck()
        dealer = _dealer_with(deck, (H, 10), (S, 7))
        dealer.resolve_hand(deck)
        assert dealer.hand.status is HandStatus.STUCK
        assert len(dealer.hand.cards) == 2

    def test_sticks_above_stop_value(self):
        deck = Deck()
        dealer = _dealer_with(deck, (H, 10), (S, 9))
        dealer.resolve_hand(deck)
        assert dealer.hand.status is HandStatus.STUCK
        assert dealer.hand.get_best_hand_value() == 19

    def test_hits_soft_stop_value(self):
        # only a four is left to draw after the soft 17
        deck = Deck(suits=[H, S, C], denominations=[1, 4, 6])
        dealer = _dealer_with(deck, (H, 1), (S, 6))
        for suit, denomination in ((S, 1), (C, 1), (H, 6), (C, 6), (H, 4), (S, 4)):
            deck.draw_specific_card(suit, denomination)
        dealer.resolve_hand(deck)
        assert len(dealer.hand.cards) == 3
        assert dealer.hand.get_best_hand_value() == 21
        assert dealer.hand.status is HandStatus.STUCK

    def test_draws_until_stop_value_or_bust(self, seeded_deck):
        dealer = _dealer_with(seeded_deck, (H, 2), (S, 3))
        dealer.resolve_hand(seeded_deck)
        assert dealer.hand.status in (HandStatus.STUCK, HandStatus.BUST)
        if dealer.hand.status is HandStatus.STUCK:
            assert dealer.hand.get_best_hand_value() >= 17

    def test_blackjack_is_left_alone(self):
        deck = Deck()
        dealer = _dealer_with(deck, (H, 1), (S, 12))
        assert dealer.has_blackjack
        dealer.resolve_hand(deck)
        assert dealer.hand.status is HandStatus.BLACKJACK
        assert len(dealer.hand.cards) == 2

    def test_stop_value_above_limit_rejected(self, deck):
        with pytest.raises(ValueError):
            Dealer(deck, 21, 22)


@pytest.mark.unit
@pytest.mark.fast
class TestPlayer:

    def test_defaults(self, deck):
        player = Player(deck)
        assert player.balance == 1000
        assert player.current_bet == 5
        assert player.value_limit == 21
        assert player.hand.status is HandStatus.NOT_BETTED
        assert player.deck is deck

    def test_custom_values(self, deck):
        player = Player(deck, starting_balance=50, value_limit=31, current_bet=2)
        assert player.balance == 50
        assert player.hand.value_limit == 31

    @pytest.mark.parametrize("kwargs", [{"starting_balance": -1}, {"current_bet": -5}])
    def test_negative_values_rejected(self, deck, kwargs):
        with pytest.raises(ValueError):
            Player(deck, **kwargs)
