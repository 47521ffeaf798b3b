"""User interfaces for the blackjack simulator."""
