"""Blackjack simulator tests."""
