"""
blackjack_sim - blackjack simulator rules engine with a terminal front end.
"""

__version__ = "1.0.0"
