"""Blackjack CLI input handling.

Reads the player's choices with click prompts so invalid input is rejected
and asked again.
"""

from typing import Optional, Sequence, Tuple

import click

from blackjack_sim.core.hand import AvailableState, BettingState
from .render import CLIRenderer


class CLIInputHandler:
    """CLI input handler.

    Converts terminal input into an offered action plus an optional stake.
    """

    @staticmethod
    def choose_action(states: Sequence[AvailableState],
                      default_amount: float) -> Optional[Tuple[AvailableState, Optional[float]]]:
        """Prompt for one of the offered actions.

        Args:
            states: actions on offer
            default_amount: stake suggested for betting actions

        Returns:
            The chosen state and its stake (None for non-betting actions),
            or None when the player quits.

        Raises:
            click.Abort: input was closed
        """
        click.echo(CLIRenderer.render_actions(states))
        choice = click.prompt("Choose", type=click.IntRange(1, len(states) + 1))
        if choice == len(states) + 1:
            return None

        state = states[choice - 1]
        amount = None
        if isinstance(state, BettingState):
            amount = click.prompt("Amount", type=click.FloatRange(min=0), default=default_amount)
        return state, amount
