"""Blackjack CLI rendering module.

Turns table snapshots into terminal text, keeping display logic out of the
rules engine.
"""

from typing import Sequence

from blackjack_sim.application import TableSnapshot
from blackjack_sim.core.hand import AvailableState, GameStateCategory


class CLIRenderer:
    """CLI renderer.

    Every method is a pure function of its arguments.
    """

    @staticmethod
    def render_header(round_number: int, balance: float) -> str:
        """Render the round banner.

        Args:
            round_number: 1-based round counter
            balance: player's balance at the start of the round

        Returns:
            Formatted banner.
        """
        return f"\n=== Round {round_number} === (balance: {CLIRenderer.format_money(balance)})"

    @staticmethod
    def render_table(snapshot: TableSnapshot) -> str:
        """Render dealer, player and deck information.

        Args:
            snapshot: table snapshot

        Returns:
            Formatted table.
        """
        lines = [
            f"Dealer hand: {CLIRenderer._format_cards(snapshot.dealer_cards)} "
            f"({snapshot.dealer_best_value}, {snapshot.dealer_status.value})",
            f"Your hand:   {CLIRenderer._format_cards(snapshot.player_cards)} "
            f"({snapshot.player_best_value}, {snapshot.player_status.value})",
            f"Bet: {CLIRenderer.format_money(snapshot.player_bet)}   "
            f"Balance: {CLIRenderer.format_money(snapshot.balance)}"
            f"{CLIRenderer._format_change(snapshot.last_winnings)}",
            CLIRenderer.render_deck_info(snapshot),
        ]
        return "\n".join(lines)

    @staticmethod
    def render_deck_info(snapshot: TableSnapshot) -> str:
        """Render the deck statistics line."""
        return (f"Deck: {snapshot.cards_remaining} cards left, "
                f"count {snapshot.hi_low_count:+g}, "
                f"expected card {snapshot.expectation:.4f}, "
                f"bust chance {snapshot.bust_probability:.2%}")

    @staticmethod
    def render_actions(states: Sequence[AvailableState]) -> str:
        """Render the numbered action menu, with Quit as the last entry."""
        lines = ["Available actions:"]
        for i, state in enumerate(states):
            suffix = " (stake)" if state.category is GameStateCategory.BETTING else ""
            lines.append(f"  {i + 1}. {state.name}{suffix}")
        lines.append(f"  {len(states) + 1}. Quit")
        return "\n".join(lines)

    @staticmethod
    def render_winnings(winnings: float) -> str:
        """Render the outcome of a settled hand."""
        if winnings > 0:
            return f"You receive {CLIRenderer.format_money(winnings)}."
        return "You receive nothing this round."

    @staticmethod
    def render_summary(rounds_played: int, starting_balance: float, balance: float) -> str:
        """Render the end-of-session summary."""
        return "\n".join([
            "",
            "=== Session over ===",
            f"Rounds played: {rounds_played}",
            f"Final balance: {CLIRenderer.format_money(balance)}"
            f"{CLIRenderer._format_change(balance - starting_balance)}",
        ])

    @staticmethod
    def format_money(amount: float) -> str:
        """Format an amount without a trailing .0 for whole numbers."""
        return f"{amount:.0f}" if float(amount).is_integer() else f"{amount:.2f}"

    @staticmethod
    def _format_cards(cards: Sequence[str]) -> str:
        return " ".join(cards) if cards else "-"

    @staticmethod
    def _format_change(change: float) -> str:
        if change > 0:
            return f" (+{CLIRenderer.format_money(change)})"
        if change < 0:
            return f" ({CLIRenderer.format_money(change)})"
        return ""

