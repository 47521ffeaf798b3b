"""Blackjack CLI game.

Terminal front end over TableService: one human player against the dealer.
"""

import logging
from dataclasses import replace
from typing import Optional

import click

from blackjack_sim.application import (
    ConfigService,
    ConfigType,
    TableService,
    configure_logging,
)
from blackjack_sim.core.exceptions import GameConfigError
from blackjack_sim.core.hand import HandStatus, WinningsState
from .input_handler import CLIInputHandler
from .render import CLIRenderer

CLI_LOGGING_PROFILE = "quiet"


class BlackjackCLI:
    """Blackjack CLI game.

    Shows the table, offers the hand's available actions and applies the
    chosen one until the player quits, runs out of money or plays the
    requested number of rounds.
    """

    def __init__(self, service: TableService):
        """Initialise the CLI.

        Args:
            service: table to play on
        """
        self.service = service
        self.logger = logging.getLogger(__name__)
        self.rounds_played = 0

    def run(self, max_rounds: Optional[int] = None) -> int:
        """Run the game loop.

        Args:
            max_rounds: stop after this many settled rounds, None for no limit

        Returns:
            Number of rounds settled.
        """
        starting_balance = self.service.player.balance
        click.echo(CLIRenderer.render_header(self.rounds_played + 1, starting_balance))

        while True:
            if self._is_broke():
                click.echo("You cannot cover the minimum stake any more.")
                break

            click.echo(CLIRenderer.render_table(self.service.snapshot()))
            selection = CLIInputHandler.choose_action(self.service.available_actions(),
                                                      self.service.player.current_bet)
            if selection is None:
                break

            state, amount = selection
            result = self.service.execute(state, amount)
            if not result.success:
                click.echo(f"Cannot do that: {result.message}")
                continue

            if isinstance(state, WinningsState):
                self.rounds_played += 1
                click.echo(CLIRenderer.render_table(self.service.snapshot()))
                click.echo(CLIRenderer.render_winnings(result.data))
                if max_rounds is not None and self.rounds_played >= max_rounds:
                    break
            elif self.service.player.hand.status is HandStatus.NOT_BETTED:
                click.echo(CLIRenderer.render_header(self.rounds_played + 1, self.service.player.balance))

        click.echo(CLIRenderer.render_summary(self.rounds_played, starting_balance,
                                              self.service.player.balance))
        self.logger.info("Session finished after %d rounds", self.rounds_played)
        return self.rounds_played

    def _is_broke(self) -> bool:
        player = self.service.player
        return (player.hand.status is HandStatus.NOT_BETTED
                and player.balance <= 0
                and player.current_bet > 0)


@click.command()
@click.option("--profile", default="default", show_default=True,
              help="Table rules profile (default, single_deck, six_deck).")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False),
              help="JSON file with table_rules/logging overrides.")
@click.option("--packs", type=click.IntRange(min=1), help="Number of packs in the shoe.")
@click.option("--seed", type=int, help="Random seed for a reproducible shoe.")
@click.option("--balance", type=click.FloatRange(min=0), help="Starting balance.")
@click.option("--bet", type=click.FloatRange(min=0), help="Default stake.")
@click.option("--rounds", type=click.IntRange(min=1), help="Stop after this many rounds.")
@click.option("--log-level", default=None,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Logging level (defaults to the logging profile).")
def main(profile: str, config_path: Optional[str], packs: Optional[int], seed: Optional[int],
         balance: Optional[float], bet: Optional[float], rounds: Optional[int],
         log_level: Optional[str]) -> None:
    """Play blackjack against the dealer in the terminal."""
    config_service = ConfigService()
    if config_path:
        # merge into the profiles this command reads
        loaded = config_service.load_overrides(config_path, {
            ConfigType.TABLE_RULES: profile,
            ConfigType.LOGGING: CLI_LOGGING_PROFILE,
        })
        if not loaded.success:
            raise click.ClickException(loaded.message)

    logging_config = config_service.get_logging_config(CLI_LOGGING_PROFILE).data
    if log_level:
        logging_config = replace(logging_config, log_level=log_level)
    configure_logging(logging_config)

    overrides = {
        "number_of_packs": packs,
        "random_seed": seed,
        "starting_balance": balance,
        "default_bet": bet,
    }
    rules = config_service.get_table_rules_config(profile).data
    try:
        rules = replace(rules, **{k: v for k, v in overrides.items() if v is not None})
    except GameConfigError as e:
        raise click.BadParameter(str(e))

    BlackjackCLI(TableService(rules)).run(max_rounds=rounds)


if __name__ == "__main__":
    main()
