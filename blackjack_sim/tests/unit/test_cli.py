"""
Unit tests for the CLI renderer, input handler and game loop.
"""

import logging

import pytest
from click.testing import CliRunner

from blackjack_sim.application import TableRulesConfig, TableService
from blackjack_sim.core.deck import Deck, Suit
from blackjack_sim.core.hand import Hand
from blackjack_sim.ui.cli import BlackjackCLI, CLIInputHandler, CLIRenderer, main

H, D, C, S = Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES


@pytest.fixture
def cli_table():
    rules = TableRulesConfig(number_of_packs=1, reset_when_remaining=0, random_seed=3)
    service = TableService(rules)
    spare = Deck()
    service.player.hand = Hand(spare, 21, (H, 10), (S, 7))
    service.dealer.hand = Hand(spare, 21, (C, 10), (D, 8))
    service.dealer.hand.place_bet(0)
    return service


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
@pytest.mark.fast
class TestCLIRenderer:

    def test_format_money(self):
        assert CLIRenderer.format_money(5) == "5"
        assert CLIRenderer.format_money(12.0) == "12"
        assert CLIRenderer.format_money(2.5) == "2.50"
        assert CLIRenderer.format_money(1234567) == "1234567"
        assert CLIRenderer.format_money(25000000.0) == "25000000"

    def test_render_actions(self, cli_table):
        text = CLIRenderer.render_actions(cli_table.available_actions())
        assert "1. Place Bet (stake)" in text
        assert "2. Abstain From Betting" in text
        assert "3. Quit" in text

    def test_render_table(self, cli_table):
        text = CLIRenderer.render_table(cli_table.snapshot())
        assert "Dealer hand: 10♣ 8♦ (18, inPlay)" in text
        assert "Your hand:   10♥ 7♠ (17, notBetted)" in text
        assert "Balance: 1000" in text
        assert "cards left" in text

    def test_render_winnings(self):
        assert CLIRenderer.render_winnings(25) == "You receive 25."
        assert CLIRenderer.render_winnings(0) == "You receive nothing this round."

    def test_render_summary(self):
        text = CLIRenderer.render_summary(3, 100, 110)
        assert "Rounds played: 3" in text
        assert "Final balance: 110 (+10)" in text
        assert "(-5)" in CLIRenderer.render_summary(1, 100, 95)


@pytest.mark.unit
@pytest.mark.fast
class TestCLIInputHandler:

    def test_choose_betting_action_prompts_for_amount(self, cli_table):
        states = cli_table.available_actions()
        with CliRunner().isolation(input="1\n7\n"):
            state, amount = CLIInputHandler.choose_action(states, 5)
        assert state.name == "Place Bet"
        assert amount == 7

    def test_amount_defaults_to_current_bet(self, cli_table):
        states = cli_table.available_actions()
        with CliRunner().isolation(input="1\n\n"):
            _, amount = CLIInputHandler.choose_action(states, 5)
        assert amount == 5

    def test_choose_non_betting_action(self, cli_table):
        states = cli_table.available_actions()
        with CliRunner().isolation(input="2\n"):
            state, amount = CLIInputHandler.choose_action(states, 5)
        assert state.name == "Abstain From Betting"
        assert amount is None

    def test_invalid_choice_is_asked_again(self, cli_table):
        states = cli_table.available_actions()
        with CliRunner().isolation(input="9\n2\n"):
            state, _ = CLIInputHandler.choose_action(states, 5)
        assert state.name == "Abstain From Betting"

    def test_quit(self, cli_table):
        with CliRunner().isolation(input="3\n"):
            assert CLIInputHandler.choose_action(cli_table.available_actions(), 5) is None


@pytest.mark.unit
@pytest.mark.fast
class TestBlackjackCLI:

    def test_play_one_losing_round(self, cli_table):
        # bet the default stake, stick on 17, collect against the dealer's 18
        with CliRunner().isolation(input="1\n\n2\n1\n"):
            rounds = BlackjackCLI(cli_table).run(max_rounds=1)
        assert rounds == 1
        assert cli_table.player.balance == 995

    def test_stops_when_broke(self, cli_table):
        cli_table.player.balance = 0
        with CliRunner().isolation(input=""):
            rounds = BlackjackCLI(cli_table).run()
        assert rounds == 0


@pytest.mark.unit
@pytest.mark.fast
class TestMainCommand:

    def test_abstain_one_round(self):
        result = CliRunner().invoke(main, ["--rounds", "1", "--seed", "1", "--balance", "50"], input="2\n")
        assert result.exit_code == 0, result.output
        assert "Rounds played: 1" in result.output
        assert "Final balance: 50" in result.output

    def test_quit_immediately(self):
        result = CliRunner().invoke(main, ["--profile", "single_deck", "--seed", "1"], input="3\n")
        assert result.exit_code == 0, result.output
        assert "Rounds played: 0" in result.output
        assert "51 cards left" not in result.output
        assert "48 cards left" in result.output

    def test_invalid_option(self):
        result = CliRunner().invoke(main, ["--packs", "0"])
        assert result.exit_code == 2

    def test_bad_config_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[]", encoding="utf-8")
        result = CliRunner().invoke(main, ["--config", str(path)])
        assert result.exit_code == 1
        assert "JSON object" in result.output

    def test_config_file_overrides(self, tmp_path):
        path = tmp_path / "table.json"
        path.write_text('{"table_rules": {"number_of_packs": 2}}', encoding="utf-8")
        result = CliRunner().invoke(main, ["--config", str(path), "--seed", "5"], input="3\n")
        assert result.exit_code == 0, result.output
        assert "100 cards left" in result.output

    def test_config_file_sets_log_level(self, tmp_path):
        path = tmp_path / "logging.json"
        path.write_text('{"logging": {"log_level": "DEBUG"}}', encoding="utf-8")
        result = CliRunner().invoke(main, ["--config", str(path), "--seed", "1"], input="3\n")
        assert result.exit_code == 0, result.output
        assert logging.getLogger().level == logging.DEBUG

    def test_log_level_option_wins_over_config_file(self, tmp_path):
        path = tmp_path / "logging.json"
        path.write_text('{"logging": {"log_level": "DEBUG"}}', encoding="utf-8")
        result = CliRunner().invoke(main, ["--config", str(path), "--log-level", "ERROR"], input="3\n")
        assert result.exit_code == 0, result.output
        assert logging.getLogger().level == logging.ERROR

    def test_config_file_applies_to_selected_profile(self, tmp_path):
        path = tmp_path / "table.json"
        path.write_text('{"table_rules": {"number_of_packs": 2}}', encoding="utf-8")
        result = CliRunner().invoke(main, ["--config", str(path), "--profile", "single_deck", "--seed", "5"],
                                    input="3\n")
        assert result.exit_code == 0, result.output
        assert "100 cards left" in result.output

    @pytest.mark.parametrize("content", [
        '{"logging": {"log_level": 5}}',
        '{"table_rules": 5}',
        '{"table_rules": {"number_of_packs": 3}, "logging": {"log_level": "LOUD"}}',
    ])
    def test_malformed_config_file_is_reported(self, tmp_path, content):
        path = tmp_path / "bad.json"
        path.write_text(content, encoding="utf-8")
        result = CliRunner().invoke(main, ["--config", str(path)])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Error:" in result.output
