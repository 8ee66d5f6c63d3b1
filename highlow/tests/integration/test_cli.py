"""
End-to-end tests for the highlow command.
"""

import pytest
from click.testing import CliRunner

from highlow.controller import HighLowController
from highlow.core import GameStateError
from highlow.ui.cli import main

ROUND_PREFIXES = ("Player 1 wins with", "Player 2 wins with", "Round ends in a tie with")
FINAL_MESSAGES = ("Player 1 wins the game.", "Player 2 wins the game.", "The game ended in a tie.")


@pytest.mark.integration
class TestHighLowCommand:

    def setup_method(self):
        self.runner = CliRunner()

    def test_seeded_game(self):
        result = self.runner.invoke(main, ['--seed', '7'])

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == "Started a new game of High Low!"
        assert sum(1 for line in lines if line.startswith("Player 1 drew a")) == 26
        assert sum(1 for line in lines if line.startswith(ROUND_PREFIXES)) == 26
        assert lines[-2].startswith("Player 1 has a score of")
        assert lines[-1] in FINAL_MESSAGES

    def test_draws_precede_round_result(self):
        lines = self.runner.invoke(main, ['--seed', '8']).output.splitlines()

        assert lines[1].startswith("Player 1 drew a")
        assert lines[2].startswith(ROUND_PREFIXES)

    def test_same_seed_same_output(self):
        first = self.runner.invoke(main, ['--seed', '12345'])
        second = self.runner.invoke(main, ['--seed', '12345'])

        assert first.output == second.output

    def test_quiet(self):
        result = self.runner.invoke(main, ['--seed', '7', '--quiet'])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "Started a new game of High Low!"
        assert not any("drew a" in line for line in lines)
        assert sum(1 for line in lines if line.startswith(ROUND_PREFIXES)) == 26

    def test_unseeded_game(self):
        result = self.runner.invoke(main, [])
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] in FINAL_MESSAGES

    def test_log_level_is_case_insensitive(self):
        result = self.runner.invoke(main, ['--seed', '1', '--log-level', 'error'])
        assert result.exit_code == 0

    @pytest.mark.parametrize("args", [
        ['--seed', '-1'],
        ['--seed', 'abc'],
        ['--log-level', 'LOUD'],
        ['--players', '3'],
    ])
    def test_usage_errors(self, args):
        result = self.runner.invoke(main, args)
        assert result.exit_code == 2

    def test_version(self):
        result = self.runner.invoke(main, ['--version'])
        assert result.exit_code == 0
        assert "highlow" in result.output

    def test_game_error_exits_non_zero(self, monkeypatch):
        def broken_run(self):
            raise GameStateError("Deck ran out in the middle of a round")

        monkeypatch.setattr(HighLowController, "run", broken_run)

        result = self.runner.invoke(main, ['--seed', '1'])

        assert result.exit_code == 1
        assert "Error: Deck ran out in the middle of a round" in result.output
