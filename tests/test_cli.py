"""Tests for the typer CLI."""
# pylint: disable=missing-function-docstring

from typer.testing import CliRunner

from wall_of_shame.cli import main_app

runner = CliRunner()


def test_dispatch_add_prints_tell_with_card():
    result = runner.invoke(main_app, ["skill", "dispatch", "add", "--player", "Bob", "--seed", "3"])

    assert result.exit_code == 0
    assert "tell" in result.stdout
    assert "Bob added to the wall of shame" in result.stdout


def test_dispatch_without_player_prints_help():
    result = runner.invoke(main_app, ["skill", "dispatch", "WallOfShameAddition"])

    assert result.exit_code == 0
    assert "ask" in result.stdout
    assert "reprompt" in result.stdout


def test_session_shows_final_leaderboard():
    result = runner.invoke(main_app, ["skill", "session", "add:Ana", "add:Ana", "add:Bo", "worst"])

    assert result.exit_code == 0
    assert "In the race of mediocrity, Ana is ahead" in result.stdout
    assert "Wall of shame" in result.stdout


def test_session_after_clean_reports_empty_wall():
    result = runner.invoke(main_app, ["skill", "session", "add:Ana", "clean"])

    assert result.exit_code == 0
    assert "The wall is empty." in result.stdout


def test_intents_lists_every_name():
    result = runner.invoke(main_app, ["skill", "intents"])

    assert result.exit_code == 0
    assert "WallOfShameAddition" in result.stdout
    assert "AMAZON.CancelIntent" in result.stdout
