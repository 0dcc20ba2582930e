from __future__ import annotations

from typer.testing import CliRunner

from twitch_cli import config, main


def test_settings_group_available() -> None:
    runner = CliRunner()
    result = runner.invoke(main.app, ["--help"])
    assert result.exit_code == 0
    assert "settings" in result.output
    assert "followers" in result.output


def test_settings_set_and_show_masks_token() -> None:
    runner = CliRunner()

    result = runner.invoke(main.app, ["settings", "set", "--client-id", "abc", "--token", "secret"])
    assert result.exit_code == 0, result.output

    cfg = config.load_config()
    assert cfg.client_id == "abc"
    assert cfg.token == "secret"

    result = runner.invoke(main.app, ["settings", "show"])
    assert result.exit_code == 0
    assert "client_id=abc" in result.output
    assert "token=(set)" in result.output
    assert "secret" not in result.output


def test_settings_get_unknown_key() -> None:
    runner = CliRunner()
    result = runner.invoke(main.app, ["settings", "get", "nope"])
    assert result.exit_code == 2


def test_settings_init_writes_client_id() -> None:
    runner = CliRunner()
    result = runner.invoke(main.app, ["settings", "init", "--client-id", "xyz"])
    assert result.exit_code == 0, result.output
    assert config.load_config().client_id == "xyz"


def test_settings_set_rejects_non_positive_timeout() -> None:
    runner = CliRunner()
    result = runner.invoke(main.app, ["settings", "set", "--timeout", "0"])
    assert result.exit_code == 2
