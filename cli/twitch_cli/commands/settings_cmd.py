from __future__ import annotations

import os

import typer

from .. import console
from ..config import config_path, default_config, load_config, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/twitch-client/config.toml).")

_KEYS = ("client_id", "token", "timeout_s", "api_version")


def _secret_state(value: str) -> str:
    return "(set)" if (value or "").strip() else "(empty)"


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        client_id: str = typer.Option(
            ...,
            "--client-id",
            prompt="Twitch client ID",
            help="Twitch client ID used to authorize requests.",
        ),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.client_id = client_id.strip()
    if not cfg.client_id:
        console.err("Client ID cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    console.console.print(
        f"client_id={cfg.client_id or '(empty)'} token={_secret_state(cfg.token)} "
        f"timeout_s={cfg.timeout_s} api_version={cfg.api_version or 'kraken'}"
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help="Setting key (client_id, timeout_s, api_version)."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k == "token":
        console.console.print(_secret_state(cfg.token))
        return
    if k in _KEYS:
        console.console.print(str(getattr(cfg, k)))
        return
    console.err(f"Unknown setting: {key}")
    raise typer.Exit(code=2)


@app.command("set")
def set_setting(
        client_id: str | None = typer.Option(None, "--client-id", help="Set Twitch client ID."),
        token: str | None = typer.Option(None, "--token", help="Set OAuth bearer token (empty string clears it)."),
        timeout_s: float | None = typer.Option(None, "--timeout", help="Set request timeout in seconds."),
        api_version: str | None = typer.Option(None, "--api-version", help="Set default API family (kraken or helix)."),
):
    cfg = load_config()
    if client_id is not None:
        cfg.client_id = client_id.strip()
    if token is not None:
        cfg.token = token.strip()
    if timeout_s is not None:
        if timeout_s <= 0:
            console.err("Timeout must be positive.")
            raise typer.Exit(code=2)
        cfg.timeout_s = timeout_s
    if api_version is not None:
        cfg.api_version = api_version.strip().lower()
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
