from __future__ import annotations

import typer

from .commands import api_cmd, settings_cmd
from .config import ENV_CLIENT_ID, ENV_TOKEN
from .logging_ import setup_logging
from .state import CliState


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="twitch-client",
        help="Simple CLI for testing Twitch API calls.",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.command("channel")(api_cmd.channel)
    app.command("followers")(api_cmd.followers)
    app.command("get")(api_cmd.get)

    @app.callback()
    def _main(
            ctx: typer.Context,
            verbose: int = typer.Option(0, "-v", "--verbose", help="Verbosity level - 0, 1, 2."),
            client_id: str | None = typer.Option(
                None, "--client-id", envvar=ENV_CLIENT_ID, help="Twitch client ID to authorize requests."
            ),
            token: str | None = typer.Option(
                None, "--token", envvar=ENV_TOKEN, help="OAuth bearer token.", show_default=False
            ),
    ):
        setup_logging(verbose)
        ctx.obj = CliState(verbosity=verbose, client_id=client_id, token=token)

    return app


app = _build_app()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
