from __future__ import annotations

from typing import Any, Callable

import httpx
import typer
from rich.table import Table
from twitch_client import ApiError, AuthError, DecodeError, RequestOptions, TwitchClient

from .. import console
from ..config import load_config
from ..formatting import follower_rows, follower_total, format_list_timestamp, next_cursor
from ..http import MissingClientIdError, make_client
from ..state import get_state

MISSING_ARG_EXIT_CODE = 126

CHANNEL_FIELDS = ("_id", "name", "display_name", "status", "game", "followers", "views", "url", "created_at")


def _client(ctx: typer.Context) -> TwitchClient:
    state = get_state(ctx)
    try:
        return make_client(load_config(), client_id=state.client_id, token=state.token, verbosity=state.verbosity)
    except MissingClientIdError as e:
        console.err(str(e))
        raise typer.Exit(code=1)


def _call(ctx: typer.Context, what: str, fn: Callable[[TwitchClient], Any]) -> Any:
    client = _client(ctx)
    try:
        return fn(client)
    except AuthError as e:
        console.err(f"Unauthorized ({e.status_code}). Check the client ID and token.")
        raise typer.Exit(code=2)
    except (ApiError, DecodeError, httpx.RequestError) as e:
        console.err(f"Failed to fetch {what}: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()


def _api_version(value: str | None) -> str:
    if value is not None:
        return value.strip().lower()
    return load_config().api_version


def _parse_params(params: list[str] | None) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for raw in params or []:
        key, sep, value = raw.partition("=")
        key = key.strip()
        if not sep or not key:
            console.err(f"Invalid --param '{raw}', expected key=value.")
            raise typer.Exit(code=2)
        pairs.append((key, value))
    return pairs


def channel(
        ctx: typer.Context,
        channel_id: str | None = typer.Argument(None, help="Channel name or ID."),
        api_version: str | None = typer.Option(None, "--api-version", help="API family: kraken (default) or helix."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """Print a channel's information."""
    if not channel_id:
        console.err("must supply channel name/ID")
        raise typer.Exit(code=MISSING_ARG_EXIT_CODE)

    options = RequestOptions(version=_api_version(api_version))
    data = _call(ctx, "channel", lambda c: c.get_channel(channel_id, options))

    if json_out:
        console.print_json(data)
        return

    console.ok("Channel:")
    shown = False
    for key in CHANNEL_FIELDS:
        if key in data:
            value = data[key]
            if key == "created_at":
                value = format_list_timestamp(value)
            console.console.print(f"  {key}: {value if value is not None else '-'}")
            shown = True
    if not shown:
        console.print_json(data)


def followers(
        ctx: typer.Context,
        channel_id: str | None = typer.Argument(None, help="Channel ID."),
        limit: int = typer.Option(15, "--limit", help="Max followers to return."),
        offset: int = typer.Option(0, "--offset", help="Offset for listing."),
        direction: str = typer.Option("", "--direction", help="Sort direction: asc or desc."),
        api_version: str | None = typer.Option(None, "--api-version", help="API family: kraken (default) or helix."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """Print the first page of a channel's followers."""
    if not channel_id:
        console.err("must supply channel ID")
        raise typer.Exit(code=MISSING_ARG_EXIT_CODE)

    options = RequestOptions(
        limit=limit,
        offset=offset,
        direction=direction.strip().lower(),
        version=_api_version(api_version),
    )
    data = _call(ctx, "followers", lambda c: c.get_followers_for_id(channel_id, options))

    if json_out:
        console.print_json(data)
        return

    total = follower_total(data)
    if total is not None:
        console.info(f"total={total} limit={limit} offset={offset}")

    table = Table(title=f"Followers of {channel_id}")
    table.add_column("id", style="bold")
    table.add_column("name")
    table.add_column("followed_at")
    for row in follower_rows(data):
        table.add_row(*row)
    console.console.print(table)

    cursor = next_cursor(data)
    if cursor:
        console.info(f"cursor={cursor}")


def get(
        ctx: typer.Context,
        endpoint: str | None = typer.Argument(None, help="Endpoint path, e.g. /users/44322889."),
        params: list[str] | None = typer.Option(None, "--param", "-p", help="Extra query parameter key=value (repeatable)."),
        limit: int = typer.Option(0, "--limit", help="limit parameter (0 = omit)."),
        offset: int = typer.Option(0, "--offset", help="offset parameter (0 = omit)."),
        nonce: int = typer.Option(0, "--nonce", help="'_' cache-busting parameter (0 = omit)."),
        api_version: str | None = typer.Option(None, "--api-version", help="API family: kraken (default) or helix."),
):
    """GET an arbitrary endpoint and print the JSON response."""
    if not endpoint:
        console.err("must supply endpoint")
        raise typer.Exit(code=MISSING_ARG_EXIT_CODE)

    options = RequestOptions(
        limit=limit,
        offset=offset,
        nonce=nonce,
        version=_api_version(api_version),
        extra=_parse_params(params) or None,
    )
    data = _call(ctx, endpoint, lambda c: c.get(endpoint, options, expect=None))
    console.print_json(data)
