from __future__ import annotations

from twitch_client import TwitchClient, new_client
from twitch_client.config_types import (
    ClientOption,
    with_bearer_token,
    with_client_id,
    with_event_hooks,
    with_timeout,
)

from .config import AppConfig
from .logging_ import http_dump_hooks


class MissingClientIdError(RuntimeError):
    pass


def make_client(
    cfg: AppConfig,
    *,
    client_id: str | None,
    token: str | None,
    verbosity: int = 0,
) -> TwitchClient:
    effective_id = (client_id or cfg.client_id or "").strip()
    if not effective_id:
        raise MissingClientIdError("Twitch client ID was not specified")

    opts: list[ClientOption] = [with_client_id(effective_id), with_timeout(cfg.timeout_s)]
    effective_token = (token or cfg.token or "").strip()
    if effective_token:
        opts.append(with_bearer_token(effective_token))
    if verbosity > 0:
        opts.append(with_event_hooks(http_dump_hooks(with_bodies=verbosity > 1)))
    return new_client(*opts)
