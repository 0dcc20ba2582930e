from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable

import httpx


@dataclass(frozen=True)
class ClientConfig:
    client_id: str = ""
    token: str = ""
    http_client: httpx.Client | None = None
    timeout_s: float = 15.0
    event_hooks: dict[str, list[Callable[..., Any]]] | None = None


ClientOption = Callable[[ClientConfig], ClientConfig]


def with_client_id(client_id: str) -> ClientOption:
    def _apply(cfg: ClientConfig) -> ClientConfig:
        return replace(cfg, client_id=client_id)

    return _apply


def with_bearer_token(token: str) -> ClientOption:
    def _apply(cfg: ClientConfig) -> ClientConfig:
        return replace(cfg, token=token)

    return _apply


def with_http_client(http_client: httpx.Client) -> ClientOption:
    """Use a caller-owned httpx client. It is never closed by TwitchClient."""

    def _apply(cfg: ClientConfig) -> ClientConfig:
        return replace(cfg, http_client=http_client)

    return _apply


def with_timeout(timeout_s: float) -> ClientOption:
    def _apply(cfg: ClientConfig) -> ClientConfig:
        return replace(cfg, timeout_s=float(timeout_s))

    return _apply


def with_event_hooks(event_hooks: dict[str, list[Callable[..., Any]]]) -> ClientOption:
    def _apply(cfg: ClientConfig) -> ClientConfig:
        return replace(cfg, event_hooks=event_hooks)

    return _apply


def build_config(*opts: ClientOption) -> ClientConfig:
    cfg = ClientConfig()
    for opt in opts:
        cfg = opt(cfg)
    return cfg
