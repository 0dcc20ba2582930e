from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from .config_types import ClientConfig
from .errors import AuthError, DecodeError, UnexpectedStatusError

log = logging.getLogger(__name__)

USER_AGENT = "twitch-client/0.1.0"


def accept_header(version: str) -> str:
    return f"application/vnd.twitchtv.v{version}+json"


def build_headers(cfg: ClientConfig, version: str) -> dict[str, str]:
    headers = {"Accept": accept_header(version)}
    if cfg.client_id:
        headers["Client-ID"] = cfg.client_id
    if cfg.token:
        headers["Authorization"] = f"Bearer {cfg.token}"
    return headers


class Transport:
    def __init__(self, cfg: ClientConfig):
        self._cfg = cfg
        self._owns_client = cfg.http_client is None
        if cfg.http_client is not None:
            self._client = cfg.http_client
        else:
            self._client = httpx.Client(
                timeout=cfg.timeout_s,
                headers={"User-Agent": USER_AGENT},
                event_hooks=cfg.event_hooks,
                follow_redirects=True,
            )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def get_json(self, url: str, version: str, *, expect: type | None = None) -> Any:
        headers = build_headers(self._cfg, version)
        log.debug("GET %s (accept v%s)", url, version)
        with self._client.stream("GET", url, headers=headers) as r:
            log.debug("GET %s -> %s", url, r.status_code)
            if r.status_code != 200:
                if r.status_code in (401, 403):
                    raise AuthError(r.status_code)
                raise UnexpectedStatusError(r.status_code)
            body = r.read()

        try:
            data = json.loads(body)
        except (ValueError, RecursionError) as e:
            raise DecodeError(f"GET {url} returned malformed JSON: {e}", e) from e

        if expect is not None and not isinstance(data, expect):
            raise DecodeError(
                f"GET {url} returned {type(data).__name__}, expected {expect.__name__}"
            )
        return data
