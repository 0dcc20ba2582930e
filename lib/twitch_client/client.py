from __future__ import annotations

from typing import Any
from urllib.parse import quote

from .config_types import ClientConfig, ClientOption, build_config
from .options import RequestOptions, build_url
from .transport import Transport


class TwitchClient:
    def __init__(self, cfg: ClientConfig | None = None):
        self._cfg = cfg or ClientConfig()
        self._t = Transport(self._cfg)

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> TwitchClient:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def get(self, endpoint: str, options: RequestOptions | None = None, *, expect: type | None = dict) -> Any:
        """GET ``endpoint`` and return the decoded JSON body.

        ``expect`` is the type the decoded body must have; pass ``None`` to
        accept any JSON value.
        """
        url, version = build_url(endpoint, options)
        return self._t.get_json(url, version, expect=expect)

    # --- API methods ---
    def get_channel(self, channel_id: str, options: RequestOptions | None = None) -> dict[str, Any]:
        return self.get(f"/channels/{_segment(channel_id)}", options)

    def get_followers_for_id(self, channel_id: str, options: RequestOptions | None = None) -> dict[str, Any]:
        return self.get(f"/channels/{_segment(channel_id)}/follows", options)


def new_client(*opts: ClientOption) -> TwitchClient:
    return TwitchClient(build_config(*opts))


def _segment(value: str) -> str:
    return quote(str(value), safe="")
