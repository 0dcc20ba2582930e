from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence, Union
from urllib.parse import urlencode

KRAKEN_BASE_URL = "https://api.twitch.tv/kraken"
HELIX_BASE_URL = "https://api.twitch.tv/helix"

KRAKEN_VERSION = "3"
HELIX_VERSION = "5"

HELIX = "helix"

ExtraParams = Union[Mapping[str, Union[str, Sequence[str]]], Sequence[tuple[str, str]]]


@dataclass(frozen=True)
class RequestOptions:
    """Per-call query parameters and API family selection.

    Zero integers and empty strings are left out of the query string.
    ``extra`` is merged last and may repeat keys.
    """

    limit: int = 0
    offset: int = 0
    direction: str = ""
    nonce: int = 0
    channel: str = ""
    version: str = ""
    extra: ExtraParams | None = None


def select_api(options: RequestOptions | None) -> tuple[str, str]:
    """Return (base_url, accept_version) for the requested API family."""
    if options is not None and options.version == HELIX:
        return HELIX_BASE_URL, HELIX_VERSION
    return KRAKEN_BASE_URL, KRAKEN_VERSION


def encode_query(options: RequestOptions | None) -> str:
    if options is None:
        return ""

    params: list[tuple[str, str]] = []
    if options.direction:
        params.append(("direction", options.direction))
    if options.limit:
        params.append(("limit", f"{int(options.limit):d}"))
    if options.offset:
        params.append(("offset", f"{int(options.offset):d}"))
    if options.nonce:
        params.append(("_", f"{int(options.nonce):d}"))
    if options.channel:
        params.append(("channel", options.channel))

    query = f"?{urlencode(params)}" if params else ""

    extra = urlencode(options.extra, doseq=True) if options.extra else ""
    if extra:
        query += f"&{extra}" if query else f"?{extra}"
    return query


def build_url(endpoint: str, options: RequestOptions | None) -> tuple[str, str]:
    """Return (url, accept_version) for a GET on ``endpoint``."""
    base_url, version = select_api(options)
    if not endpoint.startswith("/"):
        endpoint = f"/{endpoint}"
    return f"{base_url}{endpoint}{encode_query(options)}", version
