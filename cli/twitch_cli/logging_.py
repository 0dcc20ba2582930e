from __future__ import annotations

import logging
from typing import Any, Callable

import httpx

from . import console

_REDACTED_HEADERS = {"authorization"}


def setup_logging(verbosity: int) -> None:
    # level 1 prints only the HTTP dump hooks
    level = logging.DEBUG if verbosity > 1 else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    logging.getLogger("httpx").setLevel(level)
    logging.getLogger("httpcore").setLevel(level)


def _format_headers(headers: httpx.Headers) -> str:
    lines = []
    for raw_name, raw_value in headers.raw:
        name = raw_name.decode("latin-1")
        value = raw_value.decode("latin-1")
        if name.lower() in _REDACTED_HEADERS:
            scheme = value.split(" ", 1)[0]
            value = f"{scheme} ***"
        lines.append(f"{name}: {value}")
    return "\n".join(lines)


def http_dump_hooks(with_bodies: bool) -> dict[str, list[Callable[..., Any]]]:
    """httpx event hooks printing each request and response.

    Headers are always printed; bodies only when ``with_bodies`` is set.
    """

    def log_request(request: httpx.Request) -> None:
        dump = f"{request.method} {request.url.raw_path.decode('ascii')} HTTP/1.1\n" + _format_headers(request.headers)
        if with_bodies and request.content:
            dump += "\n\n" + request.content.decode("utf-8", errors="replace")
        console.raw(f"--> <{request.url}>: \n{dump}\n")

    def log_response(response: httpx.Response) -> None:
        dump = f"{response.http_version} {response.status_code} {response.reason_phrase}\n"
        dump += _format_headers(response.headers)
        if with_bodies:
            response.read()
            dump += "\n\n" + response.text
        console.raw(f"<-- [{response.status_code}] <{response.request.url}>:\n{dump}\n")

    return {"request": [log_request], "response": [log_response]}
