from __future__ import annotations

from dataclasses import dataclass

import typer


@dataclass(frozen=True)
class CliState:
    verbosity: int = 0
    client_id: str | None = None
    token: str | None = None


def get_state(ctx: typer.Context) -> CliState:
    obj = ctx.find_object(CliState)
    return obj if obj is not None else CliState()
