from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

APP_NAME = "twitch-client"
CONFIG_FILENAME = "config.toml"
ENV_CLIENT_ID = "TWITCH_CLIENT_ID"
ENV_TOKEN = "TWITCH_TOKEN"
DEFAULT_TIMEOUT_S = 15.0


@dataclass
class AppConfig:
    client_id: str = ""
    token: str = ""
    timeout_s: float = DEFAULT_TIMEOUT_S
    api_version: str = ""


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    data: dict[str, Any] = {"timeout_s": float(cfg.timeout_s)}
    if cfg.client_id:
        data["client_id"] = cfg.client_id
    if cfg.token:
        data["token"] = cfg.token
    if cfg.api_version:
        data["api_version"] = cfg.api_version
    return data


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    cfg.client_id = str(data.get("client_id") or "").strip()
    cfg.token = str(data.get("token") or "").strip()
    cfg.api_version = str(data.get("api_version") or "").strip().lower()
    timeout_raw = data.get("timeout_s")
    if timeout_raw is not None:
        try:
            timeout_s = float(timeout_raw)
        except (TypeError, ValueError):
            timeout_s = DEFAULT_TIMEOUT_S
        if timeout_s > 0:
            cfg.timeout_s = timeout_s
    return cfg


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
