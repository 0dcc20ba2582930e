from .client import TwitchClient, new_client
from .config_types import ClientConfig, with_bearer_token, with_client_id, with_event_hooks, with_http_client, with_timeout
from .errors import ApiError, AuthError, DecodeError, TwitchClientError, UnexpectedStatusError
from .options import RequestOptions

__all__ = [
    "TwitchClient",
    "new_client",
    "ClientConfig",
    "RequestOptions",
    "with_bearer_token",
    "with_client_id",
    "with_event_hooks",
    "with_http_client",
    "with_timeout",
    "ApiError",
    "AuthError",
    "DecodeError",
    "TwitchClientError",
    "UnexpectedStatusError",
]
