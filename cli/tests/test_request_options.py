from twitch_client.options import (
    HELIX_BASE_URL,
    KRAKEN_BASE_URL,
    RequestOptions,
    build_url,
    encode_query,
    select_api,
)


def test_encode_query_empty_for_zero_options() -> None:
    assert encode_query(RequestOptions()) == ""
    assert encode_query(None) == ""


def test_encode_query_uses_fixed_field_order() -> None:
    options = RequestOptions(channel="foo", nonce=7, offset=30, limit=15, direction="desc")
    assert encode_query(options) == "?direction=desc&limit=15&offset=30&_=7&channel=foo"


def test_encode_query_limit_appears_once() -> None:
    query = encode_query(RequestOptions(limit=25, offset=5))
    assert query.count("limit=") == 1
    assert query == "?limit=25&offset=5"


def test_encode_query_omits_zero_nonce() -> None:
    assert "_=" not in encode_query(RequestOptions(limit=1, nonce=0))


def test_encode_query_appends_extra_after_builtin_params() -> None:
    options = RequestOptions(limit=10, extra=[("login", "a"), ("login", "b")])
    assert encode_query(options) == "?limit=10&login=a&login=b"


def test_encode_query_extra_alone_starts_query() -> None:
    options = RequestOptions(extra={"id": ["1", "2"], "first": "5"})
    assert encode_query(options) == "?id=1&id=2&first=5"


def test_encode_query_ignores_empty_extra() -> None:
    assert encode_query(RequestOptions(extra={})) == ""


def test_encode_query_escapes_values() -> None:
    assert encode_query(RequestOptions(channel="a b&c")) == "?channel=a+b%26c"


def test_select_api_helix() -> None:
    assert select_api(RequestOptions(version="helix")) == (HELIX_BASE_URL, "5")


def test_select_api_defaults_to_kraken() -> None:
    assert select_api(None) == (KRAKEN_BASE_URL, "3")
    assert select_api(RequestOptions()) == (KRAKEN_BASE_URL, "3")
    assert select_api(RequestOptions(version="kraken")) == (KRAKEN_BASE_URL, "3")
    assert select_api(RequestOptions(version="HELIX")) == (KRAKEN_BASE_URL, "3")


def test_build_url_followers_page() -> None:
    url, version = build_url("/channels/42/follows", RequestOptions(limit=15))
    assert url == "https://api.twitch.tv/kraken/channels/42/follows?limit=15"
    assert version == "3"


def test_build_url_adds_leading_slash() -> None:
    url, _ = build_url("users", None)
    assert url == "https://api.twitch.tv/kraken/users"
