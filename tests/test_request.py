from bravesearch.config.schema import DEFAULT_BASE_URL
from bravesearch.search.request import build_request, build_url, encode_query


def test_encode_query_escapes_reserved_characters() -> None:
    assert encode_query("rust & serde/json?") == "rust%20%26%20serde%2Fjson%3F"
    assert encode_query("a+b=c#d") == "a%2Bb%3Dc%23d"
    assert encode_query("keep-_.~") == "keep-_.~"


def test_encode_query_utf8() -> None:
    assert encode_query("café") == "caf%C3%A9"


def test_build_url_uses_default_endpoint() -> None:
    assert build_url("python", 3) == f"{DEFAULT_BASE_URL}?q=python&count=3"


def test_build_request_method_params_and_headers() -> None:
    request = build_request(
        "rust & serde/json?",
        5,
        "secret-key",
        base_url="https://brave.example/search",
    )

    assert request.method == "GET"
    assert request.url.host == "brave.example"
    assert request.url.path == "/search"
    assert request.url.params["q"] == "rust & serde/json?"
    assert request.url.params["count"] == "5"
    assert b"q=rust%20%26%20serde%2Fjson%3F" in request.url.query
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Accept-Encoding"] == "gzip"
    assert request.headers["X-Subscription-Token"] == "secret-key"
