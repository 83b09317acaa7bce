from __future__ import annotations

from core.token_filter import NOISE_PREFIXES, filter_tokens, is_noise_token


def test_removes_mentions_hashtags_and_links() -> None:
    assert filter_tokens("@bob check #cool http://x.co rest") == "check rest"


def test_prefix_match_is_case_insensitive_and_keeps_casing() -> None:
    assert filter_tokens("Hello HTTPS://X.CO World #Tag") == "Hello World"


def test_plain_text_is_unchanged() -> None:
    assert filter_tokens("hello world") == "hello world"


def test_empty_text_yields_empty_string() -> None:
    assert filter_tokens("") == ""


def test_only_noise_yields_empty_string() -> None:
    assert filter_tokens("@a #b http://c") == ""


def test_split_is_on_single_spaces_only() -> None:
    # "a  @b" splits into ["a", "", "@b"]; the empty token survives.
    assert filter_tokens("a  @b") == "a "
    assert filter_tokens("a\t@b c") == "a\t@b c"


def test_prefix_only_matches_token_start() -> None:
    assert filter_tokens("email me@example.com now") == "email me@example.com now"


def test_filter_is_idempotent() -> None:
    samples = [
        "@bob check #cool http://x.co rest",
        "a  @b  c",
        "  leading and trailing  ",
        "ümlaut #ü @x text",
    ]
    for text in samples:
        once = filter_tokens(text)
        assert filter_tokens(once) == once


def test_filter_never_adds_or_reorders_tokens() -> None:
    text = "one @two three #four five http://six"
    kept = filter_tokens(text).split(" ")
    original = text.split(" ")
    assert len(kept) <= len(original)
    positions = [original.index(token) for token in kept]
    assert positions == sorted(positions)


def test_custom_prefixes() -> None:
    assert filter_tokens("keep $drop", prefixes=("$",)) == "keep"
    assert is_noise_token("#x")
    assert not is_noise_token("x#")
    assert NOISE_PREFIXES == ("@", "#", "http")
