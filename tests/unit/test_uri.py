"""Tests for format and request chain derivation."""

from __future__ import annotations

import pytest

from fastapi_request_context.uri import (
    derive_format,
    derive_request_chain,
    remove_base_url,
)


class TestDeriveFormat:
    def test_suffix_is_format(self) -> None:
        assert derive_format("/users/1.json") == "json"

    def test_no_suffix_is_none(self) -> None:
        assert derive_format("/users/1") is None

    def test_query_string_ignored(self) -> None:
        assert derive_format("/users/1.json?x=1") == "json"

    def test_dot_in_query_string_is_not_format(self) -> None:
        assert derive_format("/users/1?version=1.2") is None

    def test_last_segment_wins(self) -> None:
        assert derive_format("/files/archive.tar.gz") == "gz"

    def test_empty_uri(self) -> None:
        assert derive_format("") is None


class TestRemoveBaseUrl:
    def test_prefix_removed(self) -> None:
        assert remove_base_url("/api/users", "/api") == "/users"

    def test_slashes_trimmed_without_base(self) -> None:
        assert remove_base_url("/users/1/", None) == "users/1"

    def test_non_matching_base_kept(self) -> None:
        assert remove_base_url("/users/1", "/api") == "users/1"


class TestDeriveRequestChain:
    def test_base_url_and_format_removed(self) -> None:
        assert derive_request_chain("/api/users/1.json", "/api") == ("users", "1")

    def test_query_string_removed(self) -> None:
        assert derive_request_chain("/users/1?expand=true") == ("users", "1")

    def test_earliest_delimiter_wins(self) -> None:
        assert derive_request_chain("/users?file=a.json") == ("users",)

    def test_no_leading_empty_segment(self) -> None:
        chain = derive_request_chain("/users")
        assert chain == ("users",)
        assert "" not in chain

    def test_root_is_empty_chain(self) -> None:
        assert derive_request_chain("/") == ()
        assert derive_request_chain("") == ()

    def test_base_url_only(self) -> None:
        assert derive_request_chain("/api", "/api/") == ()

    @pytest.mark.parametrize(
        ("uri", "base_url"),
        [("/api/users/1.json?x=1", "/api"), ("/a/b/c", None), ("", "")],
    )
    def test_idempotent(self, uri: str, base_url: str | None) -> None:
        assert derive_request_chain(uri, base_url) == derive_request_chain(
            uri, base_url
        )
