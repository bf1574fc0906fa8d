"""Unit tests for URL canonicalization."""

from hashlib import sha256

import pytest

from votp.domain.value import TrackingPolicy
from votp.util.url import (
    MalformedUrlError,
    canonicalize,
    grouping_key_for,
    is_tracking_parameter,
    normalize_host,
    normalize_path,
)


class TestNormalizeHost:
    """Tests for normalize_host."""

    def test_lowercases(self):
        assert normalize_host("Example.COM") == "example.com"

    def test_strips_www(self):
        assert normalize_host("www.example.com") == "example.com"

    def test_strips_language_subdomain(self):
        assert normalize_host("en.example.com") == "example.com"
        assert normalize_host("de.wikipedia.org") == "wikipedia.org"

    def test_strips_www_then_language_subdomain(self):
        assert normalize_host("www.fr.example.com") == "example.com"

    def test_keeps_longer_subdomains(self):
        assert normalize_host("api.example.com") == "api.example.com"
        assert normalize_host("blog.example.com") == "blog.example.com"

    def test_single_pass_strips_one_www(self):
        """Each rule applies once per call; canonicalize repeats until stable."""
        assert normalize_host("www.www.example.com") == "www.example.com"


class TestIsTrackingParameter:
    """Tests for the tracking-parameter filter."""

    @pytest.mark.parametrize(
        "key",
        [
            "utm_source",
            "utm_medium",
            "utm_campaign",
            "utm_term",
            "utm_content",
            "fbclid",
            "gclid",
            "msclkid",
            "ref",
            "referrer",
            "_ga",
            "_gl",
            "mc_cid",
            "mc_eid",
            "campaign",
            "source",
            "medium",
        ],
    )
    def test_known_tracking_keys(self, key):
        assert is_tracking_parameter(key)

    def test_match_is_case_sensitive(self):
        assert not is_tracking_parameter("UTM_SOURCE")
        assert not is_tracking_parameter("Ref")

    def test_identity_keys_are_kept(self):
        assert not is_tracking_parameter("id")
        assert not is_tracking_parameter("page")
        assert not is_tracking_parameter("utm")

    def test_policy_version_lookup(self):
        policy = TrackingPolicy.for_version("v1")

        assert is_tracking_parameter("gclid", policy)
        assert len(policy.parameters) == 17

    def test_unknown_policy_version_rejected(self):
        with pytest.raises(ValueError):
            TrackingPolicy.for_version("v0")


class TestNormalizePath:
    """Tests for normalize_path."""

    def test_strips_trailing_slash(self):
        assert normalize_path("/article/") == "/article"

    def test_root_is_preserved(self):
        assert normalize_path("/") == "/"

    def test_path_without_trailing_slash_unchanged(self):
        assert normalize_path("/a/b") == "/a/b"


class TestCanonicalize:
    """Tests for canonicalize."""

    def test_full_normalization(self):
        """All rules together on one messy URL."""
        # Arrange
        raw = "HTTPS://WWW.Example.com/Article/?utm_source=twitter&b=2&a=1#comments"

        # Act
        result = canonicalize(raw)

        # Assert
        assert result.canonical_form == "https://example.com/Article?a=1&b=2"

    def test_path_case_is_preserved(self):
        result = canonicalize("https://example.com/CaseSensitive")

        assert result.canonical_form == "https://example.com/CaseSensitive"

    def test_root_path_preserved(self):
        assert canonicalize("https://example.com/").canonical_form == (
            "https://example.com/"
        )

    def test_empty_path_becomes_root(self):
        assert canonicalize("https://example.com").canonical_form == (
            "https://example.com/"
        )

    def test_fragment_dropped(self):
        assert canonicalize("https://example.com/a#section-2").canonical_form == (
            "https://example.com/a"
        )

    def test_query_removed_when_only_tracking_params(self):
        result = canonicalize("https://example.com/a?utm_source=x&fbclid=abc")

        assert result.canonical_form == "https://example.com/a"

    def test_default_port_dropped(self):
        assert canonicalize("https://example.com:443/a").canonical_form == (
            "https://example.com/a"
        )
        assert canonicalize("http://example.com:80/a").canonical_form == (
            "http://example.com/a"
        )

    def test_non_default_port_kept(self):
        assert canonicalize("http://example.com:8080/a").canonical_form == (
            "http://example.com:8080/a"
        )

    def test_scheme_is_significant(self):
        http = canonicalize("http://example.com/a")
        https = canonicalize("https://example.com/a")

        assert http.grouping_key != https.grouping_key

    def test_repeated_keys_keep_relative_order(self):
        result = canonicalize("https://example.com/s?b=2&a=3&a=1")

        assert result.canonical_form == "https://example.com/s?a=3&a=1&b=2"

    def test_blank_values_kept(self):
        result = canonicalize("https://example.com/s?flag=&q=1")

        assert result.canonical_form == "https://example.com/s?flag=&q=1"

    def test_tracking_key_case_sensitive(self):
        result = canonicalize("https://example.com/a?UTM_SOURCE=x")

        assert result.canonical_form == "https://example.com/a?UTM_SOURCE=x"

    def test_international_domain_encoded(self):
        result = canonicalize("https://bücher.example/katalog")

        assert result.canonical_form == "https://xn--bcher-kva.example/katalog"

    def test_surrounding_whitespace_ignored(self):
        assert canonicalize("  https://example.com/a  ").canonical_form == (
            "https://example.com/a"
        )

    def test_backslashes_are_path_separators(self):
        result = canonicalize("http://example.com\\a\\b")

        assert result.canonical_form == "http://example.com/a/b"
        expected = canonicalize("http://example.com/a/b")
        assert result.grouping_key == expected.grouping_key

    def test_backslashes_in_query_untouched(self):
        result = canonicalize("https://example.com\\a?path=c:\\temp")

        assert result.canonical_form == "https://example.com/a?path=c:%5Ctemp"


class TestGroupingEquivalence:
    """URL variants of one page must share a grouping key."""

    def test_trailing_slash_www_and_language_variants(self):
        # Arrange
        variants = [
            "http://example.com/a",
            "http://example.com/a/",
            "http://en.example.com/a/",
            "http://www.example.com/a",
        ]

        # Act
        results = [canonicalize(url) for url in variants]

        # Assert
        assert {r.canonical_form for r in results} == {"http://example.com/a"}
        assert len({r.grouping_key for r in results}) == 1

    def test_tracking_parameter_invariance(self):
        plain = canonicalize("https://example.com/post?id=7")
        tracked = canonicalize(
            "https://example.com/post?utm_source=news&id=7&gclid=xyz&_ga=1.2"
        )

        assert plain == tracked

    def test_query_order_invariance(self):
        first = canonicalize("https://example.com/p?x=1&y=2&z=3")
        second = canonicalize("https://example.com/p?z=3&x=1&y=2")

        assert first.grouping_key == second.grouping_key

    def test_different_pages_do_not_collide(self):
        a = canonicalize("https://example.com/a")
        b = canonicalize("https://example.com/b")

        assert a.grouping_key != b.grouping_key


class TestIdempotence:
    """Canonicalizing a canonical URL changes nothing."""

    @pytest.mark.parametrize(
        "raw",
        [
            "https://www.example.com/Article/?utm_source=x&b=2&a=1#top",
            "http://www.en.example.com/a/",
            "https://www.www.example.com/",
            "https://example.com/a//",
            "https://example.com/search?q=hello world&tag=a+b",
            "https://example.com/p?expr=a=b",
            "https://bücher.example/",
            "https://user:pw@example.com:8443/x/",
            "https://example.com/caf%C3%A9/",
            "https://\uff57\uff57\uff57.example.com/a",
            "https://\uff45\uff4e.example.com/a",
            "https://www\u3002example.com/a",
        ],
    )
    def test_canonicalize_twice_is_stable(self, raw):
        once = canonicalize(raw)
        twice = canonicalize(once.canonical_form)

        assert twice.canonical_form == once.canonical_form
        assert twice.grouping_key == once.grouping_key

    def test_nested_prefixes_fully_collapse(self):
        assert canonicalize("http://www.en.example.com/a/").canonical_form == (
            "http://example.com/a"
        )

    @pytest.mark.parametrize(
        "raw",
        [
            "https://\uff57\uff57\uff57.example.com/a",
            "https://\uff45\uff4e.example.com/a",
            "https://www\u3002example.com/a",
        ],
    )
    def test_full_width_prefixes_group_with_ascii_form(self, raw):
        result = canonicalize(raw)

        assert result.canonical_form == "https://example.com/a"
        expected = canonicalize("https://example.com/a")
        assert result.grouping_key == expected.grouping_key


class TestGroupingKey:
    """Tests for the grouping key digest."""

    def test_key_is_sha256_of_canonical_form(self):
        result = canonicalize("https://example.com/article")

        expected = sha256(b"https://example.com/article").hexdigest()
        assert result.grouping_key.root == expected

    def test_key_is_stable(self):
        assert str(grouping_key_for("https://example.com/")) == (
            sha256(b"https://example.com/").hexdigest()
        )
        assert grouping_key_for("https://example.com/") == grouping_key_for(
            "https://example.com/"
        )

    def test_key_is_64_hex_characters(self):
        key = canonicalize("https://example.com/").grouping_key.root

        assert len(key) == 64
        assert all(c in "0123456789abcdef" for c in key)


class TestMalformedUrls:
    """Inputs that cannot be parsed as absolute URLs."""

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "   ",
            "not a url",
            "/relative/path",
            "example.com/page",
            "http://",
            "https:///path-only",
            "http://example.com:99999/",
            "http://example.com:port/",
        ],
    )
    def test_rejected(self, raw):
        with pytest.raises(MalformedUrlError):
            canonicalize(raw)
