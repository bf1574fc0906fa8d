"""URL canonicalization.

Turns the many URLs a reader can arrive at a page from into one canonical
string and a fixed-width grouping key:

    >>> canonicalize("https://www.example.com/article/?utm_source=x#top")
    CanonicalUrl(canonical_form='https://example.com/article', ...)

Each rule collapses one axis of accidental variation (case, mirror
subdomain, trailing slash, tracking noise, parameter order, fragment).
Full RFC 3986 normalization is not attempted.
"""

import re
from hashlib import sha256
from urllib.parse import SplitResult, parse_qsl, quote, urlencode, urlsplit, urlunsplit

from votp.domain.value import (
    DEFAULT_TRACKING_POLICY,
    CanonicalUrl,
    GroupingKey,
    TrackingPolicy,
)

# Schemes that always carry a host and get "/" as their empty path
SPECIAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})
DEFAULT_PORTS = {"http": 80, "https": 443, "ftp": 21, "ws": 80, "wss": 443}

_LANGUAGE_SUBDOMAIN = re.compile(r"^[a-z]{2}\.")

# Characters left as-is when re-encoding; "%" keeps existing escapes intact
_PATH_SAFE = "/%:@!$&'()*+,;=~"
_QUERY_SAFE = "/:@!$'()*,;~"


class UrlError(Exception):
    """Base URL error."""

    pass


class MalformedUrlError(UrlError):
    """Raised when a string cannot be parsed as an absolute URL."""

    pass


def normalize_host(host: str) -> str:
    """Normalize a host name for grouping.

    Lower-cases, removes one leading ``www.``, then removes a two-letter
    language subdomain such as ``en.`` or ``de.``. Malformed hosts are not
    rejected here.

    Args:
        host: Host name without port

    Returns:
        Normalized host
    """
    host = host.lower()
    if host.startswith("www."):
        host = host[4:]
    if _LANGUAGE_SUBDOMAIN.match(host):
        host = host[3:]
    return host


def is_tracking_parameter(
    key: str, policy: TrackingPolicy = DEFAULT_TRACKING_POLICY
) -> bool:
    """Whether a query key carries tracking data rather than page identity.

    Args:
        key: Decoded query parameter name (case-sensitive)
        policy: Tracking policy to check against

    Returns:
        True if the key is in the policy's denylist
    """
    return policy.is_tracking(key)


def normalize_path(path: str) -> str:
    """Strip one trailing slash from any path except the root."""
    if len(path) > 1 and path.endswith("/"):
        return path[:-1]
    return path


def normalize_query(
    query: str, policy: TrackingPolicy = DEFAULT_TRACKING_POLICY
) -> str:
    """Drop tracking parameters and sort the rest by key.

    The sort is stable, so repeated keys keep their relative order.

    Args:
        query: Raw query string (without "?")
        policy: Tracking policy to filter with

    Returns:
        Re-encoded query string, empty if no parameters remain
    """
    pairs = parse_qsl(query, keep_blank_values=True)
    kept = [(key, value) for key, value in pairs if not is_tracking_parameter(key, policy)]
    kept.sort(key=lambda pair: pair[0])
    return urlencode(kept, safe=_QUERY_SAFE, quote_via=quote)


def canonicalize(
    raw_url: str, policy: TrackingPolicy = DEFAULT_TRACKING_POLICY
) -> CanonicalUrl:
    """Canonicalize a URL and compute its grouping key.

    Single-step host and path rules are re-applied until stable so that
    canonicalizing a canonical URL is a no-op.

    Args:
        raw_url: URL as supplied by the caller
        policy: Tracking policy used to filter the query string

    Returns:
        Canonical form and its SHA-256 grouping key

    Raises:
        MalformedUrlError: If raw_url is not a valid absolute URL
    """
    parts = _parse_absolute(raw_url)
    scheme = parts.scheme.lower()

    netloc = _normalize_netloc(parts, scheme)

    path = quote(parts.path, safe=_PATH_SAFE)
    if not path and scheme in SPECIAL_SCHEMES:
        path = "/"
    path = _until_stable(normalize_path, path)

    query = normalize_query(parts.query, policy)

    canonical_form = urlunsplit((scheme, netloc, path, query, ""))
    return CanonicalUrl(
        canonical_form=canonical_form,
        grouping_key=grouping_key_for(canonical_form),
    )


def grouping_key_for(canonical_form: str) -> GroupingKey:
    """Hex SHA-256 of the canonical string's UTF-8 bytes."""
    return GroupingKey(sha256(canonical_form.encode("utf-8")).hexdigest())


def _parse_absolute(raw_url: str) -> SplitResult:
    raw_url = raw_url.strip()
    scheme, colon, _ = raw_url.partition(":")
    if colon and scheme.lower() in SPECIAL_SCHEMES:
        raw_url = _backslashes_to_slashes(raw_url)

    try:
        parts = urlsplit(raw_url)
    except ValueError as e:
        raise MalformedUrlError(str(e)) from e

    if not parts.scheme:
        raise MalformedUrlError("relative URL without a base")
    if parts.scheme.lower() in SPECIAL_SCHEMES and not parts.hostname:
        raise MalformedUrlError("empty host")

    try:
        parts.port
    except ValueError as e:
        raise MalformedUrlError("invalid port number") from e

    return parts


def _normalize_netloc(parts: SplitResult, scheme: str) -> str:
    if not parts.netloc:
        return parts.netloc

    userinfo, _, _ = parts.netloc.rpartition("@")
    host = _until_stable(normalize_host, _ascii_host(parts.hostname or ""))
    if not host and scheme in SPECIAL_SCHEMES:
        raise MalformedUrlError("empty host")

    if ":" in host:
        host = f"[{host}]"  # IPv6 literal

    netloc = f"{userinfo}@{host}" if userinfo else host
    port = parts.port
    if port is not None and port != DEFAULT_PORTS.get(scheme):
        netloc = f"{netloc}:{port}"
    return netloc


def _ascii_host(host: str) -> str:
    # Nameprep folds full-width letters and ideographic dots, so the host
    # rules must see the encoded form
    if host.isascii():
        return host
    try:
        return host.encode("idna").decode("ascii")
    except UnicodeError as e:
        raise MalformedUrlError("invalid international domain name") from e


def _until_stable(step, value: str) -> str:
    while True:
        normalized = step(value)
        if normalized == value:
            return value
        value = normalized


def _backslashes_to_slashes(raw_url: str) -> str:
    # Browsers read "\" as "/" before the query in special schemes
    end = len(re.match(r"[^?#]*", raw_url).group())
    return raw_url[:end].replace("\\", "/") + raw_url[end:]
