"""URL canonicalization domain service."""

import logfire

from votp.domain.value import CanonicalUrl, TrackingPolicy
from votp.util.url import canonicalize

from .base import Service


class CanonicalizationService(Service):
    """Canonicalizes page URLs under the configured tracking policy."""

    def __init__(self, tracking_policy: TrackingPolicy) -> None:
        """Initialize canonicalization service.

        Args:
            tracking_policy: Active tracking-parameter policy
        """
        self.tracking_policy = tracking_policy

    def canonicalize(self, raw_url: str) -> CanonicalUrl:
        """Canonicalize a URL and derive its grouping key.

        Args:
            raw_url: URL as supplied by the caller

        Returns:
            Canonical URL and grouping key

        Raises:
            MalformedUrlError: If raw_url is not a valid absolute URL
        """
        with logfire.span(
            "canonicalization_service.canonicalize",
            tracking_policy=self.tracking_policy.version.value,
        ):
            canonical = canonicalize(raw_url, self.tracking_policy)
            logfire.debug(
                "URL canonicalized",
                canonical_url=canonical.canonical_form,
                grouping_key=str(canonical.grouping_key),
            )
            return canonical
