"""Domain value objects for VOTP.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from votp.domain.value.common import RootValueObject, ValueObject


class SortOrder(str, Enum):
    """Ordering of comment listings by creation time."""

    ASC = "asc"
    DESC = "desc"


class GroupingKey(RootValueObject[str]):
    """Hex-encoded SHA-256 digest of a canonical URL.

    Comments that refer to the same logical page share a grouping key.
    """

    @field_validator("root")
    @classmethod
    def validate_digest_format(cls, v: str) -> str:
        """Validate key is 64 lowercase hex characters."""
        if not re.fullmatch(r"[0-9a-f]{64}", v):
            raise ValueError("Grouping key must be 64 lowercase hex characters")
        return v


class CanonicalUrl(ValueObject):
    """Result of canonicalizing a raw URL.

    Created fresh on every normalization call and never persisted on its
    own; comments inline both fields.
    """

    canonical_form: str
    grouping_key: GroupingKey


class TrackingPolicyVersion(str, Enum):
    """Published versions of the tracking-parameter denylist."""

    V1 = "v1"


_TRACKING_PARAMETERS: dict[TrackingPolicyVersion, frozenset[str]] = {
    TrackingPolicyVersion.V1: frozenset(
        {
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
        }
    ),
}


class TrackingPolicy(ValueObject):
    """Versioned denylist of query parameters that carry analytics noise.

    Keys are matched exactly and case-sensitively. Existing versions must
    never be edited: grouping keys already stored depend on them. Add a new
    version instead.
    """

    version: TrackingPolicyVersion
    parameters: frozenset[str]

    @classmethod
    def for_version(cls, version: TrackingPolicyVersion | str) -> "TrackingPolicy":
        """Load a published policy.

        Args:
            version: Policy version (enum member or its string value)

        Returns:
            The tracking policy for that version

        Raises:
            ValueError: If the version is unknown
        """
        version = TrackingPolicyVersion(version)
        return cls(version=version, parameters=_TRACKING_PARAMETERS[version])

    def is_tracking(self, key: str) -> bool:
        """Whether a query key is in this policy's denylist."""
        return key in self.parameters


DEFAULT_TRACKING_POLICY = TrackingPolicy.for_version(TrackingPolicyVersion.V1)
