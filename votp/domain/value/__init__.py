"""Domain value objects for VOTP."""

from votp.domain.value.identifiers import CommentId, UserId
from votp.domain.value.types import (
    DEFAULT_TRACKING_POLICY,
    CanonicalUrl,
    GroupingKey,
    SortOrder,
    TrackingPolicy,
    TrackingPolicyVersion,
)

__all__ = [
    # Identifiers
    "UserId",
    "CommentId",
    # Types
    "CanonicalUrl",
    "GroupingKey",
    "SortOrder",
    "TrackingPolicy",
    "TrackingPolicyVersion",
    "DEFAULT_TRACKING_POLICY",
]
