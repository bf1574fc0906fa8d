"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class CommentError(DomainError):
    """Base error for comment creation, update and deletion.

    All comment errors are caused by caller input or caller state. None are
    retried, and none leave a partially written comment behind.
    """

    pass


class AuthenticationRequiredError(CommentError):
    """Raised when a write is attempted without a valid caller identity."""

    def __init__(self) -> None:
        super().__init__("Authentication required")


class EmptyContentError(CommentError):
    """Raised when comment content is blank after trimming."""

    def __init__(self) -> None:
        super().__init__("Comment content cannot be empty")


class ContentTooLongError(CommentError):
    """Raised when trimmed comment content exceeds the maximum length."""

    def __init__(self, max_length: int):
        self.max_length = max_length
        super().__init__(
            f"Comment content too long (max {max_length} characters)"
        )


class InvalidUrlError(CommentError):
    """Raised when the page URL cannot be parsed."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid URL: {reason}")


class ParentNotFoundError(CommentError):
    """Raised when replying to a comment that does not exist."""

    def __init__(self, parent_id: str):
        self.parent_id = parent_id
        super().__init__("Parent comment not found")


class NotFoundOrForbiddenError(CommentError):
    """Raised when a comment is missing or owned by someone else.

    The two causes are indistinguishable to the caller.
    """

    def __init__(self, action: str, comment_id: str):
        self.comment_id = comment_id
        super().__init__(
            f"Comment not found or you don't have permission to {action} it"
        )


class EmptySearchTermError(CommentError):
    """Raised when a comment search is requested with a blank term."""

    def __init__(self) -> None:
        super().__init__("Search term cannot be empty")
