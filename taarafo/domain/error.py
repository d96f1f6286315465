"""Domain layer errors.

Post operations surface exactly one of four outer errors to callers. Each
wraps a single inner `PostError` whose `kind` says what actually went wrong:

    PostDependencyError            -> FAILED_STORAGE | LOCKED
    PostDependencyValidationError  -> ALREADY_EXISTS
    PostValidationError            -> NULL | INVALID | NOT_FOUND
    PostServiceError               -> FAILED_SERVICE

The low-level cause (a SQLAlchemy error, usually) hangs off the inner error
so the root cause stays diagnosable without leaking to callers.
"""

from enum import Enum
from typing import Optional


class DomainError(Exception):
    """Base domain error."""

    pass


def same_exception(left: Optional[BaseException], right: Optional[BaseException]) -> bool:
    """Compare two exceptions by type and args rather than identity."""
    if left is None or right is None:
        return left is right
    if left is right:
        return True
    return type(left) is type(right) and left.args == right.args


class PostErrorKind(str, Enum):
    """What went wrong during a post operation."""

    FAILED_STORAGE = "failed_storage"
    LOCKED = "locked"
    ALREADY_EXISTS = "already_exists"
    NULL = "null"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    FAILED_SERVICE = "failed_service"


_MESSAGES = {
    PostErrorKind.FAILED_STORAGE: "Failed post storage error occurred, contact support.",
    PostErrorKind.LOCKED: "Post is locked, please try again.",
    PostErrorKind.ALREADY_EXISTS: "Post with the same id already exists.",
    PostErrorKind.NULL: "Post is null.",
    PostErrorKind.INVALID: "Invalid post. Please correct the errors and try again.",
    PostErrorKind.NOT_FOUND: "Couldn't find post.",
    PostErrorKind.FAILED_SERVICE: "Failed post service occurred, please contact support.",
}


class PostError(DomainError):
    """Inner post error, discriminated by `kind`.

    Attributes:
        kind: What went wrong
        cause: The lower-level exception, if any
        errors: Field name -> messages, only for INVALID
    """

    def __init__(
        self,
        kind: PostErrorKind,
        cause: Optional[BaseException] = None,
        errors: Optional[dict[str, list[str]]] = None,
        message: Optional[str] = None,
    ) -> None:
        super().__init__(message or _MESSAGES[kind])
        self.kind = kind
        self.cause = cause
        self.errors = {name: list(msgs) for name, msgs in (errors or {}).items()}
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def failed_storage(cls, cause: BaseException) -> "PostError":
        return cls(PostErrorKind.FAILED_STORAGE, cause=cause)

    @classmethod
    def locked(cls, cause: BaseException) -> "PostError":
        return cls(PostErrorKind.LOCKED, cause=cause)

    @classmethod
    def already_exists(cls, cause: BaseException) -> "PostError":
        return cls(PostErrorKind.ALREADY_EXISTS, cause=cause)

    @classmethod
    def null(cls) -> "PostError":
        return cls(PostErrorKind.NULL)

    @classmethod
    def invalid(cls, errors: dict[str, list[str]]) -> "PostError":
        return cls(PostErrorKind.INVALID, errors=errors)

    @classmethod
    def not_found(cls, post_id: object) -> "PostError":
        return cls(
            PostErrorKind.NOT_FOUND,
            message=f"Couldn't find post with id: {post_id}.",
        )

    @classmethod
    def failed_service(cls, cause: BaseException) -> "PostError":
        return cls(PostErrorKind.FAILED_SERVICE, cause=cause)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PostError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.kind == other.kind
            and self.args == other.args
            and self.errors == other.errors
            and same_exception(self.cause, other.cause)
        )

    def __hash__(self) -> int:
        return hash((type(self), self.kind, self.args))

    def __repr__(self) -> str:
        return f"PostError(kind={self.kind.value!r}, cause={self.cause!r})"


class PostOperationError(DomainError):
    """Base for every error raised across the post service boundary."""

    allowed_kinds: frozenset[PostErrorKind] = frozenset()
    summary = "Post error occurred."

    def __init__(self, inner: PostError) -> None:
        if inner.kind not in self.allowed_kinds:
            raise ValueError(
                f"{type(self).__name__} cannot wrap a {inner.kind.value} error"
            )
        super().__init__(self.summary)
        self.inner = inner
        self.__cause__ = inner

    @property
    def kind(self) -> PostErrorKind:
        return self.inner.kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PostOperationError):
            return NotImplemented
        return type(self) is type(other) and self.inner == other.inner

    def __hash__(self) -> int:
        return hash((type(self), self.inner))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inner!r})"


class PostDependencyError(PostOperationError):
    """Storage failed or a write lost an optimistic-concurrency race."""

    allowed_kinds = frozenset({PostErrorKind.FAILED_STORAGE, PostErrorKind.LOCKED})
    summary = "Post dependency error occurred, contact support."


class PostDependencyValidationError(PostOperationError):
    """Storage rejected the post because of its own state (duplicate id)."""

    allowed_kinds = frozenset({PostErrorKind.ALREADY_EXISTS})
    summary = "Post dependency validation occurred, please try again."


class PostValidationError(PostOperationError):
    """The caller supplied a missing, malformed or unknown post."""

    allowed_kinds = frozenset(
        {PostErrorKind.NULL, PostErrorKind.INVALID, PostErrorKind.NOT_FOUND}
    )
    summary = "Post validation errors occurred, please try again."


class PostServiceError(PostOperationError):
    """Something unexpected failed inside the post service."""

    allowed_kinds = frozenset({PostErrorKind.FAILED_SERVICE})
    summary = "Post service error occurred, contact support."
