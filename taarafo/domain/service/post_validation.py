"""Validation rules for posts entering the post service.

Each check collects every broken field before raising, so callers get the
whole picture in one `INVALID` validation error.
"""

from datetime import datetime, timedelta
from typing import Optional

from taarafo.domain.error import PostError, PostValidationError
from taarafo.domain.model.post import Post
from taarafo.domain.value import EMPTY_POST_ID, PostId

# How far in the past a date may lie and still count as "now"
RECENT_WINDOW = timedelta(minutes=1)

ID_REQUIRED = "Id is required"
TEXT_REQUIRED = "Text is required"
DATE_REQUIRED = "Date is required"
DATE_NOT_TIMEZONE_AWARE = "Date must include a timezone"
DATE_NOT_RECENT = "Date is not recent"
SAME_AS_CREATED = "Date is the same as CreatedDate"
NOT_SAME_AS_CREATED = "Date is not the same as CreatedDate"
SAME_AS_UPDATED = "Date is the same as UpdatedDate"


class _Errors:
    """Accumulates field -> messages and raises them together."""

    def __init__(self) -> None:
        self.errors: dict[str, list[str]] = {}

    def check(self, failed: bool, field: str, message: str) -> None:
        if failed:
            self.errors.setdefault(field, []).append(message)

    def raise_if_any(self) -> None:
        if self.errors:
            raise PostValidationError(PostError.invalid(self.errors))


def _is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def _is_missing(date: Optional[datetime]) -> bool:
    return date is None or date == datetime.min


def _is_naive(date: Optional[datetime]) -> bool:
    return not _is_missing(date) and date.utcoffset() is None


def is_date_not_recent(date: datetime, now: datetime) -> bool:
    """True when `date` is in the future or older than the recent window."""
    difference = now - date
    return difference < timedelta(0) or difference > RECENT_WINDOW


def validate_post_is_not_null(post: Optional[Post]) -> None:
    if post is None:
        raise PostValidationError(PostError.null())


def validate_post_id(post_id: PostId) -> None:
    errors = _Errors()
    errors.check(post_id is None or post_id == EMPTY_POST_ID, "id", ID_REQUIRED)
    errors.raise_if_any()


def _check_fields(errors: _Errors, post: Post) -> None:
    errors.check(post.id == EMPTY_POST_ID, "id", ID_REQUIRED)
    errors.check(_is_blank(post.content), "content", TEXT_REQUIRED)
    errors.check(_is_blank(post.author), "author", TEXT_REQUIRED)
    errors.check(_is_missing(post.created_date), "created_date", DATE_REQUIRED)
    errors.check(
        _is_naive(post.created_date), "created_date", DATE_NOT_TIMEZONE_AWARE
    )
    errors.check(_is_missing(post.updated_date), "updated_date", DATE_REQUIRED)
    errors.check(
        _is_naive(post.updated_date), "updated_date", DATE_NOT_TIMEZONE_AWARE
    )


def validate_post_on_add(post: Post, now: datetime) -> None:
    """A new post is created and last updated at the same, current, moment."""
    errors = _Errors()
    _check_fields(errors, post)
    errors.raise_if_any()

    errors.check(
        post.updated_date != post.created_date, "updated_date", NOT_SAME_AS_CREATED
    )
    errors.check(
        is_date_not_recent(post.created_date, now), "created_date", DATE_NOT_RECENT
    )
    errors.raise_if_any()


def validate_post_on_modify(post: Post, now: datetime) -> None:
    """A modified post carries a fresh update date distinct from its creation."""
    errors = _Errors()
    _check_fields(errors, post)
    errors.raise_if_any()

    errors.check(
        post.updated_date == post.created_date, "updated_date", SAME_AS_CREATED
    )
    errors.check(
        is_date_not_recent(post.updated_date, now), "updated_date", DATE_NOT_RECENT
    )
    errors.raise_if_any()


def validate_storage_post(maybe_post: Optional[Post], post_id: PostId) -> Post:
    if maybe_post is None:
        raise PostValidationError(PostError.not_found(post_id))
    return maybe_post


def validate_against_storage_post_on_modify(post: Post, storage_post: Post) -> None:
    errors = _Errors()
    errors.check(
        post.created_date != storage_post.created_date,
        "created_date",
        NOT_SAME_AS_CREATED,
    )
    errors.check(
        post.updated_date == storage_post.updated_date,
        "updated_date",
        SAME_AS_UPDATED,
    )
    errors.raise_if_any()
