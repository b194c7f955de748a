"""Reusable annotated field types for the feed models."""

from collections.abc import Sequence
from typing import Annotated, TypeVar

from pydantic import AfterValidator

T = TypeVar("T")


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def _unique(values: Sequence[T]) -> list[T]:
    # Order-preserving dedupe; skipHours/skipDays are sets on the wire
    return list(dict.fromkeys(values))


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]
"""A string that must contain at least one non-whitespace character."""

UniqueList = AfterValidator(_unique)
"""Validator collapsing repeated members of a list, keeping first occurrences."""
