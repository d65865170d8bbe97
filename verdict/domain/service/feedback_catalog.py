"""Feedback catalog domain service."""

from collections.abc import Iterable, Sequence

import logfire

from verdict.domain.value import FEEDBACK_TAG_MAX_LENGTH

from .base import Service


class FeedbackCatalog(Service):
    """The live set of feedback tags a vote may carry.

    An empty catalog disables feedback tags: votes may omit them and any tag
    that is supplied is invalid. Replacing the set is a single reference swap,
    so validations running concurrently observe either the old or the new set.
    Stored votes are never revalidated when the set changes.
    """

    def __init__(self, tags: Iterable[str] = ()) -> None:
        """Initialize feedback catalog.

        Args:
            tags: Initial allowed tags
        """
        self._tags: tuple[str, ...] = self._normalize(tags)

    def current_tags(self) -> tuple[str, ...]:
        """Return the allowed tags in configured order."""
        return self._tags

    def set_tags(self, tags: Iterable[str]) -> None:
        """Replace the allowed tags.

        Args:
            tags: New allowed tags

        Raises:
            TypeError: If any tag is not a string
            ValueError: If any tag is longer than FEEDBACK_TAG_MAX_LENGTH
        """
        new_tags = self._normalize(tags)
        previous = self._tags
        self._tags = new_tags
        logfire.info(
            "Feedback catalog replaced",
            previous=list(previous),
            current=list(new_tags),
        )

    @property
    def enabled(self) -> bool:
        return bool(self._tags)

    def contains(self, tag: str) -> bool:
        return tag in self._tags

    def invalid_entries(self, tags: Sequence[str]) -> list[str]:
        """Return the entries of `tags` that are not in the live set."""
        allowed = self._tags
        return [tag for tag in tags if tag not in allowed]

    @staticmethod
    def _normalize(tags: Iterable[str]) -> tuple[str, ...]:
        # Drop duplicates, keep first occurrence order
        seen: dict[str, None] = {}
        for tag in tags:
            if not isinstance(tag, str):
                raise TypeError(
                    f"Feedback tags must be strings, got {type(tag).__name__}"
                )
            if len(tag) > FEEDBACK_TAG_MAX_LENGTH:
                raise ValueError(
                    f"Feedback tag longer than {FEEDBACK_TAG_MAX_LENGTH} characters: "
                    f"{tag[:20]!r}..."
                )
            seen.setdefault(tag, None)
        return tuple(seen)
