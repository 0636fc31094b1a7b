"""
core/meal_form.py
────────────────────────────────────────────────────────────────────────
State-free controller behind the meal entry/edit form.

The form never talks to a backend itself: it validates, then hands the
normalized entry (or a trimmed comment) to the collaborators it was
built with.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, NamedTuple

from core.dates import format_date
from core.meal_validation import MealValidation, effective_defaults, validate_meal
from core.messages import NO_COMMENTS
from core.models.meal import Comment, MealEntry, MealType

_LOG = logging.getLogger(__name__)

COMMENT_TIMESTAMP_PATTERN = "d MMM yyyy, HH:mm"


class CommentLine(NamedTuple):
    id: int
    content: str
    created: str


class MealEntryForm:
    def __init__(
        self,
        on_submit: Callable[[MealEntry], Any],
        on_cancel: Callable[[], Any],
        *,
        existing: MealEntry | None = None,
        locked_type: MealType | None = None,
        is_submitting: bool = False,
        add_comment: Callable[[str], Any] | None = None,
        is_nutritionist: bool = False,
        comments: Sequence[Comment] = (),
    ) -> None:
        self._on_submit = on_submit
        self._on_cancel = on_cancel
        self._add_comment = add_comment
        self.existing = existing
        self.locked_type = locked_type
        self.is_submitting = is_submitting
        self.is_nutritionist = is_nutritionist
        self.comments: tuple[Comment, ...] = tuple(comments)
        self.comment_draft = ""

    # -------------------------------- read-only views ---------------
    @property
    def is_edit(self) -> bool:
        return self.existing is not None

    @property
    def type_locked(self) -> bool:
        return self.locked_type is not None

    @property
    def defaults(self) -> dict[str, Any]:
        return effective_defaults(self.existing, self.locked_type)

    @property
    def can_comment(self) -> bool:
        """Only a nutritionist reviewing a saved meal gets the composer."""
        return self.is_edit and self.is_nutritionist and self._add_comment is not None

    def comment_feed(self) -> list[CommentLine] | str:
        """Comments in the order given, or the Spanish placeholder."""
        if not self.comments:
            return NO_COMMENTS
        return [
            CommentLine(c.id, c.content, format_date(c.created_at, COMMENT_TIMESTAMP_PATTERN))
            for c in self.comments
        ]

    # -------------------------------- actions -----------------------
    def submit(self, raw: Mapping[str, Any] | None) -> MealValidation | None:
        """
        Validate `raw` and forward the entry to `on_submit`.

        Returns the validation result, or None when a submission is
        already in flight (controls are disabled).
        """
        if self.is_submitting:
            _LOG.debug("submit ignored: submission in progress")
            return None

        result = validate_meal(raw, existing=self.existing, locked_type=self.locked_type)
        if result.ok:
            self._on_submit(result.entry)
        return result

    def cancel(self) -> bool:
        if self.is_submitting:
            return False
        self._on_cancel()
        return True

    def set_comment_draft(self, text: str) -> None:
        self.comment_draft = text

    def submit_comment(self) -> bool:
        """Send the trimmed draft; blank drafts are left untouched."""
        if not self.can_comment or self.is_submitting:
            return False
        content = self.comment_draft.strip()
        if not content:
            return False
        self._add_comment(content)  # type: ignore[misc]
        self.comment_draft = ""
        return True
