"""
Input parsing helpers for form fields and query parameters.

Only required-field checks and fixed-set membership are enforced; free text
is otherwise stored as entered.
"""
from typing import List, Optional

from wanderlog.core.exceptions import ValidationFailedError
from wanderlog.models.trip import TripCategory

ALL_CATEGORIES = "all"


def require_text(value: Optional[str], field_name: str) -> str:
    """
    Ensure a required text field is present

    Args:
        value: Raw field value
        field_name: Field name used in the error message

    Returns:
        The value with surrounding whitespace removed

    Raises:
        ValidationFailedError: If the value is missing or blank
    """
    if value is None or not value.strip():
        raise ValidationFailedError(f"{field_name} is required", details={"field": field_name})
    return value.strip()


def parse_tags(raw: Optional[str]) -> List[str]:
    """
    Split a comma-separated tag field, trimming entries and dropping empty ones

    "a, b ,c" -> ["a", "b", "c"]; "a,,b" -> ["a", "b"]
    """
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def parse_category_filter(value: Optional[str]) -> Optional[TripCategory]:
    """
    Resolve a category query parameter

    Returns:
        None for no filter (missing, blank or "all"), else the matching
        category; both are matched case-insensitively

    Raises:
        ValidationFailedError: If the value is not a known category
    """
    wanted = (value or "").strip().lower()
    if not wanted or wanted == ALL_CATEGORIES:
        return None
    for category in TripCategory:
        if category.value.lower() == wanted:
            return category
    raise ValidationFailedError(
        f"Unknown category '{value}'",
        details={"allowed": [c.value for c in TripCategory]},
    )
