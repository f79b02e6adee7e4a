"""Priority inference for TODO occurrences.

Keyword choice alone under-specifies urgency, so free-text hints in the line
can raise or lower it. Rules are checked in order, first match wins:

1. high   - keyword BUG/FIXME, or text contains URGENT, CRITICAL, ASAP or "!!!"
2. low    - keyword XXX, or text contains MINOR, NICE TO HAVE or OPTIONAL
3. medium - everything else
"""

from ...models import Priority
from .constants import (
    HIGH_PRIORITY_LITERAL,
    HIGH_PRIORITY_MARKERS,
    HIGH_PRIORITY_PATTERNS,
    LOW_PRIORITY_MARKERS,
    LOW_PRIORITY_PATTERNS,
)


def is_high_priority(pattern: str, text: str) -> bool:
    upper_text = text.upper()
    return (
        pattern.upper() in HIGH_PRIORITY_PATTERNS
        or any(marker in upper_text for marker in HIGH_PRIORITY_MARKERS)
        or HIGH_PRIORITY_LITERAL in text
    )


def is_low_priority(pattern: str, text: str) -> bool:
    upper_text = text.upper()
    return pattern.upper() in LOW_PRIORITY_PATTERNS or any(
        marker in upper_text for marker in LOW_PRIORITY_MARKERS
    )


def classify_priority(pattern: str, text: str) -> Priority:
    """Classify a TODO as high, medium or low priority.

    Args:
        pattern: The marker keyword that matched (any case)
        text: The full trimmed line text

    Returns:
        Exactly one Priority; the function is total
    """
    if is_high_priority(pattern, text):
        return Priority.HIGH
    if is_low_priority(pattern, text):
        return Priority.LOW
    return Priority.MEDIUM
