"""Priority enum and free-text normalization shared by dailies and todos."""

from enum import StrEnum


class Priority(StrEnum):
    """Task priority."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


_PRIORITY_ALIASES: dict[str, Priority] = {
    "HIGH": Priority.HIGH,
    "H": Priority.HIGH,
    "MEDIUM": Priority.MEDIUM,
    "MED": Priority.MEDIUM,
    "M": Priority.MEDIUM,
    "LOW": Priority.LOW,
    "L": Priority.LOW,
}


def normalize_text(text: str) -> str:
    """Lower-case and strip user-entered text."""
    return text.strip().lower()


def normalize_priority(text: str) -> Priority:
    """Map loosely typed priority input onto a Priority.

    Exact aliases ("h", "med", "LOW", ...) win; otherwise any text mentioning
    "high" or "low" maps there, and everything else is MEDIUM.
    """
    norm = text.strip().upper()
    if norm in _PRIORITY_ALIASES:
        return _PRIORITY_ALIASES[norm]

    lower = norm.lower()
    if "high" in lower:
        return Priority.HIGH
    if "low" in lower:
        return Priority.LOW
    return Priority.MEDIUM
