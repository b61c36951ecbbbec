"""Helpers for the free-text list fields stored on movies."""


def split_csv(text: str | None) -> list[str]:
    """Split a comma-separated field into trimmed, non-empty entries."""
    if not text:
        return []
    return [entry for entry in (part.strip() for part in text.split(",")) if entry]
