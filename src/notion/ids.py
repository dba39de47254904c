"""Helpers for Notion resource identifiers."""


def normalize_id(resource_id: str) -> str:
    """Strip hyphens so both the dashed and the compact UUID forms are accepted."""
    return resource_id.replace("-", "")


def short_id(resource_id: str, length: int = 8) -> str:
    """Truncated id for listings, e.g. ``1a2b3c4d...``."""
    return normalize_id(resource_id)[:length] + "..."
