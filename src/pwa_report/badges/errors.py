"""Errors raised by the badge computation engine."""

from __future__ import annotations


class ConfigurationError(LookupError):
    """An audit references a group id missing from the group lookup table."""

    def __init__(self, group_id: str, audit_id: str | None = None) -> None:
        self.group_id = group_id
        self.audit_id = audit_id
        where = f" (referenced by audit '{audit_id}')" if audit_id else ""
        super().__init__(f"Unknown audit group '{group_id}'{where}.")


__all__ = ["ConfigurationError"]
