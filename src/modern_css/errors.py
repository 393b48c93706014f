"""Error hierarchy for the style compiler."""
from __future__ import annotations


class ModernCSSError(Exception):
    """Base error for all modern_css errors."""


class StyleConfigError(ModernCSSError):
    """Raised when a style description or component config is malformed.

    ``key`` names the offending style key; ``path`` lists the keys that
    enclose it, outermost first.
    """

    def __init__(
        self, message: str, *, key: str | None = None, path: tuple[str, ...] = ()
    ) -> None:
        self.key = key
        self.path = path
        if path:
            message = f"{message} (at {' > '.join(path)})"
        super().__init__(message)
