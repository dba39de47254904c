"""Error types raised by the Notion API layer and the CLI."""

from typing import Optional


class NotionError(Exception):
    """Base error. Rendered as a single line by the dispatcher."""

    exit_code = 1
    hint: Optional[str] = None

    def __init__(self, message: str, hint: Optional[str] = None) -> None:
        super().__init__(message)
        if hint is not None:
            self.hint = hint


class ConfigurationError(NotionError):
    """Missing or invalid configuration, e.g. no NOTION_TOKEN."""


class MalformedInputError(NotionError, ValueError):
    """A flag value that should hold JSON could not be parsed."""


class MissingArgumentError(NotionError):
    """A required flag was not given."""


class RemoteError(NotionError, RuntimeError):
    """Any failure surfaced by the Notion API or the transport."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status = status
        self.code = code


class RemoteNotFoundError(RemoteError):
    """The resource does not exist or is not shared with the integration."""

    hint = "Make sure the page/database is shared with your integration (Share → Add connections)"
