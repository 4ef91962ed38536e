"""Exception hierarchy for remserver."""


class RemServerError(Exception):
    """Base exception for all remserver errors."""


class ConfigurationError(RemServerError):
    """Raised when the configured datasets cannot be loaded."""


class SourceUnreadable(ConfigurationError):
    """Raised when a single dataset source is missing, unreadable or not a JSON array."""

    def __init__(self, path, reason: str = "not readable"):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"File '{self.path}' for dataset {reason}.")


class MalformedInput(RemServerError):
    """Raised when an entry or an item id does not have the expected shape."""
