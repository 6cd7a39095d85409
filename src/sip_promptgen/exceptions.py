"""Centralized exception classes for sip-promptgen.

The matching and synthesis core never raises for ordinary input: empty
queries yield no match and unknown models or style flags contribute
nothing. These exceptions cover the edges around it (configuration,
catalog files, template lookups).
"""


class SipPromptGenError(Exception):
    """Base exception for all sip-promptgen errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, details: str | None = None):
        """Initialize the exception.

        Args:
            message: User-friendly error message.
            details: Additional technical details for debugging.
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class ConfigurationError(SipPromptGenError):
    """Raised when configuration is missing or invalid."""

    pass


class CatalogError(SipPromptGenError):
    """Raised when a template catalog file cannot be read or parsed."""

    pass


class TemplateNotFoundError(SipPromptGenError, ValueError):
    """Raised when a template id doesn't exist in a catalog."""

    pass
