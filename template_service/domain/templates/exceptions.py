"""Template domain exceptions."""


class TemplateError(Exception):
    """Base class for template service errors."""


class UnsupportedApiVersionError(TemplateError):
    """Raised when the caller asks for an API version the service does not implement."""

    def __init__(self, supported: str, requested: str) -> None:
        self.supported = supported
        self.requested = requested
        super().__init__(
            f"unsupported API version: service implements API version '{supported}', but asked for '{requested}'"
        )


class TemplateBackendError(TemplateError):
    """Raised when the document store fails; the message names the failing step."""


class TemplateNotFoundError(TemplateBackendError):
    """Raised when no template matches the requested id."""
