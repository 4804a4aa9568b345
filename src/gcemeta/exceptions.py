class MetadataError(Exception):
    """Base class for gcemeta exceptions."""


class RequestConstructionError(MetadataError):
    """The metadata request could not be built (malformed or unsupported URL)."""


class TransportError(MetadataError):
    """The request did not complete, or the server answered with a non-2xx status."""

    status_code: int | None

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class DecodeError(MetadataError):
    """The response body is not valid JSON or does not match the metadata shape."""


class PreconditionError(MetadataError):
    """A derived accessor was used on a record that lacks the data it needs."""
