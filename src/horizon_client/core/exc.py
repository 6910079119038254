"""
Core exception types for horizon_client.

These are dependency-free and may be imported by every module.
"""

__all__ = [
    "HorizonError",
    "UriError",
    "UriConstructionError",
    "InvalidPath",
    "PathParamParseError",
    "DeserializationError",
    "AmountDomainError",
    "HorizonHttpError",
]


class HorizonError(Exception):
    """Base class for every error raised by horizon_client."""
    pass


class UriError(HorizonError):
    """Raised when a URI cannot be built or does not describe an endpoint."""
    pass


class UriConstructionError(UriError):
    """Raised when host + path + query does not assemble into a valid URI."""

    def __init__(self, uri: str, reason: str):
        super().__init__(f"Cannot build request URI {uri!r}: {reason}")
        self.uri = uri
        self.reason = reason


class InvalidPath(UriError):
    """Raised when a URI path does not match the endpoint's path template."""

    def __init__(self, path: str, expected: str):
        super().__init__(f"Path {path!r} does not match {expected!r}")
        self.path = path
        self.expected = expected


class PathParamParseError(UriError):
    """Raised when a captured path segment cannot be converted to its type."""

    def __init__(self, name: str, value: str, expected_type: type):
        super().__init__(
            f"Path parameter {name}={value!r} is not a valid {expected_type.__name__}"
        )
        self.name = name
        self.value = value
        self.expected_type = expected_type


class DeserializationError(HorizonError):
    """Raised when a JSON payload does not match the declared resource shape.

    Attributes
    ----------
    resource : str
        Name of the resource type being built.
    field : str | None
        JSON key that failed, when the failure is attributable to one field.
    """

    def __init__(self, resource: str, message: str, *, field=None):
        where = f"{resource}.{field}" if field else resource
        super().__init__(f"{where}: {message}")
        self.resource = resource
        self.field = field


class AmountDomainError(HorizonError):
    """Raised when an amount is negative or finer than one stroop."""
    pass


class HorizonHttpError(HorizonError):
    """Raised by the client when the server answers with a non-success status.

    Attributes
    ----------
    status_code : int
        HTTP status of the response.
    url : str
        Requested URL.
    title : str | None
        ``title`` member of the server's problem document, if any.
    detail : str | None
        ``detail`` member of the server's problem document, if any.
    """

    def __init__(self, status_code: int, url: str, *, title=None, detail=None):
        text = title or "request failed"
        if detail:
            text = f"{text}: {detail}"
        super().__init__(f"HTTP {status_code} for {url}: {text}")
        self.status_code = status_code
        self.url = url
        self.title = title
        self.detail = detail
