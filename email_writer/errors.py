class EmailWriterError(Exception):
    """Base class for failures scoped to a single generation request."""


class ConfigError(Exception):
    pass


class InvalidInput(EmailWriterError):
    pass


class GenerationFailed(EmailWriterError):
    pass


class ParseError(EmailWriterError):
    pass


class UpstreamError(EmailWriterError):
    def __init__(
        self,
        message: str,
        *,
        kind: str = "response",
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code
        self.body = body
