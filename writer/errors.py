class PublishError(Exception):
    """Base class for failures raised inside the publish pipeline."""


class InputValidationError(PublishError):
    """Required input was missing; raised before any remote call is made."""


class RemoteServiceError(PublishError):
    """The image host or GitHub rejected a call or could not be reached."""

    def __init__(self, service: str, message: str, status_code: int | None = None):
        super().__init__(message)
        self.service = service
        self.status_code = status_code
