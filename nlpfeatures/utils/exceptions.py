from typing import Optional


class FeatureError(Exception):
    """Flexible feature-extraction exception."""

    def __init__(self, code: str, message: Optional[str] = None):
        self.code = code
        self.message = message or "An error occurred"
        super().__init__(f"{self.code}: {self.message}")

    @property
    def detail(self) -> dict:
        return {"code": self.code, "message": self.message}


class InvalidInputError(FeatureError):
    """Input is not text."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(code="INVALID_INPUT", message=message)


class InvalidParameterError(FeatureError):
    """A configuration value is out of range."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(code="INVALID_PARAMETER", message=message)


class ResourceNotFoundError(FeatureError):
    """An NLTK corpus or model is not installed."""

    def __init__(self, resource: str, message: Optional[str] = None):
        self.resource = resource
        super().__init__(
            code="RESOURCE_NOT_FOUND",
            message=message
            or f"NLTK resource '{resource}' not found. "
            f"Run: python -m nltk.downloader {resource}",
        )
