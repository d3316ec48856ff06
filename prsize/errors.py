"""Exceptions raised while sizing and labeling a pull request."""


class PRSizeError(Exception):
    """Base class for all prsize errors."""


class ConfigurationMissing(PRSizeError):
    """One or more required configuration values are unset."""

    def __init__(self, names: list[str]) -> None:
        self.names = list(names)
        super().__init__(f"Missing required environment variables: {', '.join(self.names)}")


class InvalidSizeLabel(PRSizeError, ValueError):
    """A label outside the known size vocabulary was requested."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Invalid size label: {label}")


class RemoteRequestFailure(PRSizeError):
    """A GitHub API request failed or returned an unusable response."""

    def __init__(self, method: str, url: str, reason: str, status_code: int | None = None) -> None:
        self.method = method
        self.url = url
        self.reason = reason
        self.status_code = status_code
        status = f" ({status_code})" if status_code is not None else ""
        super().__init__(f"{method} {url} failed{status}: {reason}")
