from __future__ import annotations


class ClimateProxyError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ClimateProxyError):
    status_code = 400


class UpstreamError(ClimateProxyError):
    status_code = 500

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class InternalError(ClimateProxyError):
    status_code = 500


class ConfigurationError(ClimateProxyError):
    """Raised at startup; never reaches a request handler."""
