from typing import Optional


class UnknownContentType(LookupError):
    """Raised when a uid does not name a registered content type."""

    def __init__(self, uid: str):
        super().__init__(f'Unknown content type: {uid}')
        self.uid = uid


class MetricsFetchError(Exception):
    """Transport failure or non-2xx response from the count endpoint."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
