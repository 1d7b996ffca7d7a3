from http import HTTPStatus

from fastapi import HTTPException


class StorageUnavailableException(HTTPException):
    """Raised when the key-value storage backend cannot be reached."""

    status_code = HTTPStatus.SERVICE_UNAVAILABLE
    message = "Storage backend is not available."

    def __init__(self, details: str = ""):
        message = self.message
        if details:
            message += f" Details: {details}"
        self.message = message
        super().__init__(status_code=self.status_code, detail=message)
