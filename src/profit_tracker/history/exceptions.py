from http import HTTPStatus

from fastapi import HTTPException


class HistoryItemNotFoundException(HTTPException):
    """Exception for when the history item ID does not exist in storage."""

    status_code = HTTPStatus.NOT_FOUND
    message = "History item does not exist."

    def __init__(self, item_id: str):
        self.item_id = item_id
        self.message = f"{self.message} History item ID: {item_id}"
        super().__init__(status_code=self.status_code, detail=self.message)
