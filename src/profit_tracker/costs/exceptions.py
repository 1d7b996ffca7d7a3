from http import HTTPStatus

from fastapi import HTTPException


class CostException(HTTPException):
    """Base exception class for cost-related errors."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    message = "An error occurred while processing costs."

    def __init__(
        self,
        status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
        message: str = "An error occurred while processing costs.",
    ):
        self.status_code = status_code
        self.message = message or self.message
        super().__init__(status_code=status_code, detail=self.message)


class CostNotFoundException(CostException):
    """Exception for when the cost ID does not exist in storage."""

    status_code = HTTPStatus.NOT_FOUND
    message = "Cost does not exist."

    def __init__(self, cost_id: str):
        self.cost_id = cost_id
        message = f"{self.message} Cost ID: {cost_id}"
        super().__init__(status_code=self.status_code, message=message)
