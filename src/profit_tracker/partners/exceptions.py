from http import HTTPStatus

from fastapi import HTTPException


class PartnerException(HTTPException):
    """Base exception class for partner-related errors."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    message = "An error occurred while processing partners."

    def __init__(
        self,
        status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
        message: str = "An error occurred while processing partners.",
    ):
        self.status_code = status_code
        self.message = message or self.message
        super().__init__(status_code=status_code, detail=self.message)


class PartnerNotFoundException(PartnerException):
    """Exception for when the partner ID is unknown."""

    status_code = HTTPStatus.NOT_FOUND
    message = "Partner does not exist."

    def __init__(self, partner_id: str):
        self.partner_id = partner_id
        message = f"{self.message} Partner ID: {partner_id}"
        super().__init__(status_code=self.status_code, message=message)


class PartnerNotCustomException(PartnerException):
    """Exception for attempts to change a built-in partner."""

    status_code = HTTPStatus.BAD_REQUEST
    message = "Built-in partners cannot be modified or deleted."

    def __init__(self, partner_id: str):
        self.partner_id = partner_id
        message = f"{self.message} Partner ID: {partner_id}"
        super().__init__(status_code=self.status_code, message=message)
