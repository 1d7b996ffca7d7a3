from http import HTTPStatus

from fastapi import HTTPException


class TripException(HTTPException):
    """Base exception class for trip-related errors."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    message = "An error occurred while processing trips."

    def __init__(
        self,
        status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
        message: str = "An error occurred while processing trips.",
    ):
        self.status_code = status_code
        self.message = message or self.message
        super().__init__(status_code=status_code, detail=self.message)


class TripNotFoundException(TripException):
    """Exception for when the trip ID does not exist in storage."""

    status_code = HTTPStatus.NOT_FOUND
    message = "Trip does not exist."

    def __init__(self, trip_id: str):
        self.trip_id = trip_id
        message = f"{self.message} Trip ID: {trip_id}"
        super().__init__(status_code=self.status_code, message=message)
