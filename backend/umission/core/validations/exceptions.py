from fastapi import status

from umission.response import CustomHTTPException


class NotFound(CustomHTTPException):
    def __init__(self, message: str = "Not found", **kwargs):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            message=message,
            error_code="NOT_FOUND",
            **kwargs
        )


class AlreadyRequested(CustomHTTPException):
    def __init__(self, message: str = "You have already requested to join this event"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=message,
            error_code="ALREADY_REQUESTED",
        )


class QuotaExceeded(CustomHTTPException):
    def __init__(self, message: str = "Event quota is full"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=message,
            error_code="QUOTA_EXCEEDED",
        )


class InvalidRating(CustomHTTPException):
    def __init__(self, rating=None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            message="Rating must be between 1 and 5",
            error_code="INVALID_RATING",
            errors={"rating": f"invalid rating {rating}"} if rating is not None else None,
        )


class DuplicateFeedback(CustomHTTPException):
    def __init__(self, message: str = "Feedback already submitted for this event"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            message=message,
            error_code="DUPLICATE_FEEDBACK",
        )


class Unauthenticated(CustomHTTPException):
    def __init__(self, message: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            message=message,
            error_code="UNAUTHENTICATED",
            headers={"WWW-Authenticate": "Bearer"},
        )


class StorageUnavailable(CustomHTTPException):
    def __init__(self, message: str = "Storage is currently unavailable"):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            message=message,
            error_code="STORAGE_UNAVAILABLE",
        )
