from typing import Any

from fastapi import HTTPException, status


class PostNotFoundException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_404_NOT_FOUND, detail=detail)


class PostValidationException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, detail=detail)


class StoreUnavailableException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail)
