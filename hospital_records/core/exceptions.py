from typing import List, Optional

from fastapi import HTTPException, status


# Record errors, raised from the repositories and route handlers.
# `error` is the short label rendered in the JSON error body.
class InvalidIdentifier(HTTPException):
    error = "Invalid Identifier"

    def __init__(self, record_id: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"'{record_id}' is not a valid record identifier",
        )


class MalformedBody(HTTPException):
    error = "Malformed Body"

    def __init__(self, fields: Optional[List[str]] = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body is malformed or has fields of the wrong type",
        )
        self.fields = fields or []


class NotFound(HTTPException):
    error = "Not Found"

    def __init__(
        self,
        detail: str = "Record not found",
        status_code: int = status.HTTP_404_NOT_FOUND,
    ):
        super().__init__(status_code=status_code, detail=detail)


class StoreUnavailable(HTTPException):
    error = "Store Unavailable"

    def __init__(self, detail: str = "The record store is unavailable"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        )
