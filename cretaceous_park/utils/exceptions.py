from fastapi import status
from fastapi.exceptions import HTTPException


def not_found_exception(detail: str = 'Not Found') -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=detail,
    )


def bad_request_exception(detail: str = 'Bad request') -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=detail,
    )
