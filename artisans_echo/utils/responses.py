"""
Utility functions for API responses
"""
from typing import Any, Optional, List, Dict
from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from artisans_echo.schemas.common import PaginationMeta
from artisans_echo.utils.pagination import total_pages


def success_response(
    data: Any = None,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
    **extra: Any
) -> JSONResponse:
    """
    Create success response

    Args:
        data: Response data
        message: Optional success message
        status_code: HTTP status code
        extra: Additional top-level fields

    Returns:
        JSONResponse object
    """
    response = {"ok": True}

    if message:
        response["message"] = message

    if data is not None:
        response["data"] = data

    response.update(extra)

    return JSONResponse(content=jsonable_encoder(response), status_code=status_code)


def error_response(
    error: str,
    detail: Optional[Any] = None,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    """
    Create error response

    Args:
        error: Error message
        detail: Optional error details
        status_code: HTTP status code
        headers: Optional extra response headers

    Returns:
        JSONResponse object
    """
    response = {
        "ok": False,
        "error": error
    }

    if detail:
        response["detail"] = detail

    return JSONResponse(content=jsonable_encoder(response), status_code=status_code, headers=headers)


def paginated_response(
    data: List[Any],
    page: int,
    per_page: int,
    total: int
) -> Dict:
    """
    Create paginated response

    Args:
        data: List of items
        page: Current page number
        per_page: Items per page
        total: Total number of items

    Returns:
        Dict with data and pagination meta
    """
    pages = total_pages(total, per_page)

    meta = PaginationMeta(
        current_page=page,
        per_page=per_page,
        total=total,
        total_pages=pages,
        has_next=page < pages,
        has_prev=page > 1
    )

    return {
        "ok": True,
        "data": data,
        "meta": meta.model_dump()
    }
