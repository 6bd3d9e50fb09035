"""
Pagination utilities
"""
from sqlalchemy.orm import Query
from typing import Tuple, List, Any, Optional
from artisans_echo.core.config import settings


def get_pagination_params(
    page: Optional[int] = 1,
    per_page: Optional[int] = None
) -> Tuple[int, int]:
    """
    Validate and return pagination parameters

    Args:
        page: Page number (1-indexed)
        per_page: Items per page (defaults to DEFAULT_PAGE_SIZE)

    Returns:
        Tuple of (validated_page, validated_per_page)
    """
    if per_page is None:
        per_page = settings.DEFAULT_PAGE_SIZE

    page = max(1, page or 1)
    per_page = min(max(1, per_page), settings.MAX_PAGE_SIZE)

    return page, per_page


def page_offset(page: int, per_page: int) -> int:
    return (page - 1) * per_page


def total_pages(total: int, per_page: int) -> int:
    return (total + per_page - 1) // per_page  # Ceiling division


def paginate(
    query: Query,
    page: int = 1,
    per_page: Optional[int] = None
) -> Tuple[List[Any], int]:
    """
    Paginate SQLAlchemy query

    Args:
        query: SQLAlchemy query object, already ordered
        page: Page number (1-indexed)
        per_page: Items per page (defaults to DEFAULT_PAGE_SIZE)

    Returns:
        Tuple of (items, total_count)
    """
    page, per_page = get_pagination_params(page, per_page)

    total = query.order_by(None).count()
    items = query.limit(per_page).offset(page_offset(page, per_page)).all()

    return items, total
