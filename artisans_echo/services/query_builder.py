"""
Artwork query composition

Turns listing filters (search term, category, owner, visibility) into
SQLAlchemy predicates and applies the default listing order.
"""
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Query

from artisans_echo.core.config import settings
from artisans_echo.models.artwork import Artwork, VISIBILITY_PUBLIC

ALL_CATEGORIES = "all"
LIKE_ESCAPE = "\\"


@dataclass
class ArtworkFilters:
    """Optional filters for an artwork listing"""
    search: Optional[str] = None
    category: Optional[str] = None
    artist_email: Optional[str] = None
    public_only: bool = True


def normalize_search_term(term: Optional[str], max_length: Optional[int] = None) -> Optional[str]:
    """Strip and truncate a search term; blank terms disable the search"""
    if term is None:
        return None
    if max_length is None:
        max_length = settings.SEARCH_TERM_MAX_LENGTH
    term = term.strip()[:max_length]
    return term or None


def escape_like(term: str) -> str:
    """Escape LIKE metacharacters so the term matches as a literal substring"""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def normalize_category(category: Optional[str]) -> Optional[str]:
    """Return the category to filter on, or None when the filter is disabled"""
    if category is None:
        return None
    category = category.strip()
    if not category or category.lower() == ALL_CATEGORIES:
        return None
    return category


def build_conditions(filters: ArtworkFilters) -> List:
    conditions = []

    if filters.public_only:
        conditions.append(Artwork.visibility == VISIBILITY_PUBLIC)

    term = normalize_search_term(filters.search)
    if term:
        pattern = f"%{escape_like(term)}%"
        conditions.append(or_(
            Artwork.title.ilike(pattern, escape=LIKE_ESCAPE),
            Artwork.artist_name.ilike(pattern, escape=LIKE_ESCAPE),
            Artwork.category.ilike(pattern, escape=LIKE_ESCAPE),
        ))

    category = normalize_category(filters.category)
    if category:
        conditions.append(Artwork.category == category)

    if filters.artist_email:
        conditions.append(Artwork.artist_email == filters.artist_email.strip().lower())

    return conditions


def apply_filters(query: Query, filters: ArtworkFilters) -> Query:
    conditions = build_conditions(filters)
    if conditions:
        query = query.filter(*conditions)
    return query


def apply_default_order(query: Query) -> Query:
    # Most recent first; id only makes ties deterministic
    return query.order_by(Artwork.created_at.desc(), Artwork.id)
