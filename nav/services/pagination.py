from dataclasses import dataclass
from math import ceil
from sqlalchemy.orm import Query
from typing import Generic, List, Tuple, TypeVar

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    items: List[T]
    page: int
    per_page: int
    total: int
    total_pages: int


def page_window(total: int, page: int, per_page: int) -> Tuple[int, int]:
    # page hors bornes -> ramenée dans [1, total_pages], jamais d'erreur
    total_pages = max(1, ceil(total / per_page))
    page = min(max(page, 1), total_pages)
    return page, total_pages


def paginate(query: Query, page: int, per_page: int) -> Page:
    """Query déjà ordonnée -> une fenêtre. Le total est recompté à chaque appel."""
    total = query.count()
    page, total_pages = page_window(total, page, per_page)
    items = query.offset((page - 1) * per_page).limit(per_page).all()

    return Page(
        items=items,
        page=page,
        per_page=per_page,
        total=total,
        total_pages=total_pages
    )
