"""Link service"""

import logging
from sqlalchemy.orm import Session
from typing import List, Optional
from nav.core.config import settings
from nav.core.database import transaction
from nav.core.errors import NotFoundError
from nav.models.category import Category
from nav.models.link import Link
from nav.schemas.common import Position
from nav.services.category_service import get_owned_category, list_categories
from nav.services.ordinal_store import OrdinalScope, scope_query
from nav.services.pagination import Page, paginate
from nav.services.reorder_service import ReorderPlan, reorder_scope

logger = logging.getLogger(__name__)


def get_owned_link(db: Session, user_id: int, link_id: int) -> Link:
    link = db.query(Link).filter(
        Link.id == link_id,
        Link.user_id == user_id
    ).first()

    if not link:
        raise NotFoundError("Link not found")

    return link


def create_link(
    db: Session,
    user_id: int,
    category_id: int,
    name: str,
    url: str,
    icon: Optional[str] = "",
    sort_order: Optional[int] = None
) -> Link:
    # la catégorie doit appartenir à l'user
    get_owned_category(db, user_id, category_id)

    link = Link(
        user_id=user_id,
        category_id=category_id,
        name=name,
        url=url,
        icon=icon or "",
        sort_order=sort_order or 0
    )
    with transaction(db, "create link"):
        db.add(link)
    db.refresh(link)
    return link


def update_link(
    db: Session,
    user_id: int,
    link_id: int,
    category_id: int,
    name: str,
    url: str,
    icon: Optional[str] = "",
    sort_order: Optional[int] = None
) -> None:
    # category_id peut changer: on revérifie la propriété à chaque fois
    get_owned_category(db, user_id, category_id)

    with transaction(db, "update link"):
        updated = db.query(Link).filter(
            Link.id == link_id,
            Link.user_id == user_id
        ).update({
            Link.category_id: category_id,
            Link.name: name,
            Link.url: url,
            Link.icon: icon or "",
            Link.sort_order: sort_order or 0
        }, synchronize_session=False)

        if updated == 0:
            raise NotFoundError("Link not found")


def delete_link(db: Session, user_id: int, link_id: int) -> None:
    with transaction(db, "delete link"):
        deleted = db.query(Link).filter(
            Link.id == link_id,
            Link.user_id == user_id
        ).delete(synchronize_session=False)

        if deleted == 0:
            raise NotFoundError("Link not found")


def list_links_page(
    db: Session,
    user_id: int,
    category_id: int,
    page: int = 1,
    per_page: int = settings.LINKS_PER_PAGE
) -> Page:
    get_owned_category(db, user_id, category_id)
    return paginate(scope_query(db, OrdinalScope.links(user_id, category_id)), page, per_page)


def list_links_grouped(db: Session, user_id: int) -> List[dict]:
    """
    Toutes les catégories de l'user avec leurs liens imbriqués.

    Ordre: sort_order de la catégorie, puis sort_order du lien (id en départage).
    Les catégories vides sont incluses avec links=[].
    """
    categories = list_categories(db, user_id)

    links = db.query(Link).join(
        Category, Link.category_id == Category.id
    ).filter(
        Link.user_id == user_id,
        Category.user_id == user_id
    ).order_by(
        Link.sort_order.asc(),
        Link.id.asc()
    ).all()

    grouped = {
        category.id: {
            "id": category.id,
            "name": category.name,
            "sort_order": category.sort_order,
            "links": []
        }
        for category in categories
    }
    for link in links:
        grouped[link.category_id]["links"].append(link)

    # dict inséré dans l'ordre des catégories
    return list(grouped.values())


def reorder_links(
    db: Session,
    user_id: int,
    category_id: int,
    source_id: int,
    target_id: Optional[int],
    position: Position
) -> ReorderPlan:
    # catégorie d'un autre user -> NotFound; lien d'une autre catégorie -> InvalidReorder
    get_owned_category(db, user_id, category_id)
    return reorder_scope(db, OrdinalScope.links(user_id, category_id), source_id, target_id, position)
