"""Category service"""

import logging
from sqlalchemy.orm import Session
from typing import List, Optional
from nav.core.database import transaction
from nav.core.errors import NotFoundError
from nav.models.category import Category
from nav.models.link import Link
from nav.schemas.common import Position
from nav.services.ordinal_store import OrdinalScope, list_scope
from nav.services.reorder_service import ReorderPlan, reorder_scope

logger = logging.getLogger(__name__)


def list_categories(db: Session, user_id: int) -> List[Category]:
    return list_scope(db, OrdinalScope.categories(user_id))


def get_owned_category(db: Session, user_id: int, category_id: int) -> Category:
    category = db.query(Category).filter(
        Category.id == category_id,
        Category.user_id == user_id
    ).first()

    # absente ou à un autre user: même réponse
    if not category:
        raise NotFoundError("Category not found")

    return category


def create_category(db: Session, user_id: int, name: str, sort_order: Optional[int] = None) -> Category:
    category = Category(user_id=user_id, name=name, sort_order=sort_order or 0)
    with transaction(db, "create category"):
        db.add(category)
    db.refresh(category)
    return category


def update_category(db: Session, user_id: int, category_id: int, name: str, sort_order: int) -> None:
    with transaction(db, "update category"):
        updated = db.query(Category).filter(
            Category.id == category_id,
            Category.user_id == user_id
        ).update({Category.name: name, Category.sort_order: sort_order}, synchronize_session=False)

        if updated == 0:
            raise NotFoundError("Category not found")


def delete_category(db: Session, user_id: int, category_id: int) -> int:
    """
    Supprime la catégorie ET tous ses liens (liens d'abord, puis catégorie).

    Une seule transaction: pas de lien orphelin visible. Retourne le nb de liens supprimés.
    """
    get_owned_category(db, user_id, category_id)

    with transaction(db, "delete category"):
        removed_links = db.query(Link).filter(
            Link.category_id == category_id,
            Link.user_id == user_id
        ).delete(synchronize_session=False)

        deleted = db.query(Category).filter(
            Category.id == category_id,
            Category.user_id == user_id
        ).delete(synchronize_session=False)

        # supprimée entre la vérif et le delete
        if deleted == 0:
            raise NotFoundError("Category not found")

    logger.info(f"Deleted category {category_id} of user {user_id} with {removed_links} link(s)")
    return removed_links


def reorder_categories(
    db: Session,
    user_id: int,
    source_id: int,
    target_id: Optional[int],
    position: Position
) -> ReorderPlan:
    return reorder_scope(db, OrdinalScope.categories(user_id), source_id, target_id, position)
