"""
Ordinal store - lecture ordonnée et écriture scopée des sort_order.

Un scope = le groupe dans lequel les sort_order sont comparés:
  - catégories: (user_id)
  - liens:      (user_id, category_id)
"""

from sqlalchemy.orm import Session, Query
from typing import Dict, List, Optional
from nav.core.database import transaction
from nav.core.errors import NotFoundError
from nav.models.category import Category
from nav.models.link import Link


class OrdinalScope:
    def __init__(self, model, user_id: int, category_id: Optional[int] = None):
        self.model = model
        self.user_id = user_id
        self.category_id = category_id

    @classmethod
    def categories(cls, user_id: int) -> "OrdinalScope":
        return cls(Category, user_id)

    @classmethod
    def links(cls, user_id: int, category_id: int) -> "OrdinalScope":
        return cls(Link, user_id, category_id)

    @property
    def label(self) -> str:
        return self.model.__name__

    def filters(self) -> list:
        conditions = [self.model.user_id == self.user_id]
        if self.category_id is not None:
            conditions.append(self.model.category_id == self.category_id)
        return conditions

    def __repr__(self) -> str:
        if self.category_id is None:
            return f"<{self.label} scope user={self.user_id}>"
        return f"<{self.label} scope user={self.user_id} category={self.category_id}>"


def scope_query(db: Session, scope: OrdinalScope) -> Query:
    # id en clé secondaire: deux sort_order égaux ne s'inversent jamais entre deux lectures
    return db.query(scope.model).filter(*scope.filters()).order_by(
        scope.model.sort_order.asc(),
        scope.model.id.asc()
    )


def list_scope(db: Session, scope: OrdinalScope) -> List:
    return scope_query(db, scope).all()


def set_ordinal(db: Session, scope: OrdinalScope, entity_id: int, value: int) -> None:
    # UPDATE ... SET sort_order = ? WHERE id = ? AND <scope>
    updated = db.query(scope.model).filter(
        scope.model.id == entity_id,
        *scope.filters()
    ).update({scope.model.sort_order: value}, synchronize_session=False)

    if updated == 0:
        raise NotFoundError(f"{scope.label} not found")


def apply_ordinals(db: Session, scope: OrdinalScope, writes: Dict[int, int]) -> int:
    """Écrit tout le write-set dans une seule transaction (tout ou rien)"""
    with transaction(db, "save order"):
        for entity_id, value in writes.items():
            set_ordinal(db, scope, entity_id, value)
    return len(writes)
