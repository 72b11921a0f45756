"""User service - comptes et administration (super admin)"""

import logging
from sqlalchemy.orm import Session
from typing import List, Optional
from nav.core.config import settings
from nav.core.database import transaction
from nav.core.errors import ConflictError, ForbiddenError, NotFoundError
from nav.models.category import Category
from nav.models.link import Link
from nav.models.user import User, UserStatus

logger = logging.getLogger(__name__)


def authenticate(db: Session, username: str, password: str) -> Optional[User]:
    user = db.query(User).filter(User.username == username).first()
    if not user or not user.verify_password(password):
        return None

    if user.status == UserStatus.DISABLED:
        raise ForbiddenError("Account is disabled")

    return user


def bootstrap_super_admin(db: Session) -> Optional[User]:
    if db.query(User).first():
        return None

    # 1er démarrage: table vide -> premier id attribué = 1 = SUPER_ADMIN_ID
    admin = User(username=settings.ADMIN_USERNAME, status=UserStatus.ACTIVE)
    admin.set_password(settings.ADMIN_PASSWORD)
    with transaction(db, "create super admin"):
        db.add(admin)

    logger.warning(f"Created default super admin '{admin.username}', change its password")
    return admin


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id.asc()).all()


def create_user(db: Session, username: str, password: str) -> User:
    if db.query(User).filter(User.username == username).first():
        raise ConflictError("Username already exists")

    user = User(username=username, status=UserStatus.ACTIVE)
    user.set_password(password)
    with transaction(db, "create user"):
        db.add(user)
    db.refresh(user)

    logger.info(f"Created user {user.id} ({user.username})")
    return user


def update_user(db: Session, user_id: int, status: Optional[bool] = None, new_password: Optional[str] = None) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")

    if status is not None and user_id == settings.SUPER_ADMIN_ID:
        raise ConflictError("Cannot modify super admin status")

    with transaction(db, "update user"):
        if status is not None:
            user.status = UserStatus.ACTIVE if status else UserStatus.DISABLED
        if new_password:
            user.set_password(new_password)
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: int) -> None:
    """Supprime l'user avec tous ses liens puis toutes ses catégories"""
    if user_id == settings.SUPER_ADMIN_ID:
        raise ConflictError("Cannot delete super admin")

    with transaction(db, "delete user"):
        removed_links = db.query(Link).filter(Link.user_id == user_id).delete(synchronize_session=False)
        removed_categories = db.query(Category).filter(Category.user_id == user_id).delete(synchronize_session=False)
        deleted = db.query(User).filter(User.id == user_id).delete(synchronize_session=False)

        if deleted == 0:
            raise NotFoundError("User not found")

    logger.info(f"Deleted user {user_id} with {removed_categories} category(ies) and {removed_links} link(s)")


def change_password(db: Session, user: User, old_password: str, new_password: str) -> None:
    if not user.verify_password(old_password):
        raise ConflictError("Old password is incorrect")

    with transaction(db, "change password"):
        user.set_password(new_password)
