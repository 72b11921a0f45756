from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session
from typing import Optional
from nav.core.config import settings
from nav.core.database import get_db
from nav.core.security import decode_token
from nav.models.user import User, UserStatus

def get_current_user(db: Session = Depends(get_db), authorization: Optional[str] = Header(None)) -> User:
    """
    Récupère l'utilisateur depuis le JWT token.

    Réutilisée par tous les endpoints protégés: extrait le token du header
    Authorization, le valide, et retourne l'user actif.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing token")

    token = authorization[len("Bearer "):]
    user_id = decode_token(token)
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")

    if user.status == UserStatus.DISABLED:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Account is disabled")

    return user

def get_super_admin(current_user: User = Depends(get_current_user)) -> User:
    # gestion des comptes réservée au super admin
    if current_user.id != settings.SUPER_ADMIN_ID:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied - Super admin only")
    return current_user
