from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from nav.core.database import get_db
from nav.core.deps import get_current_user, get_super_admin
from nav.models.user import User
from nav.schemas.common import CreatedResponse
from nav.schemas.user import PasswordChange, UserCreate, UserResponse, UserUpdate
from nav.services import user_service

router = APIRouter(prefix="/users", tags=["users"])

@router.put("/me/password", status_code=status.HTTP_204_NO_CONTENT)
def change_password(passwords: PasswordChange, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    # Change son propre mot de passe
    user_service.change_password(db, current_user, passwords.old_password, passwords.new_password)

# ========== SUPER ADMIN ==========

@router.get("", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db), admin: User = Depends(get_super_admin)):
    return user_service.list_users(db)

@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_user(user_data: UserCreate, db: Session = Depends(get_db), admin: User = Depends(get_super_admin)):
    user = user_service.create_user(db, user_data.username, user_data.password)
    return {"id": user.id}

@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, user_data: UserUpdate, db: Session = Depends(get_db), admin: User = Depends(get_super_admin)):
    # statut du super admin non modifiable
    return user_service.update_user(db, user_id, status=user_data.status, new_password=user_data.new_password)

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, db: Session = Depends(get_db), admin: User = Depends(get_super_admin)):
    """Supprime l'user et tout ce qu'il possède (liens, catégories)"""
    user_service.delete_user(db, user_id)
