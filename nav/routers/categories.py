from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from nav.core.database import get_db
from nav.core.deps import get_current_user
from nav.models.user import User
from nav.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse
from nav.schemas.common import CreatedResponse, ReorderRequest, ReorderResponse
from nav.services import category_service

router = APIRouter(prefix="/categories", tags=["categories"])

@router.get("", response_model=List[CategoryResponse])
def list_categories(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    # triées par (sort_order, id)
    return category_service.list_categories(db, current_user.id)

@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_category(category_data: CategoryCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    category = category_service.create_category(db, current_user.id, category_data.name, category_data.sort_order)
    return {"id": category.id}

@router.post("/reorder", response_model=ReorderResponse)
def reorder_categories(reorder: ReorderRequest, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    """
    Drag-and-drop d'une catégorie.

    EXEMPLE:
    POST /categories/reorder
    {"source_id": 3, "target_id": 1, "position": "before"}
    → la catégorie 3 passe juste avant la 1

    ERREURS:
    - 400 si source == target ou id hors des catégories de l'user
    """
    plan = category_service.reorder_categories(
        db, current_user.id, reorder.source_id, reorder.target_id, reorder.position
    )
    return {"changed": plan.changed, "renumbered": plan.renumbered}

@router.put("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_category(category_id: int, category_data: CategoryUpdate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    category_service.update_category(db, current_user.id, category_id, category_data.name, category_data.sort_order)

@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    """
    Supprimer une catégorie.

    HARD DELETE: tous les liens de la catégorie partent avec elle
    (même transaction, pas d'annulation possible).
    """
    category_service.delete_category(db, current_user.id, category_id)
