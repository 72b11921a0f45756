from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List
from nav.core.database import get_db
from nav.core.deps import get_current_user
from nav.models.user import User
from nav.schemas.category import CategoryWithLinks
from nav.schemas.common import CreatedResponse, ReorderRequest, ReorderResponse
from nav.schemas.link import LinkCreate, LinkUpdate, LinkResponse, LinkPage
from nav.services import link_service

router = APIRouter(prefix="/links", tags=["links"])

@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_link(link_data: LinkCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    """
    Créer un lien dans une catégorie.

    SÉCURITÉ:
    - category_id doit appartenir à l'user, sinon 404 "Category not found"
    """
    link = link_service.create_link(
        db,
        current_user.id,
        category_id=link_data.category_id,
        name=link_data.name,
        url=link_data.url,
        icon=link_data.icon,
        sort_order=link_data.sort_order
    )
    return {"id": link.id}

@router.get("", response_model=List[CategoryWithLinks])
def list_links(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    """
    Tous les liens de l'user, groupés par catégorie.

    EXEMPLE:
    GET /links
    → [
      {"id": 1, "name": "Dev", "sort_order": 1000, "links": [{"id": 4, ...}, {"id": 2, ...}]},
      {"id": 2, "name": "News", "sort_order": 2000, "links": []}
    ]
    """
    return link_service.list_links_grouped(db, current_user.id)

@router.get("/categories/{category_id}", response_model=LinkPage)
def list_category_links(
    category_id: int,
    page: int = Query(1),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Une page de liens d'une catégorie (taille fixe LINKS_PER_PAGE).

    NOTES:
    - page hors bornes -> ramenée à la première/dernière page, pas d'erreur
    - total recompté à chaque requête (un delete décale les pages)
    """
    result = link_service.list_links_page(db, current_user.id, category_id, page)
    return {
        "items": result.items,
        "page": result.page,
        "per_page": result.per_page,
        "total": result.total,
        "total_pages": result.total_pages
    }

@router.post("/categories/{category_id}/reorder", response_model=ReorderResponse)
def reorder_links(
    category_id: int,
    reorder: ReorderRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Drag-and-drop d'un lien dans sa catégorie.

    Source et target doivent être dans category_id: un lien d'une autre
    catégorie ne sert jamais de cible (400).
    """
    plan = link_service.reorder_links(
        db, current_user.id, category_id, reorder.source_id, reorder.target_id, reorder.position
    )
    return {"changed": plan.changed, "renumbered": plan.renumbered}

@router.get("/{link_id}", response_model=LinkResponse)
def get_link(link_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return link_service.get_owned_link(db, current_user.id, link_id)

@router.put("/{link_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_link(link_id: int, link_data: LinkUpdate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    link_service.update_link(
        db,
        current_user.id,
        link_id,
        category_id=link_data.category_id,
        name=link_data.name,
        url=link_data.url,
        icon=link_data.icon,
        sort_order=link_data.sort_order
    )

@router.delete("/{link_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_link(link_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    link_service.delete_link(db, current_user.id, link_id)
