from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class LinkCreate(BaseModel):
    """Créer un lien dans une catégorie"""
    category_id: int
    name: str = Field(min_length=1)
    url: str = Field(min_length=1)
    icon: Optional[str] = ""  # vide = icône par défaut
    sort_order: int = 0

class LinkUpdate(LinkCreate):
    """Même champs obligatoires qu'à la création (category_id peut changer)"""

class LinkResponse(BaseModel):
    """Lien retourné"""
    id: int
    user_id: int
    category_id: int
    name: str
    url: str
    icon: str
    sort_order: int

    model_config = ConfigDict(from_attributes=True)

class LinkPage(BaseModel):
    """Une page de liens d'une catégorie"""
    items: List[LinkResponse]
    page: int
    per_page: int
    total: int
    total_pages: int
