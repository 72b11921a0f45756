from pydantic import BaseModel, ConfigDict, Field
from typing import List
from nav.schemas.link import LinkResponse

# Schemas pour les catégories

class CategoryCreate(BaseModel):
    name: str = Field(min_length=1)
    sort_order: int = 0

class CategoryUpdate(BaseModel):
    name: str = Field(min_length=1)
    sort_order: int = 0

class CategoryResponse(BaseModel):
    id: int
    user_id: int
    name: str
    sort_order: int

    model_config = ConfigDict(from_attributes=True)

class CategoryWithLinks(BaseModel):
    """Catégorie + ses liens, pour la vue groupée"""
    id: int
    name: str
    sort_order: int
    links: List[LinkResponse] = []

    model_config = ConfigDict(from_attributes=True)
