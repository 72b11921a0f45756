from pydantic import BaseModel
from enum import Enum
from typing import Optional

class CreatedResponse(BaseModel):
    id: int

class Position(str, Enum):
    BEFORE = "before"
    AFTER = "after"

class ReorderRequest(BaseModel):
    """
    Résultat d'un drag-and-drop: source déposée avant/après target.
    target_id absent = déposé sous la dernière ligne.
    """
    source_id: int
    target_id: Optional[int] = None
    position: Position = Position.AFTER

class ReorderResponse(BaseModel):
    changed: int  # nb de sort_order réécrits
    renumbered: bool
