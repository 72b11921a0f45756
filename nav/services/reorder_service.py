"""
Reorder resolver - drag-and-drop -> nouveaux sort_order.

Stratégie: milieu entre les deux voisins du slot d'insertion, sinon
renumérotation complète du scope (step, 2*step, 3*step...).
Les sort_order sont des entiers sans écart garanti, la renumérotation
est donc le seul garde-fou contre l'épuisement de la place entre deux voisins.
"""

import logging
from sqlalchemy.orm import Session
from typing import Dict, List, Optional, Tuple
from nav.core.config import settings
from nav.core.errors import InvalidReorderError
from nav.schemas.common import Position
from nav.services.ordinal_store import OrdinalScope, list_scope, apply_ordinals

logger = logging.getLogger(__name__)


class ReorderPlan:
    def __init__(self, writes: Dict[int, int], renumbered: bool = False):
        self.writes = writes
        self.renumbered = renumbered

    @property
    def changed(self) -> int:
        return len(self.writes)


def renumber(ids: List[int], step: int) -> Dict[int, int]:
    return {entity_id: (index + 1) * step for index, entity_id in enumerate(ids)}


def resolve_reorder(
    ordered: List[Tuple[int, int]],
    source_id: int,
    target_id: int,
    position: Position,
    step: int = settings.ORDINAL_STEP
) -> ReorderPlan:
    """
    Calcule le write-set pour déplacer source avant/après target.

    ordered: [(id, sort_order), ...] déjà trié (sort_order, id).
    Fonction pure: aucune écriture ici.
    """
    ids = [entity_id for entity_id, _ in ordered]

    if source_id == target_id:
        raise InvalidReorderError("Source and target must be different")
    if source_id not in ids or target_id not in ids:
        raise InvalidReorderError("Source or target not in this list")

    # on retire la source d'abord, le slot est relatif à ce qui reste
    remaining = [(entity_id, ordinal) for entity_id, ordinal in ordered if entity_id != source_id]
    target_index = [entity_id for entity_id, _ in remaining].index(target_id)
    slot = target_index if Position(position) == Position.BEFORE else target_index + 1

    new_ids = [entity_id for entity_id, _ in remaining]
    new_ids.insert(slot, source_id)
    if new_ids == ids:
        return ReorderPlan({})

    lower = remaining[slot - 1][1] if slot > 0 else None
    upper = remaining[slot][1] if slot < len(remaining) else None

    if lower is not None and upper is not None:
        middle = (lower + upper) // 2
        if lower < middle < upper:
            return ReorderPlan({source_id: middle})

    # pas d'entier libre entre les voisins, ou insertion en bout de liste
    return ReorderPlan(renumber(new_ids, step), renumbered=True)


def reorder_scope(
    db: Session,
    scope: OrdinalScope,
    source_id: int,
    target_id: Optional[int],
    position: Position
) -> ReorderPlan:
    entities = list_scope(db, scope)

    # 0 ou 1 élément: rien à déplacer
    if len(entities) <= 1:
        return ReorderPlan({})

    ordered = [(entity.id, entity.sort_order) for entity in entities]

    # déposé sous la dernière ligne = après le dernier élément
    if target_id is None:
        target_id = ordered[-1][0]
        position = Position.AFTER
        if target_id == source_id:
            return ReorderPlan({})

    plan = resolve_reorder(ordered, source_id, target_id, position)
    if plan.writes:
        apply_ordinals(db, scope, plan.writes)
        logger.info(
            f"Reordered {scope}: {source_id} {Position(position).value} {target_id}, "
            f"{plan.changed} row(s) written, renumbered={plan.renumbered}"
        )

    return plan
