import pytest
from nav.core.errors import InvalidReorderError
from nav.schemas.common import Position
from nav.services.reorder_service import renumber, resolve_reorder

A, B, C, D = 1, 2, 3, 4

# ============ TESTS resolve_reorder (fonction pure) ============

def test_move_after_uses_midpoint():
    """[A(1000), B(2000), C(3000)], A après B -> A prend 2500, seul A est réécrit"""
    ordered = [(A, 1000), (B, 2000), (C, 3000)]

    plan = resolve_reorder(ordered, A, B, Position.AFTER)

    assert plan.writes == {A: 2500}
    assert plan.renumbered is False

def test_move_before_uses_midpoint():
    ordered = [(A, 1000), (B, 2000), (C, 3000)]

    plan = resolve_reorder(ordered, C, B, Position.BEFORE)

    assert plan.writes == {C: 1500}
    assert plan.renumbered is False

def test_adjacent_ordinals_trigger_full_renumber():
    """Pas d'entier libre entre 1 et 2 -> tout le scope est renuméroté"""
    ordered = [(A, 1), (B, 2), (C, 3)]

    plan = resolve_reorder(ordered, C, B, Position.BEFORE, step=1000)

    assert plan.renumbered is True
    assert plan.writes == {A: 1000, C: 2000, B: 3000}

def test_equal_ordinals_trigger_full_renumber():
    # valeurs par défaut à 0: départage par id, mais pas de milieu possible
    ordered = [(A, 0), (B, 0), (C, 0)]

    plan = resolve_reorder(ordered, A, B, Position.AFTER, step=1000)

    assert plan.renumbered is True
    assert plan.writes == {B: 1000, A: 2000, C: 3000}

def test_insert_at_start_renumbers():
    ordered = [(A, 1000), (B, 2000), (C, 3000)]

    plan = resolve_reorder(ordered, C, A, Position.BEFORE, step=1000)

    assert plan.renumbered is True
    assert plan.writes == {C: 1000, A: 2000, B: 3000}

def test_insert_at_end_renumbers():
    ordered = [(A, 1000), (B, 2000), (C, 3000)]

    plan = resolve_reorder(ordered, A, C, Position.AFTER, step=1000)

    assert plan.renumbered is True
    assert plan.writes == {B: 1000, C: 2000, A: 3000}

def test_renumbered_values_strictly_increasing_and_evenly_spaced():
    ordered = [(A, 5), (B, 6), (C, 7), (D, 8)]

    plan = resolve_reorder(ordered, D, B, Position.BEFORE, step=1000)

    values = [plan.writes[entity_id] for entity_id in (A, D, B, C)]
    assert values == [1000, 2000, 3000, 4000]

def test_drop_where_already_is_writes_nothing():
    """A est déjà juste avant B: ordre inchangé, aucune écriture"""
    ordered = [(A, 1000), (B, 2000), (C, 3000)]

    plan = resolve_reorder(ordered, A, B, Position.BEFORE)

    assert plan.writes == {}
    assert plan.changed == 0

def test_position_accepts_plain_string():
    ordered = [(A, 1000), (B, 2000), (C, 3000)]

    plan = resolve_reorder(ordered, A, B, "after")

    assert plan.writes == {A: 2500}

def test_source_equals_target_rejected():
    ordered = [(A, 1000), (B, 2000)]

    with pytest.raises(InvalidReorderError):
        resolve_reorder(ordered, A, A, Position.AFTER)

def test_unknown_source_rejected():
    ordered = [(A, 1000), (B, 2000)]

    with pytest.raises(InvalidReorderError):
        resolve_reorder(ordered, 99, B, Position.AFTER)

def test_unknown_target_rejected():
    ordered = [(A, 1000), (B, 2000)]

    with pytest.raises(InvalidReorderError):
        resolve_reorder(ordered, A, 99, Position.BEFORE)

def test_renumber_helper():
    assert renumber([7, 3, 9], 10) == {7: 10, 3: 20, 9: 30}
    assert renumber([], 1000) == {}
