# tests/test_position_service.py
import pytest

from engine_inventory.errors import DuplicateKey, NotFound, ValidationError
from engine_inventory.extensions import db
from engine_inventory.models import Position
from engine_inventory.services import (
    add_installation_place,
    add_position,
    list_positions,
    remove_installation_place,
    remove_position,
)
from engine_inventory.services.persistence import commit


def _places(name):
    return set(Position.query.filter_by(normalized_name=name.lower()).one().installation_places)


def test_add_position_stores_normalized_name(app):
    pos = add_position("Main Shed", " A , B,A ")

    assert pos.name == "Main Shed"
    assert pos.normalized_name == "main shed"
    assert sorted(pos.installation_places) == ["A", "B"]


def test_add_position_without_places(app):
    pos = add_position("Yard")
    assert pos.installation_places == []


@pytest.mark.parametrize("second", ["Shed", "SHED", "sHeD"])
def test_duplicate_position_any_case(app, second):
    add_position("shed")
    with pytest.raises(DuplicateKey) as exc:
        add_position(second)
    assert exc.value.field == "position"


def test_add_position_requires_name(app):
    with pytest.raises(ValidationError):
        add_position("   ")


def test_add_installation_place_deduplicates(app):
    add_position("Shed")
    add_installation_place("shed", "A, B, A")
    assert _places("shed") == {"A", "B"}

    add_installation_place("SHED", "B, C")
    assert _places("shed") == {"A", "B", "C"}


def test_add_installation_place_unknown_position(app):
    with pytest.raises(NotFound):
        add_installation_place("nowhere", "A")


def test_add_installation_place_requires_position(app):
    with pytest.raises(ValidationError):
        add_installation_place("", "A")


def test_remove_installation_place(app):
    add_position("Shed", "A, B")
    remove_installation_place("Shed", "A")
    assert _places("shed") == {"B"}


def test_remove_absent_installation_place_is_noop(app):
    add_position("Shed", "A")
    remove_installation_place("shed", "Z")
    assert _places("shed") == {"A"}


def test_remove_installation_place_unknown_position(app):
    with pytest.raises(NotFound):
        remove_installation_place("nowhere", "A")


def test_remove_position_matches_exact_name(app):
    add_position("Shed")

    # display name only, no case folding
    with pytest.raises(NotFound):
        remove_position("shed")

    removed = remove_position("Shed")
    assert removed["name"] == "Shed"
    assert list_positions() == []


def test_list_positions(app):
    add_position("Shed")
    add_position("Yard", "North")
    assert [p.name for p in list_positions()] == ["Shed", "Yard"]


def test_position_uniqueness_enforced_by_storage(app):
    # bypass the service pre-check, as a racing request would
    db.session.add(Position(name="Shed", normalized_name="shed", installation_places=[]))
    db.session.add(Position(name="SHED", normalized_name="shed", installation_places=[]))
    with pytest.raises(DuplicateKey):
        commit("duplicate", field="position")
    assert Position.query.count() == 0
