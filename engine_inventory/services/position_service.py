"""Position registry: named locations and their installation places."""

from flask import current_app

from ..domain import split_places
from ..errors import DuplicateKey, NotFound, ValidationError
from ..extensions import db
from ..models import Position
from .persistence import commit


def _find_by_name(name: str) -> Position:
    if not (name or "").strip():
        raise ValidationError("position must not be empty", field="position")
    position = Position.query.filter_by(normalized_name=name.lower()).first()
    if not position:
        raise NotFound("position not found", field="position")
    return position


def list_positions() -> list[Position]:
    return Position.query.order_by(Position.id.asc()).all()


def add_position(name: str, installation_places_csv: str | None = None) -> Position:
    if not (name or "").strip():
        raise ValidationError("position must not be empty", field="position")

    normalized = name.lower()
    if Position.query.filter_by(normalized_name=normalized).first():
        raise DuplicateKey("position already exists", field="position")

    position = Position(
        name=name,
        normalized_name=normalized,
        installation_places=split_places(installation_places_csv),
    )
    db.session.add(position)
    # unique constraint catches a concurrent insert of the same name
    commit("position already exists", field="position")

    current_app.logger.info("position added: %s", name)
    return position


def remove_position(name: str) -> dict:
    """Delete a position by its exact display name (not case-folded).

    Returns the serialized position as it was before deletion.
    """
    position = Position.query.filter_by(name=name).first()
    if not position:
        raise NotFound("position not found", field="position")

    snapshot = position.to_dict()
    db.session.delete(position)
    commit()

    current_app.logger.info("position removed: %s", name)
    return snapshot


def add_installation_place(position_name: str, places_csv: str | None) -> Position:
    position = _find_by_name(position_name)

    merged = list(position.installation_places or [])
    for place in split_places(places_csv):
        if place not in merged:
            merged.append(place)
    # reassign: the JSON column does not track in-place mutation
    position.installation_places = merged
    commit()

    current_app.logger.info("installation places of %s: %s", position.name, merged)
    return position


def remove_installation_place(position_name: str, place: str) -> Position:
    position = _find_by_name(position_name)

    position.installation_places = [
        p for p in (position.installation_places or []) if p != place
    ]
    commit()

    current_app.logger.info("installation place %r removed from %s", place, position.name)
    return position
