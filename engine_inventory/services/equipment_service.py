"""Equipment lifecycle: create / update / delete engines and their histories.

Installation history is appended whenever the installation place changes.
Image files follow the record: a replaced or orphaned image is removed after
the database commit, best-effort.
"""

from flask import current_app

from ..domain import (
    DEFAULT_COMMENTS,
    STATUS_INSTALLED,
    EquipmentFields,
    normalize_date,
    today_str,
)
from ..errors import AppError, DuplicateKey, NotFound, ValidationError
from ..extensions import db
from ..models import Equipment, InstallationHistoryEntry, RepairHistoryEntry
from .persistence import commit
from .upload_service import discard_image, has_upload, store_image


def _require_title(fields: EquipmentFields) -> str:
    if not fields.has_title():
        raise ValidationError("title must not be empty", field="title")
    return fields.title


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _prefix_query(column, text: str | None, field: str):
    if text is None:
        raise ValidationError(f"{field} is required", field=field)
    return Equipment.query.filter(column.ilike(_escape_like(text) + "%", escape="\\"))


def _install_entry(place: str | None) -> InstallationHistoryEntry:
    return InstallationHistoryEntry(
        installation_place=place,
        status=STATUS_INSTALLED,
        date=today_str(),
    )


# ==========================================
# Reads
# ==========================================
def get_by_id(equipment_id: str) -> Equipment:
    equipment = db.session.get(Equipment, equipment_id) if equipment_id else None
    if not equipment:
        raise NotFound("engine not found", field="id")
    return equipment


def get_all() -> list[Equipment]:
    return Equipment.query.order_by(Equipment.title.asc()).all()


def find_by_location_prefix(text: str | None) -> list[Equipment]:
    engines = _prefix_query(Equipment.location, text, "location").all()
    if not engines:
        raise NotFound("no engines at this location", field="location")
    return engines


def find_by_installation_place_prefix(text: str | None) -> list[Equipment]:
    engines = _prefix_query(Equipment.installation_place, text, "installationPlace").all()
    if not engines:
        raise NotFound("no engines at this installation place", field="installationPlace")
    return engines


def find_by_inventory_number_prefix(text: str | None) -> Equipment:
    """First engine whose inventory number starts with `text`."""
    engine = (
        _prefix_query(Equipment.inventory_number, text, "inventoryNumber")
        .order_by(Equipment.inventory_number.asc())
        .first()
    )
    if not engine:
        raise NotFound("no engine with this inventory number", field="inventoryNumber")
    return engine


# ==========================================
# Mutations
# ==========================================
def create_equipment(fields: EquipmentFields, image_file=None) -> Equipment:
    title = _require_title(fields)
    if Equipment.query.filter_by(title_normalized=title.lower()).first():
        raise DuplicateKey("engine with this title already exists", field="title")

    image_path = store_image(image_file) if has_upload(image_file) else None

    equipment = Equipment(
        title=title,
        title_normalized=title.lower(),
        location=fields.location,
        installation_place=fields.installation_place,
        inventory_number=fields.inventory_number,
        account_number=fields.account_number,
        type=fields.type,
        power=fields.power,
        coupling=fields.coupling,
        status=fields.status,
        comments=fields.comments or DEFAULT_COMMENTS,
        doc_from_place=fields.doc_from_place or "",
        link_on_address_storage=fields.link_on_address_storage or "",
        date=fields.date,
        image_path=image_path,
    )
    equipment.installation_history.append(_install_entry(fields.installation_place))
    db.session.add(equipment)

    try:
        commit("engine with this title already exists", field="title")
    except AppError:
        # DB 失敗 → 剛寫出去的照片刪掉，避免孤兒檔
        discard_image(image_path)
        raise

    current_app.logger.info("engine created: %s (%s)", equipment.title, equipment.id)
    return equipment


def update_equipment(equipment_id: str, fields: EquipmentFields, image_file=None) -> Equipment:
    equipment = get_by_id(equipment_id)
    title = _require_title(fields)

    new_image = store_image(image_file) if has_upload(image_file) else None
    old_image = equipment.image_path if new_image else None
    if new_image:
        equipment.image_path = new_image

    if fields.installation_place != equipment.installation_place:
        equipment.installation_history.append(_install_entry(fields.installation_place))
    equipment.installation_place = fields.installation_place

    equipment.title = title
    equipment.title_normalized = title.lower()
    equipment.location = fields.location
    equipment.inventory_number = fields.inventory_number
    equipment.account_number = fields.account_number
    equipment.type = fields.type
    equipment.power = fields.power
    equipment.coupling = fields.coupling
    equipment.status = fields.status
    equipment.comments = fields.comments
    # only replaced when a new value is provided
    equipment.doc_from_place = fields.doc_from_place or equipment.doc_from_place
    equipment.link_on_address_storage = (
        fields.link_on_address_storage or equipment.link_on_address_storage
    )

    try:
        commit("engine with this title already exists", field="title")
    except AppError:
        discard_image(new_image)
        raise

    if old_image and old_image != new_image:
        discard_image(old_image)

    current_app.logger.info("engine updated: %s (%s)", equipment.title, equipment.id)
    return equipment


def delete_equipment(equipment_id: str) -> dict:
    """Delete the engine and return its last serialized state."""
    equipment = get_by_id(equipment_id)
    snapshot = equipment.to_dict()

    db.session.delete(equipment)
    commit()

    discard_image(snapshot["imagePath"])

    current_app.logger.info("engine deleted: %s (%s)", snapshot["title"], equipment_id)
    return snapshot


def add_repair_entry(equipment_id, repair_type, repair_description, repair_date) -> Equipment:
    required = {
        "engineId": equipment_id,
        "repairType": repair_type,
        "repairDescription": repair_description,
        "repairDate": repair_date,
    }
    for name, value in required.items():
        if value is None or not str(value).strip():
            raise ValidationError(
                "engineId, repairType, repairDescription and repairDate are required",
                field=name,
            )

    try:
        normalized_date = normalize_date(str(repair_date))
    except ValueError as e:
        raise ValidationError(str(e), field="repairDate") from e

    equipment = get_by_id(str(equipment_id))
    equipment.repair_history.append(
        RepairHistoryEntry(
            repair_type=repair_type,
            repair_description=repair_description,
            repair_date=normalized_date,
        )
    )
    commit()

    current_app.logger.info("repair entry added to %s", equipment.id)
    return equipment
