# engine_inventory/routes/api.py
import os

from flask import Blueprint, current_app, request, send_file
from flask_login import login_required

from ..domain import EquipmentFields
from ..errors import ValidationError
from ..http import api_error, api_ok
from ..services import (
    add_installation_place,
    add_position,
    add_repair_entry,
    create_equipment,
    delete_equipment,
    find_by_installation_place_prefix,
    find_by_inventory_number_prefix,
    find_by_location_prefix,
    get_all,
    get_by_id,
    list_positions,
    remove_installation_place,
    remove_position,
    resolve_image_path,
    update_equipment,
)

api = Blueprint("api", __name__)


def _payload():
    # JSON body first, form fields for multipart / urlencoded clients
    data = request.get_json(silent=True)
    if data is None:
        return request.form
    if not isinstance(data, dict):
        raise ValidationError("request body must be a JSON object")
    return data


# ==========================================
# Engines
# ==========================================
@api.route("/addEngine", methods=["POST"])
@login_required
def api_add_engine():
    fields = EquipmentFields.from_form(request.form)
    equipment = create_equipment(fields, request.files.get("file"))
    return api_ok({"id": equipment.id}, status=201, message="engine added")


@api.route("/updateEngine/<engine_id>", methods=["PATCH"])
@login_required
def api_update_engine(engine_id):
    fields = EquipmentFields.from_form(request.form)
    equipment = update_equipment(engine_id, fields, request.files.get("file"))
    return api_ok(equipment.to_dict(), message="engine updated")


@api.route("/deleteEngine/<engine_id>", methods=["DELETE"])
@login_required
def api_delete_engine(engine_id):
    deleted = delete_equipment(engine_id)
    return api_ok(deleted, message="engine and its image deleted")


@api.route("/getAllEngines", methods=["GET"])
def api_all_engines():
    return api_ok([e.to_dict() for e in get_all()])


@api.route("/getEngineByID", methods=["GET"])
def api_engine_by_id():
    return api_ok(get_by_id(request.args.get("engineId")).to_dict())


@api.route("/getEngineByLocation", methods=["GET"])
def api_engines_by_location():
    engines = find_by_location_prefix(request.args.get("location"))
    return api_ok([e.to_dict() for e in engines])


@api.route("/getEngineByInstallationPlace", methods=["GET"])
def api_engines_by_installation_place():
    engines = find_by_installation_place_prefix(request.args.get("installationPlace"))
    return api_ok([e.to_dict() for e in engines])


@api.route("/getEngineByInventoryNumber", methods=["GET"])
def api_engine_by_inventory_number():
    engine = find_by_inventory_number_prefix(request.args.get("inventoryNumber"))
    return api_ok(engine.to_dict())


@api.route("/image/<engine_id>", methods=["GET"])
def api_engine_image(engine_id):
    engine = get_by_id(engine_id)
    if not engine.image_path:
        return api_error(404, "NOT_FOUND", "image not found")

    path = resolve_image_path(engine.image_path)
    if not os.path.exists(path):
        current_app.logger.warning("image file missing for %s: %s", engine.id, path)
        return api_error(404, "NOT_FOUND", "image file not found")
    return send_file(path)


@api.route("/addHistoryRepair", methods=["POST"])
@login_required
def api_add_history_repair():
    data = _payload()
    add_repair_entry(
        data.get("engineId"),
        data.get("repairType"),
        data.get("repairDescription"),
        data.get("repairDate"),
    )
    return api_ok(status=201, message="repair entry added")


# ==========================================
# Positions
# ==========================================
@api.route("/getPositions", methods=["GET"])
def api_positions():
    return api_ok([p.to_dict() for p in list_positions()])


@api.route("/addPosition", methods=["POST"])
@login_required
def api_add_position():
    data = _payload()
    position = add_position(data.get("position"), data.get("installationPlace"))
    return api_ok(position.to_dict(), status=201, message="position added")


@api.route("/delPosition", methods=["DELETE"])
@login_required
def api_del_position():
    data = _payload()
    removed = remove_position(data.get("position"))
    return api_ok(removed, message="position deleted")


@api.route("/addInstallationPlace", methods=["POST"])
@login_required
def api_add_installation_place():
    data = _payload()
    position = add_installation_place(data.get("position"), data.get("installationPlace"))
    return api_ok(position.to_dict(), status=201, message="installation place added")


@api.route("/delInstallationPlace", methods=["DELETE"])
@login_required
def api_del_installation_place():
    data = _payload()
    position = remove_installation_place(data.get("position"), data.get("installationPlace"))
    return api_ok(position.to_dict(), message="installation place deleted")
