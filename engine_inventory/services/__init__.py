"""Service layer (business logic).

Routes import from here; each concern lives in its own module.
"""

from .upload_service import (
    init_upload_folder,
    store_image,
    delete_image,
    discard_image,
    resolve_image_path,
    has_upload,
)
from .position_service import (
    list_positions,
    add_position,
    remove_position,
    add_installation_place,
    remove_installation_place,
)
from .equipment_service import (
    get_by_id,
    get_all,
    find_by_location_prefix,
    find_by_installation_place_prefix,
    find_by_inventory_number_prefix,
    create_equipment,
    update_equipment,
    delete_equipment,
    add_repair_entry,
)
from .auth_service import authenticate, load_operator
