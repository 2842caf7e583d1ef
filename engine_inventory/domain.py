# engine_inventory/domain.py
from dataclasses import dataclass, fields
from datetime import date
from typing import Optional

from dateutil import parser as date_parser

DATE_FORMAT = "%Y-%m-%d"
STATUS_INSTALLED = "installed"
DEFAULT_COMMENTS = "none"

# multipart clients send the literal string "null" for "no image"
NULL_MARKER = "null"


def today_str() -> str:
    return date.today().strftime(DATE_FORMAT)


def normalize_date(raw: str) -> str:
    """Parse a user supplied date and return it as YYYY-MM-DD.

    Raises ValueError when the text is not a recognizable date.
    """
    try:
        return date_parser.parse(raw).strftime(DATE_FORMAT)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"invalid date: {raw!r}") from e


def split_places(raw: Optional[str]) -> list[str]:
    """
    "A, B, A" -> ["A", "B"]
    逗號分隔、去空白、去重，保留第一次出現的順序
    """
    if not raw:
        return []
    out = []
    for part in raw.split(","):
        place = part.strip()
        if place and place not in out:
            out.append(place)
    return out


@dataclass
class EquipmentFields:
    """
    建立 / 更新設備時，表單送進來的欄位
    """
    title: Optional[str] = None
    location: Optional[str] = None
    installation_place: Optional[str] = None
    inventory_number: Optional[str] = None
    account_number: Optional[str] = None
    type: Optional[str] = None
    power: Optional[str] = None
    coupling: Optional[str] = None
    status: Optional[str] = None
    comments: Optional[str] = None
    date: Optional[str] = None
    doc_from_place: Optional[str] = None
    link_on_address_storage: Optional[str] = None

    # form key -> attribute; first matching key wins
    FORM_KEYS = {
        "title": ("title",),
        "location": ("position", "location"),
        "installation_place": ("installationPlace",),
        "inventory_number": ("inventoryNumber",),
        "account_number": ("accountNumber", "account"),
        "type": ("type",),
        "power": ("power",),
        "coupling": ("coupling",),
        "status": ("status",),
        "comments": ("comments",),
        "date": ("date",),
        "doc_from_place": ("docFromPlace",),
        "link_on_address_storage": ("linkOnAddressStorage",),
    }

    @classmethod
    def from_form(cls, form) -> "EquipmentFields":
        values = {}
        for f in fields(cls):
            for key in cls.FORM_KEYS[f.name]:
                if key in form:
                    values[f.name] = form.get(key)
                    break
        return cls(**values)

    def has_title(self) -> bool:
        return bool((self.title or "").strip())
