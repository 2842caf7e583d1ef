import uuid

from sqlalchemy import UniqueConstraint

from ..extensions import db


def _new_id() -> str:
    return str(uuid.uuid4())


# ==========================================
# 設備：Equipment
# ==========================================
class Equipment(db.Model):
    __tablename__ = "equipment"

    id = db.Column(db.String(36), primary_key=True, default=_new_id)

    title = db.Column(db.String(200), nullable=False)
    # lower(title)；大小寫不同也視為重複
    title_normalized = db.Column(db.String(200), nullable=False)

    location = db.Column(db.String(200), nullable=True)
    installation_place = db.Column(db.String(200), nullable=True)
    inventory_number = db.Column(db.String(100), nullable=True)
    account_number = db.Column(db.String(100), nullable=True)
    type = db.Column(db.String(100), nullable=True)
    power = db.Column(db.String(50), nullable=True)
    coupling = db.Column(db.String(100), nullable=True)
    status = db.Column(db.String(100), nullable=True)
    comments = db.Column(db.Text, nullable=True)
    doc_from_place = db.Column(db.Text, nullable=True, default="")
    link_on_address_storage = db.Column(db.Text, nullable=True, default="")
    date = db.Column(db.String(40), nullable=True)

    # uploads/<uuid>.<ext>
    image_path = db.Column(db.String(255), nullable=True)

    # 只追加，不整批替換
    installation_history = db.relationship(
        "InstallationHistoryEntry",
        backref="equipment",
        lazy=True,
        order_by="InstallationHistoryEntry.id",
        cascade="all, delete-orphan",
    )
    repair_history = db.relationship(
        "RepairHistoryEntry",
        backref="equipment",
        lazy=True,
        order_by="RepairHistoryEntry.id",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        UniqueConstraint("title_normalized", name="uq_equipment_title_normalized"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "location": self.location,
            "installationPlace": self.installation_place,
            "inventoryNumber": self.inventory_number,
            "accountNumber": self.account_number,
            "type": self.type,
            "power": self.power,
            "coupling": self.coupling,
            "status": self.status,
            "comments": self.comments,
            "docFromPlace": self.doc_from_place,
            "linkOnAddressStorage": self.link_on_address_storage,
            "date": self.date,
            "imagePath": self.image_path,
            "installationHistory": [h.to_dict() for h in self.installation_history],
            "repairHistory": [r.to_dict() for r in self.repair_history],
        }

    def __repr__(self):
        return f"<Equipment {self.id}: {self.title}>"


# ==========================================
# 安裝歷史：InstallationHistoryEntry
# ==========================================
class InstallationHistoryEntry(db.Model):
    __tablename__ = "installation_history"

    id = db.Column(db.Integer, primary_key=True)
    equipment_id = db.Column(db.String(36), db.ForeignKey("equipment.id"), nullable=False)

    installation_place = db.Column(db.String(200), nullable=True)
    status = db.Column(db.String(40), nullable=False)
    date = db.Column(db.String(10), nullable=False)

    def to_dict(self):
        return {
            "installationPlace": self.installation_place,
            "status": self.status,
            "date": self.date,
        }


# ==========================================
# 維修歷史：RepairHistoryEntry
# ==========================================
class RepairHistoryEntry(db.Model):
    __tablename__ = "repair_history"

    id = db.Column(db.Integer, primary_key=True)
    equipment_id = db.Column(db.String(36), db.ForeignKey("equipment.id"), nullable=False)

    repair_type = db.Column(db.String(100), nullable=False)
    repair_description = db.Column(db.Text, nullable=False)
    repair_date = db.Column(db.String(10), nullable=False)

    def to_dict(self):
        return {
            "repairType": self.repair_type,
            "repairDescription": self.repair_description,
            "repairDate": self.repair_date,
        }
