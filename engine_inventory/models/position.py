from ..extensions import db


# ==========================================
# 位置：Position
# ==========================================
class Position(db.Model):
    __tablename__ = "positions"

    id = db.Column(db.Integer, primary_key=True)

    # 使用者輸入的原樣
    name = db.Column(db.String(120), nullable=False)

    # lower(name)，唯一性由 DB 保證
    normalized_name = db.Column(db.String(120), unique=True, nullable=False)

    # 安裝地點清單（JSON list，內容不重複）
    installation_places = db.Column(db.JSON, nullable=False, default=list)

    def to_dict(self):
        return {
            "name": self.name,
            "normalizedName": self.normalized_name,
            "installationPlaces": list(self.installation_places or []),
        }

    def __repr__(self):
        return f"<Position {self.name}>"
