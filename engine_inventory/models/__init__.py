"""ORM models.

Positions and engines live in separate modules; `Operator` is the
non-persisted Flask-Login user.
"""

from .position import Position
from .equipment import Equipment, InstallationHistoryEntry, RepairHistoryEntry
from .user import Operator
