from datetime import date
from enum import Enum
from typing import Optional

from partscatalog.models.device_models import DeviceInfo


class PowerCategory(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CPUInfo(DeviceInfo):
    core_count: int = 0
    thread_count: int = 0

    # Clocks are in GHz
    base_clock: float = 0.0
    max_clock: float = 0.0

    socket_type: Optional[str] = None
    guarantee_end_date: Optional[date] = None

    def get_info(self) -> str:
        guarantee = self.guarantee_end_date.isoformat() if self.guarantee_end_date else "n/a"
        return (
            f"CPU: {self.display_name}, Cores: {self.core_count}, Threads: {self.thread_count}, "
            f"Base clock: {self.base_clock}GHz, Max clock: {self.max_clock}GHz, "
            f"Socket: {self.socket_type}, Condition: {self.condition}, "
            f"Guarantee until: {guarantee}"
        )
