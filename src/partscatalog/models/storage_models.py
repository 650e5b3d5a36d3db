from typing import Optional

from partscatalog.models.memory_models import MemoryDevice


class DiskInfo(MemoryDevice):
    # HDD/SSD
    type: Optional[str] = None

    # Revolutions per minute, 0 for solid state
    rotation_speed: int = 0

    # SATA, NVMe, etc.
    interface: Optional[str] = None

    warranty_period: Optional[str] = None

    def get_info(self) -> str:
        return (
            f"Storage: {self.display_name}, Capacity: {self.capacity}GB, Type: {self.type}, "
            f"Rotation speed: {self.rotation_speed} rpm, Interface: {self.interface}, "
            f"Condition: {self.condition}, Warranty: {self.warranty_period}, "
            f"Serial number: {self.serial_number}"
        )
