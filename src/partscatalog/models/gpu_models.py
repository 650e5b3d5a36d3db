from typing import Optional

from partscatalog.models.device_models import DeviceInfo


class GPUInfo(DeviceInfo):

    # Video memory in GB
    memory_size: int = 0
    memory_type: Optional[str] = None

    # Clocks are in MHz
    core_clock: int = 0
    boost_clock: int = 0

    interface: Optional[str] = None

    def get_info(self) -> str:
        return (
            f"GPU: {self.display_name}, Memory: {self.memory_size}GB {self.memory_type}, "
            f"Core clock: {self.core_clock}MHz, Boost: {self.boost_clock}MHz, "
            f"Interface: {self.interface}, Condition: {self.condition}, "
            f"Serial number: {self.serial_number}"
        )
