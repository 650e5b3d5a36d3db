from typing import Optional

from partscatalog.models.device_models import DeviceInfo


class MotherboardInfo(DeviceInfo):
    """Baseboard (Motherboard) information model."""

    # Processor families the board accepts
    supported_cpu: Optional[str] = None

    # CPU socket type on the baseboard
    socket_type: Optional[str] = None

    chipset: Optional[str] = None

    ram_slots: int = 0

    # Largest supported amount of RAM, in GB
    max_ram: int = 0

    # ATX, Micro-ATX, etc.
    form_factor: Optional[str] = None

    def get_info(self) -> str:
        return (
            f"Motherboard: {self.display_name}, Supported CPUs: {self.supported_cpu}, "
            f"Socket: {self.socket_type}, Chipset: {self.chipset}, RAM slots: {self.ram_slots}, "
            f"Max RAM: {self.max_ram}GB, Form factor: {self.form_factor}, "
            f"Condition: {self.condition}, Serial number: {self.serial_number}"
        )
