from typing import Optional

from partscatalog.models.device_models import DeviceInfo


class PowerSupplyInfo(DeviceInfo):
    wattage: int = 0

    #: e.g. '80+ Gold'
    efficiency_rating: Optional[str] = None

    #: ATX, SFX, etc.
    form_factor: Optional[str] = None

    modular: bool = False

    def get_info(self) -> str:
        modularity = "Modular" if self.modular else "Non-modular"
        return (
            f"PSU: {self.display_name}, Wattage: {self.wattage}W, "
            f"Efficiency: {self.efficiency_rating}, Form factor: {self.form_factor}, "
            f"{modularity}, Condition: {self.condition}, Serial number: {self.serial_number}"
        )
