from typing import Optional

from pydantic import model_validator

from partscatalog.constants import (
    COOLER_SERIAL_SUFFIX,
    DEFAULT_COOLER_MANUFACTURER,
    DEFAULT_COOLER_MODEL,
)
from partscatalog.models.baseboard_models import MotherboardInfo
from partscatalog.models.cooler_models import CoolerInfo
from partscatalog.models.cpu_models import CPUInfo
from partscatalog.models.device_models import CatalogItem
from partscatalog.models.gpu_models import GPUInfo
from partscatalog.models.memory_models import MemoryModuleInfo
from partscatalog.models.power_supply_models import PowerSupplyInfo
from partscatalog.models.storage_models import DiskInfo


class ComputerInfo(CatalogItem):
    """An assembled system. Storage and graphics card are optional."""

    display_name: Optional[str] = None
    name: Optional[str] = None

    cpu: CPUInfo
    memory: MemoryModuleInfo
    storage: Optional[DiskInfo] = None
    gpu: Optional[GPUInfo] = None
    motherboard: MotherboardInfo
    power_supply: PowerSupplyInfo

    cooler: Optional[CoolerInfo] = None

    @model_validator(mode="after")
    def _attach_cooler(self):
        # The cooler is sized to the computer's own CPU, GPU and memory
        if self.cooler is None:
            self.cooler = CoolerInfo(
                manufacturer=DEFAULT_COOLER_MANUFACTURER,
                brand=DEFAULT_COOLER_MANUFACTURER,
                model=DEFAULT_COOLER_MODEL,
                serial_number=f"{self.serial_number}{COOLER_SERIAL_SUFFIX}",
                cpu=self.cpu,
                gpu=self.gpu,
                memory=self.memory,
            )
        else:
            # A loaded cooler carries its own copies of the parts; point it back at ours
            for part in ("cpu", "gpu", "memory"):
                if getattr(self.cooler, part) == getattr(self, part):
                    setattr(self.cooler, part, getattr(self, part))
        return self

    def get_info(self) -> str:
        lines = [
            f"Name: {self.name}",
            f"Serial number: {self.serial_number}",
            f"CPU: {self.cpu.display_name}",
            f"RAM: {self.memory.display_name}",
        ]
        if self.storage is not None:
            lines.append(f"Storage: {self.storage.display_name}")
        if self.gpu is not None:
            lines.append(f"GPU: {self.gpu.display_name}")
        lines.append(f"Motherboard: {self.motherboard.display_name}")
        lines.append(f"Power supply: {self.power_supply.display_name}")
        lines.append(
            f"Cooler: {self.cooler.display_name}, Cooling power: {self.cooler.cooling_power}W"
        )
        return "\n".join(lines) + "\n"
