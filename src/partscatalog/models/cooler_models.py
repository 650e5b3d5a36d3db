from typing import Optional

from partscatalog.models.cpu_models import CPUInfo
from partscatalog.models.device_models import DeviceInfo
from partscatalog.models.gpu_models import GPUInfo
from partscatalog.models.memory_models import MemoryModuleInfo
from partscatalog.simulation.power import estimate_cooling_power


class CoolerInfo(DeviceInfo):
    """A cooling unit, together with the devices whose heat it has to carry away."""

    manufacturer: Optional[str] = None

    cpu: Optional[CPUInfo] = None
    gpu: Optional[GPUInfo] = None
    memory: Optional[MemoryModuleInfo] = None

    @property
    def cooling_power(self) -> float:
        return estimate_cooling_power(self.cpu, self.gpu, self.memory)

    def get_info(self) -> str:
        return "\n".join([
            f"Manufacturer: {self.manufacturer}",
            f"Model: {self.model}",
            f"Serial number: {self.serial_number}",
            f"Cooling power: {self.cooling_power}W",
        ]) + "\n"
