from partscatalog.models.computer_models import ComputerInfo
from partscatalog.models.memory_models import MemoryDevice, tracks_capacity
from partscatalog.persistence.json_store import load_devices, save_devices
from partscatalog.simulation.capacity_store import CapacityInvariantError, CapacityStore
from partscatalog.simulation.power import adjust_max_clock, classify_cpu_power, estimate_cooling_power

__all__ = [
    "CapacityInvariantError",
    "CapacityStore",
    "ComputerInfo",
    "MemoryDevice",
    "adjust_max_clock",
    "classify_cpu_power",
    "estimate_cooling_power",
    "load_devices",
    "save_devices",
    "tracks_capacity",
]
