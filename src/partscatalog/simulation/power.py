import logging
from typing import Optional, Tuple

from partscatalog.constants import (
    CLOCK_ADJUSTMENT_GHZ,
    COOLING_EFFICIENCY,
    CPU_CLOCK_WEIGHT,
    GPU_CLOCK_WEIGHT,
    HIGH_POWER_THRESHOLD,
    MEDIUM_POWER_THRESHOLD,
    MEMORY_WEIGHT,
)
from partscatalog.models.cpu_models import CPUInfo, PowerCategory
from partscatalog.models.device_models import Condition
from partscatalog.models.gpu_models import GPUInfo
from partscatalog.models.memory_models import MemoryModuleInfo

logger = logging.getLogger(__name__)


def estimate_cooling_power(
    cpu: Optional[CPUInfo] = None,
    gpu: Optional[GPUInfo] = None,
    memory: Optional[MemoryModuleInfo] = None,
) -> float:
    """
    Estimates the cooling power (W) needed for the given devices.

    Each present device contributes a weighted figure:
        CPU:    base clock (GHz) * cores * 10
        GPU:    core clock (MHz) * 0.1
        Memory: frequency (MHz) * capacity (GB) * 0.05

    The cooler is expected to dissipate 80% of the sum.
    Absent devices contribute nothing.
    """
    total = 0.0

    if cpu is not None:
        total += cpu.base_clock * cpu.core_count * CPU_CLOCK_WEIGHT

    if gpu is not None:
        total += gpu.core_clock * GPU_CLOCK_WEIGHT

    if memory is not None:
        total += memory.frequency * memory.capacity * MEMORY_WEIGHT

    return total * COOLING_EFFICIENCY


def classify_cpu_power(cpu: CPUInfo) -> Tuple[float, PowerCategory]:
    """
    Returns:
        Tuple[float, PowerCategory]: cores * threads * max clock,
                                     and the band that figure falls into.
    """
    power = cpu.core_count * cpu.thread_count * cpu.max_clock

    if power > HIGH_POWER_THRESHOLD:
        category = PowerCategory.HIGH
    elif power > MEDIUM_POWER_THRESHOLD:
        category = PowerCategory.MEDIUM
    else:
        category = PowerCategory.LOW

    return power, category


def adjust_max_clock(cpu: CPUInfo) -> float:
    """
    Lowers the max clock of a used processor and raises that of a new one, by 0.5 GHz.
    Every call applies the step again.
    """
    condition = (cpu.condition or "").strip().lower()

    if condition == Condition.USED.value:
        cpu.max_clock -= CLOCK_ADJUSTMENT_GHZ
    elif condition == Condition.NEW.value:
        cpu.max_clock += CLOCK_ADJUSTMENT_GHZ
    else:
        logger.debug(f"Max clock of {cpu.display_name} left as is (condition: {cpu.condition})")

    return cpu.max_clock
