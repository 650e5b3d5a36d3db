"""
Shared fixtures: deterministic random sources and a set of sample devices.
"""

from datetime import date

import pytest

from partscatalog.models.baseboard_models import MotherboardInfo
from partscatalog.models.cpu_models import CPUInfo
from partscatalog.models.gpu_models import GPUInfo
from partscatalog.models.memory_models import MemoryModuleInfo
from partscatalog.models.power_supply_models import PowerSupplyInfo
from partscatalog.models.storage_models import DiskInfo
from partscatalog.simulation.capacity_store import CapacityStore


class SequenceRandom:
    """Hands out queued values (clamped into the requested range), then zeros.
    Every requested range is recorded in ``calls``."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        value = self.values.pop(0) if self.values else 0
        return min(max(value, start), stop - 1)


@pytest.fixture
def zero_random():
    return SequenceRandom()


@pytest.fixture
def sequence_random():
    return SequenceRandom


@pytest.fixture
def store_factory(zero_random):
    """Builds a store with explicit numbers; growth/shrink draws are 0 unless an rng is given."""

    def _factory(capacity, occupied=0, cached=0, rng=None):
        return CapacityStore(
            capacity=capacity, occupied=occupied, cached=cached, rng=rng or zero_random
        )

    return _factory


@pytest.fixture
def sample_cpu():
    return CPUInfo(
        brand="Intel", model="Core i7-12700K", core_count=12, thread_count=20,
        base_clock=3.6, max_clock=5.0, socket_type="LGA1700", condition="new",
        guarantee_end_date=date(2026, 5, 1), serial_number="CPU-123",
    )


@pytest.fixture
def sample_ram(zero_random):
    return MemoryModuleInfo(
        brand="Kingston", model="Fury Beast", capacity=16, frequency=3200, type="DDR4",
        supported_cpu="Intel", condition="new", serial_number="RAM-123",
        store=CapacityStore(capacity=16, rng=zero_random),
    )


@pytest.fixture
def sample_disk(zero_random):
    return DiskInfo(
        brand="Seagate", model="Barracuda", capacity=2000, type="HDD", rotation_speed=7200,
        interface="SATA", condition="used", warranty_period="2 years", serial_number="HDD-123",
        store=CapacityStore(capacity=2000, rng=zero_random),
    )


@pytest.fixture
def sample_gpu():
    return GPUInfo(
        brand="NVIDIA", model="RTX 3060", memory_size=12, memory_type="GDDR6",
        core_clock=1320, boost_clock=1777, interface="PCIe 4.0", condition="new",
        serial_number="GPU-123",
    )


@pytest.fixture
def sample_motherboard():
    return MotherboardInfo(
        brand="MSI", model="PRO Z690-A", supported_cpu="Intel 12th gen", socket_type="LGA1700",
        chipset="Z690", ram_slots=4, max_ram=128, form_factor="ATX", condition="new",
        serial_number="MB-123",
    )


@pytest.fixture
def sample_psu():
    return PowerSupplyInfo(
        brand="Corsair", model="RM850x", wattage=850, efficiency_rating="80+ Gold",
        form_factor="ATX", modular=True, condition="new", serial_number="PSU-123",
    )
