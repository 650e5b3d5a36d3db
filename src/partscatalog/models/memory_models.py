from typing import Optional

from pydantic import Field, model_validator

from partscatalog.models.device_models import DeviceInfo
from partscatalog.models.result_models import OperationResult
from partscatalog.simulation.capacity_store import CapacityStore


class MemoryDevice(DeviceInfo):
    """Base for every device kind that tracks occupied space.

    Subclassing it is how a device declares capacity tracking: the record
    owns one ``CapacityStore`` sized to ``capacity``. When no store is given,
    a freshly seeded one is attached."""

    #: Capacity in GB
    capacity: int = Field(default=0, ge=0, frozen=True)

    store: Optional[CapacityStore] = None

    @model_validator(mode="after")
    def _attach_store(self):
        if self.store is None:
            self.store = CapacityStore.seeded(self.capacity)
        elif self.store.capacity != self.capacity:
            raise ValueError(
                f"store capacity {self.store.capacity} does not match device capacity {self.capacity}"
            )
        return self

    @property
    def occupied(self) -> int:
        return self.store.occupied

    @property
    def cached(self) -> int:
        return self.store.cached

    def save_file(self, size: int) -> OperationResult:
        return self.store.save(size)

    def delete_file(self, size: int) -> OperationResult:
        return self.store.delete(size)

    def clean_cache(self) -> OperationResult:
        return self.store.clean()


def tracks_capacity(device) -> bool:
    return isinstance(device, MemoryDevice)


class MemoryModuleInfo(MemoryDevice):
    """A RAM module."""

    #: Frequency in MHz
    frequency: int = 0

    #: DDR4, DDR5, etc.
    type: Optional[str] = None

    #: Processor family the module is meant for
    supported_cpu: Optional[str] = None

    def get_info(self) -> str:
        return (
            f"RAM: {self.display_name}, Capacity: {self.capacity}GB, Frequency: {self.frequency}MHz, "
            f"Type: {self.type}, Supported CPU: {self.supported_cpu}, Condition: {self.condition}"
        )
