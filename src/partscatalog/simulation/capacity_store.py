"""
Capacity and cache simulation shared by every device that stores data.

A store tracks three numbers: the fixed ``capacity``, the ``occupied`` space and
the ``cached`` part of the occupied space. Saving a file may let the cache grow
into a fraction of the remaining headroom, deleting one may reclaim part of the
cache, and ``clean`` drops the cache altogether.

Example:
    store = CapacityStore.seeded(1000)
    result = store.save(500)
    if not result:
        print(f"Rejected: {result.reason}")
    store.clean()
"""
import logging
import random
from typing import Optional, Protocol

from pydantic import BaseModel, Field, PrivateAttr, model_validator

from partscatalog.constants import CACHE_FRACTION_DIVISOR
from partscatalog.models.result_models import OperationResult, ResultType

logger = logging.getLogger(__name__)

# Used by every store that was not handed a generator of its own
_default_random = random.Random()


class RandomSource(Protocol):
    def randrange(self, start: int, stop: int) -> int:
        ...


class CapacityInvariantError(RuntimeError):
    """Raised when a store is found outside ``0 <= cached <= occupied <= capacity``.

    This can only happen when ``occupied`` or ``cached`` were assigned directly."""


def _draw(rng: RandomSource, upper: int) -> int:
    """Uniform integer in ``[0, upper)``; an empty range yields 0."""
    if upper <= 0:
        return 0
    return rng.randrange(0, upper)


class CapacityStore(BaseModel):
    """Occupied/cached bookkeeping for a device of fixed capacity.

    Attributes:
        capacity: Total addressable space, fixed at construction
        occupied: Space currently in use, including the cache
        cached: Part of ``occupied`` attributed to the cache
    """

    capacity: int = Field(ge=0, frozen=True)
    occupied: int = Field(default=0, ge=0)
    cached: int = Field(default=0, ge=0)

    _rng: Optional[RandomSource] = PrivateAttr(default=None)

    def __init__(self, rng: Optional[RandomSource] = None, **data):
        super().__init__(**data)
        self._rng = rng

    @model_validator(mode="after")
    def _check_bounds(self):
        if not self.cached <= self.occupied <= self.capacity:
            raise ValueError(
                f"expected cached <= occupied <= capacity, "
                f"got {self.cached} / {self.occupied} / {self.capacity}"
            )
        return self

    @classmethod
    def seeded(cls, capacity: int, rng: Optional[RandomSource] = None) -> "CapacityStore":
        """New store whose cache already fills a random part of the first tenth."""
        initial = _draw(rng or _default_random, capacity // CACHE_FRACTION_DIVISOR)
        return cls(capacity=capacity, occupied=initial, cached=initial, rng=rng)

    @property
    def rng(self) -> RandomSource:
        return self._rng or _default_random

    def use_random(self, rng: Optional[RandomSource]) -> None:
        """Replace the generator; ``None`` goes back to the shared default."""
        self._rng = rng

    @property
    def free(self) -> int:
        return self.capacity - self.occupied

    @property
    def usage_ratio(self) -> float:
        if self.capacity <= 0:
            return 0.0
        return self.occupied / self.capacity

    def _check_invariants(self) -> None:
        if not 0 <= self.cached <= self.occupied <= self.capacity:
            raise CapacityInvariantError(
                f"store left consistent range: cached={self.cached}, "
                f"occupied={self.occupied}, capacity={self.capacity}"
            )

    def _reject(self, operation: str, size: int, reason: str) -> OperationResult:
        logger.debug(f"{operation}({size}) rejected: {reason}")
        return OperationResult(
            type=ResultType.REJECTED, operation=operation, size=size, reason=reason
        )

    def save(self, size: int) -> OperationResult:
        """Simulate writing a file of ``size`` units.

        Accepted only while the device is not full and ``size`` fits into the
        free space. Afterwards the cache may grow by up to a tenth of the
        headroom that is left."""
        self._check_invariants()

        if size < 0:
            return self._reject("save", size, "size must not be negative")
        if self.occupied >= self.capacity:
            return self._reject("save", size, "device is full")
        if self.free < size:
            return self._reject("save", size, f"only {self.free} free")

        cached_before = self.cached
        self.occupied += size

        if self.occupied < self.capacity:
            growth = _draw(self.rng, self.free // CACHE_FRACTION_DIVISOR)
            self.cached += growth
            self.occupied += growth

        self._check_invariants()
        delta = self.cached - cached_before
        logger.debug(f"save({size}) accepted, cache grew by {delta}")
        return OperationResult(
            type=ResultType.ACCEPTED, operation="save", size=size, cache_delta=delta
        )

    def delete(self, size: int) -> OperationResult:
        """Simulate deleting a file of ``size`` units.

        Accepted whenever ``size`` does not exceed the occupied space. If the
        deletion runs past the file content, the cache shrinks with it. Then up
        to a tenth of what is still occupied may be reclaimed from the cache."""
        self._check_invariants()

        if size < 0:
            return self._reject("delete", size, "size must not be negative")
        if size > self.occupied:
            return self._reject("delete", size, f"only {self.occupied} occupied")

        cached_before = self.cached
        self.occupied -= size
        self.cached = min(self.cached, self.occupied)

        if self.occupied > 0 and self.cached > 0:
            shrink = min(_draw(self.rng, self.occupied // CACHE_FRACTION_DIVISOR), self.cached)
            self.cached -= shrink
            self.occupied -= shrink

        self._check_invariants()
        delta = self.cached - cached_before
        logger.debug(f"delete({size}) accepted, cache changed by {delta}")
        return OperationResult(
            type=ResultType.ACCEPTED, operation="delete", size=size, cache_delta=delta
        )

    def clean(self) -> OperationResult:
        """Drop the whole cache. Calling it again changes nothing."""
        self._check_invariants()

        released = self.cached
        self.occupied -= released
        self.cached = 0

        logger.debug(f"clean() released {released}")
        return OperationResult(
            type=ResultType.ACCEPTED, operation="clean", cache_delta=-released
        )
