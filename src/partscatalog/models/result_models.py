from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ResultType(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class OperationResult(BaseModel):
    """Outcome of a ``save``, ``delete`` or ``clean`` call on a capacity store.

    A rejected call leaves the store untouched; ``reason`` says which bound was hit.
    The result is truthy only when the call was accepted."""

    #: Whether the request was applied
    type: ResultType

    #: One of ``save``, ``delete`` or ``clean``
    operation: str

    #: Requested size (0 for ``clean``)
    size: int = 0

    #: Signed change of the cached amount caused by the call
    cache_delta: int = 0

    reason: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.type == ResultType.ACCEPTED

    def __bool__(self) -> bool:
        return self.accepted
