from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class StatusType(str, Enum):
    SUCCESS = "success"
    PARTIAL = "partial"
    FAILED = "failed"


class Status(BaseModel):
    """Every catalogue operation that touches the outside world
    (loading or saving a catalogue) reports one of these.

    ``SUCCESS`` means nothing went wrong; messages may still be present.
    ``PARTIAL`` means some entries could not be processed and were skipped.
    ``FAILED`` means nothing usable was produced."""

    type: StatusType = StatusType.SUCCESS
    messages: List[str] = Field(default_factory=list)


"""
`messages` is a list so that PARTIAL can accumulate one message per skipped entry.

When something goes wrong half-way, we do the following.
```
catalog.status.type = StatusType.PARTIAL
catalog.status.messages.append("Skipped entry 3: ...")
```

A FAILED status is final: the operation stops right after setting it.
"""
