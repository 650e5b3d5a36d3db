from typing import List

from pydantic import BaseModel, Field, SerializeAsAny

from partscatalog.models.device_models import CatalogItem
from partscatalog.models.status_models import Status


class DeviceCatalog(BaseModel):
    """Holds the records read from a catalogue file, and how the read went."""

    status: Status = Field(default_factory=Status)

    #: Records in file order; entries that failed validation are left out
    devices: List[SerializeAsAny[CatalogItem]] = Field(default_factory=list)
