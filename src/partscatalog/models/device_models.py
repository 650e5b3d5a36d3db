from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field


class Condition(str, Enum):
    """Conditions the catalogue attaches meaning to. Any other string is accepted as-is."""

    NEW = "new"
    USED = "used"


class CatalogItem(BaseModel):
    """Base for everything that can be listed in a catalogue:
    single devices as well as assembled computers."""

    serial_number: Optional[str] = None

    def get_info(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.get_info()


class DeviceInfo(CatalogItem):
    """Fields shared by every device kind."""

    #: Manufacturer, e.g. 'Intel', 'Kingston'
    brand: Optional[str] = None

    model: Optional[str] = None

    #: Free text; see ``Condition`` for the values that change behaviour
    condition: Optional[str] = None

    #: Extra string attributes, e.g. year of release or a photo path
    properties: Dict[str, str] = Field(default_factory=dict)

    @property
    def display_name(self) -> str:
        return " ".join(part for part in (self.brand, self.model) if part)

    def __getitem__(self, key: str) -> Optional[str]:
        return self.properties.get(key)

    def __setitem__(self, key: str, value: str) -> None:
        self.properties[key] = value

    @property
    def year_of_release(self) -> Optional[str]:
        return self["year_of_release"]

    @year_of_release.setter
    def year_of_release(self, value: str) -> None:
        self["year_of_release"] = value

    @property
    def photo_path(self) -> Optional[str]:
        return self["photo_path"]

    @photo_path.setter
    def photo_path(self, value: str) -> None:
        self["photo_path"] = value
