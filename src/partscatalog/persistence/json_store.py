import json
import logging
import os
from typing import Sequence, Type, Union

from pydantic import ValidationError

from partscatalog.models.catalog_models import DeviceCatalog
from partscatalog.models.device_models import CatalogItem
from partscatalog.models.status_models import Status, StatusType

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def save_devices(devices: Sequence[CatalogItem], path: PathLike) -> Status:
    """
    Writes the records to ``path`` as an indented JSON array.
    Capacity stores are written along with their device, so occupancy survives a reload.

    Returns:
        Status: FAILED if the file could not be written.
    """
    status = Status()

    payload = [device.model_dump(mode="json") for device in devices]

    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
    except OSError as e:
        logger.error(f"Could not write {path}: {e}")
        status.type = StatusType.FAILED
        status.messages.append(f"Could not write {path}: {str(e)}")
        return status

    logger.debug(f"Wrote {len(payload)} records to {path}")
    return status


def load_devices(path: PathLike, device_type: Type[CatalogItem]) -> DeviceCatalog:
    """
    Reads a JSON array written by ``save_devices`` into ``device_type`` records.

    A missing or unreadable file gives an empty catalogue with FAILED status.
    Entries that do not validate are skipped and the status becomes PARTIAL.
    """
    catalog = DeviceCatalog()

    try:
        with open(path, encoding="utf-8") as f:
            raw_data = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not open {path}: {e}")
        catalog.status.type = StatusType.FAILED
        catalog.status.messages.append(f"Could not open {path}: {str(e)}")
        return catalog

    try:
        entries = json.loads(raw_data)
    except json.JSONDecodeError as e:
        logger.error(f"{path} is not valid JSON: {e}")
        catalog.status.type = StatusType.FAILED
        catalog.status.messages.append(f"{path} is not valid JSON: {str(e)}")
        return catalog

    if not isinstance(entries, list):
        catalog.status.type = StatusType.FAILED
        catalog.status.messages.append(f"{path} does not contain a JSON array")
        return catalog

    for index, entry in enumerate(entries):
        try:
            catalog.devices.append(device_type.model_validate(entry))
        except ValidationError as e:
            logger.warning(f"Skipping entry {index} of {path}: {e.error_count()} validation error(s)")
            catalog.status.type = StatusType.PARTIAL
            catalog.status.messages.append(
                f"Skipped entry {index}: {e.error_count()} validation error(s)"
            )

    return catalog
