"""Initial service list and loading of static seed files."""

import json
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .domain import Priority, Service

DEFAULT_SERVICES: Tuple[Service, ...] = (
    Service(
        service_id="1",
        name="Darshan",
        description="Main temple darshan for devotees",
        max_capacity=500,
        current_queue=234,
        is_active=True,
        time_slot="6:00 AM - 12:00 PM",
        priority=Priority.HIGH,
    ),
    Service(
        service_id="2",
        name="Abhishekam",
        description="Special abhishekam ceremony",
        max_capacity=100,
        current_queue=67,
        is_active=True,
        time_slot="9:00 AM - 11:00 AM",
        priority=Priority.MEDIUM,
    ),
    Service(
        service_id="3",
        name="Prasadam",
        description="Blessed food distribution",
        max_capacity=1000,
        current_queue=123,
        is_active=True,
        time_slot="12:00 PM - 6:00 PM",
        priority=Priority.LOW,
    ),
    Service(
        service_id="4",
        name="Evening Aarti",
        description="Evening prayer ceremony",
        max_capacity=300,
        current_queue=45,
        is_active=False,
        time_slot="6:00 PM - 8:00 PM",
        priority=Priority.MEDIUM,
    ),
)

# JSON key -> Service field
_FIELD_MAP = {
    "id": "service_id",
    "name": "name",
    "description": "description",
    "maxCapacity": "max_capacity",
    "currentQueue": "current_queue",
    "isActive": "is_active",
    "timeSlot": "time_slot",
    "priority": "priority",
}


def _require_int(record: dict, key: str) -> int:
    value = record[key]
    # bool is an int subclass; reject it along with floats and strings.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Seed field {key!r} must be an integer, got {value!r}")
    return value


def service_from_dict(record: dict) -> Service:
    if not isinstance(record, dict):
        raise ValueError(f"Seed record must be an object, got {record!r}")
    missing = [key for key in _FIELD_MAP if key not in record]
    if missing:
        raise ValueError(f"Seed record is missing keys: {', '.join(missing)}")
    if not isinstance(record["isActive"], bool):
        raise ValueError(f"Seed field 'isActive' must be true or false, got {record['isActive']!r}")

    kwargs = {field: record[key] for key, field in _FIELD_MAP.items()}
    kwargs["service_id"] = str(kwargs["service_id"])
    kwargs["max_capacity"] = _require_int(record, "maxCapacity")
    kwargs["current_queue"] = _require_int(record, "currentQueue")
    return Service(**kwargs)


def services_from_records(records: Iterable[dict]) -> List[Service]:
    return [service_from_dict(record) for record in records]


def load_services(path: Optional[Path] = None) -> Tuple[Service, ...]:
    """Return the seed collection, read from ``path`` when one is given."""
    if path is None:
        return DEFAULT_SERVICES

    try:
        records = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise ValueError(f"Seed file {path} cannot be read: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Seed file {path} is not valid JSON: {exc}") from exc

    if not isinstance(records, list):
        raise ValueError(f"Seed file {path} must contain a list of services")
    return tuple(services_from_records(records))
