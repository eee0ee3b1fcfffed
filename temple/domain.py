"""Queue and token rules for temple services (savas)."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
import math
import random
import string
from typing import Optional, Sequence, Tuple, Union

MINUTES_PER_PERSON = 2.5  # fixed heuristic, not configurable
NEAR_FULL_PERCENTAGE = 90.0


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class StatusLabel(str, Enum):
    CRITICAL = "Critical"
    BUSY = "Busy"
    MODERATE = "Moderate"
    LIGHT = "Light"


class RejectionReason(str, Enum):
    NOT_FOUND = "NotFound"
    SERVICE_INACTIVE = "ServiceInactive"
    QUEUE_FULL = "QueueFull"


REJECTION_MESSAGES = {
    RejectionReason.NOT_FOUND: "The selected service no longer exists.",
    RejectionReason.SERVICE_INACTIVE: "This service is currently not active.",
    RejectionReason.QUEUE_FULL: "This service has reached maximum capacity.",
}

# Lower bound of each band, checked top-down.
_STATUS_BANDS = (
    (90.0, StatusLabel.CRITICAL),
    (70.0, StatusLabel.BUSY),
    (30.0, StatusLabel.MODERATE),
)


@dataclass(frozen=True)
class Service:
    service_id: str
    name: str
    description: str
    max_capacity: int
    current_queue: int
    is_active: bool
    time_slot: str
    priority: Priority = Priority.MEDIUM

    def __post_init__(self):
        if self.max_capacity <= 0:
            raise ValueError(
                f"max_capacity must be positive for service {self.service_id!r}, got {self.max_capacity}"
            )
        if self.current_queue < 0:
            raise ValueError(
                f"current_queue must be non-negative for service {self.service_id!r}, got {self.current_queue}"
            )
        # Accept the plain strings used by seed files.
        object.__setattr__(self, "priority", Priority(self.priority))


@dataclass(frozen=True)
class TokenIssued:
    services: Tuple[Service, ...]
    service_id: str
    token_code: str

    ok = True


@dataclass(frozen=True)
class TokenRejected:
    service_id: str
    reason: RejectionReason

    ok = False

    @property
    def message(self) -> str:
        return REJECTION_MESSAGES[self.reason]


IssueResult = Union[TokenIssued, TokenRejected]


def capacity_percentage(service: Service) -> float:
    return service.current_queue / service.max_capacity * 100


def estimated_wait_minutes(queue_length: int) -> int:
    return math.ceil(queue_length * MINUTES_PER_PERSON)


def status_label(percentage: float) -> StatusLabel:
    for lower_bound, label in _STATUS_BANDS:
        if percentage >= lower_bound:
            return label
    return StatusLabel.LIGHT


def is_near_full(service: Service) -> bool:
    return capacity_percentage(service) >= NEAR_FULL_PERCENTAGE


def rejection_reason(service: Service) -> Optional[RejectionReason]:
    """Return why a token cannot be issued for ``service``, or ``None``."""
    if not service.is_active:
        return RejectionReason.SERVICE_INACTIVE
    if capacity_percentage(service) >= 100:
        return RejectionReason.QUEUE_FULL
    return None


def can_issue_token(service: Service) -> bool:
    return rejection_reason(service) is None


def generate_token_code(rng=None) -> str:
    """Draw a lucky-dip token such as ``B042``.

    ``rng`` may be any object exposing ``choice`` and ``randint`` (for
    instance ``random.Random(seed)``); the module-level generator is used
    when omitted. Codes are not guaranteed to be unique.
    """
    rng = rng if rng is not None else random
    letter = rng.choice(string.ascii_uppercase)
    number = rng.randint(1, 999)
    return f"{letter}{number:03d}"


def find_service(services: Sequence[Service], service_id: str) -> Optional[Service]:
    for service in services:
        if service.service_id == service_id:
            return service
    return None


def issue_token(services: Sequence[Service], service_id: str, rng=None) -> IssueResult:
    """Issue a token for ``service_id`` without mutating ``services``.

    On success only the matched record is replaced; every other record in
    the returned tuple is the same object as in the input.
    """
    service = find_service(services, service_id)
    if service is None:
        return TokenRejected(service_id, RejectionReason.NOT_FOUND)

    reason = rejection_reason(service)
    if reason is not None:
        return TokenRejected(service_id, reason)

    updated = replace(service, current_queue=service.current_queue + 1)
    new_services = tuple(updated if s is service else s for s in services)
    return TokenIssued(new_services, service_id, generate_token_code(rng))
