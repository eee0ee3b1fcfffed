import random
import re

import pytest

from temple.domain import (
    Priority,
    RejectionReason,
    Service,
    StatusLabel,
    TokenIssued,
    TokenRejected,
    can_issue_token,
    capacity_percentage,
    estimated_wait_minutes,
    generate_token_code,
    issue_token,
    status_label,
)
from temple.seed import DEFAULT_SERVICES

TOKEN_PATTERN = re.compile(r"^[A-Z][0-9]{3}$")


def _service(service_id="x", current=0, capacity=10, active=True):
    return Service(
        service_id=service_id,
        name=f"Service {service_id}",
        description="",
        max_capacity=capacity,
        current_queue=current,
        is_active=active,
        time_slot="",
        priority=Priority.LOW,
    )


class _FixedRng:
    def __init__(self, letter, number):
        self.letter = letter
        self.number = number

    def choice(self, seq):
        assert self.letter in seq
        return self.letter

    def randint(self, a, b):
        assert (a, b) == (1, 999)
        return self.number


def test_capacity_percentage_is_monotonic_in_queue_length():
    values = [capacity_percentage(_service(current=q, capacity=37)) for q in range(0, 60)]
    assert values == sorted(values)
    assert capacity_percentage(_service(current=67, capacity=100)) == pytest.approx(67.0)


@pytest.mark.parametrize(
    "percentage, expected",
    [
        (0.0, StatusLabel.LIGHT),
        (29.999, StatusLabel.LIGHT),
        (30.0, StatusLabel.MODERATE),
        (69.999, StatusLabel.MODERATE),
        (70.0, StatusLabel.BUSY),
        (89.999, StatusLabel.BUSY),
        (90.0, StatusLabel.CRITICAL),
        (100.0, StatusLabel.CRITICAL),
        (250.0, StatusLabel.CRITICAL),
    ],
)
def test_status_label_band_edges(percentage, expected):
    assert status_label(percentage) is expected


@pytest.mark.parametrize("queue_length, minutes", [(0, 0), (1, 3), (2, 5), (4, 10), (234, 585)])
def test_estimated_wait_minutes(queue_length, minutes):
    assert estimated_wait_minutes(queue_length) == minutes


def test_can_issue_token_requires_active_and_free_capacity():
    assert can_issue_token(_service(current=9, capacity=10))
    assert not can_issue_token(_service(current=10, capacity=10))
    assert not can_issue_token(_service(current=0, capacity=10, active=False))


def test_generate_token_code_uses_injected_rng():
    assert generate_token_code(_FixedRng("B", 42)) == "B042"
    assert generate_token_code(_FixedRng("Z", 999)) == "Z999"
    assert generate_token_code(_FixedRng("A", 1)) == "A001"


def test_generate_token_code_is_reproducible_for_a_seed():
    first = [generate_token_code(random.Random(2024)) for _ in range(3)]
    second = [generate_token_code(random.Random(2024)) for _ in range(3)]
    assert first == second
    for code in first:
        assert TOKEN_PATTERN.match(code)


def test_issue_token_increments_only_the_target_service():
    services = DEFAULT_SERVICES
    result = issue_token(services, "2", random.Random(7))

    assert isinstance(result, TokenIssued)
    assert result.ok
    assert TOKEN_PATTERN.match(result.token_code)
    assert result.service_id == "2"

    before = {s.service_id: s for s in services}
    for service in result.services:
        if service.service_id == "2":
            assert service.current_queue == before["2"].current_queue + 1
            assert service.max_capacity == before["2"].max_capacity
        else:
            assert service is before[service.service_id]
    # Input collection is untouched.
    assert before["2"].current_queue == 67


def test_seed_abhishekam_scenario():
    abhishekam = next(s for s in DEFAULT_SERVICES if s.service_id == "2")
    percentage = capacity_percentage(abhishekam)
    assert percentage == pytest.approx(67.0)
    assert status_label(percentage) is StatusLabel.MODERATE

    result = issue_token(DEFAULT_SERVICES, "2")
    updated = next(s for s in result.services if s.service_id == "2")
    assert updated.current_queue == 68


@pytest.mark.parametrize("current", [0, 45, 299, 300])
def test_inactive_service_is_always_rejected(current):
    services = (_service("4", current=current, capacity=300, active=False),)
    result = issue_token(services, "4")

    assert isinstance(result, TokenRejected)
    assert not result.ok
    assert result.reason is RejectionReason.SERVICE_INACTIVE
    assert services[0].current_queue == current


def test_full_queue_is_rejected():
    services = (_service("a", current=10, capacity=10),)
    result = issue_token(services, "a")

    assert result.reason is RejectionReason.QUEUE_FULL
    assert result.message == "This service has reached maximum capacity."
    assert services[0].current_queue == 10


def test_unknown_service_is_not_found():
    result = issue_token(DEFAULT_SERVICES, "missing")
    assert isinstance(result, TokenRejected)
    assert result.reason is RejectionReason.NOT_FOUND


def test_rejection_messages_are_distinct():
    messages = {
        TokenRejected("x", reason).message for reason in RejectionReason
    }
    assert len(messages) == len(RejectionReason)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_capacity": 0},
        {"max_capacity": -5},
        {"current_queue": -1},
        {"priority": "urgent"},
    ],
)
def test_service_rejects_invalid_values(kwargs):
    values = dict(
        service_id="bad",
        name="Bad",
        description="",
        max_capacity=10,
        current_queue=0,
        is_active=True,
        time_slot="",
        priority="low",
    )
    values.update(kwargs)
    with pytest.raises(ValueError):
        Service(**values)


def test_service_accepts_priority_strings():
    service = _service()
    assert Service(**{**service.__dict__, "priority": "high"}).priority is Priority.HIGH
