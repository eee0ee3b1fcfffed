import pytest

from temple.domain import Priority, Service
from temple.metrics import queue_summary
from temple.seed import DEFAULT_SERVICES


def _service(service_id, current, capacity, active=True):
    return Service(service_id, service_id, "", capacity, current, active, "", Priority.MEDIUM)


def test_queue_summary_for_seed_services():
    summary = queue_summary(DEFAULT_SERVICES)
    # Waits: 585, 168, 308, 113 -> mean 293.5
    assert summary == {
        "total_waiting": 469,
        "active_services": 3,
        "average_wait_minutes": 294,
        "critical_queues": 0,
    }


def test_queue_summary_counts_near_full_queues():
    services = [
        _service("a", 89, 100),
        _service("b", 90, 100),
        _service("c", 100, 100),
        _service("d", 120, 100, active=False),
    ]
    summary = queue_summary(services)
    assert summary["critical_queues"] == 3
    assert summary["active_services"] == 3


def test_queue_summary_empty_collection():
    summary = queue_summary([])
    assert summary["total_waiting"] == 0
    assert summary["active_services"] == 0
    assert summary["average_wait_minutes"] is None
    assert summary["critical_queues"] == 0


@pytest.mark.parametrize("queues, expected", [([0, 0], 0), ([1, 0], 2), ([4, 4], 10)])
def test_average_wait_rounds_up(queues, expected):
    services = [_service(str(i), q, 50) for i, q in enumerate(queues)]
    assert queue_summary(services)["average_wait_minutes"] == expected
