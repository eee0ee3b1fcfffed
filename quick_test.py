import random

from temple.domain import RejectionReason, StatusLabel, capacity_percentage, status_label
from temple.seed import DEFAULT_SERVICES
from temple.store import IssueToken, ServiceStore


def regression_test_seed_abhishekam_accepts_token():
    """Service "2" starts at 67/100, is Moderate, and grows to 68 after one token."""

    store = ServiceStore(DEFAULT_SERVICES, rng=random.Random(12345))
    service = store.get("2")
    assert status_label(capacity_percentage(service)) is StatusLabel.MODERATE

    result = store.dispatch(IssueToken("2"))
    assert result.ok
    assert store.get("2").current_queue == 68


def regression_test_inactive_service_never_changes():
    """Evening Aarti is inactive; repeated requests are rejected without side effects."""

    store = ServiceStore(DEFAULT_SERVICES)
    for _ in range(5):
        result = store.dispatch(IssueToken("4"))
        assert result.reason is RejectionReason.SERVICE_INACTIVE
    assert store.get("4").current_queue == 45


if __name__ == "__main__":
    regression_test_seed_abhishekam_accepts_token()
    regression_test_inactive_service_never_changes()

    store = ServiceStore(DEFAULT_SERVICES)
    for service_id in ("1", "2", "3", "4", "missing"):
        result = store.dispatch(IssueToken(service_id))
        if result.ok:
            print(f"{service_id}: token {result.token_code}")
        else:
            print(f"{service_id}: rejected ({result.reason.value})")

    snap = store.get_snapshot()
    for service in snap.services:
        pct = capacity_percentage(service)
        print(f"{service.name:<14} {service.current_queue:>4}/{service.max_capacity:<5} {pct:6.1f}% {status_label(pct).value}")
    print("Summary:", snap.summary)
