"""Aggregate queue statistics shown on the dashboard and monitor."""

from __future__ import annotations

import math
from typing import Dict, Optional, Sequence

from .domain import Service, estimated_wait_minutes, is_near_full


def _empty_summary() -> Dict[str, Optional[int]]:
    return {
        "total_waiting": 0,
        "active_services": 0,
        "average_wait_minutes": None,
        "critical_queues": 0,
    }


def queue_summary(services: Sequence[Service]) -> Dict[str, Optional[int]]:
    """Return the headline numbers for a collection of services.

    ``total_waiting``         People currently queued across all services.
    ``active_services``       Services accepting tokens.
    ``average_wait_minutes``  Mean of the per-service wait estimates, rounded up.
    ``critical_queues``       Services at or above 90 % of capacity.

    ``average_wait_minutes`` is ``None`` when there are no services.
    """

    if not services:
        return _empty_summary()

    total_wait = sum(estimated_wait_minutes(s.current_queue) for s in services)
    return {
        "total_waiting": sum(s.current_queue for s in services),
        "active_services": sum(1 for s in services if s.is_active),
        "average_wait_minutes": math.ceil(total_wait / len(services)),
        "critical_queues": sum(1 for s in services if is_near_full(s)),
    }
