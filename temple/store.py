"""Single owner of the in-memory service collection."""

from dataclasses import dataclass
import logging
from typing import Callable, List, Optional, Sequence, Tuple, Union

from .domain import (
    IssueResult,
    Service,
    TokenIssued,
    find_service,
    issue_token,
)
from .metrics import queue_summary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IssueToken:
    service_id: str


@dataclass(frozen=True)
class ResetQueues:
    pass


Action = Union[IssueToken, ResetQueues]


class StoreSnapshot:
    def __init__(self, services, summary, last_token, history):
        self.services = services        # tuple of Service
        self.summary = summary          # dict from queue_summary
        self.last_token = last_token    # TokenIssued or None
        self.history = history          # list of total queue lengths


def reduce(
    services: Tuple[Service, ...],
    seed: Tuple[Service, ...],
    action: Action,
    rng=None,
) -> Tuple[Tuple[Service, ...], Optional[IssueResult]]:
    """Pure transition: ``(collection, action) -> (collection, result)``."""
    if isinstance(action, IssueToken):
        result = issue_token(services, action.service_id, rng)
        if isinstance(result, TokenIssued):
            return result.services, result
        return services, result
    if isinstance(action, ResetQueues):
        return seed, None
    raise TypeError(f"Unsupported action: {action!r}")


class ServiceStore:
    def __init__(self, services: Sequence[Service], rng=None, history_limit: int = 500):
        seen = set()
        for service in services:
            if service.service_id in seen:
                raise ValueError(f"Duplicate service id: {service.service_id!r}")
            seen.add(service.service_id)

        self._seed: Tuple[Service, ...] = tuple(services)
        self._services: Tuple[Service, ...] = self._seed
        self._rng = rng
        self._history_limit = max(int(history_limit), 1)
        self._history: List[int] = [self._total_waiting()]
        self._last_token: Optional[TokenIssued] = None
        self._subscribers: List[Callable[[StoreSnapshot], None]] = []

    # ---- public API ----

    @property
    def services(self) -> Tuple[Service, ...]:
        return self._services

    @property
    def last_token(self) -> Optional[TokenIssued]:
        return self._last_token

    def get(self, service_id: str) -> Optional[Service]:
        return find_service(self._services, service_id)

    def active_services(self) -> List[Service]:
        return [s for s in self._services if s.is_active]

    def subscribe(self, callback: Callable[[StoreSnapshot], None]):
        self._subscribers.append(callback)

    def dispatch(self, action: Action) -> Optional[IssueResult]:
        new_services, result = reduce(self._services, self._seed, action, self._rng)

        if isinstance(action, ResetQueues):
            self._last_token = None
            self._history = []
            logger.info("Queues reset to seed values")
        elif isinstance(result, TokenIssued):
            self._last_token = result
            logger.info("Issued token %s for service %s", result.token_code, result.service_id)
        else:
            logger.warning(
                "Token rejected for service %s: %s", result.service_id, result.reason.value
            )

        if new_services is self._services and not isinstance(action, ResetQueues):
            return result

        self._services = new_services
        self._record_history()
        self._notify()
        return result

    def get_snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            self._services,
            queue_summary(self._services),
            self._last_token,
            list(self._history),
        )

    # ---- internals ----

    def _total_waiting(self) -> int:
        return sum(s.current_queue for s in self._services)

    def _record_history(self):
        self._history.append(self._total_waiting())
        if len(self._history) > self._history_limit:
            self._history = self._history[-self._history_limit:]

    def _notify(self):
        snapshot = self.get_snapshot()
        for callback in list(self._subscribers):
            callback(snapshot)
