"""
Synchronous event bus for simulation events.

Events published during a tick are queued and delivered by flush(), once
each, to handlers in registration order. The queue is cleared before
delivery, so an event never reaches a handler twice or leaks into a later
tick.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Type, TypeVar

from domain.position import GridPosition

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class FoodEaten:
    tick: int
    position: GridPosition


@dataclass(frozen=True)
class FoodSpawned:
    tick: int
    position: GridPosition


@dataclass(frozen=True)
class BoardFilled:
    tick: int
    length: int


class EventBus:
    """
    Queue-then-flush event bus.

    Example:
        bus = EventBus()
        bus.subscribe(FoodEaten, handle_food_eaten)
        bus.publish(FoodEaten(tick=3, position=GridPosition(0, 1, 0)))
        bus.flush()
    """

    def __init__(self) -> None:
        self._handlers: Dict[type, List[Callable]] = defaultdict(list)
        self._pending: List[object] = []

    def subscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """Register a handler; handlers run in registration order."""
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> bool:
        """
        Remove a handler for a specific event type.

        Returns:
            True if handler was found and removed, False otherwise
        """
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def publish(self, event: object) -> None:
        """Queue an event for the next flush()."""
        self._pending.append(event)

    def flush(self) -> int:
        """
        Deliver every queued event once, then forget it.

        Events published by a handler while flushing are delivered in the
        same flush, after the ones already queued.

        Returns:
            Number of events delivered
        """
        delivered = 0
        while self._pending:
            event = self._pending.pop(0)
            for handler in list(self._handlers.get(type(event), ())):
                handler(event)
            delivered += 1
            logger.debug("Delivered %s", event)
        return delivered

    def clear(self) -> None:
        """Drop queued events without delivering them."""
        self._pending.clear()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def subscriber_count(self, event_type: type) -> int:
        return len(self._handlers.get(event_type, []))
