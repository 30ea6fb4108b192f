"""Event repository interface.

Whatever layer calls the ranking engine gets its event snapshots from an
injected EventStore rather than from global state.
"""

from abc import ABC, abstractmethod

from judging.event import Event, EventRanking, rank_event
from judging.methods import DEFAULT_METHOD, RankingMethod


class EventNotFoundError(KeyError):
    """Raised when an event id is not in the store."""
    pass


class EventStore(ABC):
    """Abstract key-value store of event snapshots, keyed by event id."""

    @abstractmethod
    def get(self, event_id: str) -> Event:
        """Return the event snapshot with the given id.

        Raises:
            EventNotFoundError: If there is no such event
        """
        pass

    @abstractmethod
    def save(self, event: Event) -> None:
        """Store an event snapshot, replacing any with the same id."""
        pass

    @abstractmethod
    def delete(self, event_id: str) -> None:
        """Remove an event.

        Raises:
            EventNotFoundError: If there is no such event
        """
        pass

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all stored events, in the order they were first saved."""
        pass


class InMemoryEventStore(EventStore):
    """EventStore backed by a dict. Snapshots are immutable, so no copying is needed."""

    def __init__(self, events: list[Event] | None = None):
        self._events: dict[str, Event] = {}
        for event in events or []:
            self.save(event)

    def get(self, event_id: str) -> Event:
        try:
            return self._events[event_id]
        except KeyError:
            raise EventNotFoundError(event_id) from None

    def save(self, event: Event) -> None:
        self._events[event.id] = event

    def delete(self, event_id: str) -> None:
        if event_id not in self._events:
            raise EventNotFoundError(event_id)
        del self._events[event_id]

    def list_events(self) -> list[Event]:
        return list(self._events.values())


def rank_stored_event(
    store: EventStore, event_id: str, method: str | RankingMethod = DEFAULT_METHOD
) -> EventRanking:
    """Fetch an event snapshot from the store and rank it."""
    return rank_event(store.get(event_id), method)
