from events.stores.interfaces import EventStore
from events.stores.loader import load_store
from events.stores.memory_store import InMemoryEventStore

__all__ = ["EventStore", "InMemoryEventStore", "load_store"]
