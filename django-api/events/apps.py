from typing import TYPE_CHECKING

from django.apps import AppConfig
from django.conf import settings

if TYPE_CHECKING:
    from events.stores.interfaces import EventStore


class EventsConfig(AppConfig):
    """Loads the dataset once at startup.

    A DatasetLoadError raised here aborts startup.
    """

    name = "events"
    store: "EventStore"

    def ready(self) -> None:
        from events.stores.loader import load_store

        self.store = load_store(settings.EVENTS_DATA_FILE)
