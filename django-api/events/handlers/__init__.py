from events.handlers.views import (
    EventDetailView,
    EventListView,
    ReserveSpotView,
    SpotListView,
)

__all__ = ["EventDetailView", "EventListView", "ReserveSpotView", "SpotListView"]
