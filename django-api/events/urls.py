from django.urls import path

from events.handlers import EventDetailView, EventListView, ReserveSpotView, SpotListView

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:event_id>/spots", SpotListView.as_view(), name="spot-list"),
    path(
        "event/<str:event_id>/reserve",
        ReserveSpotView.as_view(),
        name="spot-reserve",
    ),
]
