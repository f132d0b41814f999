from django.urls import path

from bookings.handlers import (
    BookingDetailView,
    BookingListView,
    BookingSignView,
    BookingStatusView,
    CatalogView,
    ClientSignatureView,
    ContractDraftView,
    ContractPdfView,
    EnhanceBioView,
    EventAssetDetailView,
    EventAssetListView,
    EventDetailView,
    EventListView,
    EventSelectView,
    LoginView,
    LogoutView,
    ProfileView,
    QuoteView,
    SessionView,
)

urlpatterns = [
    path("auth/login", LoginView.as_view(), name="login"),
    path("auth/logout", LogoutView.as_view(), name="logout"),
    path("session", SessionView.as_view(), name="session"),
    path("session/signature", ClientSignatureView.as_view(), name="session-signature"),
    path("profile", ProfileView.as_view(), name="profile"),
    path("profile/enhance-bio", EnhanceBioView.as_view(), name="profile-enhance-bio"),
    path("quotes", QuoteView.as_view(), name="quote"),
    path("bookings", BookingListView.as_view(), name="booking-list"),
    path("bookings/<str:booking_id>", BookingDetailView.as_view(), name="booking-detail"),
    path(
        "bookings/<str:booking_id>/status",
        BookingStatusView.as_view(),
        name="booking-status",
    ),
    path("bookings/<str:booking_id>/sign", BookingSignView.as_view(), name="booking-sign"),
    path(
        "bookings/<str:booking_id>/contract",
        ContractDraftView.as_view(),
        name="booking-contract",
    ),
    path(
        "bookings/<str:booking_id>/contract.pdf",
        ContractPdfView.as_view(),
        name="booking-contract-pdf",
    ),
    path("catalog", CatalogView.as_view(), name="catalog"),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:event_id>/select", EventSelectView.as_view(), name="event-select"),
    path("events/<str:event_id>/assets", EventAssetListView.as_view(), name="event-assets"),
    path(
        "events/<str:event_id>/assets/<str:asset_id>",
        EventAssetDetailView.as_view(),
        name="event-asset-detail",
    ),
]
