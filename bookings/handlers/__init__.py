from bookings.handlers.views import (
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

__all__ = [
    "BookingDetailView",
    "BookingListView",
    "BookingSignView",
    "BookingStatusView",
    "CatalogView",
    "ClientSignatureView",
    "ContractDraftView",
    "ContractPdfView",
    "EnhanceBioView",
    "EventAssetDetailView",
    "EventAssetListView",
    "EventDetailView",
    "EventListView",
    "EventSelectView",
    "LoginView",
    "LogoutView",
    "ProfileView",
    "QuoteView",
    "SessionView",
]
