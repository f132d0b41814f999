"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Let the exception handler map domain errors to HTTP responses
- Never contain business logic
"""

from django.conf import settings
from django.http import HttpResponse
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings.domain import AppView, Operation, Role, SigningParty
from bookings.domain.catalog import PROMOTER_CATALOG
from bookings.domain.errors import ContractNotReadyError
from bookings.handlers import serializers as s
from bookings.handlers.permissions import RoleRoutingPermission
from bookings.handlers.session import clear_session, save_session
from bookings.services import (
    BookingService,
    ContractDraftService,
    LedgerService,
    ProfileService,
    SessionService,
)
from bookings.services.contract_pdf import contract_filename, render_contract_pdf
from bookings.services.contract_service import DraftState
from bookings.services.pricing import quote
from bookings.stores import get_store


class GigflowView(APIView):
    permission_classes = [RoleRoutingPermission]
    view_access: dict = {}
    operation_access: dict = {}

    @property
    def store(self):
        return get_store()


# Sessions


class LoginView(APIView):
    """Handler for POST /api/auth/login"""

    permission_classes = []

    def post(self, request: Request) -> Response:
        payload = s.LoginSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        session = SessionService(settings.GIGFLOW_CREDENTIALS).login(
            payload.validated_data["username"], payload.validated_data["password"]
        )
        request.session.cycle_key()
        save_session(request, session)
        return Response(s.SessionSerializer(session).data)


class LogoutView(APIView):
    """Handler for POST /api/auth/logout"""

    permission_classes = []

    def post(self, request: Request) -> Response:
        clear_session(request)
        return Response(status=status.HTTP_204_NO_CONTENT)


class SessionView(GigflowView):
    """Handler for GET /api/session"""

    def get(self, request: Request) -> Response:
        return Response(s.SessionSerializer(request.user_session).data)


class ClientSignatureView(GigflowView):
    """Handler for POST /api/session/signature"""

    view_access = {"POST": AppView.INBOX}
    operation_access = {"POST": Operation.SIGN_AS_CLIENT}

    def post(self, request: Request) -> Response:
        payload = s.SignatureUploadSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        session = SessionService.with_client_signature(
            request.user_session, payload.validated_data["signature"]
        )
        save_session(request, session)
        return Response(s.SessionSerializer(session).data)


# Profile


class ProfileView(GigflowView):
    """Handler for GET/PUT /api/profile"""

    view_access = {"PUT": AppView.PROFILE_EDITOR}
    operation_access = {"PUT": Operation.SAVE_PROFILE}

    def get(self, request: Request) -> Response:
        profile = ProfileService(self.store).public_profile(request.user_session.role)
        return Response(s.ProfileSerializer(profile).data)

    def put(self, request: Request) -> Response:
        payload = s.ProfileSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        profile = ProfileService(self.store).save_profile(payload.to_domain())
        return Response(s.ProfileSerializer(profile).data)


class EnhanceBioView(GigflowView):
    """Handler for POST /api/profile/enhance-bio"""

    view_access = {"POST": AppView.PROFILE_EDITOR}
    operation_access = {"POST": Operation.SAVE_PROFILE}

    def post(self, request: Request) -> Response:
        payload = s.BioSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        bio = ProfileService(self.store).enhance_bio(payload.validated_data["bio"])
        return Response({"bio": bio})


# Bookings


class QuoteView(GigflowView):
    """Handler for POST /api/quotes - price an offer without submitting it"""

    view_access = {"POST": AppView.OFFER_BOOKER}

    def post(self, request: Request) -> Response:
        payload = s.OfferSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        price = quote(self.store.get_profile(), payload.to_domain())
        return Response(s.PriceQuoteSerializer(price).data)


class BookingListView(GigflowView):
    """Handler for GET/POST /api/bookings"""

    view_access = {"GET": AppView.INBOX, "POST": AppView.OFFER_BOOKER}
    operation_access = {"POST": Operation.SUBMIT_OFFER}

    def get(self, request: Request) -> Response:
        inbox = BookingService(self.store).inbox(request.user_session.role)
        return Response(s.InboxSerializer(inbox).data)

    def post(self, request: Request) -> Response:
        payload = s.OfferSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        session = request.user_session
        event_id = session.active_event_id if session.role is Role.PROMOTER else None

        booking = BookingService(self.store).submit_offer(payload.to_domain(), event_id=event_id)
        if event_id is not None:
            save_session(request, SessionService.with_active_event(session, None))
        return Response(s.BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class BookingDetailView(GigflowView):
    """Handler for GET /api/bookings/{booking_id}"""

    view_access = {"GET": AppView.CONTRACT_VIEWER}

    def get(self, request: Request, booking_id: str) -> Response:
        booking = BookingService(self.store).get_booking(booking_id)
        return Response(s.BookingSerializer(booking).data)


class BookingStatusView(GigflowView):
    """Handler for POST /api/bookings/{booking_id}/status"""

    view_access = {"POST": AppView.INBOX}
    operation_access = {"POST": Operation.RESPOND_TO_OFFER}

    def post(self, request: Request, booking_id: str) -> Response:
        payload = s.StatusUpdateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        booking = BookingService(self.store).update_status(
            booking_id, payload.validated_data["status"]
        )
        return Response(s.BookingSerializer(booking).data)


class BookingSignView(GigflowView):
    """Handler for POST /api/bookings/{booking_id}/sign"""

    view_access = {"POST": AppView.CONTRACT_VIEWER}

    def post(self, request: Request, booking_id: str) -> Response:
        session = request.user_session
        if session.role is Role.DJ:
            SessionService.require_operation(session, Operation.SIGN_AS_ARTIST)
            party = SigningParty.ARTIST
        else:
            SessionService.require_operation(session, Operation.SIGN_AS_CLIENT)
            party = SigningParty.CLIENT
        booking = BookingService(self.store).sign(
            booking_id, party, client_signature=session.client_signature
        )
        return Response(s.BookingSerializer(booking).data)


class ContractDraftView(GigflowView):
    """Handler for GET /api/bookings/{booking_id}/contract"""

    view_access = {"GET": AppView.CONTRACT_VIEWER}

    def get(self, request: Request, booking_id: str) -> Response:
        draft = ContractDraftService(self.store).request_draft(booking_id)
        return Response(s.ContractDraftSerializer(draft).data)


class ContractPdfView(GigflowView):
    """Handler for GET /api/bookings/{booking_id}/contract.pdf"""

    view_access = {"GET": AppView.CONTRACT_VIEWER}

    def get(self, request: Request, booking_id: str) -> HttpResponse:
        booking = BookingService(self.store).get_booking(booking_id)
        draft = ContractDraftService(self.store).cached_draft(booking.id)
        if draft is None or draft.state is not DraftState.SUCCEEDED:
            raise ContractNotReadyError()

        profile = self.store.get_profile()
        response = HttpResponse(
            render_contract_pdf(draft.content, booking, profile),
            content_type="application/pdf",
        )
        response["Content-Disposition"] = f'attachment; filename="{contract_filename(profile)}"'
        return response


# Events


class CatalogView(GigflowView):
    """Handler for GET /api/catalog"""

    view_access = {"GET": AppView.EVENT_LEDGER}

    def get(self, request: Request) -> Response:
        items = s.AssetTemplateSerializer(PROMOTER_CATALOG, many=True).data
        return Response([{"catalog_index": i, **item} for i, item in enumerate(items)])


class EventListView(GigflowView):
    """Handler for GET/POST /api/events"""

    view_access = {"GET": AppView.EVENT_LEDGER, "POST": AppView.EVENT_LEDGER}
    operation_access = {"POST": Operation.MANAGE_EVENTS}

    def get(self, request: Request) -> Response:
        events = LedgerService(self.store).list_events()
        return Response(s.EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        payload = s.EventCreateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        event = LedgerService(self.store).create_event(
            data["name"], data["date"], data["budget"], location=data["location"]
        )
        save_session(request, SessionService.with_active_event(request.user_session, event.id))
        return Response(s.EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(GigflowView):
    """Handler for GET /api/events/{event_id}"""

    view_access = {"GET": AppView.EVENT_LEDGER}

    def get(self, request: Request, event_id: str) -> Response:
        event = LedgerService(self.store).get_event(event_id)
        return Response(s.EventSerializer(event).data)


class EventSelectView(GigflowView):
    """Handler for POST /api/events/{event_id}/select

    The selected event receives the ARTIST line item of the promoter's next
    submitted offer.
    """

    view_access = {"POST": AppView.EVENT_LEDGER}
    operation_access = {"POST": Operation.MANAGE_EVENTS}

    def post(self, request: Request, event_id: str) -> Response:
        event = LedgerService(self.store).get_event(event_id)
        session = SessionService.with_active_event(request.user_session, event.id)
        save_session(request, session)
        return Response(s.SessionSerializer(session).data)


class EventAssetListView(GigflowView):
    """Handler for POST /api/events/{event_id}/assets"""

    view_access = {"POST": AppView.EVENT_LEDGER}
    operation_access = {"POST": Operation.MANAGE_EVENTS}

    def post(self, request: Request, event_id: str) -> Response:
        payload = s.CatalogAssetSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        event = LedgerService(self.store).add_catalog_asset(event_id, payload.to_domain())
        return Response(s.EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventAssetDetailView(GigflowView):
    """Handler for DELETE /api/events/{event_id}/assets/{asset_id}"""

    view_access = {"DELETE": AppView.EVENT_LEDGER}
    operation_access = {"DELETE": Operation.MANAGE_EVENTS}

    def delete(self, request: Request, event_id: str, asset_id: str) -> Response:
        event = LedgerService(self.store).remove_asset(event_id, asset_id)
        return Response(s.EventSerializer(event).data)
