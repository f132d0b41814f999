from rest_framework.permissions import BasePermission

from bookings.domain.errors import NotLoggedInError
from bookings.handlers.session import load_session
from bookings.services.session_service import SessionService


class RoleRoutingPermission(BasePermission):
    """Gate a view by the session role.

    Every gated view needs a logged-in session. Views declare ``view_access``
    and ``operation_access`` as mappings of HTTP method to the AppView or
    Operation the method needs. Failures raise domain errors, which the
    exception handler turns into responses.
    """

    def has_permission(self, request, view):
        session = load_session(request)
        if session is None:
            raise NotLoggedInError()
        required_view = getattr(view, "view_access", {}).get(request.method)
        if required_view is not None:
            session = SessionService.require_view(session, required_view)
        operation = getattr(view, "operation_access", {}).get(request.method)
        if operation is not None:
            session = SessionService.require_operation(session, operation)
        request.user_session = session
        return True
