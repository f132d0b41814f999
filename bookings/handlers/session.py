"""Per-user session state kept in the Django session."""

from bookings.domain import EventId, Role, SignatureImage, UserSession

SESSION_KEY = "gigflow"


def load_session(request) -> UserSession | None:
    data = request.session.get(SESSION_KEY)
    if not data:
        return None
    signature = data.get("client_signature")
    event_id = data.get("active_event_id")
    return UserSession(
        role=Role(data["role"]),
        username=data["username"],
        client_signature=SignatureImage(signature) if signature else None,
        active_event_id=EventId.from_string(event_id) if event_id else None,
    )


def save_session(request, session: UserSession) -> None:
    request.session[SESSION_KEY] = {
        "role": session.role.value,
        "username": session.username,
        "client_signature": session.client_signature.data_url if session.client_signature else None,
        "active_event_id": str(session.active_event_id) if session.active_event_id else None,
    }


def clear_session(request) -> None:
    request.session.flush()
