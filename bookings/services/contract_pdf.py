import logging
import re
from io import BytesIO

from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import ImageReader, simpleSplit
from reportlab.pdfgen import canvas

from bookings.domain import Booking, DJProfile, SignatureImage

logger = logging.getLogger(__name__)

MARGIN = 56
LINE_HEIGHT = 17
BODY_FONT = ("Helvetica", 11)
SIGNATURE_RESERVE = 170
SIGNATURE_SIZE = (113, 57)


def clean_markdown(text: str) -> str:
    """Strip bold markers, heading hashes and backticks."""
    text = re.sub(r"\*\*(.*?)\*\*", r"\1", text)
    text = re.sub(r"^#+\s", "", text, flags=re.MULTILINE)
    return text.replace("`", "")


def contract_filename(profile: DJProfile) -> str:
    return f"{re.sub(r'[^a-z0-9]', '_', profile.name, flags=re.IGNORECASE)}_Contract.pdf"


def _wrap(text: str, width: float) -> list[str]:
    lines: list[str] = []
    for paragraph in text.splitlines():
        lines.extend(simpleSplit(paragraph, BODY_FONT[0], BODY_FONT[1], width) or [""])
    return lines


def _draw_signature(
    c: canvas.Canvas, x: float, y: float, label: str, signer: str, image: SignatureImage | None
) -> None:
    c.setFont("Helvetica", 10)
    c.drawString(x, y, label)
    if image is None:
        c.drawString(x, y - 28, "[Not Signed]")
        return
    width, height = SIGNATURE_SIZE
    try:
        c.drawImage(
            ImageReader(BytesIO(image.to_bytes())),
            x,
            y - 14 - height,
            width=width,
            height=height,
            mask="auto",
        )
    except (OSError, ValueError) as exc:
        logger.error("Could not embed signature for %s: %s", signer, exc)
    c.drawString(x, y - 28 - height, f"Signed: {signer}")


def render_contract_pdf(contract_text: str, booking: Booking, profile: DJProfile) -> bytes:
    """Return PDF bytes for a booking's contract.

    The signature block is only drawn once at least one party has signed.
    """
    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=A4)
    page_width, page_height = A4
    max_width = page_width - MARGIN * 2

    c.setFont("Helvetica-Bold", 18)
    c.drawCentredString(page_width / 2, page_height - 57, "Performance Contract")
    c.setFont("Helvetica", 10)
    c.drawCentredString(
        page_width / 2,
        page_height - 79,
        f"Generated via GigFlow on {booking.created_at:%Y-%m-%d}",
    )

    c.setFont(*BODY_FONT)
    y = page_height - 113
    for line in _wrap(clean_markdown(contract_text), max_width):
        if y < SIGNATURE_RESERVE:
            c.showPage()
            c.setFont(*BODY_FONT)
            y = page_height - MARGIN
        c.drawString(MARGIN, y, line)
        y -= LINE_HEIGHT

    if booking.artist_signed or booking.client_signed:
        y = min(y - 57, SIGNATURE_RESERVE)
        if y < MARGIN + SIGNATURE_SIZE[1] + 28:
            c.showPage()
            y = page_height - MARGIN
        artist_image = profile.signature if booking.artist_signed else None
        client_image = booking.client_signature if booking.client_signed else None
        _draw_signature(c, MARGIN, y, "Artist Signature:", profile.name, artist_image)
        _draw_signature(
            c,
            page_width / 2 + MARGIN,
            y,
            "Promoter Signature:",
            booking.offer.promoter_name,
            client_image,
        )

    c.showPage()
    c.save()
    buffer.seek(0)
    return buffer.read()
