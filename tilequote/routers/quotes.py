"""
Quote calculation endpoints — stateless, nothing is stored.

POST /api/quotes/areas      — floor/wall totals
POST /api/quotes/calculate  — full QuoteResult
POST /api/quotes/message    — shareable text + WhatsApp/email links
POST /api/quotes/pdf        — PDF quote document
"""

import logging

from fastapi import APIRouter
from fastapi.responses import Response

from .. import schemas
from ..areas import compute_areas
from ..message import format_quote_message
from ..pdf_generator import generate_quote_pdf
from ..pricing_engine import compute_quote
from ..sharing import email_link, whatsapp_link

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quotes", tags=["quotes"])


@router.post("/areas", response_model=schemas.AreaTotals)
def calculate_areas(request: schemas.AreasRequest):
    return compute_areas(request.rooms)


@router.post("/calculate", response_model=schemas.QuoteResult)
def calculate_quote(request: schemas.QuoteRequest):
    return compute_quote(request.rooms, request.rates, request.grout)


@router.post("/message", response_model=schemas.MessageResponse)
def quote_message(request: schemas.MessageRequest):
    result = compute_quote(request.rooms, request.rates, request.grout)
    message = format_quote_message(result, request.customer, request.quote_date)
    return schemas.MessageResponse(
        message=message,
        whatsapp_url=whatsapp_link(message, request.customer.phone),
        email_url=email_link(message, request.customer),
    )


@router.post("/pdf")
def quote_pdf(request: schemas.MessageRequest):
    result = compute_quote(request.rooms, request.rates, request.grout)
    pdf_bytes = generate_quote_pdf(result, request.rooms, request.customer, request.quote_date)
    name = request.customer.name.strip().replace(" ", "-") or "Tiling"
    filename = f"Quote-{name}.pdf"
    logger.info("Generated PDF quote %s (%d bytes)", filename, len(pdf_bytes))
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
    )
