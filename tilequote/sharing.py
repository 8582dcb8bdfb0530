"""
Sharing transports — WhatsApp deep links and mailto: links for a quote message.
"""

import re
import urllib.parse
from typing import Optional

from .config import settings
from .schemas import CustomerInfo

# Characters encodeURIComponent leaves alone (besides alphanumerics and -_.~)
_URI_SAFE = "!*'()"


def _encode(text: str) -> str:
    return urllib.parse.quote(text, safe=_URI_SAFE)


def normalize_phone(raw: Optional[str], country_code: Optional[str] = None) -> str:
    """
    Normalize a phone number for wa.me links.

    Strips everything except digits and '+'. A leading 0 is replaced with the
    country code, a bare national number gets the country code prepended, and
    numbers already starting with '+' are left alone.
    """
    country_code = country_code or settings.COUNTRY_CODE
    phone = re.sub(r"[^0-9+]", "", raw or "")
    if phone.startswith("0"):
        return country_code + phone[1:]
    if phone and not phone.startswith("+"):
        return country_code + phone
    return phone


def whatsapp_link(message: str, phone: Optional[str] = None,
                  country_code: Optional[str] = None) -> str:
    normalized = normalize_phone(phone, country_code)
    base = f"https://wa.me/{normalized}" if normalized else "https://wa.me/"
    return f"{base}?text={_encode(message)}"


def email_subject(customer: Optional[CustomerInfo]) -> str:
    if customer and customer.name:
        return f"Tiling Quote for {customer.name}"
    return "Tiling Quote"


def email_link(message: str, customer: Optional[CustomerInfo] = None) -> str:
    to = customer.email if customer else ""
    subject = _encode(email_subject(customer))
    return f"mailto:{to}?subject={subject}&body={_encode(message)}"
