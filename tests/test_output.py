"""
Customer-facing output tests — quote message, share links, PDF, speech input, room list.

Tests:
1-4.   Quote message layout
5-9.   Phone normalization + WhatsApp/email links
10-13. PDF generation + job summary
14-19. Spoken value parsing
20-23. Room list helpers
"""

from datetime import date

import pytest

from tilequote.message import RULE, format_quote_message
from tilequote.pdf_generator import generate_job_summary, generate_quote_pdf
from tilequote.pricing_engine import compute_quote
from tilequote.rooms import add_room, new_room, remove_room
from tilequote.schemas import CustomerInfo, RateSheet, RoomSpec
from tilequote.sharing import email_link, normalize_phone, whatsapp_link
from tilequote.speech import parse_spoken_value


def _sample_room(**overrides):
    data = {
        "name": "Kitchen",
        "floor_areas": [{"length": 4, "width": 3}],
        "tile_size_preset": "600×600",
    }
    data.update(overrides)
    return RoomSpec(**data)


def _sample_customer():
    return CustomerInfo(name="Jane Smith", address="1 High St", email="jane@example.com",
                        phone="07700 900123")


# ============================================================
# Quote message
# ============================================================

def test_message_layout():
    result = compute_quote([_sample_room()])
    message = format_quote_message(result, _sample_customer(), date(2026, 3, 5))
    assert message.split("\n") == [
        "TILING QUOTE — 05/03/2026",
        RULE,
        "Customer: Jane Smith",
        "Address: 1 High St",
        "",
        "Floor area: 12.00 m²",
        "",
        "Labour: £540.00",
        "Materials: £172.20",
        RULE,
        "TOTAL: £712.20",
        "",
        "This quote is valid for 30 days.",
    ]


def test_message_vat_line():
    result = compute_quote([_sample_room()], RateSheet(vat_enabled=True, vat_rate=20))
    message = format_quote_message(result, on=date(2026, 3, 5))
    assert "VAT (20%): £142.44" in message
    assert "TOTAL: £854.64" in message


def test_message_without_customer_skips_customer_lines():
    result = compute_quote([_sample_room()])
    message = format_quote_message(result, on=date(2026, 3, 5))
    assert "Customer:" not in message
    assert "Address:" not in message


def test_message_wall_area_line():
    result = compute_quote([_sample_room(walls=[{"length": 2, "height": 2.5}])])
    message = format_quote_message(result, on=date(2026, 3, 5))
    assert "Wall area: 5.00 m²" in message


# ============================================================
# Sharing
# ============================================================

def test_normalize_phone_leading_zero():
    assert normalize_phone("07700 900123", "+44") == "+447700900123"


def test_normalize_phone_international_kept():
    assert normalize_phone("+1 (555) 010-0000", "+44") == "+15550100000"


def test_normalize_phone_bare_national_number():
    assert normalize_phone("7700900123", "+44") == "+447700900123"
    assert normalize_phone("", "+44") == ""


def test_whatsapp_link():
    assert whatsapp_link("Hi there", "07700900123", "+44") == \
        "https://wa.me/+447700900123?text=Hi%20there"
    assert whatsapp_link("Total: £5\nThanks") == \
        "https://wa.me/?text=Total%3A%20%C2%A35%0AThanks"


def test_email_link():
    link = email_link("Hi", _sample_customer())
    assert link == "mailto:jane@example.com?subject=Tiling%20Quote%20for%20Jane%20Smith&body=Hi"
    assert email_link("Hi") == "mailto:?subject=Tiling%20Quote&body=Hi"


# ============================================================
# PDF
# ============================================================

def test_pdf_generates_valid_bytes():
    rooms = [_sample_room(options=[{"kind": "underfloor_heating"}])]
    pdf_bytes = generate_quote_pdf(compute_quote(rooms), rooms, _sample_customer(),
                                   date(2026, 3, 5))
    assert isinstance(pdf_bytes, bytes)
    assert pdf_bytes[:5] == b"%PDF-"


def test_pdf_with_notes_and_empty_job():
    rooms = [_sample_room(tile_size_preset="100×100", options=[{"kind": "levelling_clips"}])]
    result = compute_quote(rooms)
    assert result.notes
    assert generate_quote_pdf(result, rooms)[:5] == b"%PDF-"
    assert generate_quote_pdf(compute_quote([]), [])[:5] == b"%PDF-"


def test_job_summary_lists_rooms_and_options():
    rooms = [_sample_room(options=[{"kind": "cement_board"}])]
    summary = generate_job_summary(rooms, compute_quote(rooms))
    assert summary == "1 room: Kitchen (12.00 m² floor) with cement board."


def test_job_summary_empty():
    assert generate_job_summary([], compute_quote([])) == "No rooms measured."


# ============================================================
# Speech
# ============================================================

def test_speech_words_to_decimal():
    assert parse_spoken_value("two point four metres", numeric=True) == "2.4"
    assert parse_spoken_value("zero point five", numeric=True) == "0.5"


def test_speech_digits_with_units():
    assert parse_spoken_value("3.5 m", numeric=True) == "3.5"
    assert parse_spoken_value("2 meters", numeric=True) == "2"


def test_speech_compound_numbers():
    assert parse_spoken_value("twenty five", numeric=True) == "25"
    assert parse_spoken_value("one hundred and twenty", numeric=True) == "120"
    assert parse_spoken_value("ten point two five", numeric=True) == "10.25"


def test_speech_unparseable_is_none():
    assert parse_spoken_value("hello", numeric=True) is None
    assert parse_spoken_value(None, numeric=True) is None


def test_speech_text_field_trimmed():
    assert parse_spoken_value("  Jane Smith ", numeric=False) == "Jane Smith"


def test_speech_is_case_insensitive():
    assert parse_spoken_value("Four Point Five", numeric=True) == "4.5"


# ============================================================
# Room list
# ============================================================

def test_new_room_defaults():
    room = new_room([])
    assert room.name == "Room 1"
    assert room.tile_type == "floor"
    assert room.room_height == 2.4
    assert [t.proportion for t in room.modular_tiles] == [25, 50, 25]


def test_add_room_names_by_position():
    rooms = add_room(add_room([]))
    assert [r.name for r in rooms] == ["Room 1", "Room 2"]


def test_remove_room_renumbers_automatic_names():
    rooms = [RoomSpec(name="Room 1"), RoomSpec(name="Kitchen"), RoomSpec(name="Room 3")]
    remaining = remove_room(rooms, 0)
    assert [r.name for r in remaining] == ["Kitchen", "Room 2"]
    assert [r.name for r in rooms] == ["Room 1", "Kitchen", "Room 3"]


def test_remove_room_out_of_range():
    rooms = [RoomSpec(name="Room 1")]
    assert [r.name for r in remove_room(rooms, 5)] == ["Room 1"]
