"""
PDF Quote Generator.

Generates a quote document from a computed QuoteResult.
Uses fpdf2 (pure Python, no system dependencies).

Sections:
1. Header + Job Summary
2. Areas (per room)
3. Labour Breakdown
4. Materials
5. Project Total
6. Notes
"""

from datetime import date
from typing import List, Optional

from fpdf import FPDF

from .config import settings
from .schemas import CustomerInfo, QuoteResult, RoomSpec

VALIDITY_DAYS = 30


def generate_job_summary(rooms: List[RoomSpec], result: QuoteResult) -> str:
    """
    Plain-language description of the job, one clause per room.
    Used in the PDF header and the saved quote list.
    """
    if not rooms:
        return "No rooms measured."
    parts = []
    for room, breakdown in zip(rooms, result.rooms):
        areas = []
        if breakdown.floor_area > 0:
            areas.append(f"{breakdown.floor_area:.2f} m² floor")
        if breakdown.wall_area > 0:
            areas.append(f"{breakdown.wall_area:.2f} m² wall")
        clause = room.name or "Room"
        if areas:
            clause += f" ({', '.join(areas)})"
        if room.options:
            kinds = [opt.kind.replace("_", " ") for opt in room.options]
            clause += f" with {', '.join(kinds)}"
        parts.append(clause)
    noun = "room" if len(rooms) == 1 else "rooms"
    return f"{len(rooms)} {noun}: " + "; ".join(parts) + "."


def _fmt(amount) -> str:
    """Format a number as £X,XXX.XX"""
    try:
        return f"£{float(amount):,.2f}"
    except (ValueError, TypeError):
        return "£0.00"


def _units(line) -> str:
    if line.units is None:
        return "-"
    label = line.unit_label or ""
    if line.units != 1 and label:
        label += "s"
    return f"{line.units} {label}".strip()


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        text
        .replace("•", "-")    # bullet
        .replace("—", " - ")  # em dash
        .replace("–", "-")    # en dash
        .replace("─", "-")    # box drawing horizontal
        .replace("‘", "'")
        .replace("’", "'")
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


class QuotePDF(FPDF):
    """Custom PDF class for quote documents."""

    def __init__(self, company_name="", company_info=""):
        super().__init__()
        self.company_name = company_name
        self.company_info = company_info
        self.set_auto_page_break(auto=True, margin=20)

    def header(self):
        pass  # Headers are drawn once on the first page

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="C")

    def section_header(self, title):
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(45, 55, 72)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, f"  {title}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def table_header(self, cols):
        """cols: [(label, width), ...]"""
        self.set_font("Helvetica", "B", 8)
        self.set_fill_color(240, 240, 240)
        for label, width in cols:
            align = "R" if label in ("Qty", "Units", "Total", "Area", "Rate") else "L"
            self.cell(width, 6, label, border="B", fill=True, align=align)
        self.ln()

    def table_row(self, values, widths):
        self.set_font("Helvetica", "", 8)
        for i, (val, width) in enumerate(zip(values, widths)):
            align = "L" if i == 0 else "R"
            self.cell(width, 5.5, _safe(str(val)), align=align)
        self.ln()

    def subtotal_row(self, label, amount):
        self.set_font("Helvetica", "B", 9)
        self.cell(140, 6, label, align="R", border="T")
        self.cell(50, 6, _fmt(amount), align="R", border="T")
        self.ln(8)


def generate_quote_pdf(
    result: QuoteResult,
    rooms: List[RoomSpec],
    customer: Optional[CustomerInfo] = None,
    quote_date: Optional[date] = None,
) -> bytes:
    """
    Generate a PDF quote document.

    Args:
        result: computed QuoteResult
        rooms: the rooms the result was computed from, for the job summary
        customer: optional customer block
        quote_date: date printed on the quote (today by default)

    Returns:
        PDF bytes
    """
    customer = customer or CustomerInfo()
    quote_date = quote_date or date.today()

    company_info = " | ".join(p for p in [settings.COMPANY_PHONE, settings.COMPANY_EMAIL] if p)
    pdf = QuotePDF(company_name=settings.COMPANY_NAME, company_info=company_info)
    pdf.alias_nb_pages()
    pdf.add_page()
    pw = pdf.w - pdf.l_margin - pdf.r_margin  # printable width

    # ── SECTION 1: Header ──
    pdf.set_font("Helvetica", "B", 20)
    pdf.cell(0, 10, _safe(pdf.company_name), new_x="LMARGIN", new_y="NEXT")
    if company_info:
        pdf.set_font("Helvetica", "", 9)
        pdf.set_text_color(100, 100, 100)
        pdf.cell(0, 5, _safe(company_info), new_x="LMARGIN", new_y="NEXT")
        pdf.set_text_color(0, 0, 0)
    pdf.ln(4)

    pdf.set_font("Helvetica", "B", 14)
    pdf.cell(0, 8, "TILING QUOTE", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 5, f"Date: {quote_date.strftime('%d/%m/%Y')}", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 5, f"Valid for: {VALIDITY_DAYS} days", new_x="LMARGIN", new_y="NEXT")

    if customer.name or customer.address:
        pdf.ln(2)
        if customer.name:
            pdf.cell(0, 5, _safe(f"Prepared for: {customer.name}"), new_x="LMARGIN", new_y="NEXT")
        if customer.address:
            pdf.cell(0, 5, _safe(f"Address: {customer.address}"), new_x="LMARGIN", new_y="NEXT")

    pdf.ln(4)
    pdf.set_font("Helvetica", "", 9)
    pdf.multi_cell(0, 4.5, _safe(generate_job_summary(rooms, result)))
    pdf.ln(6)

    # ── SECTION 2: Areas ──
    pdf.section_header("AREAS")
    area_cols = [("Room", 100), ("Floor m²", 45), ("Wall m²", 45)]
    area_widths = [c[1] for c in area_cols]
    pdf.table_header(area_cols)
    for breakdown in result.rooms:
        pdf.table_row(
            [breakdown.name, f"{breakdown.floor_area:.2f}", f"{breakdown.wall_area:.2f}"],
            area_widths,
        )
    pdf.table_row(["Total", f"{result.floor_area:.2f}", f"{result.wall_area:.2f}"], area_widths)
    pdf.ln(4)

    # ── SECTION 3: Labour ──
    pdf.section_header("LABOUR")
    labour_cols = [("Work", 110), ("Area", 35), ("Total", 45)]
    labour_widths = [c[1] for c in labour_cols]
    pdf.table_header(labour_cols)
    tiling_label = "Tiling (day rate)" if result.labour_mode == "day" else "Tiling"
    pdf.table_row([tiling_label, "-", _fmt(result.tiling_labour)], labour_widths)
    for line in result.install_labour:
        pdf.table_row([line.description, f"{line.area:.2f} m²", _fmt(line.cost)], labour_widths)
    pdf.subtotal_row("Labour Subtotal", result.total_labour_cost)

    # ── SECTION 4: Materials ──
    pdf.section_header("MATERIALS")
    mat_cols = [("Material", 85), ("Qty", 35), ("Units", 35), ("Total", 35)]
    mat_widths = [c[1] for c in mat_cols]
    pdf.table_header(mat_cols)
    for line in result.materials:
        if line.cost <= 0 and not line.units:
            continue
        pdf.table_row(
            [line.description[:45], f"{line.quantity:.2f} {line.unit}", _units(line), _fmt(line.cost)],
            mat_widths,
        )
    pdf.subtotal_row("Materials Subtotal", result.materials_total)

    # ── SECTION 5: Project Total ──
    pdf.section_header("PROJECT TOTAL")
    pdf.set_font("Helvetica", "", 10)
    totals = [
        ("Subtotal", result.sub_total),
        (f"Margin ({result.margin_percent:g}%)", result.margin_amount),
    ]
    if result.vat_enabled:
        totals.append((f"VAT ({result.vat_rate:g}%)", result.vat_amount))
    for label, amount in totals:
        pdf.cell(130, 6, label)
        pdf.cell(60, 6, _fmt(amount), align="R")
        pdf.ln()

    pdf.ln(1)
    pdf.set_fill_color(45, 55, 72)
    pdf.set_text_color(255, 255, 255)
    pdf.set_font("Helvetica", "B", 13)
    pdf.cell(130, 10, "  QUOTE TOTAL", fill=True)
    pdf.cell(60, 10, f"{_fmt(result.grand_total)}  ", fill=True, align="R")
    pdf.set_text_color(0, 0, 0)
    pdf.ln(14)

    # ── SECTION 6: Notes ──
    if result.notes:
        pdf.section_header("NOTES")
        pdf.set_font("Helvetica", "", 8)
        for note in result.notes:
            pdf.set_x(pdf.l_margin)
            pdf.multi_cell(pw, 4.5, _safe(f"  - {note}"), new_x="LMARGIN", new_y="NEXT")
        pdf.ln(3)

    if result.ufh_thermostat_count:
        pdf.set_font("Helvetica", "I", 8)
        pdf.set_x(pdf.l_margin)
        pdf.cell(pw, 4, "Underfloor heating must be connected by a qualified electrician.",
                 new_x="LMARGIN", new_y="NEXT")

    pdf.set_font("Helvetica", "I", 8)
    pdf.set_text_color(100, 100, 100)
    pdf.set_x(pdf.l_margin)
    pdf.cell(pw, 4, f"This quote is valid for {VALIDITY_DAYS} days from the date above.",
             new_x="LMARGIN", new_y="NEXT")
    pdf.set_text_color(0, 0, 0)

    return bytes(pdf.output())
