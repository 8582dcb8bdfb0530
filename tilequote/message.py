"""
Plain-text quote message for WhatsApp/email.

Customer-facing: the margin is folded into the materials line, so the
lines shown always add up to the total.
"""

from datetime import date
from typing import Optional

from .schemas import CustomerInfo, QuoteResult

RULE = "─" * 28
VALIDITY_DAYS = 30


def _money(amount: float) -> str:
    return f"£{amount:.2f}"


def _rate(value: float) -> str:
    """VAT rate as typed: 20 not 20.0, 17.5 stays 17.5."""
    return f"{value:g}"


def format_quote_message(result: QuoteResult, customer: Optional[CustomerInfo] = None,
                         on: Optional[date] = None) -> str:
    customer = customer or CustomerInfo()
    on = on or date.today()

    lines = [f"TILING QUOTE — {on.strftime('%d/%m/%Y')}", RULE]
    if customer.name:
        lines.append(f"Customer: {customer.name}")
    if customer.address:
        lines.append(f"Address: {customer.address}")
    lines.append("")

    if result.floor_area > 0:
        lines.append(f"Floor area: {result.floor_area:.2f} m²")
    if result.wall_area > 0:
        lines.append(f"Wall area: {result.wall_area:.2f} m²")
    lines.append("")

    lines.append(f"Labour: {_money(result.total_labour_cost)}")
    lines.append(f"Materials: {_money(result.materials_total + result.margin_amount)}")
    if result.vat_enabled:
        lines.append(f"VAT ({_rate(result.vat_rate)}%): {_money(result.vat_amount)}")
    lines.append(RULE)
    lines.append(f"TOTAL: {_money(result.grand_total)}")
    lines.append("")
    lines.append(f"This quote is valid for {VALIDITY_DAYS} days.")
    return "\n".join(lines)
