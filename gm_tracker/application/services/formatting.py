"""
Display formatting helpers.

Dependencies: none
System role: Currency rendering for reports and the dashboard
"""


def format_currency(value: float | int | None) -> str:
    """
    Format an amount as Indonesian Rupiah without fraction digits.

    Args:
        value: Amount in rupiah

    Returns:
        str: e.g. ``"Rp 150.000.000"``
    """
    amount = round(value or 0)
    grouped = f"{abs(amount):,}".replace(",", ".")
    sign = "-" if amount < 0 else ""
    return f"{sign}Rp {grouped}"
