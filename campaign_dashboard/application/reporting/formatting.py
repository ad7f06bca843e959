"""Number formatting helpers for text output."""

from __future__ import annotations


def _group_thousands(text: str) -> str:
    # "1,234.56" -> "1.234,56"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def fmt_money(value: float | None, symbol: str = "R$") -> str:
    if value is None:
        return f"{symbol} 0,00"
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol} {_group_thousands(f'{abs(value):,.2f}')}"


def fmt_number(value: float | None) -> str:
    if value is None:
        return "0"
    if float(value).is_integer():
        return _group_thousands(f"{int(value):,}")
    return _group_thousands(f"{value:,.2f}")


def fmt_pct(value: float | None) -> str:
    if value is None:
        return "N/A"
    return f"{_group_thousands(f'{value:.2f}')}%"
