"""Stock detection and transition rules."""
from __future__ import annotations

from typing import Optional


def is_in_stock(page_text: Optional[str], indicator: str) -> bool:
    """Return True when the page was fetched and the indicator is absent.

    A missing page counts as out of stock.
    """
    if page_text is None:
        return False
    return indicator not in page_text


def should_notify(previous: bool, current: bool) -> bool:
    """Only a rising edge (out of stock -> in stock) notifies."""
    return current and not previous
