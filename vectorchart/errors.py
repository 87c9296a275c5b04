from __future__ import annotations


class ChartDataError(ValueError):
    """Raised when a dataset cannot be laid out under strict value parsing."""
