"""Document checks applied between recognition and signing."""

from datetime import datetime

from dateutil.relativedelta import relativedelta

from .models import Document

ACCEPTED_FORMATS = frozenset({"4.0", "3.1"})
FRESHNESS_MONTHS = 1


def check_format(document: Document, accepted: frozenset[str] = ACCEPTED_FORMATS) -> bool:
    """Exact match against the accepted format tags, no normalization."""
    return document.format in accepted


def check_freshness(
    document: Document, now: datetime, months: int = FRESHNESS_MONTHS
) -> bool:
    """Check the document is younger than `months` calendar months.

    Calendar arithmetic: Jan 31 + 1 month is the last day of February.
    """
    return document.created + relativedelta(months=months) > now
