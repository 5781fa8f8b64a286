from __future__ import annotations

from wordsmith.models import COMPARISON_NOTICE, ComparisonRecord


DETAILS_SEPARATOR = "---DETAILS---"


def parse_comparison(text: str) -> ComparisonRecord:
    """Split a comparison response into its one-line summary and markdown body.

    Without the separator nothing is dropped: the whole response becomes the
    details and the summary says so.
    """

    raw = text or ""
    summary, separator, details = raw.partition(DETAILS_SEPARATOR)
    if not separator:
        return ComparisonRecord(summary=COMPARISON_NOTICE, details=raw.strip())
    return ComparisonRecord(summary=summary.strip(), details=details.strip())
