# checklist/stats.py
"""
Answer statistics for the results overview.

Only the exact literals "Yes", "No" and "N/A" are counted. Any other value
(empty, lower-case, free text) is left out of every counter and therefore out
of the total as well.
"""

from checklist.models import NA, NO, YES, Stats

_COUNTED = {YES: "yes", NO: "no", NA: "na"}


def compute_stats(answers) -> Stats:
    counts = {"yes": 0, "no": 0, "na": 0}
    for a in answers or ():
        field = _COUNTED.get(a.answer)
        if field:
            counts[field] += 1
    return Stats(**counts)


def percentage(count: int, total: int) -> int:
    if not total:
        return 0
    # Math.round semantics: halves go up, not to even
    return int(count / total * 100 + 0.5)


def percentages(stats: Stats) -> dict:
    """Per-category display percentages, each rounded on its own."""
    total = stats.total
    return {
        "yes": percentage(stats.yes, total),
        "no":  percentage(stats.no, total),
        "na":  percentage(stats.na, total),
    }
