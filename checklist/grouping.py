# checklist/grouping.py
"""
Detailed-results sectioning.

group_by_area() keeps groups in first-seen order and answers in their original
order inside each group. Answers with no area (missing or empty string) land
in the "Other" bucket.
"""

import pandas as pd

from checklist.stats import compute_stats

OTHER_AREA = "Other"


def area_of(answer) -> str:
    return answer.area or OTHER_AREA


def group_by_area(answers) -> dict:
    groups = {}
    for a in answers or ():
        groups.setdefault(area_of(a), []).append(a)
    return groups


def area_table(grouped: dict) -> pd.DataFrame:
    """One row per area with its Yes/No/N/A tally, in section order."""
    rows = []
    for area, area_answers in grouped.items():
        s = compute_stats(area_answers)
        rows.append({"Area": area, "Yes": s.yes, "No": s.no, "N/A": s.na, "Total": s.total})
    return pd.DataFrame(rows, columns=["Area", "Yes", "No", "N/A", "Total"])
