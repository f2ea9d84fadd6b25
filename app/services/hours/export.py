"""
CSV export of a compute result.
One row per post plus a trailing TOTAL row, semicolon separated.
"""

import csv
import io
from datetime import date
from typing import Optional

from .engine import round_half_up
from .types import ComputeResult, HourBuckets, FTE


HEADERS = [
    "Poste",
    "Jour Sem.",
    "Nuit Sem.",
    "Jour Dim.",
    "Nuit Dim.",
    "Jour Fér.",
    "Nuit Fér.",
    "Total",
    "ETP période",
    "ETP annualisé",
]

TOTAL_LABEL = "TOTAL"


def format_number(value: float) -> str:
    # shortest form, like a JS number: 40.0 -> "40", 2.5 -> "2.5"
    return str(int(value)) if value == int(value) else repr(value)


def _row(name: str, hours: HourBuckets, fte: Optional[FTE] = None) -> list[str]:
    cells = [name]
    cells += [format_number(round_half_up(getattr(hours, f), 2)) for f in HourBuckets.FIELDS]
    cells.append(format_number(fte.period_fte) if fte else "")
    cells.append(format_number(fte.annualized_fte) if fte else "")
    return cells


def export_csv(result: ComputeResult, start_date: date, end_date: date) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=";", lineterminator="\n")

    writer.writerow(["Période", str(start_date), "au", str(end_date)])
    writer.writerow([])
    writer.writerow(HEADERS)
    for post in result.posts:
        writer.writerow(_row(post.post_name, post.hours, post.fte))
    writer.writerow(_row(TOTAL_LABEL, result.totals))

    return buffer.getvalue().rstrip("\n")


def export_filename(start_date: date, end_date: date) -> str:
    return f"heures_{start_date}_{end_date}.csv"
