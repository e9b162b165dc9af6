"""CSV export of scored resumes."""

import csv
import io
from typing import Any


def to_csv(rows: list[dict[str, Any]]) -> str:
    """Render rows as CSV with every cell quoted.

    Column order comes from the first row's keys. None becomes an empty
    cell and list values are joined with "; ". No rows gives "".
    """
    if not rows:
        return ""
    headers = list(rows[0].keys())
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(headers)
    for row in rows:
        writer.writerow([_cell(row.get(h)) for h in headers])
    return buf.getvalue().rstrip("\n")


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return "; ".join(str(v) for v in value)
    return str(value)
