import csv
import io
from datetime import date, datetime
from typing import Any, Iterable, List


def _format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def tasks_to_csv(tasks: Iterable[dict], fields: List[str], delimiter: str = ";") -> str:
    """
    Render tasks as CSV text: a header row with ``fields`` followed by one row per task,
    in the given order. Values containing the delimiter or quotes are quoted.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, delimiter=delimiter, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(fields)
    for task in tasks:
        writer.writerow([_format_value(task.get(field)) for field in fields])
    return buf.getvalue()
