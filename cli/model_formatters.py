# cli/model_formatters.py

# anything that renders registry records for the terminal
from textwrap import dedent

import core.formatters as formatters
from models.student import StudentRecord

TABLE_HEADERS = ["#", "Name", "Student ID", "Email", "Contact"]
TABLE_WIDTHS = [4, 24, 12, 28, 14]


# === student formatters ===


def format_student_oneline(record: StudentRecord) -> str:
    return f"{record.name:<20} | {record.student_id:<10} | {record.email}"


def format_student_multiline(record: StudentRecord) -> str:
    return dedent(
        f"""\
        Student:
        ... Name: {record.name}
        ... Student ID: {record.student_id}
        ... Email: {record.email}
        ... Contact: {record.contact}"""
    )


def format_student_row(
    index: int, record: StudentRecord, is_editing: bool = False
) -> str:
    marker = "*" if is_editing else ""
    cells = [
        f"{index + 1}{marker}",
        formatters.truncate(record.name, TABLE_WIDTHS[1]),
        formatters.truncate(record.student_id, TABLE_WIDTHS[2]),
        formatters.truncate(record.email, TABLE_WIDTHS[3]),
        formatters.truncate(record.contact, TABLE_WIDTHS[4]),
    ]

    return formatters.format_table_row(cells, TABLE_WIDTHS)


def format_student_table(
    records: list[StudentRecord], editing_index: int | None = None
) -> str:
    lines = [
        formatters.format_table_row(TABLE_HEADERS, TABLE_WIDTHS),
        formatters.format_table_divider(TABLE_WIDTHS),
    ]
    lines.extend(
        format_student_row(i, record, i == editing_index)
        for i, record in enumerate(records)
    )

    if editing_index is not None:
        lines.append("\n(* currently being edited)")

    return "\n".join(lines)
