# core/formatters.py

# all pure text helpers
# must never import from models!


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_table_row(cells: list[str], widths: list[int]) -> str:
    padded = [f"{cell:<{width}}" for cell, width in zip(cells, widths)]

    return " | ".join(padded).rstrip()


def format_table_divider(widths: list[int]) -> str:
    return "-+-".join("-" * width for width in widths)


def truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text

    return text[: width - 3] + "..."
