"""Line and field splitting for DRF text charts.

Chart lines look like ``"S","1","000006217149TB","Langburg",...``: every
field is double-quoted and fields are separated by commas. Comments such
as trip notes may contain commas inside the quotes.
"""

from typing import Iterator

_BOM = "\ufeff"


def split_lines(content: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for every non-blank line.

    Line numbers are 1-based and count blank lines, so they match what an
    editor shows. Carriage returns and trailing whitespace are dropped.
    """
    if content.startswith(_BOM):
        content = content[len(_BOM):]

    for index, raw in enumerate(content.split("\n"), start=1):
        line = raw.rstrip("\r").rstrip()
        if line.strip():
            yield index, line


def split_quoted_fields(line: str) -> list[str]:
    """Split one chart line into unquoted, trimmed field values.

    A comma only separates fields outside quotes. Quote characters toggle
    the in-quotes state and are dropped; ``""`` inside a quoted field is a
    literal quote. Unbalanced quoting still produces a best-effort list.
    """
    if not line:
        return []

    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    length = len(line)

    while i < length:
        char = line[i]

        if char == '"':
            if in_quotes and i + 1 < length and line[i + 1] == '"':
                current.append('"')
                i += 2
                continue
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current).strip())
    return fields
