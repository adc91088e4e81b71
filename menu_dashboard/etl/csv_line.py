"""Line-level CSV helpers for the hand-exported extract files.

Rows never span lines in these exports, so input is split on ``\\n`` first and
each line is tokenized on its own.
"""

from typing import List


def split_lines(text: str) -> List[str]:
    """Split raw CSV text into lines, dropping blank ones."""
    return [line for line in text.split("\n") if line.strip()]


def parse_csv_line(line: str) -> List[str]:
    """Split one CSV line into fields, honouring double-quote escaping.

    Commas inside quotes are literal and ``""`` inside quotes is an escaped quote.
    An unterminated quote swallows the rest of the line instead of failing.
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    length = len(line)

    while i < length:
        char = line[i]
        if in_quotes:
            if char == '"':
                if i + 1 < length and line[i + 1] == '"':
                    current.append('"')
                    i += 1
                else:
                    in_quotes = False
            else:
                current.append(char)
        elif char == '"':
            in_quotes = True
        elif char == ",":
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current))
    return fields
