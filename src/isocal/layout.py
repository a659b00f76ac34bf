from rich.text import Text

from .shared import MONTHS_PER_ROW, SEPARATOR


def chunked(items, size=MONTHS_PER_ROW):
    items = list(items)
    return [items[i : i + size] for i in range(0, len(items), size)]


def _as_text(line):
    return line if isinstance(line, Text) else Text(line)


def compose_chunk(blocks):
    composed = []
    for row in zip(*blocks):
        row = [_as_text(line) for line in row]
        # a row that is filler in every block is dropped entirely
        if not any(line.plain.strip() for line in row):
            continue
        composed.append(Text(SEPARATOR).join(row))
    return composed


def compose(blocks, per_row=MONTHS_PER_ROW):
    lines = []
    for index, chunk in enumerate(chunked(blocks, per_row)):
        if index:
            lines.append(Text())
        lines.extend(compose_chunk(chunk))
    return lines
