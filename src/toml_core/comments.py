"""Comment stripping front end.

Removes ``#`` line comments before the grammar runs while keeping the line
structure intact: the end-of-line marker of a commented line survives and
every character before the ``#`` keeps its column, so grammar errors still
point at the original text.

A ``#`` is literal (not a comment) when it appears

- inside a double-quoted string,
- inside a key-group header such as ``[the.hard.bit#]``. A header is a
  ``[`` that is the first non-blank character of a line while no array
  bracket is open, or
- inside a key such as ``key#``. A key is the run of characters other than
  blanks and ``=`` that starts a line outside any array; it cannot start
  with ``#`` or ``[``.

Array brackets are only counted on the value side of ``=`` (or while an
array is already open), so a ``[`` inside a key never opens an array.
"""

from __future__ import annotations


_EOL = "\r\n"
_BLANK = " \t"


def strip_comments(text: str) -> str:
    """Return *text* with every ``#`` comment removed.

    Idempotent: ``strip_comments(strip_comments(s)) == strip_comments(s)``.
    """
    out: list[str] = []
    depth = 0             # open array brackets
    line_start = True     # only blanks seen so far on this line
    assigned = False      # '=' seen on this line
    in_key = False
    in_string = False
    escaped = False
    in_header = False
    in_comment = False

    for ch in text:
        if ch in _EOL:
            # Keys, strings and headers never span lines
            in_key = in_string = escaped = in_header = in_comment = False
            assigned = False
            line_start = True
            out.append(ch)
            continue

        if in_comment:
            continue

        if in_key:
            if ch in _BLANK or ch == "=":
                in_key = False
            else:
                out.append(ch)
                continue

        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            out.append(ch)
            continue

        if in_header:
            if ch == "]":
                in_header = False
            out.append(ch)
            continue

        if ch == "#":
            in_comment = True
            continue

        if ch in _BLANK:
            out.append(ch)
            continue

        if line_start and depth == 0 and ch == "[":
            in_header = True
        elif line_start and depth == 0 and ch != "=":
            in_key = True
        elif ch == "=":
            assigned = True
        elif ch == '"':
            in_string = True
        elif ch == "[" and (assigned or depth):
            depth += 1
        elif ch == "]" and depth:
            depth -= 1
        line_start = False
        out.append(ch)

    return "".join(out)
