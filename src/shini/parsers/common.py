from __future__ import annotations

# Only ASCII whitespace is trimmed; other Unicode spaces are part of the text.
ASCII_WHITESPACE = " \t\r\n\v\f"

COMMENT_PREFIXES = ("#", ";")


def strip_ascii(text: str) -> str:
    return text.strip(ASCII_WHITESPACE)


def is_comment(line: str) -> bool:
    """
    True for blank lines and lines whose first character is a comment marker.
    Expects an already-stripped line.
    """
    return not line or line.startswith(COMMENT_PREFIXES)


def section_name(line: str) -> str | None:
    """
    Return the raw text between `[` and `]` if the whole line is a header.

    The name is NOT trimmed:
      "[db]"   -> "db"
      "[ db ]" -> " db "
      "[]"     -> None
    """
    if len(line) > 2 and line[0] == "[" and line[-1] == "]":
        return line[1:-1]
    return None
