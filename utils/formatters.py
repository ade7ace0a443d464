"""Text formatting helpers."""

from typing import List


def format_mentions(user_ids: List[str], separator: str = ", ") -> str:
    """Format a list of user ids as Discord mentions."""
    return separator.join(f"<@{user_id}>" for user_id in user_ids)


def format_count(count: int, singular: str, plural: str = None) -> str:
    """Format a count with the right noun, e.g. ``1 kill`` or ``3 kills``."""
    noun = singular if count == 1 else (plural or f"{singular}s")
    return f"{count} {noun}"


def truncate_text(text: str, max_length: int = 50, suffix: str = "...") -> str:
    """Truncate text to max length."""
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix


def chunk_lines(lines: List[str], max_length: int = 1024) -> List[str]:
    """
    Join lines into newline separated chunks no longer than max_length.

    A single line longer than max_length is truncated to fit.
    """
    chunks = []
    current = ""
    for line in lines:
        line = truncate_text(line, max_length)
        if current and len(current) + 1 + len(line) > max_length:
            chunks.append(current)
            current = line
        else:
            current = f"{current}\n{line}" if current else line
    if current:
        chunks.append(current)
    return chunks
