"""Formatting helpers for the text tables drawn by pages."""


def get_column_string(text: str, width: int) -> str:
    """Pad ``text`` with spaces to ``width``, or cut it short with an ellipsis."""
    length = len(text)
    if length <= width:
        return text.ljust(width)
    if width <= 3:
        return "." * width
    return text[: width - 3] + "..."