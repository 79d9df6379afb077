"""Plain-text layout helpers shared by views and reports."""

LABEL_WIDTH = 50


def dot_leader(label: str, value: object, width: int = LABEL_WIDTH) -> str:
    """Pad ``label`` with dots to ``width`` and append ``value``."""
    return f"{label.ljust(width, '.')}{value}"


def section_rule(width: int) -> str:
    return "*" * width


def format_hours(hours: float) -> str:
    """Format workout hours without a trailing ``.0``."""
    return f"{hours:g}"
