import math


def fmt_degrees(radians: float) -> str:
    return f"{math.degrees(radians) % 360.0:.1f}°"


def fmt_percent(value: float) -> str:
    return f"{value:.1f}%"


def elide_label(label: str, max_chars: int = 14) -> str:
    if len(label) <= max_chars:
        return label
    # keep at least 3 visible characters before the ellipsis
    return label[: max(3, max_chars - 3)] + "..."
