PRESENTER_KEY_UP = 16777238
PRESENTER_KEY_DOWN = 16777239

DEFAULT_COLORS: list[str] = [
    "#FF6384",
    "#36A2EB",
    "#FFCE56",
    "#4BC0C0",
    "#9966FF",
    "#FF9F40",
    "#7CFC00",
    "#FF6B6B",
    "#48D1CC",
    "#DDA0DD",
    "#F0E68C",
    "#87CEEB",
]

DEFAULT_SEGMENTS: list[dict[str, str | float]] = [
    {"label": "Option 1", "color": "#FF6384", "weight": 1},
    {"label": "Option 2", "color": "#36A2EB", "weight": 1},
]

DEFAULT_WHEEL_NAME = "My Wheel"

DEFAULT_DURATION_MS = 5000
DEFAULT_MIN_TURNS = 5.0
DEFAULT_MAX_TURNS = 10.0

# fraction of a span kept clear of each edge when choosing a landing point
LANDING_MARGIN = 0.2

HISTORY_LIMIT = 50
RECENT_RESULTS = 5

SEGMENT_ID_PREFIX = "seg_"
SEGMENT_ID_CHARS = "abcdefghijklmnopqrstuvwxyz0123456789"


def default_color(index: int) -> str:
    return DEFAULT_COLORS[index % len(DEFAULT_COLORS)]
