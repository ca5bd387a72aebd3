import random
from dataclasses import dataclass

from .constants import SEGMENT_ID_CHARS, SEGMENT_ID_PREFIX, default_color


def new_segment_id() -> str:
    return SEGMENT_ID_PREFIX + "".join(random.choices(SEGMENT_ID_CHARS, k=9))


@dataclass(frozen=True)
class Segment:
    id: str
    label: str
    color: str
    weight: float = 1.0

    @classmethod
    def from_dict(cls, item: dict[str, str | float], index: int = 0) -> "Segment":
        weight = item.get("weight")
        return cls(
            id=str(item.get("id") or new_segment_id()),
            label=str(item.get("label", "")),
            color=str(item.get("color") or default_color(index)),
            weight=float(1.0 if weight is None else weight),
        )

    def to_dict(self) -> dict[str, str | float]:
        return {
            "id": self.id,
            "label": self.label,
            "color": self.color,
            "weight": self.weight,
        }
