from dataclasses import dataclass

from .segment import Segment


@dataclass(frozen=True)
class SpinResult:
    segment: Segment
    final_angle: float  # normalized, [0, 2pi)
    duration_ms: int

    def to_dict(self) -> dict[str, str | float | int]:
        return {
            "segmentId": self.segment.id,
            "label": self.segment.label,
            "angle": self.final_angle,
            "duration": self.duration_ms,
        }
