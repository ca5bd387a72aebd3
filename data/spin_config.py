from dataclasses import dataclass, field
from enum import Enum

from .constants import DEFAULT_DURATION_MS, DEFAULT_MAX_TURNS, DEFAULT_MIN_TURNS


class SpinConfigError(ValueError):
    pass


class Easing(str, Enum):
    LINEAR = "linear"
    EASE_OUT_QUAD = "easeOutQuad"
    EASE_OUT_CUBIC = "easeOutCubic"
    EASE_OUT_QUART = "easeOutQuart"
    EASE_OUT_EXPO = "easeOutExpo"
    EASE_OUT_BACK = "easeOutBack"
    EASE_OUT_ELASTIC = "easeOutElastic"

    @classmethod
    def parse(cls, value: "str | Easing | None") -> "Easing":
        if isinstance(value, Easing):
            return value
        for e in cls:
            if value in (e.value, e.name, e.name.lower()):
                return e
        # stored wheels with an unknown name spin with the default curve
        return cls.EASE_OUT_CUBIC


@dataclass(frozen=True)
class SpinConfig:
    duration_ms: int = DEFAULT_DURATION_MS
    min_turns: float = DEFAULT_MIN_TURNS
    max_turns: float = DEFAULT_MAX_TURNS
    easing: Easing = field(default=Easing.EASE_OUT_CUBIC)

    def __post_init__(self) -> None:
        if isinstance(self.duration_ms, bool) or not isinstance(self.duration_ms, int):
            raise SpinConfigError(f"duration_ms must be an integer, got {self.duration_ms!r}")
        if self.duration_ms <= 0:
            raise SpinConfigError(f"duration_ms must be positive, got {self.duration_ms}")
        if self.min_turns < 0:
            raise SpinConfigError(f"min_turns must be non-negative, got {self.min_turns}")
        if self.max_turns < self.min_turns:
            raise SpinConfigError(
                f"max_turns ({self.max_turns}) must not be below min_turns ({self.min_turns})"
            )
        if not isinstance(self.easing, Easing):
            object.__setattr__(self, "easing", Easing.parse(self.easing))

    @classmethod
    def from_dict(cls, data: dict[str, str | float | int] | None) -> "SpinConfig":
        data = data or {}
        duration = data.get("duration_ms", data.get("duration", DEFAULT_DURATION_MS))
        min_turns = data.get("min_turns", data.get("minRotations", DEFAULT_MIN_TURNS))
        max_turns = data.get("max_turns", data.get("maxRotations", DEFAULT_MAX_TURNS))
        return cls(
            duration_ms=int(duration),
            min_turns=float(min_turns),
            max_turns=float(max_turns),
            easing=Easing.parse(data.get("easing")),
        )

    def to_dict(self) -> dict[str, str | float | int]:
        return {
            "duration": self.duration_ms,
            "minRotations": self.min_turns,
            "maxRotations": self.max_turns,
            "easing": self.easing.value,
        }
