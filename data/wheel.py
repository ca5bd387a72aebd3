import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .constants import DEFAULT_SEGMENTS, DEFAULT_WHEEL_NAME
from .segment import Segment
from .spin_config import SpinConfig

logger = logging.getLogger("spinwheel.data")


class WheelDefinitionError(ValueError):
    pass


@dataclass
class Wheel:
    name: str
    segments: list[Segment]
    spin_config: SpinConfig = field(default_factory=SpinConfig)
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Wheel":
        raw_segments: list[dict[str, str | float]] = data.get("segments") or []
        if not isinstance(raw_segments, list):
            raise WheelDefinitionError("segments must be a list")
        for i, item in enumerate(raw_segments):
            if not isinstance(item, dict):
                raise WheelDefinitionError(
                    f"segment {i} must be an object, got {type(item).__name__}"
                )
        return cls(
            name=str(data.get("name", DEFAULT_WHEEL_NAME)),
            description=str(data.get("description", "")),
            segments=[Segment.from_dict(item, i) for i, item in enumerate(raw_segments)],
            spin_config=SpinConfig.from_dict(data.get("spinConfig") or data.get("spin_config")),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "segments": [s.to_dict() for s in self.segments],
            "spinConfig": self.spin_config.to_dict(),
        }

    def validate(self) -> "Wheel":
        if not self.segments:
            raise WheelDefinitionError(f"wheel {self.name!r} has no segments")
        seen: set[str] = set()
        for s in self.segments:
            if s.id in seen:
                raise WheelDefinitionError(f"duplicate segment id {s.id!r}")
            seen.add(s.id)
            if not s.weight > 0:
                raise WheelDefinitionError(
                    f"segment {s.label!r} has non-positive weight {s.weight}"
                )
        return self


def default_wheel() -> Wheel:
    return Wheel.from_dict({"name": DEFAULT_WHEEL_NAME, "segments": DEFAULT_SEGMENTS})


def load_wheel(path: str | Path) -> Wheel:
    wheel_file: Path = Path(path)
    try:
        raw: str = wheel_file.read_text(encoding="utf-8")
        data: dict = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise WheelDefinitionError(f"{wheel_file} is not valid UTF-8 JSON: {e}") from e
    if not isinstance(data, dict):
        raise WheelDefinitionError(f"{wheel_file} must contain a JSON object")
    try:
        wheel: Wheel = Wheel.from_dict(data)
    except (TypeError, ValueError) as e:
        raise WheelDefinitionError(f"{wheel_file}: {e}") from e
    logger.debug("loaded wheel %r with %d segments", wheel.name, len(wheel.segments))
    return wheel.validate()
