import logging
from pathlib import Path

from PySide6.QtCore import QUrl
from PySide6.QtMultimedia import QAudioOutput, QMediaPlayer, QSoundEffect

logger = logging.getLogger("spinwheel.ui")

SOUNDS_DIR: Path = Path(__file__).parent.parent.resolve() / "sounds"

# cue name -> file stem; .mp3 streams through a media player, .wav is a low-latency effect
SOUND_CUES: dict[str, str] = {
    "SPIN": "SPIN.mp3",
    "RESULT": "RESULT.wav",
}


class SoundsManager:
    """Spin and result cues. Missing files leave their cue silent."""

    def __init__(self, sounds_dir: Path = SOUNDS_DIR, volume: float = 0.9) -> None:
        self.sounds_dir: Path = sounds_dir
        self.volume: float = volume
        self.files: dict[str, Path] = self.link_sounds()
        # QMediaPlayer does not own its output, so each one is kept alive here
        self._outputs: list[QAudioOutput] = []
        self.effects: dict[str, QMediaPlayer | QSoundEffect] = {
            cue: self._load(path) for cue, path in self.files.items()
        }

    def link_sounds(self) -> dict[str, Path]:
        files: dict[str, Path] = {}
        for cue, filename in SOUND_CUES.items():
            path: Path = self.sounds_dir / filename
            if path.exists():
                files[cue] = path
            else:
                logger.debug("sound %s not found at %s, playing silently", cue, path)
        return files

    def _load(self, path: Path) -> QMediaPlayer | QSoundEffect:
        source: QUrl = QUrl.fromLocalFile(str(path.resolve()))
        if path.suffix == ".wav":
            effect: QSoundEffect = QSoundEffect()
            effect.setSource(source)
            effect.setVolume(self.volume)
            return effect

        output: QAudioOutput = QAudioOutput()
        output.setVolume(self.volume)
        self._outputs.append(output)
        player: QMediaPlayer = QMediaPlayer()
        player.setAudioOutput(output)
        player.setSource(source)
        return player

    def play(self, name: str) -> None:
        cue = self.effects.get(name)
        if cue is None:
            return
        cue.stop()
        cue.play()

    def stop(self, name: str) -> None:
        cue = self.effects.get(name)
        if cue is not None:
            cue.stop()
