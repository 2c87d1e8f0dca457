"""Voice input capability.

Speech recognition only exists in some hosts, so callers get a tagged
capability and must handle ``Unavailable``.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Protocol, Union

logger = logging.getLogger(__name__)


class Transcriber(Protocol):
    def start(self) -> None: ...

    def stop(self) -> None: ...


@dataclass
class Available:
    transcriber: Transcriber


@dataclass
class Unavailable:
    reason: str = "speech recognition is not supported here"


VoiceCapability = Union[Available, Unavailable]


def detect_voice_capability(factory: Callable[[], Transcriber] | None) -> VoiceCapability:
    """Build a transcriber if the host provides one."""
    if factory is None:
        return Unavailable()
    try:
        return Available(factory())
    except (OSError, RuntimeError) as exc:
        logger.warning("Speech recognition unavailable: %s", exc)
        return Unavailable(str(exc))


@dataclass
class RecognitionResult:
    text: str
    is_final: bool


@dataclass
class TranscriptBuffer:
    """Collects recognition results for one recording.

    ``on_final`` receives each batch of finalized text; interim text is only
    shown, never forwarded.
    """

    on_final: Callable[[str], None]
    display: str = ""
    finals: list[str] = field(default_factory=list)

    def feed(self, results: list[RecognitionResult]) -> str:
        final_text = "".join(r.text for r in results if r.is_final)
        interim_text = "".join(r.text for r in results if not r.is_final)
        self.display = final_text + interim_text
        if final_text:
            self.finals.append(final_text)
            self.on_final(final_text)
        return self.display

    @property
    def transcript(self) -> str:
        return "".join(self.finals)
