from autodidact.client.voice import (
    Available,
    RecognitionResult,
    TranscriptBuffer,
    Unavailable,
    detect_voice_capability,
)


class FakeTranscriber:
    def start(self):
        pass

    def stop(self):
        pass


def test_no_factory_means_unavailable():
    assert isinstance(detect_voice_capability(None), Unavailable)


def test_factory_builds_transcriber():
    capability = detect_voice_capability(FakeTranscriber)
    assert isinstance(capability, Available)
    assert isinstance(capability.transcriber, FakeTranscriber)


def test_factory_failure_means_unavailable():
    def broken():
        raise OSError("no microphone")

    capability = detect_voice_capability(broken)
    assert isinstance(capability, Unavailable)
    assert capability.reason == "no microphone"


def test_only_final_text_is_forwarded():
    received = []
    buffer = TranscriptBuffer(on_final=received.append)

    shown = buffer.feed([RecognitionResult("I led ", True), RecognitionResult("the lau", False)])
    assert shown == "I led the lau"
    assert received == ["I led "]

    buffer.feed([RecognitionResult("the launch", False)])
    assert received == ["I led "]
    assert buffer.display == "the launch"

    buffer.feed([RecognitionResult("the launch.", True)])
    assert received == ["I led ", "the launch."]
    assert buffer.transcript == "I led the launch."
