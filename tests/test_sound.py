import math
import struct

import pytest

from pocketpet.sound import (
    AMPLITUDE,
    BLOCK_FRAMES,
    TONES,
    Synth,
    WaveType,
    envelope,
    oscillate,
)
from pocketpet.types import SoundEvent


def decode(block: bytes) -> list[int]:
    return list(struct.unpack(f"<{len(block) // 2}h", block))


def test_envelope_shape():
    assert envelope(0, 0, 100) == 0.0
    assert envelope(50, 0, 100) == 1.0
    assert envelope(100, 0, 100) == 0.0


@pytest.mark.parametrize("now", range(0, 101, 5))
def test_envelope_bounded(now):
    assert 0.0 <= envelope(now, 0, 100) <= 1.0


def test_square_wave_sign():
    assert oscillate(0.5, WaveType.SQUARE) == 1.0
    assert oscillate(math.pi + 0.5, WaveType.SQUARE) == -1.0


def test_saw_wave_ramp():
    assert oscillate(0.0, WaveType.SAW) == -1.0
    assert oscillate(math.pi, WaveType.SAW) == 0.0
    assert oscillate(2 * math.pi, WaveType.SAW) == 1.0


def test_sine_wave_matches_sin():
    assert oscillate(math.pi / 2, WaveType.SINE) == pytest.approx(1.0)


@pytest.mark.parametrize("event", list(SoundEvent))
def test_every_event_but_random_has_a_tone(event):
    synth = Synth()
    synth.play(event, 500)
    if event is SoundEvent.RANDOM:
        assert synth.active is False
    else:
        assert synth.active is True
        assert synth.end_ms - synth.start_ms == TONES[event].duration_ms


def test_play_sets_tone_window():
    synth = Synth()
    synth.play(SoundEvent.FEED, 1000)
    tone = TONES[SoundEvent.FEED]
    assert synth.active
    assert synth.start_ms == 1000
    assert synth.end_ms == 1000 + tone.duration_ms
    assert synth.wave is tone.wave


def test_random_event_is_silent():
    synth = Synth()
    synth.play(SoundEvent.RANDOM, 0)
    assert synth.active is False
    assert synth.render(0) == b""


def test_render_block_size_and_stereo():
    synth = Synth()
    synth.play(SoundEvent.SICK, 0)
    block = synth.render(100)
    assert len(block) == BLOCK_FRAMES * 2 * 2
    samples = decode(block)
    assert samples[0::2] == samples[1::2]
    assert all(abs(s) <= AMPLITUDE for s in samples)
    assert any(s != 0 for s in samples)


def test_render_at_start_is_silent_by_envelope():
    synth = Synth()
    synth.play(SoundEvent.WASH, 0)
    assert set(decode(synth.render(0))) == {0}


def test_render_stops_after_end():
    synth = Synth()
    synth.play(SoundEvent.PET, 0)
    end = synth.end_ms
    assert synth.render(end + 1) == b""
    assert synth.active is False
    assert synth.render(end) == b""


def test_phase_stays_wrapped():
    synth = Synth()
    synth.play(SoundEvent.HAPPY, 0)
    for t in range(10, 80, 10):
        synth.render(t)
        assert 0.0 <= synth.phase <= 2 * math.pi