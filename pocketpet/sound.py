"""Tiny tone synthesiser that turns sound events into 16-bit stereo PCM."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import IntEnum

from pocketpet.types import SoundEvent

SAMPLE_RATE = 22050
AMPLITUDE = 10000
BLOCK_FRAMES = 256
ATTACK_MS = 5.0
RELEASE_MS = 20.0

_TWO_PI = 2.0 * math.pi


class WaveType(IntEnum):
    SINE = 0
    SQUARE = 1
    SAW = 2


@dataclass(frozen=True)
class Tone:
    """A single beep: pitch, length and waveform."""

    freq: float
    duration_ms: int
    wave: WaveType


TONES: dict[SoundEvent, Tone] = {
    SoundEvent.PET: Tone(1200, 50, WaveType.SQUARE),
    SoundEvent.FEED: Tone(700, 80, WaveType.SAW),
    SoundEvent.DRINK: Tone(900, 60, WaveType.SQUARE),
    SoundEvent.PLAY: Tone(1500, 120, WaveType.SQUARE),
    SoundEvent.WASH: Tone(500, 100, WaveType.SINE),
    SoundEvent.SLEEP: Tone(280, 200, WaveType.SINE),
    SoundEvent.WAKE: Tone(900, 80, WaveType.SAW),
    SoundEvent.HAPPY: Tone(1800, 90, WaveType.SQUARE),
    SoundEvent.SAD: Tone(350, 160, WaveType.SINE),
    SoundEvent.ANGRY: Tone(200, 180, WaveType.SAW),
    SoundEvent.SICK: Tone(260, 220, WaveType.SINE),
    SoundEvent.HATCH: Tone(1200, 150, WaveType.SINE),
}


def envelope(now: float, start: float, end: float) -> float:
    """Linear attack/release gain for a tone running from ``start`` to ``end``."""
    if now < start + ATTACK_MS:
        return (now - start) / ATTACK_MS
    if now > end - RELEASE_MS:
        return (end - now) / RELEASE_MS
    return 1.0


def oscillate(phase: float, wave: WaveType) -> float:
    """Value of the waveform at ``phase`` radians, in -1..1."""
    if wave is WaveType.SQUARE:
        return 1.0 if math.sin(phase) >= 0 else -1.0
    if wave is WaveType.SAW:
        return phase / math.pi - 1.0
    return math.sin(phase)


class Synth:
    """Plays one tone at a time, rendered in fixed-size blocks."""

    def __init__(self) -> None:
        self.active = False
        self.freq = 440.0
        self.phase = 0.0
        self.start_ms = 0
        self.end_ms = 0
        self.wave = WaveType.SINE

    def play(self, event: SoundEvent, now_ms: int) -> None:
        """Start the tone for ``event``; events without a tone are ignored."""
        tone = TONES.get(event)
        if tone is None:
            return
        self.active = True
        self.freq = float(tone.freq)
        self.phase = 0.0
        self.start_ms = now_ms
        self.end_ms = now_ms + tone.duration_ms
        self.wave = tone.wave

    def render(self, now_ms: int) -> bytes:
        """Next block of interleaved little-endian stereo samples, or b"" when silent."""
        if not self.active:
            return b""
        if now_ms > self.end_ms:
            self.active = False
            return b""

        step = _TWO_PI * self.freq / SAMPLE_RATE
        gain = envelope(now_ms, self.start_ms, self.end_ms)
        samples: list[int] = []
        for _ in range(BLOCK_FRAMES):
            sample = int(oscillate(self.phase, self.wave) * gain * AMPLITUDE)
            samples.extend((sample, sample))
            self.phase += step
            if self.phase > _TWO_PI:
                self.phase -= _TWO_PI
        return struct.pack(f"<{len(samples)}h", *samples)