"""Behaviour tree that picks the pet's mode once per simulated second."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

from pocketpet.config import is_night
from pocketpet.personality import PersonalityTicker
from pocketpet.types import (
    AIState,
    Brain,
    Emotion,
    Mode,
    PersonalityType,
    PetState,
    SoundEvent,
    clamp,
)

SoundPlayer = Callable[[SoundEvent], None]

SLEEP_MODES = frozenset({Mode.SLEEP_DROWSY, Mode.SLEEP_LIGHT, Mode.SLEEP_DEEP, Mode.WAKE_UP})

DROWSY_TO_LIGHT_MS = 5000
LIGHT_TO_DEEP_MS = 15000
WAKE_PHASE_MS = 2000


class BTStatus(IntEnum):
    FAIL = 0
    SUCCESS = 1
    RUNNING = 2


@dataclass
class _Tick:
    pet: PetState
    brain: Brain
    ai: AIState
    now: int
    play: SoundPlayer


class BehaviorTree:
    """Priority selector over sickness, sleep, needs, boredom and idle style."""

    def __init__(self, personality: PersonalityTicker | None = None) -> None:
        self.personality = personality if personality is not None else PersonalityTicker()
        self.sleep_enter_ms = 0

    def tick(
        self,
        pet: PetState,
        brain: Brain,
        ai: AIState,
        now_ms: int,
        play: SoundPlayer,
    ) -> BTStatus:
        """Run one pass of the tree and return its status."""
        self.personality.tick(pet, brain, now_ms)
        t = _Tick(pet, brain, ai, now_ms, play)

        status = self._sickness(t)
        if status != BTStatus.FAIL:
            return status
        status = self._sleep(t)
        if status != BTStatus.FAIL:
            return status

        st = pet.st
        if st.hunger < 25:
            return self._set_mode(t, Mode.SEEK_FOOD)
        if st.thirst < 25:
            return self._set_mode(t, Mode.SEEK_WATER)
        if st.cleanliness < 25:
            return self._set_mode(t, Mode.WASH)

        if st.boredom > 70:
            if brain.stubbornness > 70 and brain.irritation > 50:
                return self._set_mode(t, Mode.SAD)
            return self._set_mode(t, Mode.PLAY)

        return self._idle_by_personality(t)

    @staticmethod
    def _set_mode(t: _Tick, mode: Mode) -> BTStatus:
        if t.ai.mode != mode:
            t.ai.mode = mode
            t.ai.mode_since = t.now
        return BTStatus.SUCCESS

    # --- sleep scene -------------------------------------------------------

    def _enter_sleep_mode(self, t: _Tick, mode: Mode) -> None:
        if t.ai.mode != mode:
            t.ai.mode = mode
            t.ai.mode_since = t.now
            self.sleep_enter_ms = t.now
            if mode == Mode.SLEEP_DROWSY:
                t.play(SoundEvent.SLEEP)

    def _drowsy(self, t: _Tick) -> BTStatus:
        self._enter_sleep_mode(t, Mode.SLEEP_DROWSY)
        return BTStatus.RUNNING

    def _light(self, t: _Tick) -> BTStatus:
        self._enter_sleep_mode(t, Mode.SLEEP_LIGHT)
        st = t.pet.st
        st.energy = clamp(st.energy + 1, 0, 100)
        st.sleep_debt = clamp(st.sleep_debt - 1, 0, 100)
        return BTStatus.RUNNING

    def _deep(self, t: _Tick) -> BTStatus:
        self._enter_sleep_mode(t, Mode.SLEEP_DEEP)
        st = t.pet.st
        st.energy = clamp(st.energy + 2, 0, 100)
        st.sleep_debt = clamp(st.sleep_debt - 2, 0, 100)
        return BTStatus.RUNNING

    def _wake_up(self, t: _Tick) -> BTStatus:
        self._enter_sleep_mode(t, Mode.WAKE_UP)
        t.play(SoundEvent.WAKE)
        t.pet.emotion = Emotion.HAPPY
        if t.now - self.sleep_enter_ms > WAKE_PHASE_MS:
            t.ai.mode = Mode.IDLE
            return BTStatus.SUCCESS
        return BTStatus.RUNNING

    def _sleep(self, t: _Tick) -> BTStatus:
        st = t.pet.st
        mode = t.ai.mode
        in_sleep = mode in SLEEP_MODES
        sleepy = is_night(t.now) and st.energy < 40
        if not sleepy and not in_sleep:
            return BTStatus.FAIL
        if not in_sleep:
            return self._drowsy(t)

        elapsed = t.now - self.sleep_enter_ms
        starving = st.hunger < 20 or st.thirst < 20

        if mode == Mode.SLEEP_DROWSY and elapsed > DROWSY_TO_LIGHT_MS:
            return self._light(t)
        if (
            mode == Mode.SLEEP_LIGHT
            and elapsed > LIGHT_TO_DEEP_MS
            and st.hunger > 30
            and st.thirst > 30
        ):
            return self._deep(t)
        if mode == Mode.SLEEP_LIGHT and starving:
            return self._wake_up(t)
        if mode == Mode.SLEEP_DEEP and (st.energy > 80 or starving):
            return self._wake_up(t)
        if mode == Mode.WAKE_UP:
            return self._wake_up(t)
        if mode == Mode.SLEEP_LIGHT:
            return self._light(t)
        if mode == Mode.SLEEP_DEEP:
            return self._deep(t)
        return BTStatus.RUNNING

    # --- sickness scene ----------------------------------------------------

    @staticmethod
    def _sick(t: _Tick, mode: Mode, penalty: int) -> BTStatus:
        if t.ai.mode != mode:
            t.ai.mode = mode
            t.ai.mode_since = t.now
            t.play(SoundEvent.SICK)
        st = t.pet.st
        st.energy = clamp(st.energy - penalty, 0, 100)
        st.happiness = clamp(st.happiness - penalty, 0, 100)
        return BTStatus.RUNNING

    @staticmethod
    def _recover(t: _Tick) -> BTStatus:
        if t.ai.mode != Mode.SICK_RECOVERY:
            t.ai.mode = Mode.SICK_RECOVERY
            t.ai.mode_since = t.now
        st = t.pet.st
        st.health = clamp(st.health + 1, 0, 100)
        st.energy = clamp(st.energy + 1, 0, 100)
        return BTStatus.RUNNING

    def _sickness(self, t: _Tick) -> BTStatus:
        health = t.pet.st.health
        if health < 35:
            return self._sick(t, Mode.SICK_HEAVY, 2)
        if health < 60:
            return self._sick(t, Mode.SICK_MILD, 1)

        mode = t.ai.mode
        if mode in (Mode.SICK_MILD, Mode.SICK_HEAVY):
            if health > 70:
                return self._recover(t)
            return BTStatus.RUNNING
        if mode == Mode.SICK_RECOVERY:
            if health > 90:
                t.ai.mode = Mode.IDLE
                t.play(SoundEvent.HAPPY)
                return BTStatus.SUCCESS
            return self._recover(t)
        return BTStatus.FAIL

    # --- idle policy -------------------------------------------------------

    def _idle_by_personality(self, t: _Tick) -> BTStatus:
        st = t.pet.st
        kind = t.pet.personality
        if kind == PersonalityType.ENERGETIC and st.energy > 35:
            return self._set_mode(t, Mode.PLAY)
        if kind == PersonalityType.CURIOUS and st.boredom > 40 and st.energy > 30:
            return self._set_mode(t, Mode.PLAY)
        if kind == PersonalityType.GRUMPY and st.boredom > 80:
            return self._set_mode(t, Mode.SAD)
        return self._set_mode(t, Mode.IDLE)