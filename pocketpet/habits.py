"""Learned daily habits of the owner and the pet's requests based on them."""

from __future__ import annotations

from dataclasses import dataclass, field

from pocketpet.config import hour_of_day
from pocketpet.types import ActionType, Brain, PetState, SoundEvent, clamp

HOURS_PER_DAY = 24
SLOT_STEP = 20
SLOT_MAX = 255
EXPECT_STEP = 5
EXPECT_MAX = 100

REQUEST_INTERVAL_MS = 15_000
REQUEST_AFFINITY = 120


def _empty_slots() -> dict[ActionType, list[int]]:
    return {act: [0] * HOURS_PER_DAY for act in ActionType}


def _zero_per_action() -> dict[ActionType, int]:
    return {act: 0 for act in ActionType}


@dataclass
class Habits:
    """How often each action happens at each virtual hour, and how much it is expected."""

    slot: dict[ActionType, list[int]] = field(default_factory=_empty_slots)
    expect: dict[ActionType, int] = field(default_factory=_zero_per_action)
    total: dict[ActionType, int] = field(default_factory=_zero_per_action)

    def on_action(self, act: ActionType, now_ms: int) -> None:
        """Remember that ``act`` happened at the current virtual hour."""
        hour = hour_of_day(now_ms)
        self.slot[act][hour] = clamp(self.slot[act][hour] + SLOT_STEP, 0, SLOT_MAX)
        self.total[act] += 1
        self.expect[act] = clamp(self.expect[act] + EXPECT_STEP, 0, EXPECT_MAX)

    def affinity(self, act: ActionType, now_ms: int) -> int:
        """How strongly ``act`` is associated with the current virtual hour."""
        return self.slot[act][hour_of_day(now_ms)] + self.expect[act]


def refuse_action(pet: PetState, brain: Brain, act: ActionType) -> bool:
    """True when the pet would refuse ``act`` out of stubbornness or fatigue."""
    if brain.stubbornness > 70 and brain.irritation > 60:
        return True
    return act == ActionType.PLAY and pet.st.energy < 30


@dataclass
class RequestThrottle:
    """Lets the pet ask for habitual care, at most once per interval."""

    last_ms: int = 0

    def poll(self, pet: PetState, habits: Habits, now_ms: int) -> list[SoundEvent]:
        """Sounds the pet makes to ask for food or play, if it is time to ask."""
        if now_ms - self.last_ms < REQUEST_INTERVAL_MS:
            return []
        self.last_ms = now_ms

        requests: list[SoundEvent] = []
        if pet.st.hunger < 30 and habits.affinity(ActionType.FEED, now_ms) > REQUEST_AFFINITY:
            requests.append(SoundEvent.SAD)
        if pet.st.boredom > 70 and habits.affinity(ActionType.PLAY, now_ms) > REQUEST_AFFINITY:
            requests.append(SoundEvent.RANDOM)
        return requests