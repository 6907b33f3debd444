"""Core enumerations and state records of the pet."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Emotion(IntEnum):
    HAPPY = 0
    EXCITED = 1
    PLAYFUL = 2
    CONTENT = 3
    NEUTRAL = 4
    TIRED = 5
    SLEEPY = 6
    HUNGRY = 7
    THIRSTY = 8
    SAD = 9
    SICK = 10
    ANGRY = 11


class Stage(IntEnum):
    EGG = 0
    BABY = 1
    CHILD = 2
    TEEN = 3
    ADULT = 4


class Mode(IntEnum):
    IDLE = 0
    PLAY = 1
    SEEK_FOOD = 2
    SEEK_WATER = 3
    WASH = 4
    SLEEP_DROWSY = 5
    SLEEP_LIGHT = 6
    SLEEP_DEEP = 7
    WAKE_UP = 8
    SICK_MILD = 9
    SICK_HEAVY = 10
    SICK_RECOVERY = 11
    SAD = 12


class ActionType(IntEnum):
    FEED = 0
    DRINK = 1
    PLAY = 2
    PET = 3
    WASH = 4
    MED = 5
    SLEEP_TOGGLE = 6


class SoundEvent(IntEnum):
    PET = 0
    FEED = 1
    DRINK = 2
    PLAY = 3
    WASH = 4
    SLEEP = 5
    WAKE = 6
    HAPPY = 7
    SAD = 8
    ANGRY = 9
    SICK = 10
    RANDOM = 11
    HATCH = 12


class PersonalityType(IntEnum):
    CHILL = 0
    ENERGETIC = 1
    CURIOUS = 2
    SOCIAL = 3
    GRUMPY = 4
    SHY = 5


def clamp(value: int, low: int, high: int) -> int:
    """Limit ``value`` to the closed range ``low..high``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


@dataclass
class Stats:
    """Needs, traits and counters of the pet."""

    hunger: int = 0
    thirst: int = 0
    energy: int = 0
    happiness: int = 0
    cleanliness: int = 0
    health: int = 0
    bonding: int = 0
    playfulness: int = 0
    energeticness: int = 0
    friendliness: int = 0
    mood: int = 0
    sleep_debt: int = 0
    sleeping: bool = False
    boredom: int = 0
    happy_streak: int = 0
    best_happy_streak: int = 0
    cnt_feed: int = 0
    cnt_drink: int = 0
    cnt_play: int = 0
    cnt_wash: int = 0
    cnt_pet: int = 0
    cnt_med: int = 0


@dataclass
class PetState:
    """Everything that describes the pet itself."""

    born_millis: int = 0
    last_interaction_millis: int = 0
    stage: Stage = Stage.EGG
    emotion: Emotion = Emotion.NEUTRAL
    st: Stats = field(default_factory=Stats)
    personality: PersonalityType = PersonalityType.CHILL
    xp: int = 0
    age_sec: int = 0


@dataclass
class Brain:
    """Slowly changing inner drives that steer decisions."""

    trust: int = 0
    irritation: int = 0
    curiosity: int = 0
    stubbornness: int = 0
    attention_need: int = 0
    last_decision_ms: int = 0


@dataclass
class AIState:
    """Current behaviour mode and when it began."""

    mode: Mode = Mode.IDLE
    mode_since: int = 0
    last_chosen_utility: int = 0