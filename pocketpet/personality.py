"""Slow drift of the pet's character from its stats and inner drives."""

from __future__ import annotations

from dataclasses import dataclass

from pocketpet.types import Brain, PersonalityType, PetState, clamp

RECOMPUTE_INTERVAL_MS = 30_000
CURRENT_BONUS = 10
CHANGE_XP = 10

# Nudges applied to the brain while the pet has a given personality.
_BRAIN_DRIFT: dict[PersonalityType, tuple[tuple[str, int], ...]] = {
    PersonalityType.CHILL: (("irritation", -2), ("stubbornness", -1)),
    PersonalityType.ENERGETIC: (("curiosity", 2), ("attention_need", 1)),
    PersonalityType.CURIOUS: (("curiosity", 3),),
    PersonalityType.SOCIAL: (("trust", 2), ("irritation", -1)),
    PersonalityType.GRUMPY: (("irritation", 2), ("stubbornness", 2)),
    PersonalityType.SHY: (("trust", 1),),
}


def _div(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    q = abs(a) // b
    return q if a >= 0 else -q


def scores(pet: PetState, brain: Brain) -> dict[PersonalityType, int]:
    """How well each personality fits the pet right now."""
    st = pet.st
    return {
        PersonalityType.CHILL: _div(st.health + st.cleanliness + st.bonding, 3)
        - _div(st.boredom, 2),
        PersonalityType.ENERGETIC: st.energeticness + st.energy - _div(st.sleep_debt, 2),
        PersonalityType.CURIOUS: brain.curiosity + st.playfulness - _div(st.sleep_debt, 3),
        PersonalityType.SOCIAL: st.friendliness + st.bonding - _div(brain.irritation, 2),
        PersonalityType.GRUMPY: brain.irritation + brain.stubbornness + (50 - st.happiness),
        PersonalityType.SHY: (100 - brain.trust)
        + brain.attention_need
        + _div(50 - st.happiness, 2),
    }


def recompute(pet: PetState, brain: Brain) -> PersonalityType:
    """Pick the best fitting personality and let it shape the brain."""
    best = pet.personality
    best_value = -9999
    for kind, value in scores(pet, brain).items():
        if kind == pet.personality:
            value += CURRENT_BONUS
        if value > best_value:
            best, best_value = kind, value

    if best != pet.personality:
        pet.personality = best
        pet.xp += CHANGE_XP

    for attr, delta in _BRAIN_DRIFT[pet.personality]:
        setattr(brain, attr, clamp(getattr(brain, attr) + delta, 0, 100))
    return pet.personality


@dataclass
class PersonalityTicker:
    """Runs a recompute at most once per interval."""

    last_ms: int = 0

    def tick(self, pet: PetState, brain: Brain, now_ms: int) -> bool:
        """Recompute if the interval has passed; True when it did."""
        if now_ms - self.last_ms < RECOMPUTE_INTERVAL_MS:
            return False
        self.last_ms = now_ms
        recompute(pet, brain)
        return True