"""The pet's world: care actions and the once-per-second simulation step."""

from __future__ import annotations

from typing import Callable

from pocketpet.behavior import BehaviorTree
from pocketpet.config import Clock, is_night
from pocketpet.habits import Habits, RequestThrottle
from pocketpet.sound import Synth
from pocketpet.types import (
    ActionType,
    AIState,
    Brain,
    Emotion,
    Mode,
    PersonalityType,
    PetState,
    SoundEvent,
    Stage,
    Stats,
    clamp,
)

HATCH_AGE_SEC = 600
EMOTION_SOUND_GAP_MS = 4000

_EMOTION_SOUNDS = {
    Emotion.HAPPY: SoundEvent.HAPPY,
    Emotion.SAD: SoundEvent.SAD,
    Emotion.ANGRY: SoundEvent.ANGRY,
}


def derive_emotion(pet: PetState) -> Emotion:
    """The emotion the pet's current stats call for."""
    st = pet.st
    if st.health < 35:
        return Emotion.SICK
    if st.hunger < 25:
        return Emotion.HUNGRY
    if st.thirst < 25:
        return Emotion.THIRSTY
    if st.sleeping:
        return Emotion.SLEEPY
    if st.energy < 25:
        return Emotion.TIRED
    if st.mood < -50:
        return Emotion.SAD
    if st.mood > 40:
        return Emotion.HAPPY
    return Emotion.NEUTRAL


class Simulation:
    """A pet together with its brain, habits, behaviour and sound output."""

    def __init__(
        self,
        clock: Clock | None = None,
        on_sound: Callable[[SoundEvent], None] | None = None,
    ) -> None:
        self.clock = clock if clock is not None else Clock()
        self.on_sound = on_sound
        self.synth = Synth()
        self.reset()

    def _now(self) -> int:
        return self.clock.millis()

    def _play(self, event: SoundEvent) -> None:
        self.synth.play(event, self._now())
        if self.on_sound is not None:
            self.on_sound(event)

    def reset(self) -> None:
        """Start over with a fresh egg and a fresh brain."""
        now = self._now()
        self.pet = PetState(
            born_millis=now,
            last_interaction_millis=now,
            stage=Stage.EGG,
            emotion=Emotion.NEUTRAL,
            st=Stats(hunger=80, thirst=80, energy=80, cleanliness=80, health=80, happiness=60),
            personality=PersonalityType.CHILL,
            xp=0,
        )
        self.brain = Brain(trust=50, irritation=0, curiosity=50, stubbornness=30, attention_need=20)
        self.habits = Habits()
        self.ai = AIState(mode=Mode.IDLE, mode_since=now, last_chosen_utility=0)
        self.tree = BehaviorTree()
        self.requests = RequestThrottle()
        self._last_emotion_sound_ms = 0

    @property
    def busy(self) -> bool:
        """True while the pet is asleep, waking up or heavily sick."""
        return (
            Mode.SLEEP_DROWSY <= self.ai.mode <= Mode.WAKE_UP
            or self.ai.mode == Mode.SICK_HEAVY
        )

    def _begin(self, act: ActionType) -> bool:
        if self.busy:
            return False
        self.habits.on_action(act, self._now())
        return True

    def feed(self) -> bool:
        """Give food; False when the pet cannot take it now."""
        if not self._begin(ActionType.FEED):
            return False
        st = self.pet.st
        st.hunger = clamp(st.hunger + 30, 0, 100)
        st.happiness = clamp(st.happiness + 3, 0, 100)
        st.cnt_feed += 1
        self.pet.xp += 1
        self._play(SoundEvent.FEED)
        return True

    def drink(self) -> bool:
        """Give water; False when the pet cannot take it now."""
        if not self._begin(ActionType.DRINK):
            return False
        st = self.pet.st
        st.thirst = clamp(st.thirst + 30, 0, 100)
        st.happiness = clamp(st.happiness + 2, 0, 100)
        st.cnt_drink += 1
        self.pet.xp += 1
        self._play(SoundEvent.DRINK)
        return True

    def play(self) -> bool:
        """Play with the pet; False when it is busy or too tired."""
        if not self._begin(ActionType.PLAY):
            return False
        st = self.pet.st
        if st.energy < 20:
            self._play(SoundEvent.ANGRY)
            return False
        st.energy = clamp(st.energy - 6, 0, 100)
        st.happiness = clamp(st.happiness + 8, 0, 100)
        st.playfulness = clamp(st.playfulness + 1, 0, 100)
        st.boredom = clamp(st.boredom - 20, 0, 100)
        st.cnt_play += 1
        self.pet.xp += 3
        self._play(SoundEvent.PLAY)
        return True

    def wash(self) -> bool:
        """Wash the pet; False when it cannot be washed now."""
        if not self._begin(ActionType.WASH):
            return False
        st = self.pet.st
        st.cleanliness = clamp(st.cleanliness + 25, 0, 100)
        st.happiness = clamp(st.happiness + 4, 0, 100)
        st.cnt_wash += 1
        self.pet.xp += 1
        self._play(SoundEvent.WASH)
        return True

    def stroke(self) -> bool:
        """Pet the pet; False when it cannot be petted now."""
        if not self._begin(ActionType.PET):
            return False
        st = self.pet.st
        st.happiness = clamp(st.happiness + 6, 0, 100)
        st.bonding = clamp(st.bonding + 4, 0, 100)
        st.friendliness = clamp(st.friendliness + 1, 0, 100)
        st.cnt_pet += 1
        self.pet.xp += 2
        self._play(SoundEvent.PET)
        if not st.sleeping:
            st.sleep_debt = clamp(st.sleep_debt + (2 if is_night(self._now()) else 1), 0, 100)
        return True

    def medicine(self) -> None:
        """Give medicine; works in any state."""
        self.habits.on_action(ActionType.MED, self._now())
        st = self.pet.st
        st.health = clamp(st.health + 15, 0, 100)
        st.cnt_med += 1
        self._play(SoundEvent.SICK)

    def toggle_sleep(self) -> None:
        """Wake a sleeping pet, or send an awake one to bed."""
        now = self._now()
        self.habits.on_action(ActionType.SLEEP_TOGGLE, now)
        if Mode.SLEEP_DROWSY <= self.ai.mode <= Mode.SLEEP_DEEP:
            self.ai.mode = Mode.WAKE_UP
            self.ai.mode_since = now
            self._play(SoundEvent.WAKE)
        elif self.ai.mode != Mode.SICK_HEAVY:
            self.ai.mode = Mode.SLEEP_DROWSY
            self.ai.mode_since = now
            self._play(SoundEvent.SLEEP)

    def ai_tick(self) -> None:
        """Run the behaviour tree, then let the pet ask for habitual care."""
        now = self._now()
        self.tree.tick(self.pet, self.brain, self.ai, now, self._play)
        for event in self.requests.poll(self.pet, self.habits, now):
            self._play(event)

    def tick(self) -> None:
        """Advance the simulation by one second."""
        pet, st, ai = self.pet, self.pet.st, self.ai
        now = self._now()
        pet.age_sec += 1

        sleeping = Mode.SLEEP_DROWSY <= ai.mode <= Mode.SLEEP_DEEP
        sick_heavy = ai.mode == Mode.SICK_HEAVY

        if pet.stage == Stage.EGG and pet.age_sec > HATCH_AGE_SEC:
            pet.stage = Stage.BABY
            st.hunger = 80
            st.thirst = 80
            st.energy = 80
            st.boredom = 20
            st.sleep_debt = 0
            ai.mode = Mode.WAKE_UP
            ai.mode_since = now
            self._play(SoundEvent.HATCH)
            return

        if not sleeping:
            st.hunger = clamp(st.hunger - 1, 0, 100)
            st.thirst = clamp(st.thirst - 1, 0, 100)
        if not sleeping and not sick_heavy:
            st.boredom = clamp(st.boredom + 1, 0, 100)
        st.sleeping = sleeping

        self.ai_tick()

        emotion = derive_emotion(pet)
        if emotion != pet.emotion:
            pet.emotion = emotion
            now = self._now()
            if now - self._last_emotion_sound_ms > EMOTION_SOUND_GAP_MS:
                self._last_emotion_sound_ms = now
                sound = _EMOTION_SOUNDS.get(emotion)
                if sound is not None:
                    self._play(sound)