import pytest

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


@pytest.mark.parametrize("value", [-50, -1, 0, 1, 42, 99, 100, 101, 500])
def test_clamp_stays_in_range(value):
    result = clamp(value, 0, 100)
    assert 0 <= result <= 100


def test_clamp_passes_inner_values():
    assert clamp(42, 0, 100) == 42


def test_clamp_limits():
    assert clamp(-7, 0, 100) == 0
    assert clamp(300, 0, 255) == 255


def test_emotion_order_matches_names():
    assert Emotion(0) is Emotion.HAPPY
    assert Emotion(4) is Emotion.NEUTRAL
    assert Emotion(11) is Emotion.ANGRY
    with pytest.raises(ValueError):
        Emotion(12)


def test_stage_order():
    assert [Stage(i).name for i in range(5)] == ["EGG", "BABY", "CHILD", "TEEN", "ADULT"]
    with pytest.raises(ValueError):
        Stage(5)


def test_sleep_modes_are_contiguous():
    start = int(Mode.SLEEP_DROWSY)
    assert [Mode(start + i) for i in range(4)] == [
        Mode.SLEEP_DROWSY,
        Mode.SLEEP_LIGHT,
        Mode.SLEEP_DEEP,
        Mode.WAKE_UP,
    ]


def test_action_and_sound_counts():
    assert ActionType(6) is ActionType.SLEEP_TOGGLE
    with pytest.raises(ValueError):
        ActionType(7)
    assert SoundEvent(12) is SoundEvent.HATCH
    with pytest.raises(ValueError):
        SoundEvent(13)
    assert PersonalityType(5) is PersonalityType.SHY
    with pytest.raises(ValueError):
        PersonalityType(6)


def test_stats_default_to_zero():
    stats = Stats()
    assert stats.hunger == 0
    assert stats.sleeping is False
    assert stats.cnt_med == 0


def test_pet_state_defaults_and_independent_stats():
    a = PetState()
    b = PetState()
    a.st.hunger = 80
    assert b.st.hunger == 0
    assert a.stage is Stage.EGG
    assert a.personality is PersonalityType.CHILL


def test_brain_and_ai_defaults():
    assert Brain().trust == 0
    ai = AIState()
    assert ai.mode is Mode.IDLE
    assert ai.mode_since == 0


def test_enums_round_trip_through_int():
    for enum_cls in (Emotion, Stage, Mode, ActionType, SoundEvent, PersonalityType):
        for member in enum_cls:
            assert enum_cls(int(member)) is member