"""Saving and restoring the whole pet (state, brain, habits, AI) as JSON."""

from __future__ import annotations

import json
import os
from dataclasses import asdict
from pathlib import Path
from typing import Any

from pocketpet.habits import HOURS_PER_DAY, Habits
from pocketpet.simulation import Simulation
from pocketpet.types import (
    ActionType,
    AIState,
    Brain,
    Emotion,
    Mode,
    PersonalityType,
    PetState,
    Stage,
    Stats,
)


def _pet_to_dict(pet: PetState) -> dict[str, Any]:
    data = asdict(pet)
    data["stage"] = int(pet.stage)
    data["emotion"] = int(pet.emotion)
    data["personality"] = int(pet.personality)
    return data


def _habits_to_dict(habits: Habits) -> dict[str, Any]:
    return {
        "slot": {act.name: list(hours) for act, hours in habits.slot.items()},
        "expect": {act.name: value for act, value in habits.expect.items()},
        "total": {act.name: value for act, value in habits.total.items()},
    }


def to_dict(sim: Simulation) -> dict[str, Any]:
    """Everything needed to restore ``sim`` later, as plain JSON-friendly data."""
    ai = asdict(sim.ai)
    ai["mode"] = int(sim.ai.mode)
    return {
        "pet": _pet_to_dict(sim.pet),
        "brain": asdict(sim.brain),
        "habits": _habits_to_dict(sim.habits),
        "ai": ai,
    }


def _pet_from_dict(data: dict[str, Any]) -> PetState:
    fields = dict(data)
    stats = Stats(**fields.pop("st"))
    return PetState(
        born_millis=int(fields.pop("born_millis")),
        last_interaction_millis=int(fields.pop("last_interaction_millis")),
        stage=Stage(fields.pop("stage")),
        emotion=Emotion(fields.pop("emotion")),
        st=stats,
        personality=PersonalityType(fields.pop("personality")),
        xp=int(fields.pop("xp")),
        age_sec=int(fields.pop("age_sec")),
        **fields,
    )


def _habits_from_dict(data: dict[str, Any]) -> Habits:
    habits = Habits()
    for act in ActionType:
        hours = [int(v) for v in data["slot"][act.name]]
        if len(hours) != HOURS_PER_DAY:
            raise ValueError(f"habit slots for {act.name} must hold {HOURS_PER_DAY} hours")
        habits.slot[act] = hours
        habits.expect[act] = int(data["expect"][act.name])
        habits.total[act] = int(data["total"][act.name])
    return habits


def _ai_from_dict(data: dict[str, Any]) -> AIState:
    fields = dict(data)
    mode = Mode(fields.pop("mode"))
    return AIState(mode=mode, **fields)


def apply_dict(sim: Simulation, data: dict[str, Any]) -> None:
    """Replace the state of ``sim`` with ``data``; ``sim`` is untouched if it is invalid."""
    try:
        pet = _pet_from_dict(data["pet"])
        brain = Brain(**data["brain"])
        habits = _habits_from_dict(data["habits"])
        ai = _ai_from_dict(data["ai"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"invalid saved pet data: {exc}") from exc
    sim.pet = pet
    sim.brain = brain
    sim.habits = habits
    sim.ai = ai


def save(sim: Simulation, path: str | os.PathLike[str]) -> None:
    """Write the state of ``sim`` to ``path``, replacing any earlier save."""
    target = Path(path)
    tmp = target.with_name(target.name + ".tmp")
    tmp.write_text(json.dumps(to_dict(sim), indent=2), encoding="utf-8")
    os.replace(tmp, target)


def load(sim: Simulation, path: str | os.PathLike[str]) -> bool:
    """Restore ``sim`` from ``path``; False when there is no save yet."""
    source = Path(path)
    if not source.exists():
        return False
    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid saved pet data: {exc}") from exc
    apply_dict(sim, data)
    return True