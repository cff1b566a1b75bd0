from __future__ import annotations

import re
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fitplan.domains.workout.contract import DAYS_PER_WEEK, is_rest


# ============================================================
# Generation configuration (JSON columns of AiConfiguration)
# ============================================================

class Range(BaseModel):
    model_config = ConfigDict(extra="ignore")

    min: int = Field(ge=0)
    max: int = Field(ge=0)

    @model_validator(mode="after")
    def _ordered(self):
        if self.min > self.max:
            raise ValueError(f"range min ({self.min}) must not exceed max ({self.max})")
        return self


class CategoryRanges(BaseModel):
    compound: Range
    isolation: Range

    def for_exercise(self, compound: bool) -> Range:
        return self.compound if compound else self.isolation


_DAY_NUMBER = re.compile(r"(\d+)\s*$")


class GenerationConfigSpec(BaseModel):
    config_id: Optional[int] = None
    fitness_goal: str = ""
    experience_level: str = ""
    workout_type: str = ""

    muscle_group_split: Dict[str, str] = Field(min_length=1)
    exercise_count_range: Range
    rest_period_range: Range
    set_ranges: CategoryRanges
    rep_ranges: CategoryRanges

    @classmethod
    def from_model(cls, row) -> "GenerationConfigSpec":
        return cls(
            config_id=row.pk,
            fitness_goal=row.fitness_goal,
            experience_level=row.experience_level,
            workout_type=row.workout_type,
            muscle_group_split=row.muscle_group_split or {},
            exercise_count_range=row.exercise_count_range or {},
            rest_period_range=row.rest_period_range or {},
            set_ranges=row.set_ranges or {},
            rep_ranges=row.rep_ranges or {},
        )

    def split_days(self) -> List[tuple]:
        """[(day_number, muscle_group), ...] in split order."""
        out = []
        for position, (key, muscle_group) in enumerate(self.muscle_group_split.items(), start=1):
            m = _DAY_NUMBER.search(str(key))
            day_number = int(m.group(1)) if m else position
            out.append((day_number, str(muscle_group).strip().lower()))
        return out

    @model_validator(mode="after")
    def _week_days(self):
        days = [day for day, _ in self.split_days()]
        out_of_range = [d for d in days if not 1 <= d <= DAYS_PER_WEEK]
        if out_of_range:
            raise ValueError(f"split day numbers must be 1..{DAYS_PER_WEEK}, got {out_of_range}")
        if len(set(days)) != len(days):
            raise ValueError(f"split day numbers must be unique, got {days}")
        return self


# ============================================================
# Drafts (built in memory, persisted in one transaction)
# ============================================================

class PrescriptionDraft(BaseModel):
    exercise_id: int
    exercise_name: str
    sets: int = Field(ge=1)
    reps: int = Field(ge=1)
    rest_period: int = Field(ge=0)
    order: int = Field(ge=1)


class SessionDraft(BaseModel):
    day_number: int = Field(ge=1)
    name: str
    description: str
    target_muscle_groups: str
    duration: int = Field(ge=0)
    exercises: List[PrescriptionDraft] = Field(default_factory=list)

    @property
    def is_rest(self) -> bool:
        return is_rest(self.target_muscle_groups)


class WorkoutPlanDraft(BaseModel):
    name: str
    description: str
    goal: str
    difficulty: str
    duration_weeks: int = Field(ge=1)
    workout_type: str
    is_ai_generated: bool = True
