from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from django.db import DatabaseError

from fitplan.domains.errors import PersistenceFailure, ProfileNotFound
from fitplan.models import UserProfile


def _maybe_float(v: Any) -> Optional[float]:
    if v is None:
        return None
    if isinstance(v, (int, float)):
        return float(v)
    s = str(v).strip()
    if not s:
        return None
    try:
        return float(s)
    except ValueError:
        return None


def _norm(v: Any) -> str:
    return str(v or "").strip().lower()


def age_on(date_of_birth: date, today: date) -> int:
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


@dataclass(frozen=True)
class ProfileSnapshot:
    """Read-only view of the profile fields generation depends on."""

    user_id: int
    fitness_goal: str
    experience_level: str
    workout_type: str
    gender: str
    height: float
    weight: float
    date_of_birth: date
    activity_level: str
    dietary_restrictions: Optional[str] = None

    def age(self, today: Optional[date] = None) -> int:
        return age_on(self.date_of_birth, today or date.today())

    def history_inputs(self) -> Dict[str, Any]:
        return {
            "fitness_goal": self.fitness_goal,
            "experience_level": self.experience_level,
            "workout_type": self.workout_type,
            "height": self.height,
            "weight": self.weight,
        }


def snapshot_profile(user: UserProfile) -> ProfileSnapshot:
    restrictions = (user.dietary_restrictions or "").strip() or None
    return ProfileSnapshot(
        user_id=user.pk,
        fitness_goal=_norm(user.fitness_goal),
        experience_level=_norm(user.experience_level),
        workout_type=_norm(user.preferred_workout_type),
        gender=(user.gender or "").strip(),
        height=_maybe_float(user.height) or 0.0,
        weight=_maybe_float(user.weight) or 0.0,
        date_of_birth=user.date_of_birth,
        activity_level=_norm(user.activity_level),
        dietary_restrictions=restrictions,
    )


def load_profile(user_id: int) -> ProfileSnapshot:
    try:
        user = UserProfile.objects.filter(pk=user_id).first()
    except DatabaseError as e:
        raise PersistenceFailure(f"Could not read profile {user_id}: {e}") from e
    if user is None:
        raise ProfileNotFound(user_id)
    return snapshot_profile(user)
