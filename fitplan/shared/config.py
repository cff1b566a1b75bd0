from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DAYS_PER_CYCLE = 7


def _env_int(name: str) -> Optional[int]:
    raw = (os.getenv(name) or "").strip()
    try:
        return int(raw) if raw else None
    except ValueError:
        return None


def _meal_plan_days() -> int:
    days = _env_int("FITPLAN_MEAL_PLAN_DAYS") or DAYS_PER_CYCLE
    # meal plans cover at most one 7-day cycle
    return days if 1 <= days <= DAYS_PER_CYCLE else DAYS_PER_CYCLE


@dataclass
class EngineConfig:
    default_seed: Optional[int] = None
    meal_plan_days: int = DAYS_PER_CYCLE
    record_history: bool = True

    @staticmethod
    def from_env() -> "EngineConfig":
        return EngineConfig(
            default_seed=_env_int("FITPLAN_DEFAULT_SEED"),
            meal_plan_days=_meal_plan_days(),
            record_history=(os.getenv("FITPLAN_RECORD_HISTORY") or "true").lower() not in ("0", "false", "no"),
        )
