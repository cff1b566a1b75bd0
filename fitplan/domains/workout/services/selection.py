from __future__ import annotations

import logging
import math
import random
from typing import Callable, List, Sequence, Tuple

from django.db import DatabaseError

from fitplan.domains.errors import EmptyExercisePool, PersistenceFailure
from fitplan.domains.goals import GoalCategory, classify_goal
from fitplan.domains.profile import ProfileSnapshot
from fitplan.domains.workout.contract import (
    COMPOUND_SHARE,
    RELAXED_LEVELS,
    SPECIALIZED_NAME_KEYWORDS,
    is_compound,
    is_specialized,
    muscle_tokens,
)
from fitplan.domains.workout.schemas import GenerationConfigSpec
from fitplan.models import Exercise
from fitplan.shared.randomness import random_int, sample

logger = logging.getLogger(__name__)

MIN_EXERCISES_PER_SESSION = 2


def load_exercise_pool(venue: str) -> List[Exercise]:
    try:
        return list(Exercise.objects.filter(workout_type=venue).order_by("id"))
    except DatabaseError as e:
        raise PersistenceFailure(f"Could not read exercises for {venue}: {e}") from e


# ------------------------------
# Filtering tiers
# ------------------------------

def _targets(exercise: Exercise, tokens: Sequence[str]) -> bool:
    target = (exercise.target_muscle_group or "").lower()
    return any(t in target for t in tokens)


def _difficulty(exercise: Exercise) -> str:
    return (exercise.difficulty or "").strip().lower()


def exact_level_tier(pool: Sequence[Exercise], tag: str, level: str) -> List[Exercise]:
    tokens = muscle_tokens(tag)
    return [ex for ex in pool if _difficulty(ex) == level and _targets(ex, tokens)]


def relaxed_level_tier(pool: Sequence[Exercise], tag: str, level: str) -> List[Exercise]:
    tokens = muscle_tokens(tag)
    levels = RELAXED_LEVELS.get(level, (level, "intermediate"))
    return [ex for ex in pool if _difficulty(ex) in levels and _targets(ex, tokens)]


def muscle_only_tier(pool: Sequence[Exercise], tag: str, level: str) -> List[Exercise]:
    tokens = muscle_tokens(tag)
    return [ex for ex in pool if _targets(ex, tokens)]


def workout_type_keyword_tier(pool: Sequence[Exercise], tag: str, level: str) -> List[Exercise]:
    keywords = SPECIALIZED_NAME_KEYWORDS.get(tag)
    if not keywords:
        return []
    return [ex for ex in pool if any(k in (ex.name or "").lower() for k in keywords)]


Tier = Callable[[Sequence[Exercise], str, str], List[Exercise]]
TagFilter = Callable[[str], bool]


def _any_tag(tag: str) -> bool:
    return True


# (name, tier, applies to tag)
FILTER_TIERS: Tuple[Tuple[str, Tier, TagFilter], ...] = (
    ("exact_level", exact_level_tier, _any_tag),
    ("relaxed_level", relaxed_level_tier, _any_tag),
    ("muscle_only", muscle_only_tier, _any_tag),
    ("workout_type_keywords", workout_type_keyword_tier, is_specialized),
)


def top_up(
    candidates: Sequence[Exercise],
    pool: Sequence[Exercise],
    minimum: int,
    rng: random.Random,
) -> List[Exercise]:
    """Scarcity tier: add random unused pool exercises until minimum is met."""
    missing = minimum - len(candidates)
    if missing <= 0:
        return list(candidates)
    used = {ex.id for ex in candidates}
    remaining = [ex for ex in pool if ex.id not in used]
    return list(candidates) + sample(rng, remaining, missing)


def filter_candidates(
    muscle_group: str,
    config: GenerationConfigSpec,
    profile: ProfileSnapshot,
    pool: Sequence[Exercise],
    rng: random.Random,
) -> List[Exercise]:
    """Run the tiers until one yields the configured minimum, then top up.

    Each applicable tier replaces the previous result, even with fewer
    exercises; the scarcity top-up fills the rest from the pool.
    """
    tag = (muscle_group or "").strip().lower()
    level = profile.experience_level
    # an empty result never satisfies the threshold
    minimum = max(config.exercise_count_range.min, 1)

    candidates: List[Exercise] = []
    for tier_name, tier, applies in FILTER_TIERS:
        if not applies(tag):
            continue
        candidates = tier(pool, tag, level)
        logger.debug("[SELECT] %s tier=%s found=%d", tag, tier_name, len(candidates))
        if len(candidates) >= minimum:
            return candidates

    return top_up(candidates, pool, minimum, rng)


# ------------------------------
# Goal-weighted choice
# ------------------------------

def _choose_compound_first(
    candidates: Sequence[Exercise],
    config: GenerationConfigSpec,
    rng: random.Random,
) -> List[Exercise]:
    compounds = [ex for ex in candidates if is_compound(ex.name)]
    isolations = [ex for ex in candidates if not is_compound(ex.name)]

    target = random_int(rng, config.exercise_count_range.min, config.exercise_count_range.max)
    compound_count = min(math.ceil(target * COMPOUND_SHARE), len(compounds))
    isolation_count = min(target - compound_count, len(isolations))

    return sample(rng, compounds, compound_count) + sample(rng, isolations, isolation_count)


def _target_bounds(category: GoalCategory, tag: str, config: GenerationConfigSpec) -> Tuple[int, int]:
    low, high = config.exercise_count_range.min, config.exercise_count_range.max
    if category == GoalCategory.WEIGHT_LOSS:
        return low + 1, high + 2
    if is_specialized(tag):
        return low + 1, high + 3
    return low, high


def choose_exercises(
    candidates: Sequence[Exercise],
    muscle_group: str,
    config: GenerationConfigSpec,
    goal: str,
    rng: random.Random,
) -> List[Exercise]:
    category = classify_goal(goal)
    tag = (muscle_group or "").strip().lower()

    if category in (GoalCategory.MUSCLE_GAIN, GoalCategory.STRENGTH):
        selected = _choose_compound_first(candidates, config, rng)
    else:
        low, high = _target_bounds(category, tag, config)
        selected = sample(rng, candidates, random_int(rng, low, high))

    if len(selected) < MIN_EXERCISES_PER_SESSION:
        chosen = {ex.id for ex in selected}
        rest = [ex for ex in candidates if ex.id not in chosen]
        selected = selected + sample(rng, rest, MIN_EXERCISES_PER_SESSION - len(selected))
    return selected


def select_exercises(
    muscle_group: str,
    config: GenerationConfigSpec,
    profile: ProfileSnapshot,
    pool: Sequence[Exercise],
    rng: random.Random,
) -> List[Exercise]:
    """Ordered exercises for one non-rest session."""
    candidates = filter_candidates(muscle_group, config, profile, pool, rng)
    if not candidates:
        raise EmptyExercisePool(muscle_group)

    selected = choose_exercises(candidates, muscle_group, config, profile.fitness_goal, rng)
    logger.info(
        "[SELECT] %s: %d candidates -> %d selected",
        muscle_group, len(candidates), len(selected),
    )
    return selected
