from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from django.db import DatabaseError
from pydantic import ValidationError

from fitplan.domains.errors import NoConfigurationAvailable, PersistenceFailure
from fitplan.domains.workout.schemas import GenerationConfigSpec
from fitplan.models import AiConfiguration

logger = logging.getLogger(__name__)

Matcher = Callable[[AiConfiguration, str, str, str], bool]

# Fallback cascade, most specific first. The last rule accepts any row, so
# resolution only fails on an empty table.
RESOLUTION_RULES: Tuple[Tuple[str, Matcher], ...] = (
    ("exact", lambda c, g, e, v: c.fitness_goal == g and c.experience_level == e and c.workout_type == v),
    ("goal_experience", lambda c, g, e, v: c.fitness_goal == g and c.experience_level == e),
    ("goal", lambda c, g, e, v: c.fitness_goal == g),
    ("experience", lambda c, g, e, v: c.experience_level == e),
    ("any", lambda c, g, e, v: True),
)


def load_configurations() -> List[AiConfiguration]:
    try:
        return list(AiConfiguration.objects.order_by("id"))
    except DatabaseError as e:
        raise PersistenceFailure(f"Could not read configurations: {e}") from e


def find_configuration(
    goal: str,
    experience: str,
    venue: str,
    configs: Sequence[AiConfiguration],
) -> Tuple[Optional[AiConfiguration], Optional[str]]:
    """First row matching the first rule that matches anything."""
    for rule_name, matches in RESOLUTION_RULES:
        for row in configs:
            if matches(row, goal, experience, venue):
                return row, rule_name
    return None, None


def resolve_configuration(
    goal: str,
    experience: str,
    venue: str,
    configs: Optional[Sequence[AiConfiguration]] = None,
) -> GenerationConfigSpec:
    if configs is None:
        configs = load_configurations()

    row, rule_name = find_configuration(goal, experience, venue, configs)
    if row is None:
        raise NoConfigurationAvailable("No matching AI configuration found: configuration table is empty")

    logger.info(
        "[CONFIG] resolved config_id=%s via %s for goal=%s experience=%s venue=%s",
        row.pk, rule_name, goal, experience, venue,
    )
    try:
        return GenerationConfigSpec.from_model(row)
    except ValidationError as e:
        raise NoConfigurationAvailable(f"Configuration {row.pk} is invalid: {e}") from e
