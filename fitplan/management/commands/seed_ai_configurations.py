import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from pydantic import ValidationError

from fitplan.domains.workout.contract import EXPERIENCE_LEVELS, WORKOUT_TYPES
from fitplan.domains.workout.schemas import GenerationConfigSpec
from fitplan.models import AiConfiguration

DEFAULT_PATH = Path(__file__).resolve().parents[2] / "data" / "ai_configurations.json"

JSON_FIELDS = [
    "muscle_group_split", "exercise_count_range", "rest_period_range", "set_ranges", "rep_ranges",
]


class Command(BaseCommand):
    help = "Seed or upsert AiConfiguration rows from a JSON file"

    def add_arguments(self, parser):
        parser.add_argument(
            "--path",
            type=str,
            default=str(DEFAULT_PATH),
            help="Path to a JSON list of configurations",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Parse and validate only, do not write to DB",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        path = Path(options["path"])
        dry_run = bool(options["dry_run"])

        if not path.exists():
            raise CommandError(f"JSON not found: {path}")

        try:
            rows = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise CommandError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(rows, list):
            raise CommandError("Expected a JSON list of configurations")

        to_create = []
        to_update = []
        invalid = []

        for i, r in enumerate(rows):
            key = (
                str(r.get("fitness_goal") or "").strip().lower(),
                str(r.get("experience_level") or "").strip().lower(),
                str(r.get("workout_type") or "").strip().lower(),
            )
            if not key[0]:
                invalid.append((i, "missing_fitness_goal", ""))
                continue
            if key[1] not in EXPERIENCE_LEVELS:
                invalid.append((i, "invalid_experience_level", key[1]))
                continue
            if key[2] not in WORKOUT_TYPES:
                invalid.append((i, "invalid_workout_type", key[2]))
                continue

            payload = {f: r.get(f) for f in JSON_FIELDS}
            try:
                GenerationConfigSpec(**payload)
            except ValidationError as e:
                invalid.append((i, "invalid_ranges", e.errors()[0].get("msg")))
                continue

            obj = AiConfiguration.objects.filter(
                fitness_goal=key[0], experience_level=key[1], workout_type=key[2]
            ).first()
            if obj is None:
                to_create.append(AiConfiguration(
                    fitness_goal=key[0], experience_level=key[1], workout_type=key[2], **payload
                ))
            else:
                for k, v in payload.items():
                    setattr(obj, k, v)
                to_update.append(obj)

        if invalid:
            self.stdout.write(self.style.WARNING(f"Invalid rows: {len(invalid)}"))
            for x in invalid[:20]:
                self.stdout.write(f"- {x}")
            raise CommandError("Fix invalid rows before seeding")

        if dry_run:
            self.stdout.write(self.style.SUCCESS(
                f"DRY RUN OK: parsed {len(rows)} rows, create {len(to_create)}, update {len(to_update)}"
            ))
            return

        if to_create:
            AiConfiguration.objects.bulk_create(to_create, batch_size=500)
        for obj in to_update:
            obj.save(update_fields=JSON_FIELDS + ["updated_at"])

        self.stdout.write(self.style.SUCCESS(
            f"Seed DONE: created {len(to_create)}, updated {len(to_update)}"
        ))
