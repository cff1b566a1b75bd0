import csv
from pathlib import Path
from django.core.management.base import BaseCommand, CommandError
from fitplan.domains.workout.contract import EXPERIENCE_LEVELS, WORKOUT_TYPES
from fitplan.models import Exercise

EQUIPMENT_RULES = [
    ("dumbbell", ["dumbbell"]),
    ("barbell", ["barbell", "deadlift", "bench press"]),
    ("kettlebell", ["kettlebell"]),
    ("cable", ["cable", "pushdown", "pulldown"]),
    ("machine", ["machine", "lever", "leg press"]),
    ("bodyweight", ["push-up", "pull-up", "chin-up", "plank", "burpee", "dip"]),
]

MUSCLE_ALIASES = {
    "waist": "core",
    "abs": "core",
    "abdominals": "core",
    "thigh": "legs",
    "thighs": "legs",
    "quads": "legs",
    "quadriceps": "legs",
    "hamstring": "legs",
    "hamstrings": "legs",
    "glute": "glutes",
    "calf": "calves",
    "upper arms": "arms",
    "bicep": "biceps",
    "tricep": "triceps",
    "shoulder": "shoulders",
    "full-body": "full body",
    "fullbody": "full body",
}


def infer_equipment(name: str) -> str:
    t = (name or "").lower()
    for equip, keys in EQUIPMENT_RULES:
        if any(k in t for k in keys):
            return equip
    return "none"


def normalize_muscle_group(raw: str) -> str:
    """'Thighs, Glute' -> 'legs, glutes'"""
    parts = [p.strip().lower() for p in (raw or "").split(",") if p.strip()]
    out: list[str] = []
    for p in parts:
        m = MUSCLE_ALIASES.get(p, p)
        if m not in out:
            out.append(m)
    return ", ".join(out)


class Command(BaseCommand):
    help = "Import exercises from a CSV file into the exercise library."

    def add_arguments(self, parser):
        parser.add_argument("--csv", required=True, help="Path to exercises.csv")

    def handle(self, *args, **options):
        csv_path = Path(options["csv"])
        if not csv_path.exists():
            raise CommandError(f"CSV not found: {csv_path}")

        created, updated, skipped = 0, 0, 0
        with csv_path.open("r", encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)
            required_cols = {"name", "target_muscle_group", "difficulty", "workout_type"}
            if not required_cols.issubset(set(reader.fieldnames or [])):
                raise CommandError(f"CSV columns must include: {sorted(required_cols)}. Got: {reader.fieldnames}")

            for row in reader:
                name = (row.get("name") or "").strip()
                difficulty = (row.get("difficulty") or "").strip().lower()
                workout_type = (row.get("workout_type") or "").strip().lower()
                if not name or difficulty not in EXPERIENCE_LEVELS or workout_type not in WORKOUT_TYPES:
                    skipped += 1
                    continue

                _, is_created = Exercise.objects.update_or_create(
                    name=name,
                    workout_type=workout_type,
                    defaults={
                        "description": (row.get("description") or "").strip(),
                        "target_muscle_group": normalize_muscle_group(row.get("target_muscle_group") or ""),
                        "equipment": (row.get("equipment") or "").strip() or infer_equipment(name),
                        "difficulty": difficulty,
                        "video_url": (row.get("video_url") or "").strip() or None,
                        "image_url": (row.get("image_url") or "").strip() or None,
                        "instructions": (row.get("instructions") or "").strip(),
                    },
                )
                if is_created:
                    created += 1
                else:
                    updated += 1

        self.stdout.write(self.style.SUCCESS(
            f"Import done. created={created}, updated={updated}, skipped={skipped}"
        ))
