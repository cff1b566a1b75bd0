from django.core.management.base import BaseCommand, CommandError

from fitplan.engine import generate_nutrition_plan, generate_workout_plan


class Command(BaseCommand):
    help = "Generate a workout and/or nutrition plan for a user."

    def add_arguments(self, parser):
        parser.add_argument("--user-id", type=int, required=True)
        parser.add_argument("--kind", choices=["workout", "nutrition", "both"], default="both")
        parser.add_argument("--seed", type=int, default=None)

    def handle(self, *args, **options):
        user_id = options["user_id"]
        kind = options["kind"]
        seed = options["seed"]

        outcomes = {}
        if kind in ("workout", "both"):
            outcomes["workout"] = generate_workout_plan(user_id, seed=seed)
        if kind in ("nutrition", "both"):
            outcomes["nutrition"] = generate_nutrition_plan(user_id, seed=seed)

        for name, ok in outcomes.items():
            line = f"{name} plan for user {user_id}: {'generated' if ok else 'FAILED'}"
            self.stdout.write(self.style.SUCCESS(line) if ok else self.style.ERROR(line))

        if not all(outcomes.values()):
            raise CommandError("Plan generation failed, see log for details")
