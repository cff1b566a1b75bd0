# fitplan/domains/nutrition/contract.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from fitplan.domains.goals import GoalCategory


# ============================================================
# Energy constants
# ============================================================

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9

MIN_CARBS_GRAMS = 20

# Mifflin-St Jeor sex constant
BMR_MALE_OFFSET = 5
BMR_OTHER_OFFSET = -161

SEDENTARY_MULTIPLIER = 1.2

# Substring of the activity level -> multiplier; first match wins
ACTIVITY_MULTIPLIERS: Tuple[Tuple[str, float], ...] = (
    ("lightly", 1.375),
    ("moderate", 1.55),
    ("very", 1.725),
    ("extra", 1.9),
)


@dataclass(frozen=True)
class GoalNutritionPolicy:
    calorie_factor: float
    protein_g_per_kg: float
    fat_g_per_kg: float
    meals_per_day: int


GOAL_POLICIES: Dict[GoalCategory, GoalNutritionPolicy] = {
    GoalCategory.WEIGHT_LOSS: GoalNutritionPolicy(0.8, 2.0, 0.8, 4),
    GoalCategory.MUSCLE_GAIN: GoalNutritionPolicy(1.1, 2.2, 1.0, 5),
    GoalCategory.STRENGTH: GoalNutritionPolicy(1.15, 2.0, 1.0, 5),
    GoalCategory.ENDURANCE: GoalNutritionPolicy(1.05, 1.6, 0.8, 5),
    GoalCategory.GENERAL: GoalNutritionPolicy(1.0, 1.6, 0.8, 3),
}

BEGINNER_MAX_MEALS = 4
ADVANCED_MIN_MEALS = 4


# ============================================================
# Meal distribution: meals per day -> ordered (slot, percent of daily total)
# ============================================================

MEAL_DISTRIBUTIONS: Dict[int, Tuple[Tuple[str, int], ...]] = {
    3: (("breakfast", 30), ("lunch", 40), ("dinner", 30)),
    4: (("breakfast", 25), ("lunch", 30), ("snack", 15), ("dinner", 30)),
    5: (
        ("breakfast", 20),
        ("morning_snack", 10),
        ("lunch", 30),
        ("afternoon_snack", 10),
        ("dinner", 30),
    ),
    6: (
        ("breakfast", 20),
        ("morning_snack", 10),
        ("lunch", 25),
        ("afternoon_snack", 10),
        ("dinner", 25),
        ("evening_snack", 10),
    ),
}
DEFAULT_MEALS_PER_DAY = 3


def meal_distribution(meals_per_day: int) -> Tuple[Tuple[str, int], ...]:
    return MEAL_DISTRIBUTIONS.get(meals_per_day, MEAL_DISTRIBUTIONS[DEFAULT_MEALS_PER_DAY])


# ============================================================
# Meal templates: slot -> (name, description, recipe)
# ============================================================

MealTemplate = Tuple[str, str, str]

FALLBACK_SLOT = "snack"

MEAL_TEMPLATES: Dict[str, Tuple[MealTemplate, ...]] = {
    "breakfast": (
        (
            "High Protein Breakfast Bowl",
            "Protein-packed breakfast to start your day right",
            "Mix Greek yogurt, protein powder, berries, and nuts. Top with chia seeds and a drizzle of honey.",
        ),
        (
            "Power Oatmeal",
            "Complex carbs with added protein for sustained energy",
            "Cook rolled oats with milk, add a scoop of protein powder, banana slices, "
            "and a tablespoon of peanut butter.",
        ),
        (
            "Veggie Egg Scramble",
            "Protein-rich eggs with vegetables for micronutrients",
            "Scramble eggs with spinach, tomatoes, and bell peppers. Serve with a slice of whole grain toast.",
        ),
    ),
    "lunch": (
        (
            "Lean Protein Bowl",
            "Balanced meal with lean protein and complex carbs",
            "Grilled chicken breast, brown rice, steamed broccoli, and avocado slices. "
            "Season with olive oil and herbs.",
        ),
        (
            "Power Salad",
            "Nutrient-dense salad with lean protein",
            "Mix spinach, grilled chicken, quinoa, cherry tomatoes, cucumber, and bell peppers. "
            "Dress with olive oil and lemon juice.",
        ),
        (
            "Whole Grain Wrap",
            "Portable balanced meal with whole grains",
            "Whole grain wrap filled with turkey breast, hummus, spinach, grated carrots, "
            "and a sprinkle of feta cheese.",
        ),
    ),
    "dinner": (
        (
            "Baked Fish with Vegetables",
            "Lean protein with fiber-rich vegetables",
            "Bake salmon with lemon, serve with roasted sweet potatoes and steamed asparagus.",
        ),
        (
            "Lean Stir Fry",
            "High protein stir fry with plenty of vegetables",
            "Stir fry lean beef strips with broccoli, snap peas, bell peppers, and carrots. "
            "Serve over brown rice or quinoa.",
        ),
        (
            "Hearty Protein Bowl",
            "Complete meal with balanced macronutrients",
            "Combine grilled chicken, black beans, brown rice, roasted vegetables, avocado, "
            "and a dollop of Greek yogurt.",
        ),
    ),
    "snack": (
        (
            "Protein Smoothie",
            "Quick protein boost",
            "Blend protein powder, banana, spinach, almond milk, and a tablespoon of almond butter.",
        ),
        (
            "Greek Yogurt Parfait",
            "Protein-rich snack with healthy carbs",
            "Layer Greek yogurt with berries and a sprinkle of granola.",
        ),
        (
            "Protein Energy Bites",
            "Portable balanced snack",
            "Mix oats, protein powder, peanut butter, honey, and mini chocolate chips. "
            "Roll into balls and refrigerate.",
        ),
    ),
    "morning_snack": (
        ("Fruit and Nuts", "Simple energizing snack", "An apple with a small handful of almonds."),
        (
            "Protein Bar",
            "Convenient protein source",
            "Homemade protein bar with oats, protein powder, honey, and dried fruits.",
        ),
    ),
    "afternoon_snack": (
        (
            "Vegetable Sticks with Hummus",
            "Crunchy low-calorie snack with protein",
            "Carrot, celery, and bell pepper sticks with 2 tablespoons of hummus.",
        ),
        (
            "Cottage Cheese with Fruit",
            "Protein-rich snack with natural sugars",
            "Cottage cheese topped with pineapple chunks or berries.",
        ),
    ),
    "evening_snack": (
        (
            "Casein Protein Shake",
            "Slow-digesting protein for overnight recovery",
            "Mix casein protein powder with almond milk and a teaspoon of almond butter.",
        ),
        (
            "Greek Yogurt with Honey",
            "Light protein-rich snack",
            "Greek yogurt with a teaspoon of honey and a sprinkle of cinnamon.",
        ),
    ),
}


# ============================================================
# Dietary restrictions
# ============================================================

@dataclass(frozen=True)
class RestrictionRule:
    triggers: Tuple[str, ...]
    label: str
    # (pattern, replacement); only the first occurrence of each pattern is replaced
    substitutions: Tuple[Tuple[str, str], ...]


_MEAT = r"chicken|beef|turkey|fish|salmon"

RESTRICTION_RULES: Tuple[RestrictionRule, ...] = (
    RestrictionRule(("vegetarian",), "Vegetarian", ((_MEAT, "tofu or tempeh"),)),
    RestrictionRule(
        ("vegan",),
        "Vegan",
        (
            (_MEAT, "tofu or tempeh"),
            (r"greek yogurt|yogurt", "coconut yogurt"),
            (r"milk", "almond milk"),
            (r"cheese", "nutritional yeast"),
        ),
    ),
    RestrictionRule(
        ("gluten",),
        "Gluten-Free",
        (
            (r"whole grain bread|bread", "gluten-free bread"),
            (r"whole grain wrap|wrap", "gluten-free wrap"),
            (r"oats", "gluten-free oats"),
        ),
    ),
    RestrictionRule(
        ("lactose", "dairy"),
        "Dairy-Free",
        (
            (r"greek yogurt|yogurt", "coconut yogurt"),
            (r"milk", "almond milk"),
            (r"cheese", "dairy-free cheese"),
        ),
    ),
)

NO_RESTRICTIONS = "None"


# ============================================================
# Goal sentences appended to meal descriptions
# ============================================================

GOAL_MEAL_NOTES: Dict[GoalCategory, str] = {
    GoalCategory.WEIGHT_LOSS: "Calorie-controlled for weight management.",
    GoalCategory.MUSCLE_GAIN: "Protein-rich to support muscle growth.",
    GoalCategory.STRENGTH: "Balanced nutrition for strength development.",
    GoalCategory.ENDURANCE: "Carb-focused for endurance training.",
}
