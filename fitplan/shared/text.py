def format_label(value: str) -> str:
    """'chest_triceps' -> 'Chest Triceps'"""
    return " ".join(w[:1].upper() + w[1:] for w in (value or "").split("_"))
