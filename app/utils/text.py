import unicodedata


def fold(value: str) -> str:
    """Lower-case and strip accents so "Thiès" and "thies" compare equal."""
    decomposed = unicodedata.normalize("NFKD", value.strip().lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))
