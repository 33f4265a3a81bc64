def normalize_name(value: str) -> str:
    """Lower-case, trim and collapse inner whitespace."""
    if not value:
        return ""
    return " ".join(str(value).lower().split())
