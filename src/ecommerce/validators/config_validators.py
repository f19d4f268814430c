from typing import Any


def normalize_choice(value: Any, *, upper: bool = False) -> Any:
    """
    Strip and case-fold a string setting before it is checked against its
    Literal choices ("debug " -> "DEBUG", "POSTGRES" -> "postgres").
    Anything that is not a string is handed to pydantic unchanged.
    """
    if not isinstance(value, str):
        return value
    value = value.strip()
    return value.upper() if upper else value.lower()


def check_page_sizes(default: int, maximum: int) -> None:
    """Raise ValueError unless 1 <= default <= maximum."""
    if default < 1:
        raise ValueError(f"DEFAULT_PAGE_SIZE must be at least 1, got {default}")
    if default > maximum:
        raise ValueError(f"DEFAULT_PAGE_SIZE ({default}) exceeds MAX_PAGE_SIZE ({maximum})")
