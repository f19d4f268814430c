import re
from typing import Iterable

# "sp_Brands", "dbo.sp_Brands"
_PROCEDURE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")
_PARAMETER_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def is_valid_procedure_name(name: str | None) -> bool:
    """
    Procedure names are interpolated into the statement text, so only plain
    (optionally schema-qualified) identifiers are accepted.
    """
    return bool(name) and _PROCEDURE_NAME.match(name) is not None


def find_invalid_parameter_names(names: Iterable[str]) -> list[str]:
    """Return the parameter keys that are not plain identifiers."""
    return [n for n in names if not isinstance(n, str) or _PARAMETER_NAME.match(n) is None]
