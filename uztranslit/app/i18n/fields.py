"""Companion transliterations for record fields (title, content, ...)."""
from typing import Any, Dict, Iterable, Mapping, Optional

from ..exceptions import ValidationError
from .translit import DirectionArg, Transliterator, default_transliterator


def transliterate_fields(
    record: Mapping[str, Any],
    fields: Iterable[str],
    direction: DirectionArg = None,
    prefix: str = "translit_",
    transliterator: Optional[Transliterator] = None,
) -> Dict[str, Any]:
    """
    Add a transliterated companion for each named field of a record.

    Args:
        record: Source mapping, left unmodified
        fields: Names of the text fields to transliterate
        direction: Fixed direction; each field is detected on its own when omitted
        prefix: Prefix for the companion keys
        transliterator: Engine to use instead of the default

    Returns:
        Copy of record with '<prefix><field>' keys added

    Raises:
        ValidationError: a named field holds a non-string value
    """
    engine = transliterator or default_transliterator
    result = dict(record)

    for name in fields:
        value = record.get(name)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ValidationError(
                f"Field '{name}' must be a string, got {type(value).__name__}",
                code="field",
            )
        result[f"{prefix}{name}"] = engine.transliterate(value, direction)

    return result
