"""
JSON Schema контракт сериализованного комплексного числа

Схема complex_value.json поставляется как package data рядом с модулем:
декартова форма {"r": <number>, "i": <number>} без дополнительных полей.
Схема проходит meta-validation (Draft 2020-12) один раз при импорте.
"""

import json
from pathlib import Path
from typing import Any, Final

from jsonschema import Draft202012Validator

COMPLEX_VALUE_SCHEMA_PATH: Final[Path] = Path(__file__).parent / "schema" / "complex_value.json"


def _load_validator(path: Path) -> Draft202012Validator:
    with open(path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


COMPLEX_VALUE_VALIDATOR: Final[Draft202012Validator] = _load_validator(COMPLEX_VALUE_SCHEMA_PATH)


def validate_complex_value(data: dict[str, Any]) -> None:
    """
    Валидация сериализованного комплексного числа.

    Args:
        data: Данные для валидации ({"r": ..., "i": ...})

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    COMPLEX_VALUE_VALIDATOR.validate(data)
