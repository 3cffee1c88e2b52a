"""
JSON Schema Contract Validators

Валидация сериализованных approximate numbers против JSON Schema
(draft 2020-12) approximate_number.json, поставляемой внутри пакета.

Контракт: {"value": number, "delta": number >= 0}, без лишних полей.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

# Каталог схем поставляется внутри пакета (package data)
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

APPROXIMATE_NUMBER_SCHEMA: Final[str] = "approximate_number"


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация схемы schema_dir/<schema_name>.json.

    Результат кэшируется: повторный вызов возвращает тот же dict.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e
    return schema


@lru_cache(maxsize=None)
def _approximate_number_validator() -> Draft202012Validator:
    return Draft202012Validator(load_schema(APPROXIMATE_NUMBER_SCHEMA))


def validate_approximate_number(data: Dict[str, Any]) -> None:
    """
    Валидация approximate_number данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    _approximate_number_validator().validate(data)
