"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидатора approximate_number:
- Загрузка и meta-validation схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints (minimum, additionalProperties)
- Интеграция с Pydantic моделью ApproximateNumber
"""

import json

import pytest
from jsonschema import ValidationError

from approx import ApproximateNumber, new
from approx.core.contracts import (
    APPROXIMATE_NUMBER_SCHEMA,
    SCHEMA_DIR,
    load_schema,
    validate_approximate_number,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_approximate_number():
    """Валидный approximate_number для тестирования."""
    return {"value": 4.2, "delta": 0.3}


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestLoadSchema:
    """Тесты для load_schema"""

    def test_schema_dir_exists(self):
        """Каталог схем поставляется с пакетом"""
        assert SCHEMA_DIR.is_dir()
        assert (SCHEMA_DIR / f"{APPROXIMATE_NUMBER_SCHEMA}.json").is_file()

    def test_load_schema(self):
        """Схема загружается и проходит meta-validation"""
        schema = load_schema(APPROXIMATE_NUMBER_SCHEMA)
        assert schema["title"] == "ApproximateNumber"
        assert schema["required"] == ["value", "delta"]

    def test_load_schema_cached(self):
        """Повторная загрузка возвращает тот же объект"""
        assert load_schema(APPROXIMATE_NUMBER_SCHEMA) is load_schema(APPROXIMATE_NUMBER_SCHEMA)

    def test_missing_schema(self):
        """Несуществующая схема → FileNotFoundError"""
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            load_schema("does_not_exist")

    def test_missing_schema_dir(self, tmp_path):
        """Несуществующий каталог → FileNotFoundError"""
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            load_schema(APPROXIMATE_NUMBER_SCHEMA, tmp_path / "missing")

    def test_invalid_schema(self, tmp_path):
        """Невалидная JSON Schema → ValueError"""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            load_schema("broken", tmp_path)


# =============================================================================
# APPROXIMATE NUMBER CONTRACT
# =============================================================================


class TestApproximateNumberContract:
    """Тесты для approximate_number контракта"""

    def test_valid(self, valid_approximate_number):
        """Валидные данные проходят"""
        validate_approximate_number(valid_approximate_number)

    def test_integers_allowed(self):
        """Целые числа — допустимый JSON number"""
        validate_approximate_number({"value": 10, "delta": 0})

    @pytest.mark.parametrize("field", ["value", "delta"])
    def test_missing_required(self, valid_approximate_number, field):
        """Отсутствие required поля"""
        del valid_approximate_number[field]
        with pytest.raises(ValidationError, match=f"'{field}' is a required property"):
            validate_approximate_number(valid_approximate_number)

    def test_negative_delta(self, valid_approximate_number):
        """delta < 0 нарушает minimum"""
        valid_approximate_number["delta"] = -0.3
        with pytest.raises(ValidationError):
            validate_approximate_number(valid_approximate_number)

    @pytest.mark.parametrize("bad", ["4.2", None, True, [4.2]])
    def test_wrong_type(self, valid_approximate_number, bad):
        """value должен быть числом"""
        valid_approximate_number["value"] = bad
        with pytest.raises(ValidationError):
            validate_approximate_number(valid_approximate_number)

    def test_additional_properties(self, valid_approximate_number):
        """Лишние поля запрещены"""
        valid_approximate_number["unit"] = "cm"
        with pytest.raises(ValidationError):
            validate_approximate_number(valid_approximate_number)

    def test_negative_delta_message(self):
        """Сообщение указывает нарушенное ограничение"""
        with pytest.raises(ValidationError, match="less than the minimum of 0"):
            validate_approximate_number({"value": 1.0, "delta": -1})


# =============================================================================
# ИНТЕГРАЦИЯ С PYDANTIC
# =============================================================================


class TestPydanticIntegration:
    """Интеграция контракта с ApproximateNumber"""

    def test_to_contract_is_valid(self):
        """to_contract() проходит валидацию"""
        data = new(10, -1).to_contract()
        assert data == {"value": 10.0, "delta": 1.0}
        validate_approximate_number(data)

    def test_from_contract(self, valid_approximate_number):
        """from_contract() строит модель"""
        assert ApproximateNumber.from_contract(valid_approximate_number) == new(4.2, 0.3)

    def test_from_contract_rejects_invalid(self):
        """from_contract() отвергает невалидные данные"""
        with pytest.raises(ValidationError):
            ApproximateNumber.from_contract({"value": 1.0, "delta": -1.0})

    def test_json_round_trip(self):
        """JSON → контракт → модель → контракт → JSON"""
        x = new(-3.25, 0.125)
        payload = json.dumps(x.to_contract())
        assert ApproximateNumber.from_contract(json.loads(payload)) == x
