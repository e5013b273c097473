"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидаторов входных payload:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Запрет дополнительных полей
- Выбор наиболее релевантной ошибки и форматирование нарушений
"""

import json

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    CONTRACT_NAMES,
    PayloadContract,
    get_contract,
    read_schema,
    validate_complex_sequence,
    validate_series,
    validate_training_set,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_series():
    """Валидный series payload."""
    return {"values": [1, 2, 3, 5, 8], "scale": 1}


@pytest.fixture
def valid_training_set():
    """Валидный training_set payload."""
    return {
        "examples": [
            {"features": [1, 2], "label": 0},
            {"features": [3, 4], "label": 1},
        ]
    }


# =============================================================================
# PAYLOAD CONTRACT
# =============================================================================


class TestPayloadContract:
    """Тесты для read_schema / PayloadContract / get_contract"""

    @pytest.mark.parametrize("name", CONTRACT_NAMES)
    def test_schemas_load(self, name: str) -> None:
        """Все схемы пакета загружаются и проходят мета-валидацию"""
        contract = get_contract(name)
        assert contract.name == name
        assert contract.schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_contract_cached(self) -> None:
        assert get_contract("series") is get_contract("series")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            PayloadContract("does_not_exist")

    def test_invalid_schema(self, tmp_path) -> None:
        path = tmp_path / "broken.json"
        path.write_text(json.dumps({"type": "no-such-type"}), encoding="utf-8")
        with pytest.raises(ValueError, match="broken.json"):
            read_schema(path)

    def test_custom_schema_dir(self, tmp_path) -> None:
        (tmp_path / "flag.json").write_text(json.dumps({"type": "boolean"}), encoding="utf-8")
        contract = PayloadContract("flag", schema_dir=tmp_path)
        assert contract.accepts(True)
        assert not contract.accepts(1)


# =============================================================================
# SERIES
# =============================================================================


class TestSeriesContract:
    """Тесты для series контракта"""

    def test_valid(self, valid_series) -> None:
        validate_series(valid_series)

    def test_scale_optional(self) -> None:
        validate_series({"values": [0]})

    def test_missing_values(self) -> None:
        with pytest.raises(ValidationError, match="'values' is a required property"):
            validate_series({"scale": 1})

    def test_empty_values(self) -> None:
        with pytest.raises(ValidationError):
            validate_series({"values": []})

    def test_negative_value(self) -> None:
        with pytest.raises(ValidationError):
            validate_series({"values": [1, -1]})

    def test_float_value(self) -> None:
        with pytest.raises(ValidationError):
            validate_series({"values": [1, 2.5]})

    def test_additional_property(self, valid_series) -> None:
        valid_series["unit"] = "usd"
        with pytest.raises(ValidationError):
            validate_series(valid_series)

    def test_errors_reports_all(self) -> None:
        errors = get_contract("series").errors({"values": [-1, -2], "scale": 0})
        assert len(errors) == 3

    def test_messages_carry_payload_path(self) -> None:
        messages = get_contract("series").messages({"values": [1, -2], "scale": 0})
        assert messages == [
            "$/scale: 0 is less than the minimum of 1",
            "$/values/1: -2 is less than the minimum of 0",
        ]

    def test_messages_root_violation(self) -> None:
        assert get_contract("series").messages({"scale": 1}) == [
            "$: 'values' is a required property"
        ]

    def test_shallowest_violation_raised(self, valid_series) -> None:
        """Из нескольких нарушений поднимается ошибка верхнего уровня"""
        valid_series["values"] = [1, -2]
        valid_series["unit"] = "usd"
        with pytest.raises(ValidationError, match="Additional properties"):
            validate_series(valid_series)


# =============================================================================
# TRAINING SET
# =============================================================================


class TestTrainingSetContract:
    """Тесты для training_set контракта"""

    def test_valid(self, valid_training_set) -> None:
        validate_training_set(valid_training_set)
        assert get_contract("training_set").accepts(valid_training_set)

    def test_missing_label(self) -> None:
        with pytest.raises(ValidationError):
            validate_training_set({"examples": [{"features": [1]}]})

    def test_negative_label(self) -> None:
        with pytest.raises(ValidationError):
            validate_training_set({"examples": [{"features": [1], "label": -1}]})

    def test_empty_examples(self) -> None:
        assert not get_contract("training_set").accepts({"examples": []})


# =============================================================================
# COMPLEX SEQUENCE
# =============================================================================


class TestComplexSequenceContract:
    """Тесты для complex_sequence контракта"""

    def test_valid_signed_values(self) -> None:
        validate_complex_sequence({"real": [1, -2, 3, -4], "imag": [0, 0, 0, 0]})

    def test_missing_imag(self) -> None:
        with pytest.raises(ValidationError):
            validate_complex_sequence({"real": [1, 2]})

    def test_non_integer(self) -> None:
        assert not get_contract("complex_sequence").accepts({"real": ["1"], "imag": [0]})
