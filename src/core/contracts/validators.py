"""
JSON Schema Contract Validators

Входные JSON payload недоверенные: их структура проверяется здесь, до
построения объектов домена, а арифметические домены — в src.core.math.checked.

Каждому виду payload соответствует один PayloadContract (Draft 2020-12):

- series            → Series.from_payload (src.core.domain.series)
- training_set      → TrainingSet.from_payload (src.core.domain.series)
- complex_sequence  → ComplexSequence.from_payload (src.spectral.fft)

Ошибка контракта — jsonschema.ValidationError; из нескольких нарушений
поднимается наиболее релевантное (jsonschema.exceptions.best_match).
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Схемы устанавливаются как package data рядом с модулем
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

CONTRACT_NAMES: Final[tuple[str, ...]] = ("series", "training_set", "complex_sequence")


def read_schema(path: Path) -> Dict[str, Any]:
    """
    Чтение и мета-валидация одного файла схемы.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    if not path.exists():
        raise FileNotFoundError(f"Schema not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {path.name}: {e}") from e
    return schema


# =============================================================================
# PAYLOAD CONTRACT
# =============================================================================


class PayloadContract:
    """
    Контракт одного вида payload: схема и её скомпилированный валидатор.

    Args:
        name: Имя схемы без расширения (например, 'series')
        schema_dir: Каталог схем (default: schema/ пакета)
    """

    def __init__(self, name: str, schema_dir: Path = SCHEMA_DIR):
        self.name = name
        self.schema = read_schema(schema_dir / f"{name}.json")
        self._validator = Draft202012Validator(self.schema)

    def accepts(self, data: Any) -> bool:
        return self._validator.is_valid(data)

    def errors(self, data: Any) -> List[ValidationError]:
        """Все нарушения, упорядоченные по пути внутри payload."""
        return sorted(
            self._validator.iter_errors(data),
            key=lambda error: [str(part) for part in error.absolute_path],
        )

    def messages(self, data: Any) -> List[str]:
        """Нарушения в виде 'путь: сообщение'; корень payload обозначается '$'."""
        return [
            "/".join(["$", *(str(part) for part in error.absolute_path)]) + f": {error.message}"
            for error in self.errors(data)
        ]

    def check(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантное нарушение контракта
        """
        error = best_match(self._validator.iter_errors(data))
        if error is not None:
            logger.debug("Payload rejected by %s contract: %s", self.name, error.message)
            raise error


@lru_cache(maxsize=None)
def get_contract(name: str) -> PayloadContract:
    """Контракт из каталога пакета; схема читается один раз на процесс."""
    return PayloadContract(name)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_series(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют series.json
    """
    get_contract("series").check(data)


def validate_training_set(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют training_set.json
    """
    get_contract("training_set").check(data)


def validate_complex_sequence(data: Dict[str, Any]) -> None:
    """
    Равенство длин real/imag и степень двойки схемой не выражаются:
    первое проверяет ComplexSequence, второе сам fft.

    Raises:
        ValidationError: Если данные не соответствуют complex_sequence.json
    """
    get_contract("complex_sequence").check(data)
