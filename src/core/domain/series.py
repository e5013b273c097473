"""
Series value objects — Window, ScaledValue, Series, TrainingSet

Immutable Pydantic модели, которыми обмениваются слои ядра.
Операции ядра принимают серии как обычные последовательности int; модели описывают
то, что несёт дополнительный контракт (масштаб, границы окна, размеченные
примеры классификатора).
"""

from typing import Annotated, Any

from pydantic import BaseModel, Field, StrictInt, model_validator

from src.core.contracts.validators import validate_series, validate_training_set
from src.core.errors import OutOfRangeError
from src.core.math import statistics
from src.core.math.checked import FIXED_POINT_UNIT, INT256_MAX, INT256_MIN, UINT256_MAX

UInt256 = Annotated[StrictInt, Field(ge=0, le=UINT256_MAX)]
Int256 = Annotated[StrictInt, Field(ge=INT256_MIN, le=INT256_MAX)]


# =============================================================================
# WINDOW
# =============================================================================


class Window(BaseModel):
    """
    Непрерывный под-диапазон серии [start, start + size).

    Окно никогда не заворачивается и не выходит за границу серии;
    проверка границ выполняется в `bounds`, так как длина серии
    известна только в момент применения.
    """

    start: StrictInt = Field(..., ge=0, description="Индекс первого элемента окна")
    size: StrictInt = Field(..., ge=1, description="Количество элементов в окне")

    model_config = {"frozen": True}

    @property
    def stop(self) -> int:
        return self.start + self.size

    def bounds(self, length: int) -> tuple[int, int]:
        """
        Границы окна для серии длины length.

        Raises:
            OutOfRangeError: Если окно выходит за конец серии
        """
        if self.stop > length:
            raise OutOfRangeError(
                f"window [{self.start}, {self.stop}) exceeds series length {length}"
            )
        return self.start, self.stop


# =============================================================================
# SCALED VALUE
# =============================================================================


class ScaledValue(BaseModel):
    """
    Целое value, представляющее вещественное value / scale.

    Масштаб не унифицирован между операциями: корреляции и EMA multiplier
    возвращают значения в масштабе FIXED_POINT_UNIT, статистики ядра — сырые
    целые. Модель делает масштаб явной частью результата.
    """

    value: Int256 = Field(..., description="Масштабированное целое значение")
    scale: StrictInt = Field(FIXED_POINT_UNIT, gt=0, description="Делитель масштаба")

    model_config = {"frozen": True}

    def rescale(self, scale: int) -> "ScaledValue":
        """Перевод в другой масштаб с усечением к нулю."""
        magnitude = abs(self.value) * scale // self.scale
        return ScaledValue(value=-magnitude if self.value < 0 else magnitude, scale=scale)


# =============================================================================
# SERIES
# =============================================================================


class Series(BaseModel):
    """
    Упорядоченная серия uint256 со своим масштабом: value / scale.

    scale = 1 для сырых целых. Статистики считаются над целыми значениями,
    масштаб переносится в результат как ScaledValue.
    """

    values: tuple[UInt256, ...] = Field(..., min_length=1, description="Значения серии")
    scale: StrictInt = Field(1, gt=0, description="Делитель масштаба")

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.values)

    def mean(self) -> ScaledValue:
        """Усечённое среднее в масштабе серии."""
        return ScaledValue(value=statistics.mean(self.values), scale=self.scale)

    def median(self) -> ScaledValue:
        return ScaledValue(value=statistics.median(self.values), scale=self.scale)

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "Series":
        """
        Построение из JSON payload с предварительной проверкой контракта.

        Raises:
            jsonschema.ValidationError: Payload не соответствует series.json
        """
        validate_series(data)
        return cls.model_validate(data)


# =============================================================================
# TRAINING SET
# =============================================================================


class TrainingExample(BaseModel):
    """Один размеченный пример: вектор признаков и метка класса."""

    features: tuple[UInt256, ...] = Field(..., min_length=1, description="Вектор признаков")
    label: StrictInt = Field(..., ge=0, description="Метка класса")

    model_config = {"frozen": True}


class TrainingSet(BaseModel):
    """
    Обучающая выборка k-NN: индекс примера → (features, label).

    Все векторы признаков обязаны иметь одинаковую длину.
    """

    examples: tuple[TrainingExample, ...] = Field(..., min_length=1)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_feature_lengths(self) -> "TrainingSet":
        """Проверка, что все векторы признаков одной длины"""
        width = len(self.examples[0].features)
        for index, example in enumerate(self.examples):
            if len(example.features) != width:
                raise ValueError(
                    f"example {index} has {len(example.features)} features, expected {width}"
                )
        return self

    @property
    def features(self) -> list[tuple[int, ...]]:
        return [example.features for example in self.examples]

    @property
    def labels(self) -> list[int]:
        return [example.label for example in self.examples]

    def __len__(self) -> int:
        return len(self.examples)

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "TrainingSet":
        """
        Построение из JSON payload с предварительной проверкой контракта.

        Raises:
            jsonschema.ValidationError: Payload не соответствует training_set.json
        """
        validate_training_set(data)
        return cls.model_validate(data)
