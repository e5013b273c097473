"""
Тесты для k-Nearest Neighbors

Проверяет:
1. Manhattan расстояние
2. Сортировку индексов по расстоянию
3. Голосование и tie-break по наименьшей метке
4. Проверку k, длин векторов и домена меток
5. Классификацию поверх модели TrainingSet
"""

import pytest

from src.classification import (
    classify,
    classify_training_set,
    manhattan_distance,
    sort_indices_by_distance,
)
from src.core.domain import TrainingSet
from src.core.errors import LengthMismatchError, OutOfRangeError


@pytest.fixture
def training_data():
    """Три примера: один класса 0 и два класса 1."""
    return [[1, 2], [2, 3], [3, 4]], [0, 1, 1]


class TestManhattanDistance:
    """Тесты для manhattan_distance"""

    def test_distance(self) -> None:
        assert manhattan_distance([1, 2], [4, 0]) == 5

    def test_zero_distance(self) -> None:
        assert manhattan_distance([3, 3], [3, 3]) == 0

    def test_length_mismatch(self) -> None:
        with pytest.raises(LengthMismatchError):
            manhattan_distance([1, 2], [1])


class TestSortIndices:
    """Тесты для sort_indices_by_distance"""

    def test_indices_follow_keys(self) -> None:
        keys, indices = sort_indices_by_distance([5, 1, 3])
        assert keys == [1, 3, 5]
        assert indices == [1, 2, 0]

    def test_input_not_mutated(self) -> None:
        distances = [5, 1, 3]
        sort_indices_by_distance(distances)
        assert distances == [5, 1, 3]


class TestClassify:
    """Тесты для classify"""

    def test_nearest_neighbour(self, training_data) -> None:
        features, labels = training_data
        assert classify([1, 2], features, labels, k=1) == 0

    def test_majority_vote(self, training_data) -> None:
        """k = n → глобальное большинство"""
        features, labels = training_data
        assert classify([1, 2], features, labels, k=3) == 1

    def test_query_near_other_class(self, training_data) -> None:
        features, labels = training_data
        assert classify([3, 4], features, labels, k=1) == 1

    def test_tie_resolves_to_lowest_label(self) -> None:
        """Равное число голосов → наименьшая метка"""
        assert classify([1], [[0], [2]], [1, 0], k=2) == 0

    def test_k_zero(self, training_data) -> None:
        features, labels = training_data
        with pytest.raises(OutOfRangeError, match="k=0"):
            classify([1, 2], features, labels, k=0)

    def test_k_exceeds_training_set(self, training_data) -> None:
        features, labels = training_data
        with pytest.raises(OutOfRangeError):
            classify([1, 2], features, labels, k=4)

    def test_feature_length_mismatch(self) -> None:
        with pytest.raises(LengthMismatchError, match=r"features\[1\]"):
            classify([1, 2], [[1, 2], [1]], [0, 1], k=1)

    def test_labels_count_mismatch(self, training_data) -> None:
        features, _ = training_data
        with pytest.raises(LengthMismatchError):
            classify([1, 2], features, [0, 1], k=1)

    def test_label_outside_domain(self) -> None:
        with pytest.raises(OutOfRangeError, match="labels"):
            classify([1], [[1], [2]], [0, 300], k=1)

    def test_custom_label_domain(self) -> None:
        """Метка 300 допустима при расширенном домене"""
        assert classify([2], [[1], [2]], [0, 300], k=1, label_domain=512) == 300


class TestClassifyTrainingSet:
    """Тесты для classify_training_set"""

    def test_matches_plain_classify(self, training_data) -> None:
        features, labels = training_data
        training_set = TrainingSet.model_validate(
            {
                "examples": [
                    {"features": f, "label": label}
                    for f, label in zip(features, labels)
                ]
            }
        )
        for k in (1, 2, 3):
            assert classify_training_set([1, 2], training_set, k) == classify(
                [1, 2], features, labels, k
            )
