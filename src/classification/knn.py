"""
k-Nearest Neighbors — классификация голосованием k ближайших примеров

Алгоритм:
1. Manhattan (L1) расстояние от query до каждого вектора признаков
2. Сортировка индексов примеров по расстоянию (partition-exchange sort
   с синхронной перестановкой массивов distances/indices)
3. Подсчёт меток первых k индексов в ограниченном домене [0, label_domain)
4. Наиболее частая метка; при равенстве — наименьшая метка

Масштаб: признаки и расстояния — сырые целые uint256.
"""

import logging
from typing import Final, Sequence

from src.core.domain.series import TrainingSet
from src.core.errors import LengthMismatchError, OutOfRangeError
from src.core.math.checked import abs_diff, checked_add, ensure_integer, ensure_series
from src.core.math.sorting import partition_exchange_sort

logger = logging.getLogger(__name__)

# Размер домена меток по умолчанию: метки 0..255
DEFAULT_LABEL_DOMAIN: Final[int] = 256


def manhattan_distance(a: Sequence[int], b: Sequence[int]) -> int:
    """
    L1 расстояние Σ|a[i] - b[i]|.

    Raises:
        LengthMismatchError: Если векторы разной длины
    """
    if len(a) != len(b):
        raise LengthMismatchError(
            f"manhattan_distance: vector lengths differ ({len(a)} != {len(b)})"
        )

    total = 0
    for x, y in zip(a, b):
        total = checked_add(total, abs_diff(x, y))
    return total


def sort_indices_by_distance(distances: Sequence[int]) -> tuple[list[int], list[int]]:
    """
    Перестановка индексов, упорядочивающая расстояния по возрастанию.

    Returns:
        (sorted_distances, indices): indices[r] — исходный индекс примера
        с r-м по величине расстоянием
    """
    keys = ensure_series(distances, "distances")
    indices = list(range(len(keys)))

    def swap(i: int, j: int) -> None:
        keys[i], keys[j] = keys[j], keys[i]
        indices[i], indices[j] = indices[j], indices[i]

    partition_exchange_sort(keys, swap)
    return keys, indices


def classify(
    query: Sequence[int],
    features: Sequence[Sequence[int]],
    labels: Sequence[int],
    k: int,
    label_domain: int = DEFAULT_LABEL_DOMAIN,
) -> int:
    """
    Метка query по большинству среди k ближайших примеров.

    Args:
        query: Вектор признаков для классификации
        features: Векторы признаков обучающей выборки
        labels: Метки обучающей выборки (параллельно features)
        k: Количество соседей (1 <= k <= len(features))
        label_domain: Метки обязаны лежать в [0, label_domain)

    Returns:
        Наиболее частая метка среди k ближайших (при равенстве — наименьшая)

    Raises:
        LengthMismatchError: features/labels разной длины или вектор
            признаков не совпадает по длине с query
        OutOfRangeError: k вне [1, len(features)] или метка вне домена

    Examples:
        >>> classify([1, 2], [[1, 2], [2, 3], [3, 4]], [0, 1, 1], k=1)
        0
        >>> classify([1, 2], [[1, 2], [2, 3], [3, 4]], [0, 1, 1], k=3)
        1
    """
    point = ensure_series(query, "query")
    k = ensure_integer(k, "k")
    label_domain = ensure_integer(label_domain, "label_domain")

    if len(features) != len(labels):
        raise LengthMismatchError(
            f"classify: {len(features)} feature vectors but {len(labels)} labels"
        )
    if k < 1 or k > len(features):
        raise OutOfRangeError(
            f"classify: k={k} outside [1, {len(features)}] training examples"
        )

    distances = []
    for index, vector in enumerate(features):
        example = ensure_series(vector, f"features[{index}]")
        if len(example) != len(point):
            raise LengthMismatchError(
                f"classify: features[{index}] has length {len(example)}, "
                f"query has length {len(point)}"
            )
        distances.append(manhattan_distance(point, example))

    for index, label in enumerate(labels):
        ensure_integer(label, f"labels[{index}]")
        if not 0 <= label < label_domain:
            raise OutOfRangeError(
                f"classify: labels[{index}]={label} outside [0, {label_domain})"
            )

    _, order = sort_indices_by_distance(distances)

    counts = [0] * label_domain
    for index in order[:k]:
        counts[labels[index]] += 1

    best_label = 0
    best_count = 0
    for label, count in enumerate(counts):
        if count > best_count:
            best_count = count
            best_label = label

    logger.debug(
        "kNN k=%d over %d examples -> label=%d (%d votes)",
        k,
        len(features),
        best_label,
        best_count,
    )
    return best_label


def classify_training_set(
    query: Sequence[int],
    training_set: TrainingSet,
    k: int,
    label_domain: int = DEFAULT_LABEL_DOMAIN,
) -> int:
    """classify() над моделью TrainingSet."""
    return classify(query, training_set.features, training_set.labels, k, label_domain)
