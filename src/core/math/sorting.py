"""
Partition-Exchange Sort — единая in-place сортировка ядра

Одна параметризованная реализация quicksort для двух сценариев:
- сортировка значений (statistics.sort, median)
- сортировка ключей с синхронной перестановкой параллельных массивов
  (индексы соседей в knn)

Правило опорного элемента фиксировано: средний элемент текущего раздела
keys[left + (right - left) // 2]. Порядок равных ключей определяется только
этим правилом и схемой обмена, поэтому результат детерминирован (но не stable).
"""

from typing import Callable, MutableSequence, Optional

SwapFn = Callable[[int, int], None]


def partition_exchange_sort(
    keys: MutableSequence[int],
    swap: Optional[SwapFn] = None,
) -> None:
    """
    In-place сортировка keys по возрастанию (схема Хоара).

    Разделы обрабатываются через явный стек вместо рекурсии: разделы
    не пересекаются, поэтому результат совпадает с рекурсивным вариантом,
    а глубина не ограничена recursion limit интерпретатора.

    Args:
        keys: Ключи сортировки (мутируются)
        swap: Callback swap(i, j). ДОЛЖЕН переставлять keys[i] и keys[j]
              вместе со всеми параллельными массивами. По умолчанию
              переставляет только keys.
    """
    if swap is None:

        def swap(i: int, j: int) -> None:
            keys[i], keys[j] = keys[j], keys[i]

    if len(keys) < 2:
        return

    stack = [(0, len(keys) - 1)]
    while stack:
        left, right = stack.pop()
        i, j = left, right
        pivot = keys[left + (right - left) // 2]

        while i <= j:
            while keys[i] < pivot:
                i += 1
            while pivot < keys[j]:
                j -= 1
            if i <= j:
                swap(i, j)
                i += 1
                j -= 1

        if left < j:
            stack.append((left, j))
        if i < right:
            stack.append((i, right))
