"""Edit distance between two sequences with configurable operation costs."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def generalized_levenshtein_distance_custom_cost(
    source: Sequence[Any],
    target: Sequence[Any],
    insert_cost: Any,
    delete_cost: Any,
    get_delta_cost: Callable[[Any, Any], Any],
) -> Any:
    """Return the edit distance from ``source`` to ``target``.

    ``get_delta_cost(a, b)`` gives the cost of replacing ``a`` with ``b``;
    a cost of zero means the elements match.  The shorter sequence is always
    used for the working row, swapping insert and delete costs as needed.
    """
    if len(source) > len(target):
        return generalized_levenshtein_distance_custom_cost(
            target, source, delete_cost, insert_cost, get_delta_cost
        )

    row = [0 * insert_cost]
    for _ in source:
        row.append(row[-1] + delete_cost)

    for target_item in target:
        previous_diagonal = row[0]
        row[0] += insert_cost
        for i, source_item in enumerate(source, start=1):
            saved = row[i]
            delta_cost = get_delta_cost(source_item, target_item)
            if delta_cost == 0:
                row[i] = previous_diagonal
            else:
                row[i] = min(
                    row[i - 1] + delete_cost,
                    row[i] + insert_cost,
                    previous_diagonal + delta_cost,
                )
            previous_diagonal = saved

    return row[-1]


def generalized_levenshtein_distance(
    source: Sequence[Any],
    target: Sequence[Any],
    insert_cost: Any = 1,
    delete_cost: Any = 1,
    replace_cost: Any = 1,
) -> Any:
    """Return the edit distance using fixed insert, delete and replace costs."""

    def delta_cost(source_item: Any, target_item: Any) -> Any:
        return 0 if source_item == target_item else replace_cost

    return generalized_levenshtein_distance_custom_cost(
        source, target, insert_cost, delete_cost, delta_cost
    )