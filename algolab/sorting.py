"""Merge sort and its insertion sort hybrid.

All functions sort ``arr[left..right]`` (inclusive bounds) in place, in
ascending order, and are stable: ties are resolved in favour of the element
that came first. Elements only need to support ``<=`` and ``>``.
"""

from __future__ import annotations

from typing import Any, List


def insertion_sort(arr: List[Any], left: int, right: int) -> None:
    for i in range(left + 1, right + 1):
        key = arr[i]
        j = i - 1
        while j >= left and arr[j] > key:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = key


def merge(arr: List[Any], left: int, mid: int, right: int) -> None:
    """Merge sorted runs ``arr[left..mid]`` and ``arr[mid+1..right]``."""
    left_part = arr[left : mid + 1]
    right_part = arr[mid + 1 : right + 1]
    n1 = len(left_part)
    n2 = len(right_part)

    i = j = 0
    k = left
    while i < n1 and j < n2:
        # <= keeps equal keys from the left run first (stability)
        if left_part[i] <= right_part[j]:
            arr[k] = left_part[i]
            i += 1
        else:
            arr[k] = right_part[j]
            j += 1
        k += 1
    while i < n1:
        arr[k] = left_part[i]
        i += 1
        k += 1
    while j < n2:
        arr[k] = right_part[j]
        j += 1
        k += 1


def merge_sort(arr: List[Any], left: int, right: int) -> None:
    if left < right:
        mid = left + (right - left) // 2
        merge_sort(arr, left, mid)
        merge_sort(arr, mid + 1, right)
        merge(arr, left, mid, right)


def hybrid_merge_sort(arr: List[Any], left: int, right: int, threshold: int) -> None:
    """Merge sort that hands subranges of length <= ``threshold`` to insertion sort.

    ``threshold`` only changes the running time, never the result; 0 and 1
    behave exactly like :func:`merge_sort`.
    """
    if left >= right:
        return
    if right - left + 1 <= threshold:
        insertion_sort(arr, left, right)
        return
    mid = left + (right - left) // 2
    hybrid_merge_sort(arr, left, mid, threshold)
    hybrid_merge_sort(arr, mid + 1, right, threshold)
    merge(arr, left, mid, right)
