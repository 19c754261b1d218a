"""Building blocks of an in-place, stable block merge sort.

Arrays are Python lists of :class:`Item`; a *cache* is a scratch list whose
first ``cache_size`` slots may be overwritten by the operations below.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """A value tagged with its original position, to check sort stability."""

    value: int
    index: int


Comparison = Callable[[Item, Item], bool]


def less_than(item1: Item, item2: Item) -> bool:
    """Order items by value alone."""
    return item1.value < item2.value


@dataclass
class Span:
    """A half-open range ``[start, end)`` within an array."""

    start: int
    end: int

    def length(self) -> int:
        """Number of positions the span covers."""
        return self.end - self.start


def floor_power_of_two(value: int) -> int:
    """Return the largest power of two not above ``value`` (0 for value <= 0)."""
    if value <= 0:
        return 0
    return 1 << (value.bit_length() - 1)


def binary_first(
    array: Sequence[Item], index: int, span: Span, compare: Comparison
) -> int:
    """Index of the first item in ``span`` not ordered before ``array[index]``."""
    start, end = span.start, span.end - 1
    target = array[index]
    while start < end:
        mid = start + (end - start) // 2
        if compare(array[mid], target):
            start = mid + 1
        else:
            end = mid
    if start == span.end - 1 and compare(array[start], target):
        start += 1
    return start


def binary_last(
    array: Sequence[Item], index: int, span: Span, compare: Comparison
) -> int:
    """Index just past the last item in ``span`` not ordered after ``array[index]``."""
    start, end = span.start, span.end - 1
    target = array[index]
    while start < end:
        mid = start + (end - start) // 2
        if not compare(target, array[mid]):
            start = mid + 1
        else:
            end = mid
    if start == span.end - 1 and not compare(target, array[start]):
        start += 1
    return start


def insertion_sort(array: MutableSequence[Item], span: Span, compare: Comparison) -> None:
    """Stable in-place insertion sort of ``span``."""
    for i in range(span.start + 1, span.end):
        temp = array[i]
        j = i
        while j > span.start and compare(temp, array[j - 1]):
            array[j] = array[j - 1]
            j -= 1
        array[j] = temp


def reverse(array: MutableSequence[Item], span: Span) -> None:
    """Reverse the items of ``span`` in place."""
    if span.length() > 1:
        array[span.start : span.end] = array[span.start : span.end][::-1]


def block_swap(
    array: MutableSequence[Item], start1: int, start2: int, block_size: int
) -> None:
    """Swap ``block_size`` items pairwise, one position at a time."""
    for offset in range(block_size):
        first, second = start1 + offset, start2 + offset
        array[first], array[second] = array[second], array[first]


def rotate(
    array: MutableSequence[Item],
    amount: int,
    span: Span,
    cache: MutableSequence[Item],
    cache_size: int,
) -> None:
    """Rotate ``span`` left by ``amount`` (right if negative).

    When the smaller half fits in the first ``cache_size`` slots of
    ``cache`` it is staged there; otherwise three reversals are used.
    """
    if span.length() == 0:
        return
    split = span.start + amount if amount >= 0 else span.end + amount
    range1 = Span(span.start, split)
    range2 = Span(split, span.end)
    len1, len2 = range1.length(), range2.length()

    if len1 <= len2:
        if len1 <= cache_size:
            cache[0:len1] = array[range1.start : range1.end]
            array[range1.start : range1.start + len2] = array[range2.start : range2.end]
            array[range1.start + len2 : range1.start + len2 + len1] = cache[0:len1]
            return
    elif len2 <= cache_size:
        cache[0:len2] = array[range2.start : range2.end]
        array[range2.end - len1 : range2.end] = array[range1.start : range1.end]
        array[range1.start : range1.start + len2] = cache[0:len2]
        return

    reverse(array, range1)
    reverse(array, range2)
    reverse(array, span)


def wiki_merge(
    array: MutableSequence[Item],
    buffer: Span,
    a: Span,
    b: Span,
    compare: Comparison,
    cache: MutableSequence[Item],
    cache_size: int,
) -> None:
    """Merge the A values with the sorted B range, writing from ``a.start``.

    If A fits in the cache, its values are expected in ``cache[0:len(A)]``;
    otherwise they are expected in ``buffer``, whose original contents end up
    back in the buffer, in some order.
    """
    length_a, length_b = a.length(), b.length()

    if length_a <= cache_size:
        a_index, a_last = 0, length_a
        b_index, b_last = b.start, b.end
        insert = a.start
        if length_b > 0 and length_a > 0:
            while True:
                if not compare(array[b_index], cache[a_index]):
                    array[insert] = cache[a_index]
                    a_index += 1
                    insert += 1
                    if a_index == a_last:
                        break
                else:
                    array[insert] = array[b_index]
                    b_index += 1
                    insert += 1
                    if b_index == b_last:
                        break
        remaining = a_last - a_index
        array[insert : insert + remaining] = cache[a_index:a_last]
        return

    a_count = b_count = insert = 0
    if length_b > 0 and length_a > 0:
        while True:
            if not compare(array[b.start + b_count], array[buffer.start + a_count]):
                block_swap(array, a.start + insert, buffer.start + a_count, 1)
                a_count += 1
                insert += 1
                if a_count >= length_a:
                    break
            else:
                block_swap(array, a.start + insert, b.start + b_count, 1)
                b_count += 1
                insert += 1
                if b_count >= length_b:
                    break
    block_swap(array, buffer.start + a_count, a.start + insert, length_a - a_count)