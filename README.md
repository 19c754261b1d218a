# wcetbench

Deterministic building blocks for embedded-style benchmark kernels: a
random generator that gives the same sequence everywhere, a bump-pointer
heap that never frees, the primitives of a stable in-place block merge sort,
and the state and first two charts of a car window-lift controller.

The package has no dependencies beyond the standard library.

## Modules

### `wcetbench.runtime`

* `Random(seed=0)` – linear congruential generator. `seed(new_seed)`
  restarts it (the seed must be an unsigned 32-bit value, otherwise
  `ValueError`); `rand()` returns the next value in `0..RAND_MAX`
  (`RAND_MAX` is 32767).
* `Heap(size, alignment=8)` – a fixed arena handing out `Allocation`
  records (`offset`, `size`).
  * `allocate(size)` reserves a block, padding so the next one stays
    aligned; a non-positive size raises `ValueError`, an exhausted arena
    raises `MemoryError`.
  * `allocate_zeroed(count, size)` does the same and zero-fills the block.
  * `reallocate(allocation, size)` reserves a new block and copies `size`
    bytes from the old one.
  * `free(allocation)` only checks the allocation belongs to the heap.
  * `view(allocation)` returns a writable `memoryview` of the block.
  * `reset()` forgets all allocations.
  * `is_within_limits()` reports whether every request since the last reset
    fit in the arena.
  * `requested` gives the bytes counted so far, padding included.
* `float_eq(expected, actual)` and `double_eq(expected, actual)` – compare
  within `VERIFY_FLOAT_EPS` (1e-5) and `VERIFY_DOUBLE_EPS` (1e-13).

```python
from wcetbench.runtime import Heap, Random

rng = Random(0)
values = [rng.rand() for _ in range(5)]

heap = Heap(64)
block = heap.allocate(10)
heap.view(block)[:3] = b"abc"
assert heap.is_within_limits()
```

### `wcetbench.blockmerge`

Primitives working on Python lists of `Item(value, index)`; the index
records the original position so stability can be checked.

* `less_than(item1, item2)` – orders items by value.
* `Span(start, end)` – a half-open range with `length()`.
* `floor_power_of_two(value)`
* `binary_first(array, index, span, compare)` and
  `binary_last(array, index, span, compare)`
* `insertion_sort(array, span, compare)`
* `reverse(array, span)` and `block_swap(array, start1, start2, block_size)`
* `rotate(array, amount, span, cache, cache_size)` – rotates left by
  `amount` (right if negative), staging the smaller part in `cache` when it
  fits in `cache_size` slots.
* `wiki_merge(array, buffer, a, b, compare, cache, cache_size)` – merges the
  A values (held in the cache, or in `buffer` when A does not fit) with the
  sorted B range.

```python
from wcetbench.blockmerge import Item, Span, insertion_sort, less_than, rotate

items = [Item(v, i) for i, v in enumerate([3, 1, 2, 1])]
insertion_sort(items, Span(0, len(items)), less_than)

cache = list(items)
rotate(items, 1, Span(0, len(items)), cache, len(cache))
```

### `wcetbench.statemate_model`

* `Flag` – positions of the chart's events and activity markers in the
  64-entry flag list.
* `WindowLiftState` – every variable of the window-lift chart, with
  `reset()` (clears flags, entry timestamps and chart states) and
  `interface()` (records entry timestamps and fires scheduled actions that
  are due).

### `wcetbench.statemate_door`

* `child_lock_chart(state)` – one step of the child-lock chart.
* `door_module_chart(state)` – one step of the door-module chart (movement
  control and repeat lock).

Both clear `state.stable` when a transition is taken.

```python
from wcetbench.statemate_door import door_module_chart
from wcetbench.statemate_model import Flag, WindowLiftState

state = WindowLiftState()
state.reset()
state.bits[Flag.ACTIVE_TUERMODUL] = 1
door_module_chart(state)
assert state.b_state == 2
```

## What the package does not do

* There is no command-line program; everything is used as a library.
* There is no benchmark runner: no repeat/warm-up/verify harness and no
  ready-made kernels built on these pieces.
* The block merge sort is provided as primitives only; there is no
  top-level sort function.
* The window-lift model covers the state, its timer interface and the
  child-lock and door-module charts; the anti-trap and block-detection
  charts, and a loop that steps the whole controller until it is stable,
  are not included.

## Tests

```
pip install ".[test]"
pytest
```