"""
ArrayList -- growable array list over a fixed-length NumPy block.

The list owns a backing block of `capacity` slots of which the first `size`
are logically present. Appending to a full list doubles the capacity and
copies the existing prefix into the new block. Indexed insert shifts the tail
one slot right (walking from the high end down) and indexed remove shifts it
one slot left (walking from the low end up), so untouched elements keep their
relative order. Capacity never shrinks.

Valid index ranges:
    insert: 0 <= index <= size
    get, set, remove: 0 <= index < size
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)

INITIAL_CAPACITY = 10

_MISSING = object()


class IndexOutOfRangeError(IndexError):
    """Raised when an index falls outside the valid range of an operation."""

    def __init__(self, operation, index, size):
        super().__init__(
            f"ArrayList.{operation}: index out of range "
            f"(index {index}, size {size})"
        )
        self.index = index
        self.size = size


class ArrayList:
    """Dynamic array list with capacity doubling.

    Args:
        initial_capacity: Number of slots allocated up front. Must be positive.
        dtype: Element dtype of the backing block. The default `object` stores
            arbitrary Python values; a concrete dtype gives a typed buffer.
            A typed list rejects values it cannot hold exactly with TypeError
            and hands elements back as plain Python scalars.
    """

    def __init__(self, initial_capacity=INITIAL_CAPACITY, dtype=object):
        if not isinstance(initial_capacity, int) or initial_capacity <= 0:
            raise ValueError("initial_capacity must be a positive integer")
        self._dtype = np.dtype(dtype)
        self._capacity = initial_capacity
        self._size = 0
        self._data = np.empty(initial_capacity, dtype=self._dtype)

    def _check_index(self, operation, index, upper):
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise TypeError(f"ArrayList.{operation}: index must be an integer")
        index = int(index)
        if index < 0 or index >= upper:
            raise IndexOutOfRangeError(operation, index, self._size)
        return index

    def _coerce(self, operation, value):
        # object blocks hold any value as-is
        if self._dtype == object:
            return value
        given = np.asarray(value)
        if given.ndim != 0 or not np.can_cast(given.dtype, self._dtype, casting="same_kind"):
            raise TypeError(
                f"ArrayList.{operation}: cannot store {value!r} in a {self._dtype} list"
            )
        item = given.astype(self._dtype)
        # NaN never equals itself, so only compare values that do
        if item != given and given == given:
            raise TypeError(
                f"ArrayList.{operation}: {value!r} is not representable as {self._dtype}"
            )
        return item[()]

    def _unbox(self, item):
        if self._dtype == object:
            return item
        return item.item()

    def _reallocate(self):
        new_capacity = 2 * self._capacity
        new_data = np.empty(new_capacity, dtype=self._dtype)
        new_data[:self._size] = self._data[:self._size]
        logger.debug("ArrayList grew from %d to %d slots", self._capacity, new_capacity)
        self._data = new_data
        self._capacity = new_capacity

    def add(self, index_or_value, value=_MISSING):
        """Append a value, or insert at an index when called with two arguments.

        `add(value)` appends and returns True. `add(index, value)` behaves like
        `insert(index, value)` and returns None.
        """
        if value is _MISSING:
            return self.append(index_or_value)
        self.insert(index_or_value, value)

    def append(self, value):
        item = self._coerce("append", value)
        if self._size == self._capacity:
            self._reallocate()
        self._data[self._size] = item
        self._size += 1
        return True

    def insert(self, index, value):
        index = self._check_index("insert", index, self._size + 1)
        item = self._coerce("insert", value)
        if self._size == self._capacity:
            self._reallocate()
        # high to low, otherwise each slot is overwritten before it is moved
        for i in range(self._size, index, -1):
            self._data[i] = self._data[i - 1]
        self._data[index] = item
        self._size += 1

    def get(self, index):
        index = self._check_index("get", index, self._size)
        return self._unbox(self._data[index])

    def set(self, index, value):
        index = self._check_index("set", index, self._size)
        item = self._coerce("set", value)
        previous = self._unbox(self._data[index])
        self._data[index] = item
        return previous

    def remove(self, index):
        index = self._check_index("remove", index, self._size)
        removed = self._unbox(self._data[index])
        for i in range(index + 1, self._size):
            self._data[i - 1] = self._data[i]
        # the vacated trailing slot keeps its stale value
        self._size -= 1
        return removed

    def size(self):
        return self._size

    def capacity(self):
        return self._capacity

    def is_empty(self):
        return self._size == 0

    def data(self):
        return self._data[:self._size].copy()

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"ArrayList({self._data[:self._size].tolist()!r})"
