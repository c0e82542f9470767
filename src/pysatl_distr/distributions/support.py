"""
Supports
========

Sets of points on which a distribution puts its mass:

- :class:`ContinuousSupport`: an interval of the real line with open or
  closed endpoints (infinite endpoints are always open).
- :class:`IntegerLatticeDiscreteSupport`: ``{residue + n * modulus}``,
  optionally bounded on either side.

Both expose ``contains`` (scalar or element-wise) and ``bounds``. The discrete
support additionally offers ordered traversal used by the discrete
conversions (prefix sums and step quantiles).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import floor, inf
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_distr.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    @property
    def bounds(self) -> tuple[float, float]: ...


class ContinuousSupport(Interval1D, Support): ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_leq(self, x: Number) -> Iterator[Number]: ...

    def prev(self, x: Number) -> Number | None: ...

    def first(self) -> Number | None: ...

    def floor(self, x: Number) -> Number | None: ...


@dataclass(frozen=True, slots=True)
class IntegerLatticeDiscreteSupport(DiscreteSupport):
    """
    Integer lattice ``{residue + n * modulus | n ∈ Z}`` clipped to ``[min_k, max_k]``.

    Parameters
    ----------
    residue : int
        Any point of the lattice.
    modulus : int
        Positive lattice step.
    min_k, max_k : int, optional
        Inclusive bounds; ``None`` means unbounded on that side.
    """

    residue: int
    modulus: int
    min_k: int | None = None
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.modulus <= 0:
            raise ValueError("modulus must be a positive integer.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        finite = np.isfinite(xf)
        v = np.floor(np.where(finite, xf, 0.0))
        mask = finite & (xf == v)
        if self.min_k is not None:
            mask &= v >= self.min_k
        if self.max_k is not None:
            mask &= v <= self.max_k
        mask &= np.mod(v - self.residue, self.modulus) == 0

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def bounds(self) -> tuple[float, float]:
        """Smallest and largest lattice points (``-inf``/``inf`` when unbounded)."""
        first = self.first()
        last = self.last()
        return (-inf if first is None else float(first), inf if last is None else float(last))

    def _align_down(self, k: int) -> int:
        return k - (k - self.residue) % self.modulus

    def first(self) -> int | None:
        if self.min_k is None:
            return None
        first = self._align_down(self.min_k)
        if first < self.min_k:
            first += self.modulus
        if self.max_k is not None and first > self.max_k:
            return None
        return first

    def last(self) -> int | None:
        if self.max_k is None:
            return None
        last = self._align_down(self.max_k)
        if self.min_k is not None and last < self.min_k:
            return None
        return last

    def floor(self, x: Number) -> int | None:
        """Greatest lattice point ``<= x``, or ``None`` if there is none."""
        if float(x) == inf:
            return self.last()
        candidate = self._align_down(int(floor(float(x))))
        if self.max_k is not None:
            candidate = min(candidate, self._align_down(self.max_k))
        if self.min_k is not None and candidate < self.min_k:
            return None
        return candidate

    def prev(self, x: Number) -> int | None:
        """Greatest lattice point strictly below ``x``."""
        k = self.floor(x)
        if k is not None and k == float(x):
            k -= self.modulus
            if self.min_k is not None and k < self.min_k:
                return None
        return k

    def next(self, current: int) -> int | None:
        nxt = current + self.modulus
        if self.max_k is not None and nxt > self.max_k:
            return None
        return nxt

    def iter_leq(self, x: Number) -> Iterator[int]:
        first = self.first()
        if first is None:
            raise RuntimeError(
                "iter_leq is not supported for left-unbounded IntegerLatticeDiscreteSupport. "
                "Provide min_k to enable iter_leq."
            )
        last = self.floor(x)
        if last is None or last < first:
            return iter(())
        return iter(range(first, last + 1, self.modulus))

    @property
    def is_left_bounded(self) -> bool:
        return self.min_k is not None

    @property
    def is_right_bounded(self) -> bool:
        return self.max_k is not None


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
