"""
Sampling Interfaces
===================

Sample containers returned by sampling strategies.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample of shape ``(n_samples, n_dimensions)``.

    Parameters
    ----------
    data : array_like
        Two-dimensional data; stored as ``float64``.

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    __slots__ = ("data", "dimension")

    dimension: int
    data: npt.NDArray[np.float64]

    def __init__(self, data: npt.ArrayLike) -> None:
        arr = np.asarray(data, dtype=np.float64)
        if arr.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = arr
        self.dimension = int(arr.shape[1])

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.float64]]:
        """Iterate over observations (rows)."""
        yield from self.data

    @property
    def array(self) -> npt.NDArray[np.float64]:
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)

    def column(self, index: int = 0) -> npt.NDArray[np.float64]:
        """Observations of one coordinate as a 1D array."""
        return self.data[:, index]


__all__ = [
    "Sample",
    "ArraySample",
]
