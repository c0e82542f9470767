"""
Evaluation Facade
=================

:func:`evaluate` is the single entry point through which every characteristic
of a distribution is computed. It

1. rejects non-finite arguments with :class:`~pysatl_distr.errors.DomainError`;
2. rejects probabilities outside ``[0, 1]`` (``ppf``, ``isf``) with
   :class:`~pysatl_distr.errors.ParameterOutOfRangeError`;
3. dispatches to the method resolved by the distribution's computation
   strategy (arguments outside the support give boundary values there, never
   errors);
4. shapes the result: a ``float`` for a scalar argument, an array of the same
   shape for an array argument, a ``float`` or ``None`` for summaries.

Computation is carried out in ``float64``. Floating-point arrays keep their
dtype in the result (``float32`` in, ``float32`` out) unless ``dtype`` is
given; integer arrays produce ``float64``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_distr.errors import DomainError, ParameterOutOfRangeError
from pysatl_distr.types import CHARACTERISTIC_ARGUMENTS, ArgumentKind

if TYPE_CHECKING:
    from numpy.typing import DTypeLike

    from pysatl_distr.distributions.distribution import Distribution
    from pysatl_distr.types import GenericCharacteristicName, NumericArray

_NUMERIC_KINDS = frozenset("biuf")


def _argument_kind(name: GenericCharacteristicName, data: Any) -> ArgumentKind:
    kind = CHARACTERISTIC_ARGUMENTS.get(name)
    if kind is not None:
        return kind
    return ArgumentKind.NONE if data is None else ArgumentKind.POINT


def _first_offending(values: NumericArray, mask: NumericArray) -> float:
    return float(values[mask].flat[0])


def _validate_argument(
    name: GenericCharacteristicName, kind: ArgumentKind, values: NumericArray
) -> None:
    argument = "p" if kind is ArgumentKind.PROBABILITY else "x"
    finite = np.isfinite(values)
    if not np.all(finite):
        bad = _first_offending(values, ~finite)
        raise DomainError(
            f"Argument of '{name}' must be finite, got {bad}", name=argument, value=bad
        )
    if kind is ArgumentKind.PROBABILITY:
        outside = (values < 0.0) | (values > 1.0)
        if np.any(outside):
            bad = _first_offending(values, outside)
            raise ParameterOutOfRangeError(
                f"Argument of '{name}' must be a probability in [0, 1], got {bad}",
                name=argument,
                value=bad,
                lower=0.0,
                upper=1.0,
            )


def evaluate(
    distribution: Distribution,
    characteristic: GenericCharacteristicName,
    data: Any = None,
    *,
    dtype: DTypeLike | None = None,
    **options: Any,
) -> Any:
    """
    Evaluate ``characteristic`` of ``distribution``.

    Parameters
    ----------
    distribution : Distribution
        Distribution to evaluate.
    characteristic : str
        Characteristic name, e.g. ``"cdf"`` or ``"mean"``.
    data : float or array_like, optional
        Point(s) for pointwise characteristics, probability(ies) for
        ``ppf``/``isf``; omitted for summaries.
    dtype : numpy dtype, optional
        Floating type of an array result.
    **options
        Characteristic flags (``excess`` for kurtosis) and root-finder
        settings (``rel_tol``, ``abs_tol``, ``max_iter``, ``max_expand``).

    Returns
    -------
    float, numpy.ndarray or None
        ``None`` only for a moment that does not exist at the parameters.

    Raises
    ------
    DomainError
        If the argument is not finite.
    ParameterOutOfRangeError
        If a probability lies outside ``[0, 1]``.
    TypeError
        If the argument is missing, superfluous or not numeric.
    RuntimeError
        If the characteristic cannot be resolved for the distribution.
    ConvergenceError
        If an iterative inversion exhausts its budget.
    """
    name = str(characteristic)
    kind = _argument_kind(name, data)

    if kind is ArgumentKind.NONE:
        if data is not None:
            raise TypeError(f"Characteristic '{name}' does not take an argument.")
        method = distribution.query_method(name, **options)
        value = method(None, **options)
        return None if value is None else float(value)

    if data is None:
        raise TypeError(f"Characteristic '{name}' requires an argument.")

    arr = np.asarray(data)
    if arr.dtype.kind not in _NUMERIC_KINDS:
        raise TypeError(f"Argument of '{name}' must be numeric, got dtype {arr.dtype}.")
    values = arr.astype(np.float64)
    _validate_argument(name, kind, values)

    method = distribution.query_method(name, **options)
    result = np.broadcast_to(np.asarray(method(values, **options), dtype=np.float64), values.shape)

    if arr.ndim == 0:
        scalar = float(result)
        return scalar if dtype is None else np.dtype(dtype).type(scalar)

    if dtype is not None:
        out_dtype = np.dtype(dtype)
    elif arr.dtype.kind == "f":
        out_dtype = arr.dtype
    else:
        out_dtype = np.dtype(np.float64)
    return result.astype(out_dtype)


__all__ = [
    "evaluate",
]
