"""
Characteristics API
===================

:class:`GenericCharacteristic` is a named, distribution-independent handle for
a characteristic. Calling it with a distribution evaluates that
characteristic through :func:`~pysatl_distr.distributions.evaluation.evaluate`.

The module also provides ready-made handles for the built-in characteristics
(``PDF``, ``CDF``, ``PPF``, ``MEAN``, ...).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pysatl_distr.distributions.evaluation import evaluate
from pysatl_distr.types import CharacteristicName, GenericCharacteristicName

if TYPE_CHECKING:
    from pysatl_distr.distributions.distribution import Distribution


@dataclass(slots=True, frozen=True)
class GenericCharacteristic:
    """
    Callable characteristic descriptor.

    Parameters
    ----------
    name : str
        Characteristic identifier (e.g., ``"pdf"``, ``"cdf"`` or ``"ppf"``).

    Examples
    --------
    >>> from pysatl_distr.distributions.characteristics import GenericCharacteristic
    >>> SF = GenericCharacteristic("sf")
    >>> # Later:
    >>> # value = SF(dist, 0.0)  # resolves dist's sf(0.0)
    """

    name: GenericCharacteristicName

    def __call__(self, distribution: "Distribution", data: Any = None, **options: Any) -> Any:
        """
        Evaluate the characteristic of ``distribution``.

        Parameters
        ----------
        distribution : Distribution
            Distribution to evaluate.
        data : float or array_like, optional
            Argument of pointwise characteristics.
        **options
            Characteristic flags and root-finder settings.
        """
        return evaluate(distribution, self.name, data, **options)


PDF = GenericCharacteristic(CharacteristicName.PDF)
LOG_PDF = GenericCharacteristic(CharacteristicName.LOG_PDF)
PMF = GenericCharacteristic(CharacteristicName.PMF)
CDF = GenericCharacteristic(CharacteristicName.CDF)
SF = GenericCharacteristic(CharacteristicName.SF)
HAZARD = GenericCharacteristic(CharacteristicName.HAZARD)
CHF = GenericCharacteristic(CharacteristicName.CHF)
PPF = GenericCharacteristic(CharacteristicName.PPF)
ISF = GenericCharacteristic(CharacteristicName.ISF)
MEAN = GenericCharacteristic(CharacteristicName.MEAN)
VAR = GenericCharacteristic(CharacteristicName.VAR)
MODE = GenericCharacteristic(CharacteristicName.MODE)
MEDIAN = GenericCharacteristic(CharacteristicName.MEDIAN)
SKEWNESS = GenericCharacteristic(CharacteristicName.SKEW)
KURTOSIS = GenericCharacteristic(CharacteristicName.KURT)
ENTROPY = GenericCharacteristic(CharacteristicName.ENTROPY)

__all__ = [
    "GenericCharacteristic",
    "PDF",
    "LOG_PDF",
    "PMF",
    "CDF",
    "SF",
    "HAZARD",
    "CHF",
    "PPF",
    "ISF",
    "MEAN",
    "VAR",
    "MODE",
    "MEDIAN",
    "SKEWNESS",
    "KURTOSIS",
    "ENTROPY",
]
