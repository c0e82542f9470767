from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_distr.families import ParametricFamily, Parametrization
from pysatl_distr.types import (
    CharacteristicName,
    GenericCharacteristicName,
    UnivariateContinuous,
)
from tests.utils.mocks import MockSamplingStrategy


class TestBaseFamily:
    PDF: GenericCharacteristicName = CharacteristicName.PDF
    CDF: GenericCharacteristicName = CharacteristicName.CDF
    MEAN: GenericCharacteristicName = CharacteristicName.MEAN

    def make_default_family(
        self,
        distr_characteristics: dict[GenericCharacteristicName, dict[str, object]] | None = None,
        name: str = "Default",
    ) -> ParametricFamily:
        if distr_characteristics is None:
            distr_characteristics = {
                self.PDF: {"base": lambda p, x: x},
                self.CDF: {"alt": lambda p, x: x, "base": lambda p, x: x},
                self.MEAN: {"base": lambda p, x: p.value},
            }
        fam = ParametricFamily(
            name=name,
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base", "alt"],
            distr_characteristics=distr_characteristics,  # type: ignore[arg-type]
            sampling_strategy=MockSamplingStrategy(),
        )

        @fam.parametrization(name="base")
        class Base(Parametrization):
            value: float

        @fam.parametrization(name="alt")
        class Alt(Parametrization):
            value: float

            def transform_to_base_parametrization(self) -> Parametrization:
                return Base(value=2.0 * self.value)  # type: ignore[call-arg]

        return fam
