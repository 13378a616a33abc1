"""
Process-wide register of parametric families, keyed by family name.

``ParametricFamilyRegister()`` always returns the same object, and every
operation is also available on the class itself, so families can be looked
up without passing the register around.
"""

from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from pyprobdist.families.parametric_family import ParametricFamily


class ParametricFamilyRegister:
    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._families = {}
            cls._instance = instance
        return cls._instance

    @classmethod
    def _table(cls) -> dict[str, ParametricFamily]:
        return cls()._families

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Look up a family by name.

        Raises
        ------
        ValueError
            If nothing is registered under ``name``.
        """
        try:
            return cls._table()[name]
        except KeyError:
            raise ValueError(f"No family {name} found in register") from None

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls._table()

    @classmethod
    def names(cls) -> list[str]:
        """Registered names, oldest first."""
        return list(cls._table())

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Add ``family`` under its own name.

        Raises
        ------
        ValueError
            If the name is taken.
        """
        table = cls._table()
        if family.name in table:
            raise ValueError(f"Family {family.name} already found in register")
        table[family.name] = family

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None
