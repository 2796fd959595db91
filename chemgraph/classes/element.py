"""
Chemical element and isotope records.

These are the reference-data records typically attached to nodes as payload.
The graph layer treats them as opaque.
"""

from typing import List, Optional


class Isotope:
    """A single isotope of an element."""

    def __init__(self, mass_number: int, exact_mass: Optional[float] = None,
                 abundance: Optional[float] = None):
        self.mass_number = mass_number
        self.exact_mass = exact_mass
        self.abundance = abundance

    def __repr__(self) -> str:
        return f"Isotope({self.mass_number}, exact_mass={self.exact_mass}, abundance={self.abundance})"


class Element:
    """
    Chemical element record.

    Attributes:
        atomic_number: Number of protons
        symbol: Element symbol, e.g. ``"C"``
        name: Element name, e.g. ``"Carbon"``
        mass: Standard atomic weight
        isotopes: Known isotopes, in document order
    """

    def __init__(self, atomic_number: int, symbol: str, name: Optional[str] = None,
                 mass: Optional[float] = None, isotopes: Optional[List[Isotope]] = None):
        self.atomic_number = atomic_number
        self.symbol = symbol
        self.name = name
        self.mass = mass
        self.isotopes = isotopes if isotopes is not None else []

    def get_isotope(self, mass_number: int) -> Optional[Isotope]:
        """Return the isotope with the given mass number, or None."""
        for isotope in self.isotopes:
            if isotope.mass_number == mass_number:
                return isotope
        return None

    def get_most_abundant_isotope(self) -> Optional[Isotope]:
        """Return the isotope with the highest natural abundance, or None."""
        candidates = [i for i in self.isotopes if i.abundance is not None]
        if not candidates:
            return None
        return max(candidates, key=lambda i: i.abundance)

    def __repr__(self) -> str:
        return f"Element({self.atomic_number}, {self.symbol!r})"
