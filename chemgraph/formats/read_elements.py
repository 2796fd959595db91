"""
Read chemical element and isotope reference data.

Parses Blue Obelisk style CML documents (``elements.xml`` / ``isotopes.xml``)
into ``Element`` records that can be attached to graph nodes as payload.
Namespaces are ignored, so both namespaced and bare documents are accepted.
"""

import logging
import os
from typing import Dict, Iterator, List, Optional, Union
from xml.etree import ElementTree as ET

from ..classes.element import Element, Isotope

logger = logging.getLogger(__name__)


class ElementTable:
    """
    Lookup table of elements by symbol and atomic number.

    Elements are kept in the order they were added. Symbol lookup is
    case-insensitive.
    """

    def __init__(self, elements: Optional[List[Element]] = None):
        self._by_symbol: Dict[str, Element] = {}
        self._by_number: Dict[int, Element] = {}
        for element in elements or []:
            self.add(element)

    def add(self, element: Element) -> None:
        """
        Add an element, replacing any entry with the same symbol or atomic number.
        """
        symbol = element.symbol.lower()
        for old in (self._by_symbol.get(symbol), self._by_number.get(element.atomic_number)):
            if old is not None:
                self._by_symbol.pop(old.symbol.lower(), None)
                self._by_number.pop(old.atomic_number, None)

        self._by_symbol[symbol] = element
        self._by_number[element.atomic_number] = element

    def get_by_symbol(self, symbol: str) -> Optional[Element]:
        return self._by_symbol.get(symbol.lower())

    def get_by_atomic_number(self, atomic_number: int) -> Optional[Element]:
        return self._by_number.get(atomic_number)

    def __getitem__(self, key: Union[str, int]) -> Element:
        element = self.get_by_atomic_number(key) if isinstance(key, int) else self.get_by_symbol(key)
        if element is None:
            raise KeyError(key)
        return element

    def __contains__(self, key: Union[str, int]) -> bool:
        if isinstance(key, int):
            return key in self._by_number
        return key.lower() in self._by_symbol

    def __iter__(self) -> Iterator[Element]:
        return iter(self._by_symbol.values())

    def __len__(self) -> int:
        return len(self._by_symbol)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _dict_ref(node: ET.Element) -> Optional[str]:
    """Get a ``dictRef`` attribute without its prefix, e.g. ``bo:mass`` -> ``mass``."""
    ref = node.get("dictRef")
    if ref is None:
        return None
    return ref.split(":", 1)[-1]


def _parse_float(text: Optional[str]) -> Optional[float]:
    if text is None:
        return None
    try:
        return float(text.strip())
    except ValueError:
        return None


def _parse_int(text: Optional[str]) -> Optional[int]:
    if text is None:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None


def _load_root(source: Union[str, os.PathLike]) -> ET.Element:
    """
    Parse ``source``.

    Path-like objects are always read as files; a string is parsed as XML
    when its first non-blank character (after an optional BOM) is ``<``.
    """
    try:
        if isinstance(source, str):
            content = source.lstrip("\ufeff \t\r\n")
            if content.startswith("<"):
                return ET.fromstring(content.rstrip())
        source = os.fspath(source)
        if not os.path.exists(source):
            raise FileNotFoundError(f"Reference data file not found: {source}")
        return ET.parse(source).getroot()
    except ET.ParseError as exc:
        raise ValueError(f"Invalid element reference XML: {exc}") from exc


def _parse_atom(atom: ET.Element) -> Optional[Element]:
    fields = {}
    for child in atom:
        ref = _dict_ref(child)
        if ref is None:
            continue
        if _local_name(child.tag) == "label":
            # labels come in several languages; keep the first one
            fields.setdefault(ref, child.get("value"))
        else:
            fields.setdefault(ref, child.text)

    symbol = fields.get("symbol") or atom.get("id")
    atomic_number = _parse_int(fields.get("atomicNumber"))
    if not symbol or atomic_number is None:
        logger.warning(f"Skipping element entry without symbol or atomic number: {atom.attrib}")
        return None

    return Element(atomic_number, symbol,
                   name=fields.get("name"),
                   mass=_parse_float(fields.get("mass")))


def _parse_isotope(isotope: ET.Element) -> Optional[Isotope]:
    mass_number = _parse_int(isotope.get("isotopeNumber") or isotope.get("number"))
    if mass_number is None:
        logger.warning(f"Skipping isotope entry without mass number: {isotope.attrib}")
        return None

    exact_mass = None
    abundance = None
    for child in isotope:
        ref = _dict_ref(child)
        if ref == "exactMass":
            exact_mass = _parse_float(child.text)
        elif ref == "relativeAbundance":
            abundance = _parse_float(child.text)
    return Isotope(mass_number, exact_mass=exact_mass, abundance=abundance)


def read_elements(source: Union[str, os.PathLike],
                  isotope_source: Optional[Union[str, os.PathLike]] = None) -> ElementTable:
    """
    Read an element table from CML reference data.

    Args:
        source: Path (``str`` or path-like) to, or content of, an elements document with ``<atom>``
            entries
        isotope_source: Optional path to, or content of, an isotopes
            document. Isotopes found in ``source`` itself are read as well.

    Returns:
        ElementTable with one entry per valid ``<atom>``

    Raises:
        ValueError: If a document is not well-formed XML
        FileNotFoundError: If a path does not exist
    """
    roots = [_load_root(source)]
    if isotope_source is not None:
        roots.append(_load_root(isotope_source))

    table = ElementTable()
    for node in roots[0].iter():
        if _local_name(node.tag) == "atom":
            element = _parse_atom(node)
            if element is not None:
                table.add(element)

    isotope_count = 0
    for root in roots:
        for node in root.iter():
            if _local_name(node.tag) != "isotope":
                continue
            symbol = node.get("elementType")
            element = table.get_by_symbol(symbol) if symbol else None
            if element is None:
                logger.warning(f"Skipping isotope for unknown element: {node.attrib}")
                continue
            isotope = _parse_isotope(node)
            if isotope is not None:
                element.isotopes.append(isotope)
                isotope_count += 1

    logger.debug(f"Read {len(table)} elements and {isotope_count} isotopes")
    return table
