"""Small conveniences over ElementTree that never hand back None."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator, Optional, Union


def load_xml_file(path: Union[str, Path]) -> ET.Element:
    """Read and parse an XML file, returning its root element.

    Raises OSError when the file cannot be read and ET.ParseError when it
    is not well-formed.
    """
    return ET.fromstring(Path(path).read_bytes())


def iter_child_elements(element: Optional[ET.Element]) -> Iterator[ET.Element]:
    """Yield the direct child elements of an element, if any."""
    if element is None:
        return
    yield from element


def element_attribute(element: Optional[ET.Element], name: str) -> str:
    if element is None:
        return ""
    return element.get(name) or ""


def element_name(element: Optional[ET.Element]) -> str:
    if element is None:
        return ""
    tag = element.tag
    return tag if isinstance(tag, str) else ""


def element_text(element: Optional[ET.Element]) -> str:
    if element is None:
        return ""
    return element.text or ""


def string_to_bool(text: Optional[str]) -> bool:
    """Anything but an empty string or "0" is true."""
    return bool(text) and text != "0"