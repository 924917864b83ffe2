"""Reading tablature tunings from MusicXML ``<staff-details>`` elements and files."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import List, Optional, Union

from tabfret.base import ProfileError
from tabfret.tuning import StaffDetails, StaffTuning


def _to_int(text: Optional[str]) -> int:
    # Unparsable numbers read as 0
    try:
        return int((text or "").strip())
    except ValueError:
        return 0


def _parse_staff_tuning(elem: ET.Element) -> StaffTuning:
    step = ""
    alter = 0
    octave = 0
    for child in elem:
        if child.tag == "tuning-step":
            step = (child.text or "").strip()
        elif child.tag == "tuning-alter":
            alter = _to_int(child.text)
        elif child.tag == "tuning-octave":
            octave = _to_int(child.text)
        else:
            logging.debug("ignoring staff-tuning element <%s>", child.tag)
    line = _to_int(elem.get("line"))
    return StaffTuning(line=line, step=step, alter=alter, octave=octave)


def parse_staff_details(source: Union[str, ET.Element]) -> StaffDetails:
    """Parse a ``<staff-details>`` element.

    Args:
        source: XML text of the element, or the element itself.

    Returns:
        The staff line count, line tunings and capo found in the element.
        Unknown child elements are ignored.

    Raises:
        xml.etree.ElementTree.ParseError: If the text is not well-formed XML.
    """
    elem = ET.fromstring(source) if isinstance(source, str) else source
    staff_lines: Optional[int] = None
    capo: Optional[int] = None
    tunings: List[StaffTuning] = []
    for child in elem:
        if child.tag == "staff-lines":
            staff_lines = _to_int(child.text)
        elif child.tag == "staff-tuning":
            tunings.append(_parse_staff_tuning(child))
        elif child.tag == "capo":
            capo = _to_int(child.text)
        else:
            logging.debug("ignoring staff-details element <%s>", child.tag)
    return StaffDetails(staff_lines=staff_lines, tunings=tuple(tunings), capo=capo)


def read_staff_details(filepath: str) -> StaffDetails:
    """Read the first ``<staff-details>`` element of a MusicXML file.

    Args:
        filepath: Path of a MusicXML document or of a bare element.

    Returns:
        The parsed staff details.

    Raises:
        ProfileError: If the file has no ``<staff-details>`` element.
        xml.etree.ElementTree.ParseError: If the file is not well-formed XML.
    """
    root = ET.parse(filepath).getroot()
    elem = root if root.tag == "staff-details" else root.find(".//staff-details")
    if elem is None:
        raise ProfileError(f"No <staff-details> element in {filepath}")
    return parse_staff_details(elem)
