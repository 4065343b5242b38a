"""Reading zoneset configurations from XML documents."""

from __future__ import annotations

import os
import re
import xml.etree.ElementTree as ET
from typing import List, Optional, Union

from psen_scan.configuration import (
    DEFAULT_ZONESET_ANGLE_STEP,
    ZoneSet,
    ZoneSetConfiguration,
    ZoneSetSpeedRange,
)

_ZONE_TYPE_TO_FIELD = {
    "roOSSD1": "safety1",
    "roOSSD2": "safety2",
    "roOSSD3": "safety3",
    "warn1": "warn1",
    "warn2": "warn2",
    "muting1": "muting1",
    "muting2": "muting2",
}

_TRUE_WORDS = ("true", "True", "TRUE")
_FALSE_WORDS = ("false", "False", "FALSE")

_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_HEX_NUMBER = re.compile(r"\s*0[xX]([+-]?)([0-9a-fA-F]+)")
_DEC_NUMBER = re.compile(r"\s*([+-]?)(\d+)")


class XMLConfigurationParserException(RuntimeError):
    """Raised if a configuration file cannot be parsed."""


def ro_value_to_uint(ro_value: str) -> int:
    """Convert a quadruple of hex characters into a length in mm.

    The characters follow the rule "abcd" -> 0xcdab, e.g. "D307" -> 0x07D3 -> 2003.
    Raises ValueError if the value holds no hexadecimal number.
    """
    if len(ro_value) < 4:
        raise ValueError(f"ro value {ro_value!r} is shorter than 4 characters")
    swapped = ro_value[2:4] + ro_value[0:2] + ro_value[4:]
    match = _HEX_PREFIX.match(swapped)
    if match is None:
        raise ValueError(f"ro value {ro_value!r} holds no hexadecimal number")
    value = int(match.group(2), 16)
    if match.group(1) == "-":
        value = -value % (1 << 64)
    return value


def ro_string_to_vec(ro_string: str) -> List[int]:
    """Convert the text of an <ro> element into distances in mm.

    Every 4 characters form one distance; an incomplete trailing group is ignored.
    """
    try:
        return [
            ro_value_to_uint(ro_string[start : start + 4])
            for start in range(0, len(ro_string) - len(ro_string) % 4, 4)
        ]
    except ValueError as exc:
        raise XMLConfigurationParserException(str(exc)) from exc


def _first_child(parent: ET.Element, name: str) -> ET.Element:
    child = parent.find(name)
    if child is None:
        raise XMLConfigurationParserException(
            f"Could not parse. Element <{parent.tag}> is missing a child <{name}>."
        )
    return child


def _text(element: ET.Element) -> str:
    if not element.text:
        raise XMLConfigurationParserException(
            f"Could not parse. <{element.tag}> element is empty."
        )
    return element.text


def _parse_int_prefix(text: Optional[str]) -> Optional[int]:
    if not text:
        return None
    match = _HEX_NUMBER.match(text)
    if match is not None:
        value = int(match.group(2), 16)
    else:
        match = _DEC_NUMBER.match(text)
        if match is None:
            return None
        value = int(match.group(2))
    return -value if match.group(1) == "-" else value


def _query_unsigned(element: ET.Element) -> Optional[int]:
    value = _parse_int_prefix(element.text)
    return None if value is None else value % (1 << 32)


def _query_bool(element: ET.Element) -> Optional[bool]:
    value = _parse_int_prefix(element.text)
    if value is not None:
        return value != 0
    if element.text in _TRUE_WORDS:
        return True
    if element.text in _FALSE_WORDS:
        return False
    return None


def _to_short(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _find_chain(root: ET.Element, chain: List[str]) -> Optional[ET.Element]:
    if root.tag != chain[0]:
        return None
    element: Optional[ET.Element] = root
    for name in chain[1:]:
        element = element.find(name)
        if element is None:
            return None
    return element


def _parse_zoneset(set_element: ET.Element) -> ZoneSet:
    zoneset = ZoneSet()
    _first_child(set_element, "zoneSetDetail")
    for detail in set_element.findall("zoneSetDetail"):
        type_element = _first_child(detail, "type")
        ro_element = _first_child(detail, "ro")
        field_name = _ZONE_TYPE_TO_FIELD.get(_text(type_element))
        if field_name is None:
            raise XMLConfigurationParserException(
                'Could not parse. Invalid <type> must be "roOSSD1", "roOSSD2", '
                '"roOSSD3", "warn1", "warn2", "muting1" or "muting2".'
            )
        setattr(zoneset, field_name, ro_string_to_vec(_text(ro_element)))
    # The resolution is only known implicitly.
    zoneset.resolution = DEFAULT_ZONESET_ANGLE_STEP
    return zoneset


def _parse_speed_range(selector: ET.Element) -> ZoneSetSpeedRange:
    speed_range = _first_child(selector, "zoneSetSpeedRange")
    min_element = _first_child(speed_range, "minSpeed")
    max_element = _first_child(speed_range, "maxSpeed")
    min_speed = _query_unsigned(min_element)
    if min_speed is None:
        raise XMLConfigurationParserException("Could not parse. Value <minSpeed> invalid.")
    max_speed = _query_unsigned(max_element)
    if max_speed is None:
        raise XMLConfigurationParserException("Could not parse. Value <maxSpeed> invalid.")
    return ZoneSetSpeedRange(_to_short(min_speed), _to_short(max_speed))


def _is_encoder_enabled(root: ET.Element) -> bool:
    element = _find_chain(root, ["MIB", "clusterDescr", "zoneSetConfiguration", "encEnable"])
    if element is None:
        raise XMLConfigurationParserException(
            "Could not parse. Chain MIB->clusterDescr->zoneSetConfiguration->encEnabled is broken."
        )
    enabled = _query_bool(element)
    if enabled is None:
        raise XMLConfigurationParserException(
            "Could not parse. Value inside <encEnable> could not be evaluated to true or false"
        )
    return enabled


def _parse_zonesets(root: ET.Element) -> List[ZoneSet]:
    definition = _find_chain(root, ["MIB", "scannerDescr", "zoneSetDefinition"])
    if definition is None or definition.find("zoneSetInfo") is None:
        raise XMLConfigurationParserException(
            "Could not parse. Chain MIB->scannerDescr->zoneSetDefinition->zoneSetInfo not complete."
        )
    return [_parse_zoneset(info) for info in definition.findall("zoneSetInfo")]


def _parse_speed_ranges(root: ET.Element) -> List[ZoneSetSpeedRange]:
    sel_code = _find_chain(
        root, ["MIB", "clusterDescr", "zoneSetConfiguration", "zoneSetSelCode"]
    )
    if sel_code is None or sel_code.find("zoneSetSelector") is None:
        raise XMLConfigurationParserException(
            "Could not parse. Chain MIB->clusterDescr->zoneSetConfiguration->zoneSetSelCode->"
            "zoneSetSelector is broken."
        )
    return [_parse_speed_range(selector) for selector in sel_code.findall("zoneSetSelector")]


def _parse_root(root: ET.Element) -> ZoneSetConfiguration:
    zonesets = _parse_zonesets(root)
    if _is_encoder_enabled(root):
        speed_ranges = _parse_speed_ranges(root)
        if len(zonesets) != len(speed_ranges):
            raise XMLConfigurationParserException(
                "Parsing failed. SpeedRanges are enabled by <encEnable>true</Enable>"
                f"but there are {len(speed_ranges)} speedRanges and {len(zonesets)} defined zones."
            )
        for zoneset, speed_range in zip(zonesets, speed_ranges):
            zoneset.speed_range = speed_range
    return ZoneSetConfiguration(zonesets=zonesets)


def parse_file(filename: Union[str, "os.PathLike[str]"]) -> ZoneSetConfiguration:
    """Parse a zoneset configuration from an XML file."""
    try:
        root = ET.parse(filename).getroot()
    except (ET.ParseError, OSError) as exc:
        raise XMLConfigurationParserException(f"Could not parse {filename}.") from exc
    return _parse_root(root)


def parse_string(xml: str) -> ZoneSetConfiguration:
    """Parse a zoneset configuration from XML text."""
    try:
        root = ET.fromstring(xml)
    except ET.ParseError as exc:
        raise XMLConfigurationParserException("Could not parse content.") from exc
    return _parse_root(root)