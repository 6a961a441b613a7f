"""
Range Table Loader for ISBN Parser

Loads and manages the ISBN range-assignment table published by the
International ISBN Agency. The table has two levels:

- GS1 prefix rules (978/979): decide the length of the registration group
- Registration group rules (e.g. 978-2): decide the length of the registrant

The table is read-only once loaded and is cached for the process lifetime.

Reference: https://www.isbn-international.org/range_file_generation
"""

from __future__ import annotations

import json
import logging
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple


logger = logging.getLogger(__name__)

_DEFAULT_RANGES_PATH = Path(__file__).parent / "data" / "ranges.json"

# Environment override for the dataset location
RANGES_ENV_VAR = "ISBN_RANGES_FILE"

# Width of the range boundaries in the dataset
RANGE_WIDTH = 7

RANGE_DIGITS = frozenset("0123456789")


class RangeTableError(ValueError):
    """Raised when range data is malformed."""


@dataclass(frozen=True)
class RangeRule:
    """
    A single range rule.

    Attributes:
        range_min: Lower bound as a digit string (usually 7 digits)
        range_max: Upper bound as a digit string (usually 7 digits)
        length: Length of the element assigned to this range (0 = unassigned)
    """
    range_min: str
    range_max: str
    length: int

    def bounds(self, width: int) -> Tuple[int, int]:
        """Return both bounds truncated to `width` digits, as integers."""
        return int(self.range_min[:width]), int(self.range_max[:width])

    @property
    def range(self) -> str:
        return f"{self.range_min}-{self.range_max}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RangeRule":
        range_min, range_max = _split_range(str(data["range"]))
        try:
            length = int(data["length"])
        except (TypeError, ValueError) as exc:
            raise RangeTableError(f"Invalid rule length: {data.get('length')!r}") from exc
        return cls(range_min=range_min, range_max=range_max, length=length)

    def to_dict(self) -> Dict[str, Any]:
        return {"range": self.range, "length": self.length}


class RegistrationGroupRule(RangeRule):
    """Rule deciding the length of a registration group for a GS1 prefix."""


class RegistrantRule(RangeRule):
    """Rule deciding the length of a registrant within a registration group."""


@dataclass(frozen=True)
class GroupEntry:
    """
    Registrant rules for one registration group.

    Attributes:
        prefix: Composite key "<gs1>-<group>", e.g. "978-2"
        agency: Registration agency name, passed through verbatim
        rules: Ordered registrant rules
    """
    prefix: str
    agency: str
    rules: Tuple[RegistrantRule, ...] = field(default_factory=tuple)


def _split_range(value: str) -> Tuple[str, str]:
    parts = value.strip().split("-")
    if len(parts) != 2 or not all(p and set(p) <= RANGE_DIGITS for p in parts):
        raise RangeTableError(f"Invalid range: {value!r}")
    if len(parts[0]) != len(parts[1]):
        raise RangeTableError(f"Range bounds differ in width: {value!r}")
    return parts[0], parts[1]


class RangeTable:
    """
    Immutable range-assignment table.

    Holds the GS1-level registration group rules and the group-level
    registrant entries, with dict-based lookup by prefix.
    """

    def __init__(
        self,
        prefixes: Optional[Dict[str, Tuple[RegistrationGroupRule, ...]]] = None,
        groups: Optional[Dict[str, GroupEntry]] = None,
        source: str = "",
        serial: str = "",
        date: str = "",
    ):
        self._prefixes: Dict[str, Tuple[RegistrationGroupRule, ...]] = dict(prefixes or {})
        self._groups: Dict[str, GroupEntry] = dict(groups or {})
        self.source = source
        self.serial = serial
        self.date = date

    def registration_group_rules(self, gs1_element: str) -> Tuple[RegistrationGroupRule, ...]:
        """Ordered registration group rules for a GS1 prefix (empty if unknown)."""
        return self._prefixes.get(gs1_element, ())

    def group(self, prefix: str) -> Optional[GroupEntry]:
        """Group entry for a "<gs1>-<group>" key, or None."""
        return self._groups.get(prefix)

    @property
    def gs1_prefixes(self) -> List[str]:
        return list(self._prefixes)

    def __contains__(self, prefix: str) -> bool:
        return prefix in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "serial": self.serial,
            "date": self.date,
            "prefixes": [
                {
                    "prefix": prefix,
                    "rules": [rule.to_dict() for rule in rules],
                }
                for prefix, rules in self._prefixes.items()
            ],
            "groups": [
                {
                    "prefix": entry.prefix,
                    "agency": entry.agency,
                    "rules": [rule.to_dict() for rule in entry.rules],
                }
                for entry in self._groups.values()
            ],
        }

    def to_json(self) -> str:
        """Export table to JSON."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RangeTable":
        try:
            prefixes = {
                str(p["prefix"]): tuple(
                    RegistrationGroupRule.from_dict(r) for r in p.get("rules", [])
                )
                for p in data["prefixes"]
            }
            groups = {}
            for g in data["groups"]:
                entry = GroupEntry(
                    prefix=str(g["prefix"]),
                    agency=str(g.get("agency", "")),
                    rules=tuple(RegistrantRule.from_dict(r) for r in g.get("rules", [])),
                )
                groups[entry.prefix] = entry
        except (KeyError, TypeError) as exc:
            raise RangeTableError(f"Malformed range data: {exc}") from exc

        return cls(
            prefixes,
            groups,
            source=str(data.get("source", "")),
            serial=str(data.get("serial", "")),
            date=str(data.get("date", "")),
        )

    @classmethod
    def from_json(cls, json_str: str) -> "RangeTable":
        """Load table from JSON."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as exc:
            raise RangeTableError(f"Invalid range JSON: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def from_range_message(cls, xml_text: str) -> "RangeTable":
        """
        Load table from an ISBN International RangeMessage.xml document.

        Expected layout:
            ISBNRangeMessage/EAN.UCCPrefixes/EAN.UCC/{Prefix,Agency,Rules}
            ISBNRangeMessage/RegistrationGroups/Group/{Prefix,Agency,Rules}
        """
        try:
            root = ET.fromstring(xml_text)
        except ET.ParseError as exc:
            raise RangeTableError(f"Invalid RangeMessage XML: {exc}") from exc

        def rules_of(node: ET.Element) -> List[Dict[str, Any]]:
            return [
                {"range": rule.findtext("Range", ""), "length": rule.findtext("Length", "")}
                for rule in node.findall("./Rules/Rule")
            ]

        data = {
            "source": root.findtext("MessageSource", ""),
            "serial": root.findtext("MessageSerialNumber", ""),
            "date": root.findtext("MessageDate", ""),
            "prefixes": [
                {
                    "prefix": node.findtext("Prefix", ""),
                    "agency": node.findtext("Agency", ""),
                    "rules": rules_of(node),
                }
                for node in root.findall("./EAN.UCCPrefixes/EAN.UCC")
            ],
            "groups": [
                {
                    "prefix": node.findtext("Prefix", ""),
                    "agency": node.findtext("Agency", ""),
                    "rules": rules_of(node),
                }
                for node in root.findall("./RegistrationGroups/Group")
            ],
        }
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: Path) -> "RangeTable":
        """Load a .json dataset or a RangeMessage .xml file."""
        text = Path(path).read_text(encoding="utf-8")
        if Path(path).suffix.lower() == ".xml":
            return cls.from_range_message(text)
        return cls.from_json(text)


# Global cached table instance
_cached_table: Optional[RangeTable] = None


def default_ranges_path() -> Path:
    """Dataset path from the environment, falling back to the packaged file."""
    override = os.environ.get(RANGES_ENV_VAR)
    return Path(override) if override else _DEFAULT_RANGES_PATH


def load_ranges(
    json_path: Optional[Path] = None,
    force_reload: bool = False
) -> RangeTable:
    """
    Load the range table, using cache when possible.

    Args:
        json_path: Optional path to a dataset file (.json or RangeMessage .xml).
            An explicit path bypasses the cache.
        force_reload: Force reload even if cached.

    Returns:
        RangeTable instance ready for use.
    """
    global _cached_table

    if json_path is not None:
        table = RangeTable.from_file(Path(json_path))
        logger.info("Loaded ISBN ranges from %s (%d groups)", json_path, len(table))
        return table

    if _cached_table is not None and not force_reload:
        return _cached_table

    path = default_ranges_path()
    _cached_table = RangeTable.from_file(path)
    logger.info("Loaded ISBN ranges from %s (%d groups)", path, len(_cached_table))
    return _cached_table


def save_ranges(table: RangeTable, json_path: Path) -> None:
    """Save range table to JSON file for faster loading."""
    with open(json_path, 'w', encoding='utf-8') as f:
        f.write(table.to_json())
