"""
Omikuji Field Catalog

Every value on a fortune slip is carved out of a fixed bit range of the
digest and mapped onto its own domain. The catalog below is the single
source of truth for those ranges. Offsets, widths and table contents are
an output contract: the same (year, user) must keep producing the same
slip, so entries are never reordered or edited in place.

Mapping kinds:
- identity: raw unsigned integer
- modulo: raw % modulus + offset (slight bias toward small values is accepted)
- power_of_two: 1 << raw
- char: chr(offset + raw % modulus)
- table: table[raw % len(table)]
- repeated: count independent identity reads of bit_width bits each
"""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from omikuji import config
from omikuji.lib.log import get_logger, log
from .algorithms import check_digest, read_bits

logger = get_logger(__name__)

IDENTITY = "identity"
MODULO = "modulo"
POWER_OF_TWO = "power_of_two"
CHAR = "char"
TABLE = "table"
REPEATED = "repeated"

MAPPINGS = (IDENTITY, MODULO, POWER_OF_TWO, CHAR, TABLE, REPEATED)

LOGIC_GATES = ("AND", "OR", "XOR", "NOT", "NAND", "NOR", "XNOR", "BUFFER")

DIRECTIONS = ("↑", "↗", "→", "↘", "↓", "↙", "←", "↖")

ELEMENTS = (
    "H (1)",
    "He (2)",
    "C (6)",
    "N (7)",
    "O (8)",
    "Na (11)",
    "Mg (12)",
    "Al (13)",
    "Si (14)",
    "Fe (26)",
    "Cu (29)",
    "Ag (47)",
    "Au (79)",
    "Pt (78)",
    "Pb (82)",
    "U (92)",
)

# Unicode Emoticons block, U+1F600..U+1F63F
EMOJI_BASE = 0x1F600
EMOJI_COUNT = 64


@dataclass(frozen=True)
class FieldSpec:
    """How one named field is read from the digest."""

    name: str
    bit_offset: int
    bit_width: int
    mapping: str = IDENTITY
    modulus: int = 0
    offset: int = 0
    table: Tuple[str, ...] = ()
    count: int = 1

    @property
    def span(self) -> int:
        """Total number of bits covered by this field."""
        return self.bit_width * self.count

    @property
    def end_bit(self) -> int:
        """First bit after this field."""
        return self.bit_offset + self.span


# Field catalog - single source of truth
FIELD_CATALOG = (
    FieldSpec("lucky_number", 0, 8),
    FieldSpec("lucky_hex", 8, 8),
    FieldSpec("lucky_bits", 16, 16),
    FieldSpec("lucky_day", 32, 9, MODULO, modulus=365, offset=1),
    FieldSpec("lucky_hour", 41, 5, MODULO, modulus=24),
    FieldSpec("lucky_minute", 46, 6, MODULO, modulus=60),
    FieldSpec("lucky_power_of_2", 52, 3, POWER_OF_TWO),
    FieldSpec("lucky_ascii", 55, 7, CHAR, modulus=95, offset=32),
    FieldSpec("lucky_logic_gate", 62, 3, TABLE, table=LOGIC_GATES),
    FieldSpec("luck_scores", 65, 8, REPEATED, count=16),
    FieldSpec("entropy_check", 193, 12),
    FieldSpec("lucky_emoji", 205, 6, CHAR, modulus=EMOJI_COUNT, offset=EMOJI_BASE),
    FieldSpec("lucky_direction", 211, 3, TABLE, table=DIRECTIONS),
    FieldSpec("lucky_element", 214, 4, TABLE, table=ELEMENTS),
    FieldSpec("lucky_percent", 218, 7, MODULO, modulus=101),
    FieldSpec("lucky_latitude", 225, 8, MODULO, modulus=181, offset=-90),
    FieldSpec("lucky_longitude", 233, 9, MODULO, modulus=361, offset=-180),
)


def decode_field(digest: bytes, spec: FieldSpec) -> Any:
    """
    Decode a single field from the digest.

    Args:
        digest: 32-byte digest
        spec: Field specification

    Returns:
        int, str, or List[int] (repeated fields) depending on the mapping

    Raises:
        ValueError: If the mapping kind is unknown
    """
    if spec.mapping == REPEATED:
        return [
            read_bits(digest, spec.bit_offset + i * spec.bit_width, spec.bit_width)
            for i in range(spec.count)
        ]

    raw = read_bits(digest, spec.bit_offset, spec.bit_width)

    if spec.mapping == IDENTITY:
        return raw
    elif spec.mapping == MODULO:
        return raw % spec.modulus + spec.offset
    elif spec.mapping == POWER_OF_TWO:
        return 1 << raw
    elif spec.mapping == CHAR:
        return chr(spec.offset + raw % spec.modulus)
    elif spec.mapping == TABLE:
        return spec.table[raw % len(spec.table)]
    else:
        raise ValueError(f"Unknown mapping '{spec.mapping}' for field '{spec.name}'")


def decode_all(
    digest: bytes, catalog: Sequence[FieldSpec] = FIELD_CATALOG
) -> Dict[str, Any]:
    """
    Decode every field of the catalog, in catalog order.

    Examples:
        >>> fields = decode_all(bytes(32))
        >>> fields["lucky_day"], fields["lucky_latitude"]
        (1, -90)
    """
    check_digest(digest)
    fields = OrderedDict()
    for spec in catalog:
        fields[spec.name] = decode_field(digest, spec)
    log(logger, "debug", "Decoded field catalog", fields=len(fields))
    return fields


def catalog_layout(
    catalog: Sequence[FieldSpec] = FIELD_CATALOG,
) -> List[Tuple[str, int, int]]:
    """Return (name, start_bit, end_bit) for each field, sorted by start bit."""
    return sorted(
        ((spec.name, spec.bit_offset, spec.end_bit) for spec in catalog),
        key=lambda entry: entry[1],
    )


def _check_spec(spec: FieldSpec) -> Optional[str]:
    if spec.mapping not in MAPPINGS:
        return f"unknown mapping '{spec.mapping}'"
    if spec.bit_offset < 0:
        return "negative bit offset"
    if not 1 <= spec.bit_width <= 64:
        return f"bit width {spec.bit_width} outside 1..64"
    if spec.count < 1:
        return "count must be positive"
    if spec.end_bit > config.DIGEST_BITS:
        return f"ends at bit {spec.end_bit}, past the {config.DIGEST_BITS}-bit digest"
    if spec.mapping in (MODULO, CHAR) and spec.modulus <= 0:
        return "modulus must be positive"
    if spec.mapping == TABLE and not spec.table:
        return "table is empty"
    return None


def validate_catalog(catalog: Sequence[FieldSpec] = FIELD_CATALOG) -> None:
    """
    Check that a field catalog is well formed.

    The default catalog is a constant, so this is exercised by the test
    suite rather than at runtime.

    Raises:
        ValueError: On unknown mappings, bad widths, empty tables, duplicate
            names, fields running past the digest or overlapping fields
    """
    seen = set()
    for spec in catalog:
        if spec.name in seen:
            raise ValueError(f"Duplicate field name '{spec.name}'")
        seen.add(spec.name)

        problem = _check_spec(spec)
        if problem:
            raise ValueError(f"Invalid field '{spec.name}': {problem}")

    layout = catalog_layout(catalog)
    for (prev_name, _, prev_end), (name, start, _) in zip(layout, layout[1:]):
        if start < prev_end:
            raise ValueError(f"Field '{name}' overlaps field '{prev_name}'")
