"""
Omikuji fortune library

This library derives a deterministic fortune slip from a SHA-256 digest of a
(year, user) pair and renders a 16-cell randomart fingerprint of the same
digest.

Main Features:
- Salted SHA-256 seed derivation
- Big-endian bit-range reads over the digest
- A fixed catalog of 17 fields (identity, modulo, table and char mappings)
- 1-D randomart fingerprint from 128 two-bit walk steps
- Named luck categories with top-N selection

Example Usage:
    from omikuji.fortune import derive_and_decode, render_fingerprint

    digest, fields = derive_and_decode(2026, "alice")
    print(fields["lucky_day"], fields["lucky_element"])
    print(render_fingerprint(digest))   # 16 cells drawn from S E X . + #

    # Or everything at once
    from omikuji.fortune import tell_fortune
    fortune = tell_fortune(2026, "alice")
    print(fortune.to_dict(short=True))
"""

# Core algorithm functions
from .algorithms import (
    build_seed,
    derive,
    hex_string,
    read_bits,
)

# Field catalog
from .fields import (
    FIELD_CATALOG,
    FieldSpec,
    catalog_layout,
    decode_all,
    decode_field,
    validate_catalog,
)

# Fingerprint
from .art import frame_art, render_fingerprint

# Luck categories
from .luck import LUCK_CATEGORIES, named_scores, top_scores

# Result bundle
from .result import Fortune, derive_and_decode, tell_fortune

# Public API
__all__ = [
    # Core functions
    "build_seed",
    "derive",
    "hex_string",
    "read_bits",
    # Field catalog
    "FIELD_CATALOG",
    "FieldSpec",
    "catalog_layout",
    "decode_all",
    "decode_field",
    "validate_catalog",
    # Fingerprint
    "frame_art",
    "render_fingerprint",
    # Luck categories
    "LUCK_CATEGORIES",
    "named_scores",
    "top_scores",
    # Result bundle
    "Fortune",
    "derive_and_decode",
    "tell_fortune",
]
