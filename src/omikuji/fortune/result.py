"""
Fortune result bundle.

Ties hash derivation, field decoding and the fingerprint together into a
single value for the presentation layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from omikuji import config
from .algorithms import build_seed, derive, hex_string
from .art import render_fingerprint
from .fields import decode_all
from .luck import named_scores, top_scores


def derive_and_decode(year: int, user: str) -> Tuple[bytes, Dict[str, Any]]:
    """Derive the digest for (year, user) and decode every field from it."""
    digest = derive(year, user)
    return digest, decode_all(digest)


@dataclass
class Fortune:
    """A fully drawn omikuji."""

    year: int
    user: str
    seed: str
    digest: bytes
    fields: Dict[str, Any] = field(default_factory=dict)
    art: str = ""

    @property
    def hex(self) -> str:
        return hex_string(self.digest)

    def luck(self, short: bool = False) -> Dict[str, int]:
        """Luck scores by category; only the top few when short."""
        scores = self.fields["luck_scores"]
        if short:
            return dict(top_scores(scores, config.SHORT_SCORE_COUNT))
        return dict(named_scores(scores))

    def to_dict(self, short: bool = False, include_seed: bool = False) -> Dict[str, Any]:
        """JSON-ready view of the fortune."""
        data: Dict[str, Any] = {
            "year": self.year,
            "user": self.user,
            "hash": self.hex,
        }
        for name, value in self.fields.items():
            if name == "luck_scores":
                data[name] = self.luck(short)
            else:
                data[name] = value
        data["art"] = self.art
        if include_seed:
            data["seed"] = self.seed
        return data


def tell_fortune(year: int, user: str) -> Fortune:
    """Draw the omikuji for (year, user)."""
    digest, fields = derive_and_decode(year, user)
    return Fortune(
        year=year,
        user=user,
        seed=build_seed(year, user),
        digest=digest,
        fields=fields,
        art=render_fingerprint(digest),
    )
