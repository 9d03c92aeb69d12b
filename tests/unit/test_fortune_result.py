"""Unit tests for derive_and_decode and the Fortune bundle."""

import json

from omikuji.fortune import (
    Fortune,
    decode_all,
    derive,
    derive_and_decode,
    render_fingerprint,
    tell_fortune,
)


def test_derive_and_decode_deterministic():
    digest1, fields1 = derive_and_decode(2026, "alice")
    digest2, fields2 = derive_and_decode(2026, "alice")
    assert digest1 == digest2
    assert fields1 == fields2


def test_derive_and_decode_matches_parts():
    digest, fields = derive_and_decode(2026, "alice")
    assert digest == derive(2026, "alice")
    assert fields == decode_all(digest)


def test_alice_and_bob_differ_pairwise():
    alice = tell_fortune(2026, "alice")
    bob = tell_fortune(2026, "bob")
    assert alice.digest != bob.digest
    assert alice.fields != bob.fields
    assert alice.art != bob.art


def test_tell_fortune_contents():
    fortune = tell_fortune(2026, "alice")
    assert isinstance(fortune, Fortune)
    assert fortune.seed == "2026-alice-sha-omikuji-2026"
    assert fortune.hex == fortune.digest.hex()
    assert fortune.art == render_fingerprint(fortune.digest)


def test_to_dict_full():
    fortune = tell_fortune(2026, "alice")
    data = fortune.to_dict()
    assert data["year"] == 2026
    assert data["user"] == "alice"
    assert data["hash"] == fortune.hex
    assert data["art"] == fortune.art
    assert "seed" not in data
    assert len(data["luck_scores"]) == 16
    assert list(data["luck_scores"].values()) == fortune.fields["luck_scores"]
    # Serializable as-is
    json.dumps(data, ensure_ascii=False)


def test_to_dict_short_and_seed():
    fortune = tell_fortune(2026, "alice")
    data = fortune.to_dict(short=True, include_seed=True)
    assert len(data["luck_scores"]) == 5
    assert data["seed"] == fortune.seed
    scores = list(data["luck_scores"].values())
    assert scores == sorted(scores, reverse=True)
    assert scores[0] == max(fortune.fields["luck_scores"])
