"""Unit tests for the 1-D randomart fingerprint."""

import pytest

from omikuji.fortune import frame_art, render_fingerprint
from omikuji.fortune.art import walk

ALPHABET = set("SEX.+#")


def test_art_length(zero_digest):
    assert len(render_fingerprint(zero_digest)) == 16


@pytest.mark.vectors
def test_zero_digest_never_moves(zero_digest):
    assert render_fingerprint(zero_digest) == "X..............."
    grid, end = walk(zero_digest)
    assert end == 0
    assert grid[0] == 128
    assert sum(grid) == 128


@pytest.mark.vectors
def test_ones_digest_visits_every_cell(ones_digest):
    # 128 steps of +3 cycle through all 16 cells eight times and end at 0
    grid, end = walk(ones_digest)
    assert end == 0
    assert grid == [8] * 16
    assert render_fingerprint(ones_digest) == "X###############"


@pytest.mark.vectors
def test_single_step_then_rest():
    digest = bytes([0b01000000]) + bytes(31)
    assert render_fingerprint(digest) == "SE.............."


@pytest.mark.vectors
def test_mixed_steps_in_first_byte():
    # 11 10 01 00 -> positions 3, 5, 6, 6 then rests at 6
    digest = bytes([0b11100100]) + bytes(31)
    assert render_fingerprint(digest) == "S..+.+E........."


def test_art_deterministic(alice_digest):
    assert render_fingerprint(alice_digest) == render_fingerprint(alice_digest)


def test_different_digests_different_art(alice_digest, bob_digest):
    assert render_fingerprint(alice_digest) != render_fingerprint(bob_digest)


def test_art_shape(arbitrary_digests, sample_digests):
    for digest in arbitrary_digests + sample_digests:
        art = render_fingerprint(digest)
        assert len(art) == 16
        assert set(art) <= ALPHABET, art
        assert art[0] in "SX", art
        if "X" in art:
            assert art.count("X") == 1
            assert "S" not in art and "E" not in art
        else:
            assert art.count("S") == 1 and art.count("E") == 1


def test_walk_counts_every_step(arbitrary_digests):
    for digest in arbitrary_digests:
        grid, _ = walk(digest)
        assert sum(grid) == 128
        assert all(count <= 255 for count in grid)


def test_render_rejects_wrong_size():
    with pytest.raises(ValueError):
        render_fingerprint(bytes(31))


def test_frame_art():
    assert frame_art("X...............") == "[X...............]"
