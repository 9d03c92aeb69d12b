"""
1-D randomart for omikuji digests, in the spirit of SSH randomart.

The digest is read as 128 two-bit steps (most-significant pair of each byte
first). A walker starts at cell 0 of a 16-cell circular track and moves
right by 0-3 cells per step. Every landing increments that cell's counter.

Cell symbols:
    X  start and end on the same cell
    S  start (always cell 0)
    E  end
    .  never visited
    +  visited once
    #  visited more than once
"""

from typing import List, Tuple

from omikuji import config
from omikuji.lib.log import get_logger, log
from .algorithms import check_digest

logger = get_logger(__name__)

START_POSITION = 0


def walk(digest: bytes) -> Tuple[List[int], int]:
    """
    Run the walk over the digest.

    Returns:
        Tuple of (visit_counts, end_position)
    """
    check_digest(digest)
    width = config.ART_WIDTH
    grid = [0] * width
    position = START_POSITION

    for byte in digest:
        for shift in (6, 4, 2, 0):
            position = (position + ((byte >> shift) & 0b11)) % width
            grid[position] = min(grid[position] + 1, config.ART_COUNTER_MAX)

    return grid, position


def render_fingerprint(digest: bytes) -> str:
    """
    Render the 16-character fingerprint of a digest.

    Examples:
        >>> render_fingerprint(bytes(32))
        'X...............'
    """
    grid, end_position = walk(digest)
    log(logger, "debug", "Walk finished", end=end_position)

    cells = []
    for index, count in enumerate(grid):
        if index == START_POSITION and index == end_position:
            cells.append("X")
        elif index == START_POSITION:
            cells.append("S")
        elif index == end_position:
            cells.append("E")
        elif count == 0:
            cells.append(".")
        elif count == 1:
            cells.append("+")
        else:
            cells.append("#")
    return "".join(cells)


def frame_art(art: str) -> str:
    """Frame a fingerprint for display, e.g. [S..#+..E.......]."""
    return f"[{art}]"
