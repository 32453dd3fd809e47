"""Board geometry: the track, the home stretches and the stables."""

from __future__ import annotations

from dataclasses import dataclass

TRACK_LENGTH = 56
MAX_STEP = 12
FINISH_LENGTH = 6


@dataclass(frozen=True)
class Point:
    """A position on the board."""

    x: float
    y: float


NOWHERE = Point(-1, -1)

_WAY = tuple(
    Point(x, y)
    for x, y in (
        (37, 278), (55, 253), (85, 245), (119, 246), (155, 246), (190, 244),
        (225, 230), (236, 201), (235, 166), (241, 136), (241, 101), (238, 67),
        (267, 48), (307, 44),
        (344, 45), (379, 60), (389, 89), (386, 122), (374, 158), (369, 192),
        (388, 224), (420, 233), (449, 219), (476, 230), (511, 235), (544, 247),
        (559, 272), (566, 300),
        (557, 333), (540, 361), (510, 369), (477, 373), (444, 381), (410, 369),
        (375, 372), (365, 405), (370, 447), (377, 482), (377, 518), (364, 547),
        (336, 567), (302, 568),
        (264, 564), (238, 537), (228, 508), (231, 477), (241, 442), (234, 411),
        (221, 385), (184, 382), (149, 386), (114, 390), (78, 386), (53, 366),
        (38, 342), (37, 309),
    )
)

_FINISH = (
    tuple(Point(x, 309) for x in (79, 116, 149, 182, 214, 248)),
    tuple(Point(307, y) for y in (82, 118, 153, 184, 218, 253)),
    tuple(Point(x, 300) for x in (526, 489, 456, 421, 390, 356)),
    tuple(Point(302, y) for y in (530, 492, 460, 425, 394, 359)),
)

_STABLE_CENTRES = ((175, 175), (850, 175), (850, 850), (175, 850))
_STABLE_OFFSETS = ((-25, -25), (25, -25), (25, 25), (-25, 25))


class Board:
    """Locations on the board and the path ahead of a piece."""

    def __init__(self, win_size: int = 600) -> None:
        self.win_size = win_size
        # The stable layout is designed for 1024 pixels and scales in whole steps.
        self.scale = win_size // 1024
        self.way = _WAY
        self.stables = tuple(
            Point((cx + dx) * self.scale, (cy + dy) * self.scale)
            for cx, cy in _STABLE_CENTRES
            for dx, dy in _STABLE_OFFSETS
        )
        self.next_way: list[Point] = [NOWHERE] * MAX_STEP

    def reset_next_way(self) -> None:
        self.next_way = [NOWHERE] * MAX_STEP

    def start_location(self, team_no: int) -> Point:
        """The square where a team's pieces enter the track."""
        if not 0 <= team_no < 4:
            return NOWHERE
        return self.way[team_no * 14]

    def finish_location(self, team_no: int, index: int) -> Point:
        """The index-th square of a team's home stretch."""
        if not 0 <= index < FINISH_LENGTH or not 0 <= team_no < 4:
            return NOWHERE
        return _FINISH[team_no][index]

    def init_location(self, team_no: int, unit_index: int) -> Point:
        """Where a piece waits in its stable."""
        if not 0 <= team_no < 4 or not 0 <= unit_index < 4:
            return NOWHERE
        return self.stables[team_no * 4 + unit_index]

    def index_of(self, point: Point) -> int:
        """The track index of a point, or -1 when it is not on the track."""
        try:
            return self.way.index(point)
        except ValueError:
            return -1

    def next_location(self, current: int, step: int) -> Point:
        """The track square step squares after index current, wrapping round."""
        if current >= TRACK_LENGTH or not 0 < step <= MAX_STEP:
            return NOWHERE
        index = current + step
        if index < 0:
            return NOWHERE
        return self.way[index % TRACK_LENGTH]

    def next_locations(self, current: Point, step: int) -> list[Point]:
        """Fill the path of step squares ahead of a point and return it."""
        if step > MAX_STEP:
            raise ValueError(f"cannot look more than {MAX_STEP} squares ahead")
        self.reset_next_way()
        current_index = self.index_of(current)
        for offset in range(1, step + 1):
            self.next_way[offset - 1] = self.next_location(current_index, offset)
        return list(self.next_way)