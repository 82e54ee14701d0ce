"""Marching squares transition table.

The table answers one question: a boundary path enters a cell travelling in
some direction; in which direction does it leave? The answer depends only on
the cell's corner mask. Every rule is registered together with its reverse
(entering along reverse(out) leaves along reverse(in)), so a path can be walked
either way through a cell.

Saddle masks are resolved as two disconnected paths, each cutting off one of
the filled corners. Both paths live in the same table row and never share a
direction, so a walk that enters along one of them stays on it.
"""

from dataclasses import dataclass

from rastertrace.domain import CornerMask, Direction

UP, RIGHT, DOWN, LEFT = Direction.cardinal()

TL = CornerMask.TOP_LEFT
TR = CornerMask.TOP_RIGHT
BL = CornerMask.BOTTOM_LEFT
BR = CornerMask.BOTTOM_RIGHT

# (mask, incoming, outgoing); the reverse of each rule is added automatically
_RULES: tuple[tuple[CornerMask, Direction, Direction], ...] = (
    # One corner: turn around the filled corner
    (TL, DOWN, LEFT),
    (TR, DOWN, RIGHT),
    (BL, UP, LEFT),
    (BR, UP, RIGHT),
    # Two corners on one side: straight through
    (TL | TR, LEFT, LEFT),
    (BL | BR, LEFT, LEFT),
    (TL | BL, UP, UP),
    (TR | BR, UP, UP),
    # Two diagonal corners (saddles): two paths, one around each filled corner
    (TL | BR, RIGHT, UP),
    (TL | BR, LEFT, DOWN),
    (TR | BL, LEFT, UP),
    (TR | BL, RIGHT, DOWN),
    # Three corners: turn around the single empty corner
    (TL | TR | BL, UP, RIGHT),
    (TL | TR | BR, UP, LEFT),
    (TL | BL | BR, LEFT, UP),
    (TR | BL | BR, RIGHT, UP),
)


@dataclass(frozen=True)
class TransitionTable:
    """Read-only lookup from (corner mask, incoming direction) to outgoing direction.

    Attributes:
        entries: One row per corner mask value, one column per valid direction
    """

    entries: tuple[tuple[Direction, ...], ...]

    def transition(self, mask: CornerMask, incoming: Direction) -> Direction:
        """Return the direction a path leaves a cell.

        Args:
            mask: Corner mask of the cell
            incoming: Direction of travel when entering the cell

        Returns:
            Outgoing direction, or INVALID if no path enters that way
        """
        if not incoming.is_valid():
            return Direction.INVALID
        return self.entries[mask][incoming]

    def entry_direction(self, mask: CornerMask) -> tuple[Direction, Direction] | None:
        """Find the first direction, in probing order, that has a path.

        Returns:
            Tuple of (incoming, outgoing), or None if the mask has no path
        """
        return next(iter(self.paths(mask).items()), None)

    def paths(self, mask: CornerMask) -> dict[Direction, Direction]:
        """Return every valid incoming -> outgoing pair for a mask."""
        return {
            incoming: outgoing
            for incoming in Direction.cardinal()
            if (outgoing := self.transition(mask, incoming)).is_valid()
        }


def build_transition_table() -> TransitionTable:
    """Build the marching squares table.

    Returns:
        A fully populated, immutable TransitionTable
    """
    rows = [[Direction.INVALID] * 4 for _ in range(16)]

    for mask, incoming, outgoing in _RULES:
        rows[mask][incoming] = outgoing
        rows[mask][outgoing.reverse()] = incoming.reverse()

    return TransitionTable(entries=tuple(tuple(row) for row in rows))


DEFAULT_TRANSITIONS = build_transition_table()
