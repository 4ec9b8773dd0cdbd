"""Canonical relabeling of puzzle states.

Blocks are identified only by the cells that share a label, so renaming
labels never changes the position.  Mapping every state to the variant
whose labels first appear in increasing order (scanning row-major) makes
all such renamings compare equal, which shrinks the state graph by the
number of ways congruent blocks can be swapped.
"""

from __future__ import annotations

from klotski.models.board import EMPTY, State


class Canonicalizer:
    """Stateless canonicalizer — all methods are static."""

    @staticmethod
    def labels(state: State) -> tuple[str, ...]:
        """Return the sorted block labels present in ``state``."""
        return tuple(sorted(set(state) - {EMPTY}))

    @staticmethod
    def normalize(state: State, labels: tuple[str, ...]) -> State:
        """Return the canonical form of ``state``.

        ``labels`` must be the sorted label set shared by every state of
        the puzzle (see :meth:`labels`).  The result uses the same labels,
        assigned in order of first appearance.
        """
        cells = list(state)
        n = len(cells)
        cursor = 0
        for i in range(n):
            if cursor == len(labels):
                break
            # Cells before i hold labels[:cursor] only, in first-seen order.
            c = cells[i]
            if c == EMPTY:
                continue
            expected = labels[cursor]
            if c < expected:
                continue
            if c != expected:
                # Neither c nor expected occurs before i; swap them from here on.
                for j in range(i, n):
                    if cells[j] == c:
                        cells[j] = expected
                    elif cells[j] == expected:
                        cells[j] = c
            cursor += 1
        return "".join(cells)

    @staticmethod
    def is_canonical(state: State, labels: tuple[str, ...]) -> bool:
        return Canonicalizer.normalize(state, labels) == state
