"""
placement_validator.py — Checks crop placements against a terrace grid.

Placements come from the recommendation service and are untrusted. For each
placement, in list order:
1. The crop name must match a footprint exactly, otherwise UnknownCrop and
   the placement is skipped (it claims no cells).
2. Any occupied cell outside the grid gives one PlacementOutOfBounds.
3. Every in-bounds occupied cell that is not plantable gives an
   UnplantableTile.
4. Every in-bounds cell also claimed by an earlier placement gives an
   Overlap naming the earlier crop first. One Overlap per pair and cell.

Nothing here raises for a bad placement and inputs are never modified; the
caller decides which placements to drop.
"""

from collections import defaultdict
from typing import Dict, List, Sequence

from models import (
    TerraceGrid, CropFootprint, CropPlacement,
    Violation, UnknownCrop, PlacementOutOfBounds, UnplantableTile, Overlap
)


def _footprint_index(footprints: Sequence[CropFootprint]) -> Dict[str, CropFootprint]:
    index = {}
    for fp in footprints:
        # First footprint with a given name wins
        index.setdefault(fp.name, fp)
    return index


def _check(grid, footprints, placements):
    """Yield (placement_index, violation, other_index_or_None) in report order."""
    index = _footprint_index(footprints)
    claimed = defaultdict(list)  # (row, col) -> placement indices

    for i, placement in enumerate(placements):
        footprint = index.get(placement.crop_name)
        if footprint is None:
            yield i, UnknownCrop(placement.crop_name), None
            continue

        if placement.extends_outside(footprint, grid.rows, grid.cols):
            yield i, PlacementOutOfBounds(placement.crop_name), None

        inside = list(placement.occupied_cells(footprint, grid.rows, grid.cols))

        for r, c in inside:
            if not grid.is_plantable(r, c):
                yield i, UnplantableTile(placement.crop_name, r, c), None

        for r, c in inside:
            for j in claimed[(r, c)]:
                yield i, Overlap(placements[j].crop_name, placement.crop_name, r, c), j
            claimed[(r, c)].append(i)


def validate_placements(grid: TerraceGrid,
                        footprints: Sequence[CropFootprint],
                        placements: Sequence[CropPlacement]) -> List[Violation]:
    """
    Validate a placement batch against a grid snapshot.

    Args:
        grid: The grid the placements were produced for.
        footprints: Crop sizes, looked up by exact crop name.
        placements: The batch to check.

    Returns:
        List of violations in placement-list order; empty when the whole
        batch is valid.
    """
    return [violation for _, violation, _ in _check(grid, footprints, placements)]


def offending_indices(grid, footprints, placements):
    """Indices of placements involved in at least one violation, sorted."""
    bad = set()
    for i, _, other in _check(grid, footprints, placements):
        bad.add(i)
        if other is not None:
            bad.add(other)
    return sorted(bad)


def accepted_placements(grid, footprints, placements):
    """Placements with no violation of their own, in input order."""
    bad = set(offending_indices(grid, footprints, placements))
    return [p for i, p in enumerate(placements) if i not in bad]
