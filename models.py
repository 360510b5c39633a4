"""
models.py — Python dataclasses for the terrace planner.

Grid cells are stored as tuples of tuples so a TerraceGrid can be shared
between requests and snapshotted without copying.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple


class GridError(Exception):
    """Base class for structural grid errors."""


class InvalidDimension(GridError, ValueError):
    """Rows or columns are not positive integers."""


class OutOfBounds(GridError, IndexError):
    """A cell coordinate falls outside the current grid."""


def check_dimension(name, value):
    """Raise InvalidDimension unless value is a positive int."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidDimension(f"{name} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class TerraceGrid:
    """Plantable/non-plantable matrix. True = plantable 1x1 ft tile."""
    rows: int
    cols: int
    cells: Tuple[Tuple[bool, ...], ...]

    def __post_init__(self):
        check_dimension('rows', self.rows)
        check_dimension('cols', self.cols)
        if len(self.cells) != self.rows or any(len(r) != self.cols for r in self.cells):
            raise ValueError(
                f"cells do not match a {self.rows}x{self.cols} grid"
            )

    def in_bounds(self, row, col) -> bool:
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, int):
                return False
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_plantable(self, row, col) -> bool:
        return self.cells[row][col]

    @property
    def plantable_count(self) -> int:
        return sum(sum(1 for c in r if c) for r in self.cells)


@dataclass(frozen=True)
class CropFootprint:
    """Mature size of a crop in feet, rounded up to whole cells when placed."""
    name: str
    width: float
    height: float

    @property
    def cell_width(self) -> int:
        return math.ceil(self.width)

    @property
    def cell_height(self) -> int:
        return math.ceil(self.height)


@dataclass
class RecommendedCrop:
    """Crop suggestion returned by the recommendation service."""
    name: str = ""
    season: str = ""
    care_tips: str = ""
    estimated_yield: str = ""
    width: float = 1.0
    height: float = 1.0

    @property
    def footprint(self) -> CropFootprint:
        return CropFootprint(self.name, self.width, self.height)

    def to_dict(self):
        return {
            'name': self.name,
            'season': self.season,
            'careTips': self.care_tips,
            'estimatedYield': self.estimated_yield,
            'plantSize': {'width': self.width, 'height': self.height},
        }


@dataclass(frozen=True)
class CropPlacement:
    """Top-left cell of a crop on the terrace grid."""
    crop_name: str
    row: int
    col: int

    def extends_outside(self, footprint: CropFootprint, rows, cols) -> bool:
        """True if any covered cell falls outside a rows x cols grid."""
        return (self.row < 0 or self.col < 0
                or self.row + footprint.cell_height > rows
                or self.col + footprint.cell_width > cols)

    def occupied_cells(self, footprint: CropFootprint, rows=None, cols=None):
        """
        Yield (row, col) for every cell the footprint covers, row-major.

        With rows and cols given, only cells inside that grid are yielded,
        so an oversized footprint costs no more than the grid itself.
        """
        row_end = self.row + footprint.cell_height
        col_end = self.col + footprint.cell_width
        row_start, col_start = self.row, self.col
        if rows is not None:
            row_start, row_end = max(row_start, 0), min(row_end, rows)
        if cols is not None:
            col_start, col_end = max(col_start, 0), min(col_end, cols)
        for r in range(row_start, row_end):
            for c in range(col_start, col_end):
                yield r, c

    def to_dict(self):
        return {'cropName': self.crop_name, 'position': {'row': self.row, 'col': self.col}}


# ========================================
# Placement violations
# ========================================

@dataclass(frozen=True)
class Violation:
    """A non-fatal finding about one placement batch."""
    kind = 'violation'

    def to_dict(self):
        data = {'kind': self.kind}
        data.update(self.__dict__)
        return data


@dataclass(frozen=True)
class UnknownCrop(Violation):
    crop_name: str
    kind = 'unknown_crop'


@dataclass(frozen=True)
class PlacementOutOfBounds(Violation):
    crop_name: str
    kind = 'out_of_bounds'


@dataclass(frozen=True)
class UnplantableTile(Violation):
    crop_name: str
    row: int
    col: int
    kind = 'unplantable_tile'


@dataclass(frozen=True)
class Overlap(Violation):
    crop_a: str
    crop_b: str
    row: int
    col: int
    kind = 'overlap'


# ========================================
# Session records
# ========================================

@dataclass
class GardenParameters:
    """Garden details forwarded to the recommendation service as-is."""
    length_ft: float = 10.0
    width_ft: float = 12.0
    city: str = ""
    month: str = ""
    soil_type: Optional[str] = None

    @property
    def area_sqft(self) -> float:
        return self.length_ft * self.width_ft


@dataclass
class TrackedCrop:
    """A crop the user planted, with its watering history."""
    id: str = ""
    name: str = ""
    season: str = ""
    care_tips: str = ""
    estimated_yield: str = ""
    width: float = 1.0
    height: float = 1.0
    planted_date: Optional[datetime] = None
    watering_log: List[datetime] = field(default_factory=list)

    @property
    def last_watered(self) -> Optional[datetime]:
        return self.watering_log[-1] if self.watering_log else None

    def to_dict(self, log_limit=None):
        log = self.watering_log if log_limit is None else self.watering_log[-log_limit:]
        return {
            'id': self.id,
            'name': self.name,
            'season': self.season,
            'careTips': self.care_tips,
            'estimatedYield': self.estimated_yield,
            'plantSize': {'width': self.width, 'height': self.height},
            'plantedDate': self.planted_date.isoformat() if self.planted_date else None,
            'wateringLog': [d.isoformat() for d in log],
            'timesWatered': len(self.watering_log),
            'lastWatered': self.last_watered.isoformat() if self.last_watered else None,
        }
