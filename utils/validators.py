"""
utils/validators.py — Input validation helpers.

Validates:
- Grid dimensions against the configured slider bounds
- Cell coordinates sent by the grid editor
- Garden parameters for the recommendation request (positive size, city,
  month name, optional soil type)

Each helper returns the cleaned value or raises ValueError with a message
suitable for a JSON error response.
"""

import math

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December"
]


def parse_int(value, name):
    """Coerce value to int, accepting integral floats and numeric strings."""
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{name} must be an integer")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer")


def parse_positive_number(value, name):
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number")
    if not math.isfinite(number) or number <= 0:
        raise ValueError(f"{name} must be a positive number")
    return number


def validate_grid_size(rows, cols, min_size, max_size):
    """
    Check requested grid dimensions against the editor's bounds.

    Returns:
        (rows, cols) as ints.
    """
    rows = parse_int(rows, 'rows')
    cols = parse_int(cols, 'cols')
    for name, value in (('rows', rows), ('cols', cols)):
        if not min_size <= value <= max_size:
            raise ValueError(f"{name} must be between {min_size} and {max_size}")
    return rows, cols


def parse_cell(data):
    """
    Read a (row, col) pair from a request body.

    Missing row/col returns (None, None): the pointer is not over a tile.
    """
    row = data.get('row')
    col = data.get('col')
    if row is None or col is None:
        return None, None
    return parse_int(row, 'row'), parse_int(col, 'col')


def validate_garden_parameters(data):
    """
    Validate the garden form sent alongside the grid.

    Returns:
        dict with keys length_ft, width_ft, city, month, soil_type.
    """
    length = parse_positive_number(data.get('length'), 'length')
    width = parse_positive_number(data.get('width'), 'width')

    city = (data.get('city') or '').strip()
    if len(city) < 2:
        raise ValueError("City is required.")

    month = (data.get('month') or '').strip().capitalize()
    if month not in MONTHS:
        raise ValueError("Please select a month.")

    soil_type = (data.get('soilType') or '').strip() or None

    return {
        'length_ft': length,
        'width_ft': width,
        'city': city,
        'month': month,
        'soil_type': soil_type,
    }
