"""
recommendation.py — Boundary with the crop recommendation service.

The service itself (a hosted language model) is outside this application.
This module only:
- builds the outbound payload: garden parameters plus the grid snapshot
- parses the inbound payload: recommended crops and their placements
- reviews a placement batch so that only valid placements reach the
  layout overlay and the export

Inbound payload shape:
    {
        "crops": [{"name", "season", "careTips", "estimatedYield",
                   "plantSize": {"width", "height"}}],
        "layout": [{"cropName", "position": {"row", "col"}}]
    }
"""

from models import RecommendedCrop, CropPlacement, GardenParameters
from placement_validator import validate_placements, accepted_placements
from terrace_grid import grid_to_payload
from utils.validators import parse_int, parse_positive_number


def build_layout_request(grid, params: GardenParameters):
    """Return the payload sent to the recommendation service."""
    return {
        'terraceAreaSqft': params.area_sqft,
        'city': params.city,
        'month': params.month,
        'soilType': params.soil_type,
        'terraceLayout': grid_to_payload(grid),
    }


def _parse_crop(item, i):
    if not isinstance(item, dict):
        raise ValueError(f"crops[{i}] must be an object")
    name = item.get('name')
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"crops[{i}] is missing a name")
    size = item.get('plantSize')
    if not isinstance(size, dict):
        raise ValueError(f"crops[{i}] is missing plantSize")
    return RecommendedCrop(
        name=name,
        season=item.get('season') or '',
        care_tips=item.get('careTips') or '',
        estimated_yield=item.get('estimatedYield') or '',
        width=parse_positive_number(size.get('width'), f"crops[{i}].plantSize.width"),
        height=parse_positive_number(size.get('height'), f"crops[{i}].plantSize.height"),
    )


def _parse_placement(item, i):
    if not isinstance(item, dict):
        raise ValueError(f"layout[{i}] must be an object")
    crop_name = item.get('cropName')
    if not isinstance(crop_name, str):
        raise ValueError(f"layout[{i}] is missing cropName")
    position = item.get('position')
    if not isinstance(position, dict):
        raise ValueError(f"layout[{i}] is missing position")
    return CropPlacement(
        crop_name=crop_name,
        row=parse_int(position.get('row'), f"layout[{i}].position.row"),
        col=parse_int(position.get('col'), f"layout[{i}].position.col"),
    )


def parse_recommendation(data):
    """
    Parse a recommendation response.

    A response that does not match the expected schema is rejected as a
    whole. Placements that parse but do not fit the grid are left for
    review_recommendation to report.

    Returns:
        (crops, placements) lists.

    Raises:
        ValueError: on a malformed response.
    """
    if not isinstance(data, dict):
        raise ValueError("recommendation must be an object")
    crops_raw = data.get('crops')
    if not isinstance(crops_raw, list):
        raise ValueError("recommendation is missing the 'crops' list")
    layout_raw = data.get('layout') or []
    if not isinstance(layout_raw, list):
        raise ValueError("'layout' must be a list")

    crops = [_parse_crop(item, i) for i, item in enumerate(crops_raw)]
    placements = [_parse_placement(item, i) for i, item in enumerate(layout_raw)]
    return crops, placements


def review_recommendation(grid, crops, placements):
    """
    Validate a placement batch and split it into accepted and dropped.

    Args:
        grid: Grid snapshot the batch was requested for.
        crops: RecommendedCrop list from the same response.
        placements: CropPlacement list from the same response.

    Returns:
        dict with keys crops, placements (accepted), violations, dropped.
    """
    footprints = [c.footprint for c in crops]
    violations = validate_placements(grid, footprints, placements)
    accepted = accepted_placements(grid, footprints, placements) if violations else list(placements)
    return {
        'crops': crops,
        'placements': accepted,
        'violations': violations,
        'dropped': len(placements) - len(accepted),
    }
