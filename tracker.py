"""
tracker.py — Planted crop tracking: plant, water, remove.

Tracked crops live in the browser session's workspace only.
"""

from datetime import datetime

from models import TrackedCrop


def plant_crop(tracked, crop, now=None):
    """
    Start tracking a recommended crop.

    A crop whose name is already tracked is not added twice.

    Args:
        tracked: List of TrackedCrop, modified in place.
        crop: RecommendedCrop to plant.
        now: Planting time (defaults to datetime.now()).

    Returns:
        The new TrackedCrop, or None if the crop was already planted.
    """
    if any(tc.name == crop.name for tc in tracked):
        return None

    now = now or datetime.now()
    new_crop = TrackedCrop(
        id=f"{crop.name}-{int(now.timestamp() * 1000)}",
        name=crop.name,
        season=crop.season,
        care_tips=crop.care_tips,
        estimated_yield=crop.estimated_yield,
        width=crop.width,
        height=crop.height,
        planted_date=now,
    )
    tracked.append(new_crop)
    return new_crop


def find_crop(tracked, crop_id):
    for tc in tracked:
        if tc.id == crop_id:
            return tc
    return None


def water_crop(tracked, crop_id, now=None):
    """Log a watering. Returns the crop, or None if crop_id is unknown."""
    crop = find_crop(tracked, crop_id)
    if crop is None:
        return None
    crop.watering_log.append(now or datetime.now())
    return crop


def remove_crop(tracked, crop_id):
    """Stop tracking a crop. Returns True if it was removed."""
    crop = find_crop(tracked, crop_id)
    if crop is None:
        return False
    tracked.remove(crop)
    return True
