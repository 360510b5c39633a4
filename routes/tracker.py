"""
routes/tracker.py — "My Garden" crop tracking routes.

Provides:
- GET /tracker/ — Tracked crops with their recent watering log
- POST /tracker/plant — Plant a crop from the last recommendation (by name)
- POST /tracker/<crop_id>/water — Log a watering
- POST /tracker/<crop_id>/remove — Stop tracking a crop
"""

from flask import Blueprint, request, jsonify, current_app

from tracker import plant_crop, water_crop, remove_crop
from workspace import get_workspace

tracker_bp = Blueprint('tracker', __name__, url_prefix='/tracker')


def _crop_dict(crop):
    return crop.to_dict(log_limit=current_app.config['WATERING_LOG_DISPLAY'])


@tracker_bp.route('/')
def list_crops():
    workspace = get_workspace()
    with workspace.lock:
        return jsonify({'success': True, 'crops': [_crop_dict(c) for c in workspace.tracked_crops]})


@tracker_bp.route('/plant', methods=['POST'])
def plant():
    """Start tracking one of the recommended crops."""
    data = request.get_json(silent=True) or {}
    name = data.get('name', '')

    workspace = get_workspace()
    with workspace.lock:
        crops = workspace.review['crops'] if workspace.review else []
        crop = next((c for c in crops if c.name == name), None)
        if crop is None:
            return jsonify({'success': False, 'error': f"No recommended crop named {name!r}"}), 404

        tracked = plant_crop(workspace.tracked_crops, crop)
        if tracked is None:
            return jsonify({'success': False, 'error': f"{name} is already planted"}), 409
        return jsonify({'success': True, 'crop': _crop_dict(tracked)})


@tracker_bp.route('/<crop_id>/water', methods=['POST'])
def water(crop_id):
    workspace = get_workspace()
    with workspace.lock:
        crop = water_crop(workspace.tracked_crops, crop_id)
        if crop is None:
            return jsonify({'success': False, 'error': 'Crop not found'}), 404
        return jsonify({'success': True, 'crop': _crop_dict(crop)})


@tracker_bp.route('/<crop_id>/remove', methods=['POST'])
def remove(crop_id):
    workspace = get_workspace()
    with workspace.lock:
        if not remove_crop(workspace.tracked_crops, crop_id):
            return jsonify({'success': False, 'error': 'Crop not found'}), 404
        return jsonify({'success': True})
