"""
routes/recommendations.py — Crop recommendation exchange.

Provides:
- POST /recommendations/request — Validate garden parameters and return the
  payload to send to the recommendation service (parameters + grid)
- POST /recommendations/layout — Accept the service's response, validate the
  placements against the current grid, keep only the valid ones
- GET /recommendations/ — Last reviewed recommendation

Placements from the service are never shown without going through
placement_validator first.
"""

from flask import Blueprint, request, jsonify, current_app

from models import GardenParameters
from recommendation import build_layout_request, parse_recommendation, review_recommendation
from terrace_grid import grid_to_payload, grid_from_payload, render_grid
from utils.validators import validate_garden_parameters
from workspace import get_workspace

recommendations_bp = Blueprint('recommendations', __name__, url_prefix='/recommendations')


def _review_to_dict(review):
    return {
        'crops': [c.to_dict() for c in review['crops']],
        'layout': [p.to_dict() for p in review['placements']],
        'violations': [v.to_dict() for v in review['violations']],
        'dropped': review['dropped'],
        'terraceLayout': grid_to_payload(review['grid']),
    }


@recommendations_bp.route('/')
def last_review():
    workspace = get_workspace()
    with workspace.lock:
        if workspace.review is None:
            return jsonify({'success': True, 'recommendation': None})
        return jsonify({'success': True, 'recommendation': _review_to_dict(workspace.review)})


@recommendations_bp.route('/request', methods=['POST'])
def layout_request():
    """Build the outbound request from the garden form and the current grid."""
    data = request.get_json(silent=True) or {}
    try:
        params = GardenParameters(**validate_garden_parameters(data))
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400

    workspace = get_workspace()
    with workspace.lock:
        if workspace.grid.plantable_count == 0:
            return jsonify({
                'success': False,
                'error': "Draw at least one plantable tile before asking for a layout."
            }), 400
        workspace.garden = params
        payload = build_layout_request(workspace.grid, params)
        current_app.logger.info(
            "Layout request for %s (%s), grid:\n%s",
            params.city, params.month, '\n'.join(render_grid(workspace.grid))
        )
        return jsonify({'success': True, 'request': payload})


@recommendations_bp.route('/layout', methods=['POST'])
def receive_layout():
    """
    Review a recommendation response.

    When the response echoes the terraceLayout it was requested for, the
    placements are checked against that snapshot; otherwise against the
    current grid.
    """
    data = request.get_json(silent=True)
    try:
        crops, placements = parse_recommendation(data)
        snapshot = None
        if data.get('terraceLayout') is not None:
            snapshot = grid_from_payload(data['terraceLayout'])
            max_size = current_app.config['MAX_GRID_SIZE']
            if snapshot.rows > max_size or snapshot.cols > max_size:
                raise ValueError(f"terraceLayout is larger than {max_size}x{max_size}")
    except ValueError as e:
        current_app.logger.warning("Rejected malformed recommendation: %s", e)
        return jsonify({'success': False, 'error': str(e)}), 400

    workspace = get_workspace()
    with workspace.lock:
        grid = snapshot if snapshot is not None else workspace.grid
        review = review_recommendation(grid, crops, placements)
        review['grid'] = grid
        workspace.review = review

    current_app.logger.info(
        "Reviewed recommendation: %d crops, %d placements, %d violations",
        len(crops), len(placements), len(review['violations'])
    )
    if review['dropped']:
        current_app.logger.warning(
            "Dropped %d of %d placements", review['dropped'], len(placements)
        )
    return jsonify({'success': True, 'recommendation': _review_to_dict(review)})
