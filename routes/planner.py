"""
routes/planner.py — Terrace grid editor API.

Provides:
- GET /planner/grid — Current grid snapshot plus editor state
- POST /planner/resize — Resize the grid (rows, cols)
- POST /planner/tool — Switch tool (draw / erase), only between strokes
- POST /planner/stroke/start — Pointer/touch down on a cell
- POST /planner/stroke/move — Pointer/touch moved over a cell
- POST /planner/stroke/end — Pointer released or left the grid
- POST /planner/clear — Reset every cell to non-plantable

Stroke endpoints report 'changed' so the page only redraws when a cell
actually flipped.
"""

from flask import Blueprint, request, jsonify, current_app

from models import GridError
from painting import PaintingStateError
from terrace_grid import grid_to_payload
from utils.validators import validate_grid_size, parse_cell
from workspace import get_workspace

planner_bp = Blueprint('planner', __name__, url_prefix='/planner')


def _editor_response(workspace, **extra):
    body = {
        'success': True,
        'layout': grid_to_payload(workspace.grid),
        'editor': workspace.painter.snapshot(),
    }
    body.update(extra)
    return jsonify(body)


def _error(message, status=400):
    return jsonify({'success': False, 'error': message}), status


@planner_bp.route('/grid')
def get_grid():
    """Return the grid in the same shape sent to the recommendation service."""
    workspace = get_workspace()
    with workspace.lock:
        return _editor_response(workspace)


@planner_bp.route('/resize', methods=['POST'])
def resize():
    """Resize the grid. Tiles outside the new bounds are discarded."""
    data = request.get_json(silent=True) or {}
    try:
        rows, cols = validate_grid_size(
            data.get('rows'), data.get('cols'),
            current_app.config['MIN_GRID_SIZE'],
            current_app.config['MAX_GRID_SIZE'],
        )
    except ValueError as e:
        return _error(str(e))

    workspace = get_workspace()
    with workspace.lock:
        old = workspace.grid
        workspace.painter.resize(rows, cols)
        current_app.logger.info(
            "Resized terrace grid %dx%d -> %dx%d", old.rows, old.cols, rows, cols
        )
        return _editor_response(workspace)


@planner_bp.route('/tool', methods=['POST'])
def set_tool():
    """Switch between the draw and erase tools."""
    data = request.get_json(silent=True) or {}
    workspace = get_workspace()
    with workspace.lock:
        try:
            workspace.painter.set_tool(data.get('tool'))
        except PaintingStateError as e:
            return _error(str(e), 409)
        except ValueError:
            return _error(f"Unknown tool: {data.get('tool')!r}")
        return _editor_response(workspace)


@planner_bp.route('/stroke/start', methods=['POST'])
def stroke_start():
    data = request.get_json(silent=True) or {}
    try:
        row, col = parse_cell(data)
    except ValueError as e:
        return _error(str(e))
    if row is None:
        return _error("row and col are required")

    workspace = get_workspace()
    with workspace.lock:
        try:
            changed = workspace.painter.start(row, col)
        except GridError as e:
            return _error(str(e))
        return _editor_response(workspace, changed=changed)


@planner_bp.route('/stroke/move', methods=['POST'])
def stroke_move():
    data = request.get_json(silent=True) or {}
    try:
        row, col = parse_cell(data)
    except ValueError as e:
        return _error(str(e))

    workspace = get_workspace()
    with workspace.lock:
        try:
            changed = workspace.painter.move(row, col)
        except GridError as e:
            return _error(str(e))
        return _editor_response(workspace, changed=changed)


@planner_bp.route('/stroke/end', methods=['POST'])
def stroke_end():
    workspace = get_workspace()
    with workspace.lock:
        workspace.painter.end()
        return _editor_response(workspace)


@planner_bp.route('/clear', methods=['POST'])
def clear():
    """Clear the whole grid; the current tool and stroke state are kept."""
    workspace = get_workspace()
    with workspace.lock:
        workspace.painter.clear()
        current_app.logger.info("Cleared terrace grid")
        return _editor_response(workspace)
