"""
routes/export.py — Excel export route.

Provides:
- GET /export/layout.xlsx — Download the terrace grid with accepted placements

Placements are only included while the grid still matches the snapshot
they were validated against; after any edit the grid is exported alone.
"""

from flask import Blueprint, send_file

from utils.export import generate_layout_excel
from workspace import get_workspace

export_bp = Blueprint('export', __name__, url_prefix='/export')


@export_bp.route('/layout.xlsx')
def export_layout():
    """Export the current terrace layout as Excel."""
    workspace = get_workspace()
    with workspace.lock:
        grid = workspace.grid
        review = workspace.review
        if review is not None and review['grid'] != grid:
            review = None
        buffer, filename = generate_layout_excel(grid, review)

    return send_file(
        buffer,
        as_attachment=True,
        download_name=filename,
        mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
