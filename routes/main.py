"""
routes/main.py — Dashboard page.

Provides:
- GET / — Terrace editor, garden form, recommendation results, tracked crops
"""

from flask import Blueprint, render_template, current_app

from utils.validators import MONTHS
from workspace import get_workspace

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Dashboard — the page script talks to the planner/recommendation APIs."""
    workspace = get_workspace()
    with workspace.lock:
        grid = workspace.grid
        editor = workspace.painter.snapshot()
        garden = workspace.garden
        tracked = list(workspace.tracked_crops)

    return render_template(
        'index.html',
        grid=grid,
        editor=editor,
        garden=garden,
        tracked_crops=tracked,
        months=MONTHS,
        min_size=current_app.config['MIN_GRID_SIZE'],
        max_size=current_app.config['MAX_GRID_SIZE'],
    )
