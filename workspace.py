"""
workspace.py — Per-browser-session editing state.

Each browser session gets one Workspace holding its painting session,
garden parameters, last reviewed recommendation, and tracked crops. The
workspace id is kept in the Flask session cookie; the state itself stays in
process memory, capped at MAX_WORKSPACES sessions, and is gone on restart.
"""

import threading
import uuid
from collections import OrderedDict

from flask import current_app, session

from models import GardenParameters
from painting import PaintingSession
from terrace_grid import create_grid

_workspaces = OrderedDict()
_lock = threading.Lock()


class Workspace:
    """Everything one user edits between page loads."""

    def __init__(self, rows, cols):
        self.painter = PaintingSession(create_grid(rows, cols))
        self.garden = GardenParameters()
        self.review = None
        self.tracked_crops = []
        # Guards painter/review/tracked_crops against concurrent requests
        self.lock = threading.RLock()

    @property
    def grid(self):
        return self.painter.grid


def get_workspace():
    """
    Return the current session's workspace, creating it on first use.

    At most MAX_WORKSPACES workspaces are kept; the least recently used one
    is dropped when a new session would go over the limit.
    """
    workspace_id = session.get('workspace_id')
    with _lock:
        if workspace_id is None or workspace_id not in _workspaces:
            workspace_id = uuid.uuid4().hex
            session['workspace_id'] = workspace_id
            _workspaces[workspace_id] = Workspace(
                current_app.config['DEFAULT_GRID_ROWS'],
                current_app.config['DEFAULT_GRID_COLS'],
            )
            limit = current_app.config['MAX_WORKSPACES']
            while len(_workspaces) > limit:
                evicted, _ = _workspaces.popitem(last=False)
                current_app.logger.info("Evicted idle workspace %s", evicted)
        else:
            _workspaces.move_to_end(workspace_id)
        return _workspaces[workspace_id]


def workspace_count():
    with _lock:
        return len(_workspaces)


def reset_workspaces():
    """Drop every workspace (used by tests)."""
    with _lock:
        _workspaces.clear()
