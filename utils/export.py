"""
utils/export.py — Excel export of the terrace layout using openpyxl.

Produces a workbook with two sheets:
- "Terrace": one cell per grid tile; plantable tiles shaded, tiles covered
  by an accepted placement labelled with the crop name
- "Crops": one row per accepted placement (crop, position, size)
"""

from io import BytesIO
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side
from openpyxl.utils import get_column_letter


PLANTABLE_FILL = PatternFill(start_color='A5D6A7', end_color='A5D6A7', fill_type='solid')
EMPTY_FILL = PatternFill(start_color='ECEFF1', end_color='ECEFF1', fill_type='solid')
CROP_FILL = PatternFill(start_color='2E7D32', end_color='2E7D32', fill_type='solid')

HEADER_FONT = Font(name='Calibri', bold=True, color='FFFFFF', size=11)
HEADER_FILL = PatternFill(start_color='1565C0', end_color='1565C0', fill_type='solid')
HEADER_ALIGNMENT = Alignment(horizontal='center', vertical='center', wrap_text=True)
TILE_ALIGNMENT = Alignment(horizontal='center', vertical='center', shrink_to_fit=True)
CELL_BORDER = Border(
    bottom=Side(style='thin', color='E2E8F0'),
    right=Side(style='thin', color='E2E8F0'),
)


def _build_grid_sheet(ws, grid, placements, footprints):
    """One spreadsheet cell per tile, offset by one for the index header."""
    labels = {}
    for placement in placements:
        footprint = footprints.get(placement.crop_name)
        if footprint is None:
            continue
        for r, c in placement.occupied_cells(footprint, grid.rows, grid.cols):
            labels[(r, c)] = placement.crop_name

    for c in range(grid.cols):
        cell = ws.cell(row=1, column=c + 2, value=c)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = HEADER_ALIGNMENT
        ws.column_dimensions[get_column_letter(c + 2)].width = 6

    for r in range(grid.rows):
        head = ws.cell(row=r + 2, column=1, value=r)
        head.font = HEADER_FONT
        head.fill = HEADER_FILL
        head.alignment = HEADER_ALIGNMENT
        for c in range(grid.cols):
            cell = ws.cell(row=r + 2, column=c + 2)
            cell.border = CELL_BORDER
            cell.alignment = TILE_ALIGNMENT
            if (r, c) in labels:
                cell.value = labels[(r, c)]
                cell.fill = CROP_FILL
                cell.font = Font(color='FFFFFF', bold=True, size=8)
            elif grid.cells[r][c]:
                cell.fill = PLANTABLE_FILL
            else:
                cell.fill = EMPTY_FILL

    ws.column_dimensions['A'].width = 5
    ws.freeze_panes = 'B2'


def _build_crop_sheet(ws, placements, footprints):
    columns = ['Crop', 'Row', 'Column', 'Width (ft)', 'Height (ft)']
    for col_idx, col_name in enumerate(columns, 1):
        cell = ws.cell(row=1, column=col_idx, value=col_name)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = HEADER_ALIGNMENT

    for row_idx, placement in enumerate(placements, 2):
        footprint = footprints.get(placement.crop_name)
        values = [
            placement.crop_name,
            placement.row,
            placement.col,
            footprint.width if footprint else None,
            footprint.height if footprint else None,
        ]
        for col_idx, value in enumerate(values, 1):
            ws.cell(row=row_idx, column=col_idx, value=value).border = CELL_BORDER

    ws.column_dimensions['A'].width = 24
    for letter in 'BCDE':
        ws.column_dimensions[letter].width = 14
    ws.freeze_panes = 'A2'


def generate_layout_excel(grid, review=None):
    """Generate an Excel workbook for a terrace grid and its accepted placements.

    Args:
        grid: TerraceGrid to export.
        review: Result of recommendation.review_recommendation, or None.

    Returns:
        (BytesIO buffer, filename).
    """
    import openpyxl

    placements = review['placements'] if review else []
    footprints = {}
    for crop in (review['crops'] if review else []):
        footprints.setdefault(crop.name, crop.footprint)

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = 'Terrace'
    _build_grid_sheet(ws, grid, placements, footprints)
    _build_crop_sheet(wb.create_sheet(title='Crops'), placements, footprints)

    buffer = BytesIO()
    wb.save(buffer)
    buffer.seek(0)

    filename = f"terrace_{grid.rows}x{grid.cols}.xlsx"
    return buffer, filename
