"""
Table widget: a header row plus a paginated grid of string cells.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .widget import (
    BLANK,
    BORDER_HORIZONTAL,
    BORDER_INTERSECT,
    BORDER_VERTICAL,
    TableShapeError,
    Widget,
)

logger = logging.getLogger(__name__)

DEFAULT_ITEMS_BY_PAGE = 20
DEFAULT_TABLE_PADDING = 1


def _check_rows(headers: List[str], data: Iterable[Sequence[str]]) -> List[List[str]]:
    """Copy ``data`` into a list of rows, each the same length as ``headers``."""
    rows = []
    for index, row in enumerate(data):
        row = [str(cell) for cell in row]
        if len(row) != len(headers):
            raise TableShapeError(
                f"row {index} has {len(row)} cells, expected {len(headers)}"
            )
        rows.append(row)
    return rows


def _check_count(name, value):
    if value < 0:
        raise ValueError(f"{name} cannot be negative: {value}")
    return int(value)


class Table(Widget):
    """A leaf widget displaying rows of text under a header line.

    Only one page of rows is visible at a time; ``current_page`` and
    ``items_by_page`` select it. A page past the end of the data is valid
    and simply shows no rows.
    """

    def __init__(self, headers, data=(), *, border=False,
                 padding_vertical=DEFAULT_TABLE_PADDING,
                 padding_horizontal=DEFAULT_TABLE_PADDING,
                 items_by_page=DEFAULT_ITEMS_BY_PAGE, **kwargs):
        """Initialize a table.

        Args:
            headers: Sequence of header strings
            data: Sequence of rows; each row must have len(headers) cells
            border: Draw with '|', '-' and '+' glyphs instead of blanks
            padding_vertical: Blank lines between border and content
            padding_horizontal: Blank columns between border and content
            items_by_page: Rows shown per page
            **kwargs: Passed to Widget.__init__()

        Raises:
            TableShapeError: A row length differs from the header length
        """
        glyphs = (BORDER_VERTICAL, BORDER_HORIZONTAL, BORDER_INTERSECT) if border \
            else (BLANK, BLANK, BLANK)
        super().__init__(
            border_vertical=glyphs[0],
            border_horizontal=glyphs[1],
            border_intersect=glyphs[2],
            padding_vertical=padding_vertical,
            padding_horizontal=padding_horizontal,
            **kwargs,
        )
        self._headers = [str(header) for header in headers]
        self._data = _check_rows(self._headers, data)
        self._current_page = 0
        self._items_by_page = self._check_items_by_page(items_by_page)

    @staticmethod
    def _check_items_by_page(value):
        value = _check_count('items_by_page', value)
        if value == 0:
            logger.warning("items_by_page is 0; the table will never show rows")
        return value

    @property
    def headers(self) -> Tuple[str, ...]:
        return tuple(self._headers)

    @property
    def data(self) -> Tuple[Tuple[str, ...], ...]:
        return tuple(tuple(row) for row in self._data)

    def __len__(self):
        return len(self._data)

    def set_data(self, data):
        """Replace every row. The shape is checked before anything changes."""
        self._data = _check_rows(self._headers, data)
        self.mark_updated()

    def append_row(self, row):
        """Add one row at the end of the table."""
        self._data.extend(_check_rows(self._headers, [row]))
        self.mark_updated()

    def set_headers(self, headers, data: Optional[Iterable[Sequence[str]]] = None):
        """Replace the header line, and the rows with it when given.

        Without ``data`` the current rows must already match the new
        header length.
        """
        headers = [str(header) for header in headers]
        rows = _check_rows(headers, self._data if data is None else data)
        self._headers = headers
        self._data = rows
        self.mark_updated()

    @property
    def current_page(self) -> int:
        return self._current_page

    @current_page.setter
    def current_page(self, value: int):
        # No upper bound: a page past the end is shown empty.
        self._current_page = _check_count('current_page', value)
        self.mark_updated()

    @property
    def items_by_page(self) -> int:
        return self._items_by_page

    @items_by_page.setter
    def items_by_page(self, value: int):
        self._items_by_page = self._check_items_by_page(value)
        self.mark_updated()

    @property
    def page_count(self) -> int:
        """Number of non-empty pages."""
        if self._items_by_page == 0:
            return 0
        return -(-len(self._data) // self._items_by_page)

    def visible_rows(self) -> Tuple[Tuple[str, ...], ...]:
        """Rows on the current page; empty when the page is out of range."""
        start = self._current_page * self._items_by_page
        end = min(len(self._data), start + self._items_by_page)
        return tuple(tuple(row) for row in self._data[start:end])

    def next_page(self) -> bool:
        """Advance one page if there is one. Returns whether it moved."""
        if self._current_page + 1 < self.page_count:
            self.current_page = self._current_page + 1
            return True
        return False

    def previous_page(self) -> bool:
        """Go back one page if possible. Returns whether it moved."""
        if self._current_page > 0:
            self.current_page = self._current_page - 1
            return True
        return False

    def column_widths(self) -> List[int]:
        """Widest cell per column, over the headers and the visible rows."""
        widths = [len(header) for header in self._headers]
        for row in self.visible_rows():
            for column, cell in enumerate(row):
                widths[column] = max(widths[column], len(cell))
        return widths
