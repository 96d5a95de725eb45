"""
Draw a widget tree on a blessed Terminal.

The renderer walks the tree in paint order, redraws the widgets whose
``updated`` flag is set, and acknowledges each one once it is on screen.
"""

import logging
from typing import List, Optional

from blessed import Terminal

from .container import Container
from .geometry import Rect
from .table import Table
from .widget import BLANK, Widget

logger = logging.getLogger(__name__)


def _title_bar(title, width, fill):
    """Title centered in a run of ``fill`` characters, as in ``--- title ---``."""
    if width <= 0:
        return ''
    if not title:
        return fill * width
    return f' {title} '.center(width, fill)[:width]


def table_lines(table: Table) -> List[str]:
    """Header, separator and visible rows of ``table`` as unclipped lines."""
    widths = table.column_widths()
    vertical = table.border_vertical
    joint = ' ' if vertical == BLANK else f' {vertical} '

    def line(cells):
        return joint.join(cell.ljust(width) for cell, width in zip(cells, widths))

    lines = [line(table.headers)]
    if table.border_horizontal != BLANK:
        horizontal = table.border_horizontal
        cross = horizontal + table.border_intersect + horizontal \
            if vertical != BLANK else horizontal
        lines.append(cross.join(horizontal * width for width in widths))
    lines.extend(line(row) for row in table.visible_rows())
    return lines


def compose(widget: Widget, rect: Rect) -> List[str]:
    """The text of ``widget`` drawn into a ``rect``-sized block.

    Returns ``rect.height`` lines, each exactly ``rect.width`` characters.
    Children are not included; they are drawn separately on top.
    """
    width, height = rect.width, rect.height
    if width <= 0 or height <= 0:
        return []

    lines = [BLANK * width for _ in range(height)]
    if widget.has_border and width >= 2 and height >= 2:
        corner = widget.border_intersect
        vertical = widget.border_vertical
        lines[0] = corner + _title_bar(widget.title, width - 2, widget.border_horizontal) + corner
        lines[-1] = corner + widget.border_horizontal * (width - 2) + corner
        for row in range(1, height - 1):
            lines[row] = vertical + BLANK * (width - 2) + vertical
    elif widget.title and widget.padding_vertical > 0:
        lines[0] = _title_bar(widget.title, width, BLANK)

    if isinstance(widget, Table):
        content = widget.content_box(Rect(0, 0, width, height))
        for row, text in enumerate(table_lines(widget)[:content.height]):
            target = lines[content.y + row]
            lines[content.y + row] = (
                target[:content.x]
                + text[:content.width].ljust(content.width)
                + target[content.x + content.width:]
            )
    return lines


class ScreenRenderer:
    """Paints a widget tree onto a blessed Terminal.

    Attributes:
        term: Blessed Terminal instance; its size is the root's box
    """

    def __init__(self, term: Optional[Terminal] = None):
        self._term = None
        self._resized = False
        self.term = term or Terminal()

    @property
    def term(self):
        """Blessed Terminal instance."""
        return self._term

    @term.setter
    def term(self, value):
        """Set terminal; the next render repaints everything."""
        self._term = value
        self._resized = True

    def handle_resize(self, term: Optional[Terminal] = None):
        """Pick up a new terminal size, e.g. from a SIGWINCH handler."""
        self.term = term or Terminal()

    def render(self, root: Container, force: bool = False) -> int:
        """Redraw the dirty widgets of ``root``'s tree.

        Args:
            root: Container sized to the whole terminal
            force: Redraw every visible widget, dirty or not

        Returns:
            The number of widgets drawn
        """
        if self._resized:
            self._resized = False
            root.mark_tree_updated()

        drawn = 0
        painted = []
        for widget, rect in root.paint_order(self.term.width, self.term.height):
            # A clean widget still goes back on top of anything drawn under it.
            covered = any(rect.intersects(below) for below in painted)
            if not (force or widget.updated or covered):
                continue
            if isinstance(widget, Container):
                # Its background covers the children, which come later.
                widget.mark_tree_updated()
            if not rect.is_empty:
                self.draw_widget(widget, rect)
                painted.append(rect)
                drawn += 1
            widget.acknowledge()
        logger.debug("Rendered %d widgets at %dx%d", drawn, self.term.width, self.term.height)
        return drawn

    def draw_widget(self, widget: Widget, rect: Rect):
        """Print ``widget`` at its resolved rectangle."""
        for row, text in enumerate(compose(widget, rect)):
            print(self.term.move(rect.y + row, rect.x) + text, end='')
        print('', end='', flush=True)
