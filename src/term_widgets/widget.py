"""
Base class for everything that can be laid out and drawn.

A widget carries its declared geometry (size hints, position), a title, a
z-index, border glyphs, padding, and the ``updated`` (dirty) flag. Any
setter that changes visual state marks the widget as updated; only the
renderer clears the flag, once it has redrawn the widget.
"""

from .geometry import AUTO, Position, Rect, Size

BLANK = ' '
BORDER_VERTICAL = '|'
BORDER_HORIZONTAL = '-'
BORDER_INTERSECT = '+'


class WidgetError(Exception):
    """Base class for widget contract violations."""


class TableShapeError(WidgetError, ValueError):
    """A table row does not have as many cells as there are headers."""


class WidgetOwnershipError(WidgetError):
    """A widget was inserted into a container while owned elsewhere."""


def _check_glyph(name, glyph):
    if not isinstance(glyph, str) or len(glyph) != 1:
        raise ValueError(f"{name} must be a single character, got {glyph!r}")
    return glyph


def _check_padding(name, value):
    if value < 0:
        raise ValueError(f"{name} cannot be negative: {value}")
    return int(value)


class Widget:
    """Common capability set shared by Table and Container.

    Attributes:
        z_index: Paint order; higher values are painted later (on top)
        title: Title shown in the top border
        width: Width hint (Size)
        height: Height hint (Size)
        position: Placement intent (Position)
        updated: Whether the widget needs to be redrawn
        parent: The container owning this widget, if any
    """

    def __init__(self, title="", width=AUTO, height=AUTO,
                 position=Position.RELATIVE, z_index=0,
                 border_vertical=BLANK, border_horizontal=BLANK,
                 border_intersect=BLANK, padding_vertical=0,
                 padding_horizontal=0):
        self._title = str(title)
        self._width = self._check_size(width)
        self._height = self._check_size(height)
        if not isinstance(position, Position):
            raise TypeError(f"expected a Position, got {position!r}")
        self._position = position
        self._z_index = z_index
        self._border_vertical = _check_glyph('border_vertical', border_vertical)
        self._border_horizontal = _check_glyph('border_horizontal', border_horizontal)
        self._border_intersect = _check_glyph('border_intersect', border_intersect)
        self._padding_vertical = _check_padding('padding_vertical', padding_vertical)
        self._padding_horizontal = _check_padding('padding_horizontal', padding_horizontal)
        self._parent = None
        self._updated = True

    @staticmethod
    def _check_size(size):
        if not isinstance(size, Size):
            raise TypeError(f"expected a Size, got {size!r}")
        return size

    def mark_updated(self):
        """Flag the widget for redraw after a visual state change."""
        self._updated = True

    def acknowledge(self):
        """Called by the renderer once the widget has been redrawn."""
        self._updated = False

    @property
    def updated(self) -> bool:
        """Whether the widget has changed since it was last drawn."""
        return self._updated

    @updated.setter
    def updated(self, value: bool):
        self._updated = bool(value)

    @property
    def z_index(self) -> int:
        return self._z_index

    @z_index.setter
    def z_index(self, value: int):
        # Children keep their own z-index; nothing cascades.
        self._z_index = value
        self.mark_updated()

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str):
        self._title = str(value)
        self.mark_updated()

    @property
    def width(self) -> Size:
        return self._width

    @width.setter
    def width(self, value: Size):
        self._width = self._check_size(value)
        self.mark_updated()

    @property
    def height(self) -> Size:
        return self._height

    @height.setter
    def height(self, value: Size):
        self._height = self._check_size(value)
        self.mark_updated()

    @property
    def position(self) -> Position:
        return self._position

    @position.setter
    def position(self, value: Position):
        if not isinstance(value, Position):
            raise TypeError(f"expected a Position, got {value!r}")
        self._position = value
        self.mark_updated()

    @property
    def parent(self):
        """The container that owns this widget, or None."""
        return self._parent

    @property
    def border_vertical(self) -> str:
        return self._border_vertical

    @property
    def border_horizontal(self) -> str:
        return self._border_horizontal

    @property
    def border_intersect(self) -> str:
        return self._border_intersect

    @property
    def padding_vertical(self) -> int:
        return self._padding_vertical

    @property
    def padding_horizontal(self) -> int:
        return self._padding_horizontal

    @property
    def has_border(self) -> bool:
        """True when at least one border glyph is visible."""
        return any(glyph != BLANK for glyph in (
            self._border_vertical, self._border_horizontal, self._border_intersect
        ))

    def content_box(self, rect: Rect) -> Rect:
        """The area left inside ``rect`` once border and padding are removed."""
        border = 1 if self.has_border else 0
        return rect.inset(border + self._padding_horizontal,
                          border + self._padding_vertical)

    def __repr__(self):
        return (f'{type(self).__name__}(title={self._title!r}, '
                f'width={self._width}, height={self._height}, '
                f'z_index={self._z_index})')
