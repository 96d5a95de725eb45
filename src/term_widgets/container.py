"""
Container widget and the layout resolver.

A container owns an ordered list of child widgets and a layout direction.
Given the box it was allotted, it computes a rectangle for each child:

- Chars and Percents children are served first, in sequence order.
  Percents are taken of the container's content dimension, rounded down;
  every fixed allocation is clamped to the space still unallocated.
- Whatever is left is split evenly between Auto children, the first ones
  in sequence order receiving the odd cells.
- The cross axis is always the full content dimension.

Resolution is pure: it never touches dirty flags, so the same inputs always
give the same geometry.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .geometry import LayoutType, Position, Rect, Size
from .widget import (
    BLANK,
    BORDER_HORIZONTAL,
    BORDER_INTERSECT,
    BORDER_VERTICAL,
    Widget,
    WidgetOwnershipError,
)

logger = logging.getLogger(__name__)


def distribute(hints: Sequence[Size], total: int) -> List[int]:
    """Split ``total`` cells between size hints along one axis.

    Returns one allocation per hint, in the same order. The allocations
    never sum past ``total`` and, when at least one hint is Auto, sum to
    exactly ``max(total, 0)``.
    """
    total = max(0, total)
    allocations: List[Optional[int]] = []
    remaining = total
    for hint in hints:
        requested = hint.allocation(total)
        if requested is not None:
            requested = min(requested, remaining)
            remaining -= requested
        allocations.append(requested)

    auto = [n for n, allocation in enumerate(allocations) if allocation is None]
    if auto:
        share, extra = divmod(remaining, len(auto))
        for rank, n in enumerate(auto):
            allocations[n] = share + (1 if rank < extra else 0)
    return allocations


class Container(Widget):
    """A widget holding other widgets, laid out in one direction.

    Children are moved in: a widget owned by another container cannot be
    added until that container releases it with ``remove()`` or ``pop()``.

    Attributes:
        layout: LayoutType used to distribute the box among children
        active_tab: Index of the only visible child in TABBED layout
    """

    def __init__(self, children=(), layout=LayoutType.HORIZONTAL, *,
                 border=False, **kwargs):
        if border:
            kwargs.setdefault('border_vertical', BORDER_VERTICAL)
            kwargs.setdefault('border_horizontal', BORDER_HORIZONTAL)
            kwargs.setdefault('border_intersect', BORDER_INTERSECT)
        super().__init__(**kwargs)
        self._layout = self._check_layout(layout)
        self._children: List[Widget] = []
        self._active_tab = 0
        for child in children:
            self._adopt(child)
            self._children.append(child)

    @staticmethod
    def _check_layout(layout):
        if not isinstance(layout, LayoutType):
            raise TypeError(f"expected a LayoutType, got {layout!r}")
        return layout

    def _adopt(self, widget):
        """Take ownership of ``widget``, refusing aliases and cycles."""
        if not isinstance(widget, Widget):
            raise TypeError(f"expected a Widget, got {widget!r}")
        if widget.parent is not None:
            raise WidgetOwnershipError(
                f"{widget!r} already belongs to {widget.parent!r}"
            )
        node = self
        while node is not None:
            if node is widget:
                raise WidgetOwnershipError(
                    f"{widget!r} cannot contain itself"
                )
            node = node.parent
        widget._parent = self

    # Sequence access

    @property
    def children(self) -> Tuple[Widget, ...]:
        return tuple(self._children)

    def __len__(self):
        return len(self._children)

    def __iter__(self):
        return iter(self._children)

    def __getitem__(self, index):
        return self._children[index]

    def index(self, widget) -> int:
        for n, child in enumerate(self._children):
            if child is widget:
                return n
        raise ValueError(f"{widget!r} is not in this container")

    def add(self, widget):
        """Append ``widget``, taking ownership of it."""
        self.insert(len(self._children), widget)
        return widget

    def insert(self, index, widget):
        """Insert ``widget`` before ``index``, taking ownership of it."""
        self._adopt(widget)
        had_children = bool(self._children)
        index = min(max(index if index >= 0 else len(self._children) + index, 0),
                    len(self._children))
        self._children.insert(index, widget)
        if had_children and index <= self._active_tab:
            self._active_tab += 1
        self.mark_updated()
        return widget

    def pop(self, index=-1) -> Widget:
        """Remove the child at ``index`` and release ownership of it."""
        if index < 0:
            index += len(self._children)
        if not 0 <= index < len(self._children):
            raise IndexError(f"pop index out of range for {len(self._children)} children")
        widget = self._children.pop(index)
        widget._parent = None
        if index < self._active_tab or self._active_tab >= len(self._children):
            self._active_tab = max(0, self._active_tab - 1)
        self.mark_updated()
        return widget

    def remove(self, widget) -> Widget:
        return self.pop(self.index(widget))

    # Layout state

    @property
    def layout(self) -> LayoutType:
        return self._layout

    @layout.setter
    def layout(self, value: LayoutType):
        self._layout = self._check_layout(value)
        self.mark_updated()

    @property
    def active_tab(self) -> int:
        return self._active_tab

    @active_tab.setter
    def active_tab(self, value: int):
        if self._children and not 0 <= value < len(self._children):
            raise IndexError(
                f"active tab {value} out of range for {len(self._children)} children"
            )
        if not self._children and value != 0:
            raise IndexError(f"active tab {value} out of range for an empty container")
        self._active_tab = value
        self.mark_updated()

    # Resolution

    def resolve(self, available_width: int, available_height: int,
                x: int = 0, y: int = 0) -> Dict[int, Rect]:
        """Compute the rectangle of every direct child.

        Args:
            available_width: Width allotted to this container
            available_height: Height allotted to this container
            x, y: Origin of this container's box on the screen

        Returns:
            Mapping from child index to its Rect. In TABBED layout every
            child but the active one gets a zero-area Rect.
        """
        if not self._children:
            return {}

        box = self.content_box(Rect(x, y, max(0, available_width), max(0, available_height)))
        if box.is_empty:
            rects = {n: Rect(box.x, box.y, 0, 0) for n in range(len(self._children))}
            logger.debug("No space for %d children of %r", len(rects), self)
            return rects

        rects: Dict[int, Rect] = {}
        flow = []
        for n, child in enumerate(self._children):
            if self._layout is LayoutType.TABBED and n != self._active_tab:
                rects[n] = Rect(box.x, box.y, 0, 0)
            elif child.position is Position.ABSOLUTE:
                rects[n] = self._place_absolute(child, box)
            elif self._layout is LayoutType.TABBED:
                rects[n] = box
            else:
                flow.append(n)

        if self._layout is LayoutType.HORIZONTAL:
            widths = distribute([self._children[n].width for n in flow], box.width)
            offset = box.x
            for n, width in zip(flow, widths):
                rects[n] = Rect(offset, box.y, width, box.height)
                offset += width
        elif self._layout is LayoutType.VERTICAL:
            heights = distribute([self._children[n].height for n in flow], box.height)
            offset = box.y
            for n, height in zip(flow, heights):
                rects[n] = Rect(box.x, offset, box.width, height)
                offset += height

        rects = dict(sorted(rects.items()))
        logger.debug("Resolved %r in %s: %s", self, box, rects)
        return rects

    @staticmethod
    def _place_absolute(child, box):
        """Out-of-flow placement at the screen origin, sized against ``box``."""
        width = child.width.allocation(box.width)
        height = child.height.allocation(box.height)
        return Rect(
            0, 0,
            box.width if width is None else width,
            box.height if height is None else height,
        )

    def paint_order(self, width: int, height: int,
                    x: int = 0, y: int = 0) -> List[Tuple[Widget, Rect]]:
        """Every visible widget of the subtree with its Rect, in paint order.

        The container comes first, then its children by ascending z-index
        (ties keep sequence order), each followed by its own subtree. A
        TABBED container only exposes its active child.

        Z-index ordering is local to each container: a subtree is painted
        as a whole at its container's place among the siblings, so a high
        z-index child never rises above a later sibling of its container.
        """
        order = [(self, Rect(x, y, max(0, width), max(0, height)))]
        rects = self.resolve(width, height, x, y)
        visible = [n for n in rects
                   if self._layout is not LayoutType.TABBED or n == self._active_tab]
        for n in sorted(visible, key=lambda n: self._children[n].z_index):
            child, rect = self._children[n], rects[n]
            if isinstance(child, Container):
                order.extend(child.paint_order(rect.width, rect.height, rect.x, rect.y))
            else:
                order.append((child, rect))
        return order

    def dirty_widgets(self, width: int, height: int,
                      x: int = 0, y: int = 0) -> List[Tuple[Widget, Rect]]:
        """The part of ``paint_order()`` that needs redrawing."""
        return [(widget, rect) for widget, rect in self.paint_order(width, height, x, y)
                if widget.updated]

    def subtree_updated(self) -> bool:
        """True if this container or any widget below it is dirty."""
        if self.updated:
            return True
        for child in self._children:
            if isinstance(child, Container):
                if child.subtree_updated():
                    return True
            elif child.updated:
                return True
        return False

    def mark_tree_updated(self):
        """Flag this container and everything below it for redraw."""
        self.mark_updated()
        for child in self._children:
            if isinstance(child, Container):
                child.mark_tree_updated()
            else:
                child.mark_updated()
