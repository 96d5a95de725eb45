"""
Terminal Widgets Library

Layout and composition core for terminal UIs: tables and containers that
resolve their geometry from size hints, and a Blessed renderer that only
redraws what changed.
"""

from .geometry import (
    AUTO,
    LayoutType,
    Position,
    Rect,
    Size,
    SizeUnit,
)
from .widget import (
    TableShapeError,
    Widget,
    WidgetError,
    WidgetOwnershipError,
)
from .table import Table
from .container import Container, distribute
from .renderer import ScreenRenderer, compose, table_lines

__all__ = [
    'AUTO',
    'LayoutType',
    'Position',
    'Rect',
    'Size',
    'SizeUnit',
    'TableShapeError',
    'Widget',
    'WidgetError',
    'WidgetOwnershipError',
    'Table',
    'Container',
    'distribute',
    'ScreenRenderer',
    'compose',
    'table_lines',
]

__version__ = '0.1.0'
