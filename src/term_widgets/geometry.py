"""
Geometry value types for widget layout.

Sizes, positions and layout directions are plain immutable values. They
describe what a widget wants; the container resolver turns them into
concrete ``Rect`` instances.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SizeUnit(Enum):
    """The unit a ``Size`` is expressed in."""
    AUTO = 'auto'
    CHARS = 'chars'
    PERCENTS = 'percents'


class Position(Enum):
    """How a widget is placed.

    RELATIVE widgets flow inside their container's box. ABSOLUTE widgets
    are taken out of the flow and anchored at the screen origin.
    """
    ABSOLUTE = 'absolute'
    RELATIVE = 'relative'


class LayoutType(Enum):
    """How a container distributes its box among its children."""
    HORIZONTAL = 'horizontal'
    VERTICAL = 'vertical'
    TABBED = 'tabbed'


@dataclass(frozen=True)
class Size:
    """A dimension hint: automatic share, fixed chars, or a percentage.

    Use the ``auto()``, ``chars()`` and ``percents()`` constructors rather
    than building instances directly; they validate the value.
    """
    unit: SizeUnit = SizeUnit.AUTO
    value: int = 0

    def __post_init__(self):
        if not isinstance(self.unit, SizeUnit):
            raise TypeError(f"unit must be a SizeUnit, got {self.unit!r}")
        if self.unit is SizeUnit.CHARS and self.value < 0:
            raise ValueError(f"Chars size cannot be negative: {self.value}")
        if self.unit is SizeUnit.PERCENTS and not 0 <= self.value <= 100:
            raise ValueError(f"Percents size must be within 0-100: {self.value}")

    @classmethod
    def auto(cls) -> 'Size':
        return cls(SizeUnit.AUTO, 0)

    @classmethod
    def chars(cls, n: int) -> 'Size':
        return cls(SizeUnit.CHARS, int(n))

    @classmethod
    def percents(cls, p: int) -> 'Size':
        return cls(SizeUnit.PERCENTS, int(p))

    @property
    def is_auto(self) -> bool:
        return self.unit is SizeUnit.AUTO

    def allocation(self, dimension: int) -> Optional[int]:
        """Cells requested against a resolved dimension, or None for Auto.

        Percents round down; Chars are clamped to the dimension.
        """
        dimension = max(0, dimension)
        if self.unit is SizeUnit.CHARS:
            return min(self.value, dimension)
        if self.unit is SizeUnit.PERCENTS:
            return dimension * self.value // 100
        return None

    def __str__(self):
        if self.unit is SizeUnit.CHARS:
            return f'{self.value}ch'
        if self.unit is SizeUnit.PERCENTS:
            return f'{self.value}%'
        return 'auto'


AUTO = Size.auto()


@dataclass(frozen=True)
class Rect:
    """A resolved screen rectangle, in character cells."""
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersects(self, other: 'Rect') -> bool:
        """True when both rects are non-empty and share at least one cell."""
        if self.is_empty or other.is_empty:
            return False
        return (self.x < other.x + other.width and other.x < self.x + self.width
                and self.y < other.y + other.height and other.y < self.y + self.height)

    def inset(self, horizontal: int, vertical: int) -> 'Rect':
        """Shrink by the given amounts on every side, floored at zero size."""
        return Rect(
            self.x + horizontal,
            self.y + vertical,
            max(0, self.width - 2 * horizontal),
            max(0, self.height - 2 * vertical),
        )
