"""Rectangular exclusion region."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Region:
    """
    An axis-aligned rectangle in canvas coordinates that tokens bounce off,
    such as the instructions panel.
    """

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> "Region":
        return cls(left=x, top=y, right=x + width, bottom=y + height)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> tuple[float, float]:
        return (self.left + self.width / 2, self.top + self.height / 2)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, x: float, y: float, buffer: float = 0.0) -> bool:
        """
        Whether a point lies strictly inside the region grown by ``buffer``.

        Args:
            x: Horizontal position
            y: Vertical position

        Keyword Args:
            buffer: Margin added on every side

        Returns:
            True if the point is inside

        """
        return (
            self.left - buffer < x < self.right + buffer
            and self.top - buffer < y < self.bottom + buffer
        )

    def overlaps_circle(self, x: float, y: float, radius: float) -> bool:
        """
        Whether the bounding box of a circle overlaps the region.

        Args:
            x: Horizontal centre of the circle
            y: Vertical centre of the circle
            radius: Radius of the circle

        Returns:
            True on overlap

        """
        return (
            x + radius > self.left
            and x - radius < self.right
            and y + radius > self.top
            and y - radius < self.bottom
        )
