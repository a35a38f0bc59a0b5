"""
Shared primitive data types for the game.

This module provides the basic geometric types used throughout the
codebase: points, playfield resolutions, and rectangles.
"""

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions and coordinates.

    Coordinates can be positive, negative, or zero.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> pos.x
        100.0
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)  # Immutable

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Resolution(BaseModel):
    """Display or playfield resolution.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)

    Examples:
        >>> Resolution.parse("1280x720").width
        1280
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @classmethod
    def parse(cls, text: str) -> 'Resolution':
        """Parse a 'WIDTHxHEIGHT' string such as '1920x1080'.

        Raises:
            ValueError: If the string is not in WIDTHxHEIGHT form
        """
        parts = text.lower().split('x')
        if len(parts) != 2:
            raise ValueError(f"Resolution must look like 1920x1080, got {text!r}")
        return cls(width=int(parts[0]), height=int(parts[1]))

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Resolution({self.width}x{self.height})"


class Rectangle(BaseModel):
    """Immutable rectangle defined by position and dimensions.

    Used for hit-boxes and sprite sheet source regions.
    Position is at top-left corner (pygame convention).

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> rect = Rectangle(x=100.0, y=100.0, width=50.0, height=50.0)
        >>> rect.contains_point(Point2D(x=125.0, y=125.0))
        True
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @computed_field
    @property
    def left(self) -> float:
        """Get left edge x coordinate."""
        return self.x

    @computed_field
    @property
    def right(self) -> float:
        """Get right edge x coordinate."""
        return self.x + self.width

    @computed_field
    @property
    def top(self) -> float:
        """Get top edge y coordinate."""
        return self.y

    @computed_field
    @property
    def bottom(self) -> float:
        """Get bottom edge y coordinate."""
        return self.y + self.height

    def contains_point(self, point: Point2D) -> bool:
        """Check if a point is inside the rectangle.

        Args:
            point: The point to check

        Returns:
            True if point is inside or on the boundary of the rectangle

        Examples:
            >>> rect = Rectangle(x=0.0, y=0.0, width=100.0, height=100.0)
            >>> rect.contains_point(Point2D(x=100.0, y=50.0))
            True
            >>> rect.contains_point(Point2D(x=150.0, y=50.0))
            False
        """
        return (self.left <= point.x <= self.right and
                self.top <= point.y <= self.bottom)

    def expanded(self, margin: float) -> 'Rectangle':
        """Return a copy grown by ``margin`` on every side."""
        return Rectangle(
            x=self.x - margin,
            y=self.y - margin,
            width=self.width + margin * 2,
            height=self.height + margin * 2,
        )

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
