from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

if TYPE_CHECKING:  # pragma: no cover
    from shapecanvas.render.surface import RasterSurface

__all__ = ["Point", "Rectangle", "Triangle", "Circle", "Shape"]


class Point(BaseModel):
    """Integer pixel coordinate.

    Accepts ``{"x": .., "y": ..}`` or a two-element ``[x, y]`` sequence so
    scene files and callers can use the compact form.
    """

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError("point must have exactly two coordinates")
            return {"x": data[0], "y": data[1]}
        return data

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


class _ShapeBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    color: str

    def draw(self, surface: "RasterSurface") -> None:
        """Validate against *surface* and fill this shape onto it.

        Raises:
            OutOfBoundsError: the shape does not fit the surface.
            InvalidColorError: ``color`` is not a registry color.
        """
        from shapecanvas.render.shapes import draw_shape

        draw_shape(self, surface)  # type: ignore[arg-type]

    def describe(self) -> str:
        raise NotImplementedError


class Rectangle(_ShapeBase):
    """Axis-aligned rectangle, half-open on both corners."""

    kind: Literal["rectangle"] = "rectangle"
    ll: Point
    ur: Point

    def describe(self) -> str:
        return f"Rectangle: {self.ll} to {self.ur} [{self.color}]"


class Triangle(_ShapeBase):
    kind: Literal["triangle"] = "triangle"
    p0: Point
    p1: Point
    p2: Point

    def describe(self) -> str:
        return f"Triangle: {self.p0}, {self.p1}, {self.p2} [{self.color}]"


class Circle(_ShapeBase):
    kind: Literal["circle"] = "circle"
    center: Point
    radius: int = Field(..., ge=0)

    def describe(self) -> str:
        return (
            f"Circle: centered around {self.center} with radius {self.radius} "
            f"[{self.color}]"
        )


# Tagged union used when parsing mixed shape lists (scene files)
Shape = Annotated[Union[Rectangle, Triangle, Circle], Field(discriminator="kind")]
