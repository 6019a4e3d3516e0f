"""Built-in path templates the editor can load."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PathTemplate:
    id: str
    title: str
    description: str
    path_data: str


DEFAULT_TEMPLATE_ID = "quadratic-1"

TEMPLATES: tuple[PathTemplate, ...] = (
    PathTemplate(
        id="quadratic-1",
        title="Quadratic Bézier",
        description="A single quadratic curve bent by one control point.",
        path_data="M 100,200 Q 200,100 300,200",
    ),
    PathTemplate(
        id="cubic-1",
        title="Cubic Bézier",
        description="A cubic curve shaped by two independent control points.",
        path_data="M 100,200 C 150,100 250,100 300,200",
    ),
    PathTemplate(
        id="arc-1",
        title="Elliptical Arc",
        description="Half of an ellipse with radii 100 and 50.",
        path_data="M 100,200 A 100,50 0 0 1 300,200",
    ),
    PathTemplate(
        id="catmull-rom-1",
        title="Catmull-Rom Spline",
        description="A Catmull-Rom spline through five points, converted to cubic segments.",
        path_data=(
            "M 50,200 C 50,200 66.6667,166.667 100,150 C 133.333,133.333 166.667,116.667 200,100 "
            "C 233.333,83.3333 266.667,116.667 300,150 C 333.333,183.333 350,200 350,200"
        ),
    ),
    PathTemplate(
        id="bezier-spline-1",
        title="Bézier Spline",
        description="A cubic segment continued smoothly with a reflected control point.",
        path_data="M 50,200 C 100,100 150,100 200,200 S 250,100 350,200",
    ),
    PathTemplate(
        id="smooth-spline-1",
        title="Smooth Spline",
        description="Three cubic segments with aligned tangents at each joint.",
        path_data=(
            "M 50,200 C 60,180 130,120 150,100 C 170,80 230,130 250,150 C 270,170 340,180 350,200"
        ),
    ),
)

_BY_ID = {t.id: t for t in TEMPLATES}


def get_template(template_id: str) -> PathTemplate:
    """Look up a template by id. Raises KeyError for unknown ids."""
    try:
        return _BY_ID[template_id]
    except KeyError:
        raise KeyError(f"Unknown template: {template_id}") from None
