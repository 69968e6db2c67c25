"""Marching squares triangulation of a wall/floor grid.

The grid is lifted onto a dual grid: one ControlNode per cell (active when the
cell is a wall) owning two midpoint Nodes, ``above`` (toward y+1) and ``right``
(toward x+1). Each Square between four neighbouring control nodes borrows those
midpoints, so adjacent squares share vertex objects instead of duplicating
them. Every square's 4-bit configuration selects a polygon from the classic
16-case table; polygons are fan-triangulated from their first point.

Positions are laid out in the x/z plane (y = 0), centred on the origin, with
``square_size`` world units per cell.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

from .cells import Grid, grid_size
from .tiles import WALL

Vec3 = Tuple[float, float, float]


class Node:
    __slots__ = ("position", "vertex_index")

    def __init__(self, position: Vec3):
        self.position = position
        self.vertex_index = -1


class ControlNode(Node):
    __slots__ = ("active", "above", "right")

    def __init__(self, position: Vec3, active: bool, square_size: float):
        super().__init__(position)
        self.active = active
        px, py, pz = position
        half = square_size / 2
        self.above = Node((px, py, pz + half))
        self.right = Node((px + half, py, pz))


class Square:
    __slots__ = (
        "top_left",
        "top_right",
        "bottom_right",
        "bottom_left",
        "center_top",
        "center_right",
        "center_bottom",
        "center_left",
        "configuration",
    )

    def __init__(self, top_left: ControlNode, top_right: ControlNode, bottom_right: ControlNode, bottom_left: ControlNode):
        self.top_left = top_left
        self.top_right = top_right
        self.bottom_right = bottom_right
        self.bottom_left = bottom_left

        self.center_top = top_left.right
        self.center_right = bottom_right.above
        self.center_bottom = bottom_left.right
        self.center_left = bottom_left.above

        self.configuration = 0
        if top_left.active:
            self.configuration += 8
        if top_right.active:
            self.configuration += 4
        if bottom_right.active:
            self.configuration += 2
        if bottom_left.active:
            self.configuration += 1


# configuration -> polygon outline (Square attribute names, in winding order)
TRIANGULATION_TABLE: Tuple[Tuple[str, ...], ...] = (
    # 0: empty
    (),
    # single corner
    ("center_bottom", "bottom_left", "center_left"),
    ("center_right", "bottom_right", "center_bottom"),
    # 3: bottom pair
    ("center_right", "bottom_right", "bottom_left", "center_left"),
    ("center_top", "top_right", "center_right"),
    # 5: diagonal (top-right + bottom-left)
    ("center_top", "top_right", "center_right", "center_bottom", "bottom_left", "center_left"),
    # 6: right pair
    ("center_top", "top_right", "bottom_right", "center_bottom"),
    # 7: three corners
    ("center_top", "top_right", "bottom_right", "bottom_left", "center_left"),
    ("top_left", "center_top", "center_left"),
    # 9: left pair
    ("top_left", "center_top", "center_bottom", "bottom_left"),
    # 10: diagonal (top-left + bottom-right)
    ("top_left", "center_top", "center_right", "bottom_right", "center_bottom", "center_left"),
    ("top_left", "center_top", "center_right", "bottom_right", "bottom_left"),
    # 12: top pair
    ("top_left", "top_right", "center_right", "center_left"),
    ("top_left", "top_right", "center_right", "center_bottom", "bottom_left"),
    ("top_left", "top_right", "bottom_right", "center_bottom", "center_left"),
    # 15: full quad
    ("top_left", "top_right", "bottom_right", "bottom_left"),
)


class SquareGrid:
    def __init__(self, grid: Grid, square_size: float = 1.0):
        node_count_x, node_count_y = grid_size(grid)
        map_width = node_count_x * square_size
        map_height = node_count_y * square_size

        control_nodes = [
            [
                ControlNode(
                    (-map_width / 2 + x * square_size + square_size / 2, 0.0, -map_height / 2 + y * square_size + square_size / 2),
                    grid[x][y] == WALL,
                    square_size,
                )
                for y in range(node_count_y)
            ]
            for x in range(node_count_x)
        ]
        self.control_nodes = control_nodes
        # one fewer square than nodes along each axis
        self.squares: List[List[Square]] = [
            [
                Square(control_nodes[x][y + 1], control_nodes[x + 1][y + 1], control_nodes[x + 1][y], control_nodes[x][y])
                for y in range(node_count_y - 1)
            ]
            for x in range(node_count_x - 1)
        ]

    def iter_squares(self) -> Iterator[Square]:
        for column in self.squares:
            yield from column


@dataclass
class MeshBuffer:
    vertices: List[Vec3] = field(default_factory=list)
    triangles: List[int] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles) // 3

    def faces(self) -> Iterator[Tuple[int, int, int]]:
        t = self.triangles
        for i in range(0, len(t), 3):
            yield t[i], t[i + 1], t[i + 2]

    def to_dict(self):
        return {"vertices": [list(v) for v in self.vertices], "triangles": list(self.triangles)}


class MeshBuilder:
    """Accumulates vertices/triangles while squares are triangulated."""

    def __init__(self):
        self.mesh = MeshBuffer()

    def assign_vertices(self, points: Sequence[Node]) -> None:
        for node in points:
            if node.vertex_index == -1:
                node.vertex_index = len(self.mesh.vertices)
                self.mesh.vertices.append(node.position)

    def create_triangle(self, a: Node, b: Node, c: Node) -> None:
        self.mesh.triangles.extend((a.vertex_index, b.vertex_index, c.vertex_index))

    def mesh_from_points(self, points: Sequence[Node]) -> None:
        self.assign_vertices(points)
        for i in range(2, len(points)):
            self.create_triangle(points[0], points[i - 1], points[i])

    def triangulate_square(self, square: Square) -> None:
        outline = TRIANGULATION_TABLE[square.configuration]
        if outline:
            self.mesh_from_points([getattr(square, name) for name in outline])


def triangulate(grid: Grid, square_size: float = 1.0) -> MeshBuffer:
    """Convert a wall/floor grid into a deduplicated vertex/triangle buffer."""
    square_grid = SquareGrid(grid, square_size)
    builder = MeshBuilder()
    for square in square_grid.iter_squares():
        builder.triangulate_square(square)
    return builder.mesh


__all__ = ["Node", "ControlNode", "Square", "SquareGrid", "MeshBuffer", "MeshBuilder", "TRIANGULATION_TABLE", "triangulate"]
