"""Accumulates vertices, indices and draw commands."""

from __future__ import annotations

from dataclasses import dataclass, field

from frames.primitives import PrimitiveType
from frames.vector import Vec2
from frames.vertex import Vertex


@dataclass
class Range:
    """Half-open range ``[begin, end)`` into a buffer."""

    begin: int = 0
    end: int = 0

    def __len__(self) -> int:
        return self.end - self.begin


@dataclass
class DrawCommand:
    """One draw call: a primitive kind and the buffer ranges it uses."""

    primitive: PrimitiveType = PrimitiveType.NONE
    vertices: Range = field(default_factory=Range)
    indices: Range = field(default_factory=Range)


class DrawList:
    """Vertex, index and command buffers built up between begin and end calls."""

    def __init__(self) -> None:
        self.current_index = 0
        self.current_vertex = 0
        self.indices: list[int] = []
        self.vertices: list[Vertex] = []
        self.commands: list[DrawCommand] = []

    def clear(self) -> None:
        self.current_index = 0
        self.current_vertex = 0
        self.indices.clear()
        self.vertices.clear()
        self.commands.clear()

    def begin_points(self) -> None:
        self.begin(PrimitiveType.POINTS)

    def end_points(self) -> None:
        self.end()

    def begin_triangles(self) -> None:
        self.begin(PrimitiveType.TRIANGLES)

    def end_triangles(self) -> None:
        self.end()

    def begin_lines(self) -> None:
        self.begin(PrimitiveType.LINES)

    def end_lines(self) -> None:
        self.end()

    def begin(self, primitive: PrimitiveType) -> None:
        """Open a new command starting at the current end of the buffers."""
        n_idx, n_vtx = len(self.indices), len(self.vertices)
        self.commands.append(
            DrawCommand(PrimitiveType(primitive), Range(n_vtx, n_vtx), Range(n_idx, n_idx))
        )

    def end(self) -> None:
        """Close the most recent command at the current end of the buffers."""
        if not self.commands:
            raise RuntimeError("end() called with no open command")
        command = self.commands[-1]
        command.indices.end = len(self.indices)
        command.vertices.end = len(self.vertices)

    def construct_rect(self, bl: Vec2, tr: Vec2) -> None:
        """Append an axis-aligned rectangle spanned by two opposite corners."""
        self.construct_quad(
            Vec2(tr.x, tr.y),
            Vec2(tr.x, bl.y),
            Vec2(bl.x, bl.y),
            Vec2(bl.x, tr.y),
        )

    def construct_quad(self, p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2) -> None:
        """Append a quad as four vertices and two triangles."""
        new_vertices = [Vertex(p) for p in (p0, p1, p2, p3)]
        self.vertices.extend(new_vertices)
        self.current_vertex += len(new_vertices)

        base = self.current_index
        self.indices.extend(base + i for i in (0, 1, 3, 1, 2, 3))
        self.current_index += len(new_vertices)

    def construct_line(self, p1: Vec2, p2: Vec2, thickness: float) -> None:
        """Append a line segment as two vertices and two indices."""
        new_vertices = [Vertex(p1), Vertex(p2)]
        self.vertices.extend(new_vertices)
        self.current_vertex += len(new_vertices)

        base = self.current_index
        self.indices.extend((base, base + 1))
        self.current_index += len(new_vertices)