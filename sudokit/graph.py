"""Constraint graph of a Sudoku board: one node per cell."""

from __future__ import annotations

from dataclasses import dataclass

SIZE = 9
BOX = 3
BORDER = "+-------+-------+-------+"


@dataclass(frozen=True, eq=False)
class Edge:
    """A directed link from one cell node to a constraining neighbour."""

    source: Node
    destination: Node


class Node:
    """A cell with its current value, candidate domain and neighbours."""

    def __init__(self, node_id: int, row: int, col: int) -> None:
        self.id = node_id
        self.row = row
        self.col = col
        self.value = 0
        self._domain: set[int] = set()
        self._edges: list[Edge] = []
        self._neighbor_ids: set[int] = set()
        self.reset_domain()

    def __repr__(self) -> str:
        return f"Node(id={self.id}, row={self.row}, col={self.col}, value={self.value})"

    def in_domain(self, value: int) -> bool:
        return value in self._domain

    def remove_from_domain(self, value: int) -> None:
        self._domain.discard(value)

    def reset_domain(self) -> None:
        self._domain = set(range(1, SIZE + 1))

    def domain_size(self) -> int:
        return len(self._domain)

    def add_edge(self, neighbor: Node) -> None:
        """Link to ``neighbor`` unless already linked."""
        if self.is_connected_to(neighbor):
            return
        self._edges.insert(0, Edge(self, neighbor))
        self._neighbor_ids.add(id(neighbor))

    def is_connected_to(self, node: Node) -> bool:
        return id(node) in self._neighbor_ids

    @property
    def edges(self) -> tuple[Edge, ...]:
        """Outgoing edges, most recently added first."""
        return tuple(self._edges)

    def neighbors(self) -> list[Node]:
        return [edge.destination for edge in self._edges]

    def edge_count(self) -> int:
        return len(self._edges)


class Graph:
    """Nodes for cells, joined wherever two cells constrain each other."""

    def __init__(self) -> None:
        self._nodes: list[Node] = []
        self._by_position: dict[tuple[int, int], Node] = {}

    def add_node(self, row: int, col: int) -> Node:
        node = Node(len(self._nodes), row, col)
        self._nodes.append(node)
        self._by_position.setdefault((row, col), node)
        return node

    def add_edge(self, source: Node | None, destination: Node | None) -> None:
        """Link two nodes in both directions; ignores a missing node."""
        if source is None or destination is None:
            return
        source.add_edge(destination)
        destination.add_edge(source)

    def get_node(self, node_id: int) -> Node | None:
        if 0 <= node_id < len(self._nodes):
            return self._nodes[node_id]
        return None

    def node_at(self, row: int, col: int) -> Node | None:
        return self._by_position.get((row, col))

    def __len__(self) -> int:
        return len(self._nodes)

    def build_sudoku_constraints(self) -> None:
        """Create the 81 cells and link each to its row, column and box."""
        for row in range(SIZE):
            for col in range(SIZE):
                self.add_node(row, col)

        for row in range(SIZE):
            for col in range(SIZE):
                current = self.node_at(row, col)
                for c in range(SIZE):
                    if c != col:
                        self.add_edge(current, self.node_at(row, c))
                for r in range(SIZE):
                    if r != row:
                        self.add_edge(current, self.node_at(r, col))
                box_row, box_col = (row // BOX) * BOX, (col // BOX) * BOX
                for r in range(box_row, box_row + BOX):
                    for c in range(box_col, box_col + BOX):
                        if (r, c) != (row, col):
                            self.add_edge(current, self.node_at(r, c))

    def render_grid(self) -> str:
        """The board as boxed text, with '.' for empty cells."""
        lines = [BORDER]
        for row in range(SIZE):
            parts = ["|"]
            for col in range(SIZE):
                value = self.node_at(row, col).value
                parts.append("." if value == 0 else str(value))
                if col % BOX == BOX - 1:
                    parts.append("|")
            lines.append(" ".join(parts))
            if row % BOX == BOX - 1:
                lines.append(BORDER)
        return "\n".join(lines)

    def is_valid_value(self, node: Node | None, value: int) -> bool:
        """True if ``value`` is 1-9 and no neighbour of ``node`` holds it."""
        if node is None or not 1 <= value <= SIZE:
            return False
        return all(neighbor.value != value for neighbor in node.neighbors())