"""Core data structures shared by the layout generators."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple

Point2D = Tuple[float, float]
IndexPair = Tuple[int, int]


@dataclass(frozen=True)
class SpiralPoint:
    """Position of one index on the golden-angle spiral."""

    x: float
    y: float
    angle: float
    radius: float


@dataclass(frozen=True)
class LayoutNode:
    """Placement of a single input item."""

    item_index: int
    x: float
    y: float
    angle: float
    radius: float
    scale: float = 1.0
    key: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Branch:
    """One straight segment of a fractal tree or root system."""

    id: str
    start_x: float
    start_y: float
    end_x: float
    end_y: float
    thickness: float
    depth: int

    @property
    def length(self) -> float:
        return ((self.end_x - self.start_x) ** 2 + (self.end_y - self.start_y) ** 2) ** 0.5

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Neuron:
    """Node of the synthetic proximity network, in percentage space."""

    id: int
    x: float
    y: float
    size: float
    connections: Tuple[int, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["connections"] = list(self.connections)
        return data


@dataclass(frozen=True)
class Connection:
    """Edge between two indexed nodes."""

    from_index: int
    to_index: int

    @property
    def key(self) -> str:
        a, b = sorted((self.from_index, self.to_index))
        return f"{a}-{b}"

    def as_pair(self) -> IndexPair:
        return (self.from_index, self.to_index)

    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.from_index, "to": self.to_index, "id": self.key}


@dataclass(frozen=True)
class PointConnection:
    """Edge expressed directly as two positions."""

    from_point: Point2D
    to_point: Point2D

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": {"x": self.from_point[0], "y": self.from_point[1]},
            "to": {"x": self.to_point[0], "y": self.to_point[1]},
        }


@dataclass(frozen=True)
class ConstellationPattern:
    """Fixed arrangement of points and the lines joining them."""

    name: str
    points: Tuple[Point2D, ...]
    connections: Tuple[IndexPair, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "points": [{"x": x, "y": y} for x, y in self.points],
            "connections": [list(pair) for pair in self.connections],
        }


@dataclass(frozen=True)
class NeuralNetwork:
    neurons: Tuple[Neuron, ...]
    edges: Tuple[Connection, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "neurons": [neuron.to_dict() for neuron in self.neurons],
            "edges": [edge.to_dict() for edge in self.edges],
        }


@dataclass(frozen=True)
class Forest:
    """Upward branches and downward roots sharing one base point."""

    branches: Tuple[Branch, ...]
    roots: Tuple[Branch, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "branches": [branch.to_dict() for branch in self.branches],
            "roots": [root.to_dict() for root in self.roots],
        }


@dataclass(frozen=True)
class Particle:
    id: int
    x: float
    y: float
    size: float
    rotation: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SpiralOptions:
    """Golden spiral options (percentage space)."""

    center_x: float = 50.0
    center_y: float = 50.0
    zoom_level: float = 1.0
    spread_factor: float = 12.0
    spiral_constant: float = 2.4


@dataclass(frozen=True)
class BranchOptions:
    """Options for a branch/root pair."""

    center_x: float = 50.0
    base_y: float = 55.0
    branch_seed: int = 12345
    root_seed: int = 54321
    max_depth: Optional[int] = None


@dataclass(frozen=True)
class NetworkOptions:
    """Neuron network options."""

    count: int = 30
    seed: int = 42
    max_distance: float = 35.0


@dataclass(frozen=True)
class LayoutOptions:
    spiral: SpiralOptions = field(default_factory=SpiralOptions)
    branches: BranchOptions = field(default_factory=BranchOptions)
    network: NetworkOptions = field(default_factory=NetworkOptions)
