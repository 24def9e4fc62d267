"""
Value types describing a beam, its supports and its loads.

Units: positions and section dimensions in mm, modulus in MPa (N/mm²),
point loads in kN, distributed loads in kN/m (numerically equal to N/mm).
"""

from dataclasses import dataclass
from enum import Enum


class SupportType(str, Enum):
    """Support types for nodes."""
    FREE = "free"
    PINNED = "pinned"  # Restrains vertical displacement (v=0)
    FIXED = "fixed"    # Restrains v=0 and θ=0


@dataclass(frozen=True)
class Beam:
    """
    Straight prismatic beam with a rectangular cross-section.

    Attributes:
        length: Span (mm)
        width: Section width b (mm)
        depth: Section depth d (mm)
        modulus: Young's modulus E (MPa)
    """
    length: float
    width: float
    depth: float
    modulus: float

    @property
    def inertia(self) -> float:
        """Second moment of area I = b·d³/12 (mm⁴)."""
        return self.width * self.depth ** 3 / 12

    @property
    def flexural_rigidity(self) -> float:
        """EI in N·mm²."""
        return self.modulus * self.inertia


@dataclass(frozen=True)
class Support:
    """Support at a position along the beam."""
    position: float
    kind: SupportType = SupportType.PINNED


@dataclass(frozen=True)
class PointLoad:
    """Concentrated load (kN), positive downward."""
    position: float
    magnitude: float


@dataclass(frozen=True)
class UDL:
    """Uniformly distributed load (kN/m) over [start, end], positive downward."""
    start: float
    end: float
    intensity: float


@dataclass(frozen=True)
class Node:
    """Analysis node generated by the mesh builder."""
    x: float
    support: SupportType = SupportType.FREE

    @property
    def constrained_dofs(self) -> tuple:
        """Local DOF offsets (0 = v, 1 = θ) restrained by the support."""
        if self.support == SupportType.FIXED:
            return (0, 1)
        if self.support == SupportType.PINNED:
            return (0,)
        return ()
