"""
Engine and service configuration.
"""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class EngineConfig:
    """Global configuration for the beam engine and its API."""

    # API metadata
    app_name: str = "BeamCalc API"
    description: str = "Reactions, shear, moment and deflection for prismatic beams"
    version: str = "0.4.0"

    # Solver
    pivot_tolerance: float = 1e-9
    samples_per_element: int = 40  # intervals, so 41 samples per element

    # Unit conversions (model works in N and mm)
    n_per_kn: float = 1e3          # kN -> N
    nmm_per_knm: float = 1e6       # kN·m -> N·mm

    # Default example beam (timber joist)
    default_length: float = 3000.0   # mm
    default_width: float = 45.0      # mm
    default_depth: float = 190.0     # mm
    default_modulus: float = 10000.0  # MPa
    default_supports: List[Tuple[float, str]] = field(
        default_factory=lambda: [(0.0, "fixed"), (3000.0, "pinned")]
    )
    default_point_loads: List[Tuple[float, float]] = field(
        default_factory=lambda: [(1500.0, 8.0)]
    )
    default_udls: List[Tuple[float, float, float]] = field(
        default_factory=lambda: [(500.0, 2500.0, 4.0)]
    )


# Global config instance
CONFIG = EngineConfig()
