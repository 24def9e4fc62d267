"""
Beam analysis entry point.

`analyze` runs mesh generation, assembly, constraint reduction, solution and
response evaluation in one pass and returns either an AnalysisResult or an
AnalysisFailure. Nothing is cached between calls.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from .beam import Beam, Node, PointLoad, Support, UDL
from .config import CONFIG
from .solver import UnstableStructureError
from .structure import DiagramSample, Reaction, Structure

logger = logging.getLogger(__name__)

INSTABILITY_MESSAGE = (
    "The system is unstable. Add or adjust supports so at least one "
    "vertical and one rotational restraint exists."
)


@dataclass(frozen=True)
class Extreme:
    """Signed value with the largest magnitude and where it occurs."""
    value: float
    x: float


@dataclass(frozen=True)
class DiagramExtremes:
    shear: Extreme
    moment: Extreme
    deflection: Extreme


@dataclass(frozen=True)
class SectionProperties:
    inertia: float             # mm⁴
    flexural_rigidity: float   # N·mm²


@dataclass
class AnalysisResult:
    nodes: List[Node]
    reactions: List[Reaction]
    diagrams: List[DiagramSample]
    section: SectionProperties
    extremes: DiagramExtremes
    success: bool = True


@dataclass
class AnalysisFailure:
    error: str
    detail: Optional[str] = None
    success: bool = False


def _extreme(samples: List[DiagramSample], key: str) -> Extreme:
    sample = max(samples, key=lambda s: abs(getattr(s, key)))
    return Extreme(value=getattr(sample, key), x=sample.x)


def summarize_diagrams(samples: List[DiagramSample]) -> DiagramExtremes:
    """Peak shear, moment and deflection along the beam (first occurrence wins)."""
    if not samples:
        raise ValueError("No diagram samples to summarize")
    return DiagramExtremes(
        shear=_extreme(samples, "shear"),
        moment=_extreme(samples, "moment"),
        deflection=_extreme(samples, "deflection"),
    )


def analyze(length: float, width: float, depth: float, modulus: float,
            supports: Iterable[Support] = (),
            point_loads: Iterable[PointLoad] = (),
            udls: Iterable[UDL] = (),
            n_intervals: Optional[int] = None) -> Union[AnalysisResult, AnalysisFailure]:
    """
    Analyze a prismatic beam.

    Args:
        length: Beam length (mm)
        width: Section width (mm)
        depth: Section depth (mm)
        modulus: Young's modulus (MPa)
        supports: Supports; positions without one are free
        point_loads: Point loads (kN, positive downward)
        udls: Distributed loads (kN/m, positive downward)
        n_intervals: Sampling intervals per element (defaults to CONFIG.samples_per_element)

    Returns:
        AnalysisResult, or AnalysisFailure if the supports leave a mechanism
    """
    beam = Beam(length=length, width=width, depth=depth, modulus=modulus)
    structure = Structure(beam=beam, supports=tuple(supports),
                          point_loads=tuple(point_loads), udls=tuple(udls))

    try:
        solution = structure.solve()
    except UnstableStructureError as e:
        logger.info("Analysis rejected: %s", e)
        return AnalysisFailure(error=INSTABILITY_MESSAGE, detail=str(e))

    reactions = structure.reaction_table(solution)
    diagrams = structure.compute_diagrams(solution, n_intervals=n_intervals)

    logger.debug("Analysis done: %d nodes, %d reactions, %d samples",
                 len(solution.nodes), len(reactions), len(diagrams))

    return AnalysisResult(
        nodes=solution.nodes,
        reactions=reactions,
        diagrams=diagrams,
        section=SectionProperties(inertia=beam.inertia,
                                  flexural_rigidity=beam.flexural_rigidity),
        extremes=summarize_diagrams(diagrams),
    )
