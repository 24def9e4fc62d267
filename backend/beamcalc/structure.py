"""
Structure class for assembling the global stiffness system of a beam and
recovering reactions and internal force diagrams.

Uses 2 DOFs per node: [v, θ] (vertical displacement and rotation).
Internally forces are in N, lengths in mm and moments in N·mm.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from .beam import Beam, Node, PointLoad, Support, SupportType, UDL
from .beam_element import BeamElement
from .config import CONFIG
from .mesh import build_nodes, element_udl
from .solver import UnstableStructureError, solve_linear_system

logger = logging.getLogger(__name__)


@dataclass
class GlobalSystem:
    """Assembled global stiffness matrix, load vector and element records."""
    K: np.ndarray
    F: np.ndarray
    elements: List[BeamElement]


@dataclass
class ReducedSystem:
    """Free-free partition of the global system."""
    constrained: List[int]
    free: List[int]
    K_ff: np.ndarray
    F_f: np.ndarray


@dataclass
class Solution:
    """Result of a linear solve over the whole structure."""
    nodes: List[Node]
    elements: List[BeamElement]
    K: np.ndarray
    F: np.ndarray
    free: List[int]
    constrained: List[int]
    displacements: np.ndarray
    reactions: np.ndarray


@dataclass(frozen=True)
class Reaction:
    """Support reaction: vertical force (kN, upward) and moment (kN·m, counter-clockwise)."""
    position: float
    kind: SupportType
    vertical: float
    moment: float


@dataclass(frozen=True)
class DiagramSample:
    """Shear (kN), moment (kN·m) and deflection (mm) at global position x (mm)."""
    x: float
    shear: float
    moment: float
    deflection: float


@dataclass(frozen=True)
class Structure:
    """
    Single-span beam with supports and loads.

    Inputs are stored as tuples and never modified; every method derives
    its results from scratch.
    """
    beam: Beam
    supports: Tuple[Support, ...] = field(default_factory=tuple)
    point_loads: Tuple[PointLoad, ...] = field(default_factory=tuple)
    udls: Tuple[UDL, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "supports", tuple(self.supports))
        object.__setattr__(self, "point_loads", tuple(self.point_loads))
        object.__setattr__(self, "udls", tuple(self.udls))

    def build_nodes(self) -> List[Node]:
        """Generate the analysis nodes."""
        return build_nodes(self.beam.length, self.supports, self.point_loads, self.udls)

    def assemble(self, nodes: List[Node]) -> GlobalSystem:
        """
        Assemble the global stiffness matrix and load vector.

        Returns:
            GlobalSystem with K (2n x 2n), F (2n,) and one BeamElement per
            non-degenerate node pair
        """
        n_dof = 2 * len(nodes)  # 2 DOFs per node: [v, θ]

        K = np.zeros((n_dof, n_dof))
        F = np.zeros(n_dof)
        elements: List[BeamElement] = []

        # Point loads act at the node with the same position
        index_at = {node.x: i for i, node in enumerate(nodes)}
        for load in self.point_loads:
            idx = index_at.get(load.position)
            if idx is None:
                logger.warning("Point load at %.3f mm is off the beam and was ignored", load.position)
                continue
            F[2 * idx] += -load.magnitude * CONFIG.n_per_kn

        for i in range(len(nodes) - 1):
            x1, x2 = nodes[i].x, nodes[i + 1].x
            L = x2 - x1
            if L <= 0:
                continue

            # kN/m == N/mm; downward load is negative in the local frame
            w = -element_udl(self.udls, x1, x2)

            elem = BeamElement(index=i, x_start=x1, L=L,
                               E=self.beam.modulus, I=self.beam.inertia, w=w)
            K_local = elem.stiffness_matrix_bending()
            fem = elem.fixed_end_forces_udl()

            dof_map = elem.dof_map
            K[np.ix_(dof_map, dof_map)] += K_local
            F[dof_map] += fem

            elements.append(elem)

        return GlobalSystem(K=K, F=F, elements=elements)

    @staticmethod
    def apply_boundary_conditions(nodes: List[Node], K: np.ndarray,
                                  F: np.ndarray) -> ReducedSystem:
        """
        Partition DOFs into constrained and free sets and extract K_ff, F_f.

        Pinned supports restrain v, fixed supports restrain v and θ.
        Without any support the reduced system is the full system.
        """
        constrained: List[int] = []
        for i, node in enumerate(nodes):
            constrained.extend(2 * i + offset for offset in node.constrained_dofs)

        constrained_set = set(constrained)
        free = [i for i in range(K.shape[0]) if i not in constrained_set]

        logger.debug("DOF partition: %d constrained, %d free", len(constrained), len(free))
        return ReducedSystem(
            constrained=sorted(constrained),
            free=free,
            K_ff=K[np.ix_(free, free)],
            F_f=F[free],
        )

    @staticmethod
    def check_stability(nodes: List[Node]):
        """
        Reject support layouts that allow rigid-body motion.

        A continuous beam without hinges is stable with one fixed support or
        with at least two supported nodes. Any other layout leaves K_ff
        singular, which round-off can hide from the pivot check.

        Raises:
            UnstableStructureError: If the beam can translate or rotate freely
        """
        supported = [node for node in nodes if node.support != SupportType.FREE]
        if any(node.support == SupportType.FIXED for node in supported):
            return
        if len(supported) < 2:
            raise UnstableStructureError(
                f"Structure is unstable: {len(supported)} supported node(s) and no fixed support"
            )

    def solve(self) -> Solution:
        """
        Solve the structural analysis problem.

        Returns:
            Solution with full displacement vector (mm, rad) and the
            reaction vector R = K·d - F (N, N·mm)

        Raises:
            UnstableStructureError: If the structure is a mechanism
        """
        nodes = self.build_nodes()
        system = self.assemble(nodes)
        reduced = self.apply_boundary_conditions(nodes, system.K, system.F)
        self.check_stability(nodes)

        d_free = solve_linear_system(reduced.K_ff, reduced.F_f)

        d = np.zeros(system.K.shape[0])
        d[reduced.free] = d_free

        reactions = system.K @ d - system.F

        return Solution(
            nodes=nodes,
            elements=system.elements,
            K=system.K,
            F=system.F,
            free=reduced.free,
            constrained=reduced.constrained,
            displacements=d,
            reactions=reactions,
        )

    @staticmethod
    def reaction_table(solution: Solution) -> List[Reaction]:
        """One row per supported node, converted to kN and kN·m."""
        rows = []
        for i, node in enumerate(solution.nodes):
            if node.support == SupportType.FREE:
                continue
            rows.append(Reaction(
                position=node.x,
                kind=node.support,
                vertical=float(solution.reactions[2 * i]) / CONFIG.n_per_kn,
                moment=float(solution.reactions[2 * i + 1]) / CONFIG.nmm_per_knm,
            ))
        return rows

    @staticmethod
    def compute_diagrams(solution: Solution,
                         n_intervals: Optional[int] = None) -> List[DiagramSample]:
        """
        Sample shear, moment and deflection along every element.

        Samples at a shared node appear once per adjoining element.
        """
        if n_intervals is None:
            n_intervals = CONFIG.samples_per_element
        samples: List[DiagramSample] = []
        for elem in solution.elements:
            d_local = solution.displacements[elem.dof_map]
            data = elem.internal_forces(d_local, n_intervals=n_intervals)
            for x, V, M, v in zip(data["x"], data["V"], data["M"], data["v"]):
                samples.append(DiagramSample(
                    x=float(x),
                    shear=float(V) / CONFIG.n_per_kn,
                    moment=float(M) / CONFIG.nmm_per_knm,
                    deflection=float(v),
                ))
        return samples
