"""
BeamElement class for the direct stiffness method.
Implements the local bending stiffness matrix, UDL fixed-end forces and
sampling of shear, moment and deflection along a 1-D Euler-Bernoulli element.
"""

import numpy as np
from dataclasses import dataclass
from typing import Dict, List


@dataclass
class BeamElement:
    """
    Beam element between mesh nodes `index` and `index + 1`.

    Attributes:
        index: Index of the start node in the mesh
        x_start: Global position of the start node (mm)
        L: Length (mm)
        E: Young's modulus (N/mm²)
        I: Moment of inertia (mm⁴)
        w: Distributed load (N/mm), positive upward
    """
    index: int
    x_start: float
    L: float
    E: float
    I: float
    w: float = 0.0

    def __post_init__(self):
        if self.L <= 0:
            raise ValueError("Length must be positive")
        if self.E <= 0:
            raise ValueError("Young's modulus must be positive")
        if self.I <= 0:
            raise ValueError("Moment of inertia must be positive")

    @property
    def EI(self) -> float:
        return self.E * self.I

    @property
    def dof_map(self) -> List[int]:
        """Global DOF indices [v_i, θ_i, v_j, θ_j]."""
        i = self.index
        return [2 * i, 2 * i + 1, 2 * (i + 1), 2 * (i + 1) + 1]

    def stiffness_matrix_bending(self) -> np.ndarray:
        """
        Returns 4x4 local stiffness matrix for bending only.
        DOFs: [v_i, θ_i, v_j, θ_j]

        K = EI/L³ * [[12, 6L, -12, 6L],
                     [6L, 4L², -6L, 2L²],
                     [-12, -6L, 12, -6L],
                     [6L, 2L², -6L, 4L²]]
        """
        L = self.L
        EI_L3 = self.EI / (L ** 3)

        K = EI_L3 * np.array([
            [12,      6*L,    -12,      6*L   ],
            [6*L,     4*L**2, -6*L,     2*L**2],
            [-12,    -6*L,     12,     -6*L   ],
            [6*L,     2*L**2, -6*L,     4*L**2]
        ], dtype=float)

        return K

    def fixed_end_forces_udl(self) -> np.ndarray:
        """
        Returns equivalent nodal loads [V_i, M_i, V_j, M_j] of the element UDL.

        For a downward load (w < 0) both forces point down,
        M_i is clockwise (negative) and M_j counter-clockwise (positive).
        """
        L, w = self.L, self.w
        V = w * L / 2
        M = w * L ** 2 / 12
        return np.array([V, M, V, -M])

    def end_forces(self, d_local: np.ndarray) -> np.ndarray:
        """Forces acting on the element ends: K·d - f_fixed."""
        return self.stiffness_matrix_bending() @ d_local - self.fixed_end_forces_udl()

    @staticmethod
    def shape_functions(r: np.ndarray, L: float) -> np.ndarray:
        """Cubic Hermite shape functions N1..N4 at r = x/L, shape (4, len(r))."""
        r2 = r ** 2
        r3 = r ** 3
        return np.array([
            1 - 3*r2 + 2*r3,
            L * (r - 2*r2 + r3),
            3*r2 - 2*r3,
            L * (-r2 + r3),
        ])

    def internal_forces(self, d_local: np.ndarray, n_intervals: int = 40) -> Dict[str, np.ndarray]:
        """
        Sample shear V(x), moment M(x) and deflection v(x) along the element.

        End forces from `end_forces` are up and counter-clockwise positive;
        V is the net upward force left of the section and M is sagging-positive,
        so M starts at the negated end moment.

        Args:
            d_local: Local displacement vector [v_i, θ_i, v_j, θ_j]
            n_intervals: Number of equal intervals (n_intervals + 1 samples)

        Returns:
            Dict with x (global), V (N), M (N·mm), v (mm)
        """
        d_local = np.asarray(d_local, dtype=float)
        V_i, M_i, _, _ = self.end_forces(d_local)

        stations = np.linspace(0, 1, n_intervals + 1)
        x = stations * self.L
        w = self.w

        # V is the net upward force left of the section, M is sagging-positive
        V = V_i + w * x
        M = -M_i + V_i * x + w * x ** 2 / 2
        v = d_local @ self.shape_functions(stations, self.L)

        return {
            "x": self.x_start + x,
            "V": V,
            "M": M,
            "v": v,
        }
