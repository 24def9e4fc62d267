"""
Pydantic models for the BeamCalc API.
"""

from pydantic import BaseModel, Field, model_validator
from typing import List, Optional
from enum import Enum

from .config import CONFIG


class SupportType(str, Enum):
    FREE = "free"
    PINNED = "pinned"    # v=0
    FIXED = "fixed"      # v=0, θ=0


class SupportInput(BaseModel):
    """Support at a position along the beam."""
    position: float = Field(ge=0, description="Position from left end (mm)")
    type: SupportType = SupportType.PINNED


class PointLoadInput(BaseModel):
    """Concentrated load."""
    position: float = Field(ge=0, description="Position from left end (mm)")
    magnitude: float = Field(description="Load (kN), positive downward")


class UDLInput(BaseModel):
    """Uniformly distributed load over part of the span."""
    start: float = Field(ge=0, description="Start position (mm)")
    end: float = Field(ge=0, description="End position (mm)")
    magnitude: float = Field(description="Load intensity (kN/m), positive downward")

    @model_validator(mode="after")
    def check_range(self):
        if self.start > self.end:
            raise ValueError(f"UDL start {self.start} is beyond its end {self.end}")
        return self


class AnalysisRequest(BaseModel):
    """Request body for beam analysis."""
    length: float = Field(gt=0, description="Beam length (mm)")
    width: float = Field(gt=0, description="Section width (mm)")
    depth: float = Field(gt=0, description="Section depth (mm)")
    modulus: float = Field(gt=0, description="Young's modulus (MPa)")
    supports: List[SupportInput] = []
    point_loads: List[PointLoadInput] = []
    udls: List[UDLInput] = []
    samples_per_element: int = Field(default_factory=lambda: CONFIG.samples_per_element, ge=1, le=1000)

    @model_validator(mode="after")
    def check_positions(self):
        positions = [s.position for s in self.supports]
        positions += [p.position for p in self.point_loads]
        positions += [x for u in self.udls for x in (u.start, u.end)]
        outside = [x for x in positions if x > self.length]
        if outside:
            raise ValueError(f"Positions {outside} lie beyond the beam length {self.length}")
        return self


class NodeResult(BaseModel):
    x: float = Field(description="Node position (mm)")
    support: SupportType


class ReactionResult(BaseModel):
    """Reaction at a support."""
    position: float = Field(description="Support position (mm)")
    type: SupportType
    vertical: float = Field(description="Vertical reaction (kN), positive upward")
    moment: float = Field(description="Moment reaction (kN·m), positive counter-clockwise")


class DiagramPoint(BaseModel):
    x: float = Field(description="Global position (mm)")
    shear: float = Field(description="Shear force (kN)")
    moment: float = Field(description="Bending moment (kN·m), sagging positive")
    deflection: float = Field(description="Deflection (mm), positive upward")


class ExtremeResult(BaseModel):
    value: float
    x: float


class DiagramExtremesResult(BaseModel):
    shear: ExtremeResult
    moment: ExtremeResult
    deflection: ExtremeResult


class SectionResult(BaseModel):
    inertia: float = Field(description="Second moment of area (mm⁴)")
    flexural_rigidity: float = Field(description="EI (N·mm²)")


class AnalysisResponse(BaseModel):
    """Response from beam analysis."""
    success: bool = True
    nodes: List[NodeResult]
    reactions: List[ReactionResult]
    diagrams: List[DiagramPoint]
    section: SectionResult
    extremes: DiagramExtremesResult


class ErrorResponse(BaseModel):
    """Error response."""
    success: bool = False
    error: str
    detail: Optional[str] = None
