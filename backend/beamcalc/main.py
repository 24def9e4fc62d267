"""
FastAPI main application for BeamCalc - beam reactions, shear, moment and deflection.
"""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .analysis import AnalysisFailure, analyze
from .beam import PointLoad, Support, SupportType, UDL
from .config import CONFIG
from .models import (
    AnalysisRequest, AnalysisResponse, ErrorResponse,
    NodeResult, ReactionResult, DiagramPoint, DiagramExtremesResult,
    ExtremeResult, SectionResult, PointLoadInput, SupportInput, UDLInput,
    SupportType as APISupportType
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title=CONFIG.app_name,
    description=CONFIG.description,
    version=CONFIG.version
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify actual origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/example", response_model=AnalysisRequest)
def example_request():
    """Default beam used to seed the editor."""
    return AnalysisRequest(
        length=CONFIG.default_length,
        width=CONFIG.default_width,
        depth=CONFIG.default_depth,
        modulus=CONFIG.default_modulus,
        supports=[SupportInput(position=x, type=kind) for x, kind in CONFIG.default_supports],
        point_loads=[PointLoadInput(position=x, magnitude=p) for x, p in CONFIG.default_point_loads],
        udls=[UDLInput(start=a, end=b, magnitude=w) for a, b, w in CONFIG.default_udls],
    )


def map_support_type(api_support: APISupportType) -> SupportType:
    """Map API support type to engine support type."""
    mapping = {
        APISupportType.FREE: SupportType.FREE,
        APISupportType.PINNED: SupportType.PINNED,
        APISupportType.FIXED: SupportType.FIXED,
    }
    return mapping[api_support]


@app.post("/analyze", response_model=AnalysisResponse, responses={400: {"model": ErrorResponse}})
def analyze_beam(request: AnalysisRequest):
    """
    Analyze a prismatic beam using the direct stiffness method.

    Returns support reactions, sampled shear/moment/deflection diagrams,
    section properties and diagram extremes.
    """
    try:
        result = analyze(
            length=request.length,
            width=request.width,
            depth=request.depth,
            modulus=request.modulus,
            supports=[Support(position=s.position, kind=map_support_type(s.type))
                      for s in request.supports],
            point_loads=[PointLoad(position=p.position, magnitude=p.magnitude)
                         for p in request.point_loads],
            udls=[UDL(start=u.start, end=u.end, intensity=u.magnitude)
                  for u in request.udls],
            n_intervals=request.samples_per_element,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected analysis error")
        raise HTTPException(status_code=500, detail=f"Analysis error: {str(e)}")

    if isinstance(result, AnalysisFailure):
        error = ErrorResponse(error=result.error, detail=result.detail)
        return JSONResponse(status_code=400, content=error.model_dump())

    extremes = result.extremes
    return AnalysisResponse(
        success=True,
        nodes=[NodeResult(x=n.x, support=n.support.value) for n in result.nodes],
        reactions=[
            ReactionResult(position=r.position, type=r.kind.value,
                           vertical=r.vertical, moment=r.moment)
            for r in result.reactions
        ],
        diagrams=[
            DiagramPoint(x=s.x, shear=s.shear, moment=s.moment, deflection=s.deflection)
            for s in result.diagrams
        ],
        section=SectionResult(
            inertia=result.section.inertia,
            flexural_rigidity=result.section.flexural_rigidity,
        ),
        extremes=DiagramExtremesResult(
            shear=ExtremeResult(value=extremes.shear.value, x=extremes.shear.x),
            moment=ExtremeResult(value=extremes.moment.value, x=extremes.moment.x),
            deflection=ExtremeResult(value=extremes.deflection.value, x=extremes.deflection.x),
        ),
    )


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)
