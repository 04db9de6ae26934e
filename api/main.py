# api/main.py
"""
FastAPI backend for the beam calculator - exposes the beamcalc engine as REST API.
"""

from dataclasses import asdict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from beamcalc import DEFAULT_CATALOG, InvalidConfiguration, analyze
from beamcalc.config import BeamInputs, build_configuration
from beamcalc.post import format_summary, results_table, summarize, deflection_ratio


app = FastAPI(
    title="Beam Calculator API",
    description="Closed-form Euler-Bernoulli beam analysis",
    version="0.1.0"
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class BeamParams(BaseModel):
    """Raw beam inputs. Omitted, zero or NaN numbers take the engine defaults."""
    beam_type: str = Field("simply-supported", description="simply-supported, fixed-fixed, cantilever")
    load_type: str = Field("point", description="point, distributed, moment")
    material: str = Field("steel", description="steel, aluminum, copper, wood, custom")
    length: Optional[float] = Field(None, description="Span (m)")
    width: Optional[float] = Field(None, description="Section width b (m)")
    height: Optional[float] = Field(None, description="Section height h (m)")
    custom_E_gpa: Optional[float] = Field(None, description="Young's modulus for 'custom' (GPa)")
    point_load: Optional[float] = Field(None, description="Point load P (N)")
    distributed_load: Optional[float] = Field(None, description="UDL q (N/m)")
    moment_load: Optional[float] = Field(None, description="Applied moment M0 (N·m)")
    load_position: Optional[float] = Field(None, description="Load position from left end (m)")
    num_points: int = Field(100, ge=1, le=5000, description="Sample intervals along the span")


class SummaryData(BaseModel):
    """Peak values."""
    max_deflection: float
    max_stress: float
    max_slope_deg: float
    max_moment: float
    max_shear: float
    I: float
    EI: float


class AnalysisData(BaseModel):
    """Complete analysis response."""
    x: List[float]
    deflection: List[float]
    slope: List[float]
    moment: List[float]
    shear: List[float]
    deflection_ratio: List[float]
    summary: SummaryData
    display: Dict[str, str]
    load_position: float


# =============================================================================
# Analysis
# =============================================================================

def run_analysis(params: BeamParams):
    """Build the configuration, analyze, and translate engine errors to HTTP 400."""
    inputs = BeamInputs(**params.model_dump())
    try:
        config, section = build_configuration(inputs)
        result = analyze(config)
    except InvalidConfiguration as e:
        raise HTTPException(status_code=400, detail=str(e))
    return config, section, result


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "Beam Calculator API"}


@app.get("/api/materials")
async def list_materials():
    """Catalog moduli in GPa."""
    return {name: E / 1e9 for name, E in DEFAULT_CATALOG.moduli.items()}


@app.post("/api/analyze", response_model=AnalysisData)
async def analyze_beam(params: BeamParams):
    """Analyze one beam configuration."""
    config, section, result = run_analysis(params)
    summary = summarize(result, section)

    return AnalysisData(
        x=result.x.tolist(),
        deflection=result.deflection.tolist(),
        slope=result.slope.tolist(),
        moment=result.moment.tolist(),
        shear=result.shear.tolist(),
        deflection_ratio=deflection_ratio(result).tolist(),
        summary=SummaryData(**asdict(summary)),
        display=format_summary(summary),
        load_position=config.load_position,
    )


@app.post("/api/export/csv")
async def export_csv(params: BeamParams):
    """Export the sampled curves as CSV."""
    _, _, result = run_analysis(params)
    csv_text = results_table(result).to_csv(index=False)

    return StreamingResponse(
        iter([csv_text]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=beam_results.csv"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
