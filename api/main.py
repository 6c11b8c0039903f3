"""
FastAPI API for the Lease Check engine
"""
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List

from leasecheck import (
    LeaseCheckEngine,
    InvalidRequestError,
    MalformedRecordError,
    __version__
)
from leasecheck.logging_config import configure_logger

configure_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Lease Check API",
    description="API for computing tract ownership from recorded instruments",
    version=__version__
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify allowed origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Engine holds read-only settings only; every run gets its own ledger
engine = None

def get_engine() -> LeaseCheckEngine:
    """Get or create engine instance"""
    global engine
    if engine is None:
        engine = LeaseCheckEngine()
    return engine


def invalid_request_detail(message: str) -> Dict[str, str]:
    return {
        "error": "InvalidRequestError",
        "message": message,
        "type": "invalid_request"
    }


SERVER_ERROR_DETAIL = {
    "error": "InternalServerError",
    "message": "An unexpected error occurred",
    "type": "server_error"
}


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as client errors"""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request body"
    return JSONResponse(status_code=400, content={"detail": invalid_request_detail(message)})


# Request/Response Models
class LeaseOverrideModel(BaseModel):
    """Reviewer answers for one lease instrument"""
    production_present: bool = False
    top_lease: bool = False
    boundary_pugh: bool = False
    depth_pugh: bool = False


class RunLeaseCheckRequest(BaseModel):
    """Request model for a lease check run"""
    events: List[Any] = Field(default_factory=list, description="Extracted instrument records")
    tract_key: str = Field("", description="Township/range and section of the tract, e.g. '1S-2W 14'")
    as_of: Optional[str] = Field(None, description="ISO date of the check (default: today)")
    hbp: bool = Field(False, description="Whether the tract is believed held by production")
    total_acres: Optional[float] = Field(None, description="Gross acres in the tract (default 160)")
    lease_overrides: Optional[Dict[str, LeaseOverrideModel]] = Field(
        None, description="Reviewer answers keyed by lease document id"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "events": [
                    {
                        "doc_id": "2010-000123",
                        "instrument_type": "WD",
                        "recorded": "2010-01-01",
                        "grantors": ["A"],
                        "grantees": ["B"],
                        "tracts": [{"trs": "1S-2W", "sec": "14"}],
                        "conveys_all_interest": True
                    }
                ],
                "tract_key": "1S-2W 14",
                "hbp": False,
                "total_acres": 160
            }
        }


# API Endpoints
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Lease Check API",
        "version": __version__,
        "endpoints": {
            "POST /lease-check/run": "Compute tract ownership from extracted instrument records",
            "GET /health": "Health check"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    try:
        eng = get_engine()
        return {
            "status": "healthy",
            "engine_initialized": True,
            "instrument_aliases_loaded": len(eng.settings.instrument_type_aliases)
        }
    except Exception as e:
        logger.exception("Lease check engine failed to initialize")
        return {
            "status": "unhealthy",
            "error": str(e)
        }


@app.post("/lease-check/run", response_model=Dict[str, Any])
async def run_lease_check(request: RunLeaseCheckRequest):
    """
    Compute current ownership of a tract.

    This endpoint:
    1. Keeps only the instruments that touch the tract
    2. Orders them by recorded (or executed) date
    3. Replays deeds and fractional conveyances into an ownership ledger
    4. Returns owners by net acres, plus flags for instruments needing review
    """
    overrides = None
    if request.lease_overrides:
        overrides = {doc_id: ov.model_dump() for doc_id, ov in request.lease_overrides.items()}

    try:
        eng = get_engine()
        report = eng.run(
            request.events,
            request.tract_key,
            as_of=request.as_of,
            hbp=request.hbp,
            total_acres=request.total_acres,
            lease_overrides=overrides
        )
        return report.to_dict()

    except InvalidRequestError as e:
        raise HTTPException(status_code=400, detail=invalid_request_detail(str(e)))
    except MalformedRecordError:
        logger.exception("lease-check-run: malformed instrument record")
        raise HTTPException(status_code=500, detail=SERVER_ERROR_DETAIL)
    except Exception:
        logger.exception("lease-check-run: unexpected error")
        raise HTTPException(status_code=500, detail=SERVER_ERROR_DETAIL)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
