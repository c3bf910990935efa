from fastapi import APIRouter, HTTPException
from psricalc.core.config import settings
from psricalc.schemas import PSRIRequest, PSRIResult
from psricalc.services.psri import compute_psri
from psricalc.services.validation import InvalidInput

router = APIRouter()

@router.get("/health")
def health():
    return {"status": "ok", "service": settings.PROJECT_NAME}

@router.post("/psri/compute", response_model=PSRIResult)
def psri_compute(req: PSRIRequest):
    time_points = req.time_points if req.time_points is not None else settings.DEFAULT_TIME_POINTS

    try:
        return compute_psri(
            req.germination_counts,
            time_points,
            total_seeds=req.total_seeds,
            species=req.species,
            radicle_summary=req.radicle_summary,
            diseased_counts=req.diseased_counts,
        )
    except InvalidInput as exc:
        raise HTTPException(400, str(exc))
