from pydantic import BaseModel, ConfigDict, Field, computed_field
from typing import List, Optional, Tuple

class RadicleSummary(BaseModel):
    # extra fields (length summaries etc.) travel along but are not scored
    model_config = ConfigDict(extra="allow")

    total_count: int = Field(..., ge=0)

class PSRIRequest(BaseModel):
    germination_counts: List[float] = Field(..., examples=[[5, 8, 10]])
    time_points: Optional[List[float]] = Field(None, description="Days after sowing; defaults to the configured trial days.")
    total_seeds: float = Field(..., examples=[15])
    species: str = Field(..., examples=["corn"])
    radicle_summary: Optional[RadicleSummary] = None
    diseased_counts: Optional[List[float]] = None

class PSRIResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    MSG: float
    MRG: float
    MTG: float
    PSRI: float
    PSRI_base: float
    t50: float
    final_germinated: float
    germination_rate: float
    radicle_vigor_factor: float
    total_diseased: float
    species: str

    total_seeds: float
    time_points: Tuple[float, ...]
    adjusted_germination: Tuple[float, ...]

    @computed_field
    @property
    def PSRI_final(self) -> float:
        return self.PSRI
