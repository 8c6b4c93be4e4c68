from typing import List
from pydantic import BaseModel, field_validator

# Input schema for /stats endpoint
class StatsIn(BaseModel):
    numbers: List[float]  # Sample to analyze, in any order

    @field_validator('numbers')
    def check_numbers_min_length(cls, v):
        # Every aggregate needs at least one value
        if len(v) < 1:
            raise ValueError('numbers must have at least 1 item')
        return v

    # Forbid extra fields; NaN and infinities have no JSON form in the response
    model_config = {"extra": "forbid", "allow_inf_nan": False}

# Output schema for /stats endpoint, mirrors StatsReport
class StatsOut(BaseModel):
    count: int              # Number of values ingested
    mean: float             # Arithmetic mean
    median: float           # Median of the sorted sample
    mode: float             # Value of the longest run of equal values
    stddev: float           # Population standard deviation
    harmonic_mean: float    # n / sum(1/x)
    unused_capacity: int    # Free slots left in the sample buffer

    model_config = {"frozen": True}
