"""
Response envelopes for the API.

Every response, success or failure, carries is_success and the
configured official_email. Successes add data, failures add error.
"""
from typing import List, Union

from pydantic import BaseModel, Field


OperationResult = Union[List[int], int, str]


class OperationResponse(BaseModel):
    """Success envelope for POST /bfhl."""
    is_success: bool = Field(default=True)
    official_email: str
    data: OperationResult = Field(
        ...,
        description="List of integers (fibonacci, prime), integer (lcm, hcf) or string (AI)",
        examples=[[0, 1, 1, 2, 3, 5, 8], 72, "Paris"]
    )


class HealthResponse(BaseModel):
    """Response model for the /health endpoint."""
    is_success: bool = Field(default=True)
    official_email: str


class ErrorResponse(BaseModel):
    """Standard error envelope."""
    is_success: bool = Field(default=False)
    official_email: str
    error: str
