from typing import Optional

from pydantic import BaseModel, Field


class ReviewRequest(BaseModel):
    code: str = Field("", description="The source code to be reviewed.")
    language: Optional[str] = Field(
        None, description="Lowercase language identifier, e.g. 'python' or 'plaintext'."
    )


class ReviewResponse(BaseModel):
    review: str = Field(..., description="Cleaned review text or a diagnostic message.")
