from pydantic import BaseModel, Field


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")


class SuggestionsRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    criterion_name: str = Field(..., min_length=1, max_length=100, description="Criterion to improve, e.g. 'Keywords & Skills Match'")


class TailoredAdviceRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    target_role: str = Field(..., min_length=1, max_length=200, description="Role the candidate is targeting")
