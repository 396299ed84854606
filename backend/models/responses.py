from pydantic import BaseModel, ConfigDict


class ATSCriterion(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    score: int = 0
    max_score: int
    feedback: str = ""
    passed: bool = False


class ATSReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_score: int = 0
    criteria: dict[str, ATSCriterion] = {}
    strengths: tuple[str, ...] = ()
    improvements: tuple[str, ...] = ()
    summary: str = ""


class DetailedFeedback(BaseModel):
    sections: dict[str, str] = {}
    full_text: str = ""


class AnalysisResponse(BaseModel):
    ats_score: ATSReport
    ai_analysis: str = ""
    detailed_feedback: DetailedFeedback = DetailedFeedback()
    degraded: bool = False


class SuggestionsResponse(BaseModel):
    criterion: str
    suggestions: list[str] = []
    degraded: bool = False


class TailoredAdviceResponse(BaseModel):
    target_role: str
    advice: str = ""
    degraded: bool = False
