from fastapi import APIRouter, File, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import QuickAnalyzeRequest, SuggestionsRequest, TailoredAdviceRequest
from models.responses import (
    AnalysisResponse,
    ATSReport,
    SuggestionsResponse,
    TailoredAdviceResponse,
)
from services import ats_scorer, gemini_client, pdf_parser, resume_analyzer

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": gemini_client.is_configured(),
    }


@router.post("/score", response_model=ATSReport)
async def score(body: QuickAnalyzeRequest):
    return ats_scorer.score(body.resume_text)


@router.post("/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze(request: Request, resume_file: UploadFile = File(...)):
    # Validate file type
    if not pdf_parser.is_pdf_filename(resume_file.filename):
        raise HTTPException(status_code=400, detail="Invalid file type. Please upload a PDF file.")

    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File size exceeds {settings.max_upload_size_mb}MB. Please upload a smaller file.",
        )

    try:
        resume_text = pdf_parser.extract_text(content)
    except pdf_parser.PDFExtractionError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return await resume_analyzer.analyze(resume_text)


@router.post("/analyze/quick", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze_quick(request: Request, body: QuickAnalyzeRequest):
    return await resume_analyzer.analyze(body.resume_text)


@router.post("/suggestions", response_model=SuggestionsResponse)
@limiter.limit(settings.rate_limit)
async def suggestions(request: Request, body: SuggestionsRequest):
    return await resume_analyzer.get_improvement_suggestions(body.resume_text, body.criterion_name)


@router.post("/advice", response_model=TailoredAdviceResponse)
@limiter.limit(settings.rate_limit)
async def advice(request: Request, body: TailoredAdviceRequest):
    return await resume_analyzer.get_tailored_advice(body.resume_text, body.target_role)
