"""Analysis pipeline: heuristic ATS score + Gemini narrative critique.

Pipeline:
1. Rule-based ATS scoring (always available, deterministic)
2. Gemini qualitative critique grounded on the score (optional)
3. Split the critique into titled sections for display

If Gemini is unavailable the score is still returned and the response is
flagged as degraded.
"""

import logging
import re

from models.responses import (
    AnalysisResponse,
    DetailedFeedback,
    SuggestionsResponse,
    TailoredAdviceResponse,
)
from services import ats_scorer, gemini_client, prompt_builder

logger = logging.getLogger(__name__)

GENERAL_SECTION = "general"

# Upper-case header lines such as "OVERVIEW" or "TOP 3 IMPROVEMENTS"
_UPPERCASE_HEADER_RE = re.compile(r"^[A-Z][A-Z0-9 &/'-]*[A-Z]:?$")
_BULLET_PREFIX_RE = re.compile(r"^[•\-*]\s*")
_BULLET_CHARS = ("•", "-", "*")


def _section_header(line: str) -> str | None:
    """Return the lowercased header name if the line is a section header."""
    stripped = line.strip()
    if len(stripped) > 4 and stripped.startswith("**") and stripped.endswith("**"):
        return stripped.replace("**", "").strip().lower()
    if _UPPERCASE_HEADER_RE.match(stripped):
        return stripped.rstrip(":").lower()
    return None


def parse_analysis_sections(text: str) -> dict[str, str]:
    """Split narrative text into sections keyed by lowercased header.

    Text before the first header goes under 'general'. Sections with no
    content are dropped.
    """
    sections: dict[str, str] = {}
    current_section = GENERAL_SECTION
    current_lines: list[str] = []

    for line in text.split("\n"):
        header = _section_header(line)
        if header:
            content = "\n".join(current_lines).strip()
            if content:
                sections[current_section] = content
            current_section = header
            current_lines = []
        else:
            current_lines.append(line)

    content = "\n".join(current_lines).strip()
    if content:
        sections[current_section] = content

    return sections


def parse_suggestions(text: str) -> list[str]:
    """Keep bullet lines and strip their leading marker."""
    suggestions = []
    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped or not any(ch in stripped for ch in _BULLET_CHARS):
            continue
        cleaned = _BULLET_PREFIX_RE.sub("", stripped).strip()
        if cleaned:
            suggestions.append(cleaned)
    return suggestions


async def analyze(resume_text: str) -> AnalysisResponse:
    """Score the resume and attach Gemini's critique when available."""
    report = ats_scorer.score(resume_text)

    prompt = prompt_builder.build_analysis_prompt(resume_text, report)
    narrative = await gemini_client.generate_text(prompt)

    if narrative is None:
        logger.warning("Gemini analysis unavailable, returning heuristic score only")
        return AnalysisResponse(ats_score=report, degraded=True)

    return AnalysisResponse(
        ats_score=report,
        ai_analysis=narrative,
        detailed_feedback=DetailedFeedback(
            sections=parse_analysis_sections(narrative),
            full_text=narrative,
        ),
    )


async def get_improvement_suggestions(resume_text: str, criterion_name: str) -> SuggestionsResponse:
    prompt = prompt_builder.build_suggestions_prompt(resume_text, criterion_name)
    text = await gemini_client.generate_text(prompt)
    if text is None:
        logger.warning("Gemini suggestions unavailable for %r", criterion_name)
        return SuggestionsResponse(criterion=criterion_name, degraded=True)
    return SuggestionsResponse(criterion=criterion_name, suggestions=parse_suggestions(text))


async def get_tailored_advice(resume_text: str, target_role: str) -> TailoredAdviceResponse:
    prompt = prompt_builder.build_tailored_advice_prompt(resume_text, target_role)
    text = await gemini_client.generate_text(prompt)
    if text is None:
        logger.warning("Gemini advice unavailable for role %r", target_role)
        return TailoredAdviceResponse(target_role=target_role, degraded=True)
    return TailoredAdviceResponse(target_role=target_role, advice=text)
