"""Rule-based ATS compatibility scorer.

Eight independent criterion scorers inspect the resume text and return an
integer score clamped to the criterion's budget. ``score`` runs them in a
fixed order and aggregates the results into an ``ATSReport``:

    contact (8) + keywords (25) + experience (22) + education (8)
    + formatting (15) + length (7) + action_verbs (10) + summary (5) = 100

Scorers are pure functions over the text and the constant tables in
``services.ats_rules``; the engine never raises for any string input.
"""

import logging
import re
from collections.abc import Callable

from models.responses import ATSCriterion, ATSReport
from services.ats_rules import (
    ACTION_VERB_STEPS,
    ACTION_VERBS,
    CERTIFICATION_KEYWORDS,
    CRITERIA,
    DEGREE_KEYWORDS,
    EXPERIENCE_SECTION_KEYWORDS,
    FORMATTING_PENALTY,
    GLYPH_BULLET_LIMIT,
    GLYPH_BULLETS,
    JOB_TITLE_KEYWORDS,
    METRIC_STEPS,
    MIN_STANDARD_HEADERS,
    RULES_BY_KEY,
    SKILLS_SECTION_BONUS,
    SOFT_SKILL_STEPS,
    SOFT_SKILLS,
    STANDARD_HEADERS,
    SUMMARY_BANDS,
    SUMMARY_SECTION_KEYWORDS,
    TECH_KEYWORD_STEPS,
    TECH_KEYWORDS,
    TITLE_INDICATORS,
    VALUE_PROPOSITION_PHRASES,
    WORD_COUNT_BANDS,
    WORD_COUNT_FALLBACK,
)

logger = logging.getLogger(__name__)

# Digit, word-boundary and whitespace classes are ASCII-only, so fullwidth
# or other non-Latin digits never count as phone numbers, years or metrics.
_ASCII_CI = re.ASCII | re.IGNORECASE

# Contact patterns (email and location are case-sensitive on purpose)
EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b", re.ASCII)
PHONE_RES: tuple[re.Pattern, ...] = (
    re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b", re.ASCII),
    re.compile(r"\(\d{3}\)\s*\d{3}[-.]?\d{4}", re.ASCII),
)
LOCATION_RES: tuple[re.Pattern, ...] = (
    re.compile(r"\b[A-Z][a-z]+,\s*[A-Z]{2}\b", re.ASCII),
    re.compile(r"\b\d{5}\b", re.ASCII),
)

SKILLS_SECTION_RE = re.compile(
    r"\b(skills|technical skills|core competencies|expertise)\b", _ASCII_CI
)

# Quantified achievements; matches are counted across all patterns
METRIC_RES: tuple[re.Pattern, ...] = (
    re.compile(r"\d+%", re.ASCII),
    re.compile(r"\$\d+[KMB]?", re.ASCII),
    re.compile(r"\d+\+?\s*(?:users|customers|clients|employees|team members)", _ASCII_CI),
    re.compile(r"\d+x", _ASCII_CI),
)

DATE_RANGE_RES: tuple[re.Pattern, ...] = (
    re.compile(r"\d{4}\s*[-–]\s*\d{4}", re.ASCII),
    re.compile(r"\d{4}\s*[-–]\s*(?:Present|Current)", _ASCII_CI),
    re.compile(r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\s+\d{4}", _ASCII_CI),
)

YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b", re.ASCII)
YEARS_OF_EXPERIENCE_RE = re.compile(
    r"\d+\+?\s*(?:years?|yrs?)(?:\s+of)?\s+(?:experience|expertise)", _ASCII_CI
)

_GLYPH_RE = re.compile(f"[{re.escape(GLYPH_BULLETS)}]")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _count_hits(lower_text: str, phrases: tuple[str, ...]) -> int:
    """Number of distinct phrases occurring as substrings of lower_text."""
    return sum(1 for phrase in phrases if phrase in lower_text)


def _contains_any(lower_text: str, phrases: tuple[str, ...]) -> bool:
    return any(phrase in lower_text for phrase in phrases)


def _step(count: int, steps: tuple[tuple[int, int], ...], default: int = 0) -> int:
    """Map a count to points using (minimum, points) steps, highest first."""
    for minimum, points in steps:
        if count >= minimum:
            return points
    return default


def _capped(key: str, score: int) -> int:
    return max(0, min(score, RULES_BY_KEY[key].max_score))


# ---------------------------------------------------------------------------
# Criterion scorers
# ---------------------------------------------------------------------------

def score_contact_info(text: str) -> int:
    score = 0
    lower_text = text.lower()

    if EMAIL_RE.search(text):
        score += 3
    if any(pattern.search(text) for pattern in PHONE_RES):
        score += 3
    if "linkedin" in lower_text:
        score += 1
    if any(pattern.search(text) for pattern in LOCATION_RES):
        score += 1

    return _capped("contact", score)


def score_keywords(text: str) -> int:
    """Technical keyword coverage, soft-skill bonus and skills-section bonus.

    The three parts can add up past the budget before the final cap.
    """
    lower_text = text.lower()
    tech_hits = _count_hits(lower_text, TECH_KEYWORDS)
    soft_hits = _count_hits(lower_text, SOFT_SKILLS)

    score = _step(tech_hits, TECH_KEYWORD_STEPS)
    score += _step(soft_hits, SOFT_SKILL_STEPS)
    if SKILLS_SECTION_RE.search(text):
        score += SKILLS_SECTION_BONUS

    return _capped("keywords", score)


def count_metrics(text: str) -> int:
    """Total quantified-achievement matches across all metric patterns."""
    return sum(len(pattern.findall(text)) for pattern in METRIC_RES)


def score_experience(text: str) -> int:
    score = 0
    lower_text = text.lower()

    if _contains_any(lower_text, EXPERIENCE_SECTION_KEYWORDS):
        score += 4

    title_hits = _count_hits(lower_text, JOB_TITLE_KEYWORDS)
    if title_hits >= 3:
        score += 5
    elif title_hits >= 1:
        score += 3

    score += _step(count_metrics(text), METRIC_STEPS)

    if any(pattern.search(text) for pattern in DATE_RANGE_RES):
        score += 5

    return _capped("experience", score)


def score_education(text: str) -> int:
    score = 0
    lower_text = text.lower()

    if "education" in lower_text:
        score += 2
    if _contains_any(lower_text, DEGREE_KEYWORDS):
        score += 3
    if YEAR_RE.search(text):
        score += 1
    if _contains_any(lower_text, CERTIFICATION_KEYWORDS):
        score += 2

    return _capped("education", score)


def score_formatting(text: str) -> int:
    """Start from the full budget and deduct for glyph bullets and missing headers."""
    score = RULES_BY_KEY["formatting"].max_score
    lower_text = text.lower()

    if len(_GLYPH_RE.findall(text)) > GLYPH_BULLET_LIMIT:
        score -= FORMATTING_PENALTY
    if _count_hits(lower_text, STANDARD_HEADERS) < MIN_STANDARD_HEADERS:
        score -= FORMATTING_PENALTY

    return _capped("formatting", score)


def count_words(text: str) -> int:
    return len(text.split())


def score_length(text: str) -> int:
    word_count = count_words(text)
    for low, high, points in WORD_COUNT_BANDS:
        if low <= word_count <= high:
            return points
    return WORD_COUNT_FALLBACK


def score_action_verbs(text: str) -> int:
    verb_hits = _count_hits(text.lower(), ACTION_VERBS)
    return _capped("action_verbs", _step(verb_hits, ACTION_VERB_STEPS))


def score_professional_summary(text: str) -> int:
    score = 0
    lower_text = text.lower()

    if _contains_any(lower_text, SUMMARY_SECTION_KEYWORDS):
        score += 2
    if YEARS_OF_EXPERIENCE_RE.search(text):
        score += 1
    if _contains_any(lower_text, TITLE_INDICATORS):
        score += 1
    if _contains_any(lower_text, VALUE_PROPOSITION_PHRASES):
        score += 1

    return _capped("summary", score)


SCORERS: dict[str, Callable[[str], int]] = {
    "contact": score_contact_info,
    "keywords": score_keywords,
    "experience": score_experience,
    "education": score_education,
    "formatting": score_formatting,
    "length": score_length,
    "action_verbs": score_action_verbs,
    "summary": score_professional_summary,
}


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def summarize(total_score: int) -> str:
    """Pick the summary sentence for the band containing total_score."""
    for minimum, sentence in SUMMARY_BANDS:
        if total_score >= minimum:
            return sentence
    return SUMMARY_BANDS[-1][1]


def score(resume_text: str) -> ATSReport:
    """Score resume text against all ATS criteria. Never raises."""
    criteria: dict[str, ATSCriterion] = {}
    strengths: list[str] = []
    improvements: list[str] = []
    total_score = 0

    for rule in CRITERIA:
        points = SCORERS[rule.key](resume_text)
        passed = points >= rule.pass_threshold
        criteria[rule.key] = ATSCriterion(
            key=rule.key,
            name=rule.name,
            score=points,
            max_score=rule.max_score,
            feedback=rule.pass_feedback if passed else rule.fail_feedback,
            passed=passed,
        )
        total_score += points
        if passed:
            strengths.append(rule.strength)
        else:
            improvements.append(rule.improvement)

    logger.debug("ATS score %d/100 (%d criteria passed)", total_score, len(strengths))

    return ATSReport(
        total_score=total_score,
        criteria=criteria,
        strengths=tuple(strengths),
        improvements=tuple(improvements),
        summary=summarize(total_score),
    )
