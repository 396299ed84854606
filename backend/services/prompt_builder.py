"""All prompt templates for Gemini API calls."""

from models.responses import ATSReport


def build_analysis_prompt(resume_text: str, report: ATSReport) -> str:
    """Resume-coach critique grounded on the heuristic score."""
    return f"""You are an expert resume coach. Analyze this resume and provide concise, actionable improvement advice.

RESUME TEXT:
{resume_text}

CURRENT ATS SCORE: {report.total_score}/100

CONTEXT:
{report.summary}

YOUR TASK:
Write a brief, focused analysis (250-350 words max) that tells the candidate exactly what to improve. Use this structure:

OVERVIEW
[One paragraph: What's working well and the main issue holding this resume back]

TOP 3 IMPROVEMENTS

1. [Title]
What to do: [Specific action in 1-2 sentences]
Example: [Quick before/after or concrete example]

2. [Title]
What to do: [Specific action in 1-2 sentences]
Example: [Quick before/after or concrete example]

3. [Title]
What to do: [Specific action in 1-2 sentences]
Example: [Quick before/after or concrete example]

QUICK WINS
[One short paragraph listing 2-3 easy changes they can make today]

WRITING GUIDELINES:
- NO emojis, keep it professional
- Use UPPERCASE for section headers only
- Write in clear, short paragraphs (3-4 lines max)
- Be direct and specific - focus on WHAT TO CHANGE, not explanations
- Reference actual content from the resume
- Skip generic advice - make it personal to this resume
- Keep total response under 350 words
- Use conversational but professional tone

Focus on the highest-impact changes that will improve their ATS score and get them interviews."""


def build_suggestions_prompt(resume_text: str, criterion_name: str) -> str:
    return f"""Analyze this resume and provide 3-5 specific, actionable suggestions to improve the "{criterion_name}" aspect:

RESUME TEXT:
{resume_text}

Provide only a bulleted list of concrete suggestions. Be specific and actionable."""


def build_tailored_advice_prompt(resume_text: str, target_role: str) -> str:
    return f"""This candidate is targeting a {target_role} position. Review their resume and provide specific advice on:

1. How to better tailor this resume for {target_role} roles
2. What keywords or skills are missing for this target role
3. How to restructure accomplishments to appeal to {target_role} hiring managers

RESUME TEXT:
{resume_text}

Keep your response concise and actionable (200-300 words)."""
