"""Constant tables for the ATS heuristic scorer.

Keyword lists, point budgets, pass thresholds and every user-visible
sentence live here so they can be reviewed (and tested) in one place.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CriterionRule:
    key: str
    name: str
    max_score: int
    pass_threshold: int
    pass_feedback: str
    fail_feedback: str
    strength: str
    improvement: str


# ---------------------------------------------------------------------------
# Criteria, in evaluation order. max_score values sum to exactly 100.
# ---------------------------------------------------------------------------
CRITERIA: tuple[CriterionRule, ...] = (
    CriterionRule(
        key="contact",
        name="Contact Information",
        max_score=8,
        pass_threshold=6,
        pass_feedback="Complete contact information found",
        fail_feedback="Missing some contact details (email, phone, LinkedIn)",
        strength="Complete contact information provided",
        improvement="Add missing contact details (email, phone, LinkedIn profile)",
    ),
    CriterionRule(
        key="keywords",
        name="Keywords & Skills Match",
        max_score=25,
        pass_threshold=20,
        pass_feedback="Strong keyword optimization with industry-relevant terms",
        fail_feedback="Insufficient keywords - add role-specific technical skills and industry terms",
        strength="Excellent keyword density and technical skill coverage",
        improvement=(
            "Mirror keywords from target job descriptions. Include both full terms "
            'and acronyms (e.g., "Search Engine Optimization (SEO)")'
        ),
    ),
    CriterionRule(
        key="experience",
        name="Work Experience & Achievements",
        max_score=22,
        pass_threshold=18,
        pass_feedback="Well-documented work experience with quantifiable achievements",
        fail_feedback="Add more measurable results with specific metrics and numbers",
        strength="Strong work history with quantifiable impact statements",
        improvement=(
            "Use the formula: Action Verb + Task + Measurable Result "
            '(e.g., "Increased revenue by 30% through new marketing strategy")'
        ),
    ),
    CriterionRule(
        key="education",
        name="Education & Certifications",
        max_score=8,
        pass_threshold=6,
        pass_feedback="Education and certifications properly documented",
        fail_feedback="Add degree, institution, graduation date, and relevant certifications",
        strength="Complete education and certification information",
        improvement="Include all degrees, certifications, and professional development courses",
    ),
    CriterionRule(
        key="formatting",
        name="ATS-Friendly Formatting",
        max_score=15,
        pass_threshold=12,
        pass_feedback="Clean formatting optimized for ATS parsing",
        fail_feedback=(
            "Avoid tables, columns, headers/footers, and graphics. "
            "Use standard section headings"
        ),
        strength="Resume uses ATS-parseable formatting",
        improvement=(
            "Use reverse-chronological format with standard headings: Summary, "
            "Experience, Education, Skills. Avoid text boxes and special characters"
        ),
    ),
    CriterionRule(
        key="length",
        name="Resume Length & Content Density",
        max_score=7,
        pass_threshold=5,
        pass_feedback="Optimal resume length (1-2 pages, 400-800 words)",
        fail_feedback="Resume is too short (lacking detail) or too long (unfocused)",
        strength="Appropriate resume length with focused content",
        improvement="Target 1 page for <10 years experience, 2 pages for 10+ years",
    ),
    CriterionRule(
        key="action_verbs",
        name="Action Verbs & Impact",
        max_score=10,
        pass_threshold=8,
        pass_feedback="Strong action verbs demonstrate clear impact",
        fail_feedback=(
            "Replace passive language with powerful action verbs "
            "(Led, Achieved, Optimized, Spearheaded)"
        ),
        strength="Compelling action-oriented language throughout",
        improvement="Start all bullet points with strong action verbs in past tense",
    ),
    CriterionRule(
        key="summary",
        name="Professional Summary",
        max_score=5,
        pass_threshold=4,
        pass_feedback="Clear professional summary with key qualifications",
        fail_feedback="Add a 2-3 sentence summary highlighting your value proposition",
        strength="Strong professional summary captures key qualifications",
        improvement="Add a summary at the top with your title, years of experience, and top skills",
    ),
)

RULES_BY_KEY: dict[str, CriterionRule] = {rule.key: rule for rule in CRITERIA}

# (minimum total, sentence), highest band first
SUMMARY_BANDS: tuple[tuple[int, str], ...] = (
    (80, "Excellent! Your resume is highly ATS-optimized and should perform well "
         "in automated screening systems. You have a strong match rate."),
    (65, "Good! Your resume is ATS-friendly with minor improvements needed to "
         "maximize your chances. You're above the 65% success threshold."),
    (50, "Fair. Your resume needs several improvements to pass through ATS "
         "systems effectively. Focus on keywords and formatting."),
    (0, "Needs Improvement. Significant changes are required to make your resume "
        "ATS-compatible. Priority: add keywords and quantifiable achievements."),
)

# ---------------------------------------------------------------------------
# Keywords & Skills
# ---------------------------------------------------------------------------
TECH_KEYWORDS: tuple[str, ...] = (
    # Languages & frameworks
    "python", "java", "javascript", "typescript", "react", "angular", "vue", "node.js",
    "flutter", "dart", "kotlin", "swift", "sql", "nosql", "mongodb", "postgresql",
    # Cloud & architecture
    "aws", "azure", "gcp", "cloud", "api", "rest", "graphql", "microservices",
    # Methodology & tooling
    "agile", "scrum", "kanban", "git", "docker", "kubernetes", "ci/cd", "devops",
    # Data & AI
    "machine learning", "ai", "artificial intelligence", "data analysis", "data science",
    # Management
    "project management", "leadership", "team management", "stakeholder management",
    # Engineering practice
    "testing", "automation", "security", "performance optimization", "scalability",
    # Web & backend stacks
    "html", "css", "sass", "webpack", "redux", "next.js", "express", "django", "flask",
    "spring", "hibernate", ".net", "c#", "c++", "go", "rust", "ruby", "rails", "php",
)

SOFT_SKILLS: tuple[str, ...] = (
    "communication", "collaboration", "problem-solving", "critical thinking",
    "leadership", "teamwork", "adaptability", "time management", "strategic planning",
)

# (minimum hits, base points), highest first
TECH_KEYWORD_STEPS: tuple[tuple[int, int], ...] = (
    (15, 20), (12, 17), (9, 14), (6, 11), (3, 8), (0, 4),
)
SOFT_SKILL_STEPS: tuple[tuple[int, int], ...] = ((4, 3), (2, 2), (1, 1))
SKILLS_SECTION_BONUS = 2

# ---------------------------------------------------------------------------
# Work experience
# ---------------------------------------------------------------------------
EXPERIENCE_SECTION_KEYWORDS: tuple[str, ...] = (
    "experience", "employment", "work history", "professional experience",
)

JOB_TITLE_KEYWORDS: tuple[str, ...] = (
    "developer", "engineer", "manager", "director", "analyst", "designer",
    "consultant", "specialist", "coordinator", "lead", "senior", "architect",
    "administrator", "technician", "associate", "executive", "officer",
)

METRIC_STEPS: tuple[tuple[int, int], ...] = ((5, 8), (3, 6), (1, 3))

# ---------------------------------------------------------------------------
# Education
# ---------------------------------------------------------------------------
DEGREE_KEYWORDS: tuple[str, ...] = (
    "bachelor", "master", "phd", "doctorate", "associate", "diploma",
    "b.s.", "m.s.", "b.a.", "m.a.", "mba", "b.sc", "m.sc", "b.tech", "m.tech",
)

CERTIFICATION_KEYWORDS: tuple[str, ...] = (
    "certification", "certified", "certificate", "credential",
    "aws certified", "pmp", "cissp", "comptia", "scrum master",
    "google certified", "microsoft certified", "oracle certified",
)

# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------
GLYPH_BULLETS = "■●★▪►◆"
GLYPH_BULLET_LIMIT = 10
STANDARD_HEADERS: tuple[str, ...] = ("experience", "education", "skills", "summary")
MIN_STANDARD_HEADERS = 2
FORMATTING_PENALTY = 5

# ---------------------------------------------------------------------------
# Length: (low, high, points), bounds inclusive, checked in order
# ---------------------------------------------------------------------------
WORD_COUNT_BANDS: tuple[tuple[int, int, int], ...] = (
    (400, 800, 7),
    (300, 399, 6),
    (801, 1000, 5),
    (200, 299, 4),
    (1001, 1200, 3),
)
WORD_COUNT_FALLBACK = 2

# ---------------------------------------------------------------------------
# Action verbs
# ---------------------------------------------------------------------------
ACTION_VERBS: tuple[str, ...] = (
    "led", "developed", "created", "managed", "implemented", "designed", "built",
    "improved", "increased", "reduced", "achieved", "delivered", "launched",
    "collaborated", "coordinated", "spearheaded", "orchestrated", "pioneered",
    "optimized", "streamlined", "transformed", "drove", "executed", "established",
    "accelerated", "scaled", "architected", "engineered", "automated", "migrated",
    "deployed", "integrated", "analyzed", "resolved", "enhanced", "generated",
    "facilitated", "mentored", "trained", "directed", "supervised", "oversaw",
)

ACTION_VERB_STEPS: tuple[tuple[int, int], ...] = (
    (12, 10), (9, 8), (6, 6), (4, 4), (2, 2), (0, 1),
)

# ---------------------------------------------------------------------------
# Professional summary
# ---------------------------------------------------------------------------
SUMMARY_SECTION_KEYWORDS: tuple[str, ...] = (
    "summary", "professional summary", "career summary", "profile",
    "objective", "career objective", "professional profile", "about",
)

TITLE_INDICATORS: tuple[str, ...] = (
    "software engineer", "developer", "manager", "analyst", "designer",
    "consultant", "specialist", "director", "architect", "lead",
)

VALUE_PROPOSITION_PHRASES: tuple[str, ...] = (
    "proven", "experienced", "skilled", "expertise in", "specializing in",
    "passionate", "dedicated", "results-driven", "track record",
)
