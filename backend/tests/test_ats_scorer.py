import pytest
from pydantic import ValidationError

from models.responses import ATSReport
from services.ats_rules import CRITERIA, RULES_BY_KEY
from services.ats_scorer import (
    count_metrics,
    count_words,
    score,
    score_action_verbs,
    score_contact_info,
    score_education,
    score_experience,
    score_formatting,
    score_keywords,
    score_length,
    score_professional_summary,
    summarize,
)


def _filler(n: int) -> str:
    """Neutral words that hit no keyword table."""
    return " ".join(["lorem"] * n)


STRONG_RESUME = """Jane Doe
jane.doe@example.com | (555) 123-4567 | linkedin.com/in/janedoe | Seattle, WA

Professional Summary
Results-driven software engineer with 8+ years of experience building scalable cloud platforms.

Technical Skills
Python, Java, TypeScript, React, Angular, Kotlin, Swift, MongoDB, PostgreSQL, AWS, Azure,
GCP, GraphQL, Docker, Kubernetes, Scrum, Kanban
Communication, teamwork, adaptability, collaboration

Professional Experience
Senior Software Engineer | Acme Corp | Jan 2020 - Present
- Led migration of the billing platform, reducing hosting costs by 30%
- Developed and implemented a fraud engine that saved $2M per year
- Designed and built APIs serving 500 customers
- Created a caching layer that improved throughput 3x
- Managed a team of four and delivered releases 45% faster
- Achieved zero downtime; increased deploy frequency and reduced incidents

Education
Bachelor of Science in Computer Science, 2015
AWS Certified Solutions Architect
""" + _filler(420)

SCENARIO_RESUME = (
    "john@example.com 555-123-4567 LinkedIn New York, NY\n"
    "Skills: Python, AWS, Docker, Kubernetes, Agile, React, SQL, Git, CI/CD, "
    "Leadership, Communication\n" + _filler(432)
)

SAMPLE_TEXTS = [
    "",
    "   ",
    "hello world",
    STRONG_RESUME,
    SCENARIO_RESUME,
    "● " * 30 + "skills",
    _filler(1500),
]


# --- Rule tables ---


def test_max_scores_sum_to_100():
    assert sum(rule.max_score for rule in CRITERIA) == 100


def test_rules_are_consistent():
    keys = [rule.key for rule in CRITERIA]
    assert len(keys) == len(set(keys)) == 8
    for rule in CRITERIA:
        assert 0 < rule.pass_threshold <= rule.max_score
        assert rule.pass_feedback != rule.fail_feedback


# --- Contact ---


class TestContactInfo:
    def test_empty(self):
        assert score_contact_info("") == 0

    def test_full_contact_block(self):
        text = "john@example.com | 555-123-4567 | linkedin.com/in/john | New York, NY"
        assert score_contact_info(text) == 8

    def test_parenthesized_phone(self):
        assert score_contact_info("Call (555) 123-4567") == 3

    def test_dotted_phone(self):
        assert score_contact_info("555.123.4567") == 3

    def test_zip_code_counts_as_location(self):
        assert score_contact_info("Austin 78701") == 1

    def test_adding_email_adds_exactly_three(self):
        base = "Jane Doe, software engineer"
        assert score_contact_info(base + " jane.doe@example.com") - score_contact_info(base) == 3

    def test_email_requires_tld(self):
        assert score_contact_info("jane@localhost") == 0

    def test_fullwidth_digits_are_not_a_phone(self):
        assert score_contact_info("５５５-１２３-４５６７") == 0
        assert score_contact_info("Austin ７８７０１") == 0


# --- Keywords ---


class TestKeywords:
    def test_empty_is_base_score(self):
        assert score_keywords("") == 4

    def test_skills_heading_bonus(self):
        assert score_keywords("Skills") == 6

    def test_three_tech_hits(self):
        assert score_keywords("python docker kubernetes") == 8

    def test_soft_skill_bonus(self):
        assert score_keywords("python docker kubernetes communication") == 9

    def test_skills_line_scenario(self):
        text = (
            "Skills: Python, AWS, Docker, Kubernetes, Agile, React, SQL, Git, CI/CD, "
            "Leadership, Communication"
        )
        # 10 tech hits -> 14, 2 soft hits -> +2, heading -> +2
        assert score_keywords(text) == 18

    def test_caps_at_max(self):
        text = (
            "Technical Skills: Python, Java, TypeScript, React, Angular, Kotlin, Swift, "
            "MongoDB, AWS, Azure, GCP, GraphQL, Docker, Kubernetes, Scrum, Kanban. "
            "Communication, teamwork, adaptability, collaboration."
        )
        assert score_keywords(text) == 25


# --- Experience ---


class TestExperience:
    def test_empty(self):
        assert score_experience("") == 0

    def test_count_metrics(self):
        assert count_metrics("30% 25% $2M 500 users 3x") == 5

    def test_count_metrics_none(self):
        assert count_metrics("no numbers here") == 0

    def test_count_metrics_ascii_digits_only(self):
        assert count_metrics("３０% ３x") == 0

    def test_full_marks(self):
        text = (
            "Experience: Senior Engineer and Lead Developer, Jan 2020\n"
            "Grew revenue 30%, cut costs 25%, saved $2M, served 500 users, 3x throughput"
        )
        assert score_experience(text) == 22

    def test_section_and_single_title(self):
        assert score_experience("Work history: analyst") == 7

    def test_year_range(self):
        assert score_experience("2018 - 2021") == 5
        assert score_experience("2018 – present") == 5


# --- Education ---


class TestEducation:
    def test_empty(self):
        assert score_education("") == 0

    def test_full_marks(self):
        text = "Education\nBachelor of Science, 2019\nAWS Certified"
        assert score_education(text) == 8

    def test_degree_only(self):
        assert score_education("MBA") == 3

    def test_year_only(self):
        assert score_education("Graduated 1999") == 1

    def test_first_degree_match_only(self):
        assert score_education("bachelor master") == 3

    def test_first_certification_match_only(self):
        assert score_education("certified pmp") == 2

    def test_fullwidth_year_ignored(self):
        assert score_education("２０１９") == 0


# --- Formatting ---


class TestFormatting:
    def test_clean(self):
        assert score_formatting("Experience Education") == 15

    def test_empty_misses_headers(self):
        assert score_formatting("") == 10

    def test_glyphs_and_single_header(self):
        assert score_formatting("● " * 12 + "skills") == 5

    def test_ten_glyphs_not_penalized(self):
        assert score_formatting("■" * 10 + " experience summary") == 15

    def test_report_marks_formatting_failed(self):
        report = score("● " * 12 + "skills")
        assert report.criteria["formatting"].score == 5
        assert report.criteria["formatting"].passed is False


# --- Length ---


@pytest.mark.parametrize(
    "words, expected",
    [
        (0, 2),
        (199, 2),
        (200, 4),
        (299, 4),
        (300, 6),
        (399, 6),
        (400, 7),
        (800, 7),
        (801, 5),
        (1000, 5),
        (1001, 3),
        (1200, 3),
        (1201, 2),
    ],
)
def test_length_bands(words, expected):
    assert score_length(_filler(words)) == expected


def test_count_words_ignores_whitespace_runs():
    assert count_words("  one\n\ntwo \t three  ") == 3


# --- Action verbs ---


class TestActionVerbs:
    def test_empty(self):
        assert score_action_verbs("") == 1

    def test_two_verbs(self):
        assert score_action_verbs("led and built") == 2

    def test_many_verbs(self):
        text = (
            "led, developed, created, managed, implemented, designed, built, "
            "improved, increased, reduced, achieved, delivered"
        )
        assert score_action_verbs(text) == 10

    def test_many_verbs_reported_as_strength(self):
        text = (
            "led, developed, created, managed, implemented, designed, built, "
            "improved, increased, reduced, achieved, delivered"
        )
        report = score(text)
        assert report.criteria["action_verbs"].passed is True
        assert RULES_BY_KEY["action_verbs"].strength in report.strengths


# --- Summary ---


class TestProfessionalSummary:
    def test_empty(self):
        assert score_professional_summary("") == 0

    def test_full_marks(self):
        text = (
            "Professional Summary: Results-driven software engineer "
            "with 8+ years of experience"
        )
        assert score_professional_summary(text) == 5

    def test_years_phrase(self):
        assert score_professional_summary("5 yrs expertise") == 1

    def test_first_section_keyword_only(self):
        assert score_professional_summary("summary profile") == 2

    def test_first_value_phrase_only(self):
        assert score_professional_summary("proven dedicated") == 1


@pytest.mark.parametrize(
    "total, prefix",
    [
        (100, "Excellent!"),
        (80, "Excellent!"),
        (79, "Good!"),
        (65, "Good!"),
        (64, "Fair."),
        (50, "Fair."),
        (49, "Needs Improvement."),
        (0, "Needs Improvement."),
    ],
)
def test_summary_bands(total, prefix):
    assert summarize(total).startswith(prefix)


# --- Report aggregation ---


class TestScore:
    def test_empty_input(self):
        report = score("")
        assert isinstance(report, ATSReport)
        assert report.criteria["length"].score == 2
        assert report.criteria["keywords"].score <= 6
        assert report.criteria["contact"].score == 0
        assert report.total_score == 17
        assert report.strengths == ()
        assert len(report.improvements) == 8
        assert report.summary.startswith("Needs Improvement.")

    def test_criteria_in_evaluation_order(self):
        report = score(STRONG_RESUME)
        assert list(report.criteria) == [rule.key for rule in CRITERIA]

    def test_strong_resume(self):
        report = score(STRONG_RESUME)
        assert report.total_score == 100
        assert all(c.passed for c in report.criteria.values())
        assert report.strengths == tuple(rule.strength for rule in CRITERIA)
        assert report.improvements == ()
        assert report.summary.startswith("Excellent!")

    def test_scenario_resume(self):
        report = score(SCENARIO_RESUME)
        assert report.criteria["contact"].score == 8
        assert report.criteria["keywords"].score == 18
        assert report.criteria["length"].score == 7

    def test_feedback_matches_pass_state(self):
        report = score(SCENARIO_RESUME)
        for rule in CRITERIA:
            criterion = report.criteria[rule.key]
            expected = rule.pass_feedback if criterion.passed else rule.fail_feedback
            assert criterion.feedback == expected
            assert criterion.name == rule.name
            assert criterion.max_score == rule.max_score

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_total_is_sum_of_criteria(self, text):
        report = score(text)
        assert 0 <= report.total_score <= 100
        assert report.total_score == sum(c.score for c in report.criteria.values())
        for criterion in report.criteria.values():
            assert 0 <= criterion.score <= criterion.max_score

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_each_criterion_lands_in_one_list(self, text):
        report = score(text)
        assert len(report.strengths) + len(report.improvements) == 8
        for rule in CRITERIA:
            if report.criteria[rule.key].passed:
                assert rule.strength in report.strengths
                assert rule.improvement not in report.improvements
            else:
                assert rule.improvement in report.improvements
                assert rule.strength not in report.strengths

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_idempotent(self, text):
        assert score(text) == score(text)

    def test_report_serializes_to_plain_dict(self):
        data = score(SCENARIO_RESUME).model_dump()
        assert isinstance(data["total_score"], int)
        assert data["criteria"]["contact"]["max_score"] == 8
        assert set(data["criteria"]["contact"]) == {
            "key", "name", "score", "max_score", "feedback", "passed",
        }

    def test_report_is_immutable(self):
        report = score(SCENARIO_RESUME)
        assert isinstance(report.strengths, tuple)
        assert isinstance(report.improvements, tuple)
        with pytest.raises(ValidationError):
            report.total_score = 0
        with pytest.raises(ValidationError):
            report.criteria["contact"].score = 0

    def test_report_lists_serialize_as_arrays(self):
        data = score("").model_dump(mode="json")
        assert data["strengths"] == []
        assert isinstance(data["improvements"], list)


# --- Pass thresholds ---


@pytest.mark.parametrize(
    "key, text, expected_score, expected_passed",
    [
        # contact: threshold 6
        ("contact", "jane@example.com 555-123-4567", 6, True),
        ("contact", "jane@example.com linkedin 98101", 5, False),
        # keywords: threshold 20
        ("keywords", "python java typescript react angular kotlin swift mongodb "
                     "aws azure gcp graphql docker kubernetes scrum", 20, True),
        ("keywords", "python java typescript react angular kotlin swift mongodb "
                     "aws azure gcp graphql communication teamwork", 19, False),
        # experience: threshold 18
        ("experience", "experience analyst 10% 20% 30% 2019 - 2021", 18, True),
        ("experience", "experience analyst developer engineer 10% 2019 - 2021", 17, False),
        # education: threshold 6
        ("education", "education bachelor 2019", 6, True),
        ("education", "education bachelor", 5, False),
        # length: threshold 5
        ("length", _filler(801), 5, True),
        ("length", _filler(200), 4, False),
        # action verbs: threshold 8
        ("action_verbs", "led developed created managed implemented designed built "
                         "improved increased", 8, True),
        ("action_verbs", "led developed created managed implemented designed built "
                         "improved", 6, False),
        # summary: threshold 4
        ("summary", "summary developer proven", 4, True),
        ("summary", "summary developer", 3, False),
    ],
)
def test_pass_threshold_boundary(key, text, expected_score, expected_passed):
    criterion = score(text).criteria[key]
    assert criterion.score == expected_score
    assert criterion.passed is expected_passed
    assert (criterion.score >= RULES_BY_KEY[key].pass_threshold) is expected_passed


def test_formatting_threshold_unreachable_between_bands():
    # Formatting only takes 15, 10, 5 or 0; 10 is the highest failing value
    criterion = score("Experience Education " + "● " * 11).criteria["formatting"]
    assert criterion.score == 10
    assert criterion.passed is False
