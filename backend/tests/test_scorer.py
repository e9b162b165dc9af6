import pytest

from services.keyword_extractor import extract_keywords
from services.scorer import (
    MAX_MATCHED_SKILLS,
    MAX_PENALTY,
    ScoringStrategy,
    _round_half_up,
    compute_coverage,
    compute_penalty,
    derive_skills,
    effective_skills,
    score_coverage,
    score_resume,
)

JD = "Need React and TypeScript, 5+ years"
RESUME = "I have 6 years experience with React and TypeScript"


# --- Weighted strategy: pinned scenarios ---

@pytest.mark.scenario
def test_full_match_with_experience():
    result = score_resume(JD, RESUME, ["react", "typescript"], ["react"])
    # 0.60 * 1.0 + 0.25 * 0.75 + 0.10 * 0 - 0 = 0.7875
    assert result.score == 0.788
    assert result.reasons.matched_skills == ["react", "typescript"]
    assert result.reasons.missing_must == []
    assert result.reasons.est_years == 6


@pytest.mark.scenario
def test_half_coverage():
    resume = "I have 6 years experience with React"
    result = score_resume(JD, resume, ["react", "typescript"], ["react"])
    # 0.60 * 0.5 + 0.25 * 0.75 = 0.4875
    assert result.score == 0.488
    assert result.reasons.matched_skills == ["react"]
    assert result.reasons.missing_must == []


@pytest.mark.scenario
def test_missing_must_have_penalty():
    resume = "I have 6 years experience with Python"
    result = score_resume(JD, resume, ["react", "typescript"], ["react", "typescript"])
    assert result.reasons.missing_must == ["react", "typescript"]
    assert compute_penalty(len(result.reasons.missing_must)) == pytest.approx(0.10)
    # 0.25 * 0.75 - 0.10
    assert result.score == pytest.approx(0.0875, abs=1e-3)


@pytest.mark.scenario
def test_education_and_capped_experience():
    resume = "B.Tech Computer Science. 12 years of React and TypeScript."
    result = score_resume(JD, resume, ["react", "typescript"])
    # 0.60 + 0.25 (capped at 8 years) + 0.10
    assert result.score == pytest.approx(0.95)
    assert result.reasons.est_years == 12


@pytest.mark.scenario
def test_full_resume_document(resume_text):
    skills = ["python", "react", "docker", "postgresql", "kubernetes"]
    result = score_resume("", resume_text, skills, ["kubernetes"])
    # 0.60 * 0.8 + 0.25 * 0.75 + 0.10 * 1 - 0.05
    assert result.score == pytest.approx(0.7175, abs=1e-3)
    assert result.reasons.matched_skills == ["python", "react", "docker", "postgresql"]
    assert result.reasons.missing_must == ["kubernetes"]
    assert result.reasons.est_years == 6


# --- Weighted strategy: properties ---

def test_penalty_never_exceeds_cap():
    must = [f"skill{i}" for i in range(30)]
    result = score_resume(JD, RESUME, ["react"], must)
    assert len(result.reasons.missing_must) == 30
    assert compute_penalty(30) == MAX_PENALTY == 0.25
    # 0.60 + 0.1875 - 0.25
    assert result.score == pytest.approx(0.5375, abs=1e-3)


def test_score_clamped_at_zero():
    result = score_resume("", "nothing relevant", ["react"], ["react", "go", "rust", "java", "sql"])
    assert result.score == 0.0


@pytest.mark.parametrize(
    "resume",
    ["", "React", RESUME, "B.Sc. 40 years React TypeScript Go Rust", "x" * 500],
)
def test_score_bounds(resume):
    result = score_resume(JD, resume, ["react", "typescript", "go"], ["rust"])
    assert 0.0 <= result.score <= 1.0


def test_adding_matching_skill_never_lowers_score():
    skills = ["react", "typescript", "docker"]
    base = "5 years with React"
    before = score_resume("", base, skills, ["docker"])
    after = score_resume("", base + " and Docker", skills, ["docker"])
    assert after.score >= before.score
    assert "docker" in after.reasons.matched_skills


def test_matched_skills_capped():
    skills = [f"skill{i}" for i in range(30)]
    resume = " ".join(skills)
    result = score_resume("", resume, skills)
    assert len(result.reasons.matched_skills) == MAX_MATCHED_SKILLS
    assert result.reasons.matched_skills[0] == "skill0"


def test_empty_inputs_score_zero():
    result = score_resume(None, None)
    assert result.score == 0.0
    assert result.reasons.matched_skills == []
    assert result.reasons.missing_must == []
    assert result.reasons.est_years == 0


def test_skills_derived_from_jd_when_not_given():
    jd = "React, Node.js / SQL\nGit"
    result = score_resume(jd, "Built a Node.js API on SQL with Git")
    assert result.reasons.matched_skills == ["node.js", "sql", "git"]


# --- Skill list helpers ---

def test_derive_skills_splits_and_filters():
    jd = "React, Node.js / SQL\nGo, Git, Experience designing large distributed systems"
    # "go" is too short, the sentence is too long
    assert derive_skills(jd) == ["react", "node.js", "sql", "git"]


def test_derive_skills_dedupes():
    assert derive_skills("SQL, sql, Sql") == ["sql"]


def test_derive_skills_drops_trailing_periods():
    assert derive_skills("React, SQL, Git.") == ["react", "sql", "git"]
    assert derive_skills("Git. \nNode.js.") == ["git", "node.js"]


def test_derive_skills_keeps_leading_dot():
    assert derive_skills(".NET, C#.") == [".net"]


def test_sentence_final_skill_matches():
    result = score_resume("React, SQL, Git.", "Git and SQL")
    assert result.reasons.matched_skills == ["sql", "git"]


def test_derive_skills_empty():
    assert derive_skills("") == []
    assert derive_skills(None) == []


def test_effective_skills_prefers_explicit_list():
    assert effective_skills("React, SQL, Git", ["Python"]) == ["Python"]


def test_effective_skills_dedupes_by_normalized_key():
    assert effective_skills("", ["React", " react ", "REACT", "Node.js"]) == ["React", "Node.js"]


def test_compute_coverage_bounds():
    hits, coverage = compute_coverage("react", [])
    assert hits == [] and coverage == 0.0
    hits, coverage = compute_coverage("react and sql", ["react", "sql"])
    assert coverage == 1.0
    hits, coverage = compute_coverage("react", ["react", "sql", "git", "go"])
    assert coverage == 0.25


def test_round_half_up():
    assert _round_half_up(0.7875, 3) == 0.788
    assert _round_half_up(0.4875, 3) == 0.488
    assert _round_half_up(66.666666, 2) == 66.67


# --- Coverage-only strategy ---

def test_score_coverage_percentage():
    result = score_coverage("I managed SQL and React apps", ["react", "sql", "docker", "manag"])
    assert result.score == 75.0
    assert result.matched == ["react", "sql", "manag"]


def test_score_coverage_rounds_to_two_places():
    result = score_coverage("react sql", ["react", "sql", "docker"])
    assert result.score == 66.67


def test_score_coverage_with_extracted_keywords():
    keywords = extract_keywords("React, Node.js, SQL, Git")
    result = score_coverage("Node and React developer", keywords)
    assert result.matched == ["react", "node"]
    assert result.score == 50.0


def test_score_coverage_no_keywords():
    result = score_coverage("React developer", [])
    assert result.score == 0.0
    assert result.matched == []


@pytest.mark.parametrize("resume", ["", None, "react", "react sql docker git node"])
def test_score_coverage_bounds(resume):
    result = score_coverage(resume, ["react", "sql", "docker"])
    assert 0.0 <= result.score <= 100.0


def test_strategies_are_distinct_scales():
    weighted = score_resume("", "react sql", ["react", "sql"])
    coverage = score_coverage("react sql", ["react", "sql"])
    assert weighted.score == pytest.approx(0.6)
    assert coverage.score == 100.0


def test_scoring_strategy_values():
    assert ScoringStrategy("weighted") is ScoringStrategy.WEIGHTED
    assert ScoringStrategy("coverage_only") is ScoringStrategy.COVERAGE_ONLY
