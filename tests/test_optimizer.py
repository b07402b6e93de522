"""Unit tests for the resume optimization pipeline."""

import dataclasses
import json

import pytest

from app.services.optimizer import (
    ACTION_VERBS,
    Analysis,
    EXPERIENCE_FALLBACK,
    SKILLS_FALLBACK,
    ResumeOptimizer,
    optimize,
)
from app.services.nlp_utils import extract_keywords, word_set
from app.services.resume_parser import SectionFlags


@pytest.mark.unit
def test_rewrite_bullets_cycles_verbs():
    assert ResumeOptimizer.rewrite_bullets(["- did X", "* did Y"]) == [
        "Delivered did X.",
        "Implemented did Y.",
    ]


@pytest.mark.unit
def test_rewrite_bullets_collapses_trailing_periods():
    rewritten = ResumeOptimizer.rewrite_bullets(["- shipped v2...", "• cut costs by 20%."])
    assert rewritten == ["Delivered shipped v2.", "Implemented cut costs by 20%."]


@pytest.mark.unit
def test_rewrite_bullets_keeps_exclamation_and_question_endings():
    rewritten = ResumeOptimizer.rewrite_bullets(["- won award!", "* asked why?", "- closed deal!..."])
    assert rewritten == ["Delivered won award!", "Implemented asked why?", "Optimized closed deal!"]


@pytest.mark.unit
def test_rewrite_bullets_wraps_around_and_restarts_per_call():
    lines = [f"- task {i}" for i in range(len(ACTION_VERBS) + 1)]
    rewritten = ResumeOptimizer.rewrite_bullets(lines)
    assert rewritten[-1] == "Delivered task 13."
    assert rewritten[len(ACTION_VERBS) - 1].startswith("Elevated ")

    # A second call starts from the first verb again
    assert ResumeOptimizer.rewrite_bullets(["- again"]) == ["Delivered again."]


@pytest.mark.unit
def test_rewrite_bullets_empty_marker_does_not_advance_cycle():
    assert ResumeOptimizer.rewrite_bullets(["-", "- real"]) == ["", "Delivered real."]


@pytest.mark.unit
def test_build_summary_with_and_without_keywords():
    generic = ResumeOptimizer.build_summary("Designer", "Media", [])
    assert generic == "Designer professional in Media, focusing on impact, clarity, and ATS alignment."

    focused = ResumeOptimizer.build_summary("Designer", "Media", ["figma", "branding", "a", "b", "c", "d"])
    assert focused.startswith("Designer in Media with strengths across figma, branding, a, b, c;")
    assert " d;" not in focused


@pytest.mark.unit
def test_build_skills_prefers_matched_keywords():
    words = word_set("python sql tableau reporting")
    assert ResumeOptimizer.build_skills(words, ["tableau", "python"]) == "tableau, python"


@pytest.mark.unit
def test_build_skills_falls_back_to_resume_words():
    words = word_set("I am a seasoned analyst with sql and excel skills")
    assert ResumeOptimizer.build_skills(words, []) == "seasoned, analyst, with, excel, skills"


@pytest.mark.unit
def test_build_optimized_resume_block_order():
    sections = SectionFlags(projects=True, education=True, certifications=True)
    text = ResumeOptimizer.build_optimized_resume(
        "Sum.", "a, b", ["Delivered x.", ""], ["extra one", "extra two"], sections
    )
    assert text == (
        "Summary\nSum.\n\n"
        "Skills\na, b\n\n"
        "Experience\n- Delivered x.\n\n"
        "Projects\n- Keep project outcomes concise and quantifiable.\n\n"
        "Education\n- Keep education details unchanged.\n\n"
        "Certifications\n- Keep certification titles accurate.\n\n"
        "Additional Details\n- extra one\n- extra two"
    )


@pytest.mark.unit
def test_build_optimized_resume_fallbacks_and_omitted_blocks():
    text = ResumeOptimizer.build_optimized_resume("Sum.", "", [], [], SectionFlags())
    assert text == f"Summary\nSum.\n\nSkills\n{SKILLS_FALLBACK}\n\nExperience\n{EXPERIENCE_FALLBACK}"
    assert "Projects" not in text
    assert "Additional Details" not in text


@pytest.mark.unit
def test_build_variants_replaces_first_with_in_summary():
    summary = "Analyst in Finance with strengths across data"
    base = f"Summary\n{summary}\n\nSkills\nwith tools"
    base_variant, concise, impact = ResumeOptimizer.build_variants(base, summary)

    assert base_variant == base
    assert concise == "Summary\nAnalyst in Finance focused on strengths across data\n\nSkills\nwith tools"
    assert impact == (
        "Summary\nAnalyst in Finance driving strengths across data Emphasizes measurable delivery."
        "\n\nSkills\nwith tools"
    )


@pytest.mark.unit
def test_build_variants_without_with_in_summary():
    summary = "Analyst professional in Finance."
    base = f"Summary\n{summary}\n\nSkills\nsql"
    variants = ResumeOptimizer.build_variants(base, summary)
    assert variants[1] == base
    assert variants[2] == f"Summary\n{summary} Emphasizes measurable delivery.\n\nSkills\nsql"


@pytest.mark.unit
def test_build_variants_summary_not_found_is_noop():
    base = "Summary\nSomething else entirely"
    assert ResumeOptimizer.build_variants(base, "Analyst with data") == [base, base, base]


@pytest.mark.unit
def test_optimize_end_to_end_example(optimizer, sample_resume):
    analysis = optimizer.optimize(sample_resume, "Data Analyst", "Finance", "")

    assert analysis.used_keywords == ()
    assert analysis.missing_keywords == ("data", "analyst", "finance")
    # 55 - 3 missing + 5 summary + 5 skills, no "experience" anywhere
    assert analysis.ats_score == 62

    summary = "Data Analyst professional in Finance, focusing on impact, clarity, and ATS alignment."
    assert analysis.optimized_resume == (
        f"Summary\n{summary}\n\n"
        "Skills\nsummary, build, things, built, dashboard, skills, python\n\n"
        "Experience\n- Delivered built a dashboard.\n\n"
        "Additional Details\n- Summary\n- I build things.\n- Skills\n- python, sql"
    )
    assert analysis.strengths == (
        "Resume ready for keyword infusion",
        "Add clear Experience section",
        "Clean single-column text layout",
    )
    assert analysis.weak_areas == ("Add job-specific keywords naturally",)
    assert analysis.recruiter_note == "Highlights: core role terms present. Gaps: data, analyst, finance."
    assert analysis.linkedin_headline == "Data Analyst | Finance"


@pytest.mark.unit
def test_optimize_with_matching_keywords(optimizer, engineer_resume):
    analysis = optimizer.optimize(
        engineer_resume, "Data Engineer", "Technology", "Python data pipelines and python tooling"
    )

    assert analysis.used_keywords == ("data", "python", "pipelines")
    assert analysis.missing_keywords == ("engineer", "technology", "tooling")
    # 55 + 6 - 3 + 5 summary + 8 experience + 4 education
    assert analysis.ats_score == 75

    assert "Skills\ndata, python, pipelines" in analysis.optimized_resume
    assert "- Delivered Built ETL jobs in python.\n- Implemented automated reports." in analysis.optimized_resume
    assert "Education\n- Keep education details unchanged." in analysis.optimized_resume
    assert "Projects" not in analysis.optimized_resume

    assert "focused on strengths across data, python, pipelines" in analysis.variants[1]
    assert "driving strengths across" in analysis.variants[2]
    assert analysis.variants[2].count("Emphasizes measurable delivery.") == 1

    assert analysis.linkedin_headline == "Data Engineer | Technology | data | python | pipelines"
    assert analysis.weak_areas == ("Add job-specific keywords naturally", "List role-aligned skills")


@pytest.mark.unit
def test_optimize_keyword_partition_invariant(optimizer, engineer_resume):
    description = "Python, SQL, Airflow, Spark and dashboards for finance reporting"
    analysis = optimizer.optimize(engineer_resume, "Data Engineer", "Finance", description)
    keywords = extract_keywords("Data Engineer", "Finance", description)

    assert not set(analysis.used_keywords) & set(analysis.missing_keywords)
    assert tuple(k for k in keywords if k in analysis.used_keywords) == analysis.used_keywords
    assert tuple(k for k in keywords if k in analysis.missing_keywords) == analysis.missing_keywords
    assert sorted(analysis.used_keywords + analysis.missing_keywords) == sorted(keywords)


@pytest.mark.unit
def test_optimize_first_variant_is_optimized_resume(optimizer, engineer_resume):
    analysis = optimizer.optimize(engineer_resume, "Data Engineer", "Technology", "")
    assert len(analysis.variants) == 3
    assert analysis.variants[0] == analysis.optimized_resume


@pytest.mark.unit
def test_optimize_is_idempotent(sample_resume):
    first = optimize(sample_resume, "Data Analyst", "Finance", "SQL dashboards")
    second = optimize(sample_resume, "Data Analyst", "Finance", "SQL dashboards")
    assert first == second
    assert first is not second


@pytest.mark.unit
@pytest.mark.parametrize("resume_text", ["", "   ", "\n\n", "-\n*"])
def test_optimize_handles_empty_resume(optimizer, resume_text):
    analysis = optimizer.optimize(resume_text, "Nurse", "Healthcare", "")
    assert 0 <= analysis.ats_score <= 100
    assert isinstance(analysis.ats_score, int)
    assert analysis.used_keywords == ()
    assert f"Experience\n{EXPERIENCE_FALLBACK}" in analysis.optimized_resume
    assert f"Skills\n{SKILLS_FALLBACK}" in analysis.optimized_resume


@pytest.mark.unit
def test_optimize_caps_additional_details(optimizer):
    resume = "\n".join(f"line number {i}" for i in range(12))
    analysis = optimizer.optimize(resume, "Writer", "Publishing", "")
    details = analysis.optimized_resume.split("Additional Details\n", 1)[1]
    assert details.splitlines() == [f"- line number {i}" for i in range(8)]


@pytest.mark.unit
def test_optimize_score_clamped_at_upper_bound(optimizer):
    words = [
        "alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf", "hotel",
        "india", "juliet", "kilo", "lima", "mike", "november", "oscar", "papa",
    ]
    resume = "Summary Skills Experience Education Projects\nengineer software " + " ".join(words)
    analysis = optimizer.optimize(resume, "Engineer", "Software", " ".join(words))
    assert len(analysis.used_keywords) == 18
    assert analysis.ats_score == 100


@pytest.mark.unit
def test_analysis_is_immutable(optimizer, engineer_resume):
    analysis = optimizer.optimize(engineer_resume, "Data Engineer", "Technology", "")

    with pytest.raises(dataclasses.FrozenInstanceError):
        analysis.ats_score = 0
    for name in ("variants", "used_keywords", "missing_keywords", "strengths", "weak_areas", "suggestions"):
        assert isinstance(getattr(analysis, name), tuple)


@pytest.mark.unit
def test_analysis_from_dict_restores_json_form(optimizer, engineer_resume):
    analysis = optimizer.optimize(engineer_resume, "Data Engineer", "Technology", "python")
    payload = json.loads(json.dumps(dataclasses.asdict(analysis)))
    assert isinstance(payload["variants"], list)
    assert Analysis.from_dict(payload) == analysis
