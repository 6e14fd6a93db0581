from __future__ import annotations

import logging
import time

from app.core.scoring import get_scoring_int
from app.matching import run_resume_keyword_analysis, strip_html
from app.schemas.resume import ResumeAnalyzeRequest, ResumeAnalyzeResponse, ResumeAnalyzeTelemetry

logger = logging.getLogger(__name__)


class ResumeInputError(ValueError):
    pass


def build_recommendations(missing_keywords: list[str], keyword_count: int = 3) -> list[str]:
    """Deterministic resume edits, led by the top missing keywords."""
    gaps = ", ".join(missing_keywords[:keyword_count]) or "role-specific tools"
    return [
        "Add a summary line aligned to the role scope and top requirements.",
        f"Include evidence for missing keywords: {gaps}.",
        "Quantify impact in recent bullets using percentages, dollars, or time saved.",
        "Move high-signal technical skills and achievements into the first half of page one.",
        "Rewrite bullets with action verbs and outcome-first phrasing.",
    ]


def analyze_resume(payload: ResumeAnalyzeRequest) -> ResumeAnalyzeResponse:
    started_at = time.perf_counter()

    job_description = strip_html(payload.job_description)
    if not job_description:
        raise ResumeInputError("Job description is required.")

    resume_text = payload.resume_text
    if not resume_text.strip():
        raise ResumeInputError("Resume text is required.")

    analysis = run_resume_keyword_analysis(
        resume_text,
        job_description,
        jd_keyword_limit=get_scoring_int("resume_match.jd_keyword_limit", 160),
        resume_keyword_limit=get_scoring_int("resume_match.resume_keyword_limit", 220),
        matched_limit=get_scoring_int("resume_match.matched_keyword_limit", 40),
        missing_limit=get_scoring_int("resume_match.missing_keyword_limit", 5),
    )
    recommendations = build_recommendations(
        analysis.missing_keywords,
        keyword_count=get_scoring_int("resume_match.recommendation_keyword_count", 3),
    )

    elapsed_ms = int((time.perf_counter() - started_at) * 1000)
    logger.info(
        "resume_analyze_complete elapsed_ms=%s resume_chars=%s jd_chars=%s matched_keywords=%s score=%s",
        elapsed_ms,
        len(resume_text),
        len(job_description),
        len(analysis.matched_keywords),
        analysis.match_score,
    )

    preview_chars = get_scoring_int("resume_match.preview_chars", 1000)
    return ResumeAnalyzeResponse(
        **analysis.model_dump(),
        recommendations=recommendations,
        extracted_resume_preview=resume_text[:preview_chars],
        telemetry=ResumeAnalyzeTelemetry(elapsed_ms=elapsed_ms),
    )
