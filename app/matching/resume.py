from __future__ import annotations

import math

from pydantic import BaseModel, Field

from .keywords import detect_seniority_cues, extract_keywords

JD_KEYWORD_LIMIT = 160
RESUME_KEYWORD_LIMIT = 220
MATCHED_KEYWORD_LIMIT = 40
MISSING_KEYWORD_LIMIT = 5


class ResumeAnalysisResult(BaseModel):
    match_score: int = Field(ge=0, le=100)
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    seniority_cues: list[str] = Field(default_factory=list)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def run_resume_keyword_analysis(
    resume_text: str,
    job_description: str,
    *,
    jd_keyword_limit: int = JD_KEYWORD_LIMIT,
    resume_keyword_limit: int = RESUME_KEYWORD_LIMIT,
    matched_limit: int = MATCHED_KEYWORD_LIMIT,
    missing_limit: int = MISSING_KEYWORD_LIMIT,
) -> ResumeAnalysisResult:
    """Score a resume against a job description by keyword overlap.

    The score is the share of all extracted job-description keywords found in
    the resume, before the matched/missing lists are truncated.
    """
    jd_keywords = list(dict.fromkeys(extract_keywords(job_description, jd_keyword_limit)))
    resume_keywords = set(extract_keywords(resume_text, resume_keyword_limit))

    matched = [keyword for keyword in jd_keywords if keyword in resume_keywords]
    missing = [keyword for keyword in jd_keywords if keyword not in resume_keywords]

    score = _round_half_up(len(matched) / max(1, len(jd_keywords)) * 100)

    return ResumeAnalysisResult(
        match_score=score,
        matched_keywords=matched[:matched_limit],
        missing_keywords=missing[:missing_limit],
        seniority_cues=detect_seniority_cues(job_description),
    )
