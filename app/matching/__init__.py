from .keywords import (
    SENIORITY_TERMS,
    STOP_WORDS,
    detect_seniority_cues,
    extract_keywords,
    normalize_text,
    strip_html,
    tokenize,
)
from .resume import ResumeAnalysisResult, run_resume_keyword_analysis

__all__ = [
    "SENIORITY_TERMS",
    "STOP_WORDS",
    "detect_seniority_cues",
    "extract_keywords",
    "normalize_text",
    "strip_html",
    "tokenize",
    "ResumeAnalysisResult",
    "run_resume_keyword_analysis",
]
