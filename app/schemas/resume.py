from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field

from app.matching.resume import ResumeAnalysisResult


class ResumeAnalyzeRequest(BaseModel):
    resume_text: str = Field(
        default="",
        max_length=50000,
        validation_alias=AliasChoices("resume_text", "resumeText"),
    )
    job_description: str = Field(
        default="",
        max_length=50000,
        validation_alias=AliasChoices("job_description", "jobDescription"),
    )


class ResumeAnalyzeTelemetry(BaseModel):
    elapsed_ms: int = Field(ge=0)
    model: str = "fallback"


class ResumeAnalyzeResponse(ResumeAnalysisResult):
    recommendations: list[str] = Field(default_factory=list, max_length=5)
    extracted_resume_preview: str = ""
    telemetry: ResumeAnalyzeTelemetry
