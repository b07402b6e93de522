"""Request and response models for the resume optimizer API."""
from datetime import datetime
from typing import List, Optional, Literal
from pydantic import BaseModel, Field


class OptimizeRequest(BaseModel):
    """Inputs for one optimize run."""
    resume_text: str = Field(..., alias="resumeText", description="Pasted or extracted resume text")
    job_role: str = Field(..., alias="jobRole", description="Target job title")
    industry: str = Field(..., description="Target industry")
    job_description: str = Field("", alias="jobDescription", description="Optional job posting text")

    class Config:
        populate_by_name = True


class ParsedSectionsResponse(BaseModel):
    """Sections of the optimized resume used by the visual template."""
    summary: Optional[str] = None
    skills: Optional[List[str]] = None
    experience: Optional[List[str]] = None
    education: Optional[List[str]] = None


class AnalysisResponse(BaseModel):
    """Complete optimize result."""
    success: bool = True
    optimized_resume: str = Field(alias="optimizedResume")
    variants: List[str] = Field(default_factory=list)
    ats_score: int = Field(..., alias="atsScore", ge=0, le=100)
    top_keywords: List[str] = Field(alias="topKeywords", default_factory=list)
    missing_keywords: List[str] = Field(alias="missingKeywords", default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    weak_areas: List[str] = Field(alias="weakAreas", default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    recruiter_note: str = Field(alias="recruiterNote")
    linkedin_headline: str = Field(alias="linkedInHeadline")
    linkedin_about: str = Field(alias="linkedInAbout")
    cover_letter: str = Field(alias="coverLetter")
    sections: ParsedSectionsResponse
    analysis_time_ms: Optional[float] = Field(None, alias="analysisTimeMs")

    class Config:
        populate_by_name = True


class SectionsRequest(BaseModel):
    """Optimized resume text to split into template sections."""
    optimized_resume: str = Field(..., alias="optimizedResume")

    class Config:
        populate_by_name = True


class EnhanceRequest(BaseModel):
    """Request body of the enhance endpoint (snake_case, as sent by the add-on)."""
    resume_text: Optional[str] = None
    job_role: Optional[str] = None
    industry: Optional[str] = None
    job_description: Optional[str] = None


class EnhanceResponse(BaseModel):
    enhanced_text: str


class AnalyzeResponse(BaseModel):
    """Result of analyzing an uploaded resume file."""
    insights: str
    extracted_text: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime
    port: int
    has_api_key: bool = Field(alias="hasApiKey")

    class Config:
        populate_by_name = True
