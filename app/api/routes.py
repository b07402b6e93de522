"""
API Routes for the Resume Optimizer Backend.

Provides endpoints for:
- Analyzing uploaded resume files
- Enhancing resume text for a target role
- Optimizing resumes (variants, ATS score, LinkedIn copy, cover letter)
- Splitting optimized text into template sections
- Health checks
"""
from datetime import datetime
from typing import Literal, Optional
import logging

from fastapi import APIRouter, File, HTTPException, Query, Response, UploadFile

from app.models.resume import (
    AnalysisResponse,
    AnalyzeResponse,
    EnhanceRequest,
    EnhanceResponse,
    HealthResponse,
    OptimizeRequest,
    ParsedSectionsResponse,
    SectionsRequest,
)
from app.services.converter import ResumeConverter
from app.services.resume_service import get_resume_service
from app.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns the service status, version, port and whether an OpenAI key is set.
    """
    settings = get_settings()

    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.utcnow(),
        port=settings.port,
        hasApiKey=bool(settings.openai_api_key),
    )


@router.post("/resume/analyze", response_model=AnalyzeResponse, tags=["Resume"])
async def analyze_resume(resume: Optional[UploadFile] = File(None)):
    """
    Analyze an uploaded resume (multipart field ``resume``).

    Returns:
    - insights: Key skills, experience level and ATS improvements
    - extracted_text: Text to seed the resume editor with
    """
    if resume is None:
        raise HTTPException(status_code=400, detail="No file uploaded")

    settings = get_settings()
    limit = settings.max_file_size_mb * 1024 * 1024
    # Never buffer more than one byte past the limit
    content = await resume.read(limit + 1)
    if len(content) > limit:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds the {settings.max_file_size_mb}MB upload limit",
        )

    try:
        insights, extracted_text = await get_resume_service().analyze_file(content, resume.filename)
    except Exception as e:
        logger.error(f"Analyze error: {e}")
        raise HTTPException(status_code=500, detail=str(e) or "Failed to analyze resume")

    return AnalyzeResponse(insights=insights, extracted_text=extracted_text)


@router.post("/resume/enhance", response_model=EnhanceResponse, tags=["Resume"])
async def enhance_resume(request: EnhanceRequest):
    """
    Enhance resume text for a target role and industry.

    Request body (snake_case):
    - resume_text: Required resume text
    - job_role, industry, job_description: Optional targeting
    """
    if not request.resume_text:
        raise HTTPException(status_code=400, detail="Resume text required")

    try:
        enhanced_text = await get_resume_service().enhance(
            request.resume_text,
            request.job_role,
            request.industry,
            request.job_description,
        )
    except Exception as e:
        logger.error(f"Enhance error: {e}")
        raise HTTPException(status_code=500, detail=str(e) or "Failed to enhance resume")

    return EnhanceResponse(enhanced_text=enhanced_text)


@router.post("/resume/optimize", response_model=AnalysisResponse, tags=["Resume"])
async def optimize_resume(request: OptimizeRequest):
    """
    Optimize a resume for a target role.

    Resume text, job role and industry are required; the job description is
    optional. Returns the optimized resume, three variants, the ATS score,
    keyword coverage, review notes, LinkedIn copy, a cover letter and the
    template sections of the optimized resume.
    """
    missing = [
        label
        for label, value in (
            ("resumeText", request.resume_text),
            ("jobRole", request.job_role),
            ("industry", request.industry),
        )
        if not value.strip()
    ]
    if missing:
        raise HTTPException(status_code=400, detail=f"Missing required fields: {', '.join(missing)}")

    service = get_resume_service()
    analysis, elapsed = await service.optimize(
        request.resume_text,
        request.job_role,
        request.industry,
        request.job_description,
    )
    sections = service.parse_sections(analysis.optimized_resume)

    return AnalysisResponse(
        optimized_resume=analysis.optimized_resume,
        variants=list(analysis.variants),
        ats_score=analysis.ats_score,
        top_keywords=list(analysis.used_keywords),
        missing_keywords=list(analysis.missing_keywords),
        strengths=list(analysis.strengths),
        weak_areas=list(analysis.weak_areas),
        suggestions=list(analysis.suggestions),
        recruiter_note=analysis.recruiter_note,
        linkedin_headline=analysis.linkedin_headline,
        linkedin_about=analysis.linkedin_about,
        cover_letter=analysis.cover_letter,
        sections=ParsedSectionsResponse(**ResumeConverter.to_dict(sections)),
        analysis_time_ms=elapsed,
    )


@router.post("/resume/sections", response_model=ParsedSectionsResponse, tags=["Resume"])
async def resume_sections(
    request: SectionsRequest,
    output_format: Literal["json", "yaml"] = Query("json", alias="format", description="Response format"),
):
    """
    Split optimized resume text into the sections the visual template renders.

    Only Summary, Skills, Experience and Education blocks are returned. With
    ``format=yaml`` the sections are returned as a YAML document.
    """
    sections = get_resume_service().parse_sections(request.optimized_resume)

    if output_format == "yaml":
        return Response(
            content=ResumeConverter.to_yaml(sections),
            media_type="application/x-yaml",
        )

    return ParsedSectionsResponse(**ResumeConverter.to_dict(sections))
