"""Services for the Resume Optimizer Backend."""
from app.services.optimizer import Analysis, ResumeOptimizer, optimize
from app.services.resume_service import ResumeService
from app.services.converter import ParsedSections, ResumeConverter

__all__ = ["Analysis", "ResumeOptimizer", "optimize", "ResumeService", "ParsedSections", "ResumeConverter"]
