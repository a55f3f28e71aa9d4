"""Prompt templates for the CV / job-description comparison call."""

SYSTEM_PROMPT = "You are a helpful AI assistant specialized in CV analysis and ATS scoring."


def build_analysis_prompt(cv_text: str, job_description: str) -> str:
    """Render the comparison prompt. Inputs are embedded untruncated."""
    return f"""
Compare the following CV and job description. Identify missing or weak skills and give an ATS score (0-100). Format the output as JSON with fields: skillGaps[], atsScore.

CV:
{cv_text}

Job Description:
{job_description}
"""
