"""Prompt templates for Gemini API calls."""


def build_analysis_prompt(
    resume_text: str,
    job_description: str,
    local_missing: list[str] | None = None,
) -> str:
    """Single call: tailored resume, suggestions, ATS score and analysis data.

    Keywords the local extractor flagged as missing are passed along as a hint.
    """
    hint = ""
    if local_missing:
        hint = f"""
LOCAL PRE-ANALYSIS (hint only):
- Job keywords not found in the resume: {', '.join(local_missing)}
---
"""

    return f"""Analyze the following resume and tailor it specifically for the given job description.

CRITICAL INSTRUCTIONS:
1. Return ONLY a valid JSON object with the exact structure shown below
2. Do NOT include any text before or after the JSON
3. Ensure all JSON strings are properly escaped
4. Be specific and actionable in your suggestions
5. Never add experience, employers, degrees or skills the candidate does not have
{hint}
ORIGINAL RESUME:
---
{resume_text}
---

TARGET JOB DESCRIPTION:
---
{job_description}
---

Please:
1. Optimize the resume for ATS compatibility (standard headers: Summary, Experience, Education, Skills)
2. Add relevant keywords from the job description where truthful
3. Quantify achievements and strengthen action verbs
4. Align the summary with the role
5. Provide a realistic ATS score (0-100)

REQUIRED JSON RESPONSE FORMAT:
{{
  "tailoredResume": "<complete optimized resume in Markdown: '# Name', '## Section' headers, '- ' bullets>",
  "suggestions": [<specific improvements made, with explanation>],
  "atsScore": <integer 0-100>,
  "analysisData": {{
    "keywordsAdded": [<keywords from the job added to the resume>],
    "sectionsOptimized": [<section names>],
    "improvementAreas": [<remaining areas to improve>],
    "matchedRequirements": [<job requirements the resume already meets>],
    "missingElements": [<job requirements not addressed>],
    "strengthAreas": [<existing strengths that match the job>]
  }}
}}"""
