"""Builds the analysis instruction sent to the model."""

from __future__ import annotations

JSON_ONLY_PREAMBLE = """\
You are an API. Return ONLY valid JSON.
No markdown. No backticks. No explanation."""

RESPONSE_SCHEMA = """\
{
  "atsScore": number,
  "strengths": ["..."],
  "weakAreas": ["..."],
  "missingSkills": ["..."],
  "projectGaps": ["..."],
  "quickFixes": ["..."],
  "oneLineVerdict": "..."
}"""


def build_prompt(resume_text: str, target_role: str) -> str:
    """Return the analysis prompt for a resume and target role.

    The resume text is embedded verbatim.
    """
    return f"""{JSON_ONLY_PREAMBLE}

Analyze this resume for the role "{target_role}".

Return a single JSON object exactly like:
{RESPONSE_SCHEMA}

Field rules:
- atsScore: a number from 0 to 100 estimating how well the resume passes an ATS screen for the role
- strengths, weakAreas, missingSkills, projectGaps, quickFixes: arrays of short strings
- oneLineVerdict: one sentence

Respond with the JSON object only. Do not wrap it in code fences and do not add any text before or after it.

Resume:
\"\"\"
{resume_text}
\"\"\"
"""
