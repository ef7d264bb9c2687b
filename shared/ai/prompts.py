from shared.schemas.tailor import OutputFormat

SYSTEM_INSTRUCTION = (
    "You are an expert career consultant. You tailor CVs to job descriptions "
    "without inventing experience."
)

# Literal braces are doubled; only {job_description} and {cv_text} are filled in.
STRICT_JSON_PROMPT = """You are an expert career consultant. Your task is to analyze the user's master CV and the job description (JD) and generate a **tailored CV in a strict JSON format**.

**CRITICAL INSTRUCTION:**
1. The output MUST be a single, valid JSON object, and NOTHING ELSE. Do not include any conversational text, notes, or markdown fences (like ```).
2. All descriptive fields (summary, experience descriptions, education descriptions) must be formatted using **Markdown** *within* the JSON string values.

---
**JSON Schema to Follow:**
{{
  "personalInfo": {{
    "name": "Full Name",
    "title": "Tailored Job Title",
    "email": "email@example.com",
    "phone": "+X (XXX) XXX-XXXX",
    "linkedin": "linkedin.com/in/profile",
    "location": "City, Country"
  }},
  "summary": "A tailored professional summary (MUST be in Markdown format).",
  "education": [
    {{
      "degree": "Degree/Program Name",
      "university": "Institution Name",
      "years": "Start - End",
      "description": "Relevant details as a bulleted list (MUST be in Markdown format)."
    }}
  ],
  "experience": [
    {{
      "title": "Job Title",
      "company": "Company Name",
      "years": "Start - End",
      "description": "Tailored achievement bullet points (MUST be in Markdown format)."
    }}
  ],
  "skills": {{
    "Frontend": ["JavaScript (ES6+)", "React", "Next.js"],
    "Backend": ["Node.js", "Python"],
    "Tools & Dev Ops": ["Git", "Jira", "Postman"],
    "Soft Skills": ["Problem Solving", "Collaboration"]
  }},
  "languages": ["Language 1", "Language 2"]
}}
---

Job Description:
---
{job_description}
---

Original CV Content:
---
{cv_text}
---

**Generate the JSON object now.**"""

MARKDOWN_PROMPT = """You are an expert career consultant. Tailor the following CV to strictly match the provided job description.
Focus on rephrasing relevant bullet points and ensuring keywords are present, but **do not invent experience**.

Job Description:
---
{job_description}
---

Original CV:
---
{cv_text}
---

Output the tailored CV in a single, clean markdown block ready for display."""

PROMPT_TEMPLATES = {
    OutputFormat.JSON: STRICT_JSON_PROMPT,
    OutputFormat.MARKDOWN: MARKDOWN_PROMPT,
}


def build_prompt(cv_text: str, job_description: str, output_format: OutputFormat = OutputFormat.JSON) -> str:
    """Render the prompt variant for `output_format` with both inputs embedded verbatim."""
    template = PROMPT_TEMPLATES[OutputFormat(output_format)]
    return template.format(job_description=job_description, cv_text=cv_text)
