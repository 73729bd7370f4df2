"""Job keyword derivation and skill-domain detection for rule-based scoring.

Keywords come from the job title itself plus fixed role-family
vocabularies. Skill domains (ai_ml, web_dev, devops, ...) are used to
spot resumes written for a different field than the target job.
"""

import logging

logger = logging.getLogger(__name__)

TITLE_STOPWORDS: frozenset[str] = frozenset({"the", "and", "for", "with"})
MIN_TITLE_WORD_LENGTH = 3

# Role-family vocabularies; only a prefix of each list is pulled in
GENERIC_SKILL_CATEGORIES: dict[str, tuple[str, ...]] = {
    "technical": (
        "programming", "coding", "software", "development", "engineering",
        "technical", "system", "database", "api", "cloud", "devops",
    ),
    "business": (
        "management", "strategy", "analysis", "planning", "operations",
        "process", "project", "stakeholder", "business", "finance",
    ),
    "data": (
        "data", "analytics", "sql", "python", "statistics", "machine learning",
        "ai", "visualization", "reporting",
    ),
    "design": (
        "design", "ux", "ui", "user", "interface", "visual", "figma", "sketch",
        "wireframe", "prototype",
    ),
    "communication": (
        "communication", "presentation", "writing", "collaboration",
        "teamwork", "leadership", "agile", "scrum",
    ),
}
CATEGORY_TERMS_PER_ROLE = 6
COMMUNICATION_TERMS = 3

# Title substrings that pull in a role family's vocabulary
ROLE_FAMILY_TRIGGERS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("engineer", "developer", "programmer"), "technical"),
    (("data", "analyst", "scientist"), "data"),
    (("manager", "director", "lead"), "business"),
    (("design", "ux", "ui"), "design"),
)

# Skill domains used for wrong-field detection. Order matters: the first
# domain with a keyword in the job title wins.
SKILL_DOMAINS: dict[str, tuple[str, ...]] = {
    "ai_ml": (
        "machine learning", "deep learning", "tensorflow", "pytorch", "nlp",
        "computer vision", "neural network", "ai", "ml", "data science",
        "pandas", "numpy", "scikit",
    ),
    "web_dev": (
        "react", "angular", "vue", "javascript", "typescript", "html", "css",
        "frontend", "backend", "node.js", "express",
    ),
    "mobile": ("ios", "android", "swift", "kotlin", "react native", "flutter", "mobile"),
    "bpm_workflow": (
        "appian", "bpm", "workflow", "business process", "process modeling",
        "case management", "low-code", "pega", "bizagi",
    ),
    "data_engineering": (
        "spark", "hadoop", "kafka", "airflow", "etl", "data pipeline",
        "data warehouse", "snowflake", "redshift",
    ),
    "devops": (
        "docker", "kubernetes", "terraform", "jenkins", "ci/cd", "aws", "azure",
        "gcp", "ansible",
    ),
    "finance": (
        "accounting", "financial", "audit", "tax", "investment", "banking",
        "trading", "portfolio",
    ),
    "marketing": (
        "seo", "sem", "content", "social media", "campaign", "brand",
        "marketing", "advertising",
    ),
    "sales": (
        "sales", "crm", "salesforce", "pipeline", "prospecting", "closing",
        "negotiation", "revenue",
    ),
    "hr": (
        "recruiting", "hr", "talent", "onboarding", "compensation", "benefits",
        "employee relations",
    ),
}
RESUME_DOMAIN_MIN_HITS = 3

# Checked in order when no domain keyword appears in the title
_TITLE_DOMAIN_FALLBACKS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("web_dev", ("web", "frontend", "backend", "full stack")),
    ("mobile", ("mobile", "ios", "android")),
    ("devops", ("devops", "sre", "infrastructure")),
    ("finance", ("finance", "accounting", "audit")),
    ("marketing", ("marketing", "seo", "content")),
    ("sales", ("sales", "account executive")),
    ("hr", ("hr", "recruiter", "talent")),
)


def extract_job_keywords(job_title: str, industry: str = "") -> list[str]:
    """Derive the keywords a resume is expected to contain for a job title."""
    title = job_title.lower()
    keywords = [
        word for word in title.split()
        if len(word) >= MIN_TITLE_WORD_LENGTH and word not in TITLE_STOPWORDS
    ]

    if industry:
        keywords.append(industry.lower())

    for triggers, category in ROLE_FAMILY_TRIGGERS:
        if any(trigger in title for trigger in triggers):
            keywords.extend(GENERIC_SKILL_CATEGORIES[category][:CATEGORY_TERMS_PER_ROLE])

    keywords.extend(GENERIC_SKILL_CATEGORIES["communication"][:COMMUNICATION_TERMS])

    return list(dict.fromkeys(keywords))


def detect_job_domain(job_title: str) -> str | None:
    """Return the skill domain a job title belongs to, if any."""
    title = job_title.lower()
    for domain, keywords in SKILL_DOMAINS.items():
        if any(kw in title for kw in keywords):
            return domain

    if "data" in title and any(t in title for t in ("scientist", "ml", "ai")):
        return "ai_ml"
    for domain, hints in _TITLE_DOMAIN_FALLBACKS:
        if any(hint in title for hint in hints):
            return domain
    return None


def detect_resume_domains(text: str, skills: list[str]) -> list[str]:
    """Return every domain with enough keyword hits in the resume text + skills."""
    combined = f"{text.lower()} {' '.join(s.lower() for s in skills)}"
    return [
        domain
        for domain, keywords in SKILL_DOMAINS.items()
        if sum(1 for kw in keywords if kw in combined) >= RESUME_DOMAIN_MIN_HITS
    ]


def is_domain_mismatch(job_domain: str | None, resume_domains: list[str]) -> bool:
    """True when the resume clearly belongs to other fields than the job's."""
    return bool(job_domain and resume_domains and job_domain not in resume_domains)


def match_keywords(
    keywords: list[str], text: str, skills: list[str]
) -> tuple[list[str], list[str]]:
    """Split job keywords into (matched, missing) against the resume.

    A keyword matches when it is a substring of the lowered resume text or
    of any lowered skill. Order follows ``keywords``.
    """
    text_lower = text.lower()
    skills_lower = [s.lower() for s in skills]

    matched: list[str] = []
    missing: list[str] = []
    for kw in keywords:
        if kw in text_lower or any(kw in s for s in skills_lower):
            matched.append(kw)
        else:
            missing.append(kw)
    return matched, missing
