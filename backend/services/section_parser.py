"""Resume section segmentation and contact extraction."""

import re

# Section header patterns and their canonical names. A heading only counts
# when it sits alone on its line (an optional trailing colon is allowed).
SECTION_PATTERNS: dict[str, list[str]] = {
    "summary": [
        r"(?:professional\s+|executive\s+|career\s+)?summary",
        r"(?:career\s+)?objective",
        r"profile",
        r"about\s+me",
    ],
    "education": [
        r"education(?:al\s+background)?",
        r"academic(?:\s+background)?",
        r"qualifications?",
    ],
    "skills": [
        r"(?:technical\s+|core\s+|key\s+)?skills",
        r"core\s+competencies",
        r"technologies",
    ],
    "experience": [
        r"(?:professional\s+|work\s+)?experience",
        r"work\s+history",
        r"employment(?:\s+history)?",
    ],
    "projects": [
        r"(?:personal\s+|side\s+|key\s+)?projects",
    ],
    "certifications": [
        r"certifications?",
        r"licen[sc]es?(?:\s*(?:&|and)\s*certifications?)?",
    ],
    "achievements": [
        r"achievements?",
        r"awards?",
        r"honou?rs?",
    ],
}

# Compile all patterns into a single regex per section
_COMPILED: dict[str, re.Pattern] = {}
for section, patterns in SECTION_PATTERNS.items():
    combined = "|".join(patterns)
    _COMPILED[section] = re.compile(
        rf"(?:^|\n)\s*(?:{combined})[ \t]*:?[ \t]*(?:\n|$)", re.IGNORECASE
    )

# Bullet glyphs a line may start with (dashes count when followed by a space)
BULLET_LINE_RE = re.compile(r"^[•·▪■\-–—]\s")
BULLET_PREFIX_RE = re.compile(r"^[•·▪■\-–—]\s*")

# Contact info patterns
EMAIL_RE = re.compile(r"[\w.%+-]+@[\w.-]+\.[a-zA-Z]{2,}")
PHONE_RE = re.compile(r"(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
LINKEDIN_RE = re.compile(
    r"(?:https?://)?(?:www\.)?linkedin\.com/in/[\w-]+", re.IGNORECASE
)
# Explicit URLs, or bare domains on common personal-site TLDs. Never starts
# inside a word or an email address.
WEBSITE_RE = re.compile(
    r"(?<![\w.@/])(?:"
    r"(?:https?://|www\.)[\w.-]+\.[a-z]{2,}(?:/[\w./%-]*)?"
    r"|[\w-]+(?:\.[\w-]+)*\.(?:com|io|dev|me|org|net|ai|app|co|tech|site|page|xyz)\b(?:/[\w./%-]*)?"
    r")(?![\w@])",
    re.IGNORECASE,
)
_WEBSITE_EXCLUDE = ("linkedin", "gmail")

_PHONE_LINE_RE = re.compile(r"^\+?\d[\d\s()\-]{6,}")

# Date ranges: "01/2020 - 02/2021", "Jan 2019 - Present", "2020 – 2023", "May - Aug 2021"
_MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|"
    r"Jul(?:y)?|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
_DATE_TOKEN = rf"(?:\d{{1,2}}/\d{{4}}|{_MONTHS}\b\.?(?:\s*\d{{4}})?|\d{{4}})"
DATE_RANGE_RE = re.compile(
    rf"\b({_DATE_TOKEN})\s*[-–—]+\s*({_DATE_TOKEN}|present|current)\b",
    re.IGNORECASE,
)

# Trailing year range on an education line: "2016 - 2020", "2019 – Present"
YEAR_RANGE_RE = re.compile(
    r"(\d{4})\s*[-–—]\s*(\d{4}|present|current)\b", re.IGNORECASE
)

# Degree keywords. Short forms need a word boundary on both sides so that
# "bs" inside "jobs" or "ma" inside "managed" never count.
DEGREE_PATTERNS: list[str] = [
    r"ph\.?\s?d", r"doctorate",
    r"m\.?s\.?", r"m\.?sc\.?", r"m\.?a\.?", r"m\.?tech", r"mba", r"master(?:'?s)?",
    r"b\.?s\.?", r"b\.?sc\.?", r"b\.?a\.?", r"b\.e\.?", r"b\.?tech", r"b\.?eng",
    r"bachelor(?:'?s)?",
    r"associate(?:'?s)?", r"diploma", r"degree",
]
DEGREE_RE = re.compile(
    rf"\b(?:{'|'.join(DEGREE_PATTERNS)})(?![a-z])", re.IGNORECASE
)

NAME_SCAN_LINES = 8
NAME_MAX_LENGTH = 60


def parse_sections(text: str) -> dict[str, str]:
    """Split resume text into named sections.

    Returns a dict mapping section name -> section text content.
    Text before the first recognised heading goes into 'header'. Only the
    first occurrence of each heading is a boundary; a repeated heading
    stays inside the earlier section's body.
    """
    positions: list[tuple[int, int, str]] = []
    for section_name, pattern in _COMPILED.items():
        match = pattern.search(text)
        if match:
            positions.append((match.start(), match.end(), section_name))

    positions.sort()

    if not positions:
        return {"header": text.strip()}

    sections: dict[str, str] = {"header": text[: positions[0][0]].strip()}
    for i, (_, body_start, section_name) in enumerate(positions):
        body_end = positions[i + 1][0] if i + 1 < len(positions) else len(text)
        sections[section_name] = text[body_start:body_end].strip()

    return sections


def extract_contact_info(text: str) -> dict[str, str | None]:
    """Extract contact information from resume text.

    Each field is an independent search over the whole text; the first
    match wins.
    """
    email_match = EMAIL_RE.search(text)
    phone_match = PHONE_RE.search(text)
    linkedin_match = LINKEDIN_RE.search(text)

    website = None
    for match in WEBSITE_RE.finditer(text):
        candidate = match.group()
        if not any(word in candidate.lower() for word in _WEBSITE_EXCLUDE):
            website = candidate
            break

    return {
        "email": email_match.group() if email_match else None,
        "phone": phone_match.group().strip() if phone_match else None,
        "linkedin": linkedin_match.group() if linkedin_match else None,
        "website": website,
    }


def _looks_like_name(line: str) -> bool:
    lowered = line.lower()
    return (
        1 < len(line) < NAME_MAX_LENGTH
        and re.search(r"[A-Za-z]", line) is not None
        and "@" not in line
        and "http" not in lowered
        and "linkedin" not in lowered
        and not _PHONE_LINE_RE.match(line)
        and not BULLET_PREFIX_RE.match(line)
    )


def detect_name(header: str) -> str | None:
    """Pick the candidate's name from the first lines of the header."""
    lines = [line.strip() for line in header.split("\n") if line.strip()]
    for line in lines[:NAME_SCAN_LINES]:
        if _looks_like_name(line):
            return line
    return None


def is_bullet_line(line: str) -> bool:
    return bool(BULLET_LINE_RE.match(line))


def strip_bullet(line: str) -> str:
    return BULLET_PREFIX_RE.sub("", line.strip()).strip()
