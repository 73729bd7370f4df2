"""Layout recovery for text pulled out of PDF/DOCX files.

PDF extraction often joins a whole page into one long line. Section and
entry detection downstream works line by line, so line breaks are put
back before known headings, bullet glyphs and date-led lines.
"""

import re

# Multi-word headings come before their single-word tails so that
# "Work Experience" is split off as one unit rather than as "Experience".
SECTION_HEADINGS: tuple[str, ...] = (
    "Summary", "Objective", "Profile", "About Me",
    "Education", "Academic",
    "Technical Skills", "Skills", "Core Competencies", "Technologies",
    "Professional Experience", "Work Experience", "Experience", "Work History", "Employment",
    "Personal Projects", "Projects",
    "Certifications", "Licenses",
    "Achievements", "Awards", "Honors",
    "References",
)

_HEADING_ALTERNATION = "|".join(sorted(SECTION_HEADINGS, key=len, reverse=True))

# Heading at the very start, or preceded by whitespace that does not itself
# follow a newline, and followed by a newline, a capital letter, a
# bullet/dash, an MM/YYYY date or end of text. The capital-letter check
# stays case-sensitive. Dates are included because the date rule below
# would otherwise leave the heading to be split on a second pass.
_HEADING_RE = re.compile(
    rf"(?:^|(?<!\n)\s+)((?:{_HEADING_ALTERNATION})\b:?)\s*"
    r"(?=\n|(?-i:[A-Z])|[•·▪■\-–—]|\d{1,2}/\d{4}|$)",
    re.IGNORECASE,
)

_HSPACE_RUN_RE = re.compile(r"[ \t]{2,}")
_BULLET_RE = re.compile(r" (?=[•·▪■] )")
_DATE_LED_RE = re.compile(r"\s+(\d{1,2}/\d{4}\s*[-–—])")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize(raw_text: str) -> str:
    """Re-insert structural line breaks into extracted resume text.

    Only whitespace is removed or replaced; text that already has
    sensible line breaks passes through (almost) unchanged. A heading word
    used in running prose ("... Experience Leading teams") can still be
    split onto its own line.
    """
    text = _HSPACE_RUN_RE.sub(" ", raw_text)
    text = _HEADING_RE.sub(lambda m: f"\n{m.group(1)}\n", text)
    text = _BULLET_RE.sub("\n", text)
    text = _DATE_LED_RE.sub(r"\n\1", text)
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()
