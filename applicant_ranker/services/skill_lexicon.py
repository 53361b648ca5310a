"""Fixed vocabulary of recognised skill terms.

Matching is a case-insensitive substring test, so short terms such as "AI"
or "Java" also hit inside longer words ("maintain", "JavaScript").
"""

SKILL_LEXICON: tuple[str, ...] = (
    "C#", ".NET", "ASP.NET", "SQL", "JavaScript", "React", "Angular",
    "Python", "Java", "Azure", "AWS", "Docker", "Kubernetes",
    "Machine Learning", "AI", "REST API", "Microservices",
    "Agile", "Scrum", "Git", "CI/CD", "DevOps", "TypeScript",
)


def find_skills(text: str, lexicon: tuple[str, ...] = SKILL_LEXICON) -> list[str]:
    """Return lexicon terms found in text, in lexicon order."""
    if not text:
        return []
    lowered = text.lower()
    found: list[str] = []
    seen: set[str] = set()
    for skill in lexicon:
        key = skill.lower()
        if key in seen:
            continue
        seen.add(key)
        if key in lowered:
            found.append(skill)
    return found
