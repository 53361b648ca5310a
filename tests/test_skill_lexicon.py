from applicant_ranker.services.skill_lexicon import SKILL_LEXICON, find_skills


def test_find_skills_case_insensitive():
    skills = find_skills("experience with PYTHON, docker and azure")
    assert skills == ["Python", "Azure", "Docker"]


def test_find_skills_follows_lexicon_order():
    skills = find_skills("TypeScript, Git, C#")
    assert skills == [s for s in SKILL_LEXICON if s in {"TypeScript", "Git", "C#"}]


def test_find_skills_is_substring_match():
    # "Java" is found inside "JavaScript" by design of the lexical matcher
    skills = find_skills("Frontend work in JavaScript")
    assert "JavaScript" in skills
    assert "Java" in skills


def test_find_skills_multiword_and_symbols():
    skills = find_skills("Built a REST API with CI/CD on .NET")
    assert "REST API" in skills
    assert "CI/CD" in skills
    assert ".NET" in skills


def test_find_skills_empty_text():
    assert find_skills("") == []


def test_find_skills_no_duplicates():
    skills = find_skills("sql SQL Sql")
    assert skills.count("SQL") == 1


def test_find_skills_custom_lexicon():
    assert find_skills("Go and Rust", lexicon=("Rust", "Go")) == ["Rust", "Go"]
