from blog_studio.utils.file_handler import safe_filename, save_draft
from blog_studio.utils.text_cleaner import split_topics


def test_split_topics():
    text = "  The Art of Mindful Communication\n\nHow to Build a Daily Reading Habit  \n \n"
    assert split_topics(text) == [
        "The Art of Mindful Communication",
        "How to Build a Daily Reading Habit",
    ]
    assert split_topics("") == []


def test_save_draft(tmp_path):
    path = save_draft("What's New? 2025/26", "# Body", str(tmp_path / "drafts"))

    assert path.name == "Whats New 202526.md"
    assert path.read_text(encoding="utf-8") == "# Body"


def test_safe_filename_never_empty():
    assert safe_filename("???") == "untitled"
