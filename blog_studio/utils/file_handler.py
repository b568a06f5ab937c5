from pathlib import Path


def safe_filename(title: str) -> str:
    safe_title = "".join(c for c in title if c.isalnum() or c in (' ', '_', '-')).strip()
    return safe_title or "untitled"


def save_draft(title: str, content: str, drafts_dir: str = "data/drafts", suffix: str = ".md"):
    path = Path(drafts_dir)
    path.mkdir(parents=True, exist_ok=True)
    file_path = path / f"{safe_filename(title)}{suffix}"
    with file_path.open("w", encoding="utf-8") as f:
        f.write(content)
    return file_path
