import json
import xml.etree.ElementTree as ET
from datetime import date
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import jsonschema

from blog_studio.core.errors import DuplicateSitemapError, SitemapError, SitemapParseError
from blog_studio.core.logger import log_event
from blog_studio.models.article import SitemapFile

STORE_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "addedDate": {"type": "string"},
            "urls": {"type": "array", "items": {"type": "string"}},
        },
        "required": ["name", "addedDate", "urls"],
    },
}


def parse_sitemap(name: str, xml_text: str, added_date: Optional[str] = None) -> SitemapFile:
    """
    Collect the page URLs of a urlset or the child sitemap URLs of a
    sitemap index. Nested <loc> elements such as image:loc are skipped.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as err:
        raise SitemapParseError(name, f"'{name}' is not a valid XML file.") from err

    urls = []
    for node in root.findall(".//{*}url/{*}loc") + root.findall(".//{*}sitemap/{*}loc"):
        loc = (node.text or "").strip()
        if loc:
            urls.append(loc)

    if not urls:
        raise SitemapParseError(name, f"No URLs found in '{name}'.")

    return SitemapFile(
        name=name,
        added_date=added_date or date.today().strftime("%m/%d/%Y"),
        urls=urls,
    )


class SitemapStore:
    """
    Keyed collection of uploaded sitemaps persisted as one JSON file.
    Read once at construction and rewritten after every add or delete.
    """

    def __init__(self, path):
        self.path = Path(path)
        self._sitemaps: List[SitemapFile] = self._load()

    def _load(self) -> List[SitemapFile]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            jsonschema.validate(data, STORE_SCHEMA)
        except (ValueError, jsonschema.ValidationError) as err:
            log_event("ERROR", f"Failed to parse sitemaps from {self.path}: {err}")
            return []
        return [SitemapFile.from_dict(item) for item in data]

    def _save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = [s.to_dict() for s in self._sitemaps]
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    @property
    def sitemaps(self) -> List[SitemapFile]:
        return list(self._sitemaps)

    def names(self) -> List[str]:
        return [s.name for s in self._sitemaps]

    def __contains__(self, name: str) -> bool:
        return name in self.names()

    def __len__(self) -> int:
        return len(self._sitemaps)

    def add_files(self, files: Dict[str, str]) -> Tuple[List[SitemapFile], List[SitemapError]]:
        """
        Parse and store a batch of uploads keyed by file name. Failures are
        reported per file and never stop the rest of the batch.
        """
        added, errors = [], []
        seen = set(self.names())
        for name, xml_text in files.items():
            if name in seen:
                errors.append(DuplicateSitemapError(name))
                continue
            try:
                sitemap = parse_sitemap(name, xml_text)
            except SitemapParseError as err:
                errors.append(err)
                continue
            seen.add(name)
            added.append(sitemap)

        if added:
            self._sitemaps.extend(added)
            self._save()
            log_event("INFO", "Sitemaps added", {"names": [s.name for s in added]})
        for err in errors:
            log_event("WARNING", str(err), {"file": err.name})
        return added, errors

    def add_paths(self, paths: Iterable) -> Tuple[List[SitemapFile], List[SitemapError]]:
        files, read_errors = {}, []
        for p in map(Path, paths):
            try:
                files[p.name] = p.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as err:
                log_event("ERROR", f"Failed to read '{p.name}': {err}")
                read_errors.append(SitemapParseError(p.name, f"Failed to read '{p.name}'."))
        added, errors = self.add_files(files)
        return added, read_errors + errors

    def delete(self, name: str) -> bool:
        remaining = [s for s in self._sitemaps if s.name != name]
        if len(remaining) == len(self._sitemaps):
            return False
        self._sitemaps = remaining
        self._save()
        log_event("INFO", "Sitemap deleted", {"name": name})
        return True

    def all_urls(self) -> List[str]:
        return [url for s in self._sitemaps for url in s.urls]

    def internal_links(self) -> str:
        return "\n".join(self.all_urls())
