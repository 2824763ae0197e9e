"""Line-scan grouping of a markdown document into h2 sections"""

import re

from panelify.core.models import Section
from panelify.core.utils.slug import section_id, unique_ids


H1_RE = re.compile(r'#\s+(.+)')
H2_RE = re.compile(r'##\s+(.+)')
SECTION_LEVEL = 2


def _normalize_newlines(text: str) -> str:
    return text.replace('\r\n', '\n').replace('\r', '\n')


def _full_title(h1_title: str, h2_title: str) -> str:
    """Prefix an h2 title with the nearest preceding h1 title, if any."""
    return f"{h1_title} - {h2_title}" if h1_title else h2_title


def parse_sections(text: str) -> list[Section]:
    """Split markdown text into h2 sections in document order.

    h1 headings only contribute a title prefix; lines before the first h2 are
    dropped. A document without h2 headings yields an empty list.
    """
    groups: list[tuple[str, list[str]]] = []
    h1_title = ""

    for line in _normalize_newlines(text).split('\n'):
        if m := H1_RE.fullmatch(line):
            h1_title = m.group(1)
            continue
        if m := H2_RE.fullmatch(line):
            groups.append((_full_title(h1_title, m.group(1)), []))
        elif groups:
            groups[-1][1].append(line)

    ids = unique_ids([section_id(title) for title, _ in groups])
    sections = [
        Section(id=sid, title=title, content='\n'.join(lines).strip(), level=SECTION_LEVEL)
        for sid, (title, lines) in zip(ids, groups)
    ]
    return [s for s in sections if s.level == SECTION_LEVEL]
