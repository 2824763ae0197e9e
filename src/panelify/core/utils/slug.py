"""Section id generation from heading titles"""

import re


# ASCII word chars plus Hiragana, Katakana, and CJK ideographs survive; all else becomes '-'
_ID_UNSAFE_RE = re.compile(r'[^\w\u3040-\u309f\u30a0-\u30ff\u4e00-\u9faf]', re.ASCII)

SECTION_ID_PREFIX = "section-"


def section_id(title: str) -> str:
    """Return the stable, lowercase id for a section's full title."""
    return SECTION_ID_PREFIX + _ID_UNSAFE_RE.sub('-', title).lower()


def unique_ids(ids: list[str]) -> list[str]:
    """Suffix repeated ids with -2, -3, ... in order of appearance; first occurrence is unchanged."""
    seen: dict[str, int] = {}
    taken = set(ids)
    result = []
    for base in ids:
        count = seen.get(base, 0) + 1
        seen[base] = count
        if count == 1:
            result.append(base)
            continue
        candidate = f"{base}-{count}"
        while candidate in taken:
            count += 1
            candidate = f"{base}-{count}"
        seen[base] = count
        taken.add(candidate)
        result.append(candidate)
    return result
