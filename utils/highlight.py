import html
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

Span = Tuple[int, int]


@dataclass(frozen=True)
class Segment:
    text: str
    highlighted: bool
    start: int


def match_spans(matches: Iterable[int], pattern_length: int) -> List[Span]:
    """Half-open ``(start, end)`` spans, latest start first."""
    return sorted(((s, s + pattern_length) for s in matches), reverse=True)


def segment_text(text: str, spans: Iterable[Span]) -> List[Segment]:
    """Split ``text`` into plain and highlighted runs; overlapping spans merge."""
    if not text:
        return []
    marks = [0] * (len(text) + 1)
    for s, e in spans:
        s, e = max(0, s), min(len(text), e)
        if s < e:
            marks[s] += 1
            marks[e] -= 1
    out: List[Segment] = []
    active = 0
    buf_start = 0
    for i in range(len(text)):
        was_active = active > 0
        active += marks[i]
        if i > buf_start and (active > 0) != was_active:
            out.append(Segment(text[buf_start:i], was_active, buf_start))
            buf_start = i
    out.append(Segment(text[buf_start:], active > 0, buf_start))
    return out


def highlight_matches_html(text: str, spans: Sequence[Span], active: Optional[int] = None) -> str:
    if not text:
        return "<em>No text</em>"
    out = []
    for seg in segment_text(text, spans):
        chunk = html.escape(seg.text)
        if not seg.highlighted:
            out.append(chunk)
            continue
        cls = ""
        if active is not None and seg.start <= active < seg.start + len(seg.text):
            cls = " class='active'"
        out.append(f"<mark{cls}>{chunk}</mark>")
    return "<div style='white-space:pre-wrap;font-family:monospace'>" + "".join(out) + "</div>"
