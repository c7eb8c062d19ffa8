"""
Markup shielding.

Tag-like spans (first '<' to the next '>') are lifted out of the text so
substitution only ever sees the plain runs between them, then put back
verbatim. This is not an HTML parser: a '<' with no closing '>' is left
in place as ordinary text.
"""
import re
from dataclasses import dataclass, field
from typing import Callable, List

TAG_PATTERN = re.compile(r'<[^>]*>')


@dataclass(frozen=True)
class ShieldedSpan:
    """A markup span and its position in the original text."""

    offset: int
    text: str

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def end(self) -> int:
        return self.offset + len(self.text)


@dataclass
class ShieldedText:
    """
    Text split around its markup spans.

    Attributes:
        chunks: Plain-text runs; chunks[i] precedes spans[i], and the last
            chunk follows the last span (always len(spans) + 1 chunks)
        spans: Markup spans in order of occurrence
    """

    chunks: List[str]
    spans: List[ShieldedSpan] = field(default_factory=list)

    def map_chunks(self, func: Callable[[str], str]) -> "ShieldedText":
        """Apply func to every plain-text run, leaving spans untouched."""
        return ShieldedText(chunks=[func(chunk) for chunk in self.chunks], spans=list(self.spans))

    @property
    def working_text(self) -> str:
        """Plain runs joined together, with the markup removed."""
        return ''.join(self.chunks)


def shield(text: str) -> ShieldedText:
    """Split text into plain runs and markup spans, left to right."""
    chunks: List[str] = []
    spans: List[ShieldedSpan] = []
    position = 0

    for match in TAG_PATTERN.finditer(text):
        chunks.append(text[position:match.start()])
        spans.append(ShieldedSpan(offset=match.start(), text=match.group()))
        position = match.end()

    chunks.append(text[position:])
    return ShieldedText(chunks=chunks, spans=spans)


def unshield(shielded: ShieldedText) -> str:
    """Reassemble the text, reinserting every span in its original order."""
    parts: List[str] = []
    for chunk, span in zip(shielded.chunks, shielded.spans):
        parts.append(chunk)
        parts.append(span.text)
    parts.append(shielded.chunks[-1])
    return ''.join(parts)
