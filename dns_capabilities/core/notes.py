"""
Documentation notes - Human-readable detail about provider capabilities

A note says whether a provider has a feature and, optionally, why
(comment) and where to read more (link).
"""

from dataclasses import dataclass
from typing import Dict

from .capabilities import Capability


@dataclass(frozen=True)
class DocumentationNote:
    """Whether a provider supports a capability, with optional explanation."""

    has_feature: bool
    comment: str = ""
    link: str = ""


class DocumentationNotes(Dict[Capability, DocumentationNote]):
    """Full set of documentation notes for a single provider."""


def supported(*comments: str) -> DocumentationNote:
    """
    Create a note for a feature the provider has.

    The first argument is the comment, the second is the link; any
    further arguments are ignored.
    """
    return _make_note(True, comments)


def unsupported(*comments: str) -> DocumentationNote:
    """
    Create a note for a feature the provider lacks.

    Same argument handling as supported().
    """
    return _make_note(False, comments)


def _make_note(has_feature: bool, comments) -> DocumentationNote:
    comment = comments[0] if len(comments) > 0 else ""
    link = comments[1] if len(comments) > 1 else ""
    return DocumentationNote(has_feature=has_feature, comment=comment, link=link)
