"""Reflow text copied out of a terminal.

Terminals hard-wrap long lines, indent continuation lines and leave shell
backslash continuations in place. ``clean`` undoes that while leaving text
with intentional structure (Markdown, fenced code, indented source, lists of
separate commands) laid out as it was.

Checks run in a fixed order and the first match wins. Several of them can be
true for the same input (continued shell lines are also indented, Markdown
often contains a fence), so the order decides the result.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import List, Sequence

from .detect import (
    contains_backslash_continuation,
    contains_fenced_code_block,
    contains_markdown,
    has_varying_indentation,
    starts_with_command_verb,
)
from .layout import (
    join_backslash_continuations,
    split_into_paragraphs,
    split_lines,
    strip_common_indent,
)


class Classification(str, Enum):
    EMPTY = "empty"
    SINGLE_LINE = "single_line"
    MARKDOWN = "markdown"
    FENCED_CODE = "fenced_code"
    BACKSLASH_CONTINUED = "backslash_continued"
    VARIABLE_INDENT_CODE = "variable_indent_code"
    MULTI_PARAGRAPH_PROSE = "multi_paragraph_prose"
    COMMAND_SEQUENCE = "command_sequence"
    SINGLE_BLOCK_PROSE = "single_block_prose"


_PRESERVED = (
    Classification.MARKDOWN,
    Classification.FENCED_CODE,
    Classification.VARIABLE_INDENT_CODE,
)

_multi_space_re = re.compile(r" {2,}")


def _stripped(lines: Sequence[str]) -> List[str]:
    return [s for s in (l.strip() for l in lines) if s]


def _join_words(lines: Sequence[str]) -> str:
    joined = " ".join(join_backslash_continuations(lines))
    return _multi_space_re.sub(" ", joined).strip()


def classify_paragraph(lines: Sequence[str]) -> Classification:
    stripped = _stripped(lines)
    if not stripped:
        return Classification.EMPTY
    if contains_backslash_continuation(lines):
        return Classification.BACKSLASH_CONTINUED
    if has_varying_indentation(lines):
        return Classification.VARIABLE_INDENT_CODE
    if len(stripped) > 1 and all(starts_with_command_verb(s) for s in stripped):
        return Classification.COMMAND_SEQUENCE
    return Classification.SINGLE_BLOCK_PROSE


def classify(text: str) -> Classification:
    """Name the reflow strategy ``clean`` applies to ``text``."""
    trimmed = text.strip()
    if not trimmed:
        return Classification.EMPTY
    if len(split_lines(trimmed)) < 2:
        return Classification.SINGLE_LINE

    lines = split_lines(text)
    if contains_markdown(lines):
        return Classification.MARKDOWN
    if contains_fenced_code_block(lines):
        return Classification.FENCED_CODE
    # Continued commands indent their tails, so this must run before the
    # indentation check.
    if contains_backslash_continuation(lines):
        return Classification.BACKSLASH_CONTINUED
    if has_varying_indentation(lines):
        return Classification.VARIABLE_INDENT_CODE
    if len(split_into_paragraphs(lines)) > 1:
        return Classification.MULTI_PARAGRAPH_PROSE
    return classify_paragraph(lines)


def clean_paragraph(lines: Sequence[str]) -> str:
    kind = classify_paragraph(lines)
    if kind is Classification.EMPTY:
        return ""
    if kind is Classification.VARIABLE_INDENT_CODE:
        return strip_common_indent(lines)
    stripped = _stripped(lines)
    if kind is Classification.COMMAND_SEQUENCE:
        return "\n".join(stripped)
    return _join_words(stripped)


def clean(text: str) -> str:
    """Return ``text`` with terminal wrapping artifacts removed.

    Never raises and never returns leading or trailing whitespace.
    """
    kind = classify(text)
    if kind is Classification.EMPTY:
        return ""
    if kind is Classification.SINGLE_LINE:
        return text.strip()

    lines = split_lines(text)
    if kind in _PRESERVED:
        return strip_common_indent(lines)
    if kind is Classification.MULTI_PARAGRAPH_PROSE:
        return "\n\n".join(clean_paragraph(p) for p in split_into_paragraphs(lines))
    return clean_paragraph(lines)


def is_already_clean(text: str) -> bool:
    return clean(text) == text
