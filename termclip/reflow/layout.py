from __future__ import annotations

import re
from typing import List, Sequence


CONTINUATION_SUFFIX = " \\"

_newline_re = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    # form feeds and other separators stay inside a line
    return _newline_re.split(text)


def is_blank(line: str) -> bool:
    return not line.strip()


def leading_whitespace_count(line: str) -> int:
    count = 0
    for ch in line:
        if ch not in (" ", "\t"):
            break
        count += 1
    return count


def is_continued(line: str) -> bool:
    return line.endswith(CONTINUATION_SUFFIX) or line == "\\"


def join_backslash_continuations(lines: Sequence[str]) -> List[str]:
    """Merge backslash-continued lines into single logical lines.

    Lines are expected to be stripped already. A trailing continuation on the
    last line has nothing to join with and is kept as-is.
    """
    out: List[str] = []
    current = ""
    for line in lines:
        if is_continued(current):
            head = current[:-1].rstrip()
            tail = line.strip()
            current = f"{head} {tail}" if head else tail
        elif current:
            out.append(current)
            current = line
        else:
            current = line
    if current:
        out.append(current)
    return out


def strip_common_indent(lines: Sequence[str]) -> str:
    non_blank = [l for l in lines if not is_blank(l)]
    if not non_blank:
        return ""
    indent = min(leading_whitespace_count(l) for l in non_blank)
    out = []
    for line in lines:
        if is_blank(line):
            out.append("")
            continue
        out.append(line[min(indent, len(line)):])
    return "\n".join(out).strip()


def split_into_paragraphs(lines: Sequence[str]) -> List[List[str]]:
    paragraphs: List[List[str]] = []
    buf: List[str] = []
    for line in lines:
        if is_blank(line):
            if buf:
                paragraphs.append(buf)
                buf = []
            continue
        buf.append(line)
    if buf:
        paragraphs.append(buf)
    return paragraphs
