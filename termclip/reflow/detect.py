from __future__ import annotations

import re
from typing import FrozenSet, Sequence

from .layout import is_blank, is_continued, leading_whitespace_count


# Tunable heuristic thresholds.
MARKDOWN_MIN_INDICATORS = 2
INDENT_VARIANCE_THRESHOLD = 2

FENCE = "```"

COMMAND_VERBS: FrozenSet[str] = frozenset(
    {
        # version control, containers, orchestration
        "git", "docker", "kubectl",
        # remote and network
        "ssh", "scp", "curl", "wget",
        # package managers and build tools
        "npm", "yarn", "pnpm", "pip", "brew", "make", "cargo",
        "apt", "yum", "dnf", "pacman",
        # language runtimes
        "go", "python", "python3", "node", "ruby", "swift", "rustc",
        # shell built-ins and coreutils
        "cd", "ls", "cat", "echo", "mkdir", "rm", "cp", "mv", "chmod", "chown",
        "grep", "find", "sed", "awk", "export", "source", "sudo",
        # archives
        "tar", "unzip", "zip",
    }
)

_heading_re = re.compile(r"^#{1,6} ")
_list_markers = ("- ", "* ", "> ")


def _is_table_row(line: str) -> bool:
    return len(line) >= 2 and line.startswith("|") and line.endswith("|") and "|" in line[1:-1]


def is_markdown_indicator(line: str) -> bool:
    s = line.strip()
    return bool(
        _heading_re.match(s)
        or s.startswith(_list_markers)
        or _is_table_row(s)
        or s.startswith(FENCE)
    )


def contains_markdown(lines: Sequence[str]) -> bool:
    hits = 0
    for line in lines:
        if is_markdown_indicator(line):
            hits += 1
            if hits >= MARKDOWN_MIN_INDICATORS:
                return True
    return False


def contains_fenced_code_block(lines: Sequence[str]) -> bool:
    return any(line.strip().startswith(FENCE) for line in lines)


def contains_backslash_continuation(lines: Sequence[str]) -> bool:
    return any(is_continued(line.strip()) for line in lines)


def has_varying_indentation(lines: Sequence[str]) -> bool:
    indents = [leading_whitespace_count(l) for l in lines if not is_blank(l)]
    if len(indents) < 2:
        return False
    return max(indents) - min(indents) >= INDENT_VARIANCE_THRESHOLD


def starts_with_command_verb(line: str) -> bool:
    parts = line.split(None, 1)
    return bool(parts) and parts[0] in COMMAND_VERBS
