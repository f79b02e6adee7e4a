"""Constants for TODO scanning, classification and linking.

Centralised here so the scanner, classifier and link codec agree on the same
keyword sets and token format.
"""

import re

# Default marker keywords, in configuration order
DEFAULT_TODO_PATTERNS: tuple[str, ...] = ("TODO", "FIXME", "HACK", "XXX", "BUG")

# Characters that make a match part of a larger identifier
WORD_CHAR_CLASS = r"[A-Za-z0-9_]"

# ============ PRIORITY RULES ============

# Keywords that are always high priority
HIGH_PRIORITY_PATTERNS = frozenset({"BUG", "FIXME"})

# Free-text hints (compared upper-cased) that force high priority
HIGH_PRIORITY_MARKERS = ("URGENT", "CRITICAL", "ASAP")

# Literal (case-insensitive by nature) high priority hint
HIGH_PRIORITY_LITERAL = "!!!"

# Keywords that default to low priority
LOW_PRIORITY_PATTERNS = frozenset({"XXX"})

# Free-text hints (compared upper-cased) that lower priority
LOW_PRIORITY_MARKERS = ("MINOR", "NICE TO HAVE", "OPTIONAL")

# ============ CONTEXT SNIPPETS ============

DEFAULT_CONTEXT_RADIUS = 2
CONTEXT_TARGET_PREFIX = ">>> "
CONTEXT_LINE_PREFIX = " " * len(CONTEXT_TARGET_PREFIX)

# ============ LINK TOKENS ============

# [KEY-NUMBER], KEY uppercase letters, NUMBER decimal digits. Persisted in
# source files, so this format must stay stable.
LINK_TOKEN_RE = re.compile(r"\[([A-Z]+-\d+)\]")
ISSUE_ID_RE = re.compile(r"^[A-Z]+-\d+$")
