# SPDX-License-Identifier: Apache-2.0
"""Prompt and parsing helpers for AI-generated country facts.

The provider returns free text. ``parse_facts`` is a best-effort heuristic:
it splits on numbered-list markers, line-leading dashes or bullets and plain
newlines. It does not guarantee any particular number of facts, and a
number followed by a period inside a sentence (``8.5 million``) will split
that sentence.
"""

from __future__ import annotations

import re
from typing import Any

from globeweather.errors import MalformedResponse

FACT_COUNT = 5

FACTS_FAILURE_MESSAGE = "Unable to load facts. Please try again later."

# Mirrored by the browser bundle; keep both in sync.
FACT_SPLIT_PATTERN = r"\d+\.|\n-|\n•|\n"

_FACT_SPLIT = re.compile(FACT_SPLIT_PATTERN)


def build_prompt(country: str) -> str:
    return (
        f"Generate {FACT_COUNT} facts about this country:{country}, "
        "Give concise answer only the facts no preface phrases"
    )


def build_messages(country: str) -> list[dict[str, str]]:
    return [{"role": "user", "content": build_prompt(country)}]


def parse_facts(text: str) -> list[str]:
    """Split a completion into trimmed, non-empty fact strings."""

    return [part.strip() for part in _FACT_SPLIT.split(text) if part.strip()]


def extract_completion(payload: Any) -> str:
    """Return ``choices[0].message.content`` or raise ``MalformedResponse``."""

    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as exc:
        raise MalformedResponse("Completion payload has no message content") from exc
    if not isinstance(content, str):
        raise MalformedResponse("Completion content is not text")
    return content
