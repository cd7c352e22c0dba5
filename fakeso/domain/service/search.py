"""Question search.

A query mixes bracketed tags and free words, e.g. ``"[react] [hooks] state"``.
Tags are matched with AND semantics against a question's tag names, words
with OR semantics against its title and text. When a query has both, a
question matching either filter is kept.
"""

import re
from dataclasses import dataclass
from typing import Sequence

from fakeso.domain.model.question import AggregatedQuestion

_TAG_PATTERN = re.compile(r"\[([^\[\]]*)\]")


@dataclass(frozen=True)
class SearchQuery:
    """Tokens extracted from a raw search string."""

    tags: tuple[str, ...]
    words: tuple[str, ...]

    @classmethod
    def parse(cls, raw: str | None) -> "SearchQuery":
        raw = raw or ""
        tags = tuple(
            token.strip().lower()
            for token in _TAG_PATTERN.findall(raw)
            if token.strip()
        )
        words = tuple(word.lower() for word in _TAG_PATTERN.sub(" ", raw).split())
        return cls(tags=tags, words=words)

    @property
    def is_empty(self) -> bool:
        return not self.tags and not self.words


def matches_tags(question: AggregatedQuestion, tags: Sequence[str]) -> bool:
    """Every tag token names one of the question's tags."""
    if not question.tags:
        return False
    names = {tag.key for tag in question.tags}
    return all(tag in names for tag in tags)


def matches_words(question: AggregatedQuestion, words: Sequence[str]) -> bool:
    """Any word occurs in the title or the text."""
    title = question.title.lower()
    text = question.text.lower()
    return any(word in title or word in text for word in words)


def search_questions(
    questions: Sequence[AggregatedQuestion], query: str | None
) -> list[AggregatedQuestion]:
    """Filter questions by a search string, preserving input order.

    An empty or whitespace-only query returns every question.
    """
    parsed = SearchQuery.parse(query)
    if parsed.is_empty:
        return list(questions)

    if parsed.tags and parsed.words:
        return [
            q
            for q in questions
            if matches_tags(q, parsed.tags) or matches_words(q, parsed.words)
        ]
    if parsed.tags:
        return [q for q in questions if matches_tags(q, parsed.tags)]
    return [q for q in questions if matches_words(q, parsed.words)]
