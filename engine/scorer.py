"""Relevance scoring for agents against free-text queries."""

import logging
from enum import Enum
from typing import Callable, Iterable, Mapping, NamedTuple
from schemas.agent import Agent

logger = logging.getLogger(__name__)

# Query tokens shorter than this are ignored for word-level matching
MIN_WORD_LENGTH = 3


class MatchMode(str, Enum):
    """How a rule compares the query with each extracted text."""
    QUERY_IN_TEXT = "query_in_text"  # text contains the full query
    EITHER_CONTAINS = "either_contains"  # query contains text, or text contains query
    WORD_IN_TEXT = "word_in_text"  # counted once per (text, query word) pair


class ScoringRule(NamedTuple):
    """One row of the weight table."""
    name: str
    extract: Callable[[Agent, Mapping[str, str]], Iterable[str]]
    mode: MatchMode
    weight: int


def _category_label(agent: Agent, category_labels: Mapping[str, str]) -> tuple[str, ...]:
    return (category_labels.get(agent.primary_category, ""),)


SCORING_RULES: tuple[ScoringRule, ...] = (
    ScoringRule("name", lambda agent, labels: (agent.name,), MatchMode.QUERY_IN_TEXT, 50),
    ScoringRule("tagline", lambda agent, labels: (agent.tagline,), MatchMode.QUERY_IN_TEXT, 30),
    ScoringRule("tag", lambda agent, labels: agent.tags, MatchMode.EITHER_CONTAINS, 20),
    ScoringRule("tag_word", lambda agent, labels: agent.tags, MatchMode.WORD_IN_TEXT, 10),
    ScoringRule("capability", lambda agent, labels: agent.capabilities, MatchMode.QUERY_IN_TEXT, 15),
    ScoringRule("capability_word", lambda agent, labels: agent.capabilities, MatchMode.WORD_IN_TEXT, 5),
    ScoringRule("best_for", lambda agent, labels: agent.best_for, MatchMode.QUERY_IN_TEXT, 25),
    ScoringRule("best_for_word", lambda agent, labels: agent.best_for, MatchMode.WORD_IN_TEXT, 8),
    ScoringRule("not_ideal_for_word", lambda agent, labels: agent.not_ideal_for, MatchMode.WORD_IN_TEXT, -5),
    ScoringRule("category_label_word", _category_label, MatchMode.WORD_IN_TEXT, 10),
)


def normalize_query(query: str) -> str:
    return query.lower()


def query_words(normalized_query: str) -> list[str]:
    """Whitespace tokens long enough for word-level matching."""
    return [word for word in normalized_query.split() if len(word) >= MIN_WORD_LENGTH]


def count_matches(mode: MatchMode, text: str, query: str, words: list[str]) -> int:
    """
    Number of times a rule fires for a single extracted text.

    Args:
        mode: Rule match mode
        text: Lowercased field text
        query: Normalized query
        words: Query words

    Returns:
        Match count (0 or 1 for whole-query modes, per-word count otherwise)
    """
    if mode == MatchMode.QUERY_IN_TEXT:
        return 1 if query in text else 0
    if mode == MatchMode.EITHER_CONTAINS:
        return 1 if (text in query or query in text) else 0
    return sum(1 for word in words if word in text)


class AgentScorer:
    """
    Additive, explainable relevance scorer.

    Every rule in the weight table is applied independently and every match
    contributes; the score may be zero or negative.
    """

    def __init__(
        self,
        category_labels: Mapping[str, str],
        rules: tuple[ScoringRule, ...] = SCORING_RULES,
    ):
        """
        Initialize scorer.

        Args:
            category_labels: Category key to display label mapping
            rules: Weight table to fold over each agent
        """
        self.category_labels = category_labels
        self.rules = rules

    def explain(self, agent: Agent, query: str) -> dict[str, int]:
        """
        Per-rule score contributions for an agent.

        Args:
            agent: Agent to score
            query: Raw query text

        Returns:
            Mapping of rule name to its contribution (rules that did not fire are omitted)
        """
        normalized = normalize_query(query)
        words = query_words(normalized)

        contributions: dict[str, int] = {}
        for rule in self.rules:
            hits = 0
            for text in rule.extract(agent, self.category_labels):
                hits += count_matches(rule.mode, text.lower(), normalized, words)
            if hits:
                contributions[rule.name] = contributions.get(rule.name, 0) + hits * rule.weight

        return contributions

    def score(self, agent: Agent, query: str) -> int:
        """Total relevance score of an agent for a query."""
        contributions = self.explain(agent, query)
        total = sum(contributions.values())
        if contributions:
            logger.debug(f"Score {agent.slug} for {query!r}: {total} {contributions}")
        return total
