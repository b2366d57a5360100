# core/practice/scorer.py
"""Heuristic prompt quality scoring."""

from dataclasses import dataclass

from .rules import DEFAULT_RULES, Rule


@dataclass(frozen=True)
class ScoreResult:
    """Total points plus feedback for every unsatisfied rule, in rule order."""
    total: int
    feedback: tuple[str, ...]
    max_score: int

    def to_dict(self) -> dict:
        return {
            "score": self.total,
            "maxScore": self.max_score,
            "feedback": list(self.feedback),
        }


def max_score(rules: tuple[Rule, ...] = DEFAULT_RULES) -> int:
    """Highest total reachable with the given rules."""
    return sum(rule.points for rule in rules)


def score_prompt(text: str, rules: tuple[Rule, ...] = DEFAULT_RULES) -> ScoreResult:
    """
    Score a prompt against the rule table.

    Every rule is checked once against the raw text. Satisfied rules add
    their points; unsatisfied rules contribute their feedback message.
    Empty or whitespace-only text simply fails the rules that need content.

    Args:
        text: The prompt the user wrote.
        rules: Rule table to apply. Defaults to the standard five rules.

    Returns:
        ScoreResult with the total and the ordered feedback messages.
    """
    total = 0
    feedback = []
    for rule in rules:
        if rule.predicate(text):
            total += rule.points
        else:
            feedback.append(rule.message)

    return ScoreResult(
        total=total,
        feedback=tuple(feedback),
        max_score=max_score(rules),
    )
