"""
Rule table for the prompt quality scorer.

Each rule is a named predicate with a point value and the feedback shown
when the prompt does not satisfy it. Rules are evaluated independently;
declaration order only fixes the order of the feedback list.
"""

import re
from dataclasses import dataclass, replace
from typing import Callable

# Any ASCII letter counts towards clarity
_LETTER = re.compile(r"[a-zA-Z]")

SPECIFIC_WORDS = ("specific", "detail", "precise", "for example")
CONTEXT_WORDS = ("context", "background", "purpose", "audience")

DEFAULT_POINTS = 2


@dataclass(frozen=True)
class Rule:
    """A single scoring rule."""
    name: str
    predicate: Callable[[str], bool]
    message: str  # Shown when the predicate is NOT satisfied
    points: int = DEFAULT_POINTS


def _contains_any(text: str, words: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(word in lowered for word in words)


def is_clear(text: str) -> bool:
    # Length is in code points, so an emoji counts as one character
    return len(text) > 10 and _LETTER.search(text) is not None


def is_specific(text: str) -> bool:
    return _contains_any(text, SPECIFIC_WORDS)


def has_structure(text: str) -> bool:
    return "." in text or "," in text


def has_context(text: str) -> bool:
    return _contains_any(text, CONTEXT_WORDS)


def has_examples(text: str) -> bool:
    return "example" in text.lower()


DEFAULT_RULES: tuple[Rule, ...] = (
    Rule(
        name="clarity",
        predicate=is_clear,
        message="Prompt is too short or unclear. Try to be more descriptive.",
    ),
    Rule(
        name="specificity",
        predicate=is_specific,
        message="Add specific details or requirements to make the prompt more targeted.",
    ),
    Rule(
        name="structure",
        predicate=has_structure,
        message="Use punctuation to structure your prompt clearly.",
    ),
    Rule(
        name="context",
        predicate=has_context,
        message="Provide context, such as the purpose or intended audience.",
    ),
    Rule(
        name="exemplification",
        predicate=has_examples,
        message="Including examples can improve the response quality.",
    ),
)


def build_rules(weights: dict[str, int] | None = None) -> tuple[Rule, ...]:
    """
    Return the default rule table with per-rule weight overrides.

    Args:
        weights: Mapping of rule name -> points. Rules not named keep
                 their default weight.

    Returns:
        A new rule tuple in the default declaration order.

    Raises:
        ValueError: If a weight names a rule that doesn't exist.
    """
    if not weights:
        return DEFAULT_RULES

    known = {rule.name for rule in DEFAULT_RULES}
    unknown = sorted(set(weights) - known)
    if unknown:
        raise ValueError(f"Unknown scoring rule(s): {', '.join(unknown)}")

    return tuple(
        replace(rule, points=weights[rule.name]) if rule.name in weights else rule
        for rule in DEFAULT_RULES
    )
