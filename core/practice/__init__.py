"""
Prompt practice module.

Scores user-written prompts with a fixed heuristic rule table, awards
points and badges for submissions, and proxies prompts to a hosted model.
"""

from .inference import InferenceError, query_model
from .rewards import (
    LESSON_COMPLETION_POINTS,
    PROMPT_MASTER_BADGE,
    PROMPT_MASTER_THRESHOLD,
    SUBMISSION_POINTS,
    award_submission,
    complete_lesson,
    get_rewards,
    level_for_points,
    qualifies_for_prompt_master,
)
from .rules import DEFAULT_RULES, Rule, build_rules
from .scorer import ScoreResult, max_score, score_prompt

__all__ = [
    "DEFAULT_RULES",
    "Rule",
    "build_rules",
    "ScoreResult",
    "max_score",
    "score_prompt",
    "SUBMISSION_POINTS",
    "PROMPT_MASTER_THRESHOLD",
    "PROMPT_MASTER_BADGE",
    "LESSON_COMPLETION_POINTS",
    "award_submission",
    "complete_lesson",
    "level_for_points",
    "get_rewards",
    "qualifies_for_prompt_master",
    "InferenceError",
    "query_model",
]
