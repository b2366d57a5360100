"""
Points, badges and lesson progress.

Every scored practice submission from a signed-in user earns points. A high
enough score also earns the "Prompt Master" badge, once per user. Completing
a lesson earns points the first time only.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncConnection

from core.tables import badges, user_points, user_progress

logger = logging.getLogger(__name__)

SUBMISSION_POINTS = 5
PROMPT_MASTER_THRESHOLD = 8
PROMPT_MASTER_BADGE = "Prompt Master"
LESSON_COMPLETION_POINTS = 10
POINTS_PER_LEVEL = 100


def qualifies_for_prompt_master(score: int) -> bool:
    return score >= PROMPT_MASTER_THRESHOLD


async def add_points(conn: AsyncConnection, user_id: str, amount: int) -> int:
    """
    Add points to a user's total, creating the row on first award.

    The increment happens in a single upsert so concurrent submissions
    can't lose points.

    Returns:
        The user's new point total.
    """
    now = datetime.now(timezone.utc)
    stmt = insert(user_points).values(user_id=user_id, points=amount, updated_at=now)
    stmt = stmt.on_conflict_do_update(
        index_elements=[user_points.c.user_id],
        set_={"points": user_points.c.points + amount, "updated_at": now},
    ).returning(user_points.c.points)

    result = await conn.execute(stmt)
    return result.scalar_one()


async def award_badge(conn: AsyncConnection, user_id: str, badge_name: str) -> bool:
    """
    Give a badge to a user unless they already have it.

    Returns:
        True if the badge was newly awarded, False if they already had it.
    """
    stmt = (
        insert(badges)
        .values(
            user_id=user_id,
            badge_name=badge_name,
            awarded_at=datetime.now(timezone.utc),
        )
        .on_conflict_do_nothing(index_elements=[badges.c.user_id, badges.c.badge_name])
        .returning(badges.c.badge_id)
    )
    result = await conn.execute(stmt)
    return result.first() is not None


async def award_submission(conn: AsyncConnection, user_id: str, score: int) -> dict:
    """
    Record the rewards for one scored practice submission.

    Args:
        conn: Connection inside the caller's transaction
        user_id: Identity provider subject of the submitting user
        score: Total from score_prompt()

    Returns:
        Dict with keys: points (new total), pointsAwarded, badgeAwarded
    """
    points = await add_points(conn, user_id, SUBMISSION_POINTS)

    badge_awarded = False
    if qualifies_for_prompt_master(score):
        badge_awarded = await award_badge(conn, user_id, PROMPT_MASTER_BADGE)
        if badge_awarded:
            logger.info("Awarded %s badge to user %s", PROMPT_MASTER_BADGE, user_id)

    logger.info(
        "Practice submission by user %s: score=%d points=%d", user_id, score, points
    )

    return {
        "points": points,
        "pointsAwarded": SUBMISSION_POINTS,
        "badgeAwarded": badge_awarded,
    }


async def get_points(conn: AsyncConnection, user_id: str) -> int:
    """A user's point total, 0 if they never earned any."""
    result = await conn.execute(
        select(user_points.c.points).where(user_points.c.user_id == user_id)
    )
    return result.scalar_one_or_none() or 0


def level_for_points(points: int) -> int:
    """Level 1 starts at 0 points; every POINTS_PER_LEVEL points is a level."""
    return points // POINTS_PER_LEVEL + 1


async def complete_lesson(conn: AsyncConnection, user_id: str, lesson_id: str) -> dict:
    """
    Mark a lesson as completed for a user.

    Completing the same lesson again is a no-op: no new row, no points.

    Args:
        conn: Connection inside the caller's transaction
        user_id: Identity provider subject of the user
        lesson_id: Lesson identifier

    Returns:
        Dict with keys: alreadyCompleted, pointsAwarded, points (current total)
    """
    stmt = (
        insert(user_progress)
        .values(
            user_id=user_id,
            lesson_id=lesson_id,
            completed_at=datetime.now(timezone.utc),
        )
        .on_conflict_do_nothing(
            index_elements=[user_progress.c.user_id, user_progress.c.lesson_id]
        )
        .returning(user_progress.c.progress_id)
    )
    result = await conn.execute(stmt)

    if result.first() is None:
        return {
            "alreadyCompleted": True,
            "pointsAwarded": 0,
            "points": await get_points(conn, user_id),
        }

    points = await add_points(conn, user_id, LESSON_COMPLETION_POINTS)
    logger.info("User %s completed lesson %s: points=%d", user_id, lesson_id, points)

    return {
        "alreadyCompleted": False,
        "pointsAwarded": LESSON_COMPLETION_POINTS,
        "points": points,
    }


async def get_rewards(conn: AsyncConnection, user_id: str) -> dict:
    """
    Get a user's points, level, lesson progress and badges for their profile.

    Returns:
        Dict with keys: points (0 if the user never earned any), level,
        lessonsCompleted, badges (list of {name, awardedAt}, oldest first)
    """
    points = await get_points(conn, user_id)

    lessons_result = await conn.execute(
        select(func.count())
        .select_from(user_progress)
        .where(user_progress.c.user_id == user_id)
    )
    lessons_completed = lessons_result.scalar_one()

    badge_result = await conn.execute(
        select(badges.c.badge_name, badges.c.awarded_at)
        .where(badges.c.user_id == user_id)
        .order_by(badges.c.awarded_at, badges.c.badge_id)
    )
    earned = [
        {
            "name": row["badge_name"],
            "awardedAt": row["awarded_at"].isoformat() if row["awarded_at"] else None,
        }
        for row in badge_result.mappings().all()
    ]

    return {
        "points": points,
        "level": level_for_points(points),
        "lessonsCompleted": lessons_completed,
        "badges": earned,
    }
