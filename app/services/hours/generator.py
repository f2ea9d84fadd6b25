"""
Hours generator - main orchestration layer.

Combines data loading and computation into a single flow.
"""

from datetime import date
from sqlalchemy.orm import Session

from .data_loader import load_compute_inputs
from .engine import compute
from .types import ComputeResult


def compute_device_hours(
    db: Session,
    device_id: int,
    start_date: date,
    end_date: date,
) -> ComputeResult:
    """
    Compute staffed hours for every post of a device.

    Args:
        db: Database session
        device_id: The device whose posts are computed
        start_date: First day of the period (inclusive)
        end_date: Last day of the period (inclusive)

    Returns:
        ComputeResult with posts in name order

    Raises:
        InvalidRangeError: If end_date is before start_date

    Example:
        result = compute_device_hours(db, device_id=1,
                                      start_date=date(2025, 1, 1),
                                      end_date=date(2025, 12, 31))
        for post in result.posts:
            print(post.post_name, post.hours.total, post.fte.annualized_fte)
    """
    posts, templates, holidays = load_compute_inputs(db, device_id)
    return compute(posts, templates, holidays, start_date, end_date)
