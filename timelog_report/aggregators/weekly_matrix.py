"""Weekly contributor matrix built from a time summary.

Turns the ``weekly_by_user`` rollup into a pandas DataFrame with
contributors as rows and week starts as columns, which is the shape used
for tabular weekly reporting.
"""

import logging
from collections import defaultdict
from typing import Dict

import pandas as pd

from timelog_report.calculators.time_utils import seconds_to_hours
from timelog_report.models.summary import TimeSummary

logger = logging.getLogger(__name__)


def generate_weekly_matrix(summary: TimeSummary) -> pd.DataFrame:
    """Generate the contributor-by-week hours matrix.

    Rows follow the ``by_user`` order (most time first) and columns are
    week starts in ascending order. Weeks without time for a contributor
    hold 0.0.

    Args:
        summary: Time summary to pivot

    Returns:
        DataFrame indexed by contributor name with one column per week

    Example:
        >>> matrix = generate_weekly_matrix(summary)
        >>> matrix.loc["Alice", "2024-01-08"]
        1.5
    """
    logger.info(
        f"Generating weekly matrix from {len(summary.weekly_by_user)} weeks"
    )

    if not summary.weekly_by_user:
        logger.info("No weekly data, returning empty DataFrame")
        return pd.DataFrame()

    # Structure: {contributor_key: {week_start: hours}}
    matrix_data: Dict[str, Dict[str, float]] = defaultdict(dict)
    names: Dict[str, str] = {}

    for week in summary.weekly_by_user:
        for total in week.totals:
            key = total.username or total.user_id
            names.setdefault(key, total.user_name)
            matrix_data[key][week.week_start] = float(seconds_to_hours(total.seconds))

    columns = [week.week_start for week in summary.weekly_by_user]
    order = [
        key
        for key in (
            group.hints.get("username") or group.hints.get("user_id")
            for group in summary.by_user
        )
        if key in matrix_data
    ]
    # Contributors absent from by_user fall back to discovery order
    order += [key for key in matrix_data if key not in order]

    df = pd.DataFrame.from_dict(matrix_data, orient="index")
    df = df.reindex(index=order, columns=columns).fillna(0.0)
    df.index = [names[key] for key in order]
    df.index.name = "contributor"

    logger.info(
        f"Generated matrix with {len(df)} contributors and {len(df.columns)} weeks"
    )
    return df
