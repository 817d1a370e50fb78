"""
Report Retention - QuietRoute

Per-category retention windows for user reports. The scoring engine assumes
reports are already filtered; the request layer uses these helpers to drop
expired reports before invoking it.

Retention:
  loud: 4 hours        crowded: 2 hours
  obstruction: 4 weeks dark: 30 days
  safe, quiet: 1 week
"""
import logging
from datetime import datetime, timedelta
from typing import Dict, List, Sequence

from quietroute.services.report_weighting import Report, ReportCategory
from quietroute.services.scoring_config import REPORT_RETENTION_HOURS
from quietroute.utils.time_utils import align_timezone

logger = logging.getLogger(__name__)

REPORT_RETENTION: Dict[ReportCategory, timedelta] = {
    category: timedelta(hours=REPORT_RETENTION_HOURS[category.value])
    for category in ReportCategory
}


def get_retention_window(category: ReportCategory) -> timedelta:
    """
    Get how long reports of a category stay active.

    Example:
        >>> get_retention_window(ReportCategory.CROWDED)
        datetime.timedelta(seconds=7200)
    """
    return REPORT_RETENTION[category]


def get_report_expiry(report: Report) -> datetime:
    """When the report stops being active."""
    return report.created_at + get_retention_window(report.category)


def is_report_active(report: Report, now: datetime) -> bool:
    """
    Check whether a report is still active at `now`.

    A report is active from its creation time up to, but not including,
    its expiry.

    Args:
        report: The report
        now: Current time; a naive created_at is read in now's timezone

    Returns:
        True if the report has not yet expired
    """
    return now < align_timezone(get_report_expiry(report), now)


def filter_active_reports(reports: Sequence[Report], now: datetime) -> List[Report]:
    """
    Drop expired reports, preserving order.

    Args:
        reports: Candidate reports from the report store or request body
        now: Current time

    Returns:
        Reports that are still active
    """
    active = [report for report in reports if is_report_active(report, now)]

    dropped = len(reports) - len(active)
    if dropped:
        logger.info(f"Dropped {dropped} expired reports ({len(active)} active)")

    return active
