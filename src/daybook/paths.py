"""Map (user, date) pairs to day files under the journals root."""

import logging
from datetime import date
from pathlib import Path

from .config import JOURNALS_DIR

logger = logging.getLogger(__name__)

DAY_FILE_SUFFIX = ".json"


def resolve(user: str, day: date, ensure_dir: bool = False, root: Path | None = None) -> Path:
    """
    Get the day file path for a user and date.

    Layout is ``<root>/<user>/<year>/<month>/<day>.json`` with unpadded
    numbers. With ``ensure_dir`` the month directory is created; failures
    are logged, not raised.
    """
    month_dir = Path(root or JOURNALS_DIR) / user / str(day.year) / str(day.month)
    if ensure_dir:
        try:
            month_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create journal directory {month_dir}: {e}")
    return month_dir / f"{day.day}{DAY_FILE_SUFFIX}"
