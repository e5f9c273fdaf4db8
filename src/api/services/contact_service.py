# This file implements the contact form handler.
# Submissions are logged and echoed back; nothing is stored.

from __future__ import annotations

import logging
from typing import Any

from src.api.error_handlers import APIError

logger = logging.getLogger(__name__)

REQUIRED_CONTACT_FIELDS: tuple[str, ...] = ("first_name", "last_name", "message")


def _is_blank(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip() == ""
    return not value


class ContactService:
    def submit(self, submission: dict[str, Any]) -> dict[str, Any]:
        logger.info("New contact submission: %s", submission)

        missing = [field for field in REQUIRED_CONTACT_FIELDS if _is_blank(submission.get(field))]
        if missing:
            raise APIError(
                status_code=400,
                error_code="MISSING_FIELDS",
                message="Missing required fields",
                details={"missing": missing},
            )

        return {
            "success": True,
            "received": submission,
            "message": (
                f"Thank you for your message, {submission['first_name']} {submission['last_name']}."
            ),
        }
