"""Shared validation utilities"""

import re
from typing import Optional

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Check an address against EMAIL_PATTERN and return it trimmed and lowercased.

    Raises:
        ValueError: If the address does not match
    """
    if not email:
        return email

    email = email.strip().lower()
    if not re.match(EMAIL_PATTERN, email):
        raise ValueError("Invalid email")
    return email


def normalize_optional_email(email: Optional[str]) -> Optional[str]:
    """Blank means "no email"; anything else must be a valid address"""
    if email is None or email.strip() == "":
        return None
    return validate_email(email)


def reject_null(value, field_name: str = "Field"):
    """Fields that may be omitted from a patch but never set to null"""
    if value is None:
        raise ValueError(f"{field_name} cannot be null")
    return value
