"""
Masking helpers for sensitive values in log output.

Emails, phone numbers and verification codes pass through these before they
reach a log record.
"""

from typing import Optional

MASK = "***"


def mask_email(email: Optional[str]) -> str:
    """Mask an email as ``abc***@domain``, or ``***`` + last 3 chars for short local parts."""
    if email is None or len(email) < 5:
        return MASK
    at_index = email.find("@")
    if at_index > 3:
        return email[:3] + MASK + email[at_index:]
    return MASK + email[-3:]


def mask_phone(phone: Optional[str]) -> str:
    """Mask a phone number down to its last 4 digits."""
    if phone is None or len(phone) < 4:
        return MASK
    return MASK + phone[-4:]


def mask_identifier(identifier: Optional[str]) -> str:
    """Mask an identifier as an email if it contains ``@``, else as a phone number."""
    if identifier is None:
        return MASK
    if "@" in identifier:
        return mask_email(identifier)
    return mask_phone(identifier)


def mask_code(code: Optional[str]) -> str:
    """Keep only the first and last character of a verification code."""
    if code is None or len(code) < 2:
        return MASK
    return code[0] + MASK + code[-1]
