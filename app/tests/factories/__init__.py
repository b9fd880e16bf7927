"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import make_locale, make_locale_pool
from tests.factories.notifications import (
    make_addresses,
    make_email_content,
    make_email_template,
    make_sms_content,
)

__all__ = [
    "make_locale",
    "make_locale_pool",
    "make_addresses",
    "make_email_content",
    "make_email_template",
    "make_sms_content",
]
