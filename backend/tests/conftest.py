"""Root conftest — shared test configuration."""

import os

# Tests run against deterministic settings, not a developer's .env
os.environ.setdefault("INVOICE_FORMS_DEFAULT_LOCALE", "en")
os.environ.setdefault("INVOICE_FORMS_STRICT_MESSAGES", "false")
os.environ.setdefault("INVOICE_FORMS_LOG_FORMAT", "text")
