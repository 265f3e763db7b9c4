"""Root conftest — shared test configuration."""

import os

# Pin defaults so a developer's .env or shell exports don't change test outcomes
os.environ["STELLA_NIT_FORMATTED"] = "true"
os.environ["STELLA_NIT_LEGACY_ELIGIBILITY"] = "false"
os.environ["STELLA_NIT_LOCALE"] = "pt_BR"
