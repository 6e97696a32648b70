# checklist/config.py
"""
Runtime settings for the checklist summary page.
Values are read once from the environment at import time.
"""

import os

# ── Backend ───────────────────────────────────────────────────────────────────
API_BASE_URL = os.environ.get("CHECKLIST_API_URL", "http://localhost:5000").rstrip("/")
API_TIMEOUT  = float(os.environ.get("CHECKLIST_API_TIMEOUT", "30"))

# ── Reminder ──────────────────────────────────────────────────────────────────
REMINDER_DELAY_SECONDS = float(os.environ.get("CHECKLIST_REMINDER_DELAY", "5.0"))

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("CHECKLIST_LOG_LEVEL", "INFO").upper()

# ── Session ───────────────────────────────────────────────────────────────────
SESSION_EMAIL_KEY = "userEmail"

# ── Outbound links (opened in a new browsing context) ────────────────────────
CERTIFICATION_URL  = "https://cadcertification.sw.siemens.com/solid-edge/"
ACADEMY_URL        = "https://learn.sw.siemens.com/library/solid-edge-for-education-and-community/VyR_oDmjP"
BADGE_DIRECTORY_URL = "https://www.credly.com/organizations/siemens-sw/directory"

LINK_TARGETS = {
    "certification":   CERTIFICATION_URL,
    "academy":         ACADEMY_URL,
    "badge_directory": BADGE_DIRECTORY_URL,
}

REPORT_FILENAME = "checklist-report-{id}.pdf"
