# checklist/summary.py
"""
SummaryView ties the components together for a single response id.

mount() registers two scoped effects, each with its own teardown:
  - the record fetch      (teardown: invalidate the loader's generation)
  - the reminder countdown (teardown: disarm the timer)
Export and access-request workflows are also detached on unmount so that a
late reply cannot write into a view that no longer exists.

Stats and area groups are never stored; they are recomputed from the loaded
record on every call and are only available in the READY state.
"""

import logging
import time

from checklist import config
from checklist.access_request import AccessRequestWorkflow
from checklist.export import ExportCoordinator
from checklist.grouping import group_by_area
from checklist.messages import DEFAULT_LOCALE, translator
from checklist.reminder import ReminderScheduler
from checklist.stats import compute_stats, percentages
from checklist.view_state import ResponseLoader

logger = logging.getLogger(__name__)


class MountScope:
    """Collects teardown callbacks and runs them once, newest first."""

    def __init__(self):
        self._teardowns = []
        self.active = False

    def register(self, teardown):
        self._teardowns.append(teardown)
        return teardown

    def open(self):
        self.active = True

    def close(self):
        if not self.active:
            return
        self.active = False
        while self._teardowns:
            self._teardowns.pop()()


class SummaryView:
    def __init__(self, response_id: str, client, read_session_value, trigger_download,
                 clock=None, reminder_delay: float | None = None, export_executor=None):
        self.response_id = response_id
        self.loader = ResponseLoader(client)
        self.exporter = ExportCoordinator(client, response_id, trigger_download, export_executor)
        self.access = AccessRequestWorkflow(client, read_session_value, config.SESSION_EMAIL_KEY)
        self.reminder = ReminderScheduler(reminder_delay, clock=clock or time.monotonic)
        self.scope = MountScope()
        self.unmounted = False
        self.revealed_links = set()

    @property
    def state(self):
        return self.loader.state

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def mount(self):
        """Runs once. A view that has been unmounted stays unmounted."""
        if self.scope.active:
            return
        if self.unmounted:
            logger.warning("SUMMARY_REMOUNT_REFUSED response_id=%s", self.response_id)
            return
        self.scope.open()
        logger.info("SUMMARY_MOUNT response_id=%s", self.response_id)

        self.scope.register(self.exporter.close)
        self.scope.register(self.access.detach)

        self.reminder.arm()
        self.scope.register(self.reminder.disarm)

        self.scope.register(self.loader.invalidate)
        self.loader.load(self.response_id)

    def unmount(self):
        if self.scope.active:
            logger.info("SUMMARY_UNMOUNT response_id=%s", self.response_id)
            self.unmounted = True
        self.scope.close()

    # ── Derived display data (READY only) ─────────────────────────────────────

    @property
    def locale(self) -> str:
        if self.state.is_ready:
            return self.state.data.response.language
        return DEFAULT_LOCALE

    def messages(self):
        return translator(self.locale)

    def stats(self):
        if not self.state.is_ready:
            return None
        return compute_stats(self.state.data.answers)

    def percentages(self):
        s = self.stats()
        return percentages(s) if s is not None else None

    def grouped_answers(self):
        if not self.state.is_ready:
            return None
        return group_by_area(self.state.data.answers)

    # ── User actions ──────────────────────────────────────────────────────────

    def open_link(self, target: str) -> str:
        """
        Certification / academy / badge directory. Marks the interaction and
        records the target as revealed; the page then shows a real link so
        the navigation itself comes from the user's own click.
        """
        url = config.LINK_TARGETS[target]
        self.reminder.mark_interacted()
        self.revealed_links.add(target)
        logger.info("OUTBOUND_LINK target=%s", target)
        return url

    def open_access_request(self):
        self.reminder.mark_interacted()
        self.access.open()

    def export(self) -> bool:
        return self.exporter.export()

    def poll_export(self) -> bool:
        return self.exporter.poll()

    def poll_reminder(self) -> bool:
        if not self.scope.active:
            return False
        return self.reminder.poll()
