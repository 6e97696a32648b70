# checklist/reminder.py
"""
One-shot reminder banner.

arm() starts a single countdown. poll() fires it once the deadline has passed,
showing the banner only if the user has not interacted and it has not been
shown before on this mount. mark_interacted() disarms a pending countdown;
after the banner is visible it changes nothing (the banner stays up). The
banner goes away only through dismiss(), and a dismissed banner never comes
back. disarm() is the teardown for unmount.
"""

import logging
import time

from checklist import config

logger = logging.getLogger(__name__)

HIDDEN = "hidden"
SHOWN  = "shown"


class ReminderScheduler:
    def __init__(self, delay: float | None = None, clock=time.monotonic):
        self.delay = config.REMINDER_DELAY_SECONDS if delay is None else delay
        self.clock = clock
        self.deadline = None
        self.interacted = False
        self.disclosed = False
        self.banner = HIDDEN

    @property
    def armed(self) -> bool:
        return self.deadline is not None

    @property
    def visible(self) -> bool:
        return self.banner == SHOWN

    def arm(self):
        if self.armed or self.disclosed or self.interacted:
            return
        self.deadline = self.clock() + self.delay

    def disarm(self):
        self.deadline = None

    def remaining(self) -> float | None:
        if not self.armed:
            return None
        return max(0.0, self.deadline - self.clock())

    def poll(self) -> bool:
        """Advance the countdown. Returns True while the banner is visible."""
        if self.armed and self.clock() >= self.deadline:
            self.deadline = None
            if not self.interacted and not self.disclosed:
                self.banner = SHOWN
                self.disclosed = True
                logger.info("REMINDER_SHOWN")
        return self.visible

    def mark_interacted(self):
        if self.interacted:
            return
        self.interacted = True
        if not self.visible:
            self.disarm()

    def dismiss(self):
        self.banner = HIDDEN
        self.disarm()
