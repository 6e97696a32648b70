# checklist/export.py
"""
PDF report export.

export() is single-flight: it hands the PDF fetch to a worker and keeps the
future on the coordinator, so the request stays outstanding across page
reruns. While it is outstanding, can_export is False and further export()
calls return without issuing a request.

poll() settles a finished fetch exactly once. On success the PDF bytes are
wrapped in a transient in-memory buffer, handed to the injected
trigger_download(buffer, filename) capability, and the buffer is closed as
soon as that call returns. A failure only sets an error notice; it never
touches the primary view state.
"""

import io
import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager

from checklist import config
from checklist.api_client import ChecklistAPIError
from checklist.messages import Notice

logger = logging.getLogger(__name__)

_EXECUTOR = ThreadPoolExecutor(max_workers=2, thread_name_prefix="pdf-export")

# held in .future while executor.submit() is running
_PENDING = object()


def report_filename(response_id: str) -> str:
    return config.REPORT_FILENAME.format(id=response_id)


@contextmanager
def transient_resource(payload: bytes):
    buf = io.BytesIO(payload)
    try:
        yield buf
    finally:
        buf.close()


class ExportCoordinator:
    def __init__(self, client, response_id: str, trigger_download, executor=None):
        self.client = client
        self.response_id = response_id
        self.trigger_download = trigger_download
        self.executor = executor or _EXECUTOR
        self.future = None
        self.notice = None
        self.closed = False

    @property
    def in_flight(self) -> bool:
        return self.future is not None

    @property
    def can_export(self) -> bool:
        return not self.in_flight and not self.closed

    def close(self):
        """Detach from the view; an export still outstanding will be dropped."""
        self.closed = True

    def export(self) -> bool:
        """Start a fetch. Returns True if a request was issued."""
        if not self.can_export:
            logger.debug("EXPORT_SKIPPED response_id=%s in_flight=%s", self.response_id, self.in_flight)
            return False

        self.notice = None
        # claim the slot before submitting; an inline executor runs the fetch right away
        self.future = _PENDING
        try:
            self.future = self.executor.submit(self.client.get_response_pdf, self.response_id)
        except BaseException:
            self.future = None
            raise
        logger.info("EXPORT_STARTED response_id=%s", self.response_id)
        return True

    def poll(self) -> bool:
        """Settle a finished fetch. Returns True if a download was initiated."""
        future = self.future
        if future is None or future is _PENDING or not future.done():
            return False
        self.future = None

        try:
            payload = future.result()
        except ChecklistAPIError:
            if self.closed:
                logger.info("EXPORT_STALE response_id=%s outcome=error", self.response_id)
                return False
            logger.exception("EXPORT_FAILED response_id=%s", self.response_id)
            self.notice = Notice("error", "export_failed")
            return False

        if self.closed:
            logger.info("EXPORT_STALE response_id=%s outcome=ok", self.response_id)
            return False

        filename = report_filename(self.response_id)
        with transient_resource(payload) as buf:
            self.trigger_download(buf, filename)
        logger.info("EXPORT_DONE response_id=%s bytes=%d", self.response_id, len(payload))
        return True
