from concurrent.futures import Future

import pytest

from checklist.api_client import ChecklistAPIError

RESPONSE_ID = "r-42"


def make_answer(answer="Yes", area="Design", activity="Sketch", criteria="Uses constraints",
                remarks=None, id=None):
    return {"id": id, "area": area, "activity": activity, "criteria": criteria,
            "answer": answer, "remarks": remarks}


def make_body(answers=None, language="EN", response_id=RESPONSE_ID):
    return {
        "data": {
            "response": {
                "id": response_id,
                "email": "user@example.com",
                "language": language,
                "timestamp": "2025-03-04T10:15:00Z",
            },
            "answers": answers if answers is not None else [
                make_answer("Yes", id="1"),
                make_answer("No", area="Assembly", id="2"),
                make_answer("N/A", area=None, id="3"),
            ],
        }
    }


class FakeClient:
    """
    Stand-in for ChecklistClient. Each call is recorded; an optional hook runs
    while the "request" is outstanding so tests can trigger re-entrant actions.
    """

    def __init__(self, body=None, pdf=b"%PDF-1.4 fake", access_reply=None):
        self.body = body if body is not None else make_body()
        self.pdf = pdf
        self.access_reply = access_reply if access_reply is not None else {"success": True}
        self.calls = []
        self.fail = set()
        self.during = {}

    def _run(self, name, *args):
        self.calls.append((name,) + args)
        hook = self.during.pop(name, None)
        if hook:
            hook()
        if name in self.fail:
            raise ChecklistAPIError(f"{name} failed")

    def get_response(self, response_id):
        self._run("get_response", response_id)
        return self.body

    def get_response_pdf(self, response_id):
        self._run("get_response_pdf", response_id)
        return self.pdf

    def request_access(self, email, message):
        self._run("request_access", email, message)
        return self.access_reply

    def count(self, name):
        return sum(1 for c in self.calls if c[0] == name)


class InlineExecutor:
    """Runs each submitted call on the spot; the future is settled on return."""

    def __init__(self):
        self.submitted = 0

    def submit(self, fn, *args):
        self.submitted += 1
        future = Future()
        try:
            future.set_result(fn(*args))
        except Exception as exc:
            future.set_exception(exc)
        return future


class ManualExecutor:
    """Holds submitted calls until run_pending(), like a worker that has not finished yet."""

    def __init__(self):
        self.queue = []
        self.submitted = 0

    def submit(self, fn, *args):
        self.submitted += 1
        future = Future()
        self.queue.append((future, fn, args))
        return future

    def run_pending(self):
        queue, self.queue = self.queue, []
        for future, fn, args in queue:
            try:
                future.set_result(fn(*args))
            except Exception as exc:
                future.set_exception(exc)


class FakeClock:
    def __init__(self, start=100.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def inline():
    return InlineExecutor()


@pytest.fixture
def worker():
    return ManualExecutor()
