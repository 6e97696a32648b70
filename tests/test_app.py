from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from checklist.messages import t

from conftest import RESPONSE_ID

APP = str(Path(__file__).resolve().parent.parent / "app.py")


@pytest.fixture
def page(client, worker):
    at = AppTest.from_file(APP, default_timeout=30)
    at.session_state["api_client"] = client
    at.session_state["export_executor"] = worker
    return at


def _open(at, response_id=RESPONSE_ID):
    at.query_params["responseId"] = response_id
    return at.run()


def test_without_response_id_shows_picker(page, client):
    page.run()
    assert not page.exception
    assert page.info[0].value == t("no_response_id")
    assert client.calls == []


def test_picker_opens_the_typed_response(page, client):
    page.run()
    page.text_input[0].input(RESPONSE_ID)
    page.button[0].click().run()
    assert not page.exception
    assert client.calls == [("get_response", RESPONSE_ID)]
    assert not page.error


def test_summary_renders_for_loaded_response(page, client):
    _open(page)
    assert not page.exception
    assert not page.error
    assert page.button(key="export_top").label == t("download_pdf")
    assert page.button(key="export_bottom").label == t("download_report")
    assert client.count("get_response") == 1


def test_load_failure_shows_localized_error_and_go_home(page, client):
    client.fail.add("get_response")
    _open(page)
    assert not page.exception
    assert page.error[0].value == t("load_failed")

    page.button(key="go_home").click().run()
    assert not page.exception
    assert page.info[0].value == t("no_response_id")


def test_export_buttons_stay_disabled_until_the_fetch_settles(page, client, worker):
    _open(page)
    assert not page.button(key="export_top").disabled

    page.button(key="export_top").click().run()
    assert worker.submitted == 1
    for key in ("export_top", "export_bottom"):
        assert page.button(key=key).disabled
        assert page.button(key=key).label == t("downloading")

    # a click sent before the browser saw the disabled state
    assert page.session_state["summary_view"].export() is False
    page.run()
    assert worker.submitted == 1
    assert page.button(key="export_top").disabled

    worker.run_pending()
    page.run()
    assert not page.exception
    assert client.count("get_response_pdf") == 1
    assert not page.button(key="export_top").disabled
    assert not page.button(key="export_bottom").disabled


def test_export_failure_shows_notice_and_reenables(page, client, worker):
    _open(page)
    client.fail.add("get_response_pdf")
    page.button(key="export_top").click().run()
    worker.run_pending()
    page.run()
    assert page.error[0].value == t("export_failed")
    assert not page.button(key="export_top").disabled


def test_link_click_reveals_a_real_link(page):
    _open(page)
    page.button(key="cert_main").click().run()
    assert not page.exception
    assert "cert_main" not in [b.key for b in page.button]
    view = page.session_state["summary_view"]
    assert view.revealed_links == {"certification"}


def test_reminder_banner_idle_after_interaction(page):
    _open(page)
    page.button(key="access_open").click().run()
    view = page.session_state["summary_view"]
    assert not view.reminder.armed and not view.reminder.visible
    page.run()
    assert not page.exception
    assert "reminder_close" not in [b.key for b in page.button]
