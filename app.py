# app.py  –  Checklist Assessment Summary
# Run:  streamlit run app.py
# Open: http://localhost:8501/?responseId=<id>

import base64
import html
import logging
import os
import sys
from concurrent.futures import ThreadPoolExecutor

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import streamlit as st
import streamlit.components.v1 as components

sys.path.insert(0, os.path.dirname(__file__))

from checklist import config
from checklist.api_client import ChecklistClient
from checklist.charts import overview_figure
from checklist.grouping import area_table
from checklist.messages import answer_badge_key, t
from checklist.summary import SummaryView

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("checklist.app")

# ── Page config ──────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="Solid Edge Success Criteria Checklist – Summary",
    page_icon="📋",
    layout="centered",
)

st.markdown("""
<style>
.tile {
    border-radius: 16px; padding: 14px 8px; text-align: center; margin-bottom: 8px;
}
.tile .num { font-size: 1.6rem; font-weight: 700; }
.tile .lbl { font-size: 0.85rem; }
.tile-yes   { background: #e8f5e9; color: #1b5e20 !important; }
.tile-no    { background: #ffebee; color: #b71c1c !important; }
.tile-na    { background: #f5f5f5; color: #424242 !important; }
.tile-total { background: #e3f2fd; color: #0d47a1 !important; }
.ans-card {
    border-left: 4px solid #e0e0e0; padding: 4px 0 4px 14px; margin: 10px 0 14px;
    color: #1a1a1a !important;
}
.badge {
    display: inline-block; border-radius: 12px; padding: 2px 12px;
    font-size: 0.78rem; font-weight: 600;
}
.badge-yes { background: #c8e6c9; color: #1b5e20 !important; }
.badge-no  { background: #ffcdd2; color: #b71c1c !important; }
.badge-na  { background: #eeeeee; color: #424242 !important; }
.remarks {
    background: #fafafa; border-radius: 8px; padding: 8px 12px; margin-top: 6px;
    font-size: 0.88rem; color: #333 !important;
}
.reminder {
    border: 1px solid #e0e0e0; border-radius: 10px; padding: 12px 16px;
    background: #ffffff; color: #1a1a1a !important;
}
</style>
""", unsafe_allow_html=True)


# ── Browser capabilities ─────────────────────────────────────────────────────
def read_session_value(key):
    value = st.session_state.get(key)
    return value if isinstance(value, str) and value else None


def trigger_download(buf, filename):
    """Hand the PDF to the browser as an auto-clicked data link."""
    b64 = base64.b64encode(buf.read()).decode("ascii")
    components.html(f"""
        <a id="dl" href="data:application/pdf;base64,{b64}" download="{html.escape(filename)}"></a>
        <script>
            const a = document.getElementById("dl");
            a.click();
            a.remove();
        </script>""", height=0)



# ── Session helpers ──────────────────────────────────────────────────────────
def _client():
    if "api_client" not in st.session_state:
        st.session_state.api_client = ChecklistClient()
    return st.session_state.api_client


def _export_executor():
    if "export_executor" not in st.session_state:
        st.session_state.export_executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="pdf-export")
    return st.session_state.export_executor


def _current_view(response_id):
    """One SummaryView per response id; switching ids tears the old one down."""
    view = st.session_state.get("summary_view")
    if view is not None and view.response_id == response_id:
        return view
    if view is not None:
        view.unmount()
    for k in ("access_email", "access_message"):
        st.session_state.pop(k, None)
    view = SummaryView(response_id, _client(), read_session_value, trigger_download,
                       export_executor=_export_executor())
    st.session_state.summary_view = view
    with st.spinner(t("loading")):
        view.mount()
    return view


def _go_home():
    view = st.session_state.pop("summary_view", None)
    if view is not None:
        view.unmount()
    st.query_params.clear()
    st.rerun()


def _flush_notice(owner, tr):
    notice = owner.notice
    if notice is None:
        return
    owner.notice = None
    if notice.level == "success":
        st.success(tr(notice.key))
    else:
        st.error(tr(notice.key))


@st.fragment(run_every=0.5)
def export_control(view, tr, label_key, key):
    """Export trigger. The fetch runs on a worker; this fragment polls it until it settles."""
    view.poll_export()
    _flush_notice(view.exporter, tr)
    busy = view.exporter.in_flight
    st.button(tr("downloading") if busy else tr(label_key), key=key, type="primary",
              disabled=not view.exporter.can_export, on_click=view.export,
              use_container_width=True)


def _link_button(view, tr, label_key, target, key, primary=True, prefix=""):
    """
    First click marks the interaction; from then on the target is a plain
    link, so the new tab is opened by the user's own click.
    """
    label = f"{prefix}{tr(label_key)}"
    kind = "primary" if primary else "secondary"
    if target in view.revealed_links:
        st.link_button(f"{label} ↗", config.LINK_TARGETS[target], type=kind,
                       use_container_width=True)
    else:
        st.button(label, key=key, type=kind, on_click=view.open_link, args=(target,),
                  use_container_width=True)


# ══════════════════════════════════════════════════════════════════════════════
# ROUTING
# ══════════════════════════════════════════════════════════════════════════════
response_id = st.query_params.get("responseId")

if not response_id:
    old = st.session_state.pop("summary_view", None)
    if old is not None:
        old.unmount()
    st.markdown(f"### 📋 {t('title')}")
    st.info(t("no_response_id"))
    typed = st.text_input("Response ID")
    if st.button("Open", type="primary", disabled=not typed.strip()):
        st.query_params["responseId"] = typed.strip()
        st.rerun()
    st.stop()

view = _current_view(response_id)
state = view.state

if state.is_loading:
    st.info(t("loading"))
    st.stop()

if state.is_error or state.data is None:
    st.error(t(state.error or "not_found", view.locale))
    if st.button(t("go_home", view.locale), key="go_home", type="primary"):
        _go_home()
    st.stop()

response = state.data.response
tr = view.messages()
stats = view.stats()
pct = view.percentages()
grouped = view.grouped_answers()


# ══════════════════════════════════════════════════════════════════════════════
# HEADER
# ══════════════════════════════════════════════════════════════════════════════
with st.container(border=True):
    h1, h2 = st.columns([3, 2])
    with h1:
        st.markdown(f"## {tr('title')}")
        st.markdown(
            f"**{tr('email_label')}** {response.email}  \n"
            f"**{tr('language_label')}** {tr('language_name')}  \n"
            f"**{tr('date_label')}** {response.timestamp.strftime('%d/%m/%Y, %H:%M:%S')}"
        )
    with h2:
        export_control(view, tr, "download_pdf", "export_top")
        if st.button(tr("new_assessment"), key="home_top", use_container_width=True):
            _go_home()


# ══════════════════════════════════════════════════════════════════════════════
# RESULTS OVERVIEW
# ══════════════════════════════════════════════════════════════════════════════
with st.container(border=True):
    st.markdown(f"### {tr('overview_title')}")
    c1, c2, c3, c4 = st.columns(4)
    for col, css, num, label in [
        (c1, "tile-yes",   stats.yes,   f"{tr('yes')} ({pct['yes']}%)"),
        (c2, "tile-no",    stats.no,    f"{tr('no')} ({pct['no']}%)"),
        (c3, "tile-na",    stats.na,    f"{tr('na')} ({pct['na']}%)"),
        (c4, "tile-total", stats.total, tr("total_questions")),
    ]:
        col.markdown(f"<div class='tile {css}'><div class='num'>{num}</div>"
                     f"<div class='lbl'>{label}</div></div>", unsafe_allow_html=True)

    if stats.total:
        fig = overview_figure(stats, {"yes": tr("yes"), "no": tr("no"), "na": tr("na")})
        st.pyplot(fig)
        plt.close(fig)

    st.caption(f"{tr('completion_rate')} · 100%")
    st.progress(1.0)

    with st.expander(tr("area_breakdown"), expanded=False):
        st.dataframe(area_table(grouped), use_container_width=True, hide_index=True)


# ══════════════════════════════════════════════════════════════════════════════
# CERTIFICATION
# ══════════════════════════════════════════════════════════════════════════════
with st.container(border=True):
    st.markdown(f"### 🎓 {tr('next_step_title')}")
    st.caption(tr("next_step_body"))
    a_col, c_col = st.columns(2)
    with a_col:
        st.markdown(f"#### {tr('academy_title')}")
        st.markdown(f"📚 {tr('academy_point_1')}  \n🌍 {tr('academy_point_2')}")
        _link_button(view, tr, "start_learning", "academy", "academy_main")
        if st.button(tr("request_access"), key="access_open", use_container_width=True):
            view.open_access_request()
            st.session_state.access_email = view.access.email
            st.session_state.access_message = view.access.message
    with c_col:
        st.markdown(f"#### {tr('cert_title')}")
        st.markdown(f"**{tr('cert_free')}**")
        st.markdown(f"🛠️ {tr('cert_point_1')}  \n🧑‍💼 {tr('cert_point_2')}")
        st.info(tr("credly_blurb"))
        _link_button(view, tr, "start_certification", "certification", "cert_main")
        _link_button(view, tr, "view_badges", "badge_directory", "badges", primary=False)


# ══════════════════════════════════════════════════════════════════════════════
# ACCESS REQUEST PANEL
# ══════════════════════════════════════════════════════════════════════════════
_flush_notice(view.access, tr)

if view.access.is_open:
    with st.container(border=True):
        st.markdown(f"#### {tr('access_title')}")
        st.caption(tr("access_blurb"))
        email = st.text_input(tr("email_address"), key="access_email",
                              placeholder=tr("email_placeholder"))
        message = st.text_area(tr("message_optional"), key="access_message", height=90,
                               placeholder=tr("message_placeholder"))
        view.access.set_email(email.strip())
        view.access.set_message(message)

        b1, b2 = st.columns(2)
        with b1:
            if st.button(tr("cancel"), key="access_cancel", use_container_width=True):
                view.access.cancel()
                st.rerun()
        with b2:
            if st.button(tr("send_request"), key="access_send", type="primary",
                         disabled=not view.access.can_submit, use_container_width=True):
                with st.spinner(tr("sending")):
                    sent = view.access.submit()
                if sent:
                    for k in ("access_email", "access_message"):
                        st.session_state.pop(k, None)
                    st.rerun()
                _flush_notice(view.access, tr)


# ══════════════════════════════════════════════════════════════════════════════
# DETAILED RESULTS BY AREA
# ══════════════════════════════════════════════════════════════════════════════
for area, area_answers in grouped.items():
    with st.container(border=True):
        st.markdown(f"### {html.escape(area)}")
        for a in area_answers:
            badge = answer_badge_key(a.answer)
            remarks = ""
            if a.remarks:
                remarks = (f"<div class='remarks'><b>{tr('remarks_label')}</b><br>"
                           f"{html.escape(a.remarks)}</div>")
            st.markdown(f"""
            <div class='ans-card'>
                <b>{html.escape(a.activity)}</b><br>
                <span style='font-size:0.9rem;'>{html.escape(a.criteria)}</span><br>
                <span style='font-size:0.85rem;'>{tr('answer_label')}</span>
                <span class='badge badge-{badge}'>{tr(badge)}</span>
                {remarks}
            </div>""", unsafe_allow_html=True)


# ══════════════════════════════════════════════════════════════════════════════
# FOOTER
# ══════════════════════════════════════════════════════════════════════════════
with st.container(border=True):
    f1, f2 = st.columns(2)
    with f1:
        export_control(view, tr, "download_report", "export_bottom")
    with f2:
        if st.button(tr("another_assessment"), key="home_bottom", use_container_width=True):
            _go_home()
st.caption(tr("footer"))


# ══════════════════════════════════════════════════════════════════════════════
# REMINDER BANNER (polled once a second)
# ══════════════════════════════════════════════════════════════════════════════
@st.fragment(run_every=1.0)
def reminder_banner():
    # nothing pending and nothing shown: interacted, dismissed or torn down
    if not view.reminder.armed and not view.reminder.visible:
        return
    if not view.poll_reminder():
        return
    with st.container(border=True):
        r1, r2 = st.columns([10, 1])
        with r1:
            st.markdown(f"<div class='reminder'>🎯 <b>{tr('reminder_title')}</b><br>"
                        f"<small>{tr('reminder_body')}</small></div>", unsafe_allow_html=True)
        with r2:
            if st.button(tr("close"), key="reminder_close"):
                view.reminder.dismiss()
                st.rerun(scope="fragment")
        s1, s2 = st.columns(2)
        with s1:
            _link_button(view, tr, "start_certification", "certification", "reminder_cert", prefix="🎯 ")
        with s2:
            _link_button(view, tr, "access_academy", "academy", "reminder_academy", primary=False, prefix="🎯 ")


reminder_banner()
