# main.py
from __future__ import annotations

import io
import json
from typing import Dict, List

import streamlit as st

from future_ready.components.charts import heatmap_figure, radar_chart
from future_ready.config import configure_logging, load_cohort
from future_ready.core.analytics import band_distribution, competency_heatmap, filter_assessments, top_performers
from future_ready.core.builder import AssessmentError, AssessmentRecord
from future_ready.core.catalog import COMPETENCIES, MAX_TOTAL_SCORE, SUB_COMPETENCY_COUNT
from future_ready.core.scoring import BANDS, EXCEPTIONAL, LIMITED, STRONG
from future_ready.core.session import AssessmentSession
from future_ready.reports.export import build_report, records_to_csv
from future_ready.reports.pdf_export import export_pdf


ALL = "All"


# ----------------------------
# UI Helpers
# ----------------------------
def init_state():
    if "session" not in st.session_state:
        st.session_state.session = AssessmentSession()
    if "history" not in st.session_state:
        # history sink for this browser session; one script run appends at a time
        st.session_state.history = []
    if "form_gen" not in st.session_state:
        st.session_state.form_gen = 0
    if "flash" not in st.session_state:
        st.session_state.flash = None


def band_message(band: str) -> str:
    if band == EXCEPTIONAL:
        return "Consistently demonstrates the full range of future-ready competencies."
    if band == STRONG:
        return "Demonstrates most competencies with some gaps to develop."
    if band == LIMITED:
        return "Few competencies demonstrated; significant development needed."
    return "Demonstrates some competencies; targeted development recommended."


def _toggle(key: str, index: int):
    st.session_state.session.toggle(key, index)


def render_competency(competency, session: AssessmentSession, gen: int):
    row = session.marks.row(competency.key)
    cols = st.columns(2)
    for i, label in enumerate(competency.sub_competencies):
        with cols[i % 2]:
            st.checkbox(
                label,
                value=row[i],
                key=f"m_{gen}_{competency.key.value}_{i}",
                on_change=_toggle,
                args=(competency.key.value, i),
            )


def render_form(session: AssessmentSession, groups: List[str], case_studies: List[str]):
    gen = st.session_state.form_gen
    c1, c2, c3, c4 = st.columns(4)
    candidate = c1.text_input("Candidate Name *", key=f"candidate_{gen}", placeholder="Enter candidate name")
    group = c2.selectbox("Group *", groups, index=None, key=f"group_{gen}", placeholder="Select group")
    case_study = c3.selectbox("Case Study *", case_studies, index=None, key=f"case_{gen}", placeholder="Select case study")
    assessor = c4.text_input("Assessor Name *", key=f"assessor_{gen}", placeholder="Your name")

    session.set_field("candidate_name", candidate)
    session.set_field("assessor_name", assessor)
    session.set_field("group_id", group or "")
    session.set_field("case_study", case_study or "")

    preview = session.preview()
    m1, m2 = st.columns(2)
    m1.metric("Current Score", f"{preview.total_score}/{MAX_TOTAL_SCORE}")
    m2.metric("Performance Band", preview.performance_band)

    st.caption(f"{len(COMPETENCIES)} competencies × {SUB_COMPETENCY_COUNT} sub-competencies = {MAX_TOTAL_SCORE} points")
    for comp in COMPETENCIES:
        score = preview.competency_scores[comp.key.value]
        with st.expander(f"{comp.name} ({score}/{SUB_COMPETENCY_COUNT})", expanded=False):
            render_competency(comp, session, gen)

    observations = st.text_area(
        "Observations & Notes",
        key=f"observations_{gen}",
        placeholder="Additional observations, strengths, areas for development...",
    )
    session.set_field("observations", observations)


def submit(session: AssessmentSession):
    history: List[AssessmentRecord] = st.session_state.history
    try:
        record = session.submit(history)
    except AssessmentError as e:
        st.error(str(e))
        return
    history.append(record)
    st.session_state.form_gen += 1
    st.session_state.flash = f"Assessment submitted! Total: {record.total_score}/100 ({record.performance_band})"
    st.rerun()


def reset(session: AssessmentSession):
    session.reset()
    st.session_state.form_gen += 1
    st.rerun()


def render_record(record: AssessmentRecord):
    report = build_report(record)
    c1, c2, c3 = st.columns(3)
    c1.metric("Total Score", f"{record.total_score}/100")
    c2.metric("Performance Band", record.performance_band)
    c3.metric("Assessor", record.assessor_name)
    st.caption(band_message(record.performance_band))

    left, right = st.columns([1, 1])
    with left:
        for name, score in report["competency_scores_named"]:
            st.progress(score / SUB_COMPETENCY_COUNT, text=f"{name}: {score}")
    with right:
        labels = [name for name, _ in report["competency_scores_named"]]
        vals = [score for _, score in report["competency_scores_named"]]
        st.pyplot(radar_chart(labels, vals, max_score=SUB_COMPETENCY_COUNT))

    if record.observations:
        st.write(record.observations)

    st.download_button(
        "Download JSON report",
        data=json.dumps(report, indent=2),
        file_name=f"{record.id}.json",
        mime="application/json",
        key=f"json_{record.id}",
    )
    buf = io.BytesIO()
    export_pdf(buf, report)
    st.download_button(
        "Download PDF report",
        data=buf.getvalue(),
        file_name=f"{record.id}.pdf",
        mime="application/pdf",
        key=f"pdf_{record.id}",
    )


# ----------------------------
# Main app
# ----------------------------
def main():
    st.set_page_config(page_title="Future Ready Assessment", layout="wide")
    configure_logging()
    init_state()

    st.title("Future Ready Assessment Framework")
    st.caption("Tick the sub-competencies demonstrated by the candidate. Each tick is worth one point.")

    cohort = load_cohort()
    session: AssessmentSession = st.session_state.session
    history: List[AssessmentRecord] = st.session_state.history

    if st.session_state.flash:
        st.success(st.session_state.flash)
        st.session_state.flash = None

    tab1, tab2, tab3 = st.tabs(["Assessment", "Results", "Export"])

    # ---- Assessment ----
    with tab1:
        st.subheader("Individual Assessment Form")
        render_form(session, cohort.groups, cohort.case_studies)

        col1, col2 = st.columns(2)
        with col1:
            if st.button("Submit Assessment", type="primary"):
                submit(session)
        with col2:
            if st.button("Reset"):
                reset(session)

    # ---- Results ----
    with tab2:
        st.subheader("Results Dashboard")
        if not history:
            st.info("No individual assessments yet.")
        else:
            f1, f2 = st.columns(2)
            group = f1.selectbox("Group", [ALL] + cohort.groups)
            case_study = f2.selectbox("Case Study", [ALL] + cohort.case_studies)
            filtered = filter_assessments(
                history,
                group_id=None if group == ALL else group,
                case_study=None if case_study == ALL else case_study,
            )

            dist: Dict[str, int] = band_distribution(filtered)
            cols = st.columns(len(BANDS))
            for col, band in zip(cols, BANDS):
                col.metric(band, dist[band])

            if filtered:
                st.markdown("### Competency Heatmap")
                st.pyplot(heatmap_figure(competency_heatmap(filtered)))

                st.markdown("### Top Performers")
                for p in top_performers(filtered):
                    st.write(
                        f"**{p.candidate_name}** · Average: {p.average_score}/100 · "
                        f"Assessments: {p.assessment_count} · Best band: {p.best_band}"
                    )

            st.markdown("### Assessments")
            for record in reversed(filtered):
                with st.expander(f"{record.candidate_name} · {record.case_study} / {record.group_id} · {record.total_score}/100"):
                    render_record(record)

    # ---- Export ----
    with tab3:
        st.subheader("Export")
        st.write(f"{len(history)} assessment(s) recorded in this session.")
        if history:
            st.download_button(
                "Download Individual Assessments CSV",
                data=records_to_csv(history),
                file_name="individual-assessments.csv",
                mime="text/csv",
            )


if __name__ == "__main__":
    main()
