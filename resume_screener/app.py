"""
Resume Screener – Streamlit frontend.
No business logic in layout; screening, filtering and export live in the pipeline and services.
"""

from typing import List

import streamlit as st

from resume_screener.config import CSV_FILE_NAME, SUPPORTED_FORMATS
from resume_screener.cv_pipeline.batch_processor import process_batch
from resume_screener.errors import InvalidRequestError
from resume_screener.schemas.candidate import RESULT_FIELDS, ScoredCandidate
from resume_screener.schemas.document import Document
from resume_screener.services.analytics_service import summarize
from resume_screener.services.export_service import export_csv
from resume_screener.services.filter_service import filter_results, sort_results

SORT_LABELS = {
    "name": "Name",
    "similarity": "Match Score",
    "university": "University",
    "email": "Email",
    "skills": "Skills",
    "soft_skills": "Soft Skills",
    "experience": "Experience",
    "location": "Location",
}


def _to_documents(uploads) -> List[Document]:
    return [Document.from_upload(u.name, u.getvalue()) for u in uploads or []]


def _bar_chart(pairs, x: str, y: str) -> None:
    """Bar chart from (label, value) pairs."""
    st.bar_chart([{x: label, y: value} for label, value in pairs], x=x, y=y)


def _render_analytics(results: List[ScoredCandidate]) -> None:
    """Summary metrics and charts for the current batch."""
    stats = summarize(results)
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Total Candidates", stats.total_candidates)
    c2.metric("Universities", stats.total_universities)
    c3.metric("Fresh Graduates", stats.fresh_graduates)
    c4.metric("Experienced", stats.experienced)
    if stats.top_candidate:
        st.caption(f"**Top candidate:** {stats.top_candidate} · **Average similarity:** {stats.average_similarity}%")

    col_a, col_b = st.columns(2)
    with col_a:
        st.markdown("**Experience distribution**")
        _bar_chart([(k, v) for k, v in stats.experience_buckets.items() if v], "Experience", "Candidates")
    with col_b:
        st.markdown("**Top skills**")
        if stats.top_skills:
            _bar_chart(stats.top_skills, "Skill", "Candidates")
        else:
            st.caption("No skills detected.")

    if stats.top_universities:
        with st.expander("Top universities"):
            for university, count in stats.top_universities:
                st.markdown(f"- **{university}** ({count})")

    st.markdown("**Similarity by candidate**")
    _bar_chart([(f"C{i}", round(c.similarity * 100, 1)) for i, c in enumerate(results, 1)], "Candidate", "Similarity %")


def render_layout() -> None:
    """Streamlit page layout; screening and display use the pipeline and services layer."""
    st.set_page_config(page_title="Resume Screener", layout="wide")
    st.title("Resume Screener")
    st.markdown("*Rank resumes against a job description by keyword overlap.*")
    st.divider()

    # ----- Upload section -----
    allowed = list(SUPPORTED_FORMATS)
    col1, col2 = st.columns(2)
    with col1:
        jd_upload = st.file_uploader("Job Description", type=allowed, key="jd_file")
    with col2:
        resume_uploads = st.file_uploader(
            "Resumes",
            type=allowed,
            accept_multiple_files=True,
            key="resume_files",
        )
    process_clicked = st.button("Process Resumes", type="primary", key="process_btn")

    # Session state: results (immutable after processing), error
    if "results" not in st.session_state:
        st.session_state["results"] = []
    if "error" not in st.session_state:
        st.session_state["error"] = None
    if "skipped" not in st.session_state:
        st.session_state["skipped"] = []

    # ----- Run screening (only on button click) -----
    if process_clicked:
        jd_document = Document.from_upload(jd_upload.name, jd_upload.getvalue()) if jd_upload else None
        with st.spinner("Extracting text and scoring resumes…"):
            try:
                batch = process_batch(jd_document, _to_documents(resume_uploads))
                st.session_state["results"] = batch.ranked
                st.session_state["skipped"] = [(o.source_name, o.reason) for o in batch.skipped]
                st.session_state["error"] = None
            except InvalidRequestError as e:
                st.session_state["error"] = str(e)
                st.session_state["results"] = []
                st.session_state["skipped"] = []
            except Exception as e:
                st.session_state["error"] = f"Processing failed: {str(e)}"
                st.session_state["results"] = []
                st.session_state["skipped"] = []

    if st.session_state.get("error"):
        st.error(st.session_state["error"])

    results: List[ScoredCandidate] = st.session_state.get("results") or []
    skipped = st.session_state.get("skipped") or []

    st.divider()

    # ----- Results section -----
    st.subheader("Results")
    if not results:
        if not process_clicked and not st.session_state.get("error"):
            st.info("Upload a job description and one or more resumes, then click **Process Resumes**.")
        elif process_clicked and not st.session_state.get("error"):
            st.warning("None of the uploaded resumes could be processed.")
    else:
        fcol1, fcol2, fcol3 = st.columns([2, 1, 1])
        with fcol1:
            search_term = st.text_input("Search candidates", key="search_term")
        with fcol2:
            sort_field = st.selectbox(
                "Sort by",
                options=RESULT_FIELDS,
                index=RESULT_FIELDS.index("similarity"),
                format_func=lambda f: SORT_LABELS.get(f, f),
                key="sort_field",
            )
        with fcol3:
            descending = st.radio("Order", ["Descending", "Ascending"], key="sort_order") == "Descending"

        shown = sort_results(filter_results(results, search_term), sort_field, descending)
        st.markdown(f"**Showing:** {len(shown)} of {len(results)} candidates")
        st.dataframe([c.to_result() for c in shown], use_container_width=True)

        st.download_button(
            "Export CSV",
            data=export_csv(shown),
            file_name=CSV_FILE_NAME,
            mime="text/csv",
            key="export_csv",
        )

        if skipped:
            with st.expander(f"Skipped files ({len(skipped)})"):
                for name, reason in skipped:
                    st.markdown(f"- **{name}**: {reason}")

        st.divider()
        st.subheader("Analytics")
        _render_analytics(results)


if __name__ == "__main__":
    render_layout()
