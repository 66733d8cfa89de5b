"""Three-step ResuMatch page.

Run with ``streamlit run src/resumatch/ui/streamlit_app.py`` while the API
server is listening on ``BACKEND_URL``.
"""

import asyncio

import streamlit as st

from resumatch.core.config import get_settings
from resumatch.core.logging_config import setup_logging
from resumatch.ui import views
from resumatch.ui.client import ResumatchClient
from resumatch.ui.session import MatchSession, Step

SESSION_KEY = "match_session"
UPLOAD_NONCE_KEY = "upload_nonce"
JOB_DESCRIPTION_KEY = "job_description"

STEP_LABELS = {Step.IDLE: "Upload", Step.PARSED: "Job Info", Step.MATCHED: "Analysis"}


def get_session() -> MatchSession:
    if SESSION_KEY not in st.session_state:
        client = ResumatchClient.from_settings(get_settings())
        st.session_state[SESSION_KEY] = MatchSession(client)
    return st.session_state[SESSION_KEY]


def _upload_key() -> str:
    return f"resume_upload_{st.session_state.get(UPLOAD_NONCE_KEY, 0)}"


def _new_uploader() -> None:
    # A new key gives an empty uploader, so a failed file is not kept around
    st.session_state[UPLOAD_NONCE_KEY] = st.session_state.get(UPLOAD_NONCE_KEY, 0) + 1


def _on_reset() -> None:
    get_session().reset()
    st.session_state[JOB_DESCRIPTION_KEY] = ""
    _new_uploader()


def _on_try_another_job() -> None:
    get_session().try_another_job()


def render_header(session: MatchSession) -> None:
    st.title("ResuMatch AI")
    progress = "  ›  ".join(
        f"**{label}**" if step <= session.step else label for step, label in STEP_LABELS.items()
    )
    st.caption(progress)
    if session.step > Step.IDLE:
        st.button("Start over", key="reset", on_click=_on_reset, disabled=session.busy)


def render_error(session: MatchSession) -> None:
    if session.error:
        st.error(session.error)
        if session.error_detail:
            st.caption(session.error_detail)


def render_upload_step(session: MatchSession) -> None:
    settings = get_settings()
    st.header("Optimize your resume for success.")
    st.markdown(
        "Upload your resume and let our AI analyze your skills, experience, "
        "and potential to match you with your dream job."
    )
    uploaded = st.file_uploader(
        "Drop your resume here",
        type=sorted(ext.lstrip(".") for ext in settings.allowed_extensions),
        key=_upload_key(),
        help="Support PDF, TXT, or DOCX",
        disabled=session.busy,
    )
    if uploaded is not None:
        with st.spinner("Parsing your resume..."):
            ok = asyncio.run(session.load_resume(uploaded.name, uploaded.getvalue()))
        if not ok:
            _new_uploader()
        st.rerun()

    render_error(session)


def render_job_step(session: MatchSession) -> None:
    resume = session.resume_data
    left, right = st.columns([1, 2])

    with left:
        st.subheader(resume.name or "Candidate")
        st.caption("Resume Parsed Successfully")
        shown, more = views.skill_preview(resume.skills)
        st.markdown("**Skills**")
        st.markdown(views.skill_badges(shown))
        if more:
            st.caption(f"+{more} more")
        st.markdown("**Latest Role**")
        st.markdown(views.latest_role_line(resume))

    with right:
        if JOB_DESCRIPTION_KEY not in st.session_state:
            st.session_state[JOB_DESCRIPTION_KEY] = session.job_description
        session.job_description = st.text_area(
            "Job Description",
            key=JOB_DESCRIPTION_KEY,
            height=300,
            placeholder="Paste the full job description here (responsibilities, requirements, etc.)...",
        )
        clicked = st.button(
            "Analyze Match",
            key="analyze",
            type="primary",
            disabled=not session.can_analyze,
        )
        if clicked:
            with st.spinner("Analyzing..."):
                asyncio.run(session.analyze_match())
            st.rerun()

    render_error(session)


def render_analysis_step(session: MatchSession) -> None:
    resume = session.resume_data
    result = session.match_result

    st.subheader(resume.name)
    contact = views.contact_line(resume)
    if contact:
        st.caption(contact)
    education = views.education_line(resume)
    if education:
        st.markdown(education)

    st.markdown(f"## {views.format_score(result.score)} Match")
    st.progress(views.score_progress(result.score))
    st.caption(f"Overall fit: {views.score_band(result.score)}")
    st.markdown(
        f"{len(result.matching_skills)} Matching Skills · {len(result.missing_skills)} Missing Skills"
    )

    skills_col, suggestions_col = st.columns(2)
    with skills_col:
        st.markdown("#### Matching Skills")
        st.markdown(views.skill_badges(result.matching_skills))
        st.markdown("#### Missing Skills")
        st.markdown(views.skill_badges(result.missing_skills))
        st.markdown("#### Strengths")
        st.markdown(views.bullet_list(result.strengths))
        st.markdown("#### Weaknesses")
        st.markdown(views.bullet_list(result.weaknesses))

    with suggestions_col:
        st.markdown("#### Improvement Suggestions")
        st.markdown(result.improvement_suggestions)
        if result.overall_feedback:
            st.markdown("#### Overall Feedback")
            st.markdown(result.overall_feedback)

    st.button("Try Another Job", key="try_another", on_click=_on_try_another_job)


def main() -> None:
    st.set_page_config(page_title="ResuMatch AI", layout="wide")
    setup_logging(get_settings().log_level)

    session = get_session()
    render_header(session)

    if session.step == Step.MATCHED and session.match_result is not None:
        render_analysis_step(session)
    elif session.step >= Step.PARSED and session.resume_data is not None:
        render_job_step(session)
    else:
        render_upload_step(session)


main()
