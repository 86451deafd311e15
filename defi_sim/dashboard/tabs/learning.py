"""Learning page — personalized guidance and bookmarked resources."""

import streamlit as st

from defi_sim.guidance.generate import generate_guidance
from defi_sim.learning.links import LearningLinkStore
from defi_sim.position.returns import ReturnResult
from defi_sim.risk.metrics import RiskResult


def render_learning(
    risk: RiskResult | None,
    returns: ReturnResult | None,
    store: LearningLinkStore,
) -> None:
    """Render guidance and the bookmark list."""
    st.header("Personalized Guidance")

    guidance = generate_guidance(risk, returns)
    st.info(guidance.risk_analysis)

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Parameter Suggestions")
        for suggestion in guidance.parameter_suggestions:
            st.markdown(f"- {suggestion}")
    with col2:
        st.subheader("Key Insights")
        for insight in guidance.key_insights:
            st.markdown(f"- {insight}")

    st.divider()

    st.subheader("Learning Resources")
    for link in store.load():
        link_col, remove_col = st.columns([5, 1])
        with link_col:
            st.markdown(f"[{link.title}]({link.url})")
        with remove_col:
            if st.button("Remove", key=f"remove-{link.id}"):
                store.remove(link.id)
                st.rerun()

    with st.form("add_link", clear_on_submit=True):
        title = st.text_input("Title")
        url = st.text_input("URL")
        if st.form_submit_button("Add Link"):
            if store.add(title, url) is None:
                st.warning("Both a title and a URL are required.")
            else:
                st.rerun()
