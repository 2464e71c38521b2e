import streamlit as st

from config import APP_TITLE

st.set_page_config(layout="wide", page_title=f"About · {APP_TITLE}")

st.title(f"About {APP_TITLE}")

st.markdown(
    f"""
{APP_TITLE} is a résumé builder that walks you through your details one step
at a time and shows the finished résumé as you type.

Fill in your personal details, a short professional summary, your work
experience and education (add, remove and reorder entries as you like) and a
comma-separated list of skills. When you're happy with the preview, export it
as a PDF from the review step or from the footer on any step.

Nothing you type leaves your browser session: there is no account, and your
data is gone when you close the tab.
"""
)

st.caption(f"© {APP_TITLE}. Build your future.")
