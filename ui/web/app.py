"""Streamlit page for ingesting a repository and asking questions about it."""
from __future__ import annotations

import streamlit as st

from application.use_cases.ingest_repository import ingest_repository, parse_repository
from infrastructure.config import ContainerConfig, build_default_container
from ui.logging_utils import setup_logging

setup_logging()
container = build_default_container(ContainerConfig.from_env())
st.set_page_config(page_title="RepoQA")
st.title("RepoQA")

st.header("Ingest")
ingest_form = st.form("ingest")
repository = ingest_form.text_input("Repository", value="NavdeepSingh16-98/portfolio")
branch = ingest_form.text_input("Branch", value="main")
ingest_submit = ingest_form.form_submit_button("Ingest repository")
if ingest_submit:
    owner, repo = parse_repository(repository)
    with st.spinner(f"Ingesting {owner}/{repo}..."):
        store = ingest_repository(owner, repo, branch, loader=container.loader, splitter=container.splitter)
    st.session_state["chain"] = container.build_chain(store)
    st.success(f"{owner}/{repo}: {len(store)} chunks ready")

st.header("Ask")
question = st.text_input("Question", value="name of the person whose portfolio is this?")
if st.button("Ask"):
    chain = st.session_state.get("chain")
    if chain is None:
        st.warning("Ingest a repository first.")
    else:
        st.write(chain.invoke(question))
        with st.expander("Retrieved chunks"):
            for result in chain.retriever.retrieve(question):
                st.write({"source": result.chunk.metadata.get("source"), "score": result.score})
