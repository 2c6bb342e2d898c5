import logging

import matplotlib.pyplot as plt
import pandas as pd

import streamlit as st
from purity_tlbx.analysis import AnalysisIssue, EasyCaseSession
from purity_tlbx.data import LabeledDataset
from purity_tlbx.plotting import plot_parallel_coordinates, plot_region_coverage, plot_threshold_sweep
from purity_tlbx.utils import DEFAULT_ANALYSIS_CFG, DEFAULT_PLOT_CFG
from purity_tlbx.utils.reporting import regions_to_frame


logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
DEFAULT_PLOT_CFG.apply_global()

st.set_page_config(
    page_title="Pure Region Explorer",
    layout="wide",
)

if "session" not in st.session_state:
    st.session_state.session = EasyCaseSession()
    st.session_state.loaded_name = None
    st.session_state.sweep = None
session: EasyCaseSession = st.session_state.session

uploaded = st.sidebar.file_uploader("Labeled CSV dataset", type="csv")
if uploaded is None:
    st.info("Upload a CSV file with a 'class' column to start.")
    st.stop()

if uploaded.name != st.session_state.loaded_name:
    session.load(LabeledDataset(pd.read_csv(uploaded, skipinitialspace=True)))
    st.session_state.loaded_name = uploaded.name
    st.session_state.sweep = None

if session.issue is AnalysisIssue.NO_CLASS_COLUMN:
    st.error("No class column found. Pure regions cannot be calculated.")

threshold = st.sidebar.slider(
    "Coverage threshold (%)",
    min_value=int(DEFAULT_ANALYSIS_CFG.min_threshold),
    max_value=int(DEFAULT_ANALYSIS_CFG.max_threshold),
    value=int(session.threshold),
)
if threshold != session.threshold:
    session.set_threshold(threshold)

if st.sidebar.button("Best threshold"):
    st.session_state.sweep = session.apply_best_threshold()
    st.rerun()

hide = st.sidebar.toggle("Hide easy cases", value=session.hide_easy_cases)
if hide != session.hide_easy_cases:
    session.toggle_easy_cases()

n_visible = len(session.visible_rows())
st.sidebar.metric("Visible rows", f"{n_visible} / {session.n_rows}")
st.sidebar.metric("Easy cases", len(session.hidden_rows))

left, right = st.columns([3, 2])
with left:
    st.dataframe(session.visible_frame(), use_container_width=True)
    fig, ax = plt.subplots(figsize=(12, 6))
    plot_parallel_coordinates(
        session.view,
        session.regions,
        session.hidden_rows,
        hide_easy_cases=session.hide_easy_cases,
        ax=ax,
    )
    fig.tight_layout()
    st.pyplot(fig)

with right:
    st.text(session.report())
    st.dataframe(regions_to_frame(session.regions), use_container_width=True)
    fig, ax = plt.subplots(figsize=(6, max(2, 0.4 * len(session.regions))))
    plot_region_coverage(session.regions, ax=ax)
    fig.tight_layout()
    st.pyplot(fig)
    if st.session_state.sweep is not None:
        fig, ax = plt.subplots(figsize=(6, 4))
        plot_threshold_sweep(st.session_state.sweep, ax=ax)
        fig.tight_layout()
        st.pyplot(fig)
