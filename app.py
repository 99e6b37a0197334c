"""
Page Replacement Visualizer — FIFO & LRU

This application simulates page replacement over a page reference string
and a fixed number of memory frames, then shows, step by step:
    - The contents of every frame after each reference
    - Whether the reference was a Hit or a Miss (page fault)
    - The total number of page faults

Built with Streamlit for the web interface and Plotly for visualizations.
The simulation itself lives in engine.py and has no knowledge of the UI.

Run with:
    streamlit run app.py
"""

# =============================================================================
# IMPORTS
# =============================================================================

import streamlit as st                       # Web application framework

from engine import (                         # Pure simulation core
    ReplacementPolicy,
    compare,
    parse_page_references,
    simulate,
)
from utils import build_comparison_figure, build_visualization_figure


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_REFERENCES = "7,0,1,2,0,3,0,4,2,3,0,3,2"
DEFAULT_FRAMES = 3
MAX_FRAMES = 20
EVENT_LOG_LIMIT = 20  # Events shown, newest first


# -----------------------------------------------------------------------------
# CALLBACKS
# -----------------------------------------------------------------------------

def reset_form():
    """
    Clear the inputs and the last result.

    Runs as a button callback so widget values can still be changed
    before the widgets are drawn on the next rerun.
    """
    st.session_state.references = st.session_state.saved_references = ""
    st.session_state.frame_count = st.session_state.saved_frame_count = DEFAULT_FRAMES
    st.session_state.result = None
    st.session_state.comparison = None


# Configure the Streamlit page
st.set_page_config(page_title="Page Replacement Visualizer", layout="wide")

# Session state survives Streamlit reruns
for key, default in (("result", None), ("comparison", None)):
    if key not in st.session_state:
        st.session_state[key] = default

# Widget keys are dropped while the Concepts view hides the inputs, so the
# last values the user entered are kept under saved_* keys and restored here
for key, default in (("references", DEFAULT_REFERENCES),
                     ("frame_count", DEFAULT_FRAMES)):
    saved = f"saved_{key}"
    if saved not in st.session_state:
        st.session_state[saved] = default
    if key not in st.session_state:
        st.session_state[key] = st.session_state[saved]

# -----------------------------------------------------------------------------
# SIDEBAR NAVIGATION
# -----------------------------------------------------------------------------

page = st.sidebar.radio("Choose View", ["Simulator", "Concepts"])

st.title("Page Replacement Visualizer — FIFO & LRU")

# =============================================================================
# CONCEPTS PAGE - Educational Content
# =============================================================================

if page == "Concepts":
    st.header("Page Replacement Concepts")
    st.markdown(
        """
        ## 📘 Key Concepts

        ### **1. Frames**
        - Physical memory is split into a fixed number of *frames*.
        - Each frame holds exactly one page.

        ### **2. Hit and Page Fault (Miss)**
        - **Hit**: the referenced page is already in a frame.
        - **Miss**: the page is not resident and must be loaded.
          When every frame is full, some page has to be evicted first.

        ### **3. FIFO (First In First Out)**
        - Replace the page that entered memory earliest.
        - A circular pointer walks over the frames; each fault writes at
          the pointer and moves it one slot forward.
        - How often or how recently a page was used does not matter.

        ### **4. LRU (Least Recently Used)**
        - Replace the page that has not been referenced for the longest time.
        - Every reference (hit or miss) moves the page to the
          "most recently used" end of a recency list; the victim is taken
          from the other end.

        ### **5. Reading the Table**
        - Each column is one reference; its header is the page referenced.
        - The first row says Hit or Miss, the rows below show every frame.
        - `-` marks an empty frame.
        """
    )
    st.stop()  # Stop rendering - don't show simulator on Concepts page

# =============================================================================
# SIMULATOR PAGE - Main Interactive Interface
# =============================================================================

# -----------------------------------------------------------------------------
# SIDEBAR - Simulation Settings
# -----------------------------------------------------------------------------

st.sidebar.header("Simulation Settings")

policy = st.sidebar.selectbox(
    "Replacement Policy",
    options=list(ReplacementPolicy.ALL),
)

references_input = st.sidebar.text_area(
    "Page references (comma separated page numbers)",
    key="references",
)

frame_count = st.sidebar.number_input(
    "Page frames",
    min_value=1,
    max_value=MAX_FRAMES,
    step=1,
    key="frame_count",
)

# Remember the inputs for when the user comes back from the Concepts view
st.session_state.saved_references = references_input
st.session_state.saved_frame_count = frame_count

# Calculate: parse the inputs and run both policies
if st.sidebar.button("Calculate"):
    try:
        pages = parse_page_references(references_input)
        st.session_state.result = simulate(policy, pages, int(frame_count))
        st.session_state.comparison = compare(pages, int(frame_count))
    except ValueError as e:
        st.session_state.result = None
        st.session_state.comparison = None
        st.sidebar.error(str(e))

st.sidebar.button("Reset", on_click=reset_form)

# =============================================================================
# RESULTS
# =============================================================================

result = st.session_state.result

if result is None:
    st.info("Enter a page reference string and a frame count, then click **Calculate**.")
    st.stop()

st.subheader(f"{result.algorithm} Algorithm Results:")

if result.total_refs == 0:
    st.write("No page references given — nothing to simulate")
else:
    st.plotly_chart(build_visualization_figure(result), use_container_width=True)

st.markdown(f"**Total Page Faults = {result.page_faults}**")

# Two columns: statistics and comparison on the left, event log on the right
col1, col2 = st.columns([2, 1])

with col1:
    st.subheader("Statistics")
    stats = result.get_stats()
    m1, m2, m3 = st.columns(3)
    m1.metric("Page References", stats["total_refs"])
    m2.metric("Hits", stats["hits"])
    m3.metric("Hit Ratio", stats["hit_ratio"])

    # Same input under every policy, to contrast FIFO with LRU
    st.plotly_chart(
        build_comparison_figure(st.session_state.comparison),
        use_container_width=True,
    )

with col2:
    st.subheader("Event Log")
    for ev in result.event_log[-EVENT_LOG_LIMIT:][::-1]:
        st.write(ev)

# =============================================================================
# FOOTER - Usage Tips and Examples
# =============================================================================

st.markdown("---")
st.markdown(
    "**Instructor examples**:\n"
    "1) FIFO ignores use: 3 frames, `1,2,3,1,4` evicts page 1 even though it was just hit.\n"
    "2) LRU on the same input evicts page 2 instead."
)
