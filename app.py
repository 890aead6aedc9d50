# app.py
import time

import streamlit as st

from algorithms.errors import MatcherError
from algorithms.registry import ALGORITHMS, BENCHMARK
from config import configure_logging, load_settings
from services.runner import run_matching
from utils.highlight import highlight_matches_html, match_spans
from utils.playback import Playback
from utils.text_io import read_files_as_texts

settings = load_settings()
configure_logging(settings.log_level)

st.set_page_config(page_title="String Matching Engine", layout="wide")
st.markdown(
    "<style>mark{background:#fde68a;border-radius:3px;padding:0 1px}"
    "mark.active{background:#6366f1;color:white}</style>",
    unsafe_allow_html=True,
)

st.title("String Matching Engine")
st.caption("Visualize KMP, Rabin-Karp, and Z-Algorithm implementations")

ss = st.session_state
ss.setdefault("run", None)
ss.setdefault("step", {})
ss.setdefault("playing", None)

# ---- Input ----
uploaded = st.file_uploader("Load text from file", type=["txt", "pdf"], accept_multiple_files=False)
default_text = "abababcabababcabcabc"
if uploaded is not None:
    texts, _ = read_files_as_texts([uploaded])
    default_text = texts[0] if texts else default_text

text = st.text_area("Text", value=default_text, height=120)
patterns = st.text_input("Patterns (comma separated)", value="ababc")

choices = [d.id.value for d in ALGORITHMS.values()] + [BENCHMARK]
labels = {d.id.value: d.name for d in ALGORITHMS.values()}
labels[BENCHMARK] = "Compare all"

col_algo, col_case = st.columns([3, 1])
algorithm = col_algo.selectbox(
    "Algorithm",
    choices,
    index=choices.index(settings.default_algorithm),
    format_func=lambda k: labels[k],
)
case_insensitive = col_case.checkbox("Ignore case", value=False)
if algorithm != BENCHMARK:
    st.caption(ALGORITHMS[algorithm].description)

col_run, col_reset, _ = st.columns([1, 1, 6])
if col_run.button("Run", type="primary"):
    try:
        ss.run = run_matching(
            text, patterns, algorithm,
            case_insensitive=case_insensitive,
            max_text_length=settings.max_text_length,
        )
        ss.step = {}
        ss.playing = None
        found = sum(r.match_count for r in ss.run.values())
        st.toast(f"Found {found} matches")
    except MatcherError as e:
        ss.run = None
        st.error(str(e))
if col_reset.button("Reset"):
    ss.run = None
    ss.step = {}
    ss.playing = None

run = ss.run
if run is None:
    st.stop()

# ---- Benchmark ----
if run.benchmark:
    st.subheader("Performance Comparison")
    rows = {
        ALGORITHMS[key].name: {
            "matches": res.match_count,
            "comparisons": res.comparisons,
            "time (ms)": round(res.elapsed_ms, 4),
        }
        for key, res in run.items()
    }
    st.table(rows)
    c1, c2 = st.columns(2)
    c1.caption("Execution time (ms)")
    c1.bar_chart({name: [r["time (ms)"]] for name, r in rows.items()})
    c2.caption("Character comparisons")
    c2.bar_chart({name: [r["comparisons"]] for name, r in rows.items()})
    st.stop()

# ---- Single algorithm: one panel per pattern ----
for key, res in run.items():
    st.subheader(f"Pattern '{res.pattern}'")
    pb = Playback(res.steps, ss.step.get(key, 0))
    # filled after the player buttons so the marked span follows the current step
    text_slot = st.empty()

    m1, m2, m3 = st.columns(3)
    m1.metric("Matches", res.match_count)
    m2.metric("Comparisons", res.comparisons)
    m3.metric("Time", f"{res.elapsed_ms:.3f} ms")

    if res.steps:
        b1, b2, b3, b4 = st.columns([1, 1, 1, 5])
        if b1.button("Back", key=f"back-{key}", disabled=pb.at_start):
            pb.step_back()
        if b2.button("Next", key=f"next-{key}", disabled=pb.at_end):
            pb.step_forward()
        playing = ss.playing == key
        if b3.button("Pause" if playing else "Play", key=f"play-{key}"):
            ss.playing = None if playing else key
        ss.step[key] = pb.index

        step = pb.current
        b4.write(f"Step {pb.index + 1} / {len(pb)} · `{step.kind}` · {step.description}")
        with st.expander("Step details"):
            st.json(step.to_dict())
    else:
        st.info("No steps recorded.")

    step = pb.current
    active = step.position if step is not None and step.kind == "found" else None
    spans = match_spans(res.matches, len(res.pattern))
    text_slot.markdown(highlight_matches_html(run.text, spans, active=active), unsafe_allow_html=True)

# auto-play advances one step per rerun
if ss.playing is not None and ss.playing in run:
    key = ss.playing
    pb = Playback(run[key].steps, ss.step.get(key, 0))
    pb.play()
    if pb.playing:
        time.sleep(settings.playback_interval_ms / 1000.0)
        pb.step_forward()
        ss.step[key] = pb.index
        st.rerun()
    ss.playing = None
