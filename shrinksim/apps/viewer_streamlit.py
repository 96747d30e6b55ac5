import streamlit as st
from shrinksim.models.params import (
    CORRECTION_FACTOR_RANGE, DEFAULT_PARAMS, LONG_AXIS, SHORT_AXIS, ParamSession,
)
from shrinksim.postprocess.metrics import axis_summary, grid_layout_label
from shrinksim.postprocess.visualization import plot_shrinkage_layout

st.set_page_config(page_title="PI Substrate Shrinkage Simulator", layout="wide")

if "session" not in st.session_state:
    st.session_state.session = ParamSession()
session: ParamSession = st.session_state.session

SCAN_LABELS = {LONG_AXIS: "Long Axis (Vertical)", SHORT_AXIS: "Short Axis (Horizontal)"}

# ---- control surface: edits only touch session.editing ----
st.sidebar.header("Simulation Controls")
if st.sidebar.button("RESET"):
    session.reset()

p = session.editing
c1, c2 = st.sidebar.columns(2)
width = c1.number_input("Glass Width (mm)", value=float(p.width_mm), step=10.0)
height = c2.number_input("Glass Height (mm)", value=float(p.height_mm), step=10.0)

st.sidebar.subheader("ELA Process Settings")
scan = st.sidebar.selectbox(
    "Scan Direction", [LONG_AXIS, SHORT_AXIS],
    index=[LONG_AXIS, SHORT_AXIS].index(p.scan_direction),
    format_func=SCAN_LABELS.get,
)
bml = st.sidebar.toggle(
    "Block Metal Layer (BML)", value=p.has_bml,
    help="BML acts as a heat sink (138 W/m·K), diffusing heat laterally and "
         "reducing peak PI temperature, thus lowering shrinkage.",
)

st.sidebar.subheader("Physics Model Correction")
lo, hi, step = CORRECTION_FACTOR_RANGE
factor = st.sidebar.slider("Process Factor", lo, hi, float(p.correction_factor), step, format="%.1fx")
st.sidebar.caption("Fine-tune the computed strain for unmodeled variation "
                   "(laser energy density, overlap %).")

session.edit(width_mm=width, height_mm=height, scan_direction=scan,
             has_bml=bml, correction_factor=factor)

if st.sidebar.button("RUN SIMULATION", type="primary"):
    session.commit()
if session.dirty:
    st.sidebar.info("Edited parameters not yet simulated.")

# ---- results: rendered from session.committed only ----
res = session.results()
s = axis_summary(res)

st.title("PI Substrate Shrinkage Simulator")
st.caption("Visualizing ELA process-induced dimensional changes "
           f"({grid_layout_label()} grid, cell geometry exaggerated for display).")

m1, m2, m3, m4 = st.columns(4)
m1.metric("Cell Long Axis", f"{s.long_axis_ppm} PPM", s.long_axis_label, delta_color="off")
m2.metric("Cell Short Axis", f"{s.short_axis_ppm} PPM", s.short_axis_label, delta_color="off")
m3.metric("Total Glass Size", f"{res.original_width_mm:g} x {res.original_height_mm:g}",
          "Millimeters", delta_color="off")
m4.metric("Grid Layout", grid_layout_label(), f"{len(res.cells)} cells", delta_color="off")

fig, _ = plot_shrinkage_layout(res)
st.pyplot(fig)
st.caption(f"Defaults: {DEFAULT_PARAMS.width_mm:g}x{DEFAULT_PARAMS.height_mm:g} mm 6G mother glass. "
           "Constants are illustrative approximations, not measured material data.")
