import logging

import streamlit as st

from catalog import load_racket_database, find_by_tuple
from components import (
    reset_form_callback, init_tension_state, sync_tension_from_input,
    refresh_tension_inputs, racket_selectors, spec_card,
)
from constants import PROFILES, PROFILE_RATIOS, LOG_LEVEL
from logging_config import setup_logging
from logic import (
    compute_for_selection, display_tension, format_dt,
    alternative_settings, generate_tension_pdf,
)
from models import TensionPair

# ==========================================================
# 1. CONFIGURATION
# ==========================================================
st.set_page_config(page_title="Tennis String Tension Calculator", page_icon="🎾", layout="wide")
setup_logging(getattr(logging, LOG_LEVEL, logging.INFO))
logger = logging.getLogger("app")

if 'unit' not in st.session_state:
    st.session_state.unit = "lbs"
unit = st.session_state.unit
init_tension_state(unit)

catalog = load_racket_database()

# ==========================================================
# 2. UI MAIN
# ==========================================================
col_title, col_reset = st.columns([0.8, 0.2])
with col_title:
    st.title("Tennis String Tension Calculator")
    st.caption("Match stringbed feel between rackets by preserving dynamic tension")
with col_reset:
    if st.button("Reset", on_click=reset_form_callback, type="secondary", use_container_width=True): st.rerun()

if catalog.empty:
    st.error("The racket database could not be loaded.")
    st.stop()

col_ref, col_new = st.columns(2)

# --- REFERENCE RACKET ---
with col_ref:
    st.header("1. Old Racket")
    ref_selection = racket_selectors("ref", catalog)
    ref_spec = find_by_tuple(catalog, ref_selection)
    spec_card(ref_spec, unit)

    st.subheader("Tensions")
    col_m, col_c = st.columns(2)
    with col_m: st.text_input(f"Old Mains Tension ({unit})", key="ref_mains_text", on_change=sync_tension_from_input, args=("ref_mains",))
    with col_c: st.text_input(f"Old Crosses Tension ({unit})", key="ref_crosses_text", on_change=sync_tension_from_input, args=("ref_crosses",))

    st.toggle("Kilograms (kg)", key="unit_toggle", on_change=refresh_tension_inputs)

# --- NEW RACKET ---
with col_new:
    st.header("2. New Racket")
    new_selection = racket_selectors("new", catalog)
    new_spec = find_by_tuple(catalog, new_selection)
    spec_card(new_spec, unit)

    st.subheader("Tension Profile")
    profile = st.radio("Tension Profile", PROFILES, format_func=str.capitalize, horizontal=True, label_visibility="collapsed")

# --- CALCULATIONS ---
reference = TensionPair(st.session_state.ref_mains_lbs, st.session_state.ref_crosses_lbs)
result = compute_for_selection(reference, ref_spec, new_spec, profile)
logger.debug("Recomputed %s", result)

# --- RESULTS ---
st.divider(); st.header("Results")
res_c1, res_c2, res_c3, res_c4 = st.columns(4)
res_c1.metric("Old Racket DT", format_dt(result.reference_dt))
res_c2.metric(f"Suggested Mains ({unit})", display_tension(result.suggested_mains, unit))
res_c3.metric(f"Suggested Crosses ({unit})", display_tension(result.suggested_crosses, unit))
res_c4.metric("New Racket DT", format_dt(result.new_dt))

if result.out_of_range:
    st.warning("The old stringbed feel cannot be matched within 10-80 lbs on the new racket. "
               "The suggestion is pinned to the nearest limit.")

if result.suggested_mains is not None:
    ratio = PROFILE_RATIOS[profile]
    st.markdown("### Comparison of Alternative Settings")
    alternatives = alternative_settings(result.suggested_mains, ratio, new_spec, ref_spec.head_size, result.reference_dt, unit)
    st.dataframe(alternatives, hide_index=True)

    summary = {
        "reference_racket": ref_spec.label,
        "reference_mains": display_tension(reference.mains, unit),
        "reference_crosses": display_tension(reference.crosses, unit),
        "reference_dt": format_dt(result.reference_dt),
        "new_racket": new_spec.label,
        "profile": profile,
        "suggested_mains": display_tension(result.suggested_mains, unit),
        "suggested_crosses": display_tension(result.suggested_crosses, unit),
        "new_dt": format_dt(result.new_dt),
    }
    st.download_button("Export Results to PDF", data=generate_tension_pdf(summary, alternatives, unit),
                       file_name="tension_report.pdf", mime="application/pdf")
elif ref_spec is None or new_spec is None:
    st.info("Select both rackets to get a suggested tension.")
