# components.py
import streamlit as st

from catalog import unique_values_of
from constants import IDENTITY_FIELDS, DEFAULT_MAINS_LBS, DEFAULT_CROSSES_LBS
from logic import display_tension, parse_tension_input, convert_tension_range

TENSION_FIELDS = {"ref_mains": DEFAULT_MAINS_LBS, "ref_crosses": DEFAULT_CROSSES_LBS}


def reset_form_callback():
    """Clears all session state variables."""
    for key in list(st.session_state.keys()):
        del st.session_state[key]


def init_tension_state(unit):
    """Seeds the pound values and their visible text on first run."""
    for field, default in TENSION_FIELDS.items():
        if f"{field}_lbs" not in st.session_state:
            st.session_state[f"{field}_lbs"] = default
        if f"{field}_text" not in st.session_state:
            st.session_state[f"{field}_text"] = display_tension(st.session_state[f"{field}_lbs"], unit)


def sync_tension_from_input(field):
    """Stores the typed text as pounds; pounds stay the source of truth."""
    unit = st.session_state.get("unit", "lbs")
    st.session_state[f"{field}_lbs"] = parse_tension_input(st.session_state[f"{field}_text"], unit)


def refresh_tension_inputs():
    """Rewrites the visible tension text after a unit switch."""
    unit = "kg" if st.session_state.get("unit_toggle") else "lbs"
    st.session_state.unit = unit
    for field in TENSION_FIELDS:
        st.session_state[f"{field}_text"] = display_tension(st.session_state[f"{field}_lbs"], unit)


def clear_downstream(prefix, field):
    """Resets the selectors below the one that just changed."""
    for k in IDENTITY_FIELDS[IDENTITY_FIELDS.index(field) + 1:]:
        st.session_state[f"{prefix}_{k}"] = None


def racket_selectors(prefix, catalog):
    """Renders dependent brand -> product -> version -> variant selectboxes."""
    selection = {}
    for i, field in enumerate(IDENTITY_FIELDS):
        if i > 0 and not selection.get(IDENTITY_FIELDS[i - 1]):
            break
        options = unique_values_of(catalog, field, {k: selection[k] for k in IDENTITY_FIELDS[:i]})
        key = f"{prefix}_{field}"
        if st.session_state.get(key) not in options:
            st.session_state[key] = None
        selection[field] = st.selectbox(
            field.capitalize(), options, index=None, placeholder=f"Select {field}",
            key=key, on_change=clear_downstream, args=(prefix, field)
        )
    return selection


def spec_card(spec, unit):
    """Renders the specification summary of a selected racket."""
    if spec is None:
        st.caption("Select a racket to see its specifications.")
        return
    beam = "/".join(f"{b:g}" for b in spec.beam) or "-"
    tension_range = convert_tension_range(spec.tension_range, unit) if spec.tension_range else "-"
    st.markdown(f"""
    **{spec.label}**
    * Head Size: {spec.head_size:g} sq in | Pattern: {spec.pattern_key}
    * Stiffness: {spec.stiffness:g} RA | Swingweight: {_fmt(spec.swingweight)}
    * Weight: {_fmt(spec.weight, ' g')} | Balance: {_fmt(spec.balance, ' mm')} | Beam: {beam} mm
    * Recommended Tension: {tension_range} {unit}
    """)


def _fmt(value, suffix=""):
    return "-" if value is None else f"{value:g}{suffix}"
