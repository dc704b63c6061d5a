# logic.py
import logging
import math
import re

import numpy as np
import pandas as pd
from fpdf import FPDF

from constants import (
    KG_TO_LB, PATTERN_OPENNESS, DEFAULT_PATTERN_OPENNESS, OPENNESS_WEIGHT,
    STIFFNESS_BASELINE_RA, STIFFNESS_WEIGHT, DT_CALIBRATION,
    MIN_TENSION_LBS, MAX_TENSION_LBS, SEARCH_PRECISION_LBS, ROUNDING_STEP,
    PROFILE_RATIOS, ALTERNATIVE_OFFSETS_LBS,
)
from models import SelectionResult, TensionOutOfRangeError

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


# ==========================================================
# UNITS & ROUNDING
# ==========================================================
def lbs_to_kg(lbs):
    return lbs / KG_TO_LB


def kg_to_lbs(kg):
    return kg * KG_TO_LB


def to_display_unit(lbs, unit):
    """Converts an internal pound value into the displayed unit."""
    return lbs_to_kg(lbs) if unit == "kg" else lbs


def from_display_unit(value, unit):
    """Converts a value entered in the displayed unit back to pounds."""
    return kg_to_lbs(value) if unit == "kg" else value


def round_to_half(value):
    """Rounds to the nearest 0.5, halves going up."""
    return math.floor(value / ROUNDING_STEP + 0.5) * ROUNDING_STEP


def display_tension(lbs, unit):
    """Formats a pound value for display in the chosen unit, or '' when absent."""
    if lbs is None:
        return ""
    return f"{round_to_half(to_display_unit(lbs, unit)):.1f}"


def format_dt(dt):
    if dt is None:
        return ""
    return f"{dt:.1f}"


def parse_tension_input(text, unit):
    """
    Parses user-entered tension text into pounds.
    Anything without a leading number degrades to 0.0 so the form always renders.
    """
    match = _LEADING_NUMBER.match(str(text)) if text is not None else None
    if not match:
        logger.debug("Non-numeric tension input %r, falling back to 0", text)
        return 0.0
    return from_display_unit(float(match.group(0)), unit)


def convert_tension_range(range_text, unit):
    """Converts a recommended range such as '50-60' (lbs) into the display unit."""
    parts = str(range_text).split("-")
    try:
        bounds = [float(p) for p in parts]
    except ValueError:
        return range_text
    if unit != "kg":
        return range_text
    return "-".join(display_tension(b, unit) for b in bounds)


# ==========================================================
# DYNAMIC TENSION MODEL
# ==========================================================
def pattern_factor(spec):
    openness = PATTERN_OPENNESS.get(spec.pattern_key, DEFAULT_PATTERN_OPENNESS)
    return 1 - openness * OPENNESS_WEIGHT


def stiffness_factor(spec):
    return 1 + (spec.stiffness - STIFFNESS_BASELINE_RA) * STIFFNESS_WEIGHT


def estimate_dynamic_tension(mains, crosses, spec, reference_head_size):
    """
    Estimates the dynamic tension of a stringbed.

    Returns None when the racket spec or a positive reference head size is
    missing, so callers can leave the DT field empty.
    """
    if spec is None or reference_head_size is None or not reference_head_size > 0:
        return None
    if not spec.head_size > 0:
        logger.warning("Racket %s has no usable head size", spec.label)
        return None
    avg_tension = (float(mains) + float(crosses)) / 2
    head_factor = math.sqrt(reference_head_size / spec.head_size)
    return avg_tension * head_factor * pattern_factor(spec) * stiffness_factor(spec) * DT_CALIBRATION


def _unreachable_bound(target_dt, ratio, spec, reference_head_size):
    dt_low = estimate_dynamic_tension(MIN_TENSION_LBS, MIN_TENSION_LBS * ratio, spec, reference_head_size)
    dt_high = estimate_dynamic_tension(MAX_TENSION_LBS, MAX_TENSION_LBS * ratio, spec, reference_head_size)
    if target_dt < dt_low:
        return MIN_TENSION_LBS
    if target_dt > dt_high:
        return MAX_TENSION_LBS
    return None


def solve_mains_for_dt(target_dt, ratio, spec, reference_head_size, strict=False):
    """
    Finds the mains tension (lbs) reproducing target_dt on the given racket.

    Bisects mains over [10, 80] lbs with crosses at mains * ratio, keeps the
    midpoint with the smallest DT error and returns it rounded to 0.5 lbs.
    Unreachable targets saturate near a search bound unless strict is set,
    in which case TensionOutOfRangeError is raised.
    """
    if estimate_dynamic_tension(MIN_TENSION_LBS, MIN_TENSION_LBS * ratio, spec, reference_head_size) is None:
        raise ValueError("Cannot solve for tension without a racket spec and reference head size")

    low, high = MIN_TENSION_LBS, MAX_TENSION_LBS
    best_tension, best_error = None, math.inf
    iterations = 0
    while high - low > SEARCH_PRECISION_LBS:
        mid = (low + high) / 2
        dt = estimate_dynamic_tension(mid, mid * ratio, spec, reference_head_size)
        error = abs(dt - target_dt)
        if error < best_error:
            best_tension, best_error = mid, error
        if dt > target_dt:
            high = mid
        else:
            low = mid
        iterations += 1

    result = round_to_half(best_tension)
    logger.debug("Solved %.3f lbs for DT %.3f on %s after %d iterations (error %.4f)",
                 best_tension, target_dt, spec.label, iterations, best_error)

    bound = _unreachable_bound(target_dt, ratio, spec, reference_head_size)
    if bound is not None:
        logger.warning("DT %.2f unreachable on %s; saturated at %.1f lbs", target_dt, spec.label, result)
        if strict:
            raise TensionOutOfRangeError(target_dt, bound, result)
    return result


def profile_ratio(profile):
    try:
        return PROFILE_RATIOS[profile]
    except KeyError:
        raise ValueError(f"Unknown tension profile {profile!r}; expected one of {', '.join(PROFILE_RATIOS)}") from None


def compute_for_selection(reference, reference_spec, new_spec, profile):
    """Recomputes reference DT and the suggested tensions for the new racket."""
    ratio = profile_ratio(profile)
    if reference_spec is None:
        return SelectionResult()

    reference_head_size = reference_spec.head_size
    reference_dt = estimate_dynamic_tension(reference.mains, reference.crosses, reference_spec, reference_head_size)
    if new_spec is None or reference_dt is None or \
            estimate_dynamic_tension(reference.mains, reference.crosses, new_spec, reference_head_size) is None:
        return SelectionResult(reference_dt=reference_dt)

    out_of_range = False
    try:
        mains = solve_mains_for_dt(reference_dt, ratio, new_spec, reference_head_size, strict=True)
    except TensionOutOfRangeError as exc:
        out_of_range = True
        mains = exc.tension
    crosses = round_to_half(mains * ratio)
    return SelectionResult(
        reference_dt=reference_dt,
        suggested_mains=mains,
        suggested_crosses=crosses,
        new_dt=estimate_dynamic_tension(mains, crosses, new_spec, reference_head_size),
        out_of_range=out_of_range,
    )


# ==========================================================
# ALTERNATIVES & REPORT
# ==========================================================
def alternative_settings(mains, ratio, spec, reference_head_size, target_dt, unit):
    """Tabulates DT for mains tensions around the suggestion."""
    candidates = mains + np.array(ALTERNATIVE_OFFSETS_LBS)
    candidates = candidates[(candidates >= MIN_TENSION_LBS) & (candidates <= MAX_TENSION_LBS)]
    rows = []
    for m in candidates:
        crosses = round_to_half(m * ratio)
        dt = estimate_dynamic_tension(m, crosses, spec, reference_head_size)
        rows.append({
            f"Mains ({unit})": display_tension(m, unit),
            f"Crosses ({unit})": display_tension(crosses, unit),
            "DT": format_dt(dt),
            "DT Delta": f"{dt - target_dt:+.1f}",
        })
    return pd.DataFrame(rows)


def generate_tension_pdf(summary, alternatives, unit):
    """Constructs a binary PDF report for download."""
    pdf = FPDF()
    pdf.add_page()
    pdf.set_font("Helvetica", "B", 16)
    pdf.cell(0, 10, "Tennis String Tension Report", new_x="LMARGIN", new_y="NEXT", align="C")
    pdf.ln(6)

    # Section 1: Reference
    pdf.set_font("Helvetica", "B", 12)
    pdf.cell(0, 10, "1. Reference Racket", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", size=10)
    pdf.cell(0, 8, f"Racket: {summary['reference_racket']}", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 8, f"Tension: {summary['reference_mains']} / {summary['reference_crosses']} {unit}", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 8, f"Estimated DT: {summary['reference_dt']}", new_x="LMARGIN", new_y="NEXT")

    # Section 2: Suggestion
    pdf.ln(4)
    pdf.set_font("Helvetica", "B", 12)
    pdf.cell(0, 10, "2. New Racket", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", size=10)
    pdf.cell(0, 8, f"Racket: {summary['new_racket']}", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 8, f"Profile: {summary['profile'].capitalize()}", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 8, f"Suggested Tension: {summary['suggested_mains']} / {summary['suggested_crosses']} {unit}", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 8, f"Estimated DT: {summary['new_dt']}", new_x="LMARGIN", new_y="NEXT")

    # Section 3: Alternatives
    if alternatives is not None and not alternatives.empty:
        pdf.ln(4)
        pdf.set_font("Helvetica", "B", 12)
        pdf.cell(0, 10, "3. Alternative Settings", new_x="LMARGIN", new_y="NEXT")
        pdf.set_font("Helvetica", size=10)
        for row in alternatives.itertuples(index=False):
            pdf.cell(0, 8, f"{row[0]} / {row[1]} {unit}: DT {row[2]} ({row[3]})", new_x="LMARGIN", new_y="NEXT")

    pdf.ln(8)
    pdf.set_font("Helvetica", "I", 9)
    pdf.multi_cell(0, 5, "Disclaimer: Dynamic tension is a heuristic estimate. String material, gauge, "
                         "stringing machine and technique all change the real stringbed feel.")
    return bytes(pdf.output())
