# catalog.py
import logging

import pandas as pd
import streamlit as st

from constants import RACKET_DB_PATH, IDENTITY_FIELDS, NUMERIC_FIELDS
from models import RacketSpec

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["head_size", "mains", "crosses", "stiffness"]


@st.cache_data
def load_racket_database(path=RACKET_DB_PATH):
    """Loads and cleans the bundled racket database from CSV."""
    try:
        df = pd.read_csv(path, dtype={c: str for c in IDENTITY_FIELDS + ["beam", "tension_range"]})
    except Exception:
        logger.exception("Could not read racket database at %s", path)
        return pd.DataFrame(columns=IDENTITY_FIELDS + NUMERIC_FIELDS)

    for c in NUMERIC_FIELDS:
        df[c] = pd.to_numeric(df[c], errors='coerce')
    for c in IDENTITY_FIELDS:
        df[c] = df[c].fillna("").str.strip()

    incomplete = df[REQUIRED_FIELDS].isna().any(axis=1)
    if incomplete.any():
        logger.warning("Dropping %d racket(s) with missing specs", int(incomplete.sum()))
        df = df[~incomplete]
    degenerate = df["head_size"] <= 0
    if degenerate.any():
        logger.warning("Dropping %d racket(s) with a non-positive head size", int(degenerate.sum()))
        df = df[~degenerate]
    logger.info("Loaded %d rackets from %s", len(df), path)
    return df.sort_values(IDENTITY_FIELDS).reset_index(drop=True)


def _optional(value):
    return None if pd.isna(value) else float(value)


def row_to_spec(row):
    beam = row.get("beam")
    beam_values = () if pd.isna(beam) else tuple(float(b) for b in str(beam).split("/") if b.strip())
    tension_range = row.get("tension_range")
    return RacketSpec(
        brand=row["brand"],
        product=row["product"],
        version=row["version"],
        variant=row["variant"],
        head_size=float(row["head_size"]),
        mains=int(row["mains"]),
        crosses=int(row["crosses"]),
        stiffness=float(row["stiffness"]),
        weight=_optional(row.get("weight")),
        balance=_optional(row.get("balance")),
        beam=beam_values,
        swingweight=_optional(row.get("swingweight")),
        tension_range="" if pd.isna(tension_range) else str(tension_range),
    )


def find_by_tuple(catalog, selection):
    """Returns the RacketSpec matching brand/product/version/variant, or None."""
    if catalog.empty or any(not selection.get(k) for k in IDENTITY_FIELDS):
        return None
    mask = pd.Series(True, index=catalog.index)
    for k in IDENTITY_FIELDS:
        mask &= catalog[k] == selection[k]
    matches = catalog[mask]
    if matches.empty:
        return None
    return row_to_spec(matches.iloc[0])


def unique_values_of(catalog, field, partial_filter=None):
    """Distinct values of a field among rackets matching the filled-in filter entries."""
    if catalog.empty:
        return []
    df = catalog
    for k, v in (partial_filter or {}).items():
        if v:
            df = df[df[k] == v]
    return list(df[field].unique())
