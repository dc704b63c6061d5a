"""Data models for the string tension calculator."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RacketSpec:
    """Specification of a single racket from the bundled catalog."""
    brand: str
    product: str
    version: str
    variant: str
    head_size: float          # sq in
    mains: int                # pattern, e.g. 16 of 16x19
    crosses: int              # pattern, e.g. 19 of 16x19
    stiffness: float          # RA
    weight: Optional[float] = None       # g, strung
    balance: Optional[float] = None      # mm
    beam: tuple = ()                     # mm, one value per section
    swingweight: Optional[float] = None
    tension_range: str = ''              # lbs, e.g. "50-60"

    @property
    def pattern_key(self):
        return f"{self.mains}x{self.crosses}"

    @property
    def label(self):
        return f"{self.version} {self.brand} {self.product} {self.variant}".strip()


@dataclass(frozen=True)
class TensionPair:
    """Mains and crosses tension, always in pounds."""
    mains: float
    crosses: float


@dataclass(frozen=True)
class SelectionResult:
    """Outcome of one recompute of the form."""
    reference_dt: Optional[float] = None
    suggested_mains: Optional[float] = None
    suggested_crosses: Optional[float] = None
    new_dt: Optional[float] = None
    out_of_range: bool = False


class TensionOutOfRangeError(ValueError):
    """Raised when no tension inside the search bounds reproduces a target DT."""

    def __init__(self, target_dt, bound, tension):
        self.target_dt = target_dt
        self.bound = bound
        self.tension = tension
        super().__init__(
            f"Target DT {target_dt:.1f} is unreachable; search saturated at {tension:.1f} lbs (bound {bound:.0f} lbs)"
        )
