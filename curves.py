"""
Closed-form lifecycle curves for the fiscal model.

Every component is a hand-tuned function of age and the parameter vector:
expenditure per person (education, healthcare, pensions, long-term care,
other transfers) and the tax contribution, which is negative because it is
paid by the individual. Nothing here is fitted to data.

The model is total: any numeric input gives a finite curve, and parameters are
not validated here (see ``SimParams.clamped`` for the UI-side bounds).
"""

import logging
from dataclasses import dataclass, fields

import numpy as np
import pandas as pd

from config import CURVE, DEFAULTS, MAX_AGE, MIN_AGE, PARAM_BOUNDS

logger = logging.getLogger(__name__)

AGES = np.arange(MIN_AGE, MAX_AGE + 1)  # 0..100


@dataclass(frozen=True)
class SimParams:
    retirement_age: int = DEFAULTS["retirement_age"]
    tax_pressure: float = 1.0     # multiplier on the tax peak
    pension_level: float = 1.0    # multiplier on the pension peak
    education_spend: float = 1.0  # multiplier on the education peak

    @classmethod
    def from_percent(cls, retirement_age, tax_pct, pension_pct, education_pct):
        """Build from slider values, where 100 means the base calibration."""
        return cls(
            retirement_age=int(retirement_age),
            tax_pressure=tax_pct / 100,
            pension_level=pension_pct / 100,
            education_spend=education_pct / 100,
        )

    @classmethod
    def defaults(cls):
        return cls.from_percent(
            DEFAULTS["retirement_age"],
            DEFAULTS["tax_pressure_pct"],
            DEFAULTS["pension_level_pct"],
            DEFAULTS["education_spend_pct"],
        )

    def as_percent(self) -> dict:
        return {
            "retirement_age": self.retirement_age,
            "tax_pressure_pct": self.tax_pressure * 100,
            "pension_level_pct": self.pension_level * 100,
            "education_spend_pct": self.education_spend * 100,
        }

    def clamped(self) -> "SimParams":
        """Return a copy with every field pulled inside the slider bounds."""
        pct = self.as_percent()
        for key, (lo, hi, _step) in PARAM_BOUNDS.items():
            pct[key] = min(max(pct[key], lo), hi)
        return SimParams.from_percent(
            pct["retirement_age"],
            pct["tax_pressure_pct"],
            pct["pension_level_pct"],
            pct["education_spend_pct"],
        )


@dataclass(frozen=True)
class AgeRecord:
    age: int
    education: float
    healthcare: float
    pension: float
    long_term_care: float
    other: float
    tax_contribution: float  # <= 0
    net_balance: float


SPEND_FIELDS = ("education", "healthcare", "pension", "long_term_care", "other")
RECORD_FIELDS = tuple(f.name for f in fields(AgeRecord))


def _gaussian(ages, peak, center, sd):
    return peak * np.exp(-((ages - center) ** 2) / (2 * sd ** 2))


# ---------- Per-component curves (vectorised over ages) ----------

def education_curve(ages, education_spend: float):
    raw = _gaussian(ages, CURVE["education_peak"] * education_spend,
                    CURVE["education_center"], CURVE["education_sd"])
    return np.where(raw < CURVE["education_floor"], 0.0, raw)


def healthcare_curve(ages):
    base = CURVE["health_base"] + CURVE["health_slope"] * (
        (ages - CURVE["health_center"]) ** 2 / CURVE["health_divisor"])
    return base + np.where(ages > CURVE["health_old_age"], CURVE["health_surcharge"], 0.0)


def pension_curve(ages, retirement_age: int, pension_level: float):
    peak_age = retirement_age + CURVE["pension_peak_offset"]
    bump = _gaussian(ages, CURVE["pension_peak"] * pension_level, peak_age, CURVE["pension_sd"])
    return np.where(ages >= retirement_age, bump, 0.0)


def long_term_care_curve(ages):
    growth = CURVE["ltc_scale"] * ((ages - CURVE["ltc_start"]) / CURVE["ltc_span"]) ** 2
    return np.where(ages > CURVE["ltc_start"], growth, 0.0)


def other_curve(ages, retirement_age: int):
    working = (ages > CURVE["other_start"]) & (ages < retirement_age)
    return np.where(working, float(CURVE["other_amount"]), 0.0)


def tax_curve(ages, retirement_age: int, tax_pressure: float):
    tax = _gaussian(ages, CURVE["tax_peak"] * tax_pressure, CURVE["tax_center"], CURVE["tax_sd"])
    return np.where(ages >= retirement_age, tax * CURVE["retiree_tax_factor"], tax)


# ---------- Full curve ----------

def generate_curve(params: SimParams, ages=AGES) -> tuple:
    """
    Returns one AgeRecord per age (0..100 by default), ascending.
    The tuple is a snapshot for ``params``; recompute rather than patch it.
    """
    ages = np.asarray(ages)
    education = education_curve(ages, params.education_spend)
    healthcare = healthcare_curve(ages)
    pension = pension_curve(ages, params.retirement_age, params.pension_level)
    ltc = long_term_care_curve(ages)
    other = other_curve(ages, params.retirement_age)
    tax = tax_curve(ages, params.retirement_age, params.tax_pressure)
    net = education + healthcare + pension + ltc + other + tax

    logger.debug("Generated %d age records for %s", len(ages), params)
    return tuple(
        AgeRecord(
            age=int(ages[i]),
            education=float(education[i]),
            healthcare=float(healthcare[i]),
            pension=float(pension[i]),
            long_term_care=float(ltc[i]),
            other=float(other[i]),
            tax_contribution=float(tax[i]),
            net_balance=float(net[i]),
        )
        for i in range(len(ages))
    )


def curve_frame(records) -> pd.DataFrame:
    """Tabular view of the records, plus the total expenditure per age."""
    df = pd.DataFrame([[getattr(r, name) for name in RECORD_FIELDS] for r in records],
                      columns=list(RECORD_FIELDS))
    df["total_spend"] = df[list(SPEND_FIELDS)].sum(axis=1)
    return df
