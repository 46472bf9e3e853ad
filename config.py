APP_NAME = "Fiscal Lifecycle 2050"
SUBTITLE = "Interactive NTA-style model"

# Simulated ages, inclusive on both ends
MIN_AGE = 0
MAX_AGE = 100

# Slider defaults (percentages are relative to the base calibration, 100 = base)
DEFAULTS = {
    "retirement_age": 65,
    "tax_pressure_pct": 100,
    "pension_level_pct": 100,
    "education_spend_pct": 100,
}

# (min, max, step) for each slider
PARAM_BOUNDS = {
    "retirement_age": (60, 75, 1),
    "tax_pressure_pct": (50, 150, 5),
    "pension_level_pct": (50, 150, 5),
    "education_spend_pct": (0, 200, 5),
}

# Calibration constants for the closed-form curves (not user-tunable).
# Amplitudes are annual amounts per person at ratio 1.0.
CURVE = {
    # Education: gaussian bump around school age
    "education_peak": 2800,
    "education_center": 10,
    "education_sd": 8,
    "education_floor": 10,        # raw values below this are zeroed

    # Healthcare: U-shaped baseline plus an old-age step
    "health_base": 500,
    "health_slope": 30,
    "health_center": 30,
    "health_divisor": 45,
    "health_old_age": 80,         # surcharge applies strictly above this age
    "health_surcharge": 1500,

    # Pensions: gaussian whose centre follows the retirement age
    "pension_peak": 17000,
    "pension_peak_offset": 13,
    "pension_sd": 15,

    # Long-term care: quadratic growth after the threshold, no cap
    "ltc_start": 75,
    "ltc_scale": 3000,
    "ltc_span": 25,

    # Other working-age transfers
    "other_amount": 1200,
    "other_start": 20,

    # Taxes (negative = paid by the individual)
    "tax_peak": -12500,
    "tax_center": 45,
    "tax_sd": 14,
    "retiree_tax_factor": 0.35,
}

CURRENCY = "€"
