import logging
from dataclasses import asdict, fields

from balance import aggregate
from curves import SimParams, generate_curve

logger = logging.getLogger(__name__)

# name -> overrides applied on top of the current parameters
WHAT_IFS = [
    ("Retire at 70", {"retirement_age": 70}),
    ("Pensions at 150%", {"pension_level": 1.5}),
    ("Taxes at 150%", {"tax_pressure": 1.5}),
]


def clone_params(params: SimParams, **overrides) -> SimParams:
    known = {f.name for f in fields(SimParams)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ValueError(f"Unknown parameter(s): {', '.join(unknown)}")
    base = asdict(params)
    base.update(overrides)
    return SimParams(**base)


def compare(params: SimParams, variants: list[tuple[str, dict]] = None):
    """
    variants: list of (name, overrides-dict); defaults to WHAT_IFS
    returns: dict name -> (params, records, AggregateResult), current run first
    """
    variants = WHAT_IFS if variants is None else variants
    res = {}
    for name, edits in [("Current", {})] + list(variants):
        p = clone_params(params, **edits)
        records = generate_curve(p)
        res[name] = (p, records, aggregate(records))
    logger.debug("Compared %d scenarios against %s", len(res), params)
    return res
