from dataclasses import dataclass


@dataclass(frozen=True)
class AggregateResult:
    total_net_balance: float
    is_sustainable: bool


def aggregate(records) -> AggregateResult:
    """
    Naive lifecycle total: sums net_balance over every age as if one person
    lived all of them. No discounting, no mortality or cohort weighting.
    Sustainable means the total is strictly negative (net contributor).
    """
    total = 0.0
    for r in records:
        total += r.net_balance
    return AggregateResult(total_net_balance=total, is_sustainable=total < 0)


def verdict(result: AggregateResult) -> str:
    # A total of exactly zero reads as surplus even though it is not sustainable.
    return "DEFICIT" if result.total_net_balance > 0 else "SURPLUS"


def breakeven_ages(records) -> list:
    """Ages at which net_balance switches sign relative to the previous age."""
    out = []
    prev = None
    for r in records:
        if prev is not None and (prev.net_balance < 0) != (r.net_balance < 0):
            out.append(r.age)
        prev = r
    return out
