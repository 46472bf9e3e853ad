"""
Tests for scenarios.py (what-if comparisons).

Run with:
    pytest test_scenarios.py -v
"""

import pytest

from curves import SimParams
from scenarios import WHAT_IFS, clone_params, compare


class TestCloneParams:

    def test_overrides_one_field(self):
        p = clone_params(SimParams.defaults(), retirement_age=70)
        assert p == SimParams(70, 1.0, 1.0, 1.0)

    def test_original_untouched(self):
        base = SimParams.defaults()
        clone_params(base, tax_pressure=2.0)
        assert base.tax_pressure == 1.0

    def test_unknown_field_raises(self):
        with pytest.raises(ValueError, match="retire_age"):
            clone_params(SimParams.defaults(), retire_age=70)


class TestCompare:

    def test_default_variants(self):
        res = compare(SimParams.defaults())
        assert list(res) == ["Current"] + [name for name, _ in WHAT_IFS]

    def test_current_run_matches_input(self):
        base = SimParams(68, 1.2, 0.8, 1.0)
        p, records, _ = compare(base, [])["Current"]
        assert p == base
        assert len(records) == 101

    def test_later_retirement_variant(self):
        res = compare(SimParams.defaults())
        p, records, _ = res["Retire at 70"]
        assert p.retirement_age == 70
        assert all(r.pension == 0.0 for r in records if r.age < 70)

    def test_higher_taxes_improve_balance(self):
        res = compare(SimParams.defaults())
        assert res["Taxes at 150%"][2].total_net_balance < res["Current"][2].total_net_balance

    def test_higher_pensions_worsen_balance(self):
        res = compare(SimParams.defaults())
        assert res["Pensions at 150%"][2].total_net_balance > res["Current"][2].total_net_balance

    def test_custom_variants(self):
        res = compare(SimParams.defaults(), [("No school", {"education_spend": 0.0})])
        assert list(res) == ["Current", "No school"]
        assert all(r.education == 0.0 for r in res["No school"][1])
