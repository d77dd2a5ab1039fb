from dataclasses import replace
from decimal import Decimal

from src.engine.calculator import calculate_mortgage_results
from src.engine.scenarios import alternative_scenarios, lower_ltv_option, next_fico_band
from src.models.borrower import LoanType


class TestNextFicoBand:
    def test_conventional(self):
        assert next_fico_band(720, LoanType.CONVENTIONAL) == 740
        assert next_fico_band(500, LoanType.CONVENTIONAL) == 620
        assert next_fico_band(620, LoanType.CONVENTIONAL) == 640

    def test_top_band(self):
        assert next_fico_band(740, LoanType.CONVENTIONAL) is None
        assert next_fico_band(790, LoanType.FHA) is None

    def test_fha_low_bands(self):
        assert next_fico_band(560, LoanType.FHA) == 580
        assert next_fico_band(600, LoanType.FHA) == 620

    def test_fha_below_floor(self):
        assert next_fico_band(450, LoanType.FHA) is None


class TestLowerLtvOption:
    def test_snaps_down(self):
        assert lower_ltv_option(Decimal("98")) == Decimal("97")
        assert lower_ltv_option(Decimal("96.5")) == Decimal("95")
        assert lower_ltv_option(Decimal("80")) == Decimal("75")
        assert lower_ltv_option(Decimal("65")) == Decimal("60")

    def test_lowest_band(self):
        assert lower_ltv_option(Decimal("60")) is None
        assert lower_ltv_option(Decimal("50")) is None


class TestAlternativeScenarios:
    def test_order_and_drivers(self, canonical_profile, canonical_loan):
        scenarios = alternative_scenarios(
            canonical_profile, canonical_loan, Decimal("40"), Decimal("290000"),
        )
        assert [s.name for s in scenarios] == [
            "Switch to FHA loan",
            "Improve your FICO score by 20 points",
            "Increase down payment by 5%",
        ]
        switch, fico, ltv = scenarios
        assert switch.loan_type is LoanType.FHA
        assert fico.fico_change == 20
        assert fico.loan_type is LoanType.CONVENTIONAL
        assert ltv.ltv_change == Decimal("-5")

    def test_alternate_loan_type_recomputed(self, canonical_profile, canonical_loan):
        switch = alternative_scenarios(
            canonical_profile, canonical_loan, Decimal("40"), Decimal("290000"),
        )[0]
        # 43 base + 2 (FICO 720-759); FHA gets no LTV bonus
        assert switch.max_dti == Decimal("45")
        # 6.75 + 0 (FHA 720-739) + 0.125 (LTV 80)
        assert switch.adjusted_interest_rate == Decimal("6.875")
        assert switch.increase == switch.max_home_price - Decimal("290000")
        assert switch.eligible

    def test_fico_scenario_only_moves_rate(self, canonical_profile, canonical_loan):
        fico = alternative_scenarios(
            canonical_profile, canonical_loan, Decimal("40"), Decimal("290000"),
        )[1]
        assert fico.max_dti == Decimal("40")
        assert fico.adjusted_interest_rate == Decimal("6.875")
        assert fico.ltv_change == Decimal("0")

    def test_top_fico_omits_fico_scenario(self, canonical_profile, canonical_loan):
        profile = replace(canonical_profile, fico_score=760)
        scenarios = alternative_scenarios(profile, canonical_loan, Decimal("43"), Decimal("300000"))
        assert len(scenarios) == 2
        assert all(s.fico_change == 0 for s in scenarios)
        assert scenarios[1].name.startswith("Increase down payment")

    def test_lowest_ltv_omits_ltv_scenario(self, canonical_profile, canonical_loan):
        loan = replace(canonical_loan, ltv=Decimal("60"))
        scenarios = alternative_scenarios(canonical_profile, loan, Decimal("41"), Decimal("300000"))
        assert len(scenarios) == 2
        assert scenarios[1].name.startswith("Improve your FICO score")

    def test_fha_ltv_step_reprices_mip(self, canonical_profile, fha_loan):
        ltv = alternative_scenarios(canonical_profile, fha_loan, Decimal("45"), Decimal("250000"))[-1]
        assert ltv.ltv_change == Decimal("-1.5")
        assert ltv.name == "Increase down payment by 1.5%"

    def test_low_fico_switch_to_conventional_not_offered(self, canonical_profile, fha_loan):
        profile = replace(canonical_profile, fico_score=600)
        switch = alternative_scenarios(profile, fha_loan, Decimal("43"), Decimal("200000"))[0]
        assert switch.loan_type is LoanType.CONVENTIONAL
        assert not switch.eligible

    def test_fha_gives_more_dti_headroom_for_weak_borrower(self, canonical_profile, canonical_loan):
        """640 FICO at 95% LTV: FHA allows more DTI than conventional."""
        profile = replace(canonical_profile, fico_score=640)
        loan = replace(canonical_loan, ltv=Decimal("95"))
        result = calculate_mortgage_results(profile, loan)
        switch = result.scenarios[0]
        assert result.max_dti == Decimal("36")
        assert switch.loan_type is LoanType.FHA
        assert switch.max_dti == Decimal("43")
        assert switch.max_dti > result.max_dti
