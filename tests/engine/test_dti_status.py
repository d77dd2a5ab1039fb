from decimal import Decimal

from src.engine.dti_status import dti_limits, evaluate_back_end_dti, evaluate_front_end_dti
from src.models.borrower import LoanType


class TestDtiLimits:
    def test_conventional(self):
        assert dti_limits(LoanType.CONVENTIONAL) == (Decimal("36"), Decimal("50"))
        assert dti_limits(LoanType.CONVENTIONAL, True) == (Decimal("36"), Decimal("50"))

    def test_fha(self):
        assert dti_limits(LoanType.FHA) == (Decimal("31"), Decimal("43"))
        assert dti_limits(LoanType.FHA, True) == (Decimal("31"), Decimal("57"))


class TestFrontEnd:
    def test_bands(self):
        conv = LoanType.CONVENTIONAL
        assert evaluate_front_end_dti(Decimal("30"), conv).status == "normal"
        assert evaluate_front_end_dti(Decimal("36"), conv).status == "normal"
        assert evaluate_front_end_dti(Decimal("40"), conv).status == "caution"
        assert evaluate_front_end_dti(Decimal("46"), conv).status == "warning"

    def test_fha_thresholds(self):
        assert evaluate_front_end_dti(Decimal("32"), LoanType.FHA).status == "caution"
        assert evaluate_front_end_dti(Decimal("47"), LoanType.FHA).status == "warning"

    def test_message(self):
        status = evaluate_front_end_dti(Decimal("40"), LoanType.CONVENTIONAL)
        assert status.message == "Housing ratio of 40.0% exceeds standard 36%"
        assert status.value == Decimal("40")

    def test_strong_factors_change_help(self):
        weak = evaluate_front_end_dti(Decimal("50"), LoanType.CONVENTIONAL)
        strong = evaluate_front_end_dti(Decimal("50"), LoanType.CONVENTIONAL, True)
        assert "strong compensating factors" in strong.help_text
        assert weak.help_text != strong.help_text


class TestBackEnd:
    def test_conventional_bands(self):
        conv = LoanType.CONVENTIONAL
        assert evaluate_back_end_dti(Decimal("45"), conv).status == "normal"
        assert evaluate_back_end_dti(Decimal("48"), conv).status == "caution"
        assert evaluate_back_end_dti(Decimal("52"), conv).status == "warning"
        assert evaluate_back_end_dti(Decimal("56"), conv).status == "exceeded"

    def test_fha_bands(self):
        assert evaluate_back_end_dti(Decimal("59"), LoanType.FHA).status == "warning"
        assert evaluate_back_end_dti(Decimal("59.5"), LoanType.FHA).status == "exceeded"

    def test_exceeded_message(self):
        status = evaluate_back_end_dti(Decimal("56"), LoanType.CONVENTIONAL)
        assert status.message == "Debt ratio of 56.0% exceeds maximum 55%"
