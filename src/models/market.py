"""Market data supplied by the external rate/tax provider."""

from dataclasses import dataclass
from decimal import Decimal

from src.models.borrower import LoanType

_FIELDS = (
    "conventional_interest_rate",
    "fha_interest_rate",
    "property_tax_rate",
    "property_insurance_annual",
)


@dataclass(frozen=True)
class MarketData:
    conventional_interest_rate: Decimal | None = None  # Percent
    fha_interest_rate: Decimal | None = None  # Percent
    property_tax_rate: Decimal | None = None  # Annual percent of home value
    property_insurance_annual: Decimal | None = None

    def rate_for(self, loan_type: LoanType) -> Decimal | None:
        if loan_type is LoanType.FHA:
            return self.fha_interest_rate
        return self.conventional_interest_rate

    def to_dict(self) -> dict[str, str | None]:
        out: dict[str, str | None] = {}
        for name in _FIELDS:
            value = getattr(self, name)
            out[name] = str(value) if value is not None else None
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "MarketData":
        return cls(**{
            name: (Decimal(str(data[name])) if data.get(name) is not None else None)
            for name in _FIELDS
        })
