from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Annotated, List, Optional, Dict, Union, Literal

PAYMENT_TYPE = "payment"


# ===== SPLIT POLICIES =====
class EqualAll(BaseModel):
    """Split evenly across every group member"""
    kind: Literal["equal_all"] = "equal_all"

class EqualSubset(BaseModel):
    """Split evenly across the listed members only"""
    kind: Literal["equal_subset"] = "equal_subset"
    member_ids: List[str]

class CustomShares(BaseModel):
    """Fixed per-member amounts, already in ILS"""
    kind: Literal["custom"] = "custom"
    shares: Dict[str, float]

SplitPolicy = Annotated[
    Union[EqualAll, EqualSubset, CustomShares],
    Field(discriminator="kind"),
]

SPLIT_KINDS = ("equal_all", "equal_subset", "custom")


def coerce_split(raw):
    """Map a ledger's raw splitAmong value onto a tagged split policy"""
    if raw is None:
        return {"kind": "equal_all"}
    if isinstance(raw, BaseModel):
        return raw
    if isinstance(raw, dict):
        if raw.get("kind") in SPLIT_KINDS:
            return raw
        return {"kind": "custom", "shares": raw}
    if isinstance(raw, (list, tuple, set, frozenset)):
        return {"kind": "equal_subset", "member_ids": list(raw)}
    return raw


# ===== LEDGER RECORDS =====
class LedgerModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Member(LedgerModel):
    name: Optional[str] = None


class Payment(LedgerModel):
    id: Optional[str] = None
    amount: Optional[float] = None
    amount_ils: Optional[float] = Field(None, alias="amountILS")
    currency: Optional[str] = None
    paid_by: Optional[str] = Field(None, alias="paidBy")
    paid_to: Optional[str] = Field(None, alias="paidTo")
    note: Optional[str] = None

    @property
    def normalized_amount(self) -> float:
        if self.amount_ils is not None:
            return self.amount_ils
        if self.amount is not None:
            return self.amount
        return 0.0


class Expense(Payment):
    description: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = None
    split: SplitPolicy = Field(default_factory=EqualAll, alias="splitAmong")

    @field_validator("split", mode="before")
    @classmethod
    def parse_split(cls, value):
        return coerce_split(value)

    @property
    def is_payment(self) -> bool:
        return self.type == PAYMENT_TYPE


class GroupRecord(LedgerModel):
    name: Optional[str] = None
    members: Optional[Dict[str, Member]] = None
    expenses: Optional[Dict[str, Expense]] = None
    payments: Optional[Dict[str, Payment]] = None


# ===== RESULTS =====
class Transfer(LedgerModel):
    debtor: str = Field(..., alias="from")
    creditor: str = Field(..., alias="to")
    amount: float

class BalancesResult(BaseModel):
    balances: Dict[str, float]

class TransfersRequest(BaseModel):
    balances: Dict[str, float]

class TransfersResult(BaseModel):
    transfers: List[Transfer]

class SettlementResult(BaseModel):
    balances: Dict[str, float]
    transfers: List[Transfer]

class SpendingSummary(BaseModel):
    total_spent: float
    spending_by_category: Dict[str, float]
    expense_count: int

class ConversionResult(BaseModel):
    amount: float
    currency: Optional[str]
    amount_ils: float
    supported: bool

class CurrencyTable(BaseModel):
    reference_currency: str
    rates: Dict[str, float]
