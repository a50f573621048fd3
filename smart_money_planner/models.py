"""Data models for categories and transactions.

The models mirror the stages a pasted text goes through:

    text → DraftTransaction → Transaction

Field names are snake_case in Python; the camelCase keys used by the host's
stored JSON (``parentCategoryId``, ``originalText`` ...) are accepted and
emitted through aliases.
"""

import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class TransactionType(str, Enum):
    """Polarity of a transaction or category."""
    INCOME = "income"
    EXPENSE = "expense"


class TransactionSource(str, Enum):
    """How a transaction entered the ledger."""
    MANUAL = "manual"
    RECEIPT = "receipt"
    KAKAO = "kakao"  # KakaoTalk payment notification


class _HostModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Category(_HostModel):
    """Top-level classification bucket.

    Keywords are matched as case-insensitive substrings. Their order is the
    insertion order: learned keywords are appended at the end.
    """
    id: str
    name: str
    type: TransactionType
    keywords: list[str] = Field(default_factory=list)
    color: str = ""
    icon: str | None = None


class Subcategory(_HostModel):
    """Classification bucket scoped under a single parent category."""
    id: str
    name: str
    parent_category_id: str
    keywords: list[str] = Field(default_factory=list)


class DraftTransaction(_HostModel):
    """Transaction produced by parsing, before the user confirms it."""
    date: datetime.datetime
    type: TransactionType = TransactionType.EXPENSE
    amount: Decimal = Decimal("0")
    description: str = ""
    category: str = ""
    subcategory: str | None = None
    memo: str | None = None
    source: TransactionSource = TransactionSource.MANUAL
    original_text: str | None = None

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v):
        """Ensure amount is a non-negative decimal."""
        # Convert via string to preserve precision for floats
        try:
            val = Decimal(str(v)) if isinstance(v, (str, int, float)) else Decimal(v)
        except (InvalidOperation, TypeError, ValueError) as e:
            raise ValueError(f"invalid amount: {v!r}") from e
        if not val.is_finite():
            raise ValueError("amount must be a finite number")
        if val < 0:
            raise ValueError("amount must not be negative")
        return val

    def to_transaction(self, id: str | None = None) -> "Transaction":
        """Confirm the draft, assigning a millisecond timestamp id when none is given."""
        if id is None:
            id = str(int(datetime.datetime.now().timestamp() * 1000))
        return Transaction(id=id, **self.model_dump(exclude={"id"}))


class Transaction(DraftTransaction):
    """A confirmed transaction as stored by the host."""
    id: str


class CategoryMatch(BaseModel):
    """Result of matching text against the category tables.

    Both fields are None when nothing matched; that is a valid outcome.
    """
    category: Category | None = None
    subcategory: Subcategory | None = None

    @property
    def matched(self) -> bool:
        return self.category is not None


class CategoryStat(_HostModel):
    """Usage of one category across a list of transactions."""
    category_id: str
    count: int = 0
    total_amount: Decimal = Decimal("0")


class SampleCategories(_HostModel):
    """A named, ready-to-use set of category tables."""
    name: str
    description: str = ""
    categories: list[Category] = Field(default_factory=list)
    subcategories: list[Subcategory] = Field(default_factory=list)
