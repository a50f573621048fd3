"""Shared pytest fixtures for smart-money-planner tests.

The fixtures follow the data flow through the package:

    pasted text → DraftTransaction → classified draft → learned category table

Small hand-written tables are used where a test depends on exact scores;
the stock tables are used where a test exercises realistic input.
"""

import datetime
from decimal import Decimal

import pytest

from smart_money_planner import (
    DEFAULT_CATEGORIES,
    DEFAULT_SUBCATEGORIES,
    PlannerConfig,
    TransactionAssistant,
)
from smart_money_planner.models import (
    Category,
    DraftTransaction,
    Subcategory,
    TransactionSource,
    TransactionType,
)


# =============================================================================
# Pasted Text Fixtures (Stage 1: raw input)
# =============================================================================


@pytest.fixture
def kakao_payment_text() -> str:
    """A typical KakaoPay notification as copied from a chat room."""
    return "[카카오페이]\n스타벅스 강남점 4,500원 결제 완료\n2024-03-05 12:31"


@pytest.fixture
def receipt_text() -> str:
    """A multi-line card receipt with a discount line and a total."""
    return "GS25 역삼점\n2024/03/05\n상품 합계 12,000원\n할인 -2,000원\n결제금액 10,000원"


@pytest.fixture
def salary_text() -> str:
    """An income notification from a bank app."""
    return "3월 25일 급여 입금 3,200,000원"


# =============================================================================
# Category Table Fixtures
# =============================================================================


@pytest.fixture
def food() -> Category:
    return Category(
        id="food",
        name="식비",
        type=TransactionType.EXPENSE,
        keywords=["카페", "커피", "점심"],
        color="#FF6B6B",
    )


@pytest.fixture
def shopping() -> Category:
    return Category(
        id="shopping",
        name="쇼핑",
        type=TransactionType.EXPENSE,
        keywords=["쿠팡", "온라인"],
        color="#45B7D1",
    )


@pytest.fixture
def entertainment() -> Category:
    """Shares the "카페" keyword with food, for tie-break tests."""
    return Category(
        id="entertainment",
        name="문화생활",
        type=TransactionType.EXPENSE,
        keywords=["영화", "카페"],
        color="#FFEAA7",
    )


@pytest.fixture
def categories(food, shopping, entertainment) -> list[Category]:
    return [food, shopping, entertainment]


@pytest.fixture
def subcategories() -> list[Subcategory]:
    return [
        Subcategory(id="food-snack", name="간식/음료", parent_category_id="food", keywords=["커피", "음료"]),
        Subcategory(id="food-lunch", name="점심식사", parent_category_id="food", keywords=["점심"]),
        Subcategory(id="shopping-online", name="온라인쇼핑", parent_category_id="shopping", keywords=["쿠팡"]),
    ]


@pytest.fixture
def default_categories() -> list[Category]:
    """The stock tables (shared module objects, never mutate them)."""
    return DEFAULT_CATEGORIES


@pytest.fixture
def default_subcategories() -> list[Subcategory]:
    return DEFAULT_SUBCATEGORIES


# =============================================================================
# Draft Transaction Fixtures (Stage 2: parsed)
# =============================================================================


@pytest.fixture
def unclassified_draft() -> DraftTransaction:
    """A receipt draft that has not been classified yet."""
    return DraftTransaction(
        date=datetime.datetime(2024, 3, 5),
        type=TransactionType.EXPENSE,
        amount=Decimal("4500"),
        description="동네 커피 가게",
        source=TransactionSource.RECEIPT,
        original_text="동네 커피 가게 4,500원",
    )


@pytest.fixture
def classified_draft(unclassified_draft) -> DraftTransaction:
    """The same draft after the user filed it under food."""
    return unclassified_draft.model_copy(update={"category": "food"})


# =============================================================================
# Assistant Fixtures
# =============================================================================


@pytest.fixture
def assistant() -> TransactionAssistant:
    return TransactionAssistant(debug=False)


@pytest.fixture
def relabelling_assistant() -> TransactionAssistant:
    """Assistant that labels unrecognised chat messages as kakao."""
    return TransactionAssistant(
        PlannerConfig(kakao_fallback_source=TransactionSource.KAKAO),
        debug=True,
    )
