from .assistant import PlannerConfig, TransactionAssistant  # noqa: F401

# Text parsing: pasted receipt/chat text -> draft transaction
from .parsing import (
    determine_transaction_type,
    extract_amount,
    extract_date,
    extract_description,
    parse_kakao_message,
    parse_text_to_transaction,
)

# Keyword classification
from .classify import (
    get_category_stats,
    keyword_score,
    learn_from_user_classification,
    match_category,
    suggest_categories,
)

from .defaults import DEFAULT_CATEGORIES, DEFAULT_SUBCATEGORIES, SAMPLE_CATEGORIES

from .models import (
    Category,
    CategoryMatch,
    CategoryStat,
    DraftTransaction,
    SampleCategories,
    Subcategory,
    Transaction,
    TransactionSource,
    TransactionType,
)

__all__ = [
    # Host-facing workflow
    "PlannerConfig",
    "TransactionAssistant",
    # Parsing
    "determine_transaction_type",
    "extract_amount",
    "extract_date",
    "extract_description",
    "parse_kakao_message",
    "parse_text_to_transaction",
    # Classification
    "get_category_stats",
    "keyword_score",
    "learn_from_user_classification",
    "match_category",
    "suggest_categories",
    # Stock tables
    "DEFAULT_CATEGORIES",
    "DEFAULT_SUBCATEGORIES",
    "SAMPLE_CATEGORIES",
    # Models
    "Category",
    "CategoryMatch",
    "CategoryStat",
    "DraftTransaction",
    "SampleCategories",
    "Subcategory",
    "Transaction",
    "TransactionSource",
    "TransactionType",
]
