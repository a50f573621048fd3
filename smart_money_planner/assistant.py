import argparse
import json
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from smart_money_planner.classify import (
    MAX_LEARNED_KEYWORDS,
    MAX_SUGGESTIONS,
    learn_from_user_classification,
    match_category,
    suggest_categories,
)
from smart_money_planner.defaults import SAMPLE_CATEGORIES
from smart_money_planner.models import (
    Category,
    DraftTransaction,
    SampleCategories,
    Subcategory,
    TransactionSource,
)
from smart_money_planner.parsing import parse_kakao_message, parse_text_to_transaction

logger = logging.getLogger(__name__)


@dataclass
class PlannerConfig:
    """Configuration for a TransactionAssistant.

    Attributes:
        max_suggestions: Maximum number of categories suggested while typing.
        max_learned_keywords: Maximum number of keywords learned per correction.
        kakao_fallback_source: Source tag for chat messages that none of the
                    chat patterns recognised. When None (default) the generic
                    parser's tag (``receipt``) is kept; set it to
                    ``TransactionSource.KAKAO`` to label such drafts by how
                    they were entered.

    Example:
        config = PlannerConfig(
            max_suggestions=5,
            kakao_fallback_source=TransactionSource.KAKAO,
        )
        assistant = TransactionAssistant(config)
    """
    max_suggestions: int = MAX_SUGGESTIONS
    max_learned_keywords: int = MAX_LEARNED_KEYWORDS
    kakao_fallback_source: TransactionSource | None = None

    def __post_init__(self):
        if self.max_suggestions < 1:
            raise ValueError("max_suggestions must be at least 1")
        if self.max_learned_keywords < 1:
            raise ValueError("max_learned_keywords must be at least 1")


class TransactionAssistant:
    """Drafts, classifies and learns from transactions for a host application.

    The assistant holds no category data: the host passes its current tables
    on every call and persists whatever table ``learn()`` returns.
    """

    def __init__(
        self,
        config: PlannerConfig | None = None,
        debug: bool = False,
    ):
        """
        Initialize the assistant.

        Args:
            config: A PlannerConfig; defaults are used when omitted.
            debug: Log each parsing and classification decision (default: False).
        """
        self.config = config or PlannerConfig()
        self.debug = debug

    def _log(self, msg: str, *args) -> None:
        if self.debug:
            logger.debug(msg, *args)

    def parse(self, text: str, kakao: bool = False) -> DraftTransaction:
        """Parse pasted text with the chat or the generic parser."""
        if not kakao:
            draft = parse_text_to_transaction(text)
            self._log("Parsed receipt text: amount=%s description=%r", draft.amount, draft.description)
            return draft

        draft = parse_kakao_message(text)
        fallback_source = self.config.kakao_fallback_source
        if draft.source != TransactionSource.KAKAO and fallback_source is not None:
            self._log("No chat pattern matched, labelling fallback draft as %s", fallback_source.value)
            draft = draft.model_copy(update={"source": fallback_source})
        self._log("Parsed chat message: amount=%s description=%r", draft.amount, draft.description)
        return draft

    def draft_from_text(
        self,
        text: str,
        categories: Sequence[Category],
        subcategories: Sequence[Subcategory] = (),
        kakao: bool = False,
    ) -> DraftTransaction:
        """Parse pasted text and pre-fill its category from the whole text.

        Matching runs on the raw text rather than the extracted description,
        so cues outside the merchant name still count.
        """
        draft = self.parse(text, kakao=kakao)
        result = match_category(text, categories, subcategories)
        if not result.matched:
            self._log("No category matched pasted text")
            return draft

        self._log(
            "Pasted text matched category %s / subcategory %s",
            result.category.id,
            result.subcategory.id if result.subcategory else None,
        )
        return draft.model_copy(update={
            "category": result.category.id,
            "subcategory": result.subcategory.id if result.subcategory else None,
        })

    def auto_classify(
        self,
        transaction: DraftTransaction,
        categories: Sequence[Category],
        subcategories: Sequence[Subcategory] = (),
    ) -> DraftTransaction:
        """Classify a transaction by its description if it has no category yet.

        Returns a copy; the transaction passed in is never modified. Already
        classified and unmatched transactions come back unchanged.
        """
        if transaction.category:
            return transaction

        result = match_category(transaction.description, categories, subcategories)
        if not result.matched:
            self._log("Left %r unclassified", transaction.description)
            return transaction

        self._log("Classified %r as %s", transaction.description, result.category.id)
        return transaction.model_copy(update={
            "category": result.category.id,
            "subcategory": result.subcategory.id if result.subcategory else None,
        })

    def suggest(self, description: str, categories: Sequence[Category]) -> list[Category]:
        """Suggest categories for a description being typed."""
        if not description:
            return []
        return suggest_categories(description, categories, limit=self.config.max_suggestions)

    def learn(self, transaction: DraftTransaction, categories: list[Category]) -> list[Category]:
        """Learn keywords from a transaction the user has classified.

        Returns ``categories`` itself when nothing changed, so the host can
        skip persisting with an identity check.
        """
        if not transaction.category:
            return categories

        updated = learn_from_user_classification(
            transaction.description,
            transaction.category,
            categories,
            max_keywords=self.config.max_learned_keywords,
        )
        if updated is categories:
            self._log("Nothing new to learn from %r", transaction.description)
        else:
            self._log("Learned keywords for %s from %r", transaction.category, transaction.description)
        return updated


def load_tables(path: Path) -> SampleCategories:
    """Load category tables from a JSON file in the host's storage format.

    The file holds ``categories`` and ``subcategories`` lists with camelCase
    keys, as the host persists them.
    """
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"expected a JSON object in {path}, got {type(raw).__name__}")
    raw.setdefault("name", path.stem)
    return SampleCategories.model_validate(raw)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the command-line interface.

    Drafts and classifies pasted text and prints the draft as JSON:

        smart-money-planner "스타벅스 4,500원 결제"
        pbpaste | smart-money-planner --kakao
    """
    parser = argparse.ArgumentParser(
        prog="smart-money-planner",
        description="Turn pasted receipt or chat text into a classified draft transaction.",
    )
    parser.add_argument("text", nargs="?", help="text to parse (default: read stdin)")
    parser.add_argument("--kakao", action="store_true", help="parse as a KakaoTalk payment message")
    parser.add_argument("--categories", type=Path, help="JSON file with categories and subcategories")
    parser.add_argument("--debug", action="store_true", help="log parsing decisions to stderr")
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    tables = SAMPLE_CATEGORIES
    if args.categories is not None:
        try:
            tables = load_tables(args.categories)
        except (OSError, ValueError, ValidationError) as e:
            print(f"Could not load categories from {args.categories}: {e}", file=sys.stderr)
            return 1

    text = args.text if args.text is not None else sys.stdin.read()
    assistant = TransactionAssistant(debug=args.debug)
    draft = assistant.draft_from_text(
        text, tables.categories, tables.subcategories, kakao=args.kakao
    )
    print(draft.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
