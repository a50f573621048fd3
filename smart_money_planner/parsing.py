"""Turn pasted receipt and chat text into draft transactions.

Every extractor is an ordered list of patterns tried in priority order; the
first pattern that produces a result wins. Extractors never raise: they return
None (amount, date) or a sensible default (type, description) and the parsers
fill in the rest.

Example:

    from smart_money_planner import parse_kakao_message

    draft = parse_kakao_message("스타벅스 4,500원 결제")
    # => DraftTransaction(description="스타벅스", amount=Decimal("4500"), source="kakao", ...)
"""

import datetime
import re
from decimal import Decimal, InvalidOperation

from smart_money_planner.models import DraftTransaction, TransactionSource, TransactionType

# A comma-grouped number (1,234,567) or a plain digit run (10000)
NUMBER = r"(?:\d{1,3}(?:,\d{3})+|\d+)"
MONEY = rf"(?<!\d)({NUMBER}(?:\.\d{{2}})?)"

# Name-like text before a cue: Hangul, word characters and whitespace,
# starting at a word boundary and never on a digit
NAME = r"(?<![\w,.])(?!\d)[가-힣\w\s]+?"
# Amount digits must not continue a preceding number.
WHOLE_NUMBER = rf"(?<![\d,])(?P<amount>{NUMBER})"

AMOUNT_PATTERNS = (
    re.compile(rf"{MONEY}\s*원"),  # 1,000원, 1000원
    re.compile(rf"{MONEY}\s*₩"),  # 1,000₩
    re.compile(rf"{MONEY}\s*W"),  # 1,000W
    re.compile(rf"{MONEY}\s*$"),  # trailing number
    re.compile(MONEY),  # any number
)

YEAR_FIRST_MARKER = r"(\d{4})"

DATE_PATTERNS = (
    re.compile(r"(\d{4})[-/](\d{1,2})[-/](\d{1,2})"),  # 2024-01-15, 2024/01/15
    re.compile(r"(\d{1,2})[-/](\d{1,2})[-/](\d{4})"),  # 01-15-2024, 01/15/2024
    re.compile(r"(\d{1,2})[-/](\d{1,2})"),  # 01-15 (current year)
    re.compile(r"(\d{1,2})월\s*(\d{1,2})일"),  # 1월 15일
    re.compile(r"(\d{1,2})\.(\d{1,2})\.(\d{4})"),  # 01.15.2024
    re.compile(r"(\d{1,2})\.(\d{1,2})"),  # 01.15 (current year)
)

INCOME_KEYWORDS = ("입금", "수입", "급여", "월급", "보너스", "용돈", "선물", "환급", "적립")
EXPENSE_KEYWORDS = ("출금", "지출", "결제", "구매", "이용", "이용료", "수수료", "요금")

DESCRIPTION_PATTERNS = (
    re.compile(rf"({NAME})\s*(?<![\d,])\d+[,\d]*원"),  # merchant + amount
    re.compile(rf"({NAME})\s*결제"),  # merchant + payment
    re.compile(rf"({NAME})\s*이용"),  # merchant + usage
    re.compile(rf"({NAME})\s*구매"),  # merchant + purchase
)

KAKAO_PATTERNS = (
    re.compile(rf"(?P<name>{NAME})\s*{WHOLE_NUMBER}\s*원\s*결제"),  # merchant + amount + payment
    re.compile(rf"{WHOLE_NUMBER}\s*원\s*(?P<name>[가-힣\w\s]*?)\s*결제"),  # amount + merchant + payment
    re.compile(rf"(?P<name>{NAME})\s*{WHOLE_NUMBER}\s*원"),  # merchant + amount
)


def _to_decimal(raw: str) -> Decimal | None:
    cleaned = re.sub(r"[^\d.,]", "", raw).replace(",", "")
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        return None


def extract_amount(text: str) -> Decimal | None:
    """Extract the transaction amount from free text.

    Patterns are tried in priority order (원, ₩, W, trailing number, any
    number) and only the first pattern with a match is used. When it matches
    several numbers the largest one is returned, on the assumption that it is
    the total.

    Args:
        text: Receipt or chat text

    Returns:
        The amount as a Decimal, or None if the text contains no number.
    """
    for pattern in AMOUNT_PATTERNS:
        amounts = [
            value
            for m in pattern.finditer(text)
            if (value := _to_decimal(m.group(1))) is not None
        ]
        if amounts:
            return max(amounts)
    return None


def _build_date(pattern: re.Pattern, matched: str, today: datetime.date) -> datetime.datetime | None:
    parts = [int(p) for p in re.findall(r"\d+", matched)]
    year = today.year
    if len(parts) == 3:
        if pattern.pattern.startswith(YEAR_FIRST_MARKER):
            year, month, day = parts
        else:
            month, day, year = parts
    elif len(parts) == 2:
        month, day = parts
    else:
        return None

    try:
        return datetime.datetime(year, month, day)
    except ValueError:
        return None


def extract_date(text: str) -> datetime.datetime | None:
    """Extract a calendar date from free text.

    Dates without a year (``3/5``, ``3월 5일``, ``3.5``) fall in the current
    year. A three-number date is read year first only when its pattern starts
    with the four-digit year group (``2024-03-05``); ``03-05-2024`` and
    ``03.05.2024`` take the year last. A pattern that matches an impossible
    date such as ``13/45`` is skipped and the next pattern is tried.

    Args:
        text: Receipt or chat text

    Returns:
        A datetime at midnight, or None if no pattern yields a valid date.
    """
    today = datetime.date.today()
    for pattern in DATE_PATTERNS:
        m = pattern.search(text)
        if m is None:
            continue
        if (found := _build_date(pattern, m.group(0), today)) is not None:
            return found
    return None


def determine_transaction_type(text: str) -> TransactionType:
    """Decide income vs. expense from keyword cues, defaulting to expense."""
    lowered = text.lower()
    if any(keyword in lowered for keyword in INCOME_KEYWORDS):
        return TransactionType.INCOME
    if any(keyword in lowered for keyword in EXPENSE_KEYWORDS):
        return TransactionType.EXPENSE
    return TransactionType.EXPENSE


def extract_description(text: str) -> str:
    """Extract the merchant name or a short description.

    Falls back to the first non-empty line, then to the whole text.
    """
    for pattern in DESCRIPTION_PATTERNS:
        m = pattern.search(text)
        if m and m.group(1).strip():
            return m.group(1).strip()

    lines = [line for line in text.split("\n") if line.strip()]
    if lines:
        return lines[0].strip()
    return text.strip()


def parse_text_to_transaction(text: str) -> DraftTransaction:
    """Parse receipt (or any pasted) text into a draft transaction.

    Missing amounts become 0 and missing dates become now.
    """
    return DraftTransaction(
        date=extract_date(text) or datetime.datetime.now(),
        type=determine_transaction_type(text),
        amount=extract_amount(text) or Decimal("0"),
        description=extract_description(text),
        source=TransactionSource.RECEIPT,
        original_text=text,
    )


def parse_kakao_message(text: str) -> DraftTransaction:
    """Parse a KakaoTalk payment notification into a draft transaction.

    Three chat patterns are tried in order:
    - merchant, amount원, 결제
    - amount원, merchant, 결제
    - merchant, amount원

    The description is always the merchant capture, whatever its position in
    the pattern. A blank merchant (``"10,000원 결제"``) falls back to
    :func:`extract_description` on the whole message. The amount is read from
    the matched part only, so numbers elsewhere in the message (card numbers,
    balances) are ignored. When no chat pattern matches the generic parser's
    result is returned as-is, including its ``source=receipt`` tag.
    """
    for pattern in KAKAO_PATTERNS:
        m = pattern.search(text)
        if m is None:
            continue

        return DraftTransaction(
            date=extract_date(text) or datetime.datetime.now(),
            type=determine_transaction_type(text),
            amount=extract_amount(m.group(0)) or Decimal("0"),
            description=m.group("name").strip() or extract_description(text),
            source=TransactionSource.KAKAO,
            original_text=text,
        )

    return parse_text_to_transaction(text)
