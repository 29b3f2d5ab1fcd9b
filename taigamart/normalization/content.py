"""Normalizers for content-page records (posts, FAQs, jobs, help, press, tracking)."""

from typing import Any, Optional

from ..common.text_utils import strip_html
from ..models import Faq, HelpArticle, Job, OrderTracking, Post, PressItem
from .values import as_mapping, first_text


def _text(record: dict, key: str, default: str) -> str:
    return strip_html(first_text(record.get(key))) or default


def normalize_post(raw: Any) -> Post:
    record = as_mapping(raw)
    defaults = Post()
    return Post(
        title=_text(record, 'title', defaults.title),
        author=_text(record, 'author', defaults.author),
        published_at=first_text(record.get('published_at'), default=defaults.published_at),
        excerpt=_text(record, 'excerpt', defaults.excerpt),
        slug=first_text(record.get('slug')),
    )


def normalize_faq(raw: Any) -> Faq:
    record = as_mapping(raw)
    defaults = Faq()
    return Faq(
        question=_text(record, 'question', defaults.question),
        answer=_text(record, 'answer', defaults.answer),
    )


def normalize_job(raw: Any) -> Job:
    record = as_mapping(raw)
    defaults = Job()
    return Job(
        title=_text(record, 'title', defaults.title),
        location=_text(record, 'location', defaults.location),
        description=_text(record, 'description', defaults.description),
    )


def normalize_help_article(raw: Any) -> HelpArticle:
    record = as_mapping(raw)
    defaults = HelpArticle()
    return HelpArticle(
        title=_text(record, 'title', defaults.title),
        content=_text(record, 'content', defaults.content),
    )


def normalize_press_item(raw: Any) -> PressItem:
    record = as_mapping(raw)
    defaults = PressItem()
    return PressItem(
        title=_text(record, 'title', defaults.title),
        published_at=first_text(record.get('published_at'), default=defaults.published_at),
        excerpt=_text(record, 'excerpt', defaults.excerpt),
    )


def normalize_order_tracking(raw: Any, order_number: str = "") -> Optional[OrderTracking]:
    """
    Build the tracking view from an unwrapped order record.

    Returns:
        OrderTracking, or None when there is no record to show
    """
    if not isinstance(raw, dict) or not raw:
        return None
    defaults = OrderTracking()
    return OrderTracking(
        order_number=first_text(raw.get('order_number'), default=order_number),
        status=first_text(raw.get('status'), default=defaults.status),
        eta=first_text(raw.get('eta'), raw.get('estimated_delivery'), default=defaults.eta),
        updated_at=first_text(raw.get('updated_at'), default=defaults.updated_at),
    )
