"""
Content page view-models (blog, careers, FAQ, help, press, order tracking).

Defaults are the placeholder texts shown when the backend omits a field.
"""

from dataclasses import dataclass


@dataclass
class Post:
    """Blog post summary."""
    title: str = "Untitled"
    author: str = "Team"
    published_at: str = "Recently"
    excerpt: str = "Read more in full article."
    slug: str = ""


@dataclass
class Faq:
    question: str = "Question"
    answer: str = "Answer will be available soon."


@dataclass
class Job:
    """Open position on the careers page."""
    title: str = "Role"
    location: str = "Remote"
    description: str = "Details available upon request."


@dataclass
class HelpArticle:
    title: str = "Article"
    content: str = "Details available."


@dataclass
class PressItem:
    title: str = "Update"
    published_at: str = "Recently"
    excerpt: str = "Details available."


@dataclass
class OrderTracking:
    """Result of an order-number lookup."""
    order_number: str = ""
    status: str = "Unknown"
    eta: str = "—"
    updated_at: str = "—"
