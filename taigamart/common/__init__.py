# Common utilities
from .config_loader import Settings, load_config, load_settings
from .log_config import setup_logging
from .text_utils import (
    calculate_discount,
    format_price,
    get_image_url,
    slugify_name,
    strip_html,
    truncate_text,
)
