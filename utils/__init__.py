# Utility modules for Formulary
from .forms import safe_float, safe_int, parse_date, optional_positive
from .sanitizer import sanitize_text, sanitize_name, sanitize_email
from .logging_setup import configure_logging
