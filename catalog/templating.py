"""
Jinja2 environment shared by the page handlers and the error handlers.

Templates live in catalog/templates and extend ``layout.html``.
Autoescaping is on for ``.html`` templates, so submitted values are
escaped when they are rendered back into a form.
"""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from catalog.constants import AUTHOR_LIST_URL, CATALOG_PREFIX
from catalog.settings import app_settings

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.globals.update(
    app_title=app_settings.APP_TITLE,
    catalog_prefix=CATALOG_PREFIX,
    author_list_url=AUTHOR_LIST_URL,
)
