"""Mini README: Presentation collaborators for the bill batch composer.

Exports the FastAPI application factory plus the option catalogue and view
helpers it renders with.
"""

from .options import Option, OptionCatalogue
from .presenter import render_entries, render_form
from .web_app import create_application

__all__ = ["Option", "OptionCatalogue", "create_application", "render_entries", "render_form"]
