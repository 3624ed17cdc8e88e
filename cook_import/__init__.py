"""Import recipes from the web and convert them to Cooklang."""

from .errors import CookImportError
from .importer import RecipeImporter
from .models import Provider, RecipeData

__all__ = ["CookImportError", "Provider", "RecipeData", "RecipeImporter"]

__version__ = "0.1.0"
