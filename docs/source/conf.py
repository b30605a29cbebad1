import os
import sys

# Put project root on sys.path so autodoc can import the package if needed
sys.path.insert(0, os.path.abspath("../.."))

project = "cleanmae"
author = "Takeshi Teshima"

extensions = [
    "autoapi.extension",
    "sphinx.ext.doctest",
    "sphinx.ext.napoleon",
    "myst_nb",
    "sphinx_copybutton",
]
templates_path = []
exclude_patterns = []

nb_execution_mode = "off"

html_theme = "sphinx_book_theme"
html_theme_options = {
    "path_to_docs": "docs/source",
}

myst_enable_extensions = [
    "deflist",
    "colon_fence",
    "dollarmath",
]

master_doc = "index"

# ---------------------------------------------------------------------------
# sphinx-autoapi: API reference for the `cleanmae` package
# ---------------------------------------------------------------------------
autoapi_type = "python"
autoapi_dirs = ["../../cleanmae"]

autoapi_ignore = [
    "**/tests/**",
    "**/__pycache__/**",
]

autodoc_typehints = "description"

autoapi_options = [
    "members",
    "undoc-members",
    "show-inheritance",
    "show-module-summary",
]

autoapi_python_class_content = "both"
