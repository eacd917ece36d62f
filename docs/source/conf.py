"""Sphinx configuration for the Urlkit documentation."""

import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

import urlkit  # noqa: E402  pylint: disable=wrong-import-position

project = "Urlkit"
author = "Urlkit contributors"
copyright = f"2026, {author}"  # pylint: disable=redefined-builtin
release = urlkit.__version__
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.doctest",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

source_suffix = {".rst": "restructuredtext", ".md": "markdown"}
exclude_patterns = ["_build"]

# Docstrings use Google style with ``Example::`` doctest blocks
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_use_rtype = False

autodoc_typehints = "description"
autodoc_member_order = "bysource"
autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
}

intersphinx_mapping = {"python": ("https://docs.python.org/3", None)}

myst_enable_extensions = ["colon_fence"]

html_theme = "furo"
html_title = f"Urlkit {release}"
