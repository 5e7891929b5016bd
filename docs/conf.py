from __future__ import annotations

import importlib.metadata

project = "fastwavelets"
copyright = "2026, fastwavelets developers"
author = "fastwavelets developers"
version = release = importlib.metadata.version("fastwavelets")

extensions = [
    "myst_parser",
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx.ext.napoleon",
    "sphinx_autodoc_typehints",
    "sphinx_copybutton",
    "sphinx_gallery.gen_gallery",
]

source_suffix = [".rst", ".md"]
exclude_patterns = [
    "_build",
    "**.ipynb_checkpoints",
    "Thumbs.db",
    ".DS_Store",
    ".env",
    ".venv",
]

html_theme = "furo"

myst_enable_extensions = [
    "colon_fence",
]

nitpick_ignore = [
    ("py:class", "optional"),
    ("py:class", "array_like"),
    ("py:class", '"fast"'),
    ("py:class", '"packet"'),
    ("py:class", '{"fast"'),
    ("py:class", '"packet"}'),
    ("py:class", "DecompositionLedger"),
    ("py:class", "MODWTCoefficients"),
    ("py:class", "EgyptianSegmentation"),
]

always_document_param_types = True

# sphinx.ext.intersphinx
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "matplotlib": ("https://matplotlib.org/stable/", None),
    "torch": ("https://pytorch.org/docs/stable/", None),
}

# sphinx_copybutton
copybutton_prompt_text = ">>> "

# sphinx_gallery.gen_gallery
sphinx_gallery_conf = {
    "examples_dirs": "../examples",  # path to your example scripts
    "gallery_dirs": "auto_examples",  # path to where to save gallery generated output
    "within_subsection_order": "FileNameSortKey",
}
