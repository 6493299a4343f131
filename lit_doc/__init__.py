"""Lit-Doc.

A literate programming documentation generator that turns Lisp-family
source files into HTML pages, rendering comments as Markdown prose and
code as preformatted blocks.
"""

__version__ = "0.1.0"
