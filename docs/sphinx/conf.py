# Copyright 2026 TinyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for TinyLang documentation."""

project = "TinyLang"
author = "TinyLang Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
