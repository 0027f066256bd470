# Copyright 2026 TinyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""TinyLang - lexical analysis for the Tiny teaching language."""
