# SPDX-License-Identifier: MIT
# Copyright (c) 2026 PhantomMask Contributors

"""PhantomMask CLI - derive, sign, verify and self-test from the shell."""

from .main import app, main

__all__ = ["main", "app"]
