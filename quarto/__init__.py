# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Quarto board game engine with a minimax-tree AI opponent."""

__version__ = "1.0.0"
