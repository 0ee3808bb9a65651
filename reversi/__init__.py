"""Reversi engine.

Game logic and a depth-limited heuristic minimax opponent for Reversi
(Othello), with stage-adaptive evaluation weights and corner-aware pruning.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "0.1.0"
