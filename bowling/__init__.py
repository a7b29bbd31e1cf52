"""
Ten-pin bowling scoring engine.

Scores a single player's game from per-attempt pin counts, applying strike,
spare and last-frame bonus rules.
"""
