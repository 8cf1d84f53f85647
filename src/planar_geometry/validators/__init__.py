"""Opt-in well-formedness checks.

Geometry operations never validate their input. Callers that want to
reject malformed rings before computing with them run these once:
- rings: closure, vertex count, zero area, hole placement
"""
