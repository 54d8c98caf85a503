"""Routing — route tree localization.

Overrides are indexed in one read-only pass, then the tree is rewritten
into one route per (page x active locale).
"""
