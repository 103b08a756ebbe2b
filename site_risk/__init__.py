"""Site planning-risk rules engine.

Evaluates a fixed catalogue of proximity and overlap rules against precomputed
spatial analysis results and aggregates the triggered rules into per-discipline
and site-wide risk ratings.
"""
