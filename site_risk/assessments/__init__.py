"""Discipline assessment implementations.

Each module in this package implements one discipline following the pattern:
- Constructor: __init__(analysis, config)
- Run method: run() -> DisciplineAssessment
"""
