"""
scoring/ — Validation and scoring core

Modules:
    utils.py            - Decimal utilities
    score_parser.py     - SCORES string -> ordered list of Decimals
    validator.py        - Fail-fast validation of raw exam input
    stats_engine.py     - Count, extrema, sum, average, population std dev
    scoring_policy.py   - Final score with bonus, upper clamp, PASS/FAIL
"""
