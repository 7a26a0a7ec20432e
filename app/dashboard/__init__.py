"""Dashboard core — eligibility, affinity scoring, ranking, sessions and stats.

Pure, synchronous computation over fully materialised inputs.  The
aggregate entry point is :func:`app.dashboard.engine.compute_dashboard`.
"""
