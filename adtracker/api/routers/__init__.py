"""
AdTracker API Routers.

Modules:
    ads     – Ad CRUD (delete cascades to revenue)
    revenue – Revenue entry CRUD
    stats   – Totals and per-ad CTR
    health  – Health / liveness checks
"""
