"""HTTP API: decrypt-content, health and metrics.

Run with:
    uvicorn callguard.api.app:create_app --factory
"""
