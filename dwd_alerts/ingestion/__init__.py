"""
ingestion — Fetching and decoding the DWD warnings feed.

Sub-modules:
    transport        — single HTTP GET (httpx)
    envelope         — strips the ``warnWetter.loadWarnings(...);`` wrapper
    schemas          — pydantic models of the wire JSON
    warning_service  — the full fetch → parse → map pipeline
"""
