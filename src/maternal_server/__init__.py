"""maternal_server — FastAPI REST API for the maternal-care scoring SDK.

Exposes the risk and eligibility scorers as stateless HTTP endpoints,
plus read-only reference data (scheme catalog, questionnaire).
"""
