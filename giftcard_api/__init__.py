"""Gift card validation service (FastAPI + JSON file storage)."""
