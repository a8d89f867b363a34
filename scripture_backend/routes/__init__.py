"""
FastAPI routers for all API endpoints.

- health: GET /health
- generation: POST /api/generate-{context,imagery,interpretation,poem,story}
- verse: POST /api/generate-verse
"""
