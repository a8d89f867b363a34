"""
Start the Scripture Insights backend locally with auto-reload.

Reads configuration from .env (see scripture_backend/config.py); at minimum
GOOGLE_API_KEY must be set for the generation endpoints to work.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Scripture Insights Backend")
    print("=" * 60)
    print()
    print("API Endpoints:")
    print("   - Health Check:    GET  http://localhost:8000/health")
    print("   - Context:         POST http://localhost:8000/api/generate-context")
    print("   - Imagery:         POST http://localhost:8000/api/generate-imagery")
    print("   - Interpretation:  POST http://localhost:8000/api/generate-interpretation")
    print("   - Poem:            POST http://localhost:8000/api/generate-poem")
    print("   - Story:           POST http://localhost:8000/api/generate-story")
    print("   - Verse:           POST http://localhost:8000/api/generate-verse")
    print("   - API Docs:             http://localhost:8000/docs")
    print()
    print("Test with curl:")
    print('   curl -X POST "http://localhost:8000/api/generate-verse" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"source": "BookOfMormon"}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "scripture_backend.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
