"""
Scripture Insights backend.

FastAPI service that personalizes scripture study content (backstory,
symbolism, interpretation, poems, stories, verse of the day) with Gemini.
"""
