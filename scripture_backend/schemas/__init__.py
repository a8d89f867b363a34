"""
Pydantic schemas for API request and response validation.

Request models accept camelCase keys from the web client; response models
serialize by alias so the client receives camelCase as well.
"""
