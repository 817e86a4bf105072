"""
HTTP surface for the mensaje action.

- server:    FastAPI application factory
- routes:    GET/POST/OPTIONS handlers for the action endpoint
- responses: JSON response builder and CORS header sets
"""
