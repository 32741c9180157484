"""Integration tests for components working together.

Coverage:
    - POST /upload with generated PDFs
    - WS /ws streaming with the end token
    - Client upload transport against the in-process app
"""
