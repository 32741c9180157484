"""Unit tests for individual components in isolation.

Coverage:
    - client/: Streaming assembly, input rules, controller lifecycle
    - agent/: Responder configuration and streaming
    - parsing/: Resume text extraction
    - ui/: Bubble formatting

Fakes stand in for the chat connection and upload transport.
"""
