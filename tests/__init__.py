"""Test package for Resume Chat.

Structure:
    - unit/: Assembler, composer, controller, responders, parsing, formatting
    - integration/: Upload and WebSocket endpoints through the real app

PDFs are generated in memory by the ``make_pdf`` fixture. No API keys needed.
Leverages pytest with pytest-check for soft assertions.
"""
