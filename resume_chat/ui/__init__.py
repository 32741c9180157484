"""NiceGUI interface - thin visualization layer for the resume chat.

Responsibilities:
    - Header with the uploaded resume name
    - Resume upload drop zone and uploaded-file card
    - Message list with streaming updates and typing indicator
    - Input box with Enter-to-send

Contains no session logic. All state lives in ResumeChatController.
"""
