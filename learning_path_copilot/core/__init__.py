"""
Core helpers shared by the path generator and the chat session.
"""
