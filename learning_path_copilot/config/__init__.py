"""
Configuration package for Learning Path Copilot.

Usage:
    from learning_path_copilot.config import settings as config
    config.LLM_MODEL
"""
