"""
Learning Path Copilot - MARI, an AI agent for structured learning in Algeria

This package turns a learner's goal, deadline, level and weekly availability
into a structured learning path generated by Google Gemini:
- path: request building, structured-output generation, parsing and the
  client-side view-state (progress tracking)
- chat: the career concierge conversation
- ui: Gradio-based user interface (English and Arabic)
- config: environment-driven settings

Usage:
    # Run the Gradio UI
    python -m learning_path_copilot.app.main

    # Or generate a path directly
    from learning_path_copilot.path import PathGenerator, LearningPathInput
    path = await PathGenerator().generate(LearningPathInput(goal="Learn Data Structures"), "en")
"""

__version__ = "0.1.0"
__author__ = "MARI Team"

__all__ = ["__version__", "__author__"]
