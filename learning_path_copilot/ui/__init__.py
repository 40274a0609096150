"""
Gradio user interface: form, results panel, chat and display strings.
"""
