"""
Learning Path Copilot - Main Application Entry Point

This module serves as the primary entry point for the application.
It initializes the Gradio UI and launches the web interface.
"""
import logging

from learning_path_copilot.config import settings as config
from learning_path_copilot.ui.gradio_app import create_gradio_ui


def configure_logging(level: str = None):
    """Set up root logging once for the whole process."""
    logging.basicConfig(
        level=getattr(logging, (level or config.LOG_LEVEL).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def main():
    """
    Main entry point for Learning Path Copilot.

    Initializes the Gradio interface and launches the web server.
    """
    configure_logging()
    demo = create_gradio_ui()
    print("\n🚀 Launching MARI Learning Path Copilot...")

    server_name = config.GRADIO_SERVER_NAME
    server_port = config.GRADIO_SERVER_PORT

    print(f"📍 Server will be available at http://{server_name}:{server_port}")
    if not config.get_google_api_key():
        print("⚠ GOOGLE_API_KEY is not set; generation and chat requests will fail until it is provided")

    # Pass theme and css to launch() for Gradio 6.0+
    demo.launch(
        server_name=server_name,
        server_port=server_port,
        theme=demo.theme,
        css=demo.css
    )


if __name__ == "__main__":
    main()
