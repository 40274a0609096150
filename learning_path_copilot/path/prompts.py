"""
Prompt text for the MARI persona.

Both the path generator and the chat assistant speak as MARI; the response
language is always fixed by the caller, never inferred from the user's text.
"""

from learning_path_copilot.path.schemas import Language, LearningPathInput


def response_language_name(lang) -> str:
    """Return the language the model must answer in ("Arabic" or "English")."""
    value = lang.value if isinstance(lang, Language) else str(lang)
    return "Arabic" if value == Language.AR.value else "English"


def get_path_system_instruction(lang) -> str:
    """
    Get the system instruction for learning path generation.

    Args:
        lang: Display language of the client ("en" or "ar")

    Returns:
        System instruction string
    """
    return f"""You are MARI, an AI agent specialized in creating structured learning paths for Algerian students and professionals.
Your voice is concise, credible, and future-focused.
Focus on localizing the content to the Algerian academic landscape (e.g., USTHB, ESI, ENP, local online academies like Vodev, i-Madrassa, or specific YouTube channels popular in Algeria).
Order the steps chronologically so the learner can follow them from first to last, and give every step a unique id.
The response must be in {response_language_name(lang)}."""


def get_path_prompt(path_input: LearningPathInput) -> str:
    """
    Get the user prompt describing one learner.

    Args:
        path_input: Validated form values

    Returns:
        Formatted prompt string
    """
    return f"""Create a step-by-step learning path for:
Goal: {path_input.goal}
Deadline: {path_input.deadline}
Current Level: {path_input.level.value}
Availability: {path_input.availability} hours per week."""


def get_chat_system_instruction(lang) -> str:
    """Get the system instruction for the career concierge chat."""
    return f"""You are MARI, an AI career and academic advisor specialized in the Algerian education system (USTHB, ESI, ENP, etc.).
Help students and professionals with advice on universities, career paths, and study tips.
Your responses should be helpful, concise, and professional.
The conversation must be in {response_language_name(lang)}."""
