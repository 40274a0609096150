"""
Utility functions for formatting learning paths for display in the Gradio UI.
"""
from typing import Dict, Iterable, List, Tuple

from learning_path_copilot.path.schemas import LearningPath, Step
from learning_path_copilot.path.view_state import LearningPathViewState, PathStatus
from learning_path_copilot.ui.localization import get_strings


def format_step_card(step: Step, index: int, completed: bool, lang) -> str:
    """
    Format a single step as a markdown block.

    Args:
        step: Step to render
        index: 1-based position in the timeline
        completed: Whether the learner ticked this step
        lang: Display language

    Returns:
        Markdown string
    """
    t = get_strings(lang)
    tag = t["universityModulesTag"] if step.is_university_module else t["partneredAcademyTag"]
    marker = "✅" if completed else "⬜"
    title = f"~~{step.title}~~" if completed else step.title

    parts = [f"#### {marker} {index}. {title}"]
    parts.append(f"`{tag}` · **{step.academy_name}** · ⏱ {step.duration}")
    parts.append("")
    parts.append(step.description)
    if step.course_link:
        parts.append("")
        parts.append(f"[{t['courseLinkLabel']} ↗]({step.course_link})")
    return "\n".join(parts)


def format_steps_markdown(path: LearningPath, completed: Iterable[str], lang) -> str:
    """Format the whole timeline in curriculum order."""
    t = get_strings(lang)
    done = set(completed)
    markdown_parts = [f"### {t['stepsTitle']}", ""]
    for index, step in enumerate(path.steps, start=1):
        markdown_parts.append(format_step_card(step, index, step.id in done, lang))
        markdown_parts.append("")
    return "\n".join(markdown_parts)


def format_progress_markdown(progress: int, completed: int, total: int, lang) -> str:
    t = get_strings(lang)
    filled = progress // 10
    bar = "█" * filled + "░" * (10 - filled)
    return f"### {t['progressTitle']}\n\n**{progress}%** `{bar}` {completed}/{total}"


def format_results_markdown(state: LearningPathViewState, lang) -> str:
    """
    Render the results panel for the current view-state.

    Empty state before the first path, a loading message while a request is in
    flight, and the summary/timeline/closing sentence once a path is present.
    A failed request keeps showing the previous path (the error is rendered
    separately).
    """
    t = get_strings(lang)
    if state.status == PathStatus.LOADING:
        return f"⏳ *{t['generatingText']}*"
    if state.path is None:
        return f"⚡ *{t['noData']}*"

    path = state.path
    markdown_parts = [f"## {path.summary}", ""]
    markdown_parts.append(
        format_progress_markdown(state.progress, state.completed_count, state.total_steps, lang)
    )
    markdown_parts.append("")
    markdown_parts.append(format_steps_markdown(path, state.completed_steps, lang))
    markdown_parts.append(f"> *\"{path.forward_looking_sentence}\"*")
    return "\n".join(markdown_parts)


def format_error_markdown(state: LearningPathViewState) -> str:
    if state.status == PathStatus.FAILED and state.error:
        return f"❌ **{state.error}**"
    return ""


def step_choices(path: LearningPath) -> List[Tuple[str, str]]:
    """(label, value) pairs for the completion checkbox group, in step order."""
    return [(f"{index}. {step.title}", step.id) for index, step in enumerate(path.steps, start=1)]


def format_chat_history(messages) -> List[Dict[str, str]]:
    """Convert ChatMessages to Gradio's messages format ("model" -> "assistant")."""
    return [
        {"role": "user" if msg.role == "user" else "assistant", "content": msg.text}
        for msg in messages
    ]
