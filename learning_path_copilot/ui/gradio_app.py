import gradio as gr
from pydantic import ValidationError
from learning_path_copilot.chat.widget import ChatWidget
from learning_path_copilot.path.generator import PathGenerator
from learning_path_copilot.path.schemas import LearningPathInput, ProficiencyLevel
from learning_path_copilot.path.view_state import LearningPathViewState
from learning_path_copilot.ui.localization import get_strings, is_rtl
from learning_path_copilot.ui.path_formatter import (
    format_chat_history,
    format_error_markdown,
    format_results_markdown,
    step_choices,
)
from learning_path_copilot.ui.css import custom_css
from learning_path_copilot.config import settings as config
import logging

logger = logging.getLogger(__name__)

LANGUAGE_CHOICES = [("English", "en"), ("العربية", "ar")]

TOGGLE_DARK_MODE_JS = "() => { document.body.classList.toggle('dark'); }"

TYPING_INDICATOR = "..."


def format_header(lang) -> str:
    t = get_strings(lang)
    return f"# {t['title']}\n{t['subtitle']}"


def level_choices(lang):
    t = get_strings(lang)
    return [(t["levels"][level.value], level.value) for level in ProficiencyLevel]


def describe_validation_error(error: ValidationError) -> str:
    """First validation problem as a one-line message for the error banner."""
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"])
    return f"{field}: {first['msg']}" if field else first["msg"]


def render_path_outputs(state: LearningPathViewState, lang):
    """Results panel, error banner, checklist and button for a view-state."""
    t = get_strings(lang)
    if state.path is not None:
        checklist = gr.update(
            choices=step_choices(state.path),
            value=[step_id for step_id in state.path.step_ids() if state.is_completed(step_id)],
            visible=not state.is_loading,
            label=t["completedLabel"],
        )
    else:
        checklist = gr.update(choices=[], value=[], visible=False)

    button = gr.update(
        value=t["generatingText"] if state.is_loading else t["generateButton"],
        interactive=not state.is_loading,
    )
    return (
        format_results_markdown(state, lang),
        format_error_markdown(state),
        checklist,
        button,
        state,
    )


def create_gradio_ui(generator: PathGenerator = None):
    generator = generator or PathGenerator()
    default_lang = config.DEFAULT_LANGUAGE
    t = get_strings(default_lang)

    async def generate_handler(goal, deadline, level, availability, lang, state):
        """Validate the form, then run one generation through the view-state."""
        try:
            path_input = LearningPathInput(
                goal=goal or "",
                deadline=deadline or "",
                level=level,
                availability=availability,
            )
        except ValidationError as e:
            # Rejected before any network call; the view-state is untouched
            results, _, checklist, button, state = render_path_outputs(state, lang)
            yield results, f"❌ **{describe_validation_error(e)}**", checklist, button, state
            return

        pending = state.submit(generator, path_input, lang)
        yield render_path_outputs(state, lang)

        await pending
        yield render_path_outputs(state, lang)

    def completed_handler(selected, lang, state):
        state.sync_completed(selected or [])
        return format_results_markdown(state, lang), state

    def language_handler(lang, state, widget):
        t = get_strings(lang)
        rtl = is_rtl(lang)
        chat_button = t["chatClose"] if widget.is_open else t["chatOpen"]
        return (
            gr.update(value=format_header(lang), rtl=rtl),
            gr.update(label=t["goalLabel"], placeholder=t["goalPlaceholder"], rtl=rtl),
            gr.update(label=t["deadlineLabel"], placeholder=t["deadlinePlaceholder"]),
            gr.update(label=t["levelLabel"], choices=level_choices(lang)),
            gr.update(label=t["availabilityLabel"]),
            gr.update(value=t["generatingText"] if state.is_loading else t["generateButton"]),
            gr.update(value=format_results_markdown(state, lang), rtl=rtl),
            gr.update(label=t["completedLabel"]),
            gr.update(value=t["darkModeButton"]),
            gr.update(value=chat_button),
            gr.update(value=f"### {t['chatTitle']}", rtl=rtl),
            gr.update(placeholder=t["chatEmpty"], rtl=rtl),
            gr.update(placeholder=t["chatPlaceholder"], rtl=rtl),
            gr.update(value=t["sendButton"]),
        )

    def chat_toggle_handler(lang, widget):
        """Open the chat (creating a session on first open) or close and discard it."""
        t = get_strings(lang)
        if widget.is_open:
            widget.close()
            return gr.update(visible=False), [], gr.update(value=t["chatOpen"]), widget
        widget.open(lang)
        return (
            gr.update(visible=True),
            format_chat_history(widget.messages),
            gr.update(value=t["chatClose"]),
            widget,
        )

    async def chat_send_handler(text, widget):
        """Send one chat message; input stays disabled until the reply settles."""
        if not widget.is_open or not widget.can_send(text):
            # Leave the transcript alone so a pending turn keeps its bubbles
            yield gr.update(), gr.update(), gr.update(), widget
            return

        pending = widget.send(text)

        # Show the user's message and a typing bubble until the reply resolves
        optimistic = format_chat_history(widget.messages)
        optimistic.append({"role": "user", "content": text.strip()})
        optimistic.append({"role": "assistant", "content": TYPING_INDICATOR})
        yield optimistic, gr.update(value="", interactive=False), gr.update(interactive=False), widget

        await pending
        yield format_chat_history(widget.messages), gr.update(interactive=True), gr.update(interactive=True), widget

    theme = gr.themes.Base(
        primary_hue="blue",
        secondary_hue="gray",
        neutral_hue="gray",
        font=("SF Pro Display", "system-ui", "sans-serif"),
    )

    with gr.Blocks(title="MARI - Learning Path Copilot") as demo:
        # Per-browser-session state; nothing survives a reload
        view_state = gr.State(LearningPathViewState)
        chat_widget = gr.State(ChatWidget)

        with gr.Row():
            with gr.Column(scale=4):
                header = gr.Markdown(format_header(default_lang), elem_id="app-header", rtl=is_rtl(default_lang))
            with gr.Column(scale=1, min_width=160):
                lang_radio = gr.Radio(
                    choices=LANGUAGE_CHOICES,
                    value=default_lang,
                    show_label=False,
                    container=False,
                )
                dark_btn = gr.Button(t["darkModeButton"], size="sm")

        with gr.Row():
            with gr.Column(scale=1, elem_id="path-form"):
                goal_input = gr.Textbox(
                    label=t["goalLabel"],
                    placeholder=t["goalPlaceholder"],
                    lines=5,
                    max_lines=8,
                    rtl=is_rtl(default_lang),
                )
                with gr.Row():
                    deadline_input = gr.Textbox(
                        label=t["deadlineLabel"],
                        placeholder=t["deadlinePlaceholder"],
                        max_lines=1,
                    )
                    level_input = gr.Dropdown(
                        choices=level_choices(default_lang),
                        value=ProficiencyLevel.BEGINNER.value,
                        label=t["levelLabel"],
                    )
                availability_input = gr.Slider(
                    minimum=config.MIN_AVAILABILITY,
                    maximum=config.MAX_AVAILABILITY,
                    value=config.DEFAULT_AVAILABILITY,
                    step=1,
                    label=t["availabilityLabel"],
                )
                generate_btn = gr.Button(t["generateButton"], variant="primary", size="lg")
                error_display = gr.Markdown(value="", elem_id="path-error")

            with gr.Column(scale=2):
                results_display = gr.Markdown(
                    value=format_results_markdown(LearningPathViewState(), default_lang),
                    elem_id="path-results",
                    rtl=is_rtl(default_lang),
                )
                completed_input = gr.CheckboxGroup(
                    choices=[],
                    label=t["completedLabel"],
                    visible=False,
                )

        chat_toggle_btn = gr.Button(t["chatOpen"], size="md")
        with gr.Column(visible=False, elem_id="chat-panel") as chat_panel:
            chat_title = gr.Markdown(f"### {t['chatTitle']}")
            chatbot = gr.Chatbot(
                height=420,
                placeholder=t["chatEmpty"],
                show_label=False,
                layout="bubble",
                rtl=is_rtl(default_lang),
            )
            with gr.Row():
                chat_input = gr.Textbox(
                    placeholder=t["chatPlaceholder"],
                    show_label=False,
                    container=False,
                    lines=1,
                    max_lines=3,
                    scale=4,
                )
                send_btn = gr.Button(t["sendButton"], variant="primary", scale=1)

        # Wire up events
        path_outputs = [results_display, error_display, completed_input, generate_btn, view_state]
        generate_btn.click(
            generate_handler,
            inputs=[goal_input, deadline_input, level_input, availability_input, lang_radio, view_state],
            outputs=path_outputs,
            concurrency_limit=None,
        )

        completed_input.input(
            completed_handler,
            inputs=[completed_input, lang_radio, view_state],
            outputs=[results_display, view_state],
        )

        lang_radio.change(
            language_handler,
            inputs=[lang_radio, view_state, chat_widget],
            outputs=[
                header,
                goal_input,
                deadline_input,
                level_input,
                availability_input,
                generate_btn,
                results_display,
                completed_input,
                dark_btn,
                chat_toggle_btn,
                chat_title,
                chatbot,
                chat_input,
                send_btn,
            ],
        )

        dark_btn.click(None, js=TOGGLE_DARK_MODE_JS)

        chat_toggle_btn.click(
            chat_toggle_handler,
            inputs=[lang_radio, chat_widget],
            outputs=[chat_panel, chatbot, chat_toggle_btn, chat_widget],
        )

        chat_outputs = [chatbot, chat_input, send_btn, chat_widget]
        send_btn.click(chat_send_handler, inputs=[chat_input, chat_widget], outputs=chat_outputs, concurrency_limit=None)
        chat_input.submit(chat_send_handler, inputs=[chat_input, chat_widget], outputs=chat_outputs, concurrency_limit=None)

    # Attach theme and css to demo for Gradio 6.0
    demo.theme = theme
    demo.css = custom_css
    return demo
