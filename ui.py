"""
Gradio chat widget for the panelbeating assistant.
The widget is a thin client: it keeps the conversation and the current
language, posts the recent messages to /api/chat and shows the reply.
"""

import base64
import logging
import mimetypes
import os
from typing import Dict, List, Optional, Tuple

import gradio as gr
import requests

from replies import STARTERS, UI_TEXT, text

logger = logging.getLogger(__name__)

LANGUAGE_CHOICES = [("English", "en"), ("Afrikaans", "af")]
REQUEST_TIMEOUT = 30


def initial_conversation(cfg: Dict, language: str) -> List[Dict]:
    """Conversation seeded with the welcome message"""
    return [{"role": "assistant", "content": cfg["WELCOME_MESSAGE"][language]}]


def encode_attachments(paths: Optional[List[str]], limit: int = 3) -> List[Dict]:
    """Inline up to `limit` picked files as data: URLs"""
    attachments = []
    for path in (paths or [])[:limit]:
        mime = mimetypes.guess_type(path)[0] or "application/octet-stream"
        with open(path, "rb") as f:
            encoded = base64.b64encode(f.read()).decode("ascii")
        attachments.append({
            "name": os.path.basename(path),
            "type": mime,
            "dataUrl": f"data:{mime};base64,{encoded}",
        })
    return attachments


def build_payload(conversation: List[Dict], language: str, limit: int = 12) -> Dict:
    return {"language": language, "messages": conversation[-limit:]}


def send_message(api_url: str, payload: Dict) -> Tuple[str, str]:
    """POST the conversation and return (reply, language).

    Error statuses that still carry a JSON reply are shown as sent. Transport
    failures and unreadable bodies become the apology message in the
    language the widget is currently in. No retry.
    """
    language = payload["language"]
    try:
        resp = requests.post(api_url, json=payload, timeout=REQUEST_TIMEOUT)
        data = resp.json()
        return data["reply"], data.get("language") or language
    except (requests.RequestException, ValueError, KeyError, TypeError) as e:
        logger.warning("Chat request to %s failed: %s", api_url, e)
        return text("transport_error", language), language


def respond(api_url: str, cfg: Dict, message: str, files: Optional[List[str]],
            conversation: List[Dict], history: List[Dict], language: str):
    """Handle one send: returns (conversation, chat history, language)"""
    message = (message or "").strip()
    if not message and not files:
        return conversation, history, language

    user_msg = {"role": "user", "content": message}
    attachments = encode_attachments(files, cfg["MAX_ATTACHMENTS"])
    if attachments:
        user_msg["attachments"] = attachments

    conversation = conversation + [user_msg]
    history = list(history)
    if message:
        history.append({"role": "user", "content": message})
    for path in (files or [])[:cfg["MAX_ATTACHMENTS"]]:
        history.append({"role": "user", "content": {"path": path}})

    reply, language = send_message(api_url, build_payload(conversation, language, cfg["HISTORY_LIMIT"]))

    conversation = conversation + [{"role": "assistant", "content": reply}]
    history = history + [{"role": "assistant", "content": reply}]
    return conversation, history, language


def send_and_clear(api_url: str, cfg: Dict, message: str, files: Optional[List[str]],
                   conversation: List[Dict], history: List[Dict], language: str):
    """Send handler shared by the textbox, the send button and the starter chips"""
    conversation, history, language = respond(api_url, cfg, message, files, conversation, history, language)
    return conversation, history, language, "", None


def lock(language: str):
    """Disable the textbox and send button while a request is in flight"""
    return (gr.update(interactive=False),
            gr.update(interactive=False, value=UI_TEXT["sending"][language]))


def unlock(language: str):
    return (gr.update(interactive=True),
            gr.update(interactive=True, value=UI_TEXT["send"][language]))


def relabel(language: str) -> List[Dict]:
    """Updates for textbox, photo picker, send button, then each starter chip"""
    labels = [gr.update(value=label) for label in STARTERS[language]]
    return [gr.update(placeholder=UI_TEXT["placeholder"][language]),
            gr.update(label=UI_TEXT["add_photos"][language]),
            gr.update(value=UI_TEXT["send"][language])] + labels


def create_interface(cfg: Dict, settings: Dict) -> gr.Blocks:
    """Create the Gradio Blocks widget"""
    api_url = settings["api_url"]
    start = initial_conversation(cfg, "en")

    with gr.Blocks(theme=gr.themes.Soft(primary_hue="orange"), title=f"{cfg['STORE_NAME']} – Assistant") as demo:
        gr.Markdown(f"### {cfg['STORE_NAME']}\n{cfg['TAGLINE']}")

        language = gr.Radio(LANGUAGE_CHOICES, value="en", label="Language")
        with gr.Row():
            starters = [gr.Button(label, size="sm") for label in STARTERS["en"]]

        conversation = gr.State(start)
        chatbox = gr.Chatbot(value=list(start), type="messages", height=420)

        with gr.Row():
            user_box = gr.Textbox(placeholder=UI_TEXT["placeholder"]["en"], show_label=False, scale=7)
            photos = gr.File(label=UI_TEXT["add_photos"]["en"], file_count="multiple",
                             file_types=["image"], type="filepath", scale=2)
            send_btn = gr.Button(UI_TEXT["send"]["en"], variant="primary", scale=1)
        clear_btn = gr.Button("Clear chat")

        def on_send(message, files, conv, history, lang):
            return send_and_clear(api_url, cfg, message, files, conv, history, lang)

        def on_clear(lang):
            conv = initial_conversation(cfg, lang)
            return conv, list(conv)

        send_outputs = [conversation, chatbox, language, user_box, photos]
        for trigger, source in [(user_box.submit, user_box), (send_btn.click, user_box)] + \
                [(btn.click, btn) for btn in starters]:
            trigger(lock, language, [user_box, send_btn], queue=False).then(
                on_send, [source, photos, conversation, chatbox, language], send_outputs
            ).then(unlock, language, [user_box, send_btn], queue=False)

        language.change(relabel, language, [user_box, photos, send_btn] + starters, queue=False)
        clear_btn.click(on_clear, language, [conversation, chatbox], queue=False)

    return demo


if __name__ == "__main__":
    from data_loader import load_config, load_settings

    create_interface(load_config(), load_settings()).launch(show_error=True)
