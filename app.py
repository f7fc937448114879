"""
app.py – HTTP entry point for the panelbeating assistant
---------------------------------------------------------
• POST /api/chat answers the latest customer message
• Job-status questions that carry a reference get a simulated status
• The Gradio chat widget is mounted at /
"""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from chatbot import last_user_message, run_agent
from data_loader import load_config, load_settings
from models import AgentInput
from replies import text
from status import apply_status_overlay

logger = logging.getLogger(__name__)

SERVER_ERROR = {"reply": text("server_error", "en"), "language": "en"}


async def chat(request: Request) -> JSONResponse:
    try:
        body = await request.json()
        payload = AgentInput.model_validate(body)
        result = run_agent(payload)

        last = last_user_message(payload.messages)
        result = apply_status_overlay(result, last.content if last else "")

        return JSONResponse(result.to_payload())
    except Exception:
        logger.exception("Chat request failed")
        return JSONResponse(SERVER_ERROR, status_code=500)


async def health() -> dict:
    return {"status": "ok"}


def create_app(with_ui: bool = True) -> FastAPI:
    cfg = load_config()
    app = FastAPI(title=f"{cfg['STORE_NAME']} Assistant", version="0.1.0")

    app.add_api_route("/api/chat", chat, methods=["POST"])
    app.add_api_route("/health", health, methods=["GET"])

    if with_ui:
        import gradio as gr
        from ui import create_interface

        app = gr.mount_gradio_app(app, create_interface(cfg, load_settings()), path="/")

    return app


def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings["log_level"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(), host=settings["host"], port=settings["port"])


if __name__ == "__main__":
    main()
