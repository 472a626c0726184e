"""Entry point for the ``oairest`` command."""

import asyncio
import logging
import sys
from typing import AsyncIterator, List

import click
from rich.logging import RichHandler

from .config import Config
from .core.client import Client
from .core.errors import OpenAIError
from .core.streaming import EventStream
from .types.chat import ChatMessage, ChatStreamResponse, CreateChatRequest
from .ui.console import UI

ui = UI()


def setup_logging(level: str):
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=ui.console, rich_tracebacks=True, show_path=False)],
    )


def build_messages(prompt: str, system: str = None) -> List[ChatMessage]:
    messages = []
    if system:
        messages.append(ChatMessage.system(system))
    messages.append(ChatMessage.user(prompt))
    return messages


async def _deltas(stream: EventStream[ChatStreamResponse]) -> AsyncIterator[str]:
    async with stream:
        async for chunk in stream:
            for choice in chunk.choices:
                if choice.delta.content:
                    yield choice.delta.content


async def _run_chat(prompt: str, model: str, system: str, stream: bool) -> None:
    request = CreateChatRequest(model=model, messages=build_messages(prompt, system))
    async with Client.from_env() as client:
        if not stream:
            response = await client.chat.completions.create(request)
            ui.show_reply(model, response.choices[0].message.content if response.choices else "")
            return
        events = await client.chat.completions.create_stream(request.replace(stream=True))
        await ui.stream_markdown(model, _deltas(events))


async def _run_models() -> None:
    async with Client.from_env() as client:
        response = await client.models.list()
    ui.models_table(response.data)


def _run(coro) -> None:
    try:
        asyncio.run(coro)
    except OpenAIError as e:
        ui.show_error(e)
        sys.exit(1)


@click.group()
@click.option("--env-file", default=None, type=click.Path(exists=True, dir_okay=False), help="Path to a .env file (default: search from the current directory).")
def main(env_file):
    """Talk to the OpenAI REST API from the terminal."""
    try:
        Config.load(env_file)
    except OpenAIError as e:
        ui.show_error(e)
        sys.exit(1)
    setup_logging(Config.LOG_LEVEL)


@main.command()
@click.argument("prompt")
@click.option("--model", default=None, help="Model id (default: $OPENAI_MODEL or %s)." % Config.DEFAULT_MODEL)
@click.option("--system", default=None, help="System message sent before the prompt.")
@click.option("--no-stream", "no_stream", is_flag=True, help="Wait for the full reply instead of streaming it.")
def chat(prompt, model, system, no_stream):
    """Send PROMPT and render the reply as Markdown."""
    _run(_run_chat(prompt, model or Config.get_model(), system, stream=not no_stream))


@main.command()
def models():
    """List the models available to this API key."""
    _run(_run_models())


if __name__ == "__main__":
    main()
