"""Main CLI application using Typer."""
import asyncio
import logging

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..config import ChatConfig
from ..conversation import Conversation, ask
from ..llm import ChatModel, MissingAPIKeyError
from .log import LogLevel, configure_logging
from .providers import get_llm

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

# Literal commands recognised at the prompt
EXIT_COMMAND = "exit"
RESET_COMMAND = "reset"
EDITOR_COMMAND = "v"

# Create Typer app
app = typer.Typer(
    name="transchat",
    help="Chat with an OpenAI model from the terminal (translates Japanese to English by default)",
    add_completion=False,
)

# Console for rich output
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"transchat {__version__}")
        raise typer.Exit()


def _read_editor() -> str | None:
    """Open the user's editor for a multi-line prompt.

    Returns:
        The edited text, or None if the editor was closed without saving
    """
    return typer.edit(extension=".md")


@app.command()
def chat(
    general: str | None = typer.Option(
        None,
        "--general",
        "-g",
        help="Open prompt (general prompt) replacing the default translation instruction"
    ),
    key: str | None = typer.Option(
        None,
        "--key",
        "-k",
        help="OpenAI API key (defaults to OPENAI_API_KEY)"
    ),
    model: ChatModel = typer.Option(
        ChatModel.GPT_3_5_TURBO,
        "--model",
        "-m",
        help="Model to chat with"
    ),
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        envvar="OPENAI_BASE_URL",
        help="OpenAI-compatible API base URL"
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING,
        "--log-level",
        "-l",
        help="Log level for diagnostics printed on stderr"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit"
    ),
):
    """Start an interactive chat.

    Type 'reset' to start over, 'v' to write a multi-line prompt in your
    editor, and 'exit' to leave.
    """
    configure_logging(log_level)

    try:
        config = ChatConfig.from_options(key=key, model=model, general=general, base_url=base_url)
    except MissingAPIKeyError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    async def _chat():
        llm = None

        try:
            conversation = Conversation.from_prompt(config.general)
            llm = get_llm(config)
            logger.info("Chatting with %s", config.model.value)

            while True:
                try:
                    user_input = console.input("[bold yellow]>[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\nBye!")
                    break

                if user_input == EXIT_COMMAND:
                    console.print("Bye!")
                    break

                if user_input == RESET_COMMAND:
                    conversation.reset()
                    logger.info("Conversation reset to %d seed messages", len(conversation))
                    continue

                if user_input == EDITOR_COMMAND:
                    edited = _read_editor()
                    if edited is None:
                        console.print("[dim]Editor closed without saving, nothing sent.[/dim]")
                        continue
                    user_input = edited

                answer = await ask(llm, conversation, user_input, config.model)
                console.print(
                    f"[bold green]{answer.role.label}:[/bold green] {escape(answer.content.strip())}"
                )
                conversation.add(answer)

        except Exception as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            logger.debug("Chat session failed", exc_info=True)
            raise typer.Exit(code=1)
        finally:
            if llm:
                await llm.close()

    asyncio.run(_chat())


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
