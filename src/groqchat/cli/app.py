"""Typer commands: the TUI, a line-mode chat, and history maintenance."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console

from ..chat import CLEAR_PROMPT, ChatController, CompletionClient
from ..ui.console import ConsoleChatView, message_renderable
from ..ui.highlight import NullHighlighter, SyntaxHighlighter
from ..ui.render import render_history
from .providers import get_store, require_llm

load_dotenv()

app = typer.Typer(
    name="groqchat",
    help="Terminal chat client for hosted LLM completion APIs",
    no_args_is_help=True,
    add_completion=True,
)

# Rich output for all commands
console = Console()

EXIT_COMMANDS = ("exit", "quit", "q")


def _highlighter(no_highlight: bool):
    return NullHighlighter() if no_highlight else SyntaxHighlighter()


async def _console_confirm(prompt: str) -> bool:
    return typer.confirm(prompt, default=False)


@app.command(name="tui")
def tui_command(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
    no_highlight: bool = typer.Option(
        False,
        "--no-highlight",
        help="Show code blocks without syntax highlighting"
    ),
):
    """Launch interactive TUI chat interface."""
    async def _tui():
        from ..ui import run_chat_tui

        client = CompletionClient(require_llm(console))
        try:
            await run_chat_tui(
                store=get_store(),
                client=client,
                highlighter=_highlighter(no_highlight),
                log_level=log_level,
            )
        finally:
            try:
                await client.close()
            except RuntimeError:
                pass
            console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


@app.command()
def chat(
    no_highlight: bool = typer.Option(
        False,
        "--no-highlight",
        help="Show code blocks without syntax highlighting"
    ),
):
    """Interactive line-mode chat in the terminal."""
    async def _chat():
        client = CompletionClient(require_llm(console))
        store = get_store()
        view = ConsoleChatView(console, highlighter=_highlighter(no_highlight))
        store.set_debug_callback(view.debug_callback)
        client.set_debug_callback(view.debug_callback)

        controller = ChatController(store, client)
        controller.attach(view)
        console.print("[dim]Type '/clear' to clear history, '/copy' to copy the last reply, 'exit' to leave[/dim]\n")

        try:
            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                command = user_input.strip().lower()
                if not command:
                    continue
                if command in EXIT_COMMANDS:
                    console.print("[dim]Goodbye![/dim]")
                    break
                if command == "/clear":
                    await controller.clear(_console_confirm)
                    continue
                if command == "/copy":
                    _copy_last_response(controller)
                    continue

                await controller.submit(user_input)
        finally:
            await client.close()

    asyncio.run(_chat())


def _copy_last_response(controller: ChatController) -> None:
    import pyperclip

    response = controller.state.last_response()
    if response is None:
        console.print("[yellow]No response to copy[/yellow]")
        return
    try:
        pyperclip.copy(response.content)
        console.print("[green]Copied![/green]")
    except pyperclip.PyperclipException as e:
        console.print(f"[red]Error: {e}[/red]")


@app.command()
def history(
    limit: int = typer.Option(
        0,
        "--limit",
        "-n",
        min=0,
        help="Show only the last N messages (0 shows all)"
    ),
    no_highlight: bool = typer.Option(
        False,
        "--no-highlight",
        help="Show code blocks without syntax highlighting"
    ),
):
    """Print the saved conversation."""
    messages = get_store().load()
    if limit:
        messages = messages[-limit:]

    if not messages:
        console.print("[dim]No saved messages.[/dim]")
        return

    highlighter = _highlighter(no_highlight)
    for view in render_history(messages):
        console.print(message_renderable(view, highlighter))


@app.command()
def clear(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip confirmation prompt"
    )
):
    """Delete the saved conversation."""
    store = get_store()
    if not yes:
        confirm = typer.confirm(CLEAR_PROMPT)
        if not confirm:
            console.print("[dim]Aborted.[/dim]")
            return

    if not store.clear():
        console.print("[red]Error: could not write chat history[/red]")
        raise typer.Exit(code=1)
    console.print("[green]Chat history cleared.[/green]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
