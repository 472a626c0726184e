from typing import AsyncIterator, Iterable

from rich.console import Console
from rich.live import Live
from rich.markdown import Markdown
from rich.panel import Panel
from rich.rule import Rule
from rich.spinner import Spinner
from rich.table import Table

from ..config import Config
from ..types.models import ModelResponse


class UI:
    """Terminal rendering for the oairest command line."""

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def show_msg(self, title: str, content: str, color: str = "white"):
        self.console.print(Panel(content, title=f"[bold]{title}[/]", border_style=color, padding=(1, 2)))

    def show_error(self, error: Exception):
        self.show_msg(type(error).__name__, str(error), color="red")

    async def stream_markdown(self, title: str, chunks: AsyncIterator[str]) -> str:
        """
        Renders Markdown content in real-time as it streams, then prints the final text.
        """
        full_response = ""

        self.console.print(Rule(f"[bold bright_cyan]{title}[/bold bright_cyan]", style="bright_blue"))

        with Live(
            Spinner("dots", text="Waiting for the model...", style="bright_cyan"),
            console=self.console,
            refresh_per_second=15,
            transient=True,
        ) as live:
            async for chunk in chunks:
                if not chunk:
                    continue
                full_response += chunk
                live.update(Markdown(full_response, code_theme=Config.CODE_THEME))

        if full_response:
            self.console.print(Markdown(full_response, code_theme=Config.CODE_THEME))
        else:
            self.console.print("[bold red]✗ The model returned no content.[/]")
        self.console.print(Rule(style="dim bright_blue"))
        return full_response

    def show_reply(self, title: str, content: str):
        self.console.print(Rule(f"[bold bright_cyan]{title}[/bold bright_cyan]", style="bright_blue"))
        self.console.print(Markdown(content or "", code_theme=Config.CODE_THEME))
        self.console.print(Rule(style="dim bright_blue"))

    def models_table(self, models: Iterable[ModelResponse]):
        table = Table(show_header=True, header_style="bold magenta", border_style="dim white", expand=True)
        table.add_column("Model", style="cyan")
        table.add_column("Owner", style="green")
        table.add_column("Created", style="yellow", justify="right")

        for model in sorted(models, key=lambda m: m.id):
            table.add_row(model.id, model.owned_by, str(model.created))

        self.console.print(table)
