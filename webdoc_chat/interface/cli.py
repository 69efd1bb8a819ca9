"""Command line interface for WebDoc Chat."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.prompt import Prompt

from ..application.services.chat_service import ChatService
from ..composition.container import get_chat_service, get_ingestion_service
from ..config import settings, setup_logging
from ..domain.exceptions import ValidationError
from ..domain.models import ChatReply, Message, ReplySource, Role

app = typer.Typer(
    name="webdoc-chat",
    help="WebDoc Chat - chat with web lookups and your PDF documents",
    add_completion=False,
)

console = Console()

DocumentOption = typer.Option(
    None,
    "--document",
    "-d",
    help="PDF file to make available as context (repeatable)",
    exists=True,
    dir_okay=False,
    readable=True,
)


def load_documents(paths: list[Path] | None) -> None:
    """Ingest local PDFs into this process's document store."""
    service = get_ingestion_service()
    for path in paths or []:
        try:
            result = service.ingest(path.name, "application/pdf", path.read_bytes())
        except ValidationError as e:
            console.print(f"[red]Skipped {path}: {e.message}[/]")
            continue
        note = " [yellow](limited extraction)[/]" if result.degraded else ""
        console.print(f"[dim]Loaded {result.filename} ({result.size} bytes){note}[/]")


def print_reply(reply: ChatReply) -> None:
    console.print()
    console.print(
        Panel(
            Markdown(reply.text),
            title="[bold cyan]Assistant[/]",
            subtitle="[dim]fallback[/]" if reply.source is ReplySource.FALLBACK else None,
            border_style="cyan",
        )
    )


def get_service() -> ChatService:
    if not settings.llm_enabled:
        console.print(
            "[yellow]GOOGLE_API_KEY not set; answers will use the offline fallback template.[/]"
        )
    return get_chat_service()


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind"),
    port: int = typer.Option(8000, help="Port to listen on"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("webdoc_chat.api.main:app", host=host, port=port, reload=reload)


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to ask"),
    documents: list[Path] | None = DocumentOption,
):
    """Ask a single question and print the answer."""
    setup_logging("WARNING")
    service = get_service()
    load_documents(documents)

    with console.status("[bold green]Thinking...[/]"):
        reply = service.reply([Message(role=Role.USER, content=question)])

    print_reply(reply)


@app.command()
def chat(documents: list[Path] | None = DocumentOption):
    """Start an interactive chat session."""
    setup_logging("WARNING")
    console.print(
        Panel.fit(
            "[bold cyan]WebDoc Chat[/]\n"
            "[dim]Questions like 'what is ...' or 'latest news on ...' trigger a Wikipedia lookup.[/]\n\n"
            "[dim]Type 'quit' or 'exit' to leave[/]",
            title="Welcome",
            border_style="cyan",
        )
    )

    service = get_service()
    load_documents(documents)
    history: list[Message] = []

    while True:
        try:
            query = Prompt.ask("\n[bold cyan]You[/]")

            if query.lower() in ("quit", "exit", "q"):
                console.print("[dim]Goodbye![/]")
                break

            if not query.strip():
                continue

            history.append(Message(role=Role.USER, content=query))
            with console.status("[bold green]Thinking...[/]"):
                reply = service.reply(history)
            history.append(Message(role=Role.ASSISTANT, content=reply.text))

            print_reply(reply)

        except KeyboardInterrupt:
            console.print("\n[dim]Goodbye![/]")
            break


def main() -> None:
    app()


if __name__ == "__main__":
    main()
