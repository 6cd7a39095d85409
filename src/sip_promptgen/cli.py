"""CLI interface for sip-promptgen."""

from __future__ import annotations

from typing import NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from .catalog import extract_placeholders, fill_placeholders, get_templates_by_type, require_template
from .config.constants import Limits
from .config.logging import get_logger, setup_logging
from .config.settings import get_settings
from .exceptions import ConfigurationError, SipPromptGenError
from .matching import find_best_match, find_top_matches
from .models import (
    MODEL_OPTIONS,
    GeneratorType,
    PromptRequest,
    TemplateMatch,
    build_request,
    style_options,
    tone_options,
)
from .services import GenerationResult, PromptGenerationService

app = typer.Typer(
    name="sip-promptgen",
    help="Compose optimized prompts for text, image, and video AI models.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

console = Console()
logger = get_logger(__name__)

STYLE_HELP = "Style flag (repeatable). See [bold]sip-promptgen options[/bold]."


def _fail(message: str, details: object | None = None) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]{message}[/red]")
    if details:
        console.print(f"[dim]{escape(str(details))}[/dim]")
    raise typer.Exit(1)


def _build(
    generator_type: GeneratorType,
    query: str,
    model: str | None,
    styles: list[str] | None,
    tone: str | None = None,
) -> PromptRequest:
    try:
        target_model = model or get_settings().default_model_for(generator_type)
        return build_request(generator_type, query, target_model, styles or [], tone=tone)
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        _fail("Invalid request:", messages)
    except SipPromptGenError as e:
        _fail("Configuration error:", e)


def _show_result(result: GenerationResult, title: str) -> None:
    if result.match is not None:
        console.print(
            f"[dim]Matched template:[/dim] [cyan]{result.match.name}[/cyan] "
            f"[dim](score {result.match.score}, {result.match_index + 1} of {len(result.matches)})[/dim]"
        )
    else:
        console.print("[yellow]No matching template found.[/yellow] [dim]Try rephrasing your query.[/dim]")
    console.print(Panel(result.prompt, title=title, border_style="green"))


def _generate(generator_type: GeneratorType, request: PromptRequest, title: str) -> None:
    try:
        service = PromptGenerationService(generator_type)
        result = service.generate(request)
    except SipPromptGenError as e:
        _fail("Generation failed:", e)
    _show_result(result, title)


@app.command()
def text(
    query: str = typer.Argument(..., help="What you want the model to do"),
    model: str = typer.Option(None, "--model", "-m", help="Target model (e.g. GPT-4, Claude)"),
    tone: str = typer.Option(None, "--tone", "-t", help="Tone of the response"),
    style: list[str] = typer.Option(None, "--style", "-s", help=STYLE_HELP),
) -> None:
    """Generate a prompt for a text LLM.

    Examples:
        sip-promptgen text "explain recursion" --tone casual -s step-by-step
        sip-promptgen text "review my python code" -m Claude -s structured
    """
    request = _build(GeneratorType.TEXT, query, model, style, tone)
    _generate(GeneratorType.TEXT, request, f"Text Prompt ({request.target_model})")


@app.command()
def image(
    query: str = typer.Argument(..., help="Description of the image"),
    model: str = typer.Option(None, "--model", "-m", help="Target model (e.g. Midjourney)"),
    style: list[str] = typer.Option(None, "--style", "-s", help=STYLE_HELP),
) -> None:
    """Generate a prompt for an image model."""
    request = _build(GeneratorType.IMAGE, query, model, style)
    _generate(GeneratorType.IMAGE, request, f"Image Prompt ({request.target_model})")


@app.command()
def video(
    query: str = typer.Argument(..., help="What the video is about"),
    model: str = typer.Option(None, "--model", "-m", help="Target model (e.g. Runway Gen-2)"),
    style: list[str] = typer.Option(None, "--style", "-s", help=STYLE_HELP),
) -> None:
    """Generate a video concept prompt."""
    request = _build(GeneratorType.VIDEO, query, model, style)
    _generate(GeneratorType.VIDEO, request, f"Video Prompt ({request.target_model})")


def _matches_table(matches: list[TemplateMatch], title: str) -> Table:
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("#", style="dim", width=3)
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Score", justify="right", style="green")
    for position, match in enumerate(matches, start=1):
        table.add_row(str(position), match.id, match.name, str(match.score))
    return table


@app.command()
def match(
    query: str = typer.Argument(..., help="Query to match against the catalog"),
    generator_type: GeneratorType = typer.Option(GeneratorType.TEXT, "--type", "-T", help="Catalog to search"),
    limit: int = typer.Option(Limits.TOP_MATCHES, "--limit", "-n", min=1, help="Maximum matches to show"),
    best: bool = typer.Option(False, "--best", help="Show only the best match above the threshold"),
) -> None:
    """Show which templates match a query."""
    try:
        templates = get_templates_by_type(generator_type)
    except SipPromptGenError as e:
        _fail("Could not load catalog:", e)

    if best:
        threshold = get_settings().sip_match_threshold
        found = find_best_match(query, templates, threshold=threshold)
        matches = [found] if found else []
    else:
        matches = find_top_matches(query, templates, limit=limit)

    if not matches:
        console.print("[yellow]No matching template found.[/yellow]")
        raise typer.Exit(1)
    console.print(_matches_table(matches, f"{generator_type.value.title()} templates for: {query}"))


@app.command()
def templates(
    generator_type: GeneratorType = typer.Option(None, "--type", "-T", help="Only list one catalog"),
) -> None:
    """List catalog templates."""
    kinds = [generator_type] if generator_type else list(GeneratorType)
    for kind in kinds:
        try:
            catalog = get_templates_by_type(kind)
        except SipPromptGenError as e:
            _fail("Could not load catalog:", e)
        table = Table(title=f"{kind.value.title()} Templates", show_header=True, header_style="bold")
        table.add_column("ID", style="cyan")
        table.add_column("Name")
        table.add_column("Description", style="dim")
        table.add_column("Default Model")
        for template in catalog:
            table.add_row(template.id, template.name, template.description, template.default_llm or "-")
        console.print(table)


@app.command()
def template(
    template_id: str = typer.Argument(..., help="Template id, e.g. blog-post"),
    generator_type: GeneratorType = typer.Option(GeneratorType.TEXT, "--type", "-T", help="Catalog to search"),
    values: list[str] = typer.Option(None, "--set", help="Placeholder value as KEY=VALUE (repeatable)"),
) -> None:
    """Show a template, optionally filling its placeholders."""
    try:
        found = require_template(template_id, generator_type)
    except SipPromptGenError as e:
        _fail(str(e))

    filled: dict[str, str] = {}
    for item in values or []:
        key, sep, value = item.partition("=")
        if not sep:
            _fail(f"Invalid --set value '{item}', expected KEY=VALUE")
        filled[key.strip()] = value

    keys = extract_placeholders(found.template)
    body = fill_placeholders(found.template, filled)
    console.print(Panel(body, title=found.name, subtitle=found.description, border_style="cyan"))
    if keys:
        remaining = [key for key in keys if not filled.get(key, "").strip()]
        console.print(f"[bold]Placeholders:[/bold] {', '.join(keys)}")
        if remaining:
            console.print(f"[yellow]Unfilled:[/yellow] {', '.join(remaining)}")


@app.command()
def options(
    generator_type: GeneratorType = typer.Option(None, "--type", "-T", help="Only show one generator"),
) -> None:
    """List models, style flags and tones per generator."""
    kinds = [generator_type] if generator_type else list(GeneratorType)
    table = Table(show_header=True, header_style="bold")
    table.add_column("Generator", style="cyan")
    table.add_column("Models")
    table.add_column("Styles")
    table.add_column("Tones", style="dim")
    for kind in kinds:
        tones = ", ".join(tone_options()) if kind is GeneratorType.TEXT else "-"
        table.add_row(kind.value, ", ".join(MODEL_OPTIONS[kind]), ", ".join(style_options(kind)), tones)
    console.print(table)


@app.command()
def session(
    generator_type: GeneratorType = typer.Option(GeneratorType.TEXT, "--type", "-T", help="Generator to use"),
    model: str = typer.Option(None, "--model", "-m", help="Target model"),
    style: list[str] = typer.Option(None, "--style", "-s", help=STYLE_HELP),
    tone: str = typer.Option(None, "--tone", "-t", help="Tone (text only)"),
) -> None:
    """Interactive session. Repeat a query to cycle through alternative templates."""
    try:
        service = PromptGenerationService(generator_type)
    except SipPromptGenError as e:
        _fail("Could not start session:", e)

    console.print(
        Panel(
            "Enter a query to generate a prompt.\n"
            "Press Enter on an empty line to repeat the last query with the next template.\n"
            "Type [bold]:q[/bold] to quit.",
            title=f"{generator_type.value.title()} Prompt Session",
            border_style="blue",
        )
    )

    last_query: str | None = None
    while True:
        try:
            entered = Prompt.ask("[bold yellow]Query[/bold yellow]", default="", show_default=False)
        except (KeyboardInterrupt, EOFError):
            break
        if entered.strip() == ":q":
            break
        query = entered if entered.strip() else last_query
        if not query:
            console.print("[red]Please enter a query.[/red]")
            continue

        try:
            request = build_request(
                generator_type,
                query,
                model or get_settings().default_model_for(generator_type),
                style or [],
                tone=tone,
            )
        except ValidationError as e:
            console.print(f"[red]Invalid request:[/red] {'; '.join(err['msg'] for err in e.errors())}")
            continue

        try:
            result = service.generate(request)
        except SipPromptGenError as e:
            console.print("[red]Generation failed:[/red]", escape(str(e)))
            continue
        _show_result(result, f"{generator_type.value.title()} Prompt")
        last_query = query

    console.print("\n[bold cyan]Goodbye![/bold cyan]\n")


@app.command()
def status() -> None:
    """Show configuration and catalog status."""
    console.print(Panel("[bold]Configuration Status[/bold]", border_style="blue"))

    try:
        settings = get_settings()
    except ConfigurationError as e:
        _fail("Configuration error:", e)

    details = Table(show_header=False, box=None)
    details.add_column("Setting", style="cyan")
    details.add_column("Value")
    details.add_row("Log Level", settings.sip_log_level)
    details.add_row("Catalog Directory", str(settings.sip_catalog_dir or "(bundled)"))
    details.add_row("Match Limit", str(settings.sip_match_limit))
    details.add_row("Match Threshold", str(settings.sip_match_threshold))
    for kind in GeneratorType:
        details.add_row(f"Default {kind.value} model", settings.default_model_for(kind))
    console.print(details)

    catalog_table = Table(title="Catalogs", show_header=True, header_style="bold")
    catalog_table.add_column("Generator", style="cyan")
    catalog_table.add_column("Templates", justify="right")
    ok = True
    for kind in GeneratorType:
        try:
            count = str(len(get_templates_by_type(kind)))
        except SipPromptGenError as e:
            count = f"[red]error: {e.message}[/red]"
            ok = False
        catalog_table.add_row(kind.value, count)
    console.print(catalog_table)

    if settings.sip_catalog_dir is not None and not settings.is_configured()["sip_catalog_dir"]:
        console.print("[yellow]SIP_CATALOG_DIR does not exist, bundled catalogs are used.[/yellow]")
    if not ok:
        raise typer.Exit(1)


def main() -> None:
    """Entry point for the CLI."""
    # Initialize logging with settings
    try:
        settings = get_settings()
        log_level = settings.sip_log_level
    except ConfigurationError:
        # Use default log level if settings fail to load
        log_level = "INFO"

    setup_logging(level=log_level)
    logger.debug("Starting sip-promptgen CLI")
    app()


if __name__ == "__main__":
    main()
