"""
Brand Bible Generator — command line front end

Usage:
  brandbible generate "To make eco-friendly coffee accessible to everyone."
  brandbible generate "Sell eco-friendly coffee." --output outputs/coffee
  brandbible chat
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.rule import Rule
from rich.table import Table

from .chat import ChatSession, Conversation
from .errors import BrandBibleError, ConfigError
from .generator import from_data_uri
from .models import BrandBible
from .pipeline import BrandPlanOrchestrator
from .service import GeminiService

console = Console()

EXIT_WORDS = {"q", "quit", "exit", "bye"}


# ── CLI ───────────────────────────────────────────────────────────────────────

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="brandbible",
        description="Brand Bible Generator — logo, marks, palette and fonts from a mission",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline progress")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate a brand bible from a company mission")
    gen.add_argument("mission", help="Free-text company mission")
    gen.add_argument(
        "--output",
        default=None,
        help="Directory to export images, brand_bible.json and brand_bible.md",
    )

    sub.add_parser("chat", help="Talk to the branding assistant")
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s — %(levelname)s — %(name)s — %(message)s",
        level=logging.INFO if verbose else logging.WARNING,
    )


# ── Output helpers ────────────────────────────────────────────────────────────

def brand_bible_markdown(brand_bible: BrandBible) -> str:
    fonts = brand_bible.font_pairing
    lines = [
        "# Brand Bible",
        f"\n_Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}_\n",
        f"**Mission:** {brand_bible.mission}\n",
        "---\n",
        "## Logos & Marks",
        "\n![Primary Logo](logo.png)\n",
    ]
    for i, prompt in enumerate(brand_bible.secondary_mark_prompts, start=1):
        lines.append(f"![Secondary Mark {i}](secondary_mark_{i}.png)  ")
        lines.append(f"_{prompt}_\n")
    lines += ["---\n", "## Color Palette\n", "| Color | Hex | Usage |", "|---|---|---|"]
    for color in brand_bible.color_palette:
        lines.append(f"| {color.name} | `{color.hex}` | {color.usage} |")
    lines += [
        "\n---\n",
        "## Typography",
        f"\n**Header:** {fonts.header_font}  ",
        f"**Body:** {fonts.body_font}  ",
        f"**Google Fonts:** {fonts.google_fonts_url()}\n",
    ]
    return "\n".join(lines)


def save_brand_bible(brand_bible: BrandBible, output_dir: Path) -> List[Path]:
    """Write logo PNGs, brand_bible.json and brand_bible.md into output_dir."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []

    logo_path = output_dir / "logo.png"
    logo_path.write_bytes(from_data_uri(brand_bible.primary_logo_url))
    written.append(logo_path)
    for i, url in enumerate(brand_bible.secondary_mark_urls, start=1):
        mark_path = output_dir / f"secondary_mark_{i}.png"
        mark_path.write_bytes(from_data_uri(url))
        written.append(mark_path)

    json_path = output_dir / "brand_bible.json"
    json_path.write_text(brand_bible.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
    written.append(json_path)

    md_path = output_dir / "brand_bible.md"
    md_path.write_text(brand_bible_markdown(brand_bible), encoding="utf-8")
    written.append(md_path)
    return written


def display_brand_bible(brand_bible: BrandBible) -> None:
    console.print(
        Panel(
            f'[italic]Based on your mission: "{brand_bible.mission}"[/italic]',
            title="[bold]Your Brand Bible[/bold]",
            border_style="magenta",
        )
    )

    logos = f"[bold]Primary Logo:[/bold] {brand_bible.logo_prompt}\n"
    for i, prompt in enumerate(brand_bible.secondary_mark_prompts, start=1):
        logos += f"[bold]Secondary Mark {i}:[/bold] {prompt}\n"
    console.print(Panel(logos.rstrip(), title="[bold]Logos & Marks[/bold]", border_style="blue"))

    table = Table(title="Color Palette")
    table.add_column("")
    table.add_column("Name", style="bold")
    table.add_column("Hex")
    table.add_column("Usage", style="dim")
    for color in brand_bible.color_palette:
        table.add_row(f"[on {color.hex}]      [/]", color.name, color.hex, color.usage)
    console.print(table)

    fonts = brand_bible.font_pairing
    console.print(
        Panel(
            f"[bold]Header Font:[/bold] {fonts.header_font}\n"
            f"[bold]Body Font:[/bold] {fonts.body_font}\n"
            f"[dim]{fonts.google_fonts_url()}[/dim]",
            title="[bold]Typography[/bold]",
            border_style="green",
        )
    )


# ── Commands ──────────────────────────────────────────────────────────────────

async def run_generate(service, mission: str, output: Optional[str]) -> BrandBible:
    orchestrator = BrandPlanOrchestrator(service)
    with console.status("[bold cyan]Generating...[/bold cyan]") as status:
        brand_bible = await orchestrator.generate_brand_bible(
            mission,
            on_status=lambda msg: status.update(f"[bold cyan]{msg}[/bold cyan]"),
        )

    display_brand_bible(brand_bible)
    if output:
        paths = save_brand_bible(brand_bible, Path(output))
        console.print(f"\n  [dim]Saved: {'  |  '.join(str(p) for p in paths)}[/dim]")
    return brand_bible


async def run_chat(service) -> Conversation:
    conversation = Conversation(ChatSession(service))
    console.print(Rule("[bold]Branding Assistant[/bold]"))
    console.print("  [dim]Ask anything about branding, marketing or design. Type 'quit' to leave.[/dim]\n")

    while True:
        try:
            text = Prompt.ask("💬 You").strip()
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if not text:
            continue
        if text.lower() in EXIT_WORDS:
            break
        with console.status("[dim]Thinking...[/dim]"):
            reply = await conversation.ask(text)
        console.print(Panel(reply.text, title="[bold magenta]AI[/bold magenta]", border_style="magenta"))

    return conversation


# ── Main ──────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        service = GeminiService()
    except ConfigError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        console.print("Copy .env.example to .env and add your GEMINI_API_KEY.")
        sys.exit(1)

    if args.command == "chat":
        asyncio.run(run_chat(service))
        return

    console.print(Rule("[bold magenta]Brand Bible Generator[/bold magenta]"))
    try:
        asyncio.run(run_generate(service, args.mission, args.output))
    except BrandBibleError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
