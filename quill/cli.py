"""
Resume Preview CLI

Compiles resume LaTeX source to a self-contained HTML preview and serves
the starter template gallery.

Commands:
    compile   - Compile a .tex file to HTML
    detect    - Print the dialect a .tex file is parsed as
    templates - List gallery templates
    apply     - Print or write a gallery template's source

Examples:\n

    quill compile resume.tex                        # HTML to stdout

    quill compile resume.tex -o preview.html        # HTML to file

    quill compile resume.tex --verbose              # Debug logging on the console

    quill templates --category modern               # Filter the gallery

    quill apply tech-resume -o resume.tex           # Seed a new resume
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from quill.contexts.compiling.compiler import compile_latex
from quill.contexts.compiling.dialect_detector import detect_dialect
from quill.contexts.compiling.logger import setup_compiling_logger
from quill.contexts.templating import TemplateNotFoundError, apply_template, list_templates
from quill.utils.timestamp import format_timestamp, now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


def read_source(source: Path) -> str:
    """Read a source file, exiting with code 1 when it cannot be read."""
    try:
        return source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        typer.secho(f"Error: cannot read {source}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


app = typer.Typer(
    help="Compile LaTeX resumes to HTML previews and browse starter templates",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("compile")
def compile_command(
    source: Annotated[
        Path,
        typer.Argument(help="Resume LaTeX source file"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write HTML here instead of stdout"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on the console"),
    ] = False,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Directory for the compile log (default: LOGS_PATH/compile_<timestamp>)"),
    ] = None,
):
    """
    Compile a resume source file to a self-contained HTML preview.

    Exits with code 1 when the source cannot be parsed; the error fragment
    is still written so the output is always renderable.

    Examples:\n

        $ quill compile resume.tex -o preview.html
    """
    text = read_source(source)

    if log_dir is None:
        log_dir = LOGS_PATH / f"compile_{now().strftime('%Y%m%d_%H%M%S')}"
    setup_compiling_logger(log_dir, source.name, console_level="DEBUG" if verbose else "INFO")

    result = compile_latex(text)

    if output is None:
        typer.echo(result.html)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(result.html, encoding="utf-8")

    if result.error:
        typer.secho(f"✗ Compilation failed: {result.error}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(code=1)

    dialect = result.dialect.value if result.dialect else "empty source"
    typer.secho(
        f"✓ Compiled as {dialect} ({result.word_count} words, {result.char_count} chars) "
        f"at {format_timestamp(result.last_compiled_at)}",
        fg=typer.colors.GREEN,
        bold=True,
        err=True,
    )
    if output is not None:
        typer.echo(f"  HTML: {output}", err=True)


@app.command("detect")
def detect_command(
    source: Annotated[
        Path,
        typer.Argument(help="Resume LaTeX source file"),
    ],
):
    """Print the dialect a source file is parsed as."""
    typer.echo(detect_dialect(read_source(source)).value)


@app.command("templates")
def templates_command(
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", help="Only list templates in this category"),
    ] = None,
):
    """
    List gallery templates in display order.

    Examples:\n

        $ quill templates

        $ quill templates --category academic
    """
    templates = list_templates(category=category)
    if not templates:
        typer.secho("No templates found", fg=typer.colors.YELLOW)
        return

    for template in templates:
        typer.secho(f"{template.id}", fg=typer.colors.BLUE, bold=True, nl=False)
        typer.echo(f"  {template.display_name} [{template.category}]")
        if template.description:
            typer.echo(f"    {template.description}")


@app.command("apply")
def apply_command(
    template_id: Annotated[
        str,
        typer.Argument(help="Gallery template id (see `quill templates`)"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the source here instead of stdout"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing output file"),
    ] = False,
):
    """
    Print or write a gallery template's source text.

    Examples:\n

        $ quill apply moderncv-banking -o resume.tex
    """
    try:
        source_text = apply_template(template_id)
    except TemplateNotFoundError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(source_text, nl=False)
        return

    if output.exists() and not force:
        typer.secho(
            f"Error: {output} already exists. Retry with --force to replace it.",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(source_text, encoding="utf-8")
    typer.secho(f"✓ Wrote {template_id} to {output}", fg=typer.colors.GREEN, err=True)


if __name__ == "__main__":
    app()
