"""Command-line interface for newsclean.

Responsibilities:
- Expose user-facing commands for text cleaning, record cleaning, article
  intake and category slugs.
- Convert CLI arguments into `NewscleanConfig` and run the cleaning workflow.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_clean_summary, exit_with_command_error
from .config import ConfigLoader, NewscleanConfig
from .errors import ArticleIntakeError, CommandStageError
from .intake import article_body, prepare_article
from .io.article_files import ArticleFileStore
from .parsing import parse_field_list
from .records import ARTICLE_TEXT_FIELDS
from .telemetry.logger import RunLogger
from .text.cleaners import clean_text
from .text.slug import slugify_category
from .workflow import CleanWorkflow

app = typer.Typer(
    name="newsclean",
    no_args_is_help=True,
    help="newsclean CLI.",
)


def _load_yaml_config(config_path: Path | None) -> NewscleanConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _resolve_clean_config(
    config_file: Path | None,
    input_path: Path | None,
    out: Path | None,
    fields: str | None,
    indent: int | None,
    newest_first: bool | None,
) -> NewscleanConfig:
    """Resolve effective command config from YAML defaults and explicit CLI overrides."""

    loaded_config = _load_yaml_config(config_file)

    try:
        resolved_fields = (
            parse_field_list(fields, "--fields") if fields is not None else None
        )
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=str(exc),
            hint="Pass field names separated by commas, e.g. `--fields title,content`.",
        ) from exc

    if loaded_config is None:
        if input_path is None:
            raise CommandStageError(
                stage="config",
                detail="Input path is required when `--config` is not provided.",
                hint="Pass `<input.json>` or use `--config <path.yaml>` with `input_path`.",
            )
        config = NewscleanConfig(
            input_path=input_path,
            output_path=out,
            fields=resolved_fields or ARTICLE_TEXT_FIELDS,
            indent=indent if indent is not None else 2,
            newest_first=bool(newest_first),
        )
    else:
        config = NewscleanConfig(
            input_path=input_path if input_path is not None else loaded_config.input_path,
            output_path=out if out is not None else loaded_config.output_path,
            fields=resolved_fields or loaded_config.fields,
            indent=indent if indent is not None else loaded_config.indent,
            newest_first=(
                newest_first if newest_first is not None else loaded_config.newest_first
            ),
        )

    try:
        config.validate()
    except ValueError as exc:
        raise CommandStageError(stage="config", detail=str(exc)) from exc
    return config


@app.command("clean-text")
def clean_text_command(
    text: Annotated[
        str | None,
        typer.Argument(help="Raw article text. Read from stdin when omitted."),
    ] = None,
) -> None:
    """Clean one piece of article text and print it."""

    raw_text = text if text is not None else typer.get_text_stream("stdin").read()
    typer.echo(clean_text(raw_text) or "")


@app.command("clean-records")
def clean_records_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(
            help="JSON file with one article or a list. Required unless provided by `--config`.",
        ),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Output JSON file. Prints to stdout when omitted."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with command defaults."),
    ] = None,
    fields: Annotated[
        str | None,
        typer.Option("--fields", help="Comma-separated text fields to clean."),
    ] = None,
    indent: Annotated[
        int | None,
        typer.Option("--indent", min=0, help="JSON indentation for output."),
    ] = None,
    newest_first: Annotated[
        bool | None,
        typer.Option(
            "--newest-first/--no-newest-first",
            help="Order lists by `createdAt`, newest first, before cleaning.",
        ),
    ] = None,
) -> None:
    """Clean the text fields of stored article records."""

    try:
        config = _resolve_clean_config(
            config_file=config_file,
            input_path=input_path,
            out=out,
            fields=fields,
            indent=indent,
            newest_first=newest_first,
        )
        result = CleanWorkflow(run_logger=RunLogger()).run(config)
    except Exception as exc:
        exit_with_command_error("clean-records", exc)

    if result.output_path is None:
        typer.echo(ArticleFileStore(Path("."), indent=config.indent).dumps(result.payload))
        return
    echo_clean_summary(result)


@app.command("prepare-article")
def prepare_article_command(
    input_path: Annotated[Path, typer.Argument(help="JSON file with one new article.")],
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Output JSON file. Prints to stdout when omitted."),
    ] = None,
) -> None:
    """Validate a new article and fill its derived fields."""

    store = ArticleFileStore(Path("."))
    try:
        try:
            payload = store.load(input_path)
        except (FileNotFoundError, ValueError) as exc:
            raise CommandStageError(
                stage="load",
                detail=f"Failed to read article `{input_path}`: {exc}",
                hint="Pass an existing JSON file holding one article object.",
            ) from exc
        if not isinstance(payload, dict):
            raise CommandStageError(
                stage="load",
                detail=f"Article file `{input_path}` must contain a single JSON object.",
            )
        try:
            article = prepare_article(payload)
            article["body"] = article_body(article)
        except ArticleIntakeError as exc:
            raise CommandStageError(
                stage="intake",
                detail=str(exc),
                hint="Provide `title`, `content` or `description`, `image` and `category`.",
            ) from exc
        if out is not None:
            store.save(out, article)
    except Exception as exc:
        exit_with_command_error("prepare-article", exc)

    if out is None:
        typer.echo(store.dumps(article))
        return
    typer.echo(f"Article: {out}")


@app.command("slugify")
def slugify_command(
    text: Annotated[str, typer.Argument(help="Category label.")],
) -> None:
    """Print the category slug for a label."""

    typer.echo(slugify_category(text))


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
