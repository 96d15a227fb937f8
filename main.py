import logging
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError
import typer

from webhook_events.config import URL_ENV, GeneratorConfig
from webhook_events.errors import GeneratorError
from webhook_events.orchestrator import WebhookEventsGenerator

load_dotenv()

USAGE = "usage: generate-webhook-events [[srcfile] dstfile]"

app = typer.Typer(add_completion=False)


@app.command()
def generate(
    paths: Optional[List[str]] = typer.Argument(
        None,
        metavar="[[SRCFILE] DSTFILE]",
        help="Optional local markdown copy and output path ('-' for stdout)",
    ),
    url: Optional[str] = typer.Option(
        None,
        "--url",
        envvar=URL_ENV,
        help="Markdown document to fetch when no SRCFILE is given",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Trace every heading and table decision"
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
):
    """
    Generate the table of workflow triggers and their activity types.

    With no arguments the document is fetched and the module is printed to
    stdout. One argument is the output path; two are the input file and the
    output path.
    """
    args = paths or []
    if len(args) > 2:
        typer.echo(USAGE, err=True)
        raise typer.Exit(code=1)

    level = logging.DEBUG if verbose else getattr(logging, log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
    logger = logging.getLogger(__name__)
    logger.debug("Start generate-webhook-events")

    try:
        config = GeneratorConfig.from_env(source_url=url)
    except ValidationError as exc:
        typer.echo(f"invalid configuration: {exc}", err=True)
        raise typer.Exit(code=1)

    src_path = Path(args[0]) if len(args) == 2 else None
    destination = args[-1] if args else None

    generator = WebhookEventsGenerator(config=config)
    try:
        generator.run(src_path=src_path, destination=destination)
    except GeneratorError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    logger.debug("Done generate-webhook-events successfully")


def main():
    app()


if __name__ == "__main__":
    main()
