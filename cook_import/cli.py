import dataclasses

import click
from dotenv import find_dotenv, load_dotenv

from .config import Settings
from .errors import CookImportError
from .importer import RecipeImporter, default_claude_client, default_openai_client
from .logging_config import configure_logging, get_logger
from .models import Provider

logger = get_logger(__name__)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (defaults to LOG_LEVEL or INFO)",
)
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a .env file with API keys",
)
@click.pass_context
def cli(ctx, log_level, env_file):
    """Cook - fetch recipes from the web and convert them to Cooklang."""
    load_dotenv(env_file or find_dotenv(usecwd=True))

    ctx.ensure_object(dict)
    settings = ctx.obj.get("settings") or Settings.from_env()
    ctx.obj["settings"] = settings

    try:
        configure_logging(log_level or settings.log_level, settings.log_file)
    except OSError as e:
        raise click.ClickException(f"Cannot open log file {settings.log_file}: {e}") from e


@cli.command("import")
@click.argument("url")
@click.option(
    "--skip-conversion",
    "-s",
    is_flag=True,
    help="Skip conversion to Cooklang format and just fetch the original recipe",
)
@click.option(
    "--use-claude",
    is_flag=True,
    help="Use Claude API instead of OpenAI for recipe conversion",
)
@click.option(
    "--smoke-test",
    is_flag=True,
    help="Check the OpenAI API with a short request before converting",
)
@click.pass_context
def import_recipe(ctx, url, skip_conversion, use_claude, smoke_test):
    """Import a recipe from URL, converting it to Cooklang by default."""
    settings = ctx.obj["settings"]
    if smoke_test:
        settings = dataclasses.replace(settings, openai_smoke_test=True)

    importer = RecipeImporter(
        settings,
        fetcher=ctx.obj.get("fetcher"),
        claude_factory=ctx.obj.get("claude_factory", default_claude_client),
        openai_factory=ctx.obj.get("openai_factory", default_openai_client),
    )
    provider = Provider.from_flags(skip_conversion, use_claude)

    try:
        recipe = importer.run(url, provider)
    except CookImportError as e:
        logger.error("Import failed: %s", e)
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    click.echo(recipe)


if __name__ == "__main__":
    cli()
