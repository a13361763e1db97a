"""
Main CLI interface for Lyric Finder

Command-line entry point for discovering random lyric lines, restoring shared
lines and managing configuration. Built with Click:
- find / another: discover a lyric line for an artist
- restore: rebuild a line from a share link without any network access
- config: show, set and reset settings
"""

import sys
import click
import functools

from . import __version__
from .card import save_card
from .catalog.itunes import reset_catalog_client
from .config.settings import get_settings, reload_settings
from .discovery.models import LyricFinding
from .discovery.orchestrator import get_discovery, reset_discovery
from .exceptions import CatalogUnavailable, ConfigError, LyricFinderError, ShareLinkError
from .lyrics.lyricsovh import reset_lyricsovh_provider
from .share import build_share_url, restore_from_query, artist_from_query
from .utils.logger import configure_from_settings, get_logger, get_current_log_file

logger = get_logger(__name__)

EXIT_NOT_FOUND = 1
EXIT_CATALOG_UNAVAILABLE = 2


def handle_error(func):
    """
    Decorator to handle common CLI errors gracefully

    Maps CatalogUnavailable and other application errors to user-facing
    messages and exit codes.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            click.echo(click.style("\n\nOperation cancelled by user", fg='yellow'))
            sys.exit(130)
        except CatalogUnavailable as e:
            logger.error(f"Catalog unavailable: {e} {e.details}")
            click.echo(click.style("Failed to fetch songs. Check network.", fg='red'), err=True)
            sys.exit(EXIT_CATALOG_UNAVAILABLE)
        except LyricFinderError as e:
            logger.error(f"Command failed: {e}")
            click.echo(click.style(f"Error: {e}", fg='red'), err=True)
            sys.exit(1)
    return wrapper


def print_finding(finding: LyricFinding, show_raw: bool = False, share: bool = True) -> None:
    """Print a finding as a quote card in the terminal"""
    click.echo()
    click.echo(click.style(f"  “{finding.line}”", fg='cyan', bold=True))
    click.echo(f"  {finding.caption}")
    click.echo(click.style(f"  {finding.source_label}", dim=True))

    if share:
        settings = get_settings()
        click.echo()
        click.echo(f"  Share: {build_share_url(finding, settings.share.base_url)}")

    if show_raw and finding.lyrics_raw:
        click.echo()
        click.echo(finding.lyrics_raw)


def export_card(finding: LyricFinding, card_path, save_card_flag: bool, theme) -> None:
    """Write a PNG card when --card or --save-card was given"""
    if not card_path and not save_card_flag:
        return
    settings = get_settings()
    path = save_card(
        finding,
        path=card_path,
        directory=settings.get_card_directory(),
        theme=theme or settings.card.theme,
        width=settings.card.width,
        scale=settings.card.scale
    )
    click.echo(click.style(f"  Card saved: {path}", fg='green'))


def run_discovery(artist, prefer_long, card_path, save_card_flag, theme, share, show_raw, not_found_message=None):
    """Shared body of the find and another commands"""
    artist = artist.strip()
    if not artist:
        click.echo(click.style("Please enter an artist name.", fg='red'), err=True)
        sys.exit(EXIT_NOT_FOUND)

    result = get_discovery().discover(artist, prefer_long=prefer_long)

    if not result.found:
        message = not_found_message or result.reason.message
        click.echo(click.style(message, fg='yellow'), err=True)
        sys.exit(EXIT_NOT_FOUND)

    logger.console_info("Found a lyric! You can save or share it.")
    print_finding(result.finding, show_raw=show_raw, share=share)
    export_card(result.finding, card_path, save_card_flag, theme)


def discovery_options(func):
    """Options shared by find and another"""
    options = [
        click.argument('artist'),
        click.option('--prefer-long/--any-length', default=None,
                     help='Prefer lines of 30+ characters (default from config)'),
        click.option('--card', 'card_path', type=click.Path(dir_okay=False), help='Save a PNG card to this file'),
        click.option('--save-card', 'save_card_flag', is_flag=True,
                     help='Save a PNG card to the configured card directory'),
        click.option('--theme', type=click.Choice(['light', 'dark']), help='Card theme'),
        click.option('--share/--no-share', default=True, help='Print a share link'),
        click.option('--show-raw', is_flag=True, help='Print the full lyrics of the source song'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group(invoke_without_command=True)
@click.option('--version', is_flag=True, help='Show version information')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--config', type=click.Path(exists=True, dir_okay=False), help='Path to config file')
@click.pass_context
def cli(ctx, version, verbose, config):
    """
    Lyric Finder - a random lyric line from any artist

    Searches the artist's songs, tries their lyrics and picks one line you can
    share or save as an image.
    """
    ctx.ensure_object(dict)

    if version:
        click.echo(f"Lyric Finder v{__version__}")
        return

    if config:
        reload_settings(config)
        # Clients read settings at construction
        reset_catalog_client()
        reset_lyricsovh_provider()
        reset_discovery()

    try:
        get_settings().validate(strict=True)
    except ConfigError as e:
        click.echo(click.style(f"Error: {e}", fg='red'), err=True)
        # config commands stay usable so the file can be repaired
        if ctx.invoked_subcommand != 'config':
            sys.exit(1)
    else:
        configure_from_settings(verbose=verbose)
    ctx.obj['verbose'] = verbose

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@discovery_options
@handle_error
def find(artist, prefer_long, card_path, save_card_flag, theme, share, show_raw):
    """Find a random lyric line for ARTIST"""
    click.echo("Looking up — this may take a few seconds…")
    run_discovery(artist, prefer_long, card_path, save_card_flag, theme, share, show_raw)


@cli.command()
@discovery_options
@handle_error
def another(artist, prefer_long, card_path, save_card_flag, theme, share, show_raw):
    """Try for another line by ARTIST"""
    click.echo("Trying for another line…")
    run_discovery(
        artist, prefer_long, card_path, save_card_flag, theme, share, show_raw,
        not_found_message="No other lyric lines found."
    )


@cli.command()
@click.argument('link')
@click.option('--card', 'card_path', type=click.Path(dir_okay=False), help='Save a PNG card to this file')
@click.option('--theme', type=click.Choice(['light', 'dark']), help='Card theme')
@handle_error
def restore(link, card_path, theme):
    """
    Show a shared line from LINK (URL or query string)

    Links that name only an artist start a new search for that artist.
    """
    try:
        finding = restore_from_query(link)
    except ShareLinkError as e:
        click.echo(click.style(f"Invalid share link: {e}", fg='red'), err=True)
        sys.exit(1)

    if finding is None:
        artist = artist_from_query(link)
        click.echo(f"No shared line in link, searching for {artist}…")
        run_discovery(artist, None, card_path, False, theme, True, False)
        return

    logger.console_info("Loaded shared quote from URL.")
    print_finding(finding, share=False)
    export_card(finding, card_path, False, theme)


@cli.group()
def config():
    """Configuration management"""
    pass


@config.command()
def show():
    """Show current configuration"""
    settings = get_settings()
    click.echo(f"Config file: {settings.config_path or '(defaults)'}")
    log_file = get_current_log_file()
    if log_file:
        click.echo(f"Log file: {log_file}")
    for section, values in settings.to_dict().items():
        click.echo(click.style(f"\n[{section}]", fg='green', bold=True))
        for key, value in values.items():
            click.echo(f"  {key}: {value}")


@config.command(name='set')
@click.option('--theme', type=click.Choice(['light', 'dark']), help='Set card theme')
@click.option('--prefer-long/--any-length', default=None, help='Set default line length preference')
@click.option('--sample-attempts', type=click.IntRange(min=0), help='Set random sampling budget')
@click.option('--catalog-limit', type=click.IntRange(min=1), help='Set catalog over-fetch limit')
@click.option('--card-dir', type=click.Path(file_okay=False), help='Set card output directory')
@click.option('--share-url', help='Set base URL for share links')
@handle_error
def set_config(theme, prefer_long, sample_attempts, catalog_limit, card_dir, share_url):
    """Update configuration values"""
    settings = get_settings()
    changes = []

    if theme:
        settings.card.theme = theme
        changes.append(f"card.theme = {theme}")
    if prefer_long is not None:
        settings.discovery.prefer_long = prefer_long
        changes.append(f"discovery.prefer_long = {prefer_long}")
    if sample_attempts is not None:
        settings.discovery.sample_attempts = sample_attempts
        changes.append(f"discovery.sample_attempts = {sample_attempts}")
    if catalog_limit is not None:
        settings.catalog.limit = catalog_limit
        changes.append(f"catalog.limit = {catalog_limit}")
    if card_dir:
        settings.card.output_directory = card_dir
        changes.append(f"card.output_directory = {card_dir}")
    if share_url is not None:
        settings.share.base_url = share_url
        changes.append(f"share.base_url = {share_url}")

    if not changes:
        click.echo("No changes specified")
        return

    settings.validate(strict=True)
    path = settings.save_config(settings.config_path)
    for change in changes:
        click.echo(f"  {change}")
    click.echo(click.style(f"Configuration saved to {path}", fg='green'))


@config.command()
@click.confirmation_option(prompt='Reset configuration to defaults?')
@handle_error
def reset():
    """Reset configuration to defaults"""
    settings = get_settings()
    settings.reset_defaults()
    path = settings.save_config(settings.config_path)
    click.echo(click.style(f"Configuration reset: {path}", fg='green'))


if __name__ == '__main__':
    cli()
