#!/usr/bin/env python3
"""
Command-line entry point for LinkScout.

Crawls a seed URL, collects every linked resource (anchors, scripts,
stylesheets, images) and prints or saves the unique URLs.

Options:
  --url, -u URL          Seed URL, or a file with one URL per line
  --cookie VALUE         Cookie header sent with every request
  --authorization VALUE  Authorization header sent with every request
  --output, -o PATH      Save results (PATH ending in .json writes JSON)
  --recursive, -r        Also crawl same-host links found on the seed page
  --config, -c PATH      YAML/JSON file with default settings
  --timeout SEC          Per-request timeout
  --concurrency N        Maximum number of pages fetched at once
  --user-agent VALUE     User-Agent header
  --log-level LEVEL      Logging level (DEBUG, INFO, ...)
  --log-file PATH        Also write logs to this file
  --no-banner            Do not print the banner
  --version, -v          Show the LinkScout version

URLs piped on stdin are echoed with terminal formatting instead of crawling.

Example:
  link_scout -u https://example.com -r -o result.json
"""
import asyncio
import sys
import time
from pathlib import Path
from typing import List

import click

from link_scout import __version__
from link_scout.banner import show_banner
from link_scout.config import load_config
from link_scout.errors import CrawlError, OutputError
from link_scout.logger import configure as configure_logging, logger
from link_scout.report import echo_urls, write_output
from link_scout.scanner import start_scan
from link_scout.utils import clean_lines, read_url_list, remove_duplicates

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def read_piped_urls() -> List[str]:
    """Non-blank lines from stdin when it is a pipe or file, else nothing."""
    stdin = click.get_text_stream('stdin')
    if stdin.isatty():
        return []
    return clean_lines(stdin.read().splitlines())


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LinkScout, version %(version)s')
@click.option('--url', '-u', 'url', default=None, help='Target URL to crawl (or a file of URLs).')
@click.option('--cookie', 'cookie', default=None, help='Cookie value if required.')
@click.option('--authorization', 'authorization', default=None, help='Authorization header if required.')
@click.option(
    '--output', '-o', 'output',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Output file to save results (.json for JSON).'
)
@click.option(
    '--recursive/--no-recursive', '-r', 'recursive',
    default=None,
    help='Enable recursive crawling of same-host links.'
)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML/JSON settings file.'
)
@click.option('--timeout', 'timeout', type=float, default=None, help='Per-request timeout (seconds).')
@click.option('--concurrency', 'concurrency', type=int, default=None, help='Maximum parallel fetches.')
@click.option('--user-agent', 'user_agent', default=None, help='User-Agent header.')
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Path to a log file (stderr only if omitted)'
)
@click.option('--no-banner', is_flag=True, help='Do not print the banner.')
def cli(url, cookie, authorization, output, recursive, config_path, timeout, concurrency,
        user_agent, log_level, log_file, no_banner):
    """Crawl a URL and list every linked resource."""
    started = time.monotonic()
    configure_logging(level=log_level, log_file=log_file)
    if not no_banner:
        show_banner()

    piped = read_piped_urls()
    if piped:
        echo_urls(piped)
        return

    try:
        cfg = load_config(config_path).merged(
            url=url,
            cookie=cookie,
            authorization=authorization,
            output=output,
            recursive=recursive,
            timeout=timeout,
            concurrency=concurrency,
            user_agent=user_agent,
        )
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Error loading configuration: {e}')

    if not cfg.url:
        raise click.UsageError('URL is required. Use --url flag.')

    if Path(cfg.url).is_file():
        try:
            urls = remove_duplicates(read_url_list(cfg.url))
            write_output(urls, cfg.output)
        except (OSError, UnicodeDecodeError, OutputError) as e:
            print_error(f'Error processing file: {e}')
        return

    try:
        urls = asyncio.run(start_scan(cfg))
    except CrawlError as e:
        logger.error('Error crawling: %s', e)
        sys.exit(1)

    try:
        saved = write_output(urls, cfg.output)
    except OutputError as e:
        logger.error('Error writing output: %s', e)
        echo_urls(urls)
        sys.exit(1)
    if saved is not None:
        logger.info('Results written to %s', saved)

    logger.info('Total URLs found: %d', len(urls))
    logger.info('Execution Time: %.2f sec', time.monotonic() - started)


if __name__ == "__main__":
    cli()
