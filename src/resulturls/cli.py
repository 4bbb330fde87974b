import logging
import os

import click
from rich.console import Console
from rich.logging import RichHandler

from .constants import DEFAULT_CONFIG_FILE
from .core import UrlGenerator, create
from .errors import UrlGeneratorError
from .errors_catalog import actionable_error
from .services.config_loader import ConfigLoader


def _resolve_option(cli_value, config, key, default=None):
    if cli_value is not None:
        return cli_value
    if key in config:
        return config[key]
    return default


def _build_url(generator: UrlGenerator, resource: str, argument, extra_params, video) -> str:
    if resource == "result-page":
        return generator.result_page(argument, extra_params)
    if resource == "thumbnail":
        return generator.thumbnail(argument)
    if resource == "generated-image":
        return generator.generated_image(argument)
    if resource == "result-summary":
        return generator.result_summary(extra_params)
    if resource == "file":
        return generator.get_file(argument, video or "")
    if resource == "gzip":
        return generator.get_gzip(argument)
    if resource == "response-body":
        return generator.response_body_by_request_number(argument)
    if resource == "response-body-id":
        return generator.response_body_by_body_id(argument)
    if resource == "create-video":
        return generator.create_video()
    return generator.download_video_frames()


RESOURCES = {
    "result-page": "page",
    "thumbnail": "image",
    "generated-image": "image",
    "result-summary": None,
    "file": "file",
    "gzip": "file",
    "response-body": "request number",
    "response-body-id": "body id",
    "create-video": None,
    "download-frames": None,
}


logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_level=False,
            show_path=False,
        )
    ],
)


@click.command()
@click.argument("resource", type=click.Choice(list(RESOURCES)))
@click.argument("argument", required=False)
@click.option("--base-url", required=False, help="Base URL of the server, e.g. https://results.example.com")
@click.option("--test-id", required=False, help="ID of the test, e.g. 210101_AB1234_1")
@click.option("--run", required=False, type=int, default=None, help="Run number (default: 1)")
@click.option(
    "--cached/--uncached",
    default=None,
    help="Address the cached (repeat view) run instead of the first view.",
)
@click.option("--step", required=False, type=int, default=None, help="Step number (default: 1)")
@click.option(
    "--friendly/--standard",
    "friendly_urls",
    default=None,
    help="Generate path based URLs for servers with rewrite rules (default: standard).",
)
@click.option(
    "--extra-params",
    required=False,
    help="Query parameters appended to result pages and summaries, without leading '?' or '&'.",
)
@click.option("--video", required=False, help="Video directory the requested file belongs to.")
@click.option(
    "--config",
    required=False,
    type=click.Path(),
    help=f"Path to a YAML configuration file. Defaults to {DEFAULT_CONFIG_FILE} if present.",
)
@click.option("--verbose", is_flag=True, default=None, help="Enable verbose logging")
@click.option("--log-file", type=click.Path(), help="Path to log file")
def main(
    resource,
    argument,
    base_url,
    test_id,
    run,
    cached,
    step,
    friendly_urls,
    extra_params,
    video,
    config,
    verbose,
    log_file,
):
    """Print the URL of a test run RESOURCE.

    ARGUMENT is the page, image, file, request number or body id the
    resource needs.
    """
    logger = logging.getLogger("resulturls")

    try:
        config_loader = ConfigLoader()
        resolved_config = config
        if resolved_config is None:
            default_config_path = os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE)
            if os.path.exists(default_config_path):
                resolved_config = default_config_path

        config_values = config_loader.load(resolved_config)
    except UrlGeneratorError as exc:
        raise click.ClickException(str(exc)) from exc

    base_url = _resolve_option(base_url, config_values, "base_url")
    test_id = _resolve_option(test_id, config_values, "test_id")
    run = _resolve_option(run, config_values, "run", default=1)
    cached = _resolve_option(cached, config_values, "cached", default=False)
    step = _resolve_option(step, config_values, "step", default=1)
    friendly_urls = _resolve_option(friendly_urls, config_values, "friendly_urls", default=False)
    verbose = bool(_resolve_option(verbose, config_values, "verbose", default=False))
    log_file = _resolve_option(log_file, config_values, "log_file")

    if not base_url:
        raise click.ClickException(actionable_error("missing_base_url"))
    if not test_id:
        raise click.ClickException(actionable_error("missing_test_id"))

    argument_name = RESOURCES[resource]
    if argument_name and argument is None:
        raise click.UsageError(f"Resource '{resource}' requires an argument: {argument_name}.")

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(file_handler)

    try:
        generator = create(friendly_urls, base_url, test_id, run, cached, step)
        url = _build_url(generator, resource, argument, extra_params, video)
    except UrlGeneratorError as exc:
        raise click.ClickException(str(exc)) from exc

    logger.debug("Generated %s URL for %s", resource, generator.style_name)
    click.echo(url)


if __name__ == "__main__":
    main()
