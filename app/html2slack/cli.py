import json
import logging
import sys

import click

from html2slack.attachments import html_to_slack
from html2slack.config import Config
from html2slack.exceptions import Html2SlackError
from html2slack.services.slack_client import SlackClient

logger = logging.getLogger(__name__)


@click.command()
@click.argument("document", type=click.File("rb"))
@click.option(
    "--webhook-url",
    "-w",
    envvar="SLACK_WEBHOOK_URL",
    default=Config.SLACK_WEBHOOK_URL,
    help="Slack incoming webhook URL (can also use SLACK_WEBHOOK_URL env var)",
)
@click.option(
    "--post/--no-post",
    default=False,
    show_default=True,
    help="Post the converted message to the webhook",
)
@click.option(
    "--timeout",
    envvar="SLACK_REQUEST_TIMEOUT",
    type=float,
    default=Config.SLACK_REQUEST_TIMEOUT,
    show_default=True,
    help="Webhook request timeout in seconds",
)
@click.option(
    "--log-level",
    "-l",
    default="warning",
    show_default=True,
    type=click.Choice(["critical", "error", "warning", "info", "debug"]),
    help="Logging level",
)
def main(document, webhook_url, post, timeout, log_level):
    """Convert an HTML DOCUMENT into a Slack message and print it as JSON.

    Use - to read the document from standard input.
    """
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        message = html_to_slack(document.read())
    except Html2SlackError as e:
        raise click.ClickException(f"{e.error_code}: {e.message}") from e

    click.echo(json.dumps(message, indent=2, ensure_ascii=False))

    if not post:
        return
    if not webhook_url:
        raise click.UsageError("--post requires --webhook-url or SLACK_WEBHOOK_URL")

    client = SlackClient(webhook_url, timeout=timeout)
    if not client.send_message(message):
        click.echo("Failed to post message to Slack", err=True)
        sys.exit(2)
    logger.info("Message posted to Slack")


if __name__ == "__main__":
    main()
