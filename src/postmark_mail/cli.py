"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys

import click

from postmark_mail.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    load_configuration,
    write_placeholder_configuration,
)
from postmark_mail.delivery import ApiTransport
from postmark_mail.errors import PostmarkMailError
from postmark_mail.message_composition import MailMessage, create_message


class CliError(Exception):
    """Custom CLI error."""


def _parse_header(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> list[tuple[str, str]]:
    headers = []
    for raw in values:
        name, separator, value = raw.partition(":")
        if not separator or not name.strip():
            raise click.BadParameter(f"expected 'Name: Value', got {raw!r}")
        headers.append((name.strip(), value.strip()))
    return headers


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="postmark-mail")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Send transactional email through the Postmark API."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="send")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration file",
)
@click.option("--api-key", "api_key", required=False, help="Server token; overrides the config")
@click.option("--from", "sender", required=False, help="Sender address")
@click.option("--to", "to", required=True, help="Recipient address(es), comma separated")
@click.option("--subject", required=True, help="Subject line")
@click.option("--cc", default="", help="Cc address(es), comma separated")
@click.option("--bcc", default="", help="Bcc address(es), comma separated")
@click.option("--reply-to", "reply_to", required=False, help="Reply-To address")
@click.option("--tag", required=False, help="Postmark tag")
@click.option("--text", "text_body", default="", help="Plain text body")
@click.option("--html", "html_body", default="", help="HTML body")
@click.option(
    "--attach",
    "attachments",
    multiple=True,
    type=click.Path(path_type=str),
    help="File to attach; may be repeated",
)
@click.option(
    "--header",
    "headers",
    multiple=True,
    callback=_parse_header,
    help="Custom header as 'Name: Value'; may be repeated",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Print the JSON request body instead of sending it.",
)
def send(  # pylint: disable=too-many-arguments,too-many-locals
    config_path: str | None,
    api_key: str | None,
    sender: str | None,
    to: str,
    subject: str,
    cc: str,
    bcc: str,
    reply_to: str | None,
    tag: str | None,
    text_body: str,
    html_body: str,
    attachments: tuple[str, ...],
    headers: list[tuple[str, str]],
    dry_run: bool,
) -> None:
    """Compose a message and send it (or print it with --dry-run)."""
    try:
        configuration = load_configuration(config_path) if config_path else None
        token = api_key or (configuration.api.server_token if configuration else None)
        if not token:
            raise CliError("Either --api-key or --config must provide a server token.")

        message = create_message(token)
        _apply_envelope(
            message,
            configuration,
            sender=sender,
            reply_to=reply_to,
            tag=tag,
        )
        message.to = to
        message.cc = cc
        message.bcc = bcc
        message.subject = subject
        message.text_body = text_body
        message.html_body = html_body
        for name, value in headers:
            message.add_custom_header(name, value)
        for attachment_path in attachments:
            message.add_attachment(attachment_path)

        if dry_run:
            click.echo(json.dumps(message.payload_fields(), indent=2, ensure_ascii=False))
            return

        transport = configuration.api.create_transport() if configuration else ApiTransport()
        with transport:
            reply = message.send(transport)
    except PostmarkMailError as exc:
        raise CliError(str(exc)) from exc
    click.echo(reply.message_id)


def _apply_envelope(
    message: MailMessage,
    configuration: Configuration | None,
    *,
    sender: str | None,
    reply_to: str | None,
    tag: str | None,
) -> None:
    defaults = configuration.defaults if configuration else None
    message.sender = sender or (defaults.sender if defaults else None) or ""
    message.reply_to = reply_to or (defaults.reply_to if defaults else None) or ""
    message.tag = tag or (defaults.tag if defaults else None) or ""


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
