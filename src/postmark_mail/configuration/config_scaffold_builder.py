"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "postmark.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for postmark-mail.
# Replace the <REQUIRED> placeholder before running send.
# Uncomment optional keys only when your setup needs them.

api:
  # Server token of the Postmark server that sends the messages.
  server_token: "<REQUIRED>"
  # endpoint: "https://api.postmarkapp.com/email"
  # timeout_seconds: 30

# defaults:
#   # Used when the send command does not set --from, --reply-to or --tag.
#   sender: "Sender Name <sender@example.com>"
#   reply_to: "replies@example.com"
#   tag: "transactional"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
