"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "verifier.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Verifier configuration template for provider-verifier.
# Every setting is optional; remove the ones you do not need.

verifier:
  # Controls body diff rendering for mismatching bodies:
  #   true / not_set -> always render a diff
  #   false or ""    -> never render a diff
  #   size (512, 1KB, 4 mb, 1GB) -> render only when the larger body fits the size
  # The PROVIDER_VERIFIER_GENERATE_DIFF environment variable overrides this value.
  generate_diff: "not_set"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML verifier configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder verifier configuration template to the requested output path.

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
        raise FileExistsError(
            f"Verifier configuration file already exists: {destination.resolve()}"
        )
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
