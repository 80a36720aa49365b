"""Parser for .env-style KEY=VALUE files."""

from collections.abc import Mapping


def parse_env(content: str) -> dict[str, str]:
    """Parse .env content into a mapping.

    Blank lines and ``#`` comments are skipped. Each remaining line is split on
    its first ``=``; key and value are trimmed, quotes are kept as-is. Lines
    without ``=`` are ignored and later duplicates overwrite earlier ones.
    """
    variables: dict[str, str] = {}
    for line in content.split("\n"):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        variables[key] = value.strip()

    return variables


def format_env(variables: Mapping[str, str]) -> str:
    """Serialize a mapping as KEY=VALUE lines in iteration order."""
    return "".join(f"{key}={value}\n" for key, value in variables.items())
