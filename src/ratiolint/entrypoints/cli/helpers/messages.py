"""Terminal status lines for the ratiolint CLI.

Each helper writes one bold, colored line to stderr, led by an emoji when
the stream can encode it and an ASCII marker otherwise. stdout is left to
the report.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
FAILURE = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call so redirected or replaced
    streams are honored.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(pair: tuple[str, str]) -> str:
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️" or the ASCII fallback "[!]"."""
    return _glyph(CAUTION)


def success_glyph() -> str:
    """Return "✅" or the ASCII fallback "[OK]"."""
    return _glyph(SUCCESS)


def error_glyph() -> str:
    """Return "❌" or the ASCII fallback "[X]"."""
    return _glyph(FAILURE)


def warn(msg: str) -> None:
    """Emit a yellow warning line to stderr, e.g. ``⚠️  No test identifiers found.``"""
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green success line to stderr, e.g. ``✅  All 3 functions follow the convention.``"""
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red error line to stderr, e.g. ``❌  4 violations found.``"""
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
