"""Terminal message helpers for the GEODEX CLI.

Lines go to stderr so stdout stays machine-readable. Each line starts with
an emoji when stderr can encode it and an ASCII marker otherwise.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    try:
        character.encode(getattr(stream, "encoding", None) or "ascii")
    except UnicodeEncodeError:
        return False
    return True


def glyph(emoji: str, fallback: str) -> str:
    """Return ``emoji`` if stderr can show it, else ``fallback``."""
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Yellow bold warning, e.g. ``⚠️  This will modify your database.``"""
    click.secho(f"{glyph('⚠️', '[!]')}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Green bold success line, e.g. ``✅  Upgrade complete!``"""
    click.secho(f"{glyph('✅', '[OK]')}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Red bold error line, e.g. ``❌  Country not found!``"""
    click.secho(f"{glyph('❌', '[X]')}  {msg}", fg="red", bold=True, err=True)
