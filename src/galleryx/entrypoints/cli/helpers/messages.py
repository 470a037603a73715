"""Terminal message helpers for the GALLERYX CLI.

User-visible status lines with emoji→ASCII fallbacks. They go to stderr so that
stdout only carries command results (ids, listings) and stays pipe-friendly.
"""

import click

# kind -> (emoji, ascii fallback, colour)
_STYLES: dict[str, tuple[str, str, str]] = {
    "warn": ("⚠️", "[!]", "yellow"),
    "success": ("✅", "[OK]", "green"),
    "error": ("❌", "[X]", "red"),
}


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Re-queries click's stderr stream on every call so that terminals without
    UTF-8 get the ASCII fallback instead of a `UnicodeEncodeError`.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: str) -> str:
    """Marker for a message kind ("warn", "success" or "error").

    Returns:
        str: The emoji when stderr can encode it, otherwise its ASCII fallback.
    """
    emoji, fallback, _ = _STYLES[kind]
    return emoji if _supports_character(emoji) else fallback


def _emit(kind: str, msg: str) -> None:
    colour = _STYLES[kind][2]
    click.secho(f"{glyph(kind)}  {msg}", fg=colour, bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**."""
    _emit("warn", msg)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Added artist 0 (Rob Miles).``
    """
    _emit("success", msg)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Domain error messages are passed through verbatim.
    """
    _emit("error", msg)
