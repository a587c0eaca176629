#!/usr/bin/env python

import collections
import os

from contextcolor import context
from contextcolor import hashing
from contextcolor import palette
from contextcolor import selector


DEFAULT_METHOD = "sum"
DEFAULT_PALETTE = palette.TputPalette.name
DEFAULT_EXCLUDE = ",".join(str(e) for e in selector.DEFAULT_EXCLUDES)

Config = collections.namedtuple("Config", [
    "command",           # context command, run through the shell
    "default_excludes",  # raw strings, ids past the color count are dropped
    "excludes",          # raw user strings, validated once the color count is known
    "method",
    "palette",
    "background",
    "id_only",
    "prompt",
    "debug",
    "color",             # forced color id or None
])


def get_defaults(environ=None):
    environ = os.environ if environ is None else environ
    return {
        "command": environ.get("CONTEXT_COLOR_COMMAND") or context.DEFAULT_COMMAND,
        "exclude": environ.get("CONTEXT_COLOR_EXCLUDE") or DEFAULT_EXCLUDE,
        "method": environ.get("CONTEXT_COLOR_METHOD") or DEFAULT_METHOD,
        "palette": environ.get("CONTEXT_COLOR_PALETTE") or DEFAULT_PALETTE,
    }

def build_config(opts, environ=None):
    """Merge parsed options over the defaults. Options left unset on the
    command line are None (or False for toggles)."""
    defaults = get_defaults(environ)

    default_excludes = ()
    if not opts.no_default_excludes:
        default_excludes = (defaults["exclude"],)

    method = opts.method or defaults["method"]
    if method not in hashing.METHODS:
        raise hashing.UnknownMethod("Unknown hash method: %s (choose from %s)" %
                                    (method, ", ".join(hashing.METHODS)))
    palette_name = opts.palette or defaults["palette"]
    if palette_name not in palette.PALETTES:
        raise palette.UnknownPalette("Unknown palette: %s (choose from %s)" %
                                     (palette_name, ", ".join(palette.PALETTES)))

    return Config(
        command=opts.command or defaults["command"],
        default_excludes=default_excludes,
        excludes=tuple(opts.exclude or []),
        method=method,
        palette=palette_name,
        background=bool(opts.background),
        id_only=bool(opts.id_only),
        prompt=bool(opts.prompt),
        debug=bool(opts.debug),
        color=opts.color,
    )
