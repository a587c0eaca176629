#!/usr/bin/env python

import subprocess
import sys

from contextcolor import context
from contextcolor.context import ExternalCommandFailure


RESET = "\033[0m"

# readline markers for text that takes up no space on the line
PROMPT_START = "\001"
PROMPT_END = "\002"

class UnknownPalette(Exception):
    pass


def wrap_prompt(s):
    return PROMPT_START + s + PROMPT_END


class TputPalette(object):
    """Color count and sequences from the terminfo database, through tput."""

    name = "tput"

    def __init__(self, term=None):
        self.term = term

    def _tput(self, *args):
        args = ["tput"] + (self.term and ["-T", self.term] or []) + list(args)
        try:
            out = subprocess.check_output(args, env=context.get_env())
        except subprocess.CalledProcessError as e:
            raise ExternalCommandFailure(" ".join(args), status=e.returncode)
        except OSError as e:
            raise ExternalCommandFailure(" ".join(args), reason=e.strerror or str(e))
        return out.decode("latin-1")

    def colors(self):
        out = self._tput("colors").strip()
        try:
            count = int(out)
        except ValueError:
            raise ExternalCommandFailure("tput colors",
                                         reason="unexpected color count %r" % out)
        if count < 1:
            raise ExternalCommandFailure("tput colors",
                                         reason="terminal has no colors")
        return count

    def sequence(self, color_id, background=False):
        return self._tput(background and "setab" or "setaf", str(color_id))

    def reset(self):
        return self._tput("sgr0")


class AnsiPalette(object):
    """Fixed xterm style palette, for output not bound to the current terminal."""

    name = "ansi"

    def __init__(self, count=256):
        self.count = count

    def colors(self):
        return self.count

    def sequence(self, color_id, background=False):
        base = background and 40 or 30
        if color_id < 8:
            return "\033[%sm" % (base + color_id)
        if color_id < 16:
            return "\033[%sm" % (base + 60 + color_id - 8)
        return "\033[%s;5;%sm" % (base + 8, color_id)

    def reset(self):
        return RESET


_palettes = {
    TputPalette.name: TputPalette,
    AnsiPalette.name: AnsiPalette,
}

PALETTES = sorted(_palettes.keys())

def get_palette(name):
    try:
        return _palettes[name]()
    except KeyError:
        raise UnknownPalette("Unknown palette: %s (choose from %s)" %
                             (name, ", ".join(PALETTES)))



if __name__ == "__main__":
    palette = get_palette(sys.argv[1] if len(sys.argv) > 1 else "tput")
    for color_id in range(palette.colors()):
        sys.stdout.write("%s %3s %s" % (palette.sequence(color_id, background=True),
                                       color_id, palette.reset()))
        if color_id % 8 == 7:
            sys.stdout.write("\n")
    sys.stdout.write("\n")
