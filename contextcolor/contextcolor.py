#!/usr/bin/env python
#
# <desc> Color for the context a shell runs in </desc>

import sys

import ansicolor

from contextcolor import context
from contextcolor import hashing
from contextcolor import ioutils
from contextcolor import palette
from contextcolor import selector
from contextcolor.config import build_config


class ContextColor(object):
    def __init__(self, config, provider=None, run_context=None):
        self.config = config
        self.palette = provider or palette.get_palette(config.palette)
        self.run_context = run_context or context.run_context

        self.colors = None
        self.excluded = None
        self.context = None
        self.hash = None
        self.color_id = None

    @property
    def forced(self):
        return self.config.color is not None

    def resolve(self):
        """Validate the user excluded ids against the palette, then hash the
        context into a color id. A forced color skips the context."""
        self.colors = self.palette.colors()
        defaults = selector.parse_default_excludes(self.config.default_excludes, self.colors)
        user = selector.parse_excludes(self.config.excludes, self.colors)
        self.excluded = tuple(sorted(set(defaults) | set(user)))

        if self.forced:
            self.color_id = selector.parse_color_id(self.config.color, self.colors)
            return self.color_id

        output = self.run_context(self.config.command)
        self.context = context.normalize_context(output)
        self.hash = hashing.get_hasher(self.config.method)(self.context)
        self.color_id = selector.select_color(self.hash, self.colors, self.excluded)
        return self.color_id

    def sequence(self):
        seq = self.palette.sequence(self.color_id, background=self.config.background)
        if self.config.prompt:
            seq = palette.wrap_prompt(seq)
        return seq

    def report(self):
        def show(value):
            if value is None:
                return "-"
            return value

        ctx = self.context
        if ctx is not None:
            ctx = repr(ctx.decode("utf-8", "replace"))

        seq = self.palette.sequence(self.color_id, background=self.config.background)
        items = [
            ("command", self.forced and "-" or self.config.command),
            ("context", show(ctx)),
            ("method", self.forced and "-" or self.config.method),
            ("hash", show(self.hash)),
            ("palette", self.palette.name),
            ("colors", self.colors),
            ("excluded", ",".join(str(e) for e in self.excluded)),
            ("usable", selector.usable_count(self.colors, self.excluded)),
            ("forced", self.forced and "yes" or "no"),
            ("color id", self.color_id),
            ("sequence", repr(self.sequence())),
        ]
        s = ""
        for (label, value) in items:
            s += "%s %s\n" % (ansicolor.yellow(("%s:" % label).ljust(10)), value)
        s += "%s %s %s\n" % (ansicolor.yellow("sample:".ljust(10)),
                             seq + "  context-color  " + self.palette.reset(),
                             self.color_id)
        return s

    def main(self):
        self.resolve()
        if self.config.debug:
            ioutils.write_out(self.report())
        elif self.config.id_only:
            ioutils.write_out("%s\n" % self.color_id)
        else:
            ioutils.write_out(self.sequence())


ERRORS = (
    selector.InvalidExcludeId,
    selector.InvalidColorId,
    selector.DegenerateColorSpace,
    context.ExternalCommandFailure,
    hashing.UnknownMethod,
    palette.UnknownPalette,
)

def run_script(argv=None, provider=None, run_context=None, environ=None):
    (parser, a) = ioutils.init_opts("[options]")
    a("-b", "--background", action="store_true", help="Set the background color instead of the foreground")
    a("-i", "--id", action="store_true", dest="id_only", help="Print the color id, not the sequence")
    a("-p", "--prompt", action="store_true", help="Wrap the sequence in prompt non-printing markers")
    a("-c", "--command", metavar="<cmd>", dest="command", help="Context command (default: 'whoami; hostname')")
    a("-e", "--exclude", action="append", metavar="<ids>", dest="exclude",
      help="Comma separated color ids never to pick, each below the color count, repeatable (default: 0,7,15)")
    a("--no-default-excludes", action="store_true", help="Only exclude the ids given with --exclude")
    a("-m", "--method", type="choice", choices=hashing.METHODS, metavar="<method>",
      dest="method", help="Hash method: %s (default: sum)" % ", ".join(hashing.METHODS))
    a("--palette", metavar="<palette>", dest="palette",
      help="Palette: %s (default: tput)" % ", ".join(palette.PALETTES))
    a("-d", "--debug", action="store_true", help="Print a report of how the color was picked")
    a("-C", "--color", metavar="<id>", dest="color", help="Force this color id")
    (opts, args) = ioutils.parse_args(parser, argv)
    if args:
        parser.error("Unexpected arguments: %s" % " ".join(args))

    try:
        config = build_config(opts, environ)
        ContextColor(config, provider=provider, run_context=run_context).main()
    except ERRORS as e:
        ioutils.write_error(e)
        sys.exit(1)
    except KeyboardInterrupt:
        ioutils.write_abort()
        sys.exit(1)


if __name__ == "__main__":
    run_script()
