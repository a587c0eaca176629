#!/usr/bin/env python

import optparse
import os
import sys

import ansicolor


_help_header = "context-color\n\n"

_help_vars = """\
CONTEXT_COLOR_COMMAND   Default context command (default: 'whoami; hostname').
CONTEXT_COLOR_EXCLUDE   Default excluded color ids, comma separated
  (default: 0,7,15).
CONTEXT_COLOR_METHOD    Default hash method, 'sum' or 'digest' (default: sum).
CONTEXT_COLOR_PALETTE   Palette provider, 'tput' or 'ansi' (default: tput).

TERM             Terminal whose capabilities tput consults.
"""


class OptionParser(optparse.OptionParser):
    def error(self, msg):
        write_err(ansicolor.red("%s\n\n" % msg))
        opts_help(None, None, None, self, status=2)


def write_out(s):
    sys.stdout.write(s)
    sys.stdout.flush()

def write_err(s):
    sys.stderr.write(s)
    sys.stderr.flush()

def write_abort():
    write_err("\n%s\n" % ansicolor.red("User aborted"))

def write_error(e):
    write_err("%s\n" % ansicolor.red(str(e)))

def init_opts(usage):
    parser = OptionParser(add_help_option=None)
    parser.usage = usage
    return parser, parser.add_option

def opts_help(option, opt_str, value, parser, status=0):
    write_err(_help_header +
              "Usage:  %s %s\n\n" % (os.path.basename(sys.argv[0]), parser.usage))
    for o in parser.option_list:
        var = o.metavar or ""
        short = (o._short_opts and o._short_opts[0]) or ""
        long = (o._long_opts and o._long_opts[0]) or ""
        argument = "%s %s %s" % (short, long, var)
        write_err("  %s %s\n" % (argument.strip().ljust(30), o.help))
    sys.exit(status)

def help_vars(option, opt_str, value, parser):
    write_err(_help_header + _help_vars)
    sys.exit(0)

def parse_args(parser, argv=None):
    a = parser.add_option
    a("-h", "--help", action="callback", callback=opts_help, help="Display this message")
    a("--vars", action="callback", callback=help_vars, help="Environmental variables")
    (opts, args) = parser.parse_args(argv)
    return opts, args
