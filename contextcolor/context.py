#!/usr/bin/env python

import os
import subprocess
import sys


DEFAULT_COMMAND = "whoami; hostname"

# byte order collation, so sorting commands hash the same in every locale
FORCED_ENV = {"LC_ALL": "C"}

class ExternalCommandFailure(Exception):
    def __init__(self, command, status=None, reason=None):
        self.command = command
        self.status = status
        self.reason = reason
        if reason:
            msg = "Command failed: %s: %s" % (command, reason)
        else:
            msg = "Command failed with exit status %s: %s" % (status, command)
        Exception.__init__(self, msg)


def get_env():
    env = os.environ.copy()
    env.update(FORCED_ENV)
    return env

def run_context(command):
    try:
        return subprocess.check_output(command, shell=True, env=get_env())
    except subprocess.CalledProcessError as e:
        raise ExternalCommandFailure(command, status=e.returncode)
    except OSError as e:
        raise ExternalCommandFailure(command, reason=e.strerror or str(e))

def normalize_context(output):
    """Like `echo "$(command)"`: trailing newlines collapse into one."""
    return output.rstrip(b"\n") + b"\n"



if __name__ == "__main__":
    command = " ".join(sys.argv[1:]) or DEFAULT_COMMAND
    print(repr(normalize_context(run_context(command))))
