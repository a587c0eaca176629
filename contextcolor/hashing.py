#!/usr/bin/env python

import hashlib
import sys


# hex digits of the digest kept, the value must fit a signed 64bit integer
DIGEST_LENGTH = 15

class UnknownMethod(Exception):
    pass


def bsd_sum(data):
    """16bit rotating checksum, the first field printed by sum(1)."""
    checksum = 0
    for byte in bytearray(data):
        checksum = (checksum >> 1) + ((checksum & 1) << 15)
        checksum = (checksum + byte) & 0xffff
    return checksum

def digest(data):
    h = hashlib.md5(data).hexdigest()
    return int(h[:DIGEST_LENGTH], 16)

_methods = {
    "sum": bsd_sum,
    "digest": digest,
}

METHODS = sorted(_methods.keys())

def get_hasher(method):
    try:
        return _methods[method]
    except KeyError:
        raise UnknownMethod("Unknown hash method: %s (choose from %s)" %
                            (method, ", ".join(METHODS)))



if __name__ == "__main__":
    data = sys.stdin.buffer.read()
    for method in METHODS:
        print("%-7s %s" % (method, get_hasher(method)(data)))
