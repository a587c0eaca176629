#!/usr/bin/env python

import sys


DEFAULT_EXCLUDES = (0, 7, 15)

class InvalidExcludeId(Exception):
    pass

class InvalidColorId(Exception):
    pass

class DegenerateColorSpace(Exception):
    pass


def _parse_id(token, total_colors):
    token = token.strip()
    if not token.isdigit():
        raise ValueError("not a non-negative integer: %r" % token)
    color_id = int(token)
    if color_id >= total_colors:
        raise ValueError("%s is out of range [0, %s)" % (color_id, total_colors))
    return color_id

def parse_excludes(values, total_colors):
    """Build the excluded set from comma separated strings.

    Returns a sorted tuple without duplicates. Empty tokens (trailing commas)
    are ignored."""
    excluded = set()
    for value in values:
        for token in value.split(","):
            if not token.strip():
                continue
            try:
                excluded.add(_parse_id(token, total_colors))
            except ValueError as e:
                raise InvalidExcludeId("Invalid excluded color id: %s" % e)
    return tuple(sorted(excluded))

def parse_default_excludes(values, total_colors):
    """Like parse_excludes, but ids the terminal does not have are dropped,
    so the stock 0,7,15 still works on 8 color terminals."""
    excluded = set()
    for value in values:
        for token in value.split(","):
            if not token.strip():
                continue
            try:
                excluded.add(_parse_id(token, sys.maxsize))
            except ValueError as e:
                raise InvalidExcludeId("Invalid default excluded color id: %s" % e)
    return tuple(sorted(e for e in excluded if e < total_colors))

def parse_color_id(value, total_colors):
    try:
        return _parse_id(str(value), total_colors)
    except ValueError as e:
        raise InvalidColorId("Invalid color id: %s" % e)

def shift_single_pass(candidate, excluded):
    """One pass over excluded in iteration order, bumping candidate past each
    id it has reached. Only correct when excluded is in ascending order."""
    for e in excluded:
        if candidate >= e:
            candidate += 1
    return candidate

def shift_past_excluded(candidate, excluded):
    """Map candidate to the candidate-th id not in excluded, regardless of
    the order excluded is given in."""
    excluded = set(excluded)
    shifted = candidate
    while True:
        below = len([e for e in excluded if e <= shifted])
        if candidate + below == shifted:
            return shifted
        shifted = candidate + below

def usable_count(total_colors, excluded):
    return total_colors - len(set(excluded))

def select_color(hash_value, total_colors, excluded):
    if hash_value < 0:
        raise ValueError("hash must be non-negative: %s" % hash_value)
    if total_colors < 1:
        raise ValueError("color count must be positive: %s" % total_colors)

    usable = usable_count(total_colors, excluded)
    if usable <= 1:
        raise DegenerateColorSpace(
            "%s excluded ids leave %s usable colors out of %s, need at least 2" %
            (len(set(excluded)), max(usable, 0), total_colors))

    # the top usable id is never picked, kept for compatibility with ids
    # already chosen by existing prompts
    candidate = hash_value % (usable - 1)
    return shift_past_excluded(candidate, excluded)



if __name__ == "__main__":
    try:
        total = int(sys.argv[2]) if len(sys.argv) > 2 else 16
        excluded = parse_excludes(sys.argv[3:] or ["0,7,15"], total)
        print(select_color(int(sys.argv[1]), total, excluded))
    except IndexError:
        print("Usage:  %s <hash> [<colors> [<exclude>...]]" % sys.argv[0])
