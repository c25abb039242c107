from datetime import timedelta

import regex

# e.g. 00:59:00,123 or 00:59:00.123
timestamp_pattern = regex.compile(r'(\d\d):(\d\d):(\d\d)[,\.](\d\d\d)')

def TimestampToTimedelta(hours : str, minutes : str, seconds : str, milliseconds : str) -> timedelta:
    # Groups only ever match digits
    return timedelta(hours=int(hours), minutes=int(minutes), seconds=int(seconds), milliseconds=int(milliseconds))

def ParseTimestamp(value : str) -> timedelta:
    """
    Parse a timestamp in the form 00:00:00,000 (or 00:00:00.000), raising ValueError if it is invalid
    """
    match = timestamp_pattern.search(value or "")
    if not match:
        raise ValueError(f"Invalid time: {value}")

    return TimestampToTimedelta(*match.groups())

def GetTimeDelta(value : timedelta|str|int|float|None) -> timedelta|None:
    """
    Convert a value to a timedelta: a timestamp string, or a number of milliseconds
    """
    if value is None or isinstance(value, timedelta):
        return value

    if isinstance(value, (int, float)):
        return timedelta(milliseconds=value)

    value = value.strip()
    if regex.fullmatch(r'[+-]?\d+', value):
        return timedelta(milliseconds=int(value))

    return ParseTimestamp(value)
