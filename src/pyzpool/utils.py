# --- START OF FILE utils.py ---

import re


def parse_size(size_str):
    """Parses ZFS size strings (e.g., 1.23G, 100M, 500K, 2T) into bytes.

    Exact values printed under `-p` are plain integers and pass straight through.
    """
    if isinstance(size_str, (int, float)):
        return int(size_str)
    if size_str is None or not isinstance(size_str, str):
        return 0

    size_str = size_str.upper().strip()
    if size_str in ('', '-'):
        return 0
    # Allow for optional 'B' at the end, and 'iB' for kibibytes etc.
    match = re.match(r'^([\d.]+)\s*([KMGTPEZY])?I?B?$', size_str)
    if not match:
        try:
            # Assume bytes if no unit and conversion works
            return int(float(size_str))
        except ValueError:
            raise ValueError(f"Invalid size format: '{size_str}'")

    value = float(match.group(1))
    unit = match.group(2)

    units = {'K': 1, 'M': 2, 'G': 3, 'T': 4, 'P': 5, 'E': 6, 'Z': 7, 'Y': 8}
    if unit:
        value *= 1024 ** units[unit]

    return int(value)


# --- END OF FILE utils.py ---
