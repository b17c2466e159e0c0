"""
Safe output utilities to handle BrokenPipeError when the CLI output is piped
"""
import sys

def safe_print(*args, **kwargs):
    """
    Safe print function that handles BrokenPipeError when output is piped
    """
    try:
        print(*args, **kwargs)
    except BrokenPipeError:
        # When piped to head/tail, ignore broken pipe errors
        sys.stderr.close()

def safe_print_block(text: str, title: str = None, width: int = 40):
    """Print a multi-line block, optionally under an underlined title."""
    if title:
        safe_print(title)
        safe_print("-" * min(width, max(len(title), 1)))
    for line in text.splitlines():
        safe_print(line)
