import os, sys

_TRUTHY = ("1", "true", "yes", "on")

def debug_enabled() -> bool:
    return os.environ.get("DOTWALK_DEBUG", "").strip().lower() in _TRUTHY

def debug_print(*args, **kwargs):
    if not debug_enabled():
        return
    kwargs.setdefault("file", sys.stderr)
    kwargs.setdefault("flush", True)
    print(*args, **kwargs)
