from .driver import run_lines

__all__ = ["run_lines"]
