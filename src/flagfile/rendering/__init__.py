from flagfile.rendering.renderer import render_flags, render_line, write_flags

__all__ = ['render_flags', 'render_line', 'write_flags']
