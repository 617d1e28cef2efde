# Lightweight package init: the CLI and YAML loaders are imported on demand.
__all__ = [
    "Suite", "Test", "Browser", "RenderContext", "RenderOptions",
    "suppress_error_highlighting", "omit_external_stack_frames", "set_error_formatter_method",
    "reset_render_context", "get_render_context", "format_error_line",
]

def __getattr__(name):
    if name in __all__ and name != "format_error_line":
        from .data import types as _types
        return getattr(_types, name)
    if name == "format_error_line":
        from .formatting import format_error_line as _format_error_line
        return _format_error_line
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
