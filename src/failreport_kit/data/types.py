"""Result tree records (Suite -> Test -> Browser) and their console rendering.

Depth is assigned by whoever builds the tree; nothing here derives it. Styling
and error policy come from a RenderContext. Calls that pass no context use the
module default, which the policy functions at the bottom of this file mutate.
"""
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple
from ..formatting import DEFAULT_EXTERNAL_MARKERS, format_error_line, is_external_frame
from ..styles import AnsiStyler, Styler

TAB = 3

def _indent(styler: Styler, depth: int) -> str:
    return styler.move_right(depth * TAB + 1)

@dataclass
class RenderOptions:
    suppress_error_highlighting: bool = False
    omit_external_stack_frames: bool = False
    error_formatter: Callable[[str], str] = format_error_line
    external_markers: Tuple[str, ...] = DEFAULT_EXTERNAL_MARKERS

@dataclass
class RenderContext:
    styler: Styler = field(default_factory=AnsiStyler)
    options: RenderOptions = field(default_factory=RenderOptions)

    def suppress_error_highlighting(self) -> None:
        self.options.suppress_error_highlighting = True

    def omit_external_stack_frames(self) -> None:
        self.options.omit_external_stack_frames = True

    def set_error_formatter_method(self, formatter: Callable[[str], str]) -> None:
        self.options.error_formatter = formatter

_default_context = RenderContext()

def get_render_context() -> RenderContext:
    return _default_context

def reset_render_context(context: Optional[RenderContext] = None) -> RenderContext:
    """Replace the default context (fresh ANSI defaults when none is given)."""
    global _default_context
    _default_context = context if context is not None else RenderContext()
    return _default_context

def _resolve(context: Optional[RenderContext]) -> RenderContext:
    return context if context is not None else _default_context

class Suite:
    def __init__(self, name: str):
        self.name = name
        self.depth = 0
        self.suites: List["Suite"] = []
        self.tests: List["Test"] = []

    def to_string(self, context: Optional[RenderContext] = None) -> str:
        ctx = _resolve(context)
        styler = ctx.styler
        name = styler.suite_root(self.name) if self.depth == 0 else styler.suite(self.name)
        return "\n".join([
            _indent(styler, self.depth) + name,
            "\n\n".join(t.to_string(ctx) for t in self.tests),
            "",
            "\n\n".join(s.to_string(ctx) for s in self.suites),
            "", "", "",
        ])

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Suite(name={self.name!r}, depth={self.depth}, suites={len(self.suites)}, tests={len(self.tests)})"

class Test:
    def __init__(self, name: str):
        self.name = name
        self.depth = 0
        self.browsers: List["Browser"] = []

    def to_string(self, context: Optional[RenderContext] = None) -> str:
        ctx = _resolve(context)
        lines = [_indent(ctx.styler, self.depth) + ctx.styler.failure(self.name)]
        lines.extend(b.to_string(ctx) for b in self.browsers)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Test(name={self.name!r}, depth={self.depth}, browsers={len(self.browsers)})"

class Browser:
    def __init__(self, name: str):
        self.name = name
        self.depth = 0
        self.errors: List[str] = []

    def _error_lines(self, ctx: RenderContext) -> List[str]:
        styler, opts = ctx.styler, ctx.options
        lines = []
        for i, error in enumerate(self.errors):
            if i == 0:
                lines.append(_indent(styler, self.depth + 1) + "1) " + styler.error_summary(error))
                continue
            external = is_external_frame(error, opts.external_markers)
            if external and opts.omit_external_stack_frames:
                continue
            text = opts.error_formatter(error)
            if external or opts.suppress_error_highlighting:
                styled = styler.muted(text)
            else:
                styled = styler.highlight(text)
            lines.append(_indent(styler, self.depth + 2) + styled)
        return lines

    def to_string(self, context: Optional[RenderContext] = None) -> str:
        ctx = _resolve(context)
        lines = [_indent(ctx.styler, self.depth) + ctx.styler.browser(self.name)]
        lines.extend(self._error_lines(ctx))
        return "\n".join(lines)

    def to_standalone_string(self, suite: Suite, test: Test, context: Optional[RenderContext] = None) -> str:
        """Render this failure with its suite and test names above it, outside the tree."""
        ctx = _resolve(context)
        return "\n".join([
            ctx.styler.suite(suite.name),
            _indent(ctx.styler, test.depth) + ctx.styler.failure(test.name),
            self.to_string(ctx),
        ])

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Browser(name={self.name!r}, depth={self.depth}, errors={len(self.errors)})"

# Policy setters acting on the default context. Configure before rendering.

def suppress_error_highlighting() -> None:
    _default_context.suppress_error_highlighting()

def omit_external_stack_frames() -> None:
    _default_context.omit_external_stack_frames()

def set_error_formatter_method(formatter: Callable[[str], str]) -> None:
    _default_context.set_error_formatter_method(formatter)
