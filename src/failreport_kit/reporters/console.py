import logging
import sys
from typing import Optional, TextIO
from ..data.types import RenderContext, get_render_context
from ..runners.collector import ResultCollector

log = logging.getLogger(__name__)

class ConsoleReporter:
    def __init__(self, context: Optional[RenderContext] = None, stream: Optional[TextIO] = None):
        self.context = context
        self.stream = stream

    def _ctx(self) -> RenderContext:
        return self.context if self.context is not None else get_render_context()

    def _write(self, text: str) -> None:
        print(text, file=self.stream if self.stream is not None else sys.stdout)

    def emit(self, collector: ResultCollector) -> None:
        if collector.failure_count == 0:
            log.info("no failures to report")
            return
        ctx = self._ctx()
        self._write(collector.root.to_string(ctx))
        self._write(ctx.styler.failure(f"{collector.failure_count} failure(s)"))

    def emit_standalone(self, collector: ResultCollector) -> None:
        ctx = self._ctx()
        blocks = [b.to_standalone_string(s, t, ctx) for s, t, b in collector.failures]
        if blocks:
            self._write("\n\n".join(blocks))
