from typing import Protocol
from rich.control import Control
from rich.style import Style

class Styler(Protocol):
    """Named text styles the report renderer draws with."""
    def suite(self, text: str) -> str: ...
    def suite_root(self, text: str) -> str: ...
    def failure(self, text: str) -> str: ...
    def browser(self, text: str) -> str: ...
    def error_summary(self, text: str) -> str: ...
    def muted(self, text: str) -> str: ...
    def highlight(self, text: str) -> str: ...
    def move_right(self, columns: int) -> str: ...

class AnsiStyler:
    """Terminal backend: ANSI escapes rendered through rich styles."""
    SUITE = Style(color="white")
    SUITE_ROOT = Style(color="white", underline=True)
    FAILURE = Style(color="red")
    BROWSER = Style(color="yellow")
    ERROR_SUMMARY = Style(color="bright_red")
    MUTED = Style(color="bright_black")
    HIGHLIGHT = Style(color="black", bgcolor="red")

    def suite(self, text: str) -> str: return self.SUITE.render(text)
    def suite_root(self, text: str) -> str: return self.SUITE_ROOT.render(text)
    def failure(self, text: str) -> str: return self.FAILURE.render(text)
    def browser(self, text: str) -> str: return self.BROWSER.render(text)
    def error_summary(self, text: str) -> str: return self.ERROR_SUMMARY.render(text)
    def muted(self, text: str) -> str: return self.MUTED.render(text)
    def highlight(self, text: str) -> str: return self.HIGHLIGHT.render(text)

    def move_right(self, columns: int) -> str:
        return str(Control.move(x=columns))

class PlainStyler:
    """No escapes; indentation becomes spaces. For logs, files and pipes."""
    def suite(self, text: str) -> str: return text
    def suite_root(self, text: str) -> str: return text
    def failure(self, text: str) -> str: return text
    def browser(self, text: str) -> str: return text
    def error_summary(self, text: str) -> str: return text
    def muted(self, text: str) -> str: return text
    def highlight(self, text: str) -> str: return text

    def move_right(self, columns: int) -> str:
        return " " * columns
