import logging
import pathlib
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
import yaml
from pydantic import BaseModel, Field, ValidationError
from ..data.types import Browser, Suite, Test
from ..errors import ReportInputError

log = logging.getLogger(__name__)

class FailureRecord(BaseModel):
    suite: List[str] = Field(default_factory=list, description="Suite names from outermost to innermost")
    test: str
    browser: str
    errors: List[str] = Field(default_factory=list, description="Summary line first, then stack frames")

class FailureFile(BaseModel):
    failures: List[FailureRecord] = Field(default_factory=list)

class ResultCollector:
    """Builds the Suite/Test/Browser tree from flat failure records and assigns depths."""

    def __init__(self, root_name: str = "Failed Tests"):
        self.root = Suite(root_name)
        self._suites: Dict[Tuple[str, ...], Suite] = {(): self.root}
        self._tests: Dict[Tuple[Tuple[str, ...], str], Test] = {}
        self._failures: List[Tuple[Suite, Test, Browser]] = []

    def _suite_for(self, path: Tuple[str, ...]) -> Suite:
        parent = self.root
        for i in range(1, len(path) + 1):
            key = path[:i]
            suite = self._suites.get(key)
            if suite is None:
                suite = Suite(key[-1])
                suite.depth = i
                parent.suites.append(suite)
                self._suites[key] = suite
                log.debug("new suite %r at depth %d", suite.name, suite.depth)
            parent = suite
        return parent

    def add_failure(self, suite_path: Iterable[str], test_name: str, browser_name: str,
                    errors: Iterable[str]) -> Browser:
        if not test_name:
            raise ReportInputError("failure record has no test name")
        if not browser_name:
            raise ReportInputError(f"failure of {test_name!r} has no browser name")
        path = tuple(suite_path)
        suite = self._suite_for(path)
        test = self._tests.get((path, test_name))
        if test is None:
            test = Test(test_name)
            test.depth = len(path) + 1
            suite.tests.append(test)
            self._tests[(path, test_name)] = test
        browser = Browser(browser_name)
        browser.depth = test.depth + 1
        browser.errors = list(errors)
        test.browsers.append(browser)
        self._failures.append((suite, test, browser))
        return browser

    @property
    def failures(self) -> Iterator[Tuple[Suite, Test, Browser]]:
        return iter(self._failures)

    @property
    def failure_count(self) -> int: return len(self._failures)

def collect(records: Iterable[FailureRecord], root_name: str = "Failed Tests") -> ResultCollector:
    collector = ResultCollector(root_name)
    for r in records:
        collector.add_failure(r.suite, r.test, r.browser, r.errors)
    log.info("collected %d failure(s)", collector.failure_count)
    return collector

def load_failures(path: str) -> List[FailureRecord]:
    """Read failure records from a YAML or JSON results file."""
    p = pathlib.Path(path)
    try:
        data = yaml.safe_load(p.read_text()) or {}
        return FailureFile.model_validate(data).failures
    except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as e:
        raise ReportInputError(f"invalid results file {path}: {e}") from e
