from pydantic import BaseModel, Field, ValidationError
from typing import Optional, List
import yaml, pathlib
from .data.types import RenderContext, RenderOptions
from .errors import ReportInputError
from .styles import AnsiStyler, PlainStyler

class ReportConfig(BaseModel):
    color: bool = Field(True, description="ANSI colors; off renders plain text with space indentation")
    suppress_error_highlighting: bool = Field(False, description="Render application frames muted instead of highlighted")
    omit_external_stack_frames: bool = Field(False, description="Drop stack frames that match external_markers")
    external_markers: List[str] = Field(default_factory=lambda: ["node_modules"])
    root_name: str = Field("Failed Tests", description="Name of the root suite")
    standalone: bool = Field(False, description="Print each failure on its own with suite and test names")

    def build_context(self) -> RenderContext:
        styler = AnsiStyler() if self.color else PlainStyler()
        options = RenderOptions(
            suppress_error_highlighting=self.suppress_error_highlighting,
            omit_external_stack_frames=self.omit_external_stack_frames,
            external_markers=tuple(self.external_markers),
        )
        return RenderContext(styler=styler, options=options)

def load_config(path: Optional[str] = None) -> ReportConfig:
    if path is None:
        return ReportConfig()
    try:
        data = yaml.safe_load(pathlib.Path(path).read_text()) or {}
        return ReportConfig.model_validate(data)
    except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as e:
        raise ReportInputError(f"invalid config {path}: {e}") from e
