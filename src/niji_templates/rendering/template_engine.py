"""
template_engine – TemplateEngineProtocol implementation for niji_templates.

The engine is a thin façade over `Template`: it compiles sources with the
configured initial delimiters, seeds each compiled template with the
engine-wide format overrides, and logs failures with context before
re-raising them. Every compile produces a fresh template, so `SetFormat`
effects never leak between sources rendered through the engine.

Loggers come from the configured `LoggerFactoryProtocol` (a
`DefaultLoggerFactory` that leaves logging configuration alone by default).
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from niji_templates.core.errors import ParseError, RenderError
from niji_templates.core.interfaces.logging import LoggerLikeProtocol
from niji_templates.core.interfaces.templating import TemplateEngineProtocol
from niji_templates.io.reader import read_template_source
from niji_templates.logging.factory import DefaultLoggerFactory
from niji_templates.parsing.parser import TemplateParser
from niji_templates.rendering.factory_config import EngineConfig
from niji_templates.rendering.template import Template


class TemplateEngine(TemplateEngineProtocol):
    """Compile and render templates under one shared configuration."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        *,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._cfg = config or EngineConfig()
        loggers = self._cfg.logger_factory or DefaultLoggerFactory()
        self._log = logger or self._cfg.logger or loggers.get_logger("engine")
        self._parser = TemplateParser(logger=loggers.get_logger("parse"))
        self._render_log = loggers.get_logger("render")
        self._formats: Dict[str, str] = dict(self._cfg.formats)

    @property
    def config(self) -> EngineConfig:
        return self._cfg

    def set_format(self, type_name: str, format_string: str) -> None:
        """Register an engine-wide override applied to templates compiled afterwards."""
        self._formats[type_name] = format_string

    def compile(self, source: str) -> Template:  # type: ignore[override]
        try:
            tokens = self._parser.parse(
                source,
                start_delimiter=self._cfg.start_delimiter,
                end_delimiter=self._cfg.end_delimiter,
            )
        except ParseError as exc:
            self._log.error("template compilation failed: %s", exc, extra={"context": {"line": exc.line, "column": exc.column}})
            raise
        return Template(tokens, formats=self._formats, logger=self._render_log)

    def render(self, source: str, value: Any = None) -> str:  # type: ignore[override]
        """Compile *source* and render it against *value*."""
        return self._render(self.compile(source), value, label="<string>")

    def render_file(self, path: Union[str, Path], value: Any = None, *, encoding: str = "utf-8") -> str:
        source = read_template_source(path, encoding=encoding)
        try:
            template = self.compile(source)
        except ParseError:
            self._log.error("in template file %s", path)
            raise
        return self._render(template, value, label=str(path))

    def _render(self, template: Template, value: Any, *, label: str) -> str:
        try:
            return template.render(value)
        except RenderError as exc:
            self._log.error("template rendering failed for %s: %s", label, exc)
            raise
