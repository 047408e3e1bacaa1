from __future__ import annotations
"""Load templates from disk."""

from pathlib import Path
from typing import Optional, Union

from niji_templates.constants import DEFAULT_END_DELIMITER, DEFAULT_START_DELIMITER
from niji_templates.core.errors import ParseError
from niji_templates.core.interfaces.logging import LoggerLikeProtocol
from niji_templates.io.reader import read_template_source
from niji_templates.logging.helpers import get_logger
from niji_templates.rendering.template import Template


def load_template(
    path: Union[str, Path],
    *,
    encoding: str = "utf-8",
    start_delimiter: str = DEFAULT_START_DELIMITER,
    end_delimiter: str = DEFAULT_END_DELIMITER,
    logger: Optional[LoggerLikeProtocol] = None,
) -> Template:
    """Read *path* and compile it.

    Raises:
        TemplateLoadError: the file could not be read or decoded.
        ParseError: the file is not a valid template.
    """
    log = logger or get_logger("io.loader")
    source = read_template_source(path, encoding=encoding)
    try:
        template = Template.parse(
            source, start_delimiter=start_delimiter, end_delimiter=end_delimiter, logger=logger
        )
    except ParseError as exc:
        log.error("failed to parse template %s: %s", path, exc)
        raise
    log.debug("loaded template %s (%d tokens)", path, len(template.tokens))
    return template
