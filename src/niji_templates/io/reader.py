from __future__ import annotations

from pathlib import Path
from typing import Union

from niji_templates.core.errors import TemplateLoadError


def read_template_source(path: Union[str, Path], *, encoding: str = "utf-8") -> str:
    """Return the text of *path*; read and decode failures become `TemplateLoadError`."""
    pth = Path(path).expanduser()
    try:
        return pth.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateLoadError(pth, str(exc)) from exc
