from niji_templates.rendering.factory_config import EngineConfig
from niji_templates.rendering.formatter import PlaceholderFormatter, display, format_value
from niji_templates.rendering.renderer import TokenRenderer
from niji_templates.rendering.resolver import NameResolver
from niji_templates.rendering.template import Template, parse
from niji_templates.rendering.template_engine import TemplateEngine

__all__ = [
    'EngineConfig',
    'NameResolver',
    'PlaceholderFormatter',
    'Template',
    'TemplateEngine',
    'TokenRenderer',
    'display',
    'format_value',
    'parse',
]
