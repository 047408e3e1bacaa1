from niji_templates.parsing.parser import DelimiterState, TemplateParser, parse_tokens
from niji_templates.parsing.source import Source

__all__ = [
    'DelimiterState',
    'Source',
    'TemplateParser',
    'parse_tokens',
]
