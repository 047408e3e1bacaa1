from .formatting import FormattableProtocol, PlaceholderValue
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .templating import TemplateEngineProtocol, TemplateProtocol

__all__ = [
    'FormattableProtocol',
    'PlaceholderValue',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'TemplateEngineProtocol',
    'TemplateProtocol',
]
