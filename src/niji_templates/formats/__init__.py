from niji_templates.formats.color import Color

__all__ = ['Color']
