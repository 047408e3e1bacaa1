from niji_templates.io.reader import read_template_source
from niji_templates.io.loader import load_template

__all__ = ['load_template', 'read_template_source']
