"""Custom exceptions for conversio."""


class ConversioError(Exception):
    """Base exception for conversio operations."""


class ConfigurationError(ConversioError):
    """Invalid table of contents or converter options."""


class SourceError(ConversioError):
    """Input file or directory cannot be used."""


class TemplateError(ConversioError):
    """Page template is missing a slot or references an unknown one."""


class ConversionError(ConversioError):
    """Error during Markdown to HTML conversion."""
