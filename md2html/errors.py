class Md2HtmlError(Exception):
    """Base exception for conversion failures."""


class InputNotFound(Md2HtmlError):
    """Input Markdown file does not exist or is not a regular file."""


class InputReadError(Md2HtmlError):
    """Input exists but could not be read (permissions, I/O error)."""


class NoMarkdownFiles(Md2HtmlError):
    """Interactive mode found no .md files in the directory."""


class OutputWriteError(Md2HtmlError):
    """Output HTML file could not be created or written."""


class PromptAborted(Md2HtmlError):
    """User cancelled an interactive prompt."""


class ThemeNotFound(Md2HtmlError):
    """Requested theme is not defined in the theme registry."""


class ConfigError(Md2HtmlError):
    """A setting from the config file or environment has an unusable value."""


def describe_os_error(action: str, path, exc: OSError) -> str:
    detail = exc.strerror or str(exc)
    return f"{action} {path}: {detail}"
