import html
import re


_NEWLINES = re.compile(r"\r\n|\r|\n")


def escape_html(value: str | None) -> str:
    """Экранирует & < > " ' перед подстановкой в HTML письма"""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def escape_multiline(value: str | None) -> str:
    return _NEWLINES.sub("<br>", escape_html(value))
