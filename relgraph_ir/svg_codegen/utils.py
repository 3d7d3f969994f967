import re
import unicodedata

# XML 1.0 forbids most C0 control characters even when escaped
_INVALID_XML_CHARS_RE = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f]')


def xml_escape(text: str) -> str:
    """Escape *text* for use in SVG element content and double-quoted attributes."""
    text = unicodedata.normalize('NFC', str(text))
    text = _INVALID_XML_CHARS_RE.sub('', text)
    repl = {
        '&': '&amp;',
        '<': '&lt;',
        '>': '&gt;',
        '"': '&quot;',
        "'": '&#39;',
    }
    return ''.join(repl.get(c, c) for c in text)
