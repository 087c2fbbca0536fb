import unicodedata

_LATEX_SPECIALS = {
    '\\': r'\textbackslash{}',
    '&':  r'\&',
    '%':  r'\%',
    '$':  r'\$',
    '#':  r'\#',
    '_':  r'\_',
    '{':  r'\{',
    '}':  r'\}',
    '~':  r'\textasciitilde{}',
    '^':  r'\textasciicircum{}',
}


def _strip_combining(text: str) -> str:
    text = unicodedata.normalize('NFC', text)
    return ''.join(ch for ch in text if unicodedata.category(ch) != 'Mn')


def latex_escape(text: str) -> str:
    """Escape plain text for use inside a LaTeX paragraph."""
    text = _strip_combining(text)
    return ''.join(_LATEX_SPECIALS.get(ch, ch) for ch in text)
