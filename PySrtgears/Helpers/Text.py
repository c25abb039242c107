import regex

# HTML-like formatting, e.g. <i>, </b>, <font color="red">
html_pattern = regex.compile(r'<[^>]+>')

# Control block at the start of a line, e.g. {\an8}, {\a6}, {\pos(400,570)}
control_pattern = regex.compile(r'^\{\\[^}]*\}')

def RemoveHtmlTags(text : str) -> str:
    """
    Strip HTML-like tags from a line of text
    """
    return html_pattern.sub('', text)

def RemoveLeadingControl(text : str) -> str:
    """
    Strip a single control block from the start of a line of text
    """
    return control_pattern.sub('', text, count=1)

def IsHearingImpairedLine(text : str) -> bool:
    """
    True if the line only describes a sound, e.g. "[PHONE RINGING]" or "<i>(sighs)</i>"
    """
    text = RemoveHtmlTags(text)
    if not text:
        return False

    first, last = text[0], text[-1]
    return (first == '[' and last == ']') or (first == '(' and last == ')')
