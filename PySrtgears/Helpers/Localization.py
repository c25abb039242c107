import gettext

# No message catalog is shipped
_translation : gettext.NullTranslations = gettext.NullTranslations()

def _(message : str) -> str:
    return _translation.gettext(message)
