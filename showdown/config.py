from os import environ

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _flag(name, default):
    value = environ.get(name, "").strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return default


# "T" is accepted for ten alongside "10"
ACCEPT_TEN_AS_T = _flag("SHOWDOWN_ACCEPT_T", True)

# Duplicate cards within one hand are tolerated unless this is set
REJECT_DUPLICATE_CARDS = _flag("SHOWDOWN_REJECT_DUPLICATES", False)
