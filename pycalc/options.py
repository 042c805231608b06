from __future__ import annotations

from contextlib import contextmanager
from dataclasses import asdict, dataclass

from pycalc.messages import check_locale

__all__ = ["get_option", "option_context", "options", "set_option"]


@dataclass
class _Options:
    # check every adjacent pair; False reproduces the legacy interior scan
    strict_adjacency: bool = True
    message_locale: str = "en"

    # helpers ------------
    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise KeyError(f"Unknown option '{k}'")
            if k == "message_locale":
                check_locale(v)
            setattr(self, k, v)

    def to_dict(self):
        return asdict(self)


options = _Options()


def set_option(**kwargs):
    """Globally set default validation options."""
    options.update(**kwargs)


def get_option(name: str):
    "Return the current value of option `name`."
    if name not in options.to_dict():
        raise KeyError(f"Unknown option '{name}'")
    return getattr(options, name)


@contextmanager
def option_context(**kwargs):
    "Temporarily override options inside a `with` block."
    old = options.to_dict()
    try:
        options.update(**kwargs)
        yield
    finally:
        options.__dict__.update(old)
