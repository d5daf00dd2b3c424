from typing import Mapping, TypeVar

U = TypeVar("U", bound=Mapping)


def resolve_config(config: Mapping | None, default_config: U) -> U:
    """Return a copy of ``default_config`` with the known keys of ``config`` applied."""
    _config = dict(default_config)
    if config:
        for key in _config:
            if key in config:
                _config[key] = config[key]
    return _config  # type: ignore[return-value]
