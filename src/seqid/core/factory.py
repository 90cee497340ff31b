"""Build generators from :class:`~seqid.core.settings.IdSettings`.

Examples:
    >>> gen = build_generator(IdSettings(sequence_max=999, validator="none"))
    >>> gen.validator
    NoValidator()
"""

from __future__ import annotations

from seqid.core.errors import InvalidConfigError
from seqid.core.generator import Generator
from seqid.core.protocols import Validator
from seqid.core.sequencers import RangeSequencer
from seqid.core.settings import IdSettings, get_settings
from seqid.core.validators import ValidatorKind, get_validator


def create_validator(kind: ValidatorKind | str) -> Validator:
    """Resolve a validator name, reporting unknown names as configuration errors."""
    try:
        return get_validator(kind)
    except ValueError as e:
        raise InvalidConfigError("validator", kind, cause=e) from e


def build_generator(settings: IdSettings | None = None) -> Generator:
    """Create a generator backed by an in-process :class:`RangeSequencer`.

    Args:
        settings: Settings to use; defaults to the cached ``get_settings()``
    """
    settings = settings or get_settings()
    sequencer = RangeSequencer(
        settings.sequence_min,
        settings.sequence_max,
        settings.sequence_initial,
    )
    return Generator(sequencer, create_validator(settings.validator), settings.origin)


__all__ = ["build_generator", "create_validator"]
