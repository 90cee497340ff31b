"""seqid core -- self-validating, time-trending numeric identifiers.

Manifesto:
    Order numbers and voucher codes get read over the phone, typed into
    forms and printed on paper. ``seqid.core`` builds them from the seconds
    elapsed since an origin plus a sequence value, and appends a Luhn check
    digit so a single corrupted digit is caught without a database lookup.

    - **Protocol-first:** Sequencer and Validator are protocols, not base classes
    - **No global state:** Every Generator owns its collaborators
    - **Sync-only:** Everything runs on the caller's thread

Architecture::

    Layer 1 -- Arithmetic
        checksum.py        Luhn digit sum (pure)

    Layer 2 -- Contracts & Implementations
        protocols.py       Sequencer, Validator
        validators.py      LuhnValidator, NoValidator
        sequencers.py      RangeSequencer (bounded, wrapping, locked)
        context.py         CancelContext (deadline + cancel flag)

    Layer 3 -- Composition
        generator.py       Generator (elapsed * 10000 + low4(seq), signed)

    Layer 4 -- Cross-Cutting Concerns
        errors.py          Structured error hierarchy
        logging.py         Structured logging (structlog)
        timestamps.py      Unix-seconds helpers
        settings.py        IdSettings (pydantic-settings, SEQID_*)
        factory.py         build_generator(settings)

Tags:
    seqid, identifiers, luhn, check-digit, sequencer, protocol-first

Doc-Types:
    package-overview, architecture-map, module-index
"""

from seqid.core.checksum import checksum
from seqid.core.context import CancelContext
from seqid.core.errors import (
    ConfigError,
    DeadlineExceeded,
    ErrorCategory,
    InvalidConfigError,
    SeqIdError,
    SequenceCancelled,
    SequenceExhaustedError,
    SequencerError,
    SequenceUnavailableError,
)
from seqid.core.generator import SEQUENCE_WIDTH, Generator
from seqid.core.protocols import Sequencer, Validator
from seqid.core.sequencers import RangeSequencer
from seqid.core.validators import LuhnValidator, NoValidator, ValidatorKind, get_validator

__all__ = [
    # Arithmetic
    "checksum",
    # Contracts
    "Sequencer",
    "Validator",
    "CancelContext",
    # Implementations
    "RangeSequencer",
    "LuhnValidator",
    "NoValidator",
    "ValidatorKind",
    "get_validator",
    # Composition
    "Generator",
    "SEQUENCE_WIDTH",
    # Errors
    "ErrorCategory",
    "SeqIdError",
    "SequencerError",
    "SequenceExhaustedError",
    "SequenceUnavailableError",
    "SequenceCancelled",
    "DeadlineExceeded",
    "ConfigError",
    "InvalidConfigError",
]
