"""Success-or-failure values returned at the application boundary."""

from dataclasses import dataclass
from typing import Any

import structlog
from protean.exceptions import ExpectedVersionError, ValidationError
from protean.utils.globals import current_domain

from pcstore.shared.errors import ConcurrentModification, InvalidRequest, StoreError, UnknownError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Result:
    value: Any = None
    error: StoreError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value=None) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, error: StoreError) -> "Result":
        return cls(error=error)

    def unwrap(self):
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value


def dispatch(command_cls, **payload) -> Result:
    """Build and process a command synchronously, capturing domain failures.

    The handler runs inside its own unit of work: a raised ``StoreError``
    discards every pending change before it is reported here.
    """
    try:
        command = command_cls(**payload)
        return Result.success(current_domain.process(command, asynchronous=False))
    except StoreError as exc:
        logger.info(
            "command_rejected",
            command=command_cls.__name__,
            kind=exc.kind.value,
            entity_id=exc.entity_id,
            reason=exc.message,
        )
        return Result.failure(exc)
    except ValidationError as exc:
        logger.info("command_invalid", command=command_cls.__name__, messages=exc.messages)
        return Result.failure(InvalidRequest(exc.messages))
    except ExpectedVersionError as exc:
        logger.warning("command_version_conflict", command=command_cls.__name__, error=str(exc))
        return Result.failure(ConcurrentModification())
    except Exception as exc:
        logger.exception("command_failed", command=command_cls.__name__)
        return Result.failure(UnknownError(f"Unexpected failure while processing {command_cls.__name__}", cause=exc))
