"""Error accumulation for a single validation run."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .models import ValidationError, flatten_messages


class ErrorCollector:
    """Ordered accumulator of ``ValidationError`` records.

    Exposes two read views over the same list: ``messages()`` (flattened
    message strings) and ``grouped()`` (``ValidationError`` with key and message).

    Examples:
        >>> errors = ErrorCollector()
        >>> errors.add("age", "Property age must be less than 120")
        >>> errors.messages()
        ['Property age must be less than 120']
    """

    def __init__(self, errors: Optional[Iterable[ValidationError]] = None) -> None:
        self._errors: List[ValidationError] = list(errors or [])

    def add(self, key: str, message: Union[str, Sequence[str]]) -> None:
        """Record an error for a key.

        Args:
            key: Property name (empty string for engine-level errors).
            message: A message, or a sequence of messages folded into one error.
        """
        if not isinstance(message, str):
            message = tuple(message)
        self._errors.append(ValidationError(key=key, message=message))

    def extend(self, errors: Iterable[ValidationError]) -> None:
        self._errors.extend(errors)

    def messages(self) -> List[str]:
        return flatten_messages(self._errors)

    def grouped(self) -> List[ValidationError]:
        return list(self._errors)

    def freeze(self) -> Tuple[ValidationError, ...]:
        return tuple(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)


__all__ = ["ErrorCollector"]
