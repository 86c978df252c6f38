"""Templates with ``$name`` and ``${name}`` placeholders substituted on demand."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterator, Mapping, Optional, Protocol, Union, runtime_checkable

__all__ = [
    "InvalidTemplateError",
    "Mapper",
    "SubstitutionFailedError",
    "Template",
]

DELIMITER = "$"

# The first character class of a bare name spans "A-z", so the punctuation
# between "Z" and "a" is accepted there as well.
_PATTERN = re.compile(
    r"\$(?:(?P<escaped>\$)|(?P<named>[_a-zA-z][_a-zA-Z0-9]*)|"
    r"\{(?P<braced>[_a-zA-Z][_a-zA-Z0-9]*)\}|(?P<invalid>))"
)


@runtime_checkable
class Mapper(Protocol):
    """Custom lookup of a variable's value; returns None when there is none."""

    def map(self, name: str) -> Optional[str]:
        """Return the value for ``name``, or None if it cannot be mapped."""
        ...


MapperLike = Union[Mapper, Callable[[str], Optional[str]]]


class SubstitutionFailedError(LookupError):
    """A variable had no value in the mapping or from the mapper."""

    def __init__(self, variable: str) -> None:
        super().__init__(f"failed to substitute variable {variable}")
        self.variable = variable

    def __str__(self) -> str:
        return f"failed to substitute variable {self.variable}"


class InvalidTemplateError(ValueError):
    """The template string holds a delimiter not followed by a valid placeholder."""

    def __init__(self, index: int) -> None:
        super().__init__(f"invalid placeholder in template string at index {index}")
        self.index = index


@dataclass(frozen=True)
class _Part:
    value: str
    is_variable: bool = False
    braced: bool = False

    def __str__(self) -> str:
        if not self.is_variable:
            return self.value.replace(DELIMITER, DELIMITER * 2)
        if self.braced:
            return f"{DELIMITER}{{{self.value}}}"
        return DELIMITER + self.value


def _parse(template: str) -> tuple[_Part, ...]:
    parts: list[_Part] = []
    prev = 0
    for match in _PATTERN.finditer(template):
        if match.group("escaped") is not None:
            parts.append(_Part(template[prev:match.start()] + DELIMITER))
            prev = match.end()
            continue
        if match.group("named") is not None:
            name, braced = match.group("named"), False
        elif match.group("braced") is not None:
            name, braced = match.group("braced"), True
        else:
            raise InvalidTemplateError(match.start("invalid"))

        prefix = template[prev:match.start()]
        if prefix:
            parts.append(_Part(prefix))
        parts.append(_Part(name, is_variable=True, braced=braced))
        prev = match.end()

    suffix = template[prev:]
    if suffix:
        parts.append(_Part(suffix))
    return tuple(parts)


def _lookup(
    name: str,
    mapping: Optional[Mapping[str, str]],
    mapper: Optional[MapperLike],
) -> Optional[str]:
    if mapping is not None and name in mapping:
        return mapping[name]
    if mapper is None:
        return None
    if isinstance(mapper, Mapper):
        return mapper.map(name)
    return mapper(name)


class Template:
    """A parsed template string whose variables can be substituted."""

    def __init__(self, template: str) -> None:
        self._parts = _parse(template)

    def _render(
        self,
        mapping: Optional[Mapping[str, str]],
        mapper: Optional[MapperLike],
        safe: bool,
    ) -> Iterator[str]:
        for part in self._parts:
            if not part.is_variable:
                yield part.value
                continue
            value = _lookup(part.value, mapping, mapper)
            if value is not None:
                yield value
            elif safe:
                yield str(part)
            else:
                raise SubstitutionFailedError(part.value)

    def substitute(
        self,
        mapping: Optional[Mapping[str, str]] = None,
        *,
        mapper: Optional[MapperLike] = None,
        safe: bool = False,
    ) -> str:
        """Replace the variables, looking in ``mapping`` first and then asking ``mapper``.

        Raises SubstitutionFailedError for a variable with no value unless
        ``safe`` is true, in which case the placeholder is kept as written.
        """
        return "".join(self._render(mapping, mapper, safe))

    def safe_substitute(
        self,
        mapping: Optional[Mapping[str, str]] = None,
        *,
        mapper: Optional[MapperLike] = None,
    ) -> str:
        """Like substitute, but unmapped placeholders are left in place."""
        return self.substitute(mapping, mapper=mapper, safe=True)

    def __str__(self) -> str:
        return "".join(str(part) for part in self._parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Template):
            return NotImplemented
        return self._parts == other._parts

    def __hash__(self) -> int:
        return hash(self._parts)