"""Wildcard values extracted from a match and the rendering of templates."""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from .errors import MissingNameError
from .scanner import Placeholder, iter_segments


class WildcardMap(Mapping[str, str]):
    """Read-only mapping from wildcard name to the text it matched.

    Usually produced by :meth:`WildcardPattern.extract`; it can also be built
    directly to render templates from known values.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str] | Iterable[tuple[str, str]] = (), **kwargs: str) -> None:
        self._values: dict[str, str] = dict(values, **kwargs)

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"WildcardMap({self._values!r})"

    def render(self, template: str) -> str:
        """Substitute every placeholder of ``template`` with its value.

        Literal text is copied as is and constraints are ignored. Raises
        :class:`MissingNameError` for the first name without a value.
        """
        parts: list[str] = []
        for segment in iter_segments(template):
            if isinstance(segment, Placeholder):
                try:
                    parts.append(self._values[segment.name])
                except KeyError:
                    raise MissingNameError(segment.name, template) from None
            else:
                parts.append(segment)
        return "".join(parts)

    def render_all(self, templates: Iterable[str]) -> list[str]:
        return [self.render(template) for template in templates]

    def to_dict(self) -> dict[str, str]:
        return dict(self._values)
