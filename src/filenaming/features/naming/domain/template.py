"""
Summary: Render naming patterns via plain placeholder substitution or the conditional dialect.
Why: A syntax pass picks the template variant once; rendering always yields a string.
"""

from __future__ import annotations

import logging
import operator
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, ClassVar, Final, final

from jinja2 import ChainableUndefined, Template, TemplateError
from jinja2.sandbox import SandboxedEnvironment

logger = logging.getLogger(__name__)

CONDITIONAL_SYNTAX: Final[re.Pattern[str]] = re.compile(r"\{%.*?%\}|\{\{(?!\{).*?(?<!\})\}\}")
PLACEHOLDER: Final[re.Pattern[str]] = re.compile(r"\{\{(\w+)\}\}")
# Name under which plain placeholders are looked up inside conditional patterns.
PLACEHOLDER_SCOPE: Final[str] = "__placeholders__"


class TemplateValue(str):
    """String variable with pattern-friendly truthiness and numeric comparisons.

    ``""`` and ``"0"`` are falsy. Comparing against a number compares numerically
    when the text is numeric, so ``mediums_count > 1`` works on string values.
    """

    __slots__ = ()

    def __bool__(self) -> bool:
        return self not in ("", "0")

    def _as_number(self) -> float | None:
        try:
            return float(self)
        except ValueError:
            return None

    def _compare(self, other: object, op: Callable[[Any, Any], bool]) -> bool:
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            number = self._as_number()
            if number is not None:
                return op(number, other)
            return op(str(self), str(other))
        if isinstance(other, str):
            return op(str(self), str(other))
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        return self._compare(other, operator.eq)

    def __ne__(self, other: object) -> bool:
        result = self._compare(other, operator.eq)
        return result if result is NotImplemented else not result

    def __lt__(self, other: object) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: object) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: object) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: object) -> bool:
        return self._compare(other, operator.ge)

    __hash__ = str.__hash__


class _PlaceholderScope(dict[str, TemplateValue]):
    """Variables looked up by plain placeholders; unknown names are empty."""

    def __missing__(self, key: str) -> TemplateValue:
        return TemplateValue("")


def contains_conditional_syntax(pattern: str) -> bool:
    """Return True when ``pattern`` uses ``{% ... %}`` blocks or ``{{ ... }}`` expressions.

    Exact ``{{name}}`` placeholders do not count; a pattern made only of them is plain.
    """

    return CONDITIONAL_SYNTAX.search(PLACEHOLDER.sub("", pattern)) is not None


def _scope_placeholders(pattern: str) -> str:
    # {{none}} or {{range}} must stay variable lookups, not engine literals or globals.
    return PLACEHOLDER.sub(lambda match: f"{{{{ {PLACEHOLDER_SCOPE}[{match.group(1)!r}] }}}}", pattern)


def substitute_placeholders(pattern: str, variables: Mapping[str, str]) -> str:
    """Replace every ``{{name}}`` with its value, or an empty string when unknown."""

    return PLACEHOLDER.sub(lambda match: str(variables.get(match.group(1)) or ""), pattern)


@final
@dataclass(frozen=True, slots=True)
class PlainTemplate:
    """Pattern rendered by literal ``{{name}}`` substitution only."""

    pattern: str

    def render(self, variables: Mapping[str, str], context: Mapping[str, object] | None = None) -> str:
        del context
        return substitute_placeholders(self.pattern, variables)


@final
@dataclass(frozen=True, slots=True)
class ConditionalTemplate:
    """Pattern rendered through the sandboxed template engine.

    Runtime failures (type errors in comparisons, sandbox violations) degrade to
    plain substitution of the same pattern.
    """

    pattern: str
    compiled: Template = field(compare=False, repr=False)

    def render(self, variables: Mapping[str, str], context: Mapping[str, object] | None = None) -> str:
        namespace: dict[str, object] = {name: TemplateValue(value) for name, value in variables.items()}
        if context:
            namespace.update(context)
        namespace[PLACEHOLDER_SCOPE] = _PlaceholderScope(
            (name, TemplateValue(value)) for name, value in variables.items()
        )
        try:
            return self.compiled.render(namespace)
        except Exception as exc:
            logger.debug("Conditional render failed, using plain substitution: %s", exc)
            return substitute_placeholders(self.pattern, variables)


PatternTemplate = PlainTemplate | ConditionalTemplate


@final
class PatternRenderer:
    """Compile and render naming patterns."""

    _environment: ClassVar[SandboxedEnvironment] = SandboxedEnvironment(
        autoescape=False,
        undefined=ChainableUndefined,
        keep_trailing_newline=True,
    )
    # Patterns see only their variables and context, never range/lipsum/cycler.
    _environment.globals.clear()

    @classmethod
    def compile(cls, pattern: str) -> PatternTemplate:
        """Select the template variant for ``pattern``.

        Patterns without conditional markers, and patterns the engine cannot
        parse, become :class:`PlainTemplate`.
        """
        return _compile_cached(pattern)

    @classmethod
    def render(
        cls,
        pattern: str,
        variables: Mapping[str, str],
        context: Mapping[str, object] | None = None,
    ) -> str:
        """Render ``pattern`` against ``variables``.

        Args:
            pattern: Naming pattern text.
            variables: Flat variable mapping (see ``VariableBuilder``).
            context: Extra objects for nested access, e.g. ``{"track": track}``.

        Returns:
            str: Rendered text; never raises for malformed patterns.
        """
        return cls.compile(pattern).render(variables, context)


@lru_cache(maxsize=256)
def _compile_cached(pattern: str) -> PatternTemplate:
    if not contains_conditional_syntax(pattern):
        return PlainTemplate(pattern)
    try:
        compiled = PatternRenderer._environment.from_string(  # pyright: ignore[reportPrivateUsage]
            _scope_placeholders(pattern)
        )
    except TemplateError as exc:
        logger.debug("Pattern is not valid conditional syntax, using plain substitution: %s", exc)
        return PlainTemplate(pattern)
    return ConditionalTemplate(pattern, compiled)


__all__ = [
    "CONDITIONAL_SYNTAX",
    "ConditionalTemplate",
    "PatternRenderer",
    "PatternTemplate",
    "PlainTemplate",
    "TemplateValue",
    "contains_conditional_syntax",
    "substitute_placeholders",
]
