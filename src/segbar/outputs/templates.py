"""
Template-backed output constructors.

A template is compiled once, when the bar is set up, and the returned
function renders it for every new value. Inside a template the value is
referenced with a leading dot, e.g. ``{{.}}`` or ``{{ .volume }}``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from typing import Any, Callable, Optional

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError
from jinja2.ext import Extension
from jinja2.lexer import Token, TokenStream

from segbar.bar import Output
from segbar.logger import get_logger
from segbar.outputs.config import TemplateConfig
from segbar.outputs.constructors import error, pango_unsafe, text

logger = get_logger("outputs.templates")

TemplateFunc = Callable[[Any], Output]
"""Function that builds a bar output from a single value."""

DOT_NAME = "__dot__"

# Token types after which a dot starts a new expression instead of an attribute lookup
_EXPRESSION_OPENERS = frozenset(
    {
        "variable_begin",
        "block_begin",
        "lparen",
        "lbracket",
        "lbrace",
        "comma",
        "colon",
        "assign",
        "add",
        "sub",
        "mul",
        "div",
        "floordiv",
        "mod",
        "pow",
        "tilde",
        "eq",
        "ne",
        "gt",
        "gteq",
        "lt",
        "lteq",
    }
)
_KEYWORD_OPENERS = frozenset({"if", "elif", "else", "in", "not", "and", "or"})


class TemplateCompileError(ValueError):
    """Raised when a template source cannot be compiled."""

    def __init__(self, source: str, reason: TemplateSyntaxError):
        self.source = source
        self.lineno = reason.lineno
        super().__init__(f"Invalid template {source!r} (line {reason.lineno}): {reason.message}")


class DotExtension(Extension):
    """
    Let templates refer to the rendered value as ``.``.

    A dot that opens an expression is rewritten to the name the value is
    bound to, so ``{{.}}`` renders the value and ``{{ .name }}`` looks up
    ``name`` on it. Dots that follow an expression keep their usual meaning.
    """

    def filter_stream(self, stream: TokenStream) -> Iterable[Token]:
        tokens = list(stream)
        return _rewrite_dots(tokens)


def _opens_expression(previous: Optional[Token]) -> bool:
    if previous is None:
        return False
    if previous.type == "name":
        return previous.value in _KEYWORD_OPENERS
    return previous.type in _EXPRESSION_OPENERS


def _rewrite_dots(tokens: list[Token]) -> Iterator[Token]:
    for index, token in enumerate(tokens):
        previous = tokens[index - 1] if index else None
        if token.type != "dot" or not _opens_expression(previous):
            yield token
            continue

        yield Token(token.lineno, "name", DOT_NAME)
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        if following is not None and following.type == "name":
            yield token


class DataEnvironment(Environment):
    """
    Environment that reads mapping keys before attributes.

    ``{{ .values }}`` on a dict renders the ``"values"`` entry, not the
    ``dict.values`` method. Other objects keep Jinja's attribute-first lookup.
    """

    def getattr(self, obj: Any, attribute: str) -> Any:
        if isinstance(obj, Mapping):
            try:
                return obj[attribute]
            except (KeyError, TypeError):
                pass
        return super().getattr(obj, attribute)


@lru_cache(maxsize=None)
def _environment(config: TemplateConfig, autoescape: bool) -> Environment:
    return DataEnvironment(
        autoescape=autoescape,
        undefined=StrictUndefined,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
        keep_trailing_newline=config.keep_trailing_newline,
        extensions=[DotExtension],
    )


def _compile(source: str, config: Optional[TemplateConfig], autoescape: bool):
    env = _environment(config or TemplateConfig(), autoescape)
    try:
        template = env.from_string(source)
    except TemplateSyntaxError as exc:
        logger.critical(f"Failed to compile template {source!r}: {exc}")
        raise TemplateCompileError(source, exc) from exc
    logger.debug(f"Compiled template {source!r} (autoescape={autoescape})")
    return template


def _context(value: Any, reserved: Mapping[str, Any]) -> dict[str, Any]:
    context: dict[str, Any] = {}
    if isinstance(value, Mapping):
        # Keys named like template globals (range, loop, ...) are only reachable through the dot
        context.update(
            (key, item)
            for key, item in value.items()
            if isinstance(key, str) and key not in reserved and key != "loop"
        )
    context[DOT_NAME] = value
    return context


def _template_func(template, wrap: Callable[[str], Output]) -> TemplateFunc:
    def render(value: Any) -> Output:
        try:
            rendered = template.render(_context(value, template.environment.globals))
        except Exception as exc:
            logger.debug(f"Template execution failed for {value!r}: {exc}")
            return error(exc)
        return wrap(rendered)

    return render


def text_template(source: str, config: Optional[TemplateConfig] = None) -> TemplateFunc:
    """
    Create a TemplateFunc from a plain text template.

    Args:
        source: Jinja template source, with ``.`` referring to the value
        config: Optional whitespace settings

    Returns:
        Function rendering a value into a plain text output. Errors raised
        while rendering are returned as error outputs.

    Raises:
        TemplateCompileError: If the source is not a valid template
    """
    template = _compile(source, config, autoescape=False)
    # text() must not re-interpret % in the rendered string
    return _template_func(template, text)


def pango_template(source: str, config: Optional[TemplateConfig] = None) -> TemplateFunc:
    """
    Create a TemplateFunc from a pango markup template.

    Interpolated values are escaped, so data cannot inject markup; the
    template's own tags are kept as written.

    Raises:
        TemplateCompileError: If the source is not a valid template
    """
    template = _compile(source, config, autoescape=True)
    return _template_func(template, pango_unsafe)
