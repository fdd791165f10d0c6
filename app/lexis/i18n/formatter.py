"""Message formatting for resolved templates.

Templates use the ICU MessageFormat grammar:

    Hello, {0}!
    {count, plural, =0 {No files} one {# file} other {# files}}
    {place, selectordinal, one {#st} two {#nd} few {#rd} other {#th}}
    {gender, select, female {She} male {He} other {They}} replied.
    Due {when, date, long} at {when, time, short}
    Total: {amount, number, currency}

Locale data (plural and ordinal rules, number, currency and date formats)
comes from Babel's CLDR tables.
"""

import datetime as dt
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from babel import Locale, UnknownLocaleError
from babel.dates import format_date, format_datetime, format_time
from babel.numbers import (
    format_currency,
    format_decimal,
    format_percent,
    get_territory_currencies,
)

from lexis.i18n.exceptions import MessageFormatError

Arguments = Union[Sequence[Any], Mapping[Any, Any], None]

DATE_STYLES = ("short", "medium", "long", "full")

# Babel has no rule-based ordinal spellout, so ordinals are built from the
# CLDR ordinal plural categories.
ORDINAL_TEMPLATES = {
    "en": "{0, selectordinal, one {#st} two {#nd} few {#rd} other {#th}}",
    "fr": "{0, selectordinal, one {#er} other {#e}}",
    "de": "{0, number}.",
    "es": "{0, number}º",
    "it": "{0, number}º",
    "pt": "{0, number}º",
}

_SIMPLE_TYPES = ("number", "date", "time", "ordinal")
_CHOICE_TYPES = ("plural", "selectordinal", "select")


class MessageFormatter(ABC):
    """Formats a message template for a locale.

    Arguments are either a sequence, bound to {0}, {1}, ... placeholders, or
    a mapping bound to named placeholders.
    """

    @abstractmethod
    def format(self, locale: str, template: str, args: Arguments = None) -> str:
        """Format a template.

        Args:
            locale: Locale identifier (e.g., "pt-br").
            template: Message template.
            args: Positional or named arguments.

        Returns:
            Formatted text.

        Raises:
            MessageFormatError: If the template is malformed, an argument is
                missing or the locale is unknown.
        """
        pass


@lru_cache(maxsize=128)
def to_babel_locale(locale: str) -> Locale:
    """Convert a locale identifier (pt-br, pt_BR) to a Babel Locale.

    Raises:
        MessageFormatError: If Babel has no data for the locale.
    """
    try:
        return Locale.parse(locale.replace("_", "-"), sep="-")
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise MessageFormatError(f"Unknown locale: {locale}") from e


class _Argument:
    __slots__ = ("name", "type", "style", "options", "offset")

    def __init__(self, name, type=None, style=None, options=None, offset=0):
        self.name = name
        self.type = type
        self.style = style
        self.options = options or {}
        self.offset = offset


# Placeholder for "#" inside plural sub-messages
_POUND = object()

_Nodes = Tuple[Any, ...]


class _TemplateParser:
    """Recursive descent parser for the MessageFormat grammar."""

    def __init__(self, template: str):
        self.template = template
        self.pos = 0

    def parse(self) -> _Nodes:
        return self._parse_message(in_plural=False, nested=False)

    def _parse_message(self, in_plural: bool, nested: bool) -> _Nodes:
        nodes: List[Any] = []
        text: List[str] = []
        template = self.template

        while self.pos < len(template):
            char = template[self.pos]
            if char == "'":
                text.append(self._parse_quoted(in_plural))
                continue
            if char == "}":
                if nested:
                    break
                raise self._error("Unmatched '}'")
            if char == "{" or (char == "#" and in_plural):
                if text:
                    nodes.append("".join(text))
                    text = []
                if char == "{":
                    nodes.append(self._parse_argument(in_plural))
                else:
                    nodes.append(_POUND)
                    self.pos += 1
                continue
            text.append(char)
            self.pos += 1
        else:
            if nested:
                raise self._error("Unclosed sub-message")

        if text:
            nodes.append("".join(text))
        return tuple(nodes)

    def _parse_quoted(self, in_plural: bool) -> str:
        template = self.template
        following = template[self.pos + 1 : self.pos + 2]
        if following == "'":
            self.pos += 2
            return "'"
        if not following or not (following in "{}|" or (in_plural and following == "#")):
            self.pos += 1
            return "'"

        # Quoted literal, up to the next lone apostrophe or the end
        self.pos += 1
        chars = []
        while self.pos < len(template):
            if template[self.pos] == "'":
                if template[self.pos + 1 : self.pos + 2] == "'":
                    chars.append("'")
                    self.pos += 2
                    continue
                self.pos += 1
                break
            chars.append(template[self.pos])
            self.pos += 1
        return "".join(chars)

    def _parse_argument(self, in_plural: bool) -> _Argument:
        self.pos += 1
        self._skip_whitespace()
        name = self._read_word()
        if not name:
            raise self._error("Missing argument name")
        self._skip_whitespace()
        if self._peek() == "}":
            self.pos += 1
            return _Argument(name)

        self._expect(",")
        self._skip_whitespace()
        arg_type = self._read_word().lower()
        self._skip_whitespace()

        if arg_type in _CHOICE_TYPES:
            self._expect(",")
            offset, options = self._parse_options(arg_type, in_plural)
            self._expect("}")
            return _Argument(name, arg_type, options=options, offset=offset)

        if arg_type not in _SIMPLE_TYPES:
            raise self._error(f"Unknown argument type '{arg_type}'")

        style = None
        if self._peek() == ",":
            self.pos += 1
            style = self._read_style().strip() or None
        self._expect("}")
        return _Argument(name, arg_type, style=style)

    def _parse_options(self, arg_type: str, in_plural: bool):
        plural = arg_type != "select"
        offset = 0
        options: Dict[str, _Nodes] = {}

        while True:
            self._skip_whitespace()
            if self._peek() in ("}", ""):
                break
            selector = self._read_word()
            if not selector:
                raise self._error("Missing selector")
            if arg_type == "plural" and not options and selector.startswith("offset:"):
                value = selector[len("offset:") :]
                if not value:
                    self._skip_whitespace()
                    value = self._read_word()
                try:
                    offset = int(value)
                except ValueError as e:
                    raise self._error(f"Invalid plural offset '{value}'") from e
                continue
            self._skip_whitespace()
            self._expect("{")
            options[selector] = self._parse_message(
                in_plural=plural or in_plural, nested=True
            )
            self._expect("}")

        if "other" not in options:
            raise self._error(f"Missing 'other' option in {arg_type}")
        return offset, options

    def _read_word(self) -> str:
        template = self.template
        start = self.pos
        while (
            self.pos < len(template)
            and not template[self.pos].isspace()
            and template[self.pos] not in "{},'"
        ):
            self.pos += 1
        return template[start : self.pos]

    def _read_style(self) -> str:
        template = self.template
        start = self.pos
        depth = 0
        while self.pos < len(template):
            char = template[self.pos]
            if char == "{":
                depth += 1
            elif char == "}":
                if depth == 0:
                    break
                depth -= 1
            self.pos += 1
        return template[start : self.pos]

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.template) and self.template[self.pos].isspace():
            self.pos += 1

    def _peek(self) -> str:
        return self.template[self.pos : self.pos + 1]

    def _expect(self, char: str) -> None:
        if self._peek() != char:
            found = self._peek() or "end of template"
            raise self._error(f"Expected '{char}', found {found!r}")
        self.pos += 1

    def _error(self, message: str) -> MessageFormatError:
        return MessageFormatError(f"{message} at position {self.pos} in {self.template!r}")


@lru_cache(maxsize=512)
def _parse_template(template: str) -> _Nodes:
    return _TemplateParser(template).parse()


class BabelMessageFormatter(MessageFormatter):
    """MessageFormatter using Babel for locale data.

    Supports simple, number, date, time, ordinal, plural, selectordinal and
    select arguments. Integer and float values given to date and time
    arguments are Unix timestamps, rendered in UTC.
    """

    def format(self, locale: str, template: str, args: Arguments = None) -> str:
        if "{" not in template and "'" not in template and "}" not in template:
            return template

        values = self._normalize_arguments(args)
        nodes = _parse_template(template)
        babel_locale = to_babel_locale(locale)
        try:
            return self._render(nodes, babel_locale, values, None)
        except (ValueError, TypeError, ArithmeticError, UnknownLocaleError) as e:
            raise MessageFormatError(f"Cannot format {template!r}: {e}") from e

    def _normalize_arguments(self, args: Arguments) -> Dict[str, Any]:
        if args is None:
            return {}
        if isinstance(args, Mapping):
            return {str(name): value for name, value in args.items()}
        if isinstance(args, (str, bytes)):
            raise MessageFormatError("Arguments must be a sequence or a mapping")
        return {str(index): value for index, value in enumerate(args)}

    def _render(self, nodes: _Nodes, locale: Locale, values: Dict[str, Any], number) -> str:
        parts = []
        for node in nodes:
            if isinstance(node, str):
                parts.append(node)
            elif node is _POUND:
                parts.append(format_decimal(number, locale=locale))
            else:
                parts.append(self._format_argument(node, locale, values, number))
        return "".join(parts)

    def _format_argument(self, node: _Argument, locale: Locale, values, number) -> str:
        if node.name not in values:
            raise MessageFormatError(f"Missing argument: {node.name}")
        value = values[node.name]

        if node.type is None:
            return self._format_value(value, locale)
        if node.type == "number":
            return self._format_number(value, node.style, locale)
        if node.type in ("date", "time"):
            return self._format_datetime(value, node.type, node.style, locale)
        if node.type == "ordinal":
            return self._format_ordinal(value, locale)
        if node.type == "select":
            branch = node.options.get(str(value), node.options["other"])
            return self._render(branch, locale, values, number)

        amount = self._to_number(value)
        if node.type == "selectordinal":
            category = locale.ordinal_form(amount)
            branch = node.options.get(category, node.options["other"])
            return self._render(branch, locale, values, amount)

        branch = self._exact_option(node, amount)
        if branch is None:
            category = locale.plural_form(amount - node.offset)
            branch = node.options.get(category, node.options["other"])
        return self._render(branch, locale, values, amount - node.offset)

    def _exact_option(self, node: _Argument, amount) -> Optional[_Nodes]:
        for selector, branch in node.options.items():
            if not selector.startswith("="):
                continue
            try:
                if Decimal(selector[1:]) == Decimal(str(amount)):
                    return branch
            except InvalidOperation as e:
                raise MessageFormatError(f"Invalid plural selector '{selector}'") from e
        return None

    def _format_value(self, value: Any, locale: Locale) -> str:
        if isinstance(value, bool):
            return str(value)
        if isinstance(value, (int, float, Decimal)):
            return format_decimal(value, locale=locale)
        if isinstance(value, dt.datetime):
            return format_datetime(value, "short", locale=locale)
        if isinstance(value, dt.date):
            return format_date(value, "short", locale=locale)
        return str(value)

    def _format_number(self, value: Any, style: Optional[str], locale: Locale) -> str:
        amount = self._to_number(value)
        if style is None:
            return format_decimal(amount, locale=locale)
        if style == "integer":
            return format_decimal(amount, format="#,##0", locale=locale)
        if style == "percent":
            return format_percent(amount, locale=locale)
        if style == "currency":
            currencies = get_territory_currencies(locale.territory) if locale.territory else []
            if not currencies:
                raise MessageFormatError(f"No currency known for locale {locale}")
            return format_currency(amount, currencies[0], locale=locale)
        return format_decimal(amount, format=style, locale=locale)

    def _format_datetime(
        self, value: Any, arg_type: str, style: Optional[str], locale: Locale
    ) -> str:
        moment = self._to_datetime(value)
        style = style or "medium"
        if arg_type == "date":
            if isinstance(moment, dt.time):
                raise MessageFormatError("A time cannot be formatted as a date")
            return format_date(moment, style, locale=locale)
        if isinstance(moment, dt.date) and not isinstance(moment, dt.datetime):
            raise MessageFormatError("A date cannot be formatted as a time")
        return format_time(moment, style, locale=locale)

    def _format_ordinal(self, value: Any, locale: Locale) -> str:
        amount = self._to_number(value)
        template = ORDINAL_TEMPLATES.get(locale.language)
        if template is None:
            return format_decimal(amount, locale=locale)
        return self._render(_parse_template(template), locale, {"0": amount}, None)

    def _to_number(self, value: Any):
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, (int, float, Decimal)):
            return value
        if isinstance(value, str):
            try:
                return Decimal(value.strip())
            except InvalidOperation as e:
                raise MessageFormatError(f"Not a number: {value!r}") from e
        raise MessageFormatError(f"Not a number: {value!r}")

    def _to_datetime(self, value: Any):
        if isinstance(value, bool):
            raise MessageFormatError(f"Not a date: {value!r}")
        if isinstance(value, (int, float, Decimal)):
            return dt.datetime.fromtimestamp(float(value), tz=dt.timezone.utc)
        if isinstance(value, (dt.datetime, dt.date, dt.time)):
            return value
        raise MessageFormatError(f"Not a date: {value!r}")
