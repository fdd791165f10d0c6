"""Message rendering: resolution, formatting and the unresolved sentinel."""

import time
from typing import Callable, Optional, Protocol

from lexis.i18n.exceptions import MessageFormatError
from lexis.i18n.formatter import Arguments, MessageFormatter
from lexis.i18n.models import RenderEvent, Resolution
from lexis.i18n.resolvers import FallbackResolver
from lexis.logging import get_module_logger

logger = get_module_logger()


class RenderObserver(Protocol):
    """Receives a record of every render call.

    Observers are for diagnostics only and cannot change the result.
    """

    def record(self, event: RenderEvent) -> None:
        ...


class MessageRenderer:
    """Renders message lines for a locale.

    Looks the line up in the requested locale, walks the fallback chain on a
    miss and formats the template with the locale it was found in. A line
    that cannot be resolved renders as "namespace.key".

    Attributes:
        resolver: FallbackResolver that looks lines up along the fallback chain.
        formatter: MessageFormatter for resolved templates.
        observer: Optional RenderObserver.
    """

    def __init__(
        self,
        resolver: FallbackResolver,
        formatter: MessageFormatter,
        get_current_locale: Callable[[], str],
        observer: Optional[RenderObserver] = None,
    ):
        self.resolver = resolver
        self.formatter = formatter
        self.observer = observer
        self._get_current_locale = get_current_locale

    def render(
        self,
        namespace: str,
        key: str,
        args: Arguments = None,
        locale: Optional[str] = None,
    ) -> str:
        """Render a line.

        Args:
            namespace: Catalog namespace (e.g., "tests").
            key: Message key (e.g., "hello").
            args: Positional or named arguments for the template.
            locale: Locale to render in, the current locale if None.

        Returns:
            Formatted text, the raw template if formatting fails, or
            "namespace.key" if the line is not found.
        """
        start = time.time()
        requested_locale = locale or self._get_current_locale()
        resolution = self.resolve(namespace, key, requested_locale)

        text = None
        if resolution.found:
            text = self._format(resolution, args, namespace, key)
        if not text:
            logger.debug(
                "line_not_found",
                namespace=namespace,
                key=key,
                locale=requested_locale,
            )
            text = f"{namespace}.{key}"

        if self.observer is not None:
            self.observer.record(
                RenderEvent(
                    namespace=namespace,
                    key=key,
                    requested_locale=requested_locale,
                    locale=resolution.locale,
                    message=text,
                    found=resolution.found,
                    start=start,
                    end=time.time(),
                )
            )
        return text

    def has_line(self, namespace: str, key: str, locale: Optional[str] = None) -> bool:
        """Tell if a line resolves, fallbacks included, without formatting it."""
        return self.resolve(namespace, key, locale or self._get_current_locale()).found

    def resolve(self, namespace: str, key: str, locale: str) -> Resolution:
        return self.resolver.resolve(locale, namespace, key)

    def _format(self, resolution: Resolution, args: Arguments, namespace: str, key: str) -> str:
        try:
            return self.formatter.format(resolution.locale, resolution.text, args)
        except MessageFormatError as e:
            # Use the non-formatted text
            logger.warning(
                "message_format_failed",
                namespace=namespace,
                key=key,
                locale=resolution.locale,
                error=str(e),
            )
            return resolution.text
