"""Diagnostics for a Language context.

LanguageCollector records every render call and builds a plain-text report
of the configuration and of the lines reachable from the current locale.

Usage:
    collector = LanguageCollector()
    collector.set_language(language)
    language.render("home", "hello")
    print(collector.get_contents())
"""

from typing import Any, Dict, List, Optional

from lexis.i18n.language import Language
from lexis.i18n.models import RenderEvent, parent_locale

# Key that no catalog defines, rendered to force a scan of the fallback chain
_SCAN_KEY = ".·*·."


class LanguageCollector:
    """Render observer and report builder for one Language."""

    def __init__(self):
        self.language: Optional[Language] = None
        self.events: List[RenderEvent] = []

    def set_language(self, language: Language) -> "LanguageCollector":
        """Attach to a Language and start recording its renders."""
        self.language = language
        language.set_observer(self)
        return self

    def record(self, event: RenderEvent) -> None:
        self.events.append(event)

    def get_activities(self) -> List[Dict[str, Any]]:
        """Get render events as timed activities."""
        return [
            {
                "collector": type(self).__name__,
                "class": type(self.language).__name__,
                "description": f"Render message {event.namespace}.{event.key}",
                "start": event.start,
                "end": event.end,
            }
            for event in self.events
        ]

    def get_contents(self) -> str:
        if self.language is None:
            return "A Language instance has not been set.\n"

        language = self.language
        level = language.fallback_level
        sections = [
            f"Default Locale: {language.default_locale}",
            f"Current Locale: {language.current_locale}",
            f"Supported Locales: {', '.join(language.supported_locales)}",
            f"Fallback Level: {int(level)} ({level.label})",
            "",
            "Directories",
            self._render_directories(),
            "",
            "Lines",
            self._render_lines(),
            "",
            "Rendered Messages",
            self._render_events(),
        ]
        return "\n".join(sections) + "\n"

    def get_lines(self) -> List[Dict[str, str]]:
        """List the lines reachable from the current locale.

        Each line is taken from the first locale of the fallback chain that
        has it, and classified with get_fallback_name().
        """
        if self.language is None:
            return []
        language = self.language
        language.reset_lines()

        namespaces = set()
        for directory in language.directories:
            namespaces.update(language.loader.list_namespaces(directory))
        for files in language.get_lines().values():
            namespaces.update(files)
        for namespace in sorted(namespaces):
            language.has_line(namespace, _SCAN_KEY)

        all_lines = language.get_lines()
        result: Dict[tuple, Dict[str, str]] = {}
        for locale in language.fallback_chain():
            for namespace, messages in all_lines.get(locale, {}).items():
                for key, message in messages.items():
                    result.setdefault(
                        (namespace, key),
                        {
                            "namespace": namespace,
                            "key": key,
                            "message": message,
                            "locale": locale,
                            "fallback": self.get_fallback_name(locale),
                        },
                    )
        return [result[line] for line in sorted(result)]

    def get_fallback_name(self, locale: str) -> str:
        """Classify a locale relative to the current locale.

        Returns:
            "none", "parent", "default", or "" for any other locale.
        """
        if self.language is None:
            return ""
        current_locale = self.language.current_locale
        if locale == current_locale:
            return "none"
        if locale == parent_locale(current_locale):
            return "parent"
        if locale == self.language.default_locale:
            return "default"
        return ""

    def _render_directories(self) -> str:
        directories = self.language.directories
        if not directories:
            return "No directory set for this Language instance."
        return "\n".join(f"  {directory}" for directory in directories)

    def _render_lines(self) -> str:
        lines = self.get_lines()
        if not lines:
            return "No message lines available for this Language instance."
        rows = [
            f"There are {len(lines)} message lines available to the current "
            f"locale ({self.language.current_locale}).",
        ]
        for line in lines:
            rows.append(
                f"  {line['namespace']}.{line['key']}"
                f" [{line['locale']}] [{line['fallback']}] {line['message']}"
            )
        return "\n".join(rows)

    def _render_events(self) -> str:
        if not self.events:
            return "No message has been rendered."
        rows = [f"Rendered {len(self.events)} message(s)."]
        for event in self.events:
            rows.append(
                f"  {event.namespace}.{event.key} [{event.locale}]"
                f" {event.message} ({event.duration * 1000:.3f} ms)"
            )
        return "\n".join(rows)
